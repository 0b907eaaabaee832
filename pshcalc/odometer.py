from __future__ import annotations

"""
Mixed-radix counter shared by every generator.

One digit of bound n walks a flat set of size n; k digits walk a Cartesian product; reading the
digit vector as a function table (one digit per domain element, each bounded by the codomain size)
walks a whole function space. Over a full traversal of N points the total number of digit
increments is O(N).
"""

from typing import MutableSequence, Sequence


def advance(digits: MutableSequence[int], bounds: Sequence[int]) -> bool:
    """Step to the next point. Returns True when the carry runs off the most significant digit.

    After a True return every digit is back to zero.
    """
    for i in range(len(digits)):
        digits[i] += 1
        if digits[i] < bounds[i]:
            return False
        digits[i] = 0
    return True


def space_size(bounds: Sequence[int]) -> int:
    """Number of points visited from all-zero before `advance` reports exhaustion."""
    size = 1
    for b in bounds:
        size *= int(b)
    return size


def is_empty(bounds: Sequence[int]) -> bool:
    return any(int(b) <= 0 for b in bounds)
