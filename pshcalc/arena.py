from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

import numpy as np


@dataclass(frozen=True)
class Slot:
    """Handle to a contiguous range of arena coordinates: [offset, offset + length)."""
    offset: int
    length: int

    @property
    def stop(self) -> int:
        return self.offset + self.length


class Arena:
    """Append-only store for the digits ("values") and radices ("bounds") of live coordinates.

    The two arrays always have the same length. Coordinates never own memory; they hold a `Slot`
    and borrow the arena on every read or write. Views returned by `values()`/`bounds()` are only
    valid until the next `allocate()` (which may move the backing storage).
    """

    def __init__(self, capacity: int = 64):
        capacity = max(1, int(capacity))
        self._values = np.zeros((capacity,), dtype=np.int64)
        self._bounds = np.zeros((capacity,), dtype=np.int64)
        self._size = 0

    def __len__(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return int(self._values.shape[0])

    def _reserve(self, needed: int) -> None:
        cap = self.capacity
        if needed <= cap:
            return
        while cap < needed:
            cap *= 2
        values = np.zeros((cap,), dtype=np.int64)
        bounds = np.zeros((cap,), dtype=np.int64)
        values[: self._size] = self._values[: self._size]
        bounds[: self._size] = self._bounds[: self._size]
        self._values = values
        self._bounds = bounds

    def allocate(self, count: int) -> Slot:
        count = int(count)
        if count < 0:
            raise ValueError(f"cannot allocate a negative number of slots: {count}")
        start = self._size
        self._reserve(start + count)
        self._values[start : start + count] = 0
        self._bounds[start : start + count] = 0
        self._size = start + count
        return Slot(offset=start, length=count)

    def _check(self, slot: Slot) -> None:
        if slot.offset < 0 or slot.length < 0 or slot.stop > self._size:
            raise IndexError(f"slot {slot} out of range for arena of length {self._size}")

    def values(self, slot: Slot) -> np.ndarray:
        self._check(slot)
        return self._values[slot.offset : slot.stop]

    def bounds(self, slot: Slot) -> np.ndarray:
        self._check(slot)
        return self._bounds[slot.offset : slot.stop]


def linear_index(digits: Sequence[int], bounds: Sequence[int]) -> int:
    """Flatten a digit vector, first digit least significant: sum d_i * prod_{j<i} b_j."""
    if len(digits) != len(bounds):
        raise ValueError(f"digit/bound length mismatch: {len(digits)} != {len(bounds)}")
    index = 0
    multiplier = 1
    for d, b in zip(digits, bounds):
        index += int(d) * multiplier
        multiplier *= int(b)
    return index


def linear_size(bounds: Sequence[int]) -> int:
    size = 1
    for b in bounds:
        size *= int(b)
    return size


def digits_of(index: int, bounds: Sequence[int]) -> List[int]:
    """Inverse of `linear_index` on [0, linear_size(bounds))."""
    index = int(index)
    if index < 0 or index >= linear_size(bounds):
        raise ValueError(f"index {index} out of range for bounds {list(bounds)}")
    digits: List[int] = []
    for b in bounds:
        b = int(b)
        digits.append(index % b)
        index //= b
    return digits
