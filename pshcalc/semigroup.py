from __future__ import annotations

"""
Associativity of plain binary operations f: A x A -> A, without the arena.

A table lists f(i, j) at linear index i + n*j (first argument least significant), the same
convention the hom-set cursor uses for `HomSet(ProductSet([A, A]), A)`.
"""

from typing import Optional, Sequence, Tuple

import numpy as np


def first_nonassociative_triple(table: Sequence[int], n: int) -> Optional[Tuple[int, int, int]]:
    """First (i, j, k) with f(f(i, j), k) != f(i, f(j, k)), or None."""
    for i in range(n):
        for j in range(n):
            ij = table[i + n * j]
            for k in range(n):
                if table[ij + n * k] != table[i + n * table[j + n * k]]:
                    return (i, j, k)
    return None


def is_associative(table: Sequence[int], n: int) -> bool:
    return first_nonassociative_triple(table, n) is None


def tables_from_indices(indices: np.ndarray, n: int) -> np.ndarray:
    """Decode hom-set positions into tables, shape (B, n*n)."""
    radix = np.int64(n) ** np.arange(n * n, dtype=np.int64)
    return (np.asarray(indices, dtype=np.int64)[:, None] // radix[None, :]) % n


def associative_mask(tables: np.ndarray, n: int) -> np.ndarray:
    """Vectorized associativity test over a block of tables, shape (B, n*n) -> (B,) bool."""
    tables = np.asarray(tables, dtype=np.int64)
    B = tables.shape[0]
    # flat index i + n*j reshapes to [j, i]; swap to op[b, i, j]
    op = tables.reshape(B, n, n).transpose(0, 2, 1)
    b = np.arange(B)[:, None, None, None]
    i = np.arange(n)[None, :, None, None]
    k = np.arange(n)[None, None, None, :]
    left = op[b, op[:, :, :, None], k]      # f(f(i, j), k)
    right = op[b, i, op[:, None, :, :]]     # f(i, f(j, k))
    return (left == right).reshape(B, -1).all(axis=1)


def count_associative(n: int, *, chunk_size: int = 1 << 15) -> int:
    """Count associative tables among all n**(n*n), decoding blocks of `chunk_size` at a time."""
    n = int(n)
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    total = n ** (n * n)
    count = 0
    for start in range(0, total, int(chunk_size)):
        stop = min(total, start + int(chunk_size))
        block = tables_from_indices(np.arange(start, stop, dtype=np.int64), n)
        count += int(associative_mask(block, n).sum())
    return count
