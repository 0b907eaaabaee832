from __future__ import annotations

import argparse
import time

from .arena import Arena
from .cursors import traverse
from .semigroup import count_associative, is_associative
from .sets import AtomSet, HomSet, ProductSet


def count_semigroups(n: int, *, use_cursor: bool = False, chunk_size: int = 1 << 15) -> int:
    """Number of associative binary operations on an n-element set.

    With `use_cursor` the tables come one by one from the hom-set cursor and go through the
    scalar checker; otherwise blocks of tables are decoded and checked with NumPy.
    """
    if not use_cursor:
        return count_associative(n, chunk_size=chunk_size)
    a = AtomSet(n)
    multiplications = HomSet(ProductSet([a, a]), a)
    arena = Arena()
    count = 0
    for f in traverse(multiplications.create_cursor(arena)):
        if is_associative(f.table(), n):
            count += 1
    return count


def main() -> None:
    ap = argparse.ArgumentParser(description="Count associative binary operations (semigroups) on n elements.")
    ap.add_argument("--n", type=int, default=3)
    ap.add_argument("--cursor", action="store_true", help="Walk tables with the hom-set cursor (slower)")
    ap.add_argument("--chunk_size", type=int, default=1 << 15)
    args = ap.parse_args()

    n = int(args.n)
    print(f"Counting associative tables among {n ** (n * n)} binary operations on {n} elements...")
    t0 = time.perf_counter()
    count = count_semigroups(n, use_cursor=bool(args.cursor), chunk_size=int(args.chunk_size))
    dt = time.perf_counter() - t0
    print(f"Count = {count}")
    print(f"[pshcalc] time elapsed: {dt:.2f}s")


if __name__ == "__main__":
    main()
