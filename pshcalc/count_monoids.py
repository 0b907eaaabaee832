from __future__ import annotations

import argparse
import time

from .arena import Arena
from .category import CategorySet
from .cursors import traverse


def count_monoids(n: int, *, progress_every: int = 0) -> int:
    """Number of monoid tables on {0, ..., n-1} with identity 0 (not up to isomorphism)."""
    arena = Arena()
    cursor = CategorySet.monoids(n).create_cursor(arena)
    count = 0
    for _ in traverse(cursor):
        count += 1
        if progress_every and count % progress_every == 0:
            print(f"  Found {count} so far...")
    return count


def main() -> None:
    ap = argparse.ArgumentParser(description="Count monoids of a given size (one-object categories).")
    ap.add_argument("--n", type=int, default=3, help="Number of elements")
    ap.add_argument("--progress_every", type=int, default=100)
    args = ap.parse_args()

    print(f"Counting monoids with {args.n} elements...")
    t0 = time.perf_counter()
    count = count_monoids(int(args.n), progress_every=int(args.progress_every))
    dt = time.perf_counter() - t0
    print(f"Found {count} monoids on {args.n} elements")
    print(f"[pshcalc] time elapsed: {dt:.2f}s")


if __name__ == "__main__":
    main()
