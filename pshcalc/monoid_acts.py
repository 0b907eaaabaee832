from __future__ import annotations

import argparse
import time
from typing import List

from .arena import Arena
from .category import CategorySet
from .cursors import traverse
from .presheaf import PresheafSet


def monoid_act_counts(n: int, sections: int, *, verbose: bool = False) -> List[int]:
    """For each monoid on n elements (identity 0), the number of its right acts on `sections` points.

    Right acts satisfy (s·g)·f == s·(g∘f); they are the left acts of the opposite monoid, so
    per-monoid counts may differ from a left-act count while the totals agree.
    """
    arena = Arena()
    pi = [0] * int(sections)
    counts: List[int] = []
    for monoid in traverse(CategorySet.monoids(n).create_cursor(arena)):
        presheaves = PresheafSet(monoid, pi)
        acts = 0
        for _ in traverse(presheaves.create_cursor(Arena())):
            acts += 1
        if verbose:
            print(f"Monoid {len(counts)} has {acts} acts of size {sections}")
        counts.append(acts)
    return counts


def average_acts(n: int, sections: int, *, verbose: bool = False) -> float:
    counts = monoid_act_counts(n, sections, verbose=verbose)
    return sum(counts) / len(counts)


def main() -> None:
    ap = argparse.ArgumentParser(description="Average number of monoid acts over all monoids of a given size.")
    ap.add_argument("--n", type=int, default=3, help="Monoid size")
    ap.add_argument("--max_sections", type=int, default=4, help="Act sizes 1..max_sections")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()

    n = int(args.n)
    for sections in range(1, int(args.max_sections) + 1):
        print(f"Counting average number of monoid acts of size {sections} over monoids with {n} elements...")
        t0 = time.perf_counter()
        counts = monoid_act_counts(n, sections, verbose=bool(args.verbose))
        dt = time.perf_counter() - t0
        print(
            f"Average number of monoid acts of size {sections} over monoids with {n} elements: "
            f"{sum(counts) / len(counts):.2f}"
        )
        print(f"Total monoids: {len(counts)}")
        print(f"[pshcalc] time elapsed: {dt:.2f}s")


if __name__ == "__main__":
    main()
