from __future__ import annotations

import argparse
import time
from dataclasses import dataclass

from .arena import Arena
from .quiver import composable_triples_via_walks, count_composable_triples, expected_composable_triples
from .sets import AtomSet, HomSet


@dataclass(frozen=True)
class TripleStats:
    pairs: int
    triples: int

    @property
    def average(self) -> float:
        return self.triples / self.pairs if self.pairs else 0.0


def composable_triple_stats(
    m_size: int,
    o_size: int,
    *,
    cross_check: bool = False,
    progress_every: int = 0,
) -> TripleStats:
    """Total composable triples over every pair of maps s, t: M -> O."""
    m = AtomSet(m_size)
    o = AtomSet(o_size)
    morphisms = HomSet(m, o)

    # two cursors on one arena, each over its own slot range
    arena = Arena()
    s_var = morphisms.create_cursor(arena)
    t_var = morphisms.create_cursor(arena)

    triples = 0
    pairs = 0
    next_report = progress_every
    s_var.initialize()
    while True:
        s = s_var.get()
        if s is None:
            break
        t_var.initialize()
        while True:
            t = t_var.get()
            if t is None:
                break
            count = count_composable_triples(s, t, m)
            if cross_check:
                walks = composable_triples_via_walks(s.table(), t.table(), o_size)
                if walks != count:
                    raise RuntimeError(f"walk count {walks} != direct count {count} for s={s}, t={t}")
            triples += count
            pairs += 1
            t_var.advance()
        s_var.advance()
        if progress_every and pairs >= next_report:
            next_report += progress_every
            print(f"Progress: {100.0 * pairs / morphisms.size() ** 2:.1f}%")
    return TripleStats(pairs=pairs, triples=triples)


def main() -> None:
    ap = argparse.ArgumentParser(description="Average number of composable triples over all s, t: M -> O.")
    ap.add_argument("--m", type=int, default=4, help="|M|")
    ap.add_argument("--o", type=int, default=2, help="|O|")
    ap.add_argument("--cross_check", action="store_true", help="Recount each pair as walks in the quiver")
    args = ap.parse_args()

    m_size, o_size = int(args.m), int(args.o)
    n_maps = o_size ** m_size
    print("Computing average number of composable triples...")
    print(f"M has {m_size} elements, O has {o_size} elements")
    print(f"Total number of morphism pairs (s,t): {n_maps ** 2}")

    t0 = time.perf_counter()
    stats = composable_triple_stats(
        m_size,
        o_size,
        cross_check=bool(args.cross_check),
        progress_every=max(1, n_maps ** 2 // 10),
    )
    dt = time.perf_counter() - t0

    expected = expected_composable_triples(m_size, o_size)
    print("\nResults:")
    print(f"Total morphism pairs analyzed: {stats.pairs}")
    print(f"Total composable triples found: {stats.triples}")
    print(f"Average number of composable triples: {stats.average:.6f}")
    print(f"Theoretical expectation: {expected:.6f}")
    print(f"Difference: {abs(stats.average - expected):.6f}")
    print(f"[pshcalc] time elapsed: {dt:.2f}s")


if __name__ == "__main__":
    main()
