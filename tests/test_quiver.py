from __future__ import annotations

from pshcalc.arena import Arena
from pshcalc.category import Category
from pshcalc.composable_triples import composable_triple_stats
from pshcalc.cursors import traverse
from pshcalc.quiver import (
    category_quiver,
    composable_triples_via_walks,
    count_composable_triples,
    count_walks,
    expected_composable_triples,
    quiver,
)
from pshcalc.sets import AtomSet, HomSet


def test_quiver_has_one_edge_per_arrow() -> None:
    G = quiver(2, [0, 0, 1], [1, 1, 0])
    assert G.number_of_nodes() == 2
    assert G.number_of_edges() == 3
    assert G.number_of_edges(0, 1) == 2


def test_count_walks_counts_parallel_edges() -> None:
    G = quiver(2, [0, 0, 1], [1, 1, 0])
    # 0 => 1 twice, 1 -> 0 once
    assert count_walks(G, 1) == 3
    assert count_walks(G, 2) == 4
    assert count_walks(G, 0) == 2


def test_single_loop() -> None:
    assert count_walks(quiver(1, [0], [0]), 3) == 1


def test_category_quiver_skips_identities_by_default() -> None:
    arrow = Category(2, [0], [1], [None])
    assert category_quiver(arrow).number_of_edges() == 1
    assert category_quiver(arrow, include_identities=True).number_of_edges() == 3


def test_direct_count_matches_walks_for_every_pair() -> None:
    m = AtomSet(3)
    o = AtomSet(2)
    hom = HomSet(m, o)
    arena = Arena()
    s_var = hom.create_cursor(arena)
    t_var = hom.create_cursor(arena)

    pairs = 0
    for s in traverse(s_var):
        for t in traverse(t_var):
            assert count_composable_triples(s, t, m) == composable_triples_via_walks(s.table(), t.table(), 2)
            pairs += 1
    assert pairs == 64


def test_single_object_makes_every_triple_composable() -> None:
    stats = composable_triple_stats(2, 1)
    assert stats.pairs == 1
    assert stats.triples == 8
    assert stats.average == 8.0


def test_stats_with_cross_check() -> None:
    stats = composable_triple_stats(3, 2, cross_check=True)
    assert stats.pairs == 64


def test_expected_composable_triples() -> None:
    assert expected_composable_triples(4, 2) == 16.0
