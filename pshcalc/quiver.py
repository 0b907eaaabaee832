from __future__ import annotations

from typing import Iterable, Sequence

import networkx as nx
import numpy as np

from .category import Category
from .sets import AtomSet
from .views import Function


def quiver(number_of_objects: int, source: Iterable[int], target: Iterable[int]) -> nx.MultiDiGraph:
    """Directed multigraph with one edge source(x) -> target(x) per arrow x (edge key = x)."""
    G = nx.MultiDiGraph()
    G.add_nodes_from(range(int(number_of_objects)))
    for x, (u, v) in enumerate(zip(source, target)):
        G.add_edge(int(u), int(v), key=x)
    return G


def category_quiver(category: Category, *, include_identities: bool = False) -> nx.MultiDiGraph:
    start = 0 if include_identities else category.number_of_objects
    m = category.number_of_morphisms
    G = nx.MultiDiGraph()
    G.add_nodes_from(range(category.number_of_objects))
    for f in range(start, m):
        G.add_edge(category.source(f), category.target(f), key=f)
    return G


def count_walks(G: nx.MultiDiGraph, length: int) -> int:
    """Number of directed walks with `length` edges (parallel edges counted separately)."""
    nodes = sorted(G.nodes())
    if not nodes:
        return 0
    A = nx.to_numpy_array(G, nodelist=nodes, dtype=np.int64)
    return int(np.linalg.matrix_power(A, int(length)).sum())


def count_composable_triples(s: Function, t: Function, m: AtomSet) -> int:
    """Triples (a, b, c) in M^3 with s(a) = t(b) and s(b) = t(c)."""
    count = 0
    for a in m:
        s_a = s.apply(a)
        for b in m:
            if s_a != t.apply(b):
                continue
            s_b = s.apply(b)
            for c in m:
                if s_b == t.apply(c):
                    count += 1
    return count


def composable_triples_via_walks(s: Sequence[int], t: Sequence[int], number_of_objects: int) -> int:
    """Same count as `count_composable_triples`: walks c, b, a of length 3 in the quiver s -> t."""
    return count_walks(quiver(number_of_objects, s, t), 3)


def expected_composable_triples(m_size: int, o_size: int) -> float:
    """Approximate mean over uniform random s, t: M -> O, taking the two equalities as independent."""
    return float(m_size) ** 3 / float(o_size) ** 2
