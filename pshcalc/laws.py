from __future__ import annotations

"""
Equational law checkers for finite categories and presheaves.

All checkers are pure functions over fully expanded tables:

- `table[g][f]` is the composite g∘f (defined iff target(f) == source(g)), or UNDEFINED;
- `action[s][f]` is the section s·f (defined iff pi(s) == target(f)), or UNDEFINED.

Each returns None when the law holds, otherwise the first violation found. Violations are values,
never raised: a rejected candidate is an ordinary outcome of enumeration.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

UNDEFINED = None

CompositionTable = Sequence[Sequence[Optional[int]]]
ActionTable = Sequence[Sequence[Optional[int]]]


@dataclass(frozen=True)
class LawViolation:
    def __str__(self) -> str:
        return self.describe()

    def describe(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class IncompatibleComposition(LawViolation):
    g: int
    f: int

    def describe(self) -> str:
        return f"Incompatible composition: g={self.g} and f={self.f}"


@dataclass(frozen=True)
class NonAssociative(LawViolation):
    morphisms: Tuple[int, int, int]  # (h, g, f)

    def describe(self) -> str:
        return f"Non-associative composition: {self.morphisms}"


@dataclass(frozen=True)
class NotAnIdentity(LawViolation):
    morphism: int

    def describe(self) -> str:
        return f"Morphism {self.morphism} is not an identity"


@dataclass(frozen=True)
class NotWellDefined(LawViolation):
    s: int
    f: int

    def describe(self) -> str:
        return f"Not well-defined: s={self.s} and f={self.f}"


@dataclass(frozen=True)
class NonFunctorial(LawViolation):
    triple: Tuple[int, int, int]  # (s, f, g)

    def describe(self) -> str:
        return f"Action does not respect composition: {self.triple}"


def check_well_definedness(
    number_of_objects: int,
    source: Sequence[int],
    target: Sequence[int],
    table: CompositionTable,
) -> Optional[LawViolation]:
    """g∘f must be UNDEFINED off composable pairs, and run source(f) -> target(g) on them.

    Identity cases are produced by rule and are not rechecked. O(m^2).
    """
    m = len(source)
    for f in range(number_of_objects, m):
        for g in range(number_of_objects, m):
            gf = table[g][f]
            if target[f] != source[g]:
                if gf is not UNDEFINED:
                    return IncompatibleComposition(g=g, f=f)
            elif gf is UNDEFINED or source[gf] != source[f] or target[gf] != target[g]:
                return IncompatibleComposition(g=g, f=f)
    return None


def check_identity_laws(
    number_of_objects: int,
    source: Sequence[int],
    target: Sequence[int],
    table: CompositionTable,
) -> Optional[LawViolation]:
    """f∘id_x = f when source(f) = x, and id_x∘f = f when target(f) = x. O(n*m)."""
    for f in range(len(source)):
        x = source[f]
        if table[f][x] != f:
            return NotAnIdentity(morphism=x)
        y = target[f]
        if table[y][f] != f:
            return NotAnIdentity(morphism=y)
    return None


def check_associativity(table: CompositionTable) -> Optional[LawViolation]:
    """(h∘g)∘f == h∘(g∘f) for every triple, UNDEFINED propagating through both sides. O(m^3)."""
    m = len(table)
    for f in range(m):
        for g in range(m):
            gf = table[g][f]
            for h in range(m):
                hg = table[h][g]
                left = UNDEFINED if hg is UNDEFINED else table[hg][f]
                right = UNDEFINED if gf is UNDEFINED else table[h][gf]
                if left != right:
                    return NonAssociative(morphisms=(h, g, f))
    return None


def validate_category(
    number_of_objects: int,
    source: Sequence[int],
    target: Sequence[int],
    table: CompositionTable,
) -> Optional[LawViolation]:
    """Run the category checks cheapest first and stop at the first violation."""
    return (
        check_well_definedness(number_of_objects, source, target, table)
        or check_identity_laws(number_of_objects, source, target, table)
        or check_associativity(table)
    )


def check_action_well_definedness(
    number_of_objects: int,
    pi: Sequence[int],
    source: Sequence[int],
    target: Sequence[int],
    action: ActionTable,
) -> Optional[LawViolation]:
    """s·f is defined exactly when pi(s) == target(f) and then lies over source(f). O(S*m)."""
    m = len(source)
    for s in range(len(pi)):
        for f in range(number_of_objects, m):
            sf = action[s][f]
            if pi[s] != target[f]:
                if sf is not UNDEFINED:
                    return NotWellDefined(s=s, f=f)
            elif sf is UNDEFINED or pi[sf] != source[f]:
                return NotWellDefined(s=s, f=f)
    return None


def check_functoriality(
    pi: Sequence[int],
    source: Sequence[int],
    target: Sequence[int],
    table: CompositionTable,
    action: ActionTable,
) -> Optional[LawViolation]:
    """(s·g)·f == s·(g∘f) for every section s over target(g) and composable f, g. O(S*m^2).

    Assumes the action is well-defined, so both sides are defined whenever checked.
    """
    m = len(source)
    for s in range(len(pi)):
        for f in range(m):
            for g in range(m):
                if target[f] != source[g] or pi[s] != target[g]:
                    continue
                sg = action[s][g]
                left = action[sg][f]
                right = action[s][table[g][f]]
                if left != right:
                    return NonFunctorial(triple=(s, f, g))
    return None


def validate_presheaf(
    number_of_objects: int,
    pi: Sequence[int],
    source: Sequence[int],
    target: Sequence[int],
    table: CompositionTable,
    action: ActionTable,
) -> Optional[LawViolation]:
    return (
        check_action_well_definedness(number_of_objects, pi, source, target, action)
        or check_functoriality(pi, source, target, table, action)
    )

