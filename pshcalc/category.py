from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .arena import Arena
from .cursors import ValidatedCursor
from .laws import UNDEFINED, LawViolation, validate_category
from .sets import AtomSet


def _check_endpoints(number_of_objects: int, source: Sequence[int], target: Sequence[int]) -> None:
    if number_of_objects < 0:
        raise ValueError(f"number_of_objects must be non-negative, got {number_of_objects}")
    if len(source) != len(target):
        raise ValueError(f"source/target length mismatch: {len(source)} != {len(target)}")
    for name, values in (("source", source), ("target", target)):
        for v in values:
            if not 0 <= int(v) < number_of_objects:
                raise ValueError(f"{name} entry {v} is not an object index in [0, {number_of_objects})")


def composable_mask(number_of_objects: int, source: Sequence[int], target: Sequence[int]) -> Tuple[bool, ...]:
    """Flag per stored composition entry: True iff target(f) == source(g).

    Stored entries are the non-identity pairs (f, g), at linear index (f - n) + (g - n) * k.
    """
    k = len(source)
    return tuple(int(target[i]) == int(source[j]) for j in range(k) for i in range(k))


class Category:
    """Finite category skeleton.

    Morphisms 0..n-1 are the identities of objects 0..n-1. `source`, `target` and `composition`
    hold data for the non-identity morphisms only; composites involving an identity are computed.
    `composition` lists g∘f for non-identity f, g at index (f - n) + (g - n) * k, with None for
    pairs that are not composable.
    """

    def __init__(
        self,
        number_of_objects: int,
        source: Sequence[int],
        target: Sequence[int],
        composition: Sequence[Optional[int]],
    ):
        n = int(number_of_objects)
        _check_endpoints(n, source, target)
        k = len(source)
        if len(composition) != k * k:
            raise ValueError(f"composition table must have {k * k} entries, got {len(composition)}")
        m = n + k
        for v in composition:
            if v is not None and not 0 <= int(v) < m:
                raise ValueError(f"composition entry {v} is not a morphism index in [0, {m})")

        self._n = n
        self._k = k
        self._source: List[int] = list(range(n)) + [int(x) for x in source]
        self._target: List[int] = list(range(n)) + [int(x) for x in target]
        self._composition = composition
        self._mask: Optional[Sequence[bool]] = None

    @classmethod
    def _over_digits(
        cls,
        number_of_objects: int,
        source: Sequence[int],
        target: Sequence[int],
        digits: Sequence[int],
        mask: Sequence[bool],
    ) -> "Category":
        # Odometer-backed view: digits of non-composable pairs read back as UNDEFINED.
        category = cls.__new__(cls)
        category._n = number_of_objects
        category._k = len(source)
        category._source = list(range(number_of_objects)) + list(source)
        category._target = list(range(number_of_objects)) + list(target)
        category._composition = digits
        category._mask = mask
        return category

    @classmethod
    def monoid(cls, table: Sequence[int], size: int) -> "Category":
        """One-object category from a monoid table whose identity is element 0.

        `table` gives g∘f for non-identity f, g (the `(size-1)**2` stored entries).
        """
        return cls(1, [0] * (size - 1), [0] * (size - 1), list(table))

    @property
    def number_of_objects(self) -> int:
        return self._n

    @property
    def number_of_morphisms(self) -> int:
        return self._n + self._k

    def objects(self) -> AtomSet:
        return AtomSet(self._n)

    def morphisms(self) -> AtomSet:
        return AtomSet(self._n + self._k)

    def identity(self, x: int) -> int:
        return x

    def is_identity(self, f: int) -> bool:
        return f < self._n

    def source(self, f: int) -> int:
        return self._source[f]

    def target(self, f: int) -> int:
        return self._target[f]

    def sources(self) -> List[int]:
        return list(self._source)

    def targets(self) -> List[int]:
        return list(self._target)

    def _stored(self, g: int, f: int) -> Optional[int]:
        index = (f - self._n) + (g - self._n) * self._k
        if self._mask is not None and not self._mask[index]:
            return UNDEFINED
        value = self._composition[index]
        return UNDEFINED if value is None else int(value)

    def composition(self, g: int, f: int) -> Optional[int]:
        """g∘f, or UNDEFINED (None)."""
        n = self._n
        if g < n or f < n:
            if self._target[f] != self._source[g]:
                return UNDEFINED
            return f if g < n else g
        return self._stored(g, f)

    def composition_table(self) -> List[List[Optional[int]]]:
        """Expanded table indexed [g][f] over all morphisms, identities included."""
        m = self.number_of_morphisms
        return [[self.composition(g, f) for f in range(m)] for g in range(m)]

    def validate(self) -> Optional[LawViolation]:
        """None if this is a category, else the first violated law."""
        return validate_category(self._n, self._source, self._target, self.composition_table())

    def is_valid(self) -> bool:
        return self.validate() is None

    def stored_composition(self) -> Tuple[Optional[int], ...]:
        return tuple(
            self._stored(g, f)
            for g in range(self._n, self.number_of_morphisms)
            for f in range(self._n, self.number_of_morphisms)
        )

    def detach(self) -> "Category":
        """Copy that no longer borrows the arena."""
        return Category(
            self._n,
            self._source[self._n :],
            self._target[self._n :],
            self.stored_composition(),
        )

    def __repr__(self) -> str:
        return (
            f"Category(objects={self._n}, morphisms={self.number_of_morphisms}, "
            f"composition={self.stored_composition()})"
        )


class CategorySet:
    """All categories on fixed objects and morphisms (with fixed source/target), enumerated by
    composition table."""

    def __init__(self, number_of_objects: int, source: Sequence[int], target: Sequence[int]):
        n = int(number_of_objects)
        _check_endpoints(n, source, target)
        self.number_of_objects = n
        self.source = [int(x) for x in source]
        self.target = [int(x) for x in target]
        self.number_of_morphisms = n + len(self.source)
        self.mask = composable_mask(n, self.source, self.target)

    @classmethod
    def monoids(cls, size: int) -> "CategorySet":
        """One-object categories with `size` morphisms, i.e. monoids with identity 0."""
        if int(size) < 1:
            raise ValueError(f"a monoid needs at least one element, got size={size}")
        return cls(1, [0] * (int(size) - 1), [0] * (int(size) - 1))

    def bounds(self) -> List[int]:
        m = self.number_of_morphisms
        return [m if ok else 1 for ok in self.mask]

    def raw_size(self) -> int:
        """Number of candidate tables walked (valid or not)."""
        size = 1
        for b in self.bounds():
            size *= b
        return size

    def create_cursor(self, arena: Arena) -> "CategoryCursor":
        return CategoryCursor(arena, self)


class CategoryCursor(ValidatedCursor[Category]):
    def __init__(self, arena: Arena, category_set: CategorySet):
        super().__init__(arena, arena.allocate(len(category_set.mask)))
        self.category_set = category_set
        self.bounds()[:] = category_set.bounds()

    def _view(self) -> Category:
        cs = self.category_set
        return Category._over_digits(cs.number_of_objects, cs.source, cs.target, self.digits(), cs.mask)

    def _accept(self) -> bool:
        return self._view().validate() is None
