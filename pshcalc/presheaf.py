from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .arena import Arena
from .category import Category
from .cursors import ValidatedCursor
from .laws import UNDEFINED, LawViolation, validate_presheaf
from .sets import AtomSet


def _check_category(category: Category) -> None:
    violation = category.validate()
    if violation is not None:
        raise ValueError(f"presheaf base is not a category: {violation}")


def _check_pi(category: Category, pi: Sequence[int]) -> None:
    n = category.number_of_objects
    for p in pi:
        if not 0 <= int(p) < n:
            raise ValueError(f"pi entry {p} is not an object index in [0, {n})")


def defined_mask(category: Category, pi: Sequence[int]) -> Tuple[bool, ...]:
    """Flag per stored action entry: True iff pi(s) == target(f).

    Stored entries are (section s, non-identity morphism f) at linear index s + (f - n) * S.
    """
    n = category.number_of_objects
    return tuple(
        int(pi[s]) == category.target(f)
        for f in range(n, category.number_of_morphisms)
        for s in range(len(pi))
    )


class Presheaf:
    """A presheaf over a finite category: sections fibred over objects by `pi`, and for each
    morphism f an action s -> s·f taking sections over target(f) to sections over source(f).

    Identities act trivially by rule; `action` stores s·f for non-identity f at index
    s + (f - n) * S, with None where s·f is undefined.
    """

    def __init__(self, category: Category, pi: Sequence[int], action: Sequence[Optional[int]]):
        _check_category(category)
        _check_pi(category, pi)
        S = len(pi)
        k = category.number_of_morphisms - category.number_of_objects
        if len(action) != S * k:
            raise ValueError(f"action table must have {S * k} entries, got {len(action)}")
        for v in action:
            if v is not None and not 0 <= int(v) < S:
                raise ValueError(f"action entry {v} is not a section index in [0, {S})")
        self.category = category
        self._pi = [int(p) for p in pi]
        self._action = action
        self._mask: Optional[Sequence[bool]] = None

    @classmethod
    def _over_digits(
        cls,
        category: Category,
        pi: Sequence[int],
        digits: Sequence[int],
        mask: Sequence[bool],
    ) -> "Presheaf":
        presheaf = cls.__new__(cls)
        presheaf.category = category
        presheaf._pi = list(pi)
        presheaf._action = digits
        presheaf._mask = mask
        return presheaf

    @classmethod
    def trivial(cls, category: Category, pi: Sequence[int]) -> "Presheaf":
        """Every defined s·f is s itself."""
        n = category.number_of_objects
        action = [
            s if int(pi[s]) == category.target(f) else None
            for f in range(n, category.number_of_morphisms)
            for s in range(len(pi))
        ]
        return cls(category, pi, action)

    @property
    def number_of_sections(self) -> int:
        return len(self._pi)

    @property
    def number_of_objects(self) -> int:
        return self.category.number_of_objects

    @property
    def number_of_morphisms(self) -> int:
        return self.category.number_of_morphisms

    def sections(self) -> AtomSet:
        return AtomSet(len(self._pi))

    def pi(self, s: int) -> int:
        return self._pi[s]

    def fiber(self, x: int) -> List[int]:
        return [s for s, p in enumerate(self._pi) if p == x]

    def action(self, s: int, f: int) -> Optional[int]:
        """s·f, or UNDEFINED (None) when s does not lie over target(f)."""
        n = self.category.number_of_objects
        if f < n:
            return s if self._pi[s] == f else UNDEFINED
        index = s + (f - n) * len(self._pi)
        if self._mask is not None and not self._mask[index]:
            return UNDEFINED
        value = self._action[index]
        return UNDEFINED if value is None else int(value)

    def action_table(self) -> List[List[Optional[int]]]:
        """Expanded table indexed [s][f] over all morphisms."""
        m = self.number_of_morphisms
        return [[self.action(s, f) for f in range(m)] for s in range(len(self._pi))]

    def stored_action(self) -> Tuple[Optional[int], ...]:
        n = self.category.number_of_objects
        return tuple(
            self.action(s, f)
            for f in range(n, self.number_of_morphisms)
            for s in range(len(self._pi))
        )

    def validate(self) -> Optional[LawViolation]:
        """None if this is a presheaf over `category`, else the first violated law."""
        category = self.category
        return validate_presheaf(
            category.number_of_objects,
            self._pi,
            category.sources(),
            category.targets(),
            category.composition_table(),
            self.action_table(),
        )

    def is_valid(self) -> bool:
        return self.validate() is None

    def __repr__(self) -> str:
        return f"Presheaf(pi={self._pi}, action={self.stored_action()})"


class PresheafSet:
    """All presheaves over a fixed category with a fixed fibration `pi`, enumerated by action table."""

    def __init__(self, category: Category, pi: Sequence[int]):
        category = category.detach()
        _check_category(category)
        _check_pi(category, pi)
        self.category = category
        self.pi = [int(p) for p in pi]
        self.mask = defined_mask(category, self.pi)
        # fixed for the whole enumeration
        self.sources = category.sources()
        self.targets = category.targets()
        self.composition = category.composition_table()

    @property
    def number_of_sections(self) -> int:
        return len(self.pi)

    def bounds(self) -> List[int]:
        S = len(self.pi)
        return [S if ok else 1 for ok in self.mask]

    def raw_size(self) -> int:
        size = 1
        for b in self.bounds():
            size *= b
        return size

    def create_cursor(self, arena: Arena) -> "PresheafCursor":
        return PresheafCursor(arena, self)


class PresheafCursor(ValidatedCursor[Presheaf]):
    def __init__(self, arena: Arena, presheaf_set: PresheafSet):
        super().__init__(arena, arena.allocate(len(presheaf_set.mask)))
        self.presheaf_set = presheaf_set
        self.bounds()[:] = presheaf_set.bounds()

    def _view(self) -> Presheaf:
        ps = self.presheaf_set
        return Presheaf._over_digits(ps.category, ps.pi, self.digits(), ps.mask)

    def _accept(self) -> bool:
        ps = self.presheaf_set
        return (
            validate_presheaf(
                ps.category.number_of_objects,
                ps.pi,
                ps.sources,
                ps.targets,
                ps.composition,
                self._view().action_table(),
            )
            is None
        )
