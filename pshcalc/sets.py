from __future__ import annotations

import numbers
from typing import Iterator, List, Protocol, Sequence

from .arena import Arena, linear_size
from .cursors import OdometerCursor
from .views import Atom, Function, Tuple


class FiniteSet(Protocol):
    def size(self) -> int: ...


class AtomSet:
    """The flat set {0, ..., size-1}."""

    def __init__(self, size: int):
        if int(size) < 0:
            raise ValueError(f"set size must be non-negative, got {size}")
        self._size = int(size)

    def size(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Atom]:
        for i in range(self._size):
            yield Atom(index=i, size=self._size)

    def __len__(self) -> int:
        return self._size

    def create_cursor(self, arena: Arena) -> "AtomCursor":
        return AtomCursor(arena, self._size)

    def __repr__(self) -> str:
        return f"AtomSet({self._size})"


class ProductSet:
    """Cartesian product of finite sets; tuples are ordered first component fastest."""

    def __init__(self, factors: Sequence[FiniteSet | int]):
        self.sizes: List[int] = [int(f) if isinstance(f, numbers.Integral) else int(f.size()) for f in factors]
        if any(s < 0 for s in self.sizes):
            raise ValueError(f"factor sizes must be non-negative, got {self.sizes}")

    def size(self) -> int:
        return linear_size(self.sizes)

    def create_cursor(self, arena: Arena) -> "TupleCursor":
        return TupleCursor(arena, self.sizes)

    def __repr__(self) -> str:
        return f"ProductSet({self.sizes})"


class HomSet:
    """All functions domain -> codomain, one table entry per domain element (linear index order)."""

    def __init__(self, domain: FiniteSet, codomain: FiniteSet):
        self.domain_size = int(domain.size())
        self.target_size = int(codomain.size())

    def size(self) -> int:
        return self.target_size ** self.domain_size

    def create_cursor(self, arena: Arena) -> "FunctionCursor":
        return FunctionCursor(arena, self.domain_size, self.target_size)

    def __repr__(self) -> str:
        return f"HomSet({self.domain_size} -> {self.target_size})"


class AtomCursor(OdometerCursor[Atom]):
    def __init__(self, arena: Arena, size: int):
        super().__init__(arena, arena.allocate(1))
        self.bounds()[0] = size

    def _view(self) -> Atom:
        return Atom(index=int(self.digits()[0]), size=int(self.bounds()[0]))


class TupleCursor(OdometerCursor[Tuple]):
    def __init__(self, arena: Arena, sizes: Sequence[int]):
        super().__init__(arena, arena.allocate(len(sizes)))
        self.bounds()[:] = list(sizes)

    def _view(self) -> Tuple:
        return Tuple(self.digits(), self.bounds())


class FunctionCursor(OdometerCursor[Function]):
    def __init__(self, arena: Arena, domain_size: int, target_size: int):
        super().__init__(arena, arena.allocate(domain_size))
        self.target_size = int(target_size)
        self.bounds().fill(self.target_size)

    def _view(self) -> Function:
        return Function(self.digits(), self.target_size)
