from __future__ import annotations

from typing import Generic, Iterator, Optional, TypeVar

import numpy as np

from . import odometer
from .arena import Arena, Slot

V = TypeVar("V")


class OdometerCursor(Generic[V]):
    """Restartable walk over every point of an arena-backed digit vector.

    Protocol: `initialize()` once, then alternate `get()` / `advance()` until `get()` returns None.
    Subclasses fill the bounds at construction and implement `_view`.
    """

    def __init__(self, arena: Arena, slot: Slot):
        self.arena = arena
        self.slot = slot
        self.done = True

    def digits(self) -> np.ndarray:
        return self.arena.values(self.slot)

    def bounds(self) -> np.ndarray:
        return self.arena.bounds(self.slot)

    def size(self) -> int:
        return odometer.space_size(self.bounds())

    def initialize(self) -> None:
        self.digits().fill(0)
        self.done = odometer.is_empty(self.bounds())

    def advance(self) -> None:
        if self.done:
            return
        self.done = odometer.advance(self.digits(), self.bounds())

    def get(self) -> Optional[V]:
        if self.done:
            return None
        return self._view()

    def _view(self) -> V:
        raise NotImplementedError


class ValidatedCursor(OdometerCursor[V]):
    """Odometer cursor that only stops on points accepted by `_accept`.

    Runs of rejected points are skipped with a loop, so arbitrarily long invalid stretches
    cost no stack depth.
    """

    def __init__(self, arena: Arena, slot: Slot):
        super().__init__(arena, slot)
        self.rejected = 0

    def initialize(self) -> None:
        super().initialize()
        self.rejected = 0
        self._skip_invalid()

    def advance(self) -> None:
        if self.done:
            return
        super().advance()
        self._skip_invalid()

    def _skip_invalid(self) -> None:
        digits = self.digits()
        bounds = self.bounds()
        while not self.done and not self._accept():
            self.rejected += 1
            self.done = odometer.advance(digits, bounds)

    def _accept(self) -> bool:
        raise NotImplementedError


def traverse(cursor: OdometerCursor[V]) -> Iterator[V]:
    """Initialize `cursor` and yield each view in turn.

    Yielded views borrow the cursor's arena range and change on the next step; copy what you keep.
    """
    cursor.initialize()
    while True:
        view = cursor.get()
        if view is None:
            return
        yield view
        cursor.advance()
