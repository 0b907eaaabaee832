from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple as TupleT, Union

import numpy as np

from .arena import linear_index, linear_size


@dataclass(frozen=True)
class Atom:
    """An element `index` of a flat set of `size` elements."""
    index: int
    size: int

    def linear_index(self) -> int:
        return self.index

    def linear_size(self) -> int:
        return self.size


class Tuple:
    """Read-only view of a point of a product set (borrowed from the arena)."""

    __slots__ = ("_digits", "_bounds")

    def __init__(self, digits: Sequence[int], bounds: Sequence[int]):
        if len(digits) != len(bounds):
            raise ValueError(f"digit/bound length mismatch: {len(digits)} != {len(bounds)}")
        self._digits = digits
        self._bounds = bounds

    def __len__(self) -> int:
        return len(self._digits)

    def __getitem__(self, i: int) -> Atom:
        return Atom(index=int(self._digits[i]), size=int(self._bounds[i]))

    def __iter__(self) -> Iterator[Atom]:
        for i in range(len(self._digits)):
            yield self[i]

    def as_tuple(self) -> TupleT[int, ...]:
        return tuple(int(d) for d in self._digits)

    def linear_index(self) -> int:
        return linear_index(self._digits, self._bounds)

    def linear_size(self) -> int:
        return linear_size(self._bounds)

    def __repr__(self) -> str:
        return f"Tuple({self.as_tuple()})"


Argument = Union[int, Atom, Tuple, Sequence[Atom]]


def _argument_index(x: Argument) -> int:
    if isinstance(x, (int, np.integer)):
        return int(x)
    if isinstance(x, (Atom, Tuple)):
        return x.linear_index()
    # sequence of atoms, first component least significant
    index = 0
    multiplier = 1
    for atom in x:
        index += atom.linear_index() * multiplier
        multiplier *= atom.linear_size()
    return index


class Function:
    """Read-only view of a function table f: A -> B, addressed by the linear index of the input."""

    __slots__ = ("_values", "_target_size")

    def __init__(self, values: Sequence[int], target_size: int):
        self._values = values
        self._target_size = int(target_size)

    @property
    def domain_size(self) -> int:
        return len(self._values)

    @property
    def target_size(self) -> int:
        return self._target_size

    def apply(self, x: Argument) -> Atom:
        index = _argument_index(x)
        if index < 0 or index >= len(self._values):
            raise IndexError(f"argument index {index} outside domain of size {len(self._values)}")
        return Atom(index=int(self._values[index]), size=self._target_size)

    __call__ = apply

    def table(self) -> TupleT[int, ...]:
        return tuple(int(v) for v in self._values)

    def linear_index(self) -> int:
        """Position of this function in its hom-set."""
        return linear_index(self._values, [self._target_size] * len(self._values))

    def linear_size(self) -> int:
        return self._target_size ** len(self._values)

    def __repr__(self) -> str:
        return f"Function({self.table()} -> {self._target_size})"
