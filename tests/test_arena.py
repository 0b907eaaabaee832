from __future__ import annotations

import itertools

import pytest

from pshcalc.arena import Arena, Slot, digits_of, linear_index, linear_size


def test_allocate_returns_consecutive_zeroed_slots() -> None:
    arena = Arena(capacity=2)
    a = arena.allocate(3)
    b = arena.allocate(2)

    assert a == Slot(offset=0, length=3)
    assert b == Slot(offset=3, length=2)
    assert len(arena) == 5
    assert arena.values(a).tolist() == [0, 0, 0]
    assert arena.bounds(b).tolist() == [0, 0]


def test_growth_preserves_existing_coordinates() -> None:
    arena = Arena(capacity=1)
    slot = arena.allocate(2)
    arena.values(slot)[:] = [4, 5]
    arena.bounds(slot)[:] = [7, 8]

    arena.allocate(1000)

    assert arena.capacity >= 1002
    assert arena.values(slot).tolist() == [4, 5]
    assert arena.bounds(slot).tolist() == [7, 8]


def test_slot_views_write_through() -> None:
    arena = Arena()
    slot = arena.allocate(2)
    arena.values(slot)[1] = 9
    assert arena.values(slot).tolist() == [0, 9]


@pytest.mark.parametrize("slot", [Slot(offset=0, length=5), Slot(offset=3, length=1), Slot(offset=-1, length=1)])
def test_out_of_range_slot_is_a_programming_error(slot: Slot) -> None:
    arena = Arena()
    arena.allocate(3)
    with pytest.raises(IndexError):
        arena.values(slot)


def test_negative_allocation_rejected() -> None:
    with pytest.raises(ValueError):
        Arena().allocate(-1)


@pytest.mark.parametrize("bounds", [(3,), (2, 3), (2, 3, 4), (1, 5, 1)])
def test_linear_index_is_a_bijection(bounds) -> None:
    size = linear_size(bounds)
    seen = set()
    for digits in itertools.product(*(range(b) for b in bounds)):
        index = linear_index(digits, bounds)
        assert 0 <= index < size
        assert digits_of(index, bounds) == list(digits)
        seen.add(index)
    assert seen == set(range(size))


def test_first_digit_is_least_significant() -> None:
    assert linear_index([1, 0], [2, 3]) == 1
    assert linear_index([0, 1], [2, 3]) == 2
    assert linear_index([1, 2], [2, 3]) == 5


def test_linear_index_length_mismatch() -> None:
    with pytest.raises(ValueError):
        linear_index([0, 1], [2])


def test_digits_of_out_of_range() -> None:
    with pytest.raises(ValueError):
        digits_of(6, [2, 3])
