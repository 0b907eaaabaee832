from __future__ import annotations

import pytest

from pshcalc.arena import Arena
from pshcalc.category import Category, CategorySet
from pshcalc.cursors import traverse
from pshcalc.laws import IncompatibleComposition, NonAssociative, NotAnIdentity, UNDEFINED, check_identity_laws


def _count(category_set: CategorySet) -> int:
    return sum(1 for _ in traverse(category_set.create_cursor(Arena())))


@pytest.mark.parametrize("size, expected", [(1, 1), (2, 2), (3, 11)])
def test_monoid_counts(size: int, expected: int) -> None:
    assert _count(CategorySet.monoids(size)) == expected


def test_trivial_monoid_is_a_category() -> None:
    trivial = Category(1, [], [], [])
    assert trivial.number_of_morphisms == 1
    assert trivial.validate() is None


def test_left_zero_monoid_validates_and_breaking_it_does_not() -> None:
    # g∘f = g on {1, 2}, 0 the identity; stored at (f - 1) + (g - 1) * 2
    left_zero = Category.monoid([1, 1, 2, 2], 3)
    assert left_zero.validate() is None

    broken = Category.monoid([0, 1, 2, 2], 3)
    assert isinstance(broken.validate(), NonAssociative)


@pytest.mark.parametrize("table", [[0], [1]])
def test_both_two_element_monoids_validate(table) -> None:
    assert Category.monoid(table, 2).is_valid()


def test_identities_compose_by_rule() -> None:
    arrow = Category(2, [0], [1], [None])
    assert arrow.composition(2, 0) == 2
    assert arrow.composition(1, 2) == 2
    assert arrow.composition(0, 2) is UNDEFINED
    assert arrow.composition(2, 1) is UNDEFINED
    assert arrow.composition(0, 0) == 0
    assert arrow.composition(1, 0) is UNDEFINED
    assert arrow.composition(2, 2) is UNDEFINED


def test_walking_arrow_is_the_only_category_on_its_skeleton() -> None:
    assert Category(2, [0], [1], [None]).validate() is None
    assert _count(CategorySet(2, [0], [1])) == 1


def test_defined_composite_of_non_composable_pair_is_rejected() -> None:
    assert Category(2, [0], [1], [2]).validate() == IncompatibleComposition(g=2, f=2)


def test_walking_isomorphism() -> None:
    # f = 2: 0 -> 1, g = 3: 1 -> 0; only g∘f = id_0 and f∘g = id_1 are possible
    iso = Category(2, [0, 1], [1, 0], [None, 1, 0, None])
    assert iso.validate() is None
    assert _count(CategorySet(2, [0, 1], [1, 0])) == 1


def test_composite_with_wrong_endpoints_is_rejected() -> None:
    bad = Category(2, [0, 1], [1, 0], [None, 1, 2, None])
    assert bad.validate() == IncompatibleComposition(g=3, f=2)


def test_identity_law_violation_reported() -> None:
    source = [0, 0]
    target = [0, 0]
    table = [[0, 1], [0, 1]]  # 0∘1 = 1 fine, 1∘0 = 0 breaks f∘id = f
    assert check_identity_laws(1, source, target, table) == NotAnIdentity(morphism=0)


def test_cursor_counts_rejected_candidates() -> None:
    category_set = CategorySet.monoids(3)
    cursor = category_set.create_cursor(Arena())
    accepted = sum(1 for _ in traverse(cursor))

    assert category_set.raw_size() == 81
    assert accepted + cursor.rejected == 81


def test_every_yielded_category_is_valid_and_distinct() -> None:
    seen = set()
    for category in traverse(CategorySet.monoids(3).create_cursor(Arena())):
        detached = category.detach()
        assert detached.validate() is None
        seen.add(detached.stored_composition())
    assert len(seen) == 11


def test_non_composable_digits_read_back_undefined() -> None:
    category_set = CategorySet(2, [0, 1], [1, 0])
    assert category_set.bounds() == [1, 4, 4, 1]
    category = next(traverse(category_set.create_cursor(Arena())))
    assert category.composition(2, 2) is UNDEFINED
    assert category.composition(3, 3) is UNDEFINED


@pytest.mark.parametrize(
    "args",
    [
        (1, [0], [0, 0], [0]),
        (1, [1], [0], [0]),
        (1, [0], [0], [0, 0]),
        (1, [0], [0], [2]),
    ],
)
def test_malformed_tables_raise(args) -> None:
    with pytest.raises(ValueError):
        Category(*args)


def test_monoid_set_needs_an_identity() -> None:
    with pytest.raises(ValueError):
        CategorySet.monoids(0)


def test_violation_messages() -> None:
    assert str(NonAssociative(morphisms=(1, 2, 3))) == "Non-associative composition: (1, 2, 3)"
    assert str(IncompatibleComposition(g=3, f=2)) == "Incompatible composition: g=3 and f=2"


def test_objects_and_morphisms_of_the_walking_arrow() -> None:
    arrow = Category(2, [0], [1], [None])
    assert [a.index for a in arrow.objects()] == [0, 1]
    assert len(arrow.morphisms()) == 3
    assert arrow.identity(1) == 1
    assert arrow.is_identity(1) and not arrow.is_identity(2)
    assert (arrow.source(2), arrow.target(2)) == (0, 1)
