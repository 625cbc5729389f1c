import pytest

from intrange.api import Range, MutableRange, InvalidArgument


def test_transforms_in_place():
    cell = MutableRange(2, 11, 2)

    cell.skip(1)
    assert cell == Range(4, 11, 2)

    cell.take(2)
    assert cell == Range(4, 8, 2)

    cell.rev()
    assert cell == Range(8, 4, -2)

    cell.shift(1)
    assert cell == Range(6, 2, -2)

    cell.scale(3)
    assert cell == Range(18, 6, -6)

    cell.neg()
    assert cell == Range(-18, -6, 6)
    assert cell.freeze().to_list() == [-18, -12, -6]


def test_add_and_sub_combine_steps():
    cell = MutableRange(1, 5)
    cell.add(Range(10, 20, 2))
    assert cell == Range(11, 25, 3)

    cell.sub(MutableRange(1, 5))
    assert cell == Range(10, 20, 2)


def test_empty_operands_are_identities():
    cell = MutableRange.of(Range.empty())
    cell.add(Range(3, 9, 3))
    assert cell == Range(3, 9, 3)

    cell.sub(Range.empty())
    assert cell == Range(3, 9, 3)

    cell = MutableRange.of(Range.empty())
    cell.sub(Range(3, 9, 3))
    assert cell == Range(3, 9, 3)


def test_take_zero_empties_the_cell():
    cell = MutableRange(1, 10)
    cell.take(0)

    assert cell.value.is_empty()
    assert len(cell) == 0
    assert list(cell) == []


def test_skip_past_the_end_empties_the_cell():
    cell = MutableRange(1, 10, 3)
    cell.skip(5)

    assert cell.value.is_empty()
    assert 10 not in cell


def test_negative_take_leaves_the_cell_unchanged():
    cell = MutableRange(1, 10)

    with pytest.raises(InvalidArgument):
        cell.take(-1)

    assert cell == Range(1, 10)


def test_frozen_values_are_not_affected_by_later_mutation():
    cell = MutableRange(1, 10)
    frozen = cell.freeze()

    cell.scale(2)

    assert frozen == Range(1, 10)
    assert cell == Range(2, 20, 2)


def test_set_and_equality():
    cell = MutableRange(0, 0)
    cell.set(Range(5, 1))

    assert cell == MutableRange(5, 1)
    assert cell != MutableRange(5, 1, -2)
    assert Range(5, 1) == cell
    assert str(cell) == "5..1"
    assert repr(cell) == "MutableRange(5, 1, -1)"
    assert 3 in cell

    with pytest.raises(TypeError):
        cell.set([5, 1, -1])

    with pytest.raises(TypeError):
        hash(cell)
