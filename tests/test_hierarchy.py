import random

import pytest

from services.hierarchy import (
    ROOT,
    assign_depths,
    build_parents,
    resolve_widths,
    smart_widths,
    width_of,
)


def test_strictly_nested_lines():
    widths = [0, 2, 4]
    parents = build_parents(widths)
    assert parents == [ROOT, 0, 1]
    assert assign_depths(widths, parents) == [0, 1, 1]
    assert smart_widths(widths) == [0, 1, 2]


def test_equal_width_lines_chain():
    """The second of two equal-width lines points at the first and adds no depth."""
    widths = [0, 2, 2]
    parents = build_parents(widths)
    assert parents == [ROOT, 0, 1]
    assert assign_depths(widths, parents) == [0, 1, 0]
    assert smart_widths(widths) == [0, 1, 1]


def test_dedent_back_to_earlier_level():
    widths = [0, 2, 4, 2, 0]
    parents = build_parents(widths)
    assert parents == [ROOT, 0, 1, 1, 0]
    assert assign_depths(widths, parents) == [0, 1, 1, 0, 0]
    assert smart_widths(widths) == [0, 1, 2, 1, 0]


def test_earlier_children_get_larger_depth():
    """Two children of one parent with different widths: the earlier one ends up deeper."""
    widths = [0, 4, 2]
    parents = build_parents(widths)
    assert parents == [ROOT, 0, 0]
    assert assign_depths(widths, parents) == [0, 2, 1]
    assert smart_widths(widths) == [0, 2, 1]


def test_first_line_indented():
    widths = [4, 4, 8]
    parents = build_parents(widths)
    assert parents == [ROOT, 0, 1]
    assert assign_depths(widths, parents) == [1, 0, 1]
    assert resolve_widths(parents, [1, 0, 1]) == [1, 1, 2]


def test_empty_input():
    assert build_parents([]) == []
    assert assign_depths([], []) == []
    assert smart_widths([]) == []


def _samples():
    rng = random.Random(1234)
    yield [0, 0, 0]
    yield [8, 4, 0, 4, 8]
    yield [0, 3, 3, 7, 1, 1, 0, 5]
    for _ in range(200):
        yield [rng.choice([0, 1, 2, 4, 6, 8, 12]) for _ in range(rng.randint(1, 30))]


@pytest.mark.parametrize("widths", list(_samples()))
def test_parent_invariants(widths):
    """Parents come earlier and are never wider; equal width means depth 0."""
    parents = build_parents(widths)
    depths = assign_depths(widths, parents)
    assert len(parents) == len(widths)
    for i, p in enumerate(parents):
        assert p == ROOT or 0 <= p < i
        assert width_of(widths, p) <= widths[i]
        if width_of(widths, p) == widths[i]:
            assert depths[i] == 0
        else:
            assert depths[i] >= 1
