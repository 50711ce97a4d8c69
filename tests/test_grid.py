import random

import pytest

from gridpath.core.grid import Grid, GridInitError


def test_square_grid_endpoints():
    g = Grid.square(10)
    assert g.start == (0, 0)
    assert g.goal == (9, 9)
    assert g.blocked_cells() == frozenset()


def test_contains_bounds():
    g = Grid.square(5)
    assert g.contains((0, 0))
    assert g.contains((4, 4))
    assert not g.contains((5, 0))
    assert not g.contains((0, -1))
    assert not g.contains((-1, 3))


def test_toggle_flips_membership():
    g = Grid.square(5)
    assert g.toggle((2, 2)) is True
    assert g.is_blocked((2, 2))
    assert g.toggle((2, 2)) is False
    assert not g.is_blocked((2, 2))


def test_toggle_endpoints_is_noop():
    g = Grid.square(5)
    g.toggle((1, 1))
    before = g.blocked_cells()
    g.toggle(g.start)
    g.toggle(g.goal)
    assert g.blocked_cells() == before
    assert g.is_protected((0, 0)) and g.is_protected((4, 4))
    assert not g.is_protected((1, 1))


def test_toggle_out_of_bounds_is_noop():
    g = Grid.square(5)
    for c in [(-1, 0), (0, -1), (5, 0), (0, 5), (99, -99)]:
        assert g.toggle(c) is False
    assert g.blocked_cells() == frozenset()
    assert not g.is_blocked((7, 7))


def test_endpoints_never_blocked_random_toggles():
    rng = random.Random(7)
    g = Grid.square(6)
    for _ in range(2000):
        g.toggle((rng.randrange(-2, 8), rng.randrange(-2, 8)))
        assert g.start not in g.blocked_cells()
        assert g.goal not in g.blocked_cells()
        assert all(g.contains(c) for c in g.blocked_cells())


def test_blocked_snapshot_is_detached():
    g = Grid.square(4)
    g.toggle((1, 2))
    snap = g.blocked_cells()
    g.toggle((2, 1))
    assert snap == frozenset({(1, 2)})


@pytest.mark.parametrize("kwargs", [
    dict(size=1, start=(0, 0), goal=(0, 0)),
    dict(size=0, start=(0, 0), goal=(1, 1)),
    dict(size=5, start=(0, 0), goal=(0, 0)),
    dict(size=5, start=(-1, 0), goal=(4, 4)),
    dict(size=5, start=(0, 0), goal=(5, 4)),
    dict(size=5, start=(0, 0), goal=None),
    dict(size=5, start=(0, 0), goal=(4, 4), blocked={(0, 0)}),
    dict(size=5, start=(0, 0), goal=(4, 4), blocked={(9, 9)}),
])
def test_invalid_construction_raises(kwargs):
    with pytest.raises(GridInitError):
        Grid(**kwargs)


def test_init_error_is_value_error():
    assert issubclass(GridInitError, ValueError)


def test_non_integer_cells_never_blocked():
    g = Grid.square(5)
    for c in [(1.5, 2), (1, 2.0), (True, 1), ("1", 2), (1, 2, 3), [1, 2]]:
        assert not g.contains(c)
        assert g.toggle(c) is False
    assert g.blocked_cells() == frozenset()


def test_size_and_endpoints_are_read_only():
    g = Grid.square(5)
    with pytest.raises(AttributeError):
        g.start = (1, 1)
    with pytest.raises(AttributeError):
        g.goal = (1, 1)
    with pytest.raises(AttributeError):
        g.size = 7
    assert (g.size, g.start, g.goal) == (5, (0, 0), (4, 4))


def test_blocked_only_changes_through_toggle():
    g = Grid(size=5, start=(0, 0), goal=(4, 4), blocked=[(2, 2)])
    snap = g.blocked_cells()
    assert not hasattr(snap, "add")
    assert not hasattr(g, "blocked")
    assert g.is_blocked((2, 2))
