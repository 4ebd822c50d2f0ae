"""Shared pytest fixtures for puzzle-search tests."""

import pytest


EXAMPLE_GRID = """\
1163751742
1381373672
2136511328
3694931569
7463417111
1319128137
1359912421
3125421639
1293138521
2311944581
"""

EXAMPLE_BURROW = """\
#############
#...........#
###B#C#B#D###
  #A#D#C#A#
  #########
"""


@pytest.fixture
def example_grid_lines():
    """Lines of the 10x10 example risk grid."""
    return EXAMPLE_GRID.splitlines()


@pytest.fixture
def example_burrow_lines():
    """Lines of the example burrow diagram (2-slot rooms)."""
    return EXAMPLE_BURROW.splitlines()


@pytest.fixture
def example_grid_file(tmp_path):
    path = tmp_path / "grid.txt"
    path.write_text(EXAMPLE_GRID)
    return path


@pytest.fixture
def example_burrow_file(tmp_path):
    path = tmp_path / "burrow.txt"
    path.write_text(EXAMPLE_BURROW)
    return path


@pytest.fixture
def diamond_graph():
    """Small graph with two routes to the goal; the longer route is cheaper.

    a -> b -> d costs 1 + 5 = 6
    a -> c -> e -> d costs 2 + 1 + 1 = 4
    """
    return {
        "a": [(1, "b"), (2, "c")],
        "b": [(5, "d")],
        "c": [(1, "e")],
        "e": [(1, "d")],
        "d": [],
    }
