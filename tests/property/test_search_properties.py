"""
Property-based tests for the search engine.

Uses Hypothesis to generate small weighted digraphs and grids and verify:
1. Optimality - returned cost equals the brute-force minimum over all paths
2. Determinism - repeated runs give the same cost and path
3. Heuristic optimality - A* with an admissible heuristic matches Dijkstra
4. Unreachable goals - reported as exhausted, never raised
5. Stale entries - injected duplicate pushes do not change the answer
6. Path validity - the reconstructed path uses real edges and sums to the cost
"""

from typing import Dict, List, Optional, Set, Tuple

import pytest
from hypothesis import given, settings, HealthCheck
from hypothesis import strategies as st

from puzzle_search.puzzles.grid import RiskGrid, lowest_total_risk
from puzzle_search.search import (
    GraphSpace,
    SearchDriver,
    SearchStatus,
    shortest_path,
)

# Check if hypothesis is available
pytest.importorskip("hypothesis")

Adjacency = Dict[int, List[Tuple[int, int]]]

MAX_NODES = 8
MAX_COST = 20


# =============================================================================
# HYPOTHESIS STRATEGIES
# =============================================================================

@st.composite
def small_graphs(draw) -> Tuple[Adjacency, int, Set[int]]:
    """
    Generate a random weighted digraph with a start node and goal set.

    Returns:
        (adjacency, start, goals) with at most MAX_NODES nodes, costs in
        [0, MAX_COST] and possibly parallel edges or self loops.
    """
    node_count = draw(st.integers(min_value=1, max_value=MAX_NODES))
    nodes = st.integers(min_value=0, max_value=node_count - 1)
    edges = draw(st.lists(
        st.tuples(nodes, nodes, st.integers(min_value=0, max_value=MAX_COST)),
        max_size=node_count * 3,
    ))
    adjacency: Adjacency = {node: [] for node in range(node_count)}
    for source, target, cost in edges:
        adjacency[source].append((cost, target))

    start = draw(nodes)
    goals = draw(st.sets(nodes, min_size=1, max_size=3))
    return adjacency, start, goals


@st.composite
def small_grids(draw) -> RiskGrid:
    height = draw(st.integers(min_value=1, max_value=3))
    width = draw(st.integers(min_value=1, max_value=3))
    risks = st.integers(min_value=1, max_value=9)
    rows = draw(st.lists(
        st.lists(risks, min_size=width, max_size=width),
        min_size=height, max_size=height,
    ))
    return RiskGrid(tuple(tuple(row) for row in rows))


# =============================================================================
# BRUTE FORCE
# =============================================================================

def brute_force_cost(adjacency: Adjacency, start: int, goals: Set[int]) -> Optional[int]:
    """Minimum cost over every simple path from start to any goal."""
    best: List[Optional[int]] = [None]

    def walk(node: int, cost: int, visited: Set[int]):
        if node in goals:
            if best[0] is None or cost < best[0]:
                best[0] = cost
        for edge_cost, target in adjacency.get(node, []):
            if target not in visited:
                visited.add(target)
                walk(target, cost + edge_cost, visited)
                visited.remove(target)

    walk(start, 0, {start})
    return best[0]


def grid_as_graph(grid: RiskGrid) -> Adjacency:
    ids = {}
    for row in range(grid.height):
        for col in range(grid.width):
            ids[(row, col)] = len(ids)
    return {
        ids[cell]: [(grid[n], ids[n]) for n in grid.neighbors(*cell)]
        for cell in ids
    }


# =============================================================================
# PROPERTIES
# =============================================================================

@given(small_graphs())
@settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
def test_cost_matches_brute_force(graph):
    adjacency, start, goals = graph
    result = shortest_path(GraphSpace(adjacency, start, goals))
    expected = brute_force_cost(adjacency, start, goals)

    assert result.cost == expected
    if expected is None:
        assert result.status is SearchStatus.EXHAUSTED
        assert result.path is None
    else:
        assert result.status is SearchStatus.FOUND


@given(small_graphs())
@settings(max_examples=100)
def test_path_is_valid(graph):
    adjacency, start, goals = graph
    result = shortest_path(GraphSpace(adjacency, start, goals))
    if not result.found:
        return

    path = result.path
    assert path[0].state == start
    assert path[0].total_cost == 0
    assert path[-1].state in goals
    assert path[-1].total_cost == result.cost
    for previous, step in zip(path, path[1:]):
        assert (step.edge_cost, step.state) in adjacency[previous.state]
        assert step.total_cost == previous.total_cost + step.edge_cost


@given(small_graphs())
@settings(max_examples=100)
def test_repeated_runs_are_identical(graph):
    adjacency, start, goals = graph
    first = shortest_path(GraphSpace(adjacency, start, goals))
    second = shortest_path(GraphSpace(adjacency, start, goals))

    assert first.cost == second.cost
    assert first.path == second.path


@given(small_graphs(), st.floats(min_value=0.0, max_value=1.0))
@settings(max_examples=100)
def test_admissible_heuristic_matches_dijkstra(graph, scale):
    adjacency, start, goals = graph
    estimates = {}
    for node in adjacency:
        remaining = brute_force_cost(adjacency, node, goals)
        estimates[node] = int((remaining or 0) * scale)

    a_star = shortest_path(GraphSpace(adjacency, start, goals, estimates))
    dijkstra = shortest_path(GraphSpace(adjacency, start, goals), use_heuristic=False)

    assert a_star.cost == dijkstra.cost


@given(small_graphs())
@settings(max_examples=100)
def test_unreachable_goal_is_not_an_error(graph):
    adjacency, start, _goals = graph
    unreachable = max(adjacency) + 1
    result = shortest_path(GraphSpace(adjacency, start, {unreachable}))

    assert result.status is SearchStatus.EXHAUSTED
    assert result.cost is None


class _DuplicatingDriver(SearchDriver):
    """Pushes a worse and an equal duplicate alongside every real entry."""

    def _push(self, frontier, state_id, cost, state):
        super()._push(frontier, state_id, cost + 3, state)
        super()._push(frontier, state_id, cost, state)
        super()._push(frontier, state_id, cost, state)


@given(small_graphs())
@settings(max_examples=100)
def test_stale_duplicates_do_not_change_answer(graph):
    adjacency, start, goals = graph
    plain = shortest_path(GraphSpace(adjacency, start, goals))
    noisy = _DuplicatingDriver(GraphSpace(adjacency, start, goals)).run()

    assert noisy.cost == plain.cost
    assert noisy.path == plain.path
    assert noisy.stats.expanded == plain.stats.expanded


@given(small_grids())
@settings(max_examples=100)
def test_grid_a_star_matches_brute_force(grid):
    adjacency = grid_as_graph(grid)
    goal = grid.height * grid.width - 1
    expected = brute_force_cost(adjacency, 0, {goal})

    assert lowest_total_risk(grid) == expected
    assert lowest_total_risk(grid, use_heuristic=False) == expected
