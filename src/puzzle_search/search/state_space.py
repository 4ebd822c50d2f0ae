"""
State space contract consumed by the search driver.

A state space encapsulates all problem-specific knowledge: where the search
starts, which states are goals, which single-step transitions are legal and
what they cost. The driver only ever sees states as opaque hashable values.

Usage:
    class MySpace(StateSpace):
        def initial_state(self):
            return 0

        def is_goal(self, state):
            return state == 10

        def neighbors(self, state):
            return [Edge(1, state + 1)]

    result = SearchDriver(MySpace()).run()
"""

from typing import Any, Dict, Hashable, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..types import Edge, Number, State


class StateSpace:
    """Base class for implicit graphs explored by the search driver.

    Subclasses must override ``initial_state``, ``is_goal`` and ``neighbors``.
    ``neighbors`` must be deterministic and enumerate every legal transition;
    it may be expensive, so the driver calls it once per expanded state.
    """

    def initial_state(self) -> State:
        """Return the start state."""
        raise NotImplementedError("Override me")

    def is_goal(self, state: State) -> bool:
        """Return whether ``state`` is a goal state."""
        raise NotImplementedError("Override me")

    def neighbors(self, state: State) -> Iterable[Edge]:
        """Return all ``(cost, next_state)`` transitions out of ``state``."""
        raise NotImplementedError("Override me")

    def heuristic(self, state: State) -> Number:
        """Estimate of the remaining cost to a goal.

        Must never overestimate. The default of 0 turns A* into Dijkstra.
        """
        return 0

    def tie_break_key(self, state: State) -> Any:
        """Secondary ordering key for frontier entries with equal priority.

        Keys must be mutually comparable across every state of this space.
        """
        return state

    def describe(self, state: State) -> str:
        """Human-readable form of ``state`` for logs and CLI output."""
        return str(state)


class GraphSpace(StateSpace):
    """
    State space over an explicit weighted digraph.

    Useful for small graphs that are already materialized, and for testing
    the driver against brute-force answers.

    Attributes:
        adjacency: Mapping node -> sequence of (cost, target) pairs.
        start: Start node.
        goals: Set of goal nodes.
        estimates: Optional heuristic table; missing nodes estimate 0.
    """

    def __init__(
        self,
        adjacency: Mapping[Hashable, Sequence[Tuple[int, Hashable]]],
        start: Hashable,
        goals: Iterable[Hashable],
        estimates: Optional[Mapping[Hashable, Number]] = None,
    ):
        self.adjacency: Dict[Hashable, List[Edge]] = {
            node: [Edge(cost, target) for cost, target in edges]
            for node, edges in adjacency.items()
        }
        self.start = start
        self.goals = frozenset(goals)
        self.estimates = dict(estimates or {})

    def initial_state(self) -> Hashable:
        return self.start

    def is_goal(self, state: Hashable) -> bool:
        return state in self.goals

    def neighbors(self, state: Hashable) -> List[Edge]:
        return self.adjacency.get(state, [])

    def heuristic(self, state: Hashable) -> Number:
        return self.estimates.get(state, 0)


__all__ = ['StateSpace', 'GraphSpace']
