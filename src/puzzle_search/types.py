"""
Shared type definitions for shortest-path search.

This module contains the small value types passed between the search
submodules and the puzzle state spaces, kept here to avoid circular imports.

Types:
    Edge: A single transition produced by a state space
    FrontierEntry: A pending state in the priority frontier
    PredecessorEntry: Reverse edge used for path reconstruction
    PathStep: One state along a reconstructed optimal path
"""

from typing import Any, Dict, Hashable, NamedTuple, Union

State = Hashable
Number = Union[int, float]


class Edge(NamedTuple):
    """A transition to ``target`` costing ``cost`` (never negative)."""
    cost: int
    target: State


class FrontierEntry(NamedTuple):
    """A pending state in the frontier.

    Field order is the heap order: priority first, then the state space's
    tie-break key, then the insertion sequence, which is unique per entry.
    ``cost`` and ``state_id`` never take part in a comparison.

    Attributes:
        priority: f = g + heuristic(state)
        tie_key: Deterministic secondary key supplied by the state space
        sequence: Insertion counter of the frontier
        cost: Cumulative cost g at the time of the push
        state_id: Interned id of the state
    """
    priority: Number
    tie_key: Any
    sequence: int
    cost: int
    state_id: int


class PredecessorEntry(NamedTuple):
    """Reverse edge: the step into a state cost ``edge_cost`` from ``predecessor_id``."""
    edge_cost: int
    predecessor_id: int


class PathStep(NamedTuple):
    """One state on a reconstructed path.

    Attributes:
        state: The state reached
        edge_cost: Cost of the edge into this state (0 for the initial state)
        total_cost: Cumulative cost from the initial state
    """
    state: State
    edge_cost: int
    total_cost: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "state": str(self.state),
            "edge_cost": self.edge_cost,
            "total_cost": self.total_cost,
        }


__all__ = ['State', 'Number', 'Edge', 'FrontierEntry', 'PredecessorEntry', 'PathStep']
