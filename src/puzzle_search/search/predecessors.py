"""
Predecessor map and optimal path reconstruction.

The map is flat: state id -> (edge cost, predecessor id). It is only filled
when the driver is asked to track paths.
"""

from typing import Dict, List, Optional, Tuple

from ..errors import MissingPredecessorError
from ..types import PathStep, PredecessorEntry
from .ledger import StateArena


class PredecessorMap:
    """Reverse edges of the current best path to every reached state."""

    def __init__(self):
        self._entries: Dict[int, PredecessorEntry] = {}

    def record(self, state_id: int, edge_cost: int, predecessor_id: int):
        """Remember that ``state_id`` is best reached from ``predecessor_id``."""
        self._entries[state_id] = PredecessorEntry(edge_cost, predecessor_id)

    def get(self, state_id: int) -> Optional[PredecessorEntry]:
        return self._entries.get(state_id)

    def __contains__(self, state_id: int) -> bool:
        return state_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def reconstruct_path(
    predecessors: PredecessorMap,
    arena: StateArena,
    goal_id: int,
    initial_id: int,
) -> Tuple[PathStep, ...]:
    """
    Walk the predecessor map backwards from the goal to the initial state.

    Args:
        predecessors: Map filled by the driver during the search.
        arena: Arena that interned the ids.
        goal_id: Id of the reached goal state.
        initial_id: Id of the initial state (has no predecessor entry).

    Returns:
        Tuple of PathStep from the initial state to the goal. The first step
        has edge_cost 0 and total_cost 0.

    Raises:
        MissingPredecessorError: A non-initial state on the chain has no
            predecessor entry, or the chain loops.
    """
    reversed_steps: List[Tuple[int, int]] = []
    current = goal_id
    while current != initial_id:
        entry = predecessors.get(current)
        if entry is None:
            raise MissingPredecessorError(
                f"No predecessor recorded for state {arena.state(current)!r}"
            )
        reversed_steps.append((current, entry.edge_cost))
        if len(reversed_steps) > len(predecessors):
            raise MissingPredecessorError("Predecessor chain does not reach the initial state")
        current = entry.predecessor_id

    path = [PathStep(arena.state(initial_id), 0, 0)]
    total = 0
    for state_id, edge_cost in reversed(reversed_steps):
        total += edge_cost
        path.append(PathStep(arena.state(state_id), edge_cost, total))
    return tuple(path)


__all__ = ['PredecessorMap', 'reconstruct_path']
