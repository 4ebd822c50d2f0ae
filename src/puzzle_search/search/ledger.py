"""
Best-known cost ledger and state interning.

States are interned into dense integer ids by a StateArena so that composite
states are hashed once per generated edge; the ledger, predecessor map and
frontier all work on ids.

Key insight: with non-negative edge costs, a state popped with a cost equal
to its ledger value has its optimal cost confirmed, so expanding it again
can only repeat work.
"""

from typing import Dict, Generic, List, Optional, Set, TypeVar

StateT = TypeVar("StateT")


class StateArena(Generic[StateT]):
    """
    Bidirectional state <-> id table.

    Ids are assigned densely in first-seen order, starting at 0.
    """

    def __init__(self):
        self._ids: Dict[StateT, int] = {}
        self._states: List[StateT] = []

    def intern(self, state: StateT) -> int:
        """Return the id of ``state``, assigning a new one on first sight."""
        state_id = self._ids.get(state)
        if state_id is None:
            state_id = len(self._states)
            self._ids[state] = state_id
            self._states.append(state)
        return state_id

    def lookup(self, state: StateT) -> Optional[int]:
        """Return the id of ``state`` without interning it."""
        return self._ids.get(state)

    def state(self, state_id: int) -> StateT:
        """Return the state with id ``state_id``."""
        return self._states[state_id]

    def __len__(self) -> int:
        return len(self._states)

    def __contains__(self, state: StateT) -> bool:
        return state in self._ids


class CostLedger:
    """
    Best known cumulative cost per state id.

    Values only ever decrease. A strict improvement of a state that was
    already expanded reopens it, so the driver may expand it again at the
    new, lower cost.

    Attributes:
        costs: Dictionary mapping state id to lowest cost seen.
        improvements: Offers that lowered an existing value.
        rejected: Offers that did not improve on the recorded value.
        stale_hits: Stale frontier entries reported through is_stale.
    """

    def __init__(self):
        self.costs: Dict[int, int] = {}
        self._expanded: Set[int] = set()
        self.improvements = 0
        self.rejected = 0
        self.stale_hits = 0

    def best(self, state_id: int) -> Optional[int]:
        """Return the lowest recorded cost for ``state_id``, or None if unseen."""
        return self.costs.get(state_id)

    def offer(self, state_id: int, cost: int) -> bool:
        """
        Record ``cost`` if it is the first or a strictly lower one.

        Args:
            state_id: Interned id of the state.
            cost: Candidate cumulative cost.

        Returns:
            True if the ledger changed, False otherwise.
        """
        current = self.costs.get(state_id)
        if current is not None:
            if cost >= current:
                self.rejected += 1
                return False
            self.improvements += 1
            self._expanded.discard(state_id)
        self.costs[state_id] = cost
        return True

    def is_stale(self, state_id: int, cost: int) -> bool:
        """
        Check a popped entry against the ledger.

        An entry is stale when the ledger holds a strictly lower cost for
        its state, or when the state was already expanded at the recorded
        cost.
        """
        current = self.costs.get(state_id)
        stale = (current is not None and cost > current) or state_id in self._expanded
        if stale:
            self.stale_hits += 1
        return stale

    def mark_expanded(self, state_id: int):
        self._expanded.add(state_id)

    def is_expanded(self, state_id: int) -> bool:
        return state_id in self._expanded

    def stats(self) -> dict:
        """
        Return ledger statistics.

        Returns:
            Dictionary with size, expanded, improvements, rejected and stale_hits.
        """
        return {
            "size": len(self.costs),
            "expanded": len(self._expanded),
            "improvements": self.improvements,
            "rejected": self.rejected,
            "stale_hits": self.stale_hits,
        }

    def __len__(self) -> int:
        return len(self.costs)

    def __contains__(self, state_id: int) -> bool:
        return state_id in self.costs


__all__ = ['StateArena', 'CostLedger']
