#!/usr/bin/env python3
"""
Best-first shortest-path search (Dijkstra / A*).

Runs a lazy best-first search over a StateSpace: states are generated only
when their predecessor is popped as the cheapest pending candidate.

Usage:
    from puzzle_search.search import SearchDriver, SearchConfig

    config = SearchConfig(
        use_heuristic=True,   # A*; False degrades to Dijkstra
        track_path=True,      # Keep reverse edges for the optimal path
    )

    result = SearchDriver(space, config).run()
    if result.found:
        print(f"Cost: {result.cost}")
        for step in result.path:
            print(step.state, step.total_cost)

Architecture:
    1. ledger[initial] = 0, push (initial, g=0)
    2. While the frontier is non-empty:
        a. Pop the cheapest entry
        b. Skip it if stale (ledger holds a lower cost, or already expanded)
        c. Goal -> FOUND with g and the reconstructed path
        d. Otherwise relax every edge: on first sight or strict improvement,
           update ledger and predecessor, push the neighbor
    3. Frontier empty -> EXHAUSTED

    Frontier, ledger, arena and predecessor map are created per run and
    discarded with it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple
import time
import logging

from ..errors import SearchBudgetExceeded, StateSpaceContractError
from ..types import Number, PathStep, State
from .frontier import Frontier
from .ledger import CostLedger, StateArena
from .predecessors import PredecessorMap, reconstruct_path
from .state_space import StateSpace

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION
# =============================================================================

@dataclass
class SearchConfig:
    """
    Configuration for a single search run.

    Attributes:
        use_heuristic: Order the frontier by g + heuristic (A*). When False
            the heuristic is ignored (Dijkstra).
        track_path: Record predecessors and return the optimal path.
        validate_edges: Raise StateSpaceContractError on negative edge costs
            or negative heuristic values.
        max_expansions: Raise SearchBudgetExceeded after this many expansions
            (None = no limit).
        log_every: Log progress every N expansions (0 = never).
        verbose: Log run start and finish at INFO instead of DEBUG.
    """
    use_heuristic: bool = True
    track_path: bool = True
    validate_edges: bool = True
    max_expansions: Optional[int] = None
    log_every: int = 0
    verbose: bool = False


class SearchStatus(str, Enum):
    """Lifecycle of a search run."""
    RUNNING = "running"
    FOUND = "found"
    EXHAUSTED = "exhausted"


@dataclass
class SearchStats:
    """
    Counters collected during a run.

    Attributes:
        expanded: States whose neighbors were generated.
        generated: Edges returned by the state space.
        stale_skipped: Popped entries discarded without expansion.
        improvements: Ledger values lowered after first sight.
        frontier_peak: Largest frontier size.
        states_seen: Distinct states interned.
        duration_seconds: Wall time of the run.
    """
    expanded: int = 0
    generated: int = 0
    stale_skipped: int = 0
    improvements: int = 0
    frontier_peak: int = 0
    states_seen: int = 0
    duration_seconds: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "expanded": self.expanded,
            "generated": self.generated,
            "stale_skipped": self.stale_skipped,
            "improvements": self.improvements,
            "frontier_peak": self.frontier_peak,
            "states_seen": self.states_seen,
            "duration_seconds": self.duration_seconds,
        }


@dataclass
class SearchResult:
    """
    Outcome of a search run.

    Attributes:
        status: FOUND or EXHAUSTED.
        cost: Total cost of the optimal path (None when exhausted).
        path: Optimal path from the initial state to the goal, or None when
            the path was not tracked or no goal was reached.
        stats: Run counters.
    """
    status: SearchStatus
    cost: Optional[int] = None
    path: Optional[Tuple[PathStep, ...]] = None
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def found(self) -> bool:
        return self.status is SearchStatus.FOUND

    @property
    def goal(self) -> Optional[State]:
        """The goal state reached, when the path was tracked."""
        if not self.path:
            return None
        return self.path[-1].state

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "status": self.status.value,
            "cost": self.cost,
            "path": [step.to_dict() for step in self.path] if self.path is not None else None,
            "stats": self.stats.to_dict(),
        }


# =============================================================================
# SEARCH DRIVER
# =============================================================================

class SearchDriver:
    """
    Dijkstra / A* driver over a StateSpace.

    A driver may be run several times; every run builds its own frontier,
    ledger, arena and predecessor map.
    """

    def __init__(self, space: StateSpace, config: Optional[SearchConfig] = None):
        """
        Initialize the driver.

        Args:
            space: Problem description supplying neighbors and goal test.
            config: SearchConfig; defaults are used when None.
        """
        self.space = space
        self.config = config or SearchConfig()
        self.status = SearchStatus.RUNNING

    def run(self) -> SearchResult:
        """
        Run the search to completion.

        Returns:
            SearchResult with status FOUND (cost and optional path) or
            EXHAUSTED (no path exists).

        Raises:
            StateSpaceContractError: validate_edges is on and the space
                reported a negative edge cost or heuristic.
            SearchBudgetExceeded: max_expansions was reached.
        """
        start_time = time.perf_counter()
        config = self.config
        space = self.space
        log_level = logging.INFO if config.verbose else logging.DEBUG

        self.status = SearchStatus.RUNNING
        frontier = Frontier()
        ledger = CostLedger()
        arena: StateArena = StateArena()
        predecessors = PredecessorMap() if config.track_path else None
        stats = SearchStats()

        initial = space.initial_state()
        initial_id = arena.intern(initial)
        ledger.offer(initial_id, 0)
        self._push(frontier, initial_id, 0, initial)

        logger.log(log_level, f"Search started from {space.describe(initial)}")

        result = None
        while frontier:
            entry = frontier.pop_min()
            state_id, cost = entry.state_id, entry.cost

            if ledger.is_stale(state_id, cost):
                stats.stale_skipped += 1
                continue

            state = arena.state(state_id)
            if space.is_goal(state):
                self.status = SearchStatus.FOUND
                path = None
                if predecessors is not None:
                    path = reconstruct_path(predecessors, arena, state_id, initial_id)
                result = SearchResult(status=SearchStatus.FOUND, cost=cost, path=path, stats=stats)
                break

            if config.max_expansions is not None and stats.expanded >= config.max_expansions:
                raise SearchBudgetExceeded(config.max_expansions, stats.expanded)

            ledger.mark_expanded(state_id)
            stats.expanded += 1
            if config.log_every and stats.expanded % config.log_every == 0:
                logger.info(
                    f"  Expanded {stats.expanded} states, frontier={len(frontier)}, "
                    f"ledger={len(ledger)}, current cost={cost}"
                )

            for edge_cost, target in space.neighbors(state):
                stats.generated += 1
                if config.validate_edges and edge_cost < 0:
                    raise StateSpaceContractError(
                        f"Negative edge cost {edge_cost} from {space.describe(state)} "
                        f"to {space.describe(target)}"
                    )
                candidate = cost + edge_cost
                target_id = arena.intern(target)
                if ledger.offer(target_id, candidate):
                    if predecessors is not None:
                        predecessors.record(target_id, edge_cost, state_id)
                    self._push(frontier, target_id, candidate, target)

        if result is None:
            self.status = SearchStatus.EXHAUSTED
            result = SearchResult(status=SearchStatus.EXHAUSTED, stats=stats)

        stats.improvements = ledger.improvements
        stats.frontier_peak = frontier.peak_size
        stats.states_seen = len(arena)
        stats.duration_seconds = time.perf_counter() - start_time

        logger.log(
            log_level,
            f"Search {result.status.value}: cost={result.cost}, "
            f"{stats.expanded} expanded, {stats.stale_skipped} stale, "
            f"{stats.states_seen} states, {stats.duration_seconds:.2f}s"
        )
        return result

    def _priority(self, cost: int, state: State) -> Number:
        if not self.config.use_heuristic:
            return cost
        estimate = self.space.heuristic(state)
        if self.config.validate_edges and estimate < 0:
            raise StateSpaceContractError(
                f"Negative heuristic {estimate} for {self.space.describe(state)}"
            )
        return cost + estimate

    def _push(self, frontier: Frontier, state_id: int, cost: int, state: State):
        frontier.push(state_id, cost, self._priority(cost, state), self.space.tie_break_key(state))


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def shortest_path(space: StateSpace, **config_overrides) -> SearchResult:
    """
    Run a search with default configuration.

    Args:
        space: Problem description.
        **config_overrides: SearchConfig fields to override.

    Returns:
        SearchResult of the run.
    """
    return SearchDriver(space, SearchConfig(**config_overrides)).run()


def shortest_path_cost(space: StateSpace, **config_overrides) -> Optional[int]:
    """
    Return only the optimal cost, or None when no goal is reachable.

    Path tracking is off unless explicitly requested.
    """
    config_overrides.setdefault("track_path", False)
    return shortest_path(space, **config_overrides).cost


__all__ = [
    'SearchConfig',
    'SearchStatus',
    'SearchStats',
    'SearchResult',
    'SearchDriver',
    'shortest_path',
    'shortest_path_cost',
]
