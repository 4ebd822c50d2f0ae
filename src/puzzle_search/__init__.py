"""
Puzzle Search: Shortest-path search over implicit puzzle graphs.

This package provides a Dijkstra / A* engine that explores problem states
lazily, plus two puzzle state spaces built on it.

Submodules:
    search  - Engine: state space contract, frontier, ledger, driver
    puzzles - Risk grid and burrow reorganization state spaces
    utils   - Input line helpers
    cli     - Command-line entry point

Usage:
    from puzzle_search.search import SearchDriver, SearchConfig, GraphSpace
    from puzzle_search.puzzles import parse_risk_grid, lowest_total_risk
"""

# Shared types
from .types import Edge, FrontierEntry, PredecessorEntry, PathStep

# Errors
from .errors import (
    PuzzleSearchError,
    PuzzleInputError,
    StateSpaceContractError,
    MissingPredecessorError,
    SearchBudgetExceeded,
)

# Engine
from .search import (
    StateSpace,
    GraphSpace,
    SearchConfig,
    SearchStatus,
    SearchResult,
    SearchDriver,
    shortest_path,
    shortest_path_cost,
)

__version__ = "0.1.0"

__all__ = [
    # Shared types
    "Edge",
    "FrontierEntry",
    "PredecessorEntry",
    "PathStep",
    # Errors
    "PuzzleSearchError",
    "PuzzleInputError",
    "StateSpaceContractError",
    "MissingPredecessorError",
    "SearchBudgetExceeded",
    # Engine
    "StateSpace",
    "GraphSpace",
    "SearchConfig",
    "SearchStatus",
    "SearchResult",
    "SearchDriver",
    "shortest_path",
    "shortest_path_cost",
]
