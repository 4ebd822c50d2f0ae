"""
Shortest-path search engine.

This module provides:
- State space contract and an explicit-graph space (state_space.py)
- Priority frontier with explicit tie-breaking (frontier.py)
- State interning and best-cost ledger (ledger.py)
- Predecessor map and path reconstruction (predecessors.py)
- Dijkstra / A* driver (driver.py)
"""

from .state_space import (
    StateSpace,
    GraphSpace,
)

from .frontier import Frontier

from .ledger import (
    StateArena,
    CostLedger,
)

from .predecessors import (
    PredecessorMap,
    reconstruct_path,
)

from .driver import (
    SearchConfig,
    SearchStatus,
    SearchStats,
    SearchResult,
    SearchDriver,
    shortest_path,
    shortest_path_cost,
)

__all__ = [
    # State spaces
    'StateSpace',
    'GraphSpace',
    # Frontier
    'Frontier',
    # Ledger
    'StateArena',
    'CostLedger',
    # Predecessors
    'PredecessorMap',
    'reconstruct_path',
    # Driver
    'SearchConfig',
    'SearchStatus',
    'SearchStats',
    'SearchResult',
    'SearchDriver',
    'shortest_path',
    'shortest_path_cost',
]
