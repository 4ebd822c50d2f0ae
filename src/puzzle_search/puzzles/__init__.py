"""
Puzzle state spaces built on the search engine.

This module provides:
- Risk grid path search with optional 5x5 tiling (grid.py)
- Burrow token reorganization search, 2-slot and 4-slot rooms (burrow.py)
"""

from .grid import (
    RiskGrid,
    GridRiskSpace,
    parse_risk_grid,
    tile_grid,
    search_grid,
    lowest_total_risk,
    solve_grid,
)

from .burrow import (
    Token,
    Burrow,
    BurrowSpace,
    parse_burrow,
    unfold_diagram,
    search_burrow,
    minimal_energy,
    solve_burrow,
)

__all__ = [
    # Grid
    'RiskGrid',
    'GridRiskSpace',
    'parse_risk_grid',
    'tile_grid',
    'search_grid',
    'lowest_total_risk',
    'solve_grid',
    # Burrow
    'Token',
    'Burrow',
    'BurrowSpace',
    'parse_burrow',
    'unfold_diagram',
    'search_burrow',
    'minimal_energy',
    'solve_burrow',
]
