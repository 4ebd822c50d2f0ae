"""
Risk grid path search.

Finds the route from the top-left to the bottom-right cell of a grid of
risk digits with the lowest total risk. Entering a cell costs its risk; the
starting cell is never entered and so costs nothing.

Usage:
    from puzzle_search.puzzles.grid import parse_risk_grid, tile_grid, lowest_total_risk

    grid = parse_risk_grid(lines)
    print(lowest_total_risk(grid))              # base grid
    print(lowest_total_risk(tile_grid(grid)))   # 5x5 tiled grid
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple, Union
import re
import math
import logging

from ..errors import PuzzleInputError
from ..search import SearchConfig, SearchDriver, SearchResult, StateSpace
from ..types import Edge
from ..utils import split_lines

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]

# Up, left, right, down
STEPS: Tuple[Cell, ...] = ((-1, 0), (0, -1), (0, 1), (1, 0))

DEFAULT_TILE_FACTOR = 5

# Risk levels are 1-9; a zero step would break the distance estimate
_ROW_RE = re.compile(r"^[1-9]+$")


@dataclass(frozen=True)
class RiskGrid:
    """
    Immutable rectangular grid of risk levels 1-9.

    Attributes:
        rows: Risk values, row-major. All rows have the same width.
    """
    rows: Tuple[Tuple[int, ...], ...]

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def __getitem__(self, cell: Cell) -> int:
        row, col = cell
        return self.rows[row][col]

    def in_bounds(self, cell: Cell) -> bool:
        row, col = cell
        return 0 <= row < self.height and 0 <= col < self.width

    def neighbors(self, row: int, col: int) -> Iterator[Cell]:
        """Yield the in-bounds axis-aligned neighbors of a cell."""
        for d_row, d_col in STEPS:
            cell = (row + d_row, col + d_col)
            if self.in_bounds(cell):
                yield cell

    def render(self) -> str:
        return "\n".join("".join(str(risk) for risk in row) for row in self.rows)


def parse_risk_grid(text: Union[str, Iterable[str]]) -> RiskGrid:
    """
    Parse a grid of risk digits.

    Args:
        text: Puzzle text or its lines. Blank lines are ignored.

    Returns:
        RiskGrid of the parsed digits.

    Raises:
        PuzzleInputError: No rows, a character other than the digits 1-9,
            or ragged rows.
    """
    rows: List[Tuple[int, ...]] = []
    for line_no, line in enumerate(split_lines(text), start=1):
        line = line.strip()
        if not line:
            continue
        if not _ROW_RE.match(line):
            raise PuzzleInputError(f"Line {line_no}: expected only digits 1-9, got {line!r}")
        rows.append(tuple(int(ch) for ch in line))

    if not rows:
        raise PuzzleInputError("Risk grid is empty")
    width = len(rows[0])
    for index, row in enumerate(rows):
        if len(row) != width:
            raise PuzzleInputError(
                f"Row {index + 1} has width {len(row)}, expected {width}"
            )
    return RiskGrid(tuple(rows))


def tile_grid(grid: RiskGrid, factor: int = DEFAULT_TILE_FACTOR) -> RiskGrid:
    """
    Repeat the grid ``factor`` times in both directions.

    The copy at tile (tile_row, tile_col) has every risk raised by
    tile_row + tile_col, wrapping values above 9 back around to 1.
    """
    if factor < 1:
        raise ValueError(f"Tile factor must be at least 1, got {factor}")
    rows = []
    for tile_row in range(factor):
        for row in grid.rows:
            new_row = []
            for tile_col in range(factor):
                shift = tile_row + tile_col
                new_row.extend((risk + shift - 1) % 9 + 1 for risk in row)
            rows.append(tuple(new_row))
    return RiskGrid(tuple(rows))


class GridRiskSpace(StateSpace):
    """
    State space over grid cells.

    State is a (row, col) cell. Each move to an axis-aligned neighbor costs
    the risk of the cell entered. The heuristic is the Euclidean distance to
    the goal, which never overestimates because every step costs at least 1.
    """

    def __init__(self, grid: RiskGrid, start: Cell = (0, 0), goal: Optional[Cell] = None):
        self.grid = grid
        self.start = start
        self.goal = goal if goal is not None else (grid.height - 1, grid.width - 1)
        for cell in (self.start, self.goal):
            if not grid.in_bounds(cell):
                raise ValueError(f"Cell {cell} is outside the {grid.height}x{grid.width} grid")

    def initial_state(self) -> Cell:
        return self.start

    def is_goal(self, state: Cell) -> bool:
        return state == self.goal

    def neighbors(self, state: Cell) -> List[Edge]:
        return [Edge(self.grid[cell], cell) for cell in self.grid.neighbors(*state)]

    def heuristic(self, state: Cell) -> float:
        return math.hypot(self.goal[0] - state[0], self.goal[1] - state[1])


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def search_grid(grid: RiskGrid, config: Optional[SearchConfig] = None) -> SearchResult:
    """Run the search on a grid and return the full result."""
    logger.debug(f"Searching {grid.height}x{grid.width} risk grid")
    return SearchDriver(GridRiskSpace(grid), config).run()


def lowest_total_risk(grid: RiskGrid, *, use_heuristic: bool = True) -> Optional[int]:
    """
    Lowest total risk from the top-left to the bottom-right cell.

    Args:
        grid: Risk grid.
        use_heuristic: A* with the Euclidean estimate; False runs Dijkstra.

    Returns:
        Total risk, or None when the goal cannot be reached.
    """
    config = SearchConfig(use_heuristic=use_heuristic, track_path=False)
    return search_grid(grid, config).cost


def solve_grid(text: Union[str, Iterable[str]], tile_factor: int = 1) -> Optional[int]:
    """Parse puzzle text, optionally tile it, and return the lowest total risk."""
    grid = parse_risk_grid(text)
    if tile_factor > 1:
        grid = tile_grid(grid, tile_factor)
    return lowest_total_risk(grid)


__all__ = [
    'RiskGrid',
    'GridRiskSpace',
    'parse_risk_grid',
    'tile_grid',
    'search_grid',
    'lowest_total_risk',
    'solve_grid',
    'DEFAULT_TILE_FACTOR',
]
