#!/usr/bin/env python3
"""
Command-line interface for puzzle searches.

Usage:
    puzzle-search grid input/day15.txt --tile 5
    puzzle-search burrow input/day23.txt --unfold --path
    python -m puzzle_search.cli grid input.txt --dijkstra --output results.json

Exit codes:
    0 - a path was found
    1 - no path exists
    2 - the input could not be read or parsed
    3 - the expansion budget was exhausted
"""

import json
import sys
import argparse
import logging
from datetime import datetime
from pathlib import Path

from . import __version__
from .errors import PuzzleInputError, SearchBudgetExceeded
from .puzzles.burrow import Burrow, BurrowSpace, parse_burrow, unfold_diagram
from .puzzles.grid import DEFAULT_TILE_FACTOR, GridRiskSpace, parse_risk_grid, tile_grid
from .search import SearchConfig, SearchDriver, SearchResult, StateSpace
from .sentry_config import capture_exception, init_sentry, tag_run
from .utils import read_lines

logger = logging.getLogger(__name__)

EXIT_FOUND = 0
EXIT_NO_PATH = 1
EXIT_BAD_INPUT = 2
EXIT_BUDGET = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="puzzle-search",
        description="Shortest-path search over puzzle state spaces",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("input", type=str, help="Puzzle input file")
    common.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    common.add_argument("--path", action="store_true", help="Print the optimal path")
    common.add_argument("--output", "-o", type=str, default=None,
                        help="Write JSON results to this file")
    common.add_argument("--max-expansions", type=int, default=None,
                        help="Abort after expanding this many states")
    common.add_argument("--log-every", type=int, default=0,
                        help="Log progress every N expansions")

    subparsers = parser.add_subparsers(dest="puzzle", required=True)

    grid = subparsers.add_parser("grid", parents=[common],
                                 help="Lowest total risk across a digit grid")
    grid.add_argument("--tile", type=int, default=1, metavar="N",
                      help=f"Tile the grid NxN with risk increments (puzzle part 2 uses {DEFAULT_TILE_FACTOR})")
    grid.add_argument("--dijkstra", action="store_true",
                      help="Ignore the distance heuristic")

    burrow = subparsers.add_parser("burrow", parents=[common],
                                   help="Least energy to sort the burrow")
    burrow.add_argument("--unfold", action="store_true",
                        help="Insert the two extra room rows (4-slot rooms)")

    return parser


def build_space(args: argparse.Namespace) -> StateSpace:
    """Read the input file and build the state space for the chosen puzzle."""
    lines = read_lines(args.input)
    if args.puzzle == "grid":
        grid = parse_risk_grid(lines)
        if args.tile > 1:
            grid = tile_grid(grid, args.tile)
        logger.info(f"Risk grid: {grid.height}x{grid.width}")
        return GridRiskSpace(grid)

    if args.unfold:
        lines = unfold_diagram(lines)
    start = parse_burrow(lines)
    logger.info(f"Burrow: {start.room_size}-slot rooms")
    return BurrowSpace(start)


def print_path(result: SearchResult):
    for index, step in enumerate(result.path):
        if isinstance(step.state, Burrow):
            print(f"\nStep {index}: +{step.edge_cost} (total {step.total_cost})")
            print(step.state.render())
        else:
            print(f"  {step.state}  +{step.edge_cost}  total={step.total_cost}")


def main(argv=None) -> int:
    """Main entry point for the puzzle-search CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s: %(message)s',
    )

    if init_sentry(release=f"puzzle-search@{__version__}"):
        tag_run(args.puzzle, args.input)

    try:
        space = build_space(args)
    except (OSError, PuzzleInputError) as e:
        logger.error(f"Cannot load {args.input}: {e}")
        return EXIT_BAD_INPUT
    except Exception as e:
        capture_exception(e)
        raise

    config = SearchConfig(
        use_heuristic=not getattr(args, "dijkstra", False),
        track_path=args.path or args.output is not None,
        max_expansions=args.max_expansions,
        log_every=args.log_every,
        verbose=args.verbose,
    )

    try:
        result = SearchDriver(space, config).run()
    except SearchBudgetExceeded as e:
        logger.error(f"{e} ({e.expanded} states expanded)")
        return EXIT_BUDGET
    except Exception as e:
        capture_exception(e)
        raise

    if result.found:
        print(f"Minimal cost: {result.cost}")
    else:
        print("No path exists")

    if args.path and result.path:
        print_path(result)

    if args.output is not None:
        output_path = Path(args.output)
        results = {
            "meta": {
                "timestamp": datetime.now().isoformat(),
                "version": __version__,
                "puzzle": args.puzzle,
                "input": args.input,
                "use_heuristic": config.use_heuristic,
            },
            "result": result.to_dict(),
        }
        with open(output_path, "w") as f:
            json.dump(results, f, indent=2)
        logger.info(f"Results saved to: {output_path}")

    return EXIT_FOUND if result.found else EXIT_NO_PATH


if __name__ == "__main__":
    sys.exit(main())
