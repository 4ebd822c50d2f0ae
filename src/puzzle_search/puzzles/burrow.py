"""
Burrow reorganization search.

Four kinds of tokens (A, B, C, D) start shuffled across four side rooms and
must be sorted so that room 0 holds only A, room 1 only B, and so on. Tokens
move through an 11-cell hallway; each step costs 1, 10, 100 or 1000
depending on the token kind. The search finds the cheapest reorganization.

Layout (hallway cells 0-10, rooms open below cells 2, 4, 6 and 8):

    #############
    #...........#
    ###B#C#B#D###
      #A#D#C#A#
      #########

Movement rules:
    - A token never stops on a hallway cell directly above a room entrance.
    - A token leaves a room only if that room still holds a token that
      belongs elsewhere; it moves to any reachable hallway stop. Cells 0-1
      and 9-10 form the two holding areas at the hallway ends.
    - A token in the hallway only moves into its own room, and only when
      that room holds no foreign token.
    - No token may pass through an occupied hallway cell.

Usage:
    from puzzle_search.puzzles.burrow import parse_burrow, minimal_energy, unfold_diagram

    print(minimal_energy(parse_burrow(lines)))                    # 2-slot rooms
    print(minimal_energy(parse_burrow(unfold_diagram(lines))))    # 4-slot rooms
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple, Union
import re
import logging

from ..errors import PuzzleInputError
from ..search import SearchConfig, SearchDriver, SearchResult, StateSpace
from ..types import Edge
from ..utils import split_lines

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

HALLWAY_LENGTH = 11
ROOM_ENTRANCES = (2, 4, 6, 8)
HALLWAY_STOPS = tuple(cell for cell in range(HALLWAY_LENGTH) if cell not in ROOM_ENTRANCES)

# Extra rows inserted below the first room row for the unfolded layout
UNFOLDED_ROWS = ("  #D#C#B#A#", "  #D#B#A#C#")

_HALLWAY_RE = re.compile(r"^#([.A-D]{%d})#$" % HALLWAY_LENGTH)
_SLOT_RE = re.compile(r"[A-D.]")
_EMPTY = "."


class Token(Enum):
    """Token kinds, in room order."""
    A = "A"
    B = "B"
    C = "C"
    D = "D"

    @property
    def target_room(self) -> int:
        return TARGET_ROOM[self.value]

    @property
    def step_cost(self) -> int:
        return STEP_COST[self.value]


_TOKEN_ORDER = (Token.A, Token.B, Token.C, Token.D)

# Lookups keyed by the token character, used on the hot path
TARGET_ROOM = {token.value: index for index, token in enumerate(_TOKEN_ORDER)}
STEP_COST = {token.value: 10 ** index for index, token in enumerate(_TOKEN_ORDER)}
ROOM_TOKEN = tuple(token.value for token in _TOKEN_ORDER)

EMPTY_HALLWAY = _EMPTY * HALLWAY_LENGTH


# =============================================================================
# STATE
# =============================================================================

@dataclass(frozen=True)
class Burrow:
    """
    Complete arrangement of tokens.

    Tokens are stored as their letters so states hash cheaply.

    Attributes:
        room_size: Number of slots per room.
        rooms: Four stacks of token letters, bottom first; the last letter
            is the token nearest the hallway.
        hallway: The 11 hallway cells, "." for an empty cell.
    """
    room_size: int
    rooms: Tuple[str, ...]
    hallway: str = EMPTY_HALLWAY

    @classmethod
    def solved(cls, room_size: int) -> "Burrow":
        return cls(room_size, tuple(letter * room_size for letter in ROOM_TOKEN))

    def is_sorted(self) -> bool:
        return all(
            room == ROOM_TOKEN[index] * self.room_size
            for index, room in enumerate(self.rooms)
        )

    def room_accepts(self, index: int) -> bool:
        """True when the room has space and holds only its own tokens."""
        room = self.rooms[index]
        return len(room) < self.room_size and room == ROOM_TOKEN[index] * len(room)

    def room_has_foreign(self, index: int) -> bool:
        room = self.rooms[index]
        return room != ROOM_TOKEN[index] * len(room)

    def tokens(self, index: int) -> Tuple[Token, ...]:
        """Tokens of one room, bottom first."""
        return tuple(Token(letter) for letter in self.rooms[index])

    def sort_key(self) -> str:
        """Compact string form; also used as the frontier tie-break key."""
        rooms = "|".join(room.ljust(self.room_size, _EMPTY) for room in self.rooms)
        return f"{self.hallway}|{rooms}"

    def render(self) -> str:
        """Draw the burrow in the puzzle's diagram form."""
        lines = ["#" * (HALLWAY_LENGTH + 2), f"#{self.hallway}#"]
        for depth in range(self.room_size):
            slot = self.room_size - 1 - depth
            cells = "#".join(room[slot] if slot < len(room) else _EMPTY for room in self.rooms)
            if depth == 0:
                lines.append(f"###{cells}###")
            else:
                lines.append(f"  #{cells}#")
        lines.append("  " + "#" * 9)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.sort_key()


def _hallway_clear(hallway: str, start: int, end: int) -> bool:
    """True when every cell after ``start`` up to and including ``end`` is empty."""
    if start < end:
        return hallway[start + 1:end + 1] == _EMPTY * (end - start)
    return hallway[end:start] == _EMPTY * (start - end)


def _place(hallway: str, cell: int, letter: str) -> str:
    return hallway[:cell] + letter + hallway[cell + 1:]


# =============================================================================
# STATE SPACE
# =============================================================================

class BurrowSpace(StateSpace):
    """
    State space over burrow arrangements.

    Every move shifts a single token: out of a room onto a hallway stop, or
    from the hallway into its own room. The cost is the number of cells
    walked times the token's step cost. No cheap admissible estimate is
    used, so the search is plain Dijkstra.
    """

    def __init__(self, start: Burrow):
        self.start = start

    def initial_state(self) -> Burrow:
        return self.start

    def is_goal(self, state: Burrow) -> bool:
        return state.is_sorted()

    def neighbors(self, state: Burrow) -> List[Edge]:
        moves = self._moves_into_rooms(state)
        moves.extend(self._moves_out_of_rooms(state))
        return moves

    def tie_break_key(self, state: Burrow) -> str:
        return state.sort_key()

    def describe(self, state: Burrow) -> str:
        return state.sort_key()

    def _moves_into_rooms(self, state: Burrow) -> List[Edge]:
        moves = []
        for cell in HALLWAY_STOPS:
            letter = state.hallway[cell]
            if letter == _EMPTY:
                continue
            target = TARGET_ROOM[letter]
            if not state.room_accepts(target):
                continue
            entrance = ROOM_ENTRANCES[target]
            if not _hallway_clear(state.hallway, cell, entrance):
                continue
            room = state.rooms[target]
            steps = abs(cell - entrance) + (state.room_size - len(room))

            rooms = list(state.rooms)
            rooms[target] = room + letter
            moves.append(Edge(
                steps * STEP_COST[letter],
                Burrow(state.room_size, tuple(rooms), _place(state.hallway, cell, _EMPTY)),
            ))
        return moves

    def _moves_out_of_rooms(self, state: Burrow) -> List[Edge]:
        moves = []
        for index, room in enumerate(state.rooms):
            if not room or not state.room_has_foreign(index):
                continue
            letter = room[-1]
            entrance = ROOM_ENTRANCES[index]
            exit_steps = state.room_size - len(room) + 1

            rooms = list(state.rooms)
            rooms[index] = room[:-1]
            rooms = tuple(rooms)
            for cell in HALLWAY_STOPS:
                if not _hallway_clear(state.hallway, entrance, cell):
                    continue
                steps = exit_steps + abs(cell - entrance)
                moves.append(Edge(
                    steps * STEP_COST[letter],
                    Burrow(state.room_size, rooms, _place(state.hallway, cell, letter)),
                ))
        return moves


# =============================================================================
# PARSING
# =============================================================================

def parse_burrow(text: Union[str, Iterable[str]], room_size: Optional[int] = None) -> Burrow:
    """
    Parse a burrow diagram.

    Args:
        text: Diagram text or its lines.
        room_size: Expected number of slots per room. Defaults to the number
            of room rows in the diagram.

    Returns:
        The initial Burrow arrangement.

    Raises:
        PuzzleInputError: Missing hallway line, malformed room rows, a token
            floating above an empty slot, a token on a room entrance, or a
            token count that does not fill exactly one room per kind.
    """
    lines = [line.strip() for line in split_lines(text) if line.strip()]

    hallway_index = None
    hallway_cells = ""
    for index, line in enumerate(lines):
        match = _HALLWAY_RE.match(line)
        if match:
            hallway_index = index
            hallway_cells = match.group(1)
            break
    if hallway_index is None:
        raise PuzzleInputError("No hallway line (#...........#) found in burrow diagram")

    rows: List[List[str]] = []
    for line in lines[hallway_index + 1:]:
        slots = _SLOT_RE.findall(line)
        if not slots:
            break
        if len(slots) != len(ROOM_ENTRANCES):
            raise PuzzleInputError(
                f"Room row {line!r} has {len(slots)} slots, expected {len(ROOM_ENTRANCES)}"
            )
        rows.append(slots)

    if not rows:
        raise PuzzleInputError("Burrow diagram has no room rows")
    if room_size is None:
        room_size = len(rows)
    elif room_size != len(rows):
        raise PuzzleInputError(f"Diagram has {len(rows)} room rows, expected {room_size}")

    rooms = []
    for index in range(len(ROOM_ENTRANCES)):
        stack = ""
        seen_empty = False
        # Rows are listed top to bottom; stacks are built bottom first
        for row in reversed(rows):
            slot = row[index]
            if slot == _EMPTY:
                seen_empty = True
                continue
            if seen_empty:
                raise PuzzleInputError(f"Token {slot} in room {index} sits above an empty slot")
            stack += slot
        rooms.append(stack)

    for entrance in ROOM_ENTRANCES:
        if hallway_cells[entrance] != _EMPTY:
            raise PuzzleInputError(f"Token on room entrance cell {entrance}")

    burrow = Burrow(room_size, tuple(rooms), hallway_cells)
    _check_token_counts(burrow)
    return burrow


def _check_token_counts(burrow: Burrow):
    letters = "".join(burrow.rooms) + burrow.hallway
    for token in _TOKEN_ORDER:
        count = letters.count(token.value)
        if count != burrow.room_size:
            raise PuzzleInputError(
                f"Found {count} {token.value} tokens, expected {burrow.room_size}"
            )


def unfold_diagram(text: Union[str, Iterable[str]]) -> List[str]:
    """
    Insert the two extra room rows that turn 2-slot rooms into 4-slot rooms.

    The rows go directly below the first room row.
    """
    lines = [line for line in split_lines(text) if line.strip()]
    for index, line in enumerate(lines):
        if _HALLWAY_RE.match(line.strip()):
            insert_at = index + 2
            return lines[:insert_at] + list(UNFOLDED_ROWS) + lines[insert_at:]
    raise PuzzleInputError("No hallway line (#...........#) found in burrow diagram")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def search_burrow(burrow: Burrow, config: Optional[SearchConfig] = None) -> SearchResult:
    """Run the search on a burrow and return the full result."""
    logger.debug(f"Searching burrow with {burrow.room_size}-slot rooms")
    return SearchDriver(BurrowSpace(burrow), config).run()


def minimal_energy(burrow: Burrow) -> Optional[int]:
    """Least total energy to sort the burrow, or None if it cannot be sorted."""
    return search_burrow(burrow, SearchConfig(track_path=False)).cost


def solve_burrow(text: Union[str, Iterable[str]], unfold: bool = False) -> Optional[int]:
    """Parse a diagram, optionally unfold it, and return the least energy."""
    lines = unfold_diagram(text) if unfold else text
    return minimal_energy(parse_burrow(lines))


__all__ = [
    'Token',
    'Burrow',
    'BurrowSpace',
    'parse_burrow',
    'unfold_diagram',
    'search_burrow',
    'minimal_energy',
    'solve_burrow',
    'HALLWAY_LENGTH',
    'ROOM_ENTRANCES',
    'HALLWAY_STOPS',
]
