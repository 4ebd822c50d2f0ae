"""Tests for the burrow reorganization state space."""

import pytest

from puzzle_search.errors import PuzzleInputError
from puzzle_search.puzzles.burrow import (
    HALLWAY_STOPS,
    Burrow,
    BurrowSpace,
    Token,
    minimal_energy,
    parse_burrow,
    search_burrow,
    unfold_diagram,
)
from puzzle_search.search import SearchConfig


SWAP_DIAGRAM = """\
#############
#...........#
###B#A#C#D###
  #########
"""


def make_burrow(rooms, hallway="...........", room_size=2):
    return Burrow(room_size, tuple(rooms), hallway)


class TestToken:

    def test_step_costs(self):
        assert [t.step_cost for t in Token] == [1, 10, 100, 1000]

    def test_target_rooms(self):
        assert [t.target_room for t in Token] == [0, 1, 2, 3]


class TestParseBurrow:

    def test_example(self, example_burrow_lines):
        burrow = parse_burrow(example_burrow_lines)
        assert burrow.room_size == 2
        assert burrow.rooms == ("AB", "DC", "CB", "AD")
        assert burrow.hallway == "..........."

    def test_unfolded_example(self, example_burrow_lines):
        burrow = parse_burrow(unfold_diagram(example_burrow_lines))
        assert burrow.room_size == 4
        assert burrow.rooms == ("ADDB", "DBCC", "CABB", "ACAD")

    def test_unfold_inserts_below_first_room_row(self, example_burrow_lines):
        lines = unfold_diagram(example_burrow_lines)
        assert lines[3] == "  #D#C#B#A#"
        assert lines[4] == "  #D#B#A#C#"
        assert len(lines) == 7

    def test_hallway_tokens_and_empty_slots(self):
        burrow = parse_burrow([
            "#############",
            "#A..........#",
            "###.#B#C#D###",
            "  #########",
        ])
        assert burrow.room_size == 1
        assert burrow.rooms == ("", "B", "C", "D")
        assert burrow.hallway == "A.........."

    def test_room_size_mismatch(self, example_burrow_lines):
        with pytest.raises(PuzzleInputError, match="room rows"):
            parse_burrow(example_burrow_lines, room_size=4)

    def test_missing_hallway(self):
        with pytest.raises(PuzzleInputError, match="hallway"):
            parse_burrow(["###B#C#B#D###"])

    def test_no_room_rows(self):
        with pytest.raises(PuzzleInputError, match="no room rows"):
            parse_burrow(["#############", "#...........#", "  #########"])

    def test_short_room_row(self):
        with pytest.raises(PuzzleInputError, match="slots"):
            parse_burrow(["#...........#", "###B#C#B###"])

    def test_floating_token(self):
        with pytest.raises(PuzzleInputError, match="above an empty slot"):
            parse_burrow([
                "#...........#",
                "###A#B#C#D###",
                "  #.#B#C#D#",
            ])

    def test_token_on_entrance(self):
        with pytest.raises(PuzzleInputError, match="entrance"):
            parse_burrow(["#..A........#", "###.#B#C#D###"])

    def test_wrong_token_counts(self):
        with pytest.raises(PuzzleInputError, match="tokens"):
            parse_burrow(["#...........#", "###A#A#C#D###"])


class TestBurrowState:

    def test_solved(self):
        solved = Burrow.solved(2)
        assert solved.rooms == ("AA", "BB", "CC", "DD")
        assert solved.is_sorted()

    def test_unsorted(self, example_burrow_lines):
        assert not parse_burrow(example_burrow_lines).is_sorted()

    def test_room_checks(self):
        burrow = make_burrow(["A", "BA", "", "DD"], hallway="...C.C.B...")
        assert burrow.room_accepts(0)
        assert not burrow.room_accepts(1)
        assert burrow.room_accepts(2)
        assert not burrow.room_accepts(3)
        assert burrow.room_has_foreign(1)
        assert not burrow.room_has_foreign(0)
        assert not burrow.room_has_foreign(2)

    def test_tokens(self):
        assert make_burrow(["AB", "", "", ""]).tokens(0) == (Token.A, Token.B)

    def test_render_round_trip(self, example_burrow_lines):
        burrow = parse_burrow(example_burrow_lines)
        assert burrow.render().splitlines() == [line.rstrip() for line in example_burrow_lines]
        assert parse_burrow(burrow.render()) == burrow

    def test_render_round_trip_unfolded(self, example_burrow_lines):
        burrow = parse_burrow(unfold_diagram(example_burrow_lines))
        assert parse_burrow(burrow.render()) == burrow

    def test_sort_key(self):
        burrow = make_burrow(["A", "BB", "", "DD"], hallway="...C.C.....")
        assert burrow.sort_key() == "...C.C.....|A.|BB|..|DD"
        assert str(burrow) == burrow.sort_key()

    def test_hashable_and_equal(self):
        assert make_burrow(["AB", "", "", ""]) == make_burrow(["AB", "", "", ""])
        assert len({make_burrow(["AB", "", "", ""]), make_burrow(["AB", "", "", ""])}) == 1


class TestBurrowMoves:

    def test_initial_moves(self, example_burrow_lines):
        """Every room releases its top token to all seven stops."""
        space = BurrowSpace(parse_burrow(example_burrow_lines))
        edges = space.neighbors(space.initial_state())
        assert len(edges) == 4 * len(HALLWAY_STOPS)

    def test_room_exit_cost(self, example_burrow_lines):
        """B leaving the third room for the cell left of the second room costs 40."""
        start = parse_burrow(example_burrow_lines)
        target = make_burrow(["AB", "DC", "C", "AD"], hallway="...B.......")
        costs = {state: cost for cost, state in BurrowSpace(start).neighbors(start)}
        assert costs[target] == 40

    def test_deeper_exit_costs_more(self):
        burrow = make_burrow(["B", "AA", "CC", "DD"], hallway=".........B.")
        # B in room 0 sits one slot deeper than a full room's top token
        costs = {state.hallway: cost for cost, state in BurrowSpace(burrow).neighbors(burrow)}
        assert costs["B........B."] == (2 + 2) * 10

    def test_enter_own_room(self):
        burrow = make_burrow(["A", "BB", "CC", "DD"], hallway=".A.........")
        edges = BurrowSpace(burrow).neighbors(burrow)
        assert len(edges) == 1
        cost, state = edges[0]
        assert cost == 2
        assert state.is_sorted()

    def test_no_entry_into_room_with_foreign_token(self):
        burrow = make_burrow(["B", "BA", "CC", "DD"], hallway="A..........")
        edges = BurrowSpace(burrow).neighbors(burrow)
        assert all(state.rooms[0] == "B" or state.rooms[0] == "" for _, state in edges)
        assert not any(state.rooms[0] == "BA" for _, state in edges)

    def test_sorted_room_keeps_its_tokens(self):
        burrow = make_burrow(["AA", "BC", "CB", "DD"])
        edges = BurrowSpace(burrow).neighbors(burrow)
        assert all(state.rooms[0] == "AA" and state.rooms[3] == "DD" for _, state in edges)

    def test_hallway_blocks_movement(self):
        burrow = Burrow(2, ("AB", "BA", "CC", "D"), "...D.......")
        edges = BurrowSpace(burrow).neighbors(burrow)
        from_room0 = {state.hallway for _, state in edges if state.rooms[0] == "A"}
        assert from_room0 == {"B..D.......", ".B.D......."}

    def test_no_stop_on_entrances(self, example_burrow_lines):
        space = BurrowSpace(parse_burrow(example_burrow_lines))
        for _, state in space.neighbors(space.initial_state()):
            assert all(state.hallway[cell] == "." for cell in (2, 4, 6, 8))


class TestMinimalEnergy:

    def test_already_sorted(self):
        assert minimal_energy(Burrow.solved(2)) == 0

    def test_single_slot_swap(self):
        """B waits left of room 1 while A steps aside to the right."""
        assert minimal_energy(parse_burrow(SWAP_DIAGRAM)) == 46

    def test_hallway_token_only(self):
        burrow = parse_burrow(["#A..........#", "###.#B#C#D###"])
        assert minimal_energy(burrow) == 3

    def test_path_is_consistent(self):
        result = search_burrow(parse_burrow(SWAP_DIAGRAM), SearchConfig(track_path=True))
        assert result.cost == 46
        assert result.path[0].state == parse_burrow(SWAP_DIAGRAM)
        assert result.path[-1].state.is_sorted()
        assert sum(step.edge_cost for step in result.path) == 46
        assert len(result.path) == 5

    def test_deadlock_has_no_solution(self):
        """D and A each block the other's way home."""
        burrow = parse_burrow(["#...D.A.....#", "###.#B#C#.###"])
        assert BurrowSpace(burrow).neighbors(burrow) == []
        assert minimal_energy(burrow) is None
