import pytest

from tower_of_hanoi.board import initial_board, is_valid_board
from tower_of_hanoi.moves import apply_move, apply_moves
from tower_of_hanoi.solver import (
    moves_to_goal,
    next_hint,
    optimal_continuation,
    optimal_move_count,
    solve_from_scratch,
    third_peg,
)

from .test_board import reachable_boards


def test_three_disk_solution():
    moves = list(solve_from_scratch(3, 0, 2, 1))
    assert moves == [(0, 2), (0, 1), (2, 1), (0, 2), (1, 0), (1, 2), (0, 2)]
    assert apply_moves(initial_board(3), moves) == [[], [], [3, 2, 1]]


def test_zero_disks_yields_nothing():
    assert list(solve_from_scratch(0)) == []


@pytest.mark.parametrize("num_disks", range(1, 11))
def test_from_scratch_is_optimal_and_legal(num_disks):
    moves = list(solve_from_scratch(num_disks))
    assert len(moves) == optimal_move_count(num_disks) == 2 ** num_disks - 1
    board = initial_board(num_disks)
    for move in moves:
        # apply_move raises on a larger-on-smaller placement
        board = apply_move(board, move)
        assert is_valid_board(board, num_disks)
    assert board == [[], [], list(range(num_disks, 0, -1))]


def test_from_scratch_other_pegs():
    moves = list(solve_from_scratch(2, source=2, target=1))
    assert moves == [(2, 0), (2, 1), (0, 1)]


def test_third_peg():
    assert third_peg(0, 2) == 1
    assert third_peg(1, 0) == 2


class TestOptimalContinuation:

    def test_from_canonical_start_matches_from_scratch(self):
        board = initial_board(4)
        assert optimal_continuation(board, 4) == list(solve_from_scratch(4))

    def test_does_not_modify_board(self):
        board = [[3, 2], [], [1]]
        optimal_continuation(board, 3)
        assert board == [[3, 2], [], [1]]

    def test_solved_board_has_no_moves(self):
        assert optimal_continuation([[], [], [3, 2, 1]], 3) == []
        assert next_hint([[], [], [3, 2, 1]], 3) is None

    @pytest.mark.parametrize("num_disks", [3, 4])
    def test_every_reachable_board_is_solved_optimally(self, num_disks):
        goal = [[], [], list(range(num_disks, 0, -1))]
        for board in reachable_boards(num_disks):
            moves = optimal_continuation(board, num_disks)
            assert apply_moves(board, moves) == goal
            assert len(moves) == moves_to_goal(board, num_disks)

    def test_six_moves_left_after_misstep(self):
        assert moves_to_goal([[3, 2], [], [1]], 3) == 6


def test_hint_is_deterministic():
    board = [[3, 2], [], [1]]
    hints = {next_hint(board, 3) for _ in range(5)}
    assert hints == {(0, 1)}


def test_hint_from_start():
    assert next_hint(initial_board(3), 3) == (0, 2)
    assert next_hint(initial_board(4), 4) == (0, 1)
