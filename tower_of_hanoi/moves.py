"""
Move engine: legality, application and enumeration of single moves.

Illegal moves are rejected, not raised, when they come from the player
(`make_move` returns False). The pure `apply_move` raises instead, since an
illegal move there means a broken move sequence.
"""

from typing import List, Optional

from .board import NUM_PEGS, Board, Move, copy_board, top_disk
from .logger import log as logger
from .state import GameState


class IllegalMoveError(ValueError):
    """Raised when a move sequence contains a move that breaks the rules."""

    def __init__(self, move: Move, board: Board):
        self.move = move
        self.board = copy_board(board)
        super().__init__(f"Illegal move {move[0]} -> {move[1]} on board {board}")


def _peg_in_range(peg: int) -> bool:
    return 0 <= peg < NUM_PEGS


def is_legal_move(board: Board, src: int, dst: int) -> bool:
    """
    Check whether the top disk of `src` may be placed on `dst`.

    Legal iff the pegs differ, `src` holds a disk, and `dst` is empty or
    its top disk is strictly larger.
    """
    if src == dst or not (_peg_in_range(src) and _peg_in_range(dst)):
        return False
    disk = top_disk(board, src)
    if disk is None:
        return False
    target_top = top_disk(board, dst)
    return target_top is None or target_top > disk


def can_drop(board: Board, disk: Optional[int], dst: int) -> bool:
    """Check whether a dragged `disk` could be dropped on peg `dst`."""
    if disk is None or not _peg_in_range(dst):
        return False
    target_top = top_disk(board, dst)
    return target_top is None or disk < target_top


def get_valid_moves(board: Board) -> List[Move]:
    """Get all legal moves from the board, ordered by source then destination peg."""
    return [
        (src, dst)
        for src in range(NUM_PEGS)
        for dst in range(NUM_PEGS)
        if is_legal_move(board, src, dst)
    ]


def apply_move(board: Board, move: Move) -> Board:
    """
    Apply a move to the board and return the new board.

    Raises:
        IllegalMoveError: if the move is not legal on `board`
    """
    src, dst = move
    if not is_legal_move(board, src, dst):
        raise IllegalMoveError(move, board)
    new_board = copy_board(board)
    new_board[dst].append(new_board[src].pop())
    return new_board


def apply_moves(board: Board, moves: List[Move]) -> Board:
    """Replay a sequence of moves from `board`, returning the final board."""
    for move in moves:
        board = apply_move(board, move)
    return board


def make_move(state: GameState, src: int, dst: int) -> bool:
    """
    Move the top disk of `src` onto `dst` in place.

    Returns True and increments the move counter on a legal move. An illegal
    move leaves the state untouched and returns False.
    """
    if not is_legal_move(state.board, src, dst):
        logger.debug(f"Rejected illegal move {src} -> {dst}")
        return False
    disk = state.board[src].pop()
    state.board[dst].append(disk)
    state.move_count += 1
    logger.debug(f"Moved disk {disk} from peg {src} to peg {dst} (move {state.move_count})")
    return True
