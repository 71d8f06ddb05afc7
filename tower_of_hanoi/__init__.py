"""
Tower of Hanoi puzzle engine.

Components:
    - board.py     : Disk/peg model and board invariant
    - moves.py     : Move engine (legality, application)
    - history.py   : Undo/redo snapshot history
    - solver.py    : Optimal solutions and hints
    - playback.py  : Cancellable auto-solve stepping
    - controller.py: Game controller (GameController, GameView)
    - config.py    : Game configuration (GameConfig)
    - renderer.py  : matplotlib board rendering (BoardRenderer)
    - cli.py       : Terminal front end
"""

from .board import initial_board, is_valid_board
from .config import GameConfig
from .controller import GameController, GameView, Hint
from .history import History, HistoryEntry
from .moves import IllegalMoveError, apply_move, get_valid_moves, is_legal_move, make_move
from .playback import CancellationToken, Playback
from .solver import (
    moves_to_goal,
    next_hint,
    optimal_continuation,
    optimal_move_count,
    solve_from_scratch,
)
from .state import GameState

__all__ = [
    "GameConfig",
    "GameController",
    "GameView",
    "GameState",
    "Hint",
    "History",
    "HistoryEntry",
    "IllegalMoveError",
    "CancellationToken",
    "Playback",
    "initial_board",
    "is_valid_board",
    "is_legal_move",
    "apply_move",
    "make_move",
    "get_valid_moves",
    "solve_from_scratch",
    "optimal_continuation",
    "optimal_move_count",
    "next_hint",
    "moves_to_goal",
]
