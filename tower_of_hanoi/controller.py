"""
Game controller: the single owner of puzzle state.

The Presentation Layer calls these synchronous methods for every gesture
(peg click, disk drag, button press) and reads `view()` to render.
"""

import time
from typing import Callable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .board import Board, copy_board, find_disk, top_disk
from .config import GameConfig
from .history import History, HistoryEntry
from .logger import log as logger
from .moves import can_drop, make_move
from .playback import Playback
from .solver import moves_to_goal, next_hint, optimal_move_count, solve_from_scratch
from .state import GameState


class Hint(BaseModel):
    """Suggested next move, shown until `expires_at` (controller clock time)."""

    model_config = ConfigDict(frozen=True)

    from_peg: int
    to_peg: int
    expires_at: float

    @property
    def move(self) -> Tuple[int, int]:
        return (self.from_peg, self.to_peg)


class GameView(BaseModel):
    """Read-only snapshot of everything the Presentation Layer draws."""

    model_config = ConfigDict(frozen=True)

    board: List[List[int]]
    disk_count: int
    move_count: int
    optimal_moves: int
    moves_remaining: int
    is_complete: bool
    target_peg: int
    selected_peg: Optional[int] = None
    dragging_disk: Optional[int] = None
    hint: Optional[Tuple[int, int]] = None
    is_auto_solving: bool = False
    can_undo: bool = False
    can_redo: bool = False
    solve_speed: str = "medium"


class GameController:
    """
    Owns the GameState, its History, the hint, the click selection, the drag
    payload and the auto-solve playback.

    Args:
        config: Game settings; defaults to GameConfig()
        clock: Monotonic time source used for hint expiry
    """

    def __init__(self, config: Optional[GameConfig] = None,
                 clock: Callable[[], float] = time.monotonic):
        self.config = config or GameConfig()
        self.clock = clock
        self.solve_speed = self.config.solve_speed
        self.state = GameState.new(self.config.disk_count)
        self.history = History(self.state.board)
        self.selected_peg: Optional[int] = None
        self.dragging_disk: Optional[int] = None
        self._hint: Optional[Hint] = None
        self._playback: Optional[Playback] = None

    # ══════════════════════════════════════════════════════════════════════════
    #  STATE QUERIES
    # ══════════════════════════════════════════════════════════════════════════

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def disk_count(self) -> int:
        return self.state.disk_count

    @property
    def move_count(self) -> int:
        return self.state.move_count

    @property
    def optimal_moves(self) -> int:
        return optimal_move_count(self.disk_count)

    @property
    def is_complete(self) -> bool:
        return self.state.is_complete(self.config.target_peg)

    @property
    def is_auto_solving(self) -> bool:
        return self._playback is not None and self._playback.running

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo and not self.is_auto_solving

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo and not self.is_auto_solving

    @property
    def playback(self) -> Optional[Playback]:
        return self._playback

    def view(self) -> GameView:
        hint = self.active_hint()
        return GameView(
            board=copy_board(self.board),
            disk_count=self.disk_count,
            move_count=self.move_count,
            optimal_moves=self.optimal_moves,
            moves_remaining=moves_to_goal(self.board, self.disk_count, self.config.target_peg),
            is_complete=self.is_complete,
            target_peg=self.config.target_peg,
            selected_peg=self.selected_peg,
            dragging_disk=self.dragging_disk,
            hint=hint.move if hint else None,
            is_auto_solving=self.is_auto_solving,
            can_undo=self.can_undo,
            can_redo=self.can_redo,
            solve_speed=self.solve_speed,
        )

    # ══════════════════════════════════════════════════════════════════════════
    #  GAME LIFECYCLE
    # ══════════════════════════════════════════════════════════════════════════

    def reset(self, disk_count: Optional[int] = None) -> None:
        """
        Start a fresh game with all disks on the first peg.

        Raises:
            ValueError: if `disk_count` is outside the configured range
        """
        count = self.disk_count if disk_count is None else self.config.check_disk_count(disk_count)
        self._cancel_playback()
        self._restart_board(count)
        logger.info(f"New game with {count} disks (optimal: {optimal_move_count(count)} moves)")

    def _restart_board(self, disk_count: int) -> None:
        self.state = GameState.new(disk_count)
        self.history.reset(self.state.board)
        self.selected_peg = None
        self.dragging_disk = None
        self.clear_hint()

    # ══════════════════════════════════════════════════════════════════════════
    #  MOVES AND GESTURES
    # ══════════════════════════════════════════════════════════════════════════

    def attempt_move(self, src: int, dst: int) -> bool:
        """Try a player move; returns False (state unchanged) if it is rejected."""
        if self.is_auto_solving:
            logger.debug(f"Move {src} -> {dst} rejected: auto-solve running")
            return False
        return self._move(src, dst)

    def _move(self, src: int, dst: int) -> bool:
        if not make_move(self.state, src, dst):
            return False
        self.clear_hint()
        self.history.record(self.board, self.move_count)
        if self.is_complete:
            logger.info(f"Puzzle solved in {self.move_count} moves (optimal: {self.optimal_moves})")
        return True

    def select_peg(self, peg: int) -> bool:
        """
        Handle a click on `peg`.

        The first click selects a non-empty peg; the second click on another
        peg attempts the move. Selection is cleared after the second click.

        Returns:
            True only when the click completed a legal move
        """
        if self.is_auto_solving or self.dragging_disk is not None:
            return False
        if self.selected_peg is None:
            if self.board[peg]:
                self.selected_peg = peg
            return False
        src, self.selected_peg = self.selected_peg, None
        if src == peg:
            return False
        return self.attempt_move(src, peg)

    def drag_start(self, disk: int) -> bool:
        """Pick up `disk` for dragging; only a top disk can be picked."""
        if self.is_auto_solving:
            return False
        peg = find_disk(self.board, disk)
        if peg < 0 or top_disk(self.board, peg) != disk:
            return False
        self.dragging_disk = disk
        self.selected_peg = None
        return True

    def drag_end(self) -> None:
        self.dragging_disk = None

    def drop(self, peg: int) -> bool:
        """Drop the dragged disk on `peg`; the drag ends whether or not the move is legal."""
        disk, self.dragging_disk = self.dragging_disk, None
        if disk is None:
            return False
        src = next((i for i, p in enumerate(self.board) if p and p[-1] == disk), -1)
        if src < 0:
            return False
        return self.attempt_move(src, peg)

    def drop_validity(self, peg: int) -> Optional[bool]:
        """Whether the dragged disk may land on `peg`; None when nothing is dragged."""
        if self.dragging_disk is None:
            return None
        return can_drop(self.board, self.dragging_disk, peg)

    # ══════════════════════════════════════════════════════════════════════════
    #  HISTORY
    # ══════════════════════════════════════════════════════════════════════════

    def undo(self) -> bool:
        if self.is_auto_solving:
            return False
        return self._restore(self.history.undo())

    def redo(self) -> bool:
        if self.is_auto_solving:
            return False
        return self._restore(self.history.redo())

    def _restore(self, entry: Optional[HistoryEntry]) -> bool:
        if entry is None:
            return False
        self.state.board = entry.board
        self.state.move_count = entry.move_count
        self.selected_peg = None
        self.clear_hint()
        return True

    # ══════════════════════════════════════════════════════════════════════════
    #  HINTS
    # ══════════════════════════════════════════════════════════════════════════

    def request_hint(self) -> Optional[Hint]:
        """Compute the next optimal move and show it for `hint_lifetime` seconds."""
        if self.is_auto_solving or self.is_complete:
            return None
        self.clear_hint()
        move = next_hint(self.board, self.disk_count, self.config.target_peg)
        if move is None:
            return None
        self._hint = Hint(
            from_peg=move[0],
            to_peg=move[1],
            expires_at=self.clock() + self.config.hint_lifetime,
        )
        return self._hint

    def active_hint(self) -> Optional[Hint]:
        """The current hint, or None once it has expired."""
        if self._hint is not None and self.clock() >= self._hint.expires_at:
            self._hint = None
        return self._hint

    def clear_hint(self) -> None:
        self._hint = None

    # ══════════════════════════════════════════════════════════════════════════
    #  AUTO-SOLVE
    # ══════════════════════════════════════════════════════════════════════════

    def set_speed(self, preset: str) -> float:
        """Select an auto-solve speed preset; returns its delay in seconds."""
        delay = self.config.speed_delay(preset)
        self.solve_speed = preset
        if self._playback is not None:
            self._playback.delay = delay
        return delay

    def start_auto_solve(self, speed: Optional[str] = None) -> Playback:
        """
        Reset the board and prepare playback of the full optimal solution.

        The caller's scheduler drives it with `step_auto_solve()` every
        `playback.delay` seconds.
        """
        if speed is not None:
            self.set_speed(speed)
        self._cancel_playback()
        self._restart_board(self.disk_count)
        moves = solve_from_scratch(self.disk_count, 0, self.config.target_peg)
        self._playback = Playback(moves, self._move, self.config.speed_delay(self.solve_speed))
        logger.info(f"Auto-solve started: {len(self._playback.moves)} moves at {self.solve_speed} speed")
        return self._playback

    def step_auto_solve(self) -> Optional[Tuple[int, int]]:
        """Apply the next auto-solve move; None once finished or cancelled."""
        if self._playback is None:
            return None
        move = self._playback.step()
        if move is not None and self._playback.finished:
            logger.info(f"Auto-solve finished in {self.move_count} moves")
        return move

    def stop_auto_solve(self) -> None:
        if self.is_auto_solving:
            logger.info(f"Auto-solve stopped after {self.move_count} moves")
        self._cancel_playback()

    def _cancel_playback(self) -> None:
        if self._playback is not None:
            self._playback.cancel()
        self._playback = None
