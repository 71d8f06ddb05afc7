"""
Cancellable step-wise playback of a move sequence.

The playback never waits on its own: an external scheduler (timer, event
loop, or the CLI's sleep loop) calls `step()` once per tick. A shared
CancellationToken is checked before every step.
"""

from typing import Callable, Iterable, List, Optional

from .board import Move
from .logger import log as logger


class CancellationToken:
    """Single shared flag; once cancelled it stays cancelled."""

    def __init__(self):
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True


class Playback:
    """
    Plays a list of moves through `apply`, one move per `step()` call.

    Args:
        moves: Moves to play, in order
        apply: Callback that performs one move and returns whether it succeeded
        delay: Seconds the scheduler should wait between steps
        token: Cancellation token; a fresh one is created if omitted
    """

    def __init__(self, moves: Iterable[Move], apply: Callable[[int, int], bool],
                 delay: float, token: Optional[CancellationToken] = None):
        self.moves: List[Move] = list(moves)
        self.delay = delay
        self.token = token or CancellationToken()
        self._apply = apply
        self._index = 0

    @property
    def position(self) -> int:
        return self._index

    @property
    def remaining(self) -> int:
        return len(self.moves) - self._index

    @property
    def finished(self) -> bool:
        return self._index >= len(self.moves)

    @property
    def running(self) -> bool:
        return not self.finished and not self.token.cancelled

    def cancel(self) -> None:
        self.token.cancel()

    def step(self) -> Optional[Move]:
        """
        Apply the next move.

        Returns:
            The move applied, or None if playback is finished, cancelled, or
            the move was rejected (which also cancels the playback).
        """
        if not self.running:
            return None
        move = self.moves[self._index]
        if not self._apply(*move):
            logger.warning(f"Playback move {move} rejected at step {self._index}; cancelling")
            self.cancel()
            return None
        self._index += 1
        return move
