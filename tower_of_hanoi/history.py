"""
Linear undo/redo history of board snapshots.

The history is a list of immutable entries plus a cursor. Entries after the
cursor are redo-able; recording a new entry discards them.
"""

from typing import List, NamedTuple, Optional, Tuple

from .board import Board, state_key
from .logger import log as logger


class HistoryEntry(NamedTuple):
    """Immutable snapshot of a board and the move count it was reached at."""

    pegs: Tuple[Tuple[int, ...], ...]
    move_count: int

    @property
    def board(self) -> Board:
        """A fresh mutable copy of the snapshot's board."""
        return [list(p) for p in self.pegs]


class History:
    def __init__(self, initial_board: Board):
        self._entries: List[HistoryEntry] = []
        self._cursor = 0
        self.reset(initial_board)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def current(self) -> HistoryEntry:
        return self._entries[self._cursor]

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._entries) - 1

    def reset(self, initial_board: Board) -> None:
        self._entries = [HistoryEntry(state_key(initial_board), 0)]
        self._cursor = 0

    def record(self, board: Board, move_count: int) -> HistoryEntry:
        """Drop any redo-able entries, append a snapshot and move the cursor onto it."""
        del self._entries[self._cursor + 1:]
        entry = HistoryEntry(state_key(board), move_count)
        self._entries.append(entry)
        self._cursor = len(self._entries) - 1
        return entry

    def undo(self) -> Optional[HistoryEntry]:
        if not self.can_undo:
            return None
        self._cursor -= 1
        logger.debug(f"Undo to history index {self._cursor}")
        return self._entries[self._cursor]

    def redo(self) -> Optional[HistoryEntry]:
        if not self.can_redo:
            return None
        self._cursor += 1
        logger.debug(f"Redo to history index {self._cursor}")
        return self._entries[self._cursor]
