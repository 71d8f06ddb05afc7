"""Owned game state: the board plus its move counter."""

from dataclasses import dataclass, field

from .board import Board, initial_board, is_solved


@dataclass
class GameState:
    """Mutable puzzle state, owned by a single controller."""

    disk_count: int
    board: Board = field(default_factory=list)
    move_count: int = 0

    def __post_init__(self):
        if not self.board:
            self.board = initial_board(self.disk_count)

    @classmethod
    def new(cls, disk_count: int) -> "GameState":
        return cls(disk_count=disk_count)

    def is_complete(self, target: int = 2) -> bool:
        return is_solved(self.board, self.disk_count, target)
