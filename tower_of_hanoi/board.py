"""
Disk/peg model for the Tower of Hanoi.

A board is a list of three pegs. Each peg lists disk sizes bottom-to-top,
so the last element is the top (movable) disk.
"""

from typing import List, Optional, Tuple

NUM_PEGS = 3
PEG_LABELS = ["A", "B", "C"]

Peg = List[int]
Board = List[Peg]
Move = Tuple[int, int]


def initial_board(num_disks: int, peg: int = 0) -> Board:
    """Create a board with all disks stacked on `peg`, largest at the bottom."""
    board: Board = [[] for _ in range(NUM_PEGS)]
    board[peg] = list(range(num_disks, 0, -1))
    return board


def copy_board(board: Board) -> Board:
    return [list(p) for p in board]


def state_key(board: Board) -> Tuple[Tuple[int, ...], ...]:
    """Convert board to hashable tuple for use in dictionaries and snapshots."""
    return tuple(tuple(p) for p in board)


def top_disk(board: Board, peg: int) -> Optional[int]:
    """Return the top disk of `peg`, or None if the peg is empty."""
    stack = board[peg]
    return stack[-1] if stack else None


def find_disk(board: Board, disk: int) -> int:
    """Return the index of the peg holding `disk`, or -1 if it is absent."""
    for idx, peg in enumerate(board):
        if disk in peg:
            return idx
    return -1


def is_valid_board(board: Board, num_disks: int) -> bool:
    """
    Check the board invariant.

    Every peg must be strictly decreasing bottom-to-top and the pegs together
    must hold each disk in 1..num_disks exactly once.
    """
    if len(board) != NUM_PEGS:
        return False
    for peg in board:
        for lower, upper in zip(peg, peg[1:]):
            if upper >= lower:
                return False
    disks = sorted(d for peg in board for d in peg)
    return disks == list(range(1, num_disks + 1))


def is_solved(board: Board, num_disks: int, target: int = 2) -> bool:
    return len(board[target]) == num_disks


def peg_label(peg: int) -> str:
    return PEG_LABELS[peg]


def parse_peg(token: str) -> int:
    """
    Parse a peg reference given as a label (A/B/C) or an index (0/1/2).

    Raises:
        ValueError: if the token names no peg
    """
    token = token.strip().upper()
    if token in PEG_LABELS:
        return PEG_LABELS.index(token)
    if token.isdigit() and int(token) < NUM_PEGS:
        return int(token)
    raise ValueError(f"Unknown peg: {token!r} (expected one of A, B, C)")


def format_board(board: Board) -> str:
    """Render the board as text, one peg per line, bottom disk first."""
    lines = []
    for idx, peg in enumerate(board):
        disks = " ".join(str(d) for d in peg) if peg else "(empty)"
        lines.append(f"Peg {peg_label(idx)}: {disks}")
    return "\n".join(lines)
