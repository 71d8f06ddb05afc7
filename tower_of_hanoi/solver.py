"""
Optimal Tower of Hanoi solutions.

Two solvers share the classic recursion:
    - solve_from_scratch: all disks stacked on one peg, the 2^n - 1 moves
      used by auto-solve
    - optimal_continuation: any board reachable by legal moves, used for
      hints. Resolves the largest misplaced disk first and always uses the
      remaining third peg as auxiliary, so it is deterministic.
"""

from typing import Iterator, List, Optional

from .board import NUM_PEGS, Board, Move, copy_board, find_disk
from .logger import log as logger

# Goal peg is always the rightmost peg (index 2)
GOAL_PEG = 2


def optimal_move_count(num_disks: int) -> int:
    """Minimum number of moves for `num_disks` disks from the canonical start."""
    return (1 << num_disks) - 1


def third_peg(a: int, b: int) -> int:
    """Return the peg that is neither `a` nor `b`."""
    return NUM_PEGS - a - b


def solve_from_scratch(num_disks: int, source: int = 0, target: int = GOAL_PEG,
                       auxiliary: Optional[int] = None) -> Iterator[Move]:
    """
    Yield the moves that carry a stack of `num_disks` disks from `source` to `target`.

    Args:
        num_disks: Height of the stack to move (0 yields nothing)
        source: Peg currently holding the stack
        target: Peg the stack must end on
        auxiliary: Spare peg; defaults to the third peg

    Yields:
        (from_peg, to_peg) pairs, 2^num_disks - 1 of them
    """
    if auxiliary is None:
        auxiliary = third_peg(source, target)
    if num_disks:
        yield from solve_from_scratch(num_disks - 1, source, auxiliary, target)
        yield (source, target)
        yield from solve_from_scratch(num_disks - 1, auxiliary, target, source)


def optimal_continuation(board: Board, num_disks: int, target: int = GOAL_PEG) -> List[Move]:
    """
    Compute an optimal move sequence from `board` to all disks on `target`.

    The board must be reachable from the canonical start by legal moves; it
    is not modified.
    """
    moves: List[Move] = []
    scratch = copy_board(board)

    def push(src: int, dst: int) -> None:
        moves.append((src, dst))
        scratch[dst].append(scratch[src].pop())

    def from_scratch(disk: int, src: int, dst: int) -> None:
        for move in solve_from_scratch(disk, src, dst):
            push(*move)

    def solve_disk(disk: int, dst: int) -> None:
        if disk == 0:
            return
        current = find_disk(scratch, disk)
        if current == dst:
            solve_disk(disk - 1, dst)
            return
        aux = third_peg(current, dst)
        solve_disk(disk - 1, aux)
        push(current, dst)
        from_scratch(disk - 1, aux, dst)

    solve_disk(num_disks, target)
    return moves


def next_hint(board: Board, num_disks: int, target: int = GOAL_PEG) -> Optional[Move]:
    """Return the first move of the optimal continuation, or None if already solved."""
    moves = optimal_continuation(board, num_disks, target)
    if not moves:
        return None
    logger.debug(f"Hint {moves[0]} ({len(moves)} moves remaining)")
    return moves[0]


def moves_to_goal(board: Board, num_disks: int, target: int = GOAL_PEG) -> int:
    """
    Count the moves left in an optimal solution from `board`.

    Walks disks from largest to smallest; each misplaced disk d costs
    2^(d-1) and redirects the smaller stack to the remaining peg.
    """
    remaining = 0
    for disk in range(num_disks, 0, -1):
        peg = find_disk(board, disk)
        if peg != target:
            remaining += 1 << (disk - 1)
            target = third_peg(peg, target)
    return remaining
