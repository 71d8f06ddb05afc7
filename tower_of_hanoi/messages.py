"""
Player-facing text: instructions and status lines for the Presentation Layer.
"""

from .board import peg_label


# ══════════════════════════════════════════════════════════════════════════════
#  STATIC TEXT
# ══════════════════════════════════════════════════════════════════════════════

MESSAGES = {
    "title": "Tower of Hanoi",
    "rules": "Only smaller disks can be placed on larger ones",
    "controls": "Click to select a peg, then click destination. Or drag and drop disks directly",
    "illegal": "That move is not allowed.",
    "no_hint": "No hint available.",
}

COMMAND_HELP = """\
Commands:
  move X Y        move the top disk from peg X to peg Y (A/B/C or 0/1/2)
  click X         click peg X (select, then click a destination)
  undo / redo     step through move history
  hint            show the next optimal move
  solve [SPEED]   auto-solve from a fresh board (slow, medium, fast; Ctrl-C stops)
  speed SPEED     set the auto-solve speed
  reset [N]       start over, optionally with N disks
  render PATH     save a picture of the board
  help            show this help
  quit            leave the game"""


def get_message(key: str) -> str:
    """Look up a static message by key."""
    return MESSAGES[key]


def goal_message(target_peg: int) -> str:
    return f"Move all disks from Peg A to Peg {peg_label(target_peg)}"


def hint_message(from_peg: int, to_peg: int) -> str:
    return f"Hint: move the top disk from Peg {peg_label(from_peg)} to Peg {peg_label(to_peg)}"


def stats_message(move_count: int, optimal_moves: int, disk_count: int) -> str:
    return f"Moves: {move_count} | Optimal: {optimal_moves} | Disks: {disk_count}"


def completion_message(move_count: int, optimal_moves: int) -> str:
    """Congratulation line, noting whether the solution was optimal."""
    if move_count == optimal_moves:
        verdict = "Perfect! You found the optimal solution!"
    else:
        verdict = f"The optimal solution takes {optimal_moves} moves. Try again to improve!"
    return f"Puzzle solved in {move_count} moves! {verdict}"
