"""Terminal front end for the Tower of Hanoi game."""
from __future__ import annotations

import argparse
import shlex
import sys
import time
from typing import Callable, List, Optional

from .board import format_board, parse_peg, peg_label
from .config import GameConfig
from .controller import GameController
from .logger import configure_logging
from .messages import (
    COMMAND_HELP,
    completion_message,
    get_message,
    goal_message,
    hint_message,
    stats_message,
)
from .renderer import BoardRenderer


def run_auto_solve(controller: GameController,
                   speed: Optional[str] = None,
                   sleep: Optional[Callable[[float], None]] = None,
                   on_step: Optional[Callable[[GameController], None]] = None) -> int:
    """
    Drive auto-solve playback to the end, sleeping between moves.

    Ctrl-C stops the playback between moves. Returns the number of moves played.
    """
    sleep = sleep or time.sleep
    playback = controller.start_auto_solve(speed)
    played = 0
    try:
        sleep(playback.delay)
        while controller.step_auto_solve() is not None:
            played += 1
            if on_step is not None:
                on_step(controller)
            if controller.is_auto_solving:
                sleep(playback.delay)
    except KeyboardInterrupt:
        controller.stop_auto_solve()
    return played


class GameShell:
    """
    Line-oriented command interpreter over a GameController.

    `execute` returns the text to show, so the shell can be driven without a
    terminal.
    """

    def __init__(self, controller: GameController,
                 renderer: Optional[BoardRenderer] = None,
                 sleep: Optional[Callable[[float], None]] = None):
        self.controller = controller
        self.renderer = renderer or BoardRenderer()
        self.sleep = sleep or time.sleep
        self.done = False

    def status(self) -> str:
        view = self.controller.view()
        lines = [format_board(view.board),
                 stats_message(view.move_count, view.optimal_moves, view.disk_count)]
        if view.selected_peg is not None:
            lines.append(f"Selected: Peg {peg_label(view.selected_peg)}")
        if view.is_complete:
            lines.append(completion_message(view.move_count, view.optimal_moves))
        return "\n".join(lines)

    def execute(self, line: str) -> str:
        """
        Run one command line.

        Raises:
            ValueError: for unknown commands or malformed arguments
        """
        args = shlex.split(line)
        if not args:
            return ""
        command, params = args[0].lower(), args[1:]
        handler = getattr(self, f"_cmd_{command}", None)
        if handler is None:
            raise ValueError(f"Unknown command: {command!r} (type 'help')")
        return handler(params)

    def _cmd_move(self, params: List[str]) -> str:
        if len(params) != 2:
            raise ValueError("usage: move FROM TO")
        src, dst = parse_peg(params[0]), parse_peg(params[1])
        if not self.controller.attempt_move(src, dst):
            return get_message("illegal")
        return self.status()

    def _cmd_click(self, params: List[str]) -> str:
        if len(params) != 1:
            raise ValueError("usage: click PEG")
        self.controller.select_peg(parse_peg(params[0]))
        return self.status()

    def _cmd_undo(self, params: List[str]) -> str:
        self.controller.undo()
        return self.status()

    def _cmd_redo(self, params: List[str]) -> str:
        self.controller.redo()
        return self.status()

    def _cmd_hint(self, params: List[str]) -> str:
        hint = self.controller.request_hint()
        if hint is None:
            return get_message("no_hint")
        return hint_message(hint.from_peg, hint.to_peg)

    def _cmd_solve(self, params: List[str]) -> str:
        speed = params[0].lower() if params else None

        def show(controller: GameController) -> None:
            print(self.status() + "\n")

        played = run_auto_solve(self.controller, speed, self.sleep, show)
        return f"Auto-solve played {played} moves."

    def _cmd_speed(self, params: List[str]) -> str:
        if len(params) != 1:
            raise ValueError("usage: speed slow|medium|fast")
        delay = self.controller.set_speed(params[0].lower())
        return f"Auto-solve speed: {params[0].lower()} ({delay:.1f}s per move)"

    def _cmd_reset(self, params: List[str]) -> str:
        if len(params) > 1:
            raise ValueError("usage: reset [DISKS]")
        self.controller.reset(int(params[0]) if params else None)
        return self.status()

    def _cmd_render(self, params: List[str]) -> str:
        if len(params) != 1:
            raise ValueError("usage: render PATH")
        path = self.renderer.save(self.controller.view(), params[0])
        return f"Saved board image to {path}"

    def _cmd_help(self, params: List[str]) -> str:
        return COMMAND_HELP

    def _cmd_quit(self, params: List[str]) -> str:
        self.done = True
        return "Bye."

    _cmd_exit = _cmd_quit

    def loop(self, read: Callable[[str], str] = input) -> None:
        print(f"{get_message('title')}: {goal_message(self.controller.config.target_peg)}")
        print(get_message("rules"))
        print(self.status())
        while not self.done:
            try:
                line = read("> ")
            except EOFError:
                break
            try:
                output = self.execute(line)
            except ValueError as e:
                output = f"Error: {e}"
            if output:
                print(output)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play the Tower of Hanoi in the terminal.")
    parser.add_argument("--disks", type=int, default=4, help="Number of disks, 3-12 (default: 4)")
    parser.add_argument(
        "--speed",
        choices=["slow", "medium", "fast"],
        default="medium",
        help="Auto-solve speed preset (default: medium)",
    )
    parser.add_argument("--solve", action="store_true", help="Auto-solve and exit instead of playing")
    parser.add_argument("--render", metavar="PATH", help="Save an image of the final board to PATH")
    parser.add_argument("--log-level", default="WARNING", help="Log level (default: WARNING)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = GameConfig(disk_count=args.disks, solve_speed=args.speed)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    shell = GameShell(GameController(config))
    if args.solve:
        print(shell.execute("solve"))
    else:
        shell.loop()

    if args.render:
        print(shell.execute(f"render {shlex.quote(args.render)}"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
