import importlib

from loguru import logger

import tower_of_hanoi.logger as hanoi_logger
from tower_of_hanoi.moves import make_move
from tower_of_hanoi.state import GameState


def test_import_keeps_existing_handlers():
    messages = []
    handler_id = logger.add(messages.append, format="{message}")
    try:
        importlib.reload(hanoi_logger)
        logger.info("host message")
    finally:
        logger.remove(handler_id)
    assert [m.strip() for m in messages] == ["host message"]


def test_library_is_silent_by_default():
    messages = []
    handler_id = logger.add(messages.append, format="{message}", level="DEBUG")
    try:
        importlib.reload(hanoi_logger)
        make_move(GameState.new(3), 0, 2)
    finally:
        logger.remove(handler_id)
    assert messages == []


def test_configure_logging_enables_package(capsys):
    hanoi_logger.configure_logging("DEBUG")
    try:
        make_move(GameState.new(3), 0, 2)
        assert "Moved disk 1 from peg 0 to peg 2" in capsys.readouterr().err
    finally:
        logger.remove()
        logger.disable("tower_of_hanoi")
