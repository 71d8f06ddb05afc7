import pytest
from loguru import logger

from tower_of_hanoi import GameConfig, GameController


class FakeClock:
    """Manually advanced time source."""

    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def controller(clock):
    return GameController(GameConfig(disk_count=3), clock=clock)


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger.remove()
    logger.disable("tower_of_hanoi")
