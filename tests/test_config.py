import pytest
from pydantic import ValidationError

from tower_of_hanoi.config import GameConfig


def test_defaults():
    config = GameConfig()
    assert config.disk_count == 4
    assert (config.min_disks, config.max_disks) == (3, 12)
    assert config.target_peg == 2
    assert config.hint_lifetime == 2.0
    assert config.speed_presets == {"slow": 0.8, "medium": 0.5, "fast": 0.2}


@pytest.mark.parametrize("kwargs", [
    {"disk_count": 2},
    {"disk_count": 13},
    {"solve_speed": "warp"},
    {"hint_lifetime": 0},
    {"target_peg": 3},
    {"target_peg": 0},
    {"min_disks": 5, "max_disks": 4, "disk_count": 5},
])
def test_invalid_config(kwargs):
    with pytest.raises(ValidationError):
        GameConfig(**kwargs)


def test_speed_delay():
    config = GameConfig()
    assert config.speed_delay("medium") == 0.5
    with pytest.raises(ValueError):
        config.speed_delay("ludicrous")


def test_check_disk_count():
    config = GameConfig()
    assert config.check_disk_count(12) == 12
    with pytest.raises(ValueError):
        config.check_disk_count(0)


def test_start_peg_cannot_be_target():
    with pytest.raises(ValidationError):
        GameConfig(target_peg=0)
    assert GameConfig(target_peg=1).target_peg == 1
