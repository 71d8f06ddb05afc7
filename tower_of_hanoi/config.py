"""
Game configuration.

Every knob the controller and the command line read lives here, validated by
pydantic so a bad disk count or speed preset fails at construction time.
"""

from pydantic import BaseModel, Field, model_validator


DEFAULT_SPEED_PRESETS = {"slow": 0.8, "medium": 0.5, "fast": 0.2}


class GameConfig(BaseModel):
    """
    Tower of Hanoi game settings.

    Times are in seconds: `hint_lifetime` is how long a hint stays visible,
    and each speed preset is the pause between auto-solve moves.
    """

    # ══════════════════════════════════════════════════════════════════════════
    #  PUZZLE SETTINGS
    # ══════════════════════════════════════════════════════════════════════════

    disk_count: int = Field(
        default=4,
        description="Number of disks for a new game (min_disks-max_disks)"
    )

    min_disks: int = Field(
        default=3,
        description="Smallest disk count the player may choose"
    )

    max_disks: int = Field(
        default=12,
        description="Largest disk count the player may choose"
    )

    target_peg: int = Field(
        default=2,
        ge=1,
        le=2,
        description="Peg that must hold the full stack to finish the puzzle (B or C; the game starts on A)"
    )

    # ══════════════════════════════════════════════════════════════════════════
    #  HINT / AUTO-SOLVE SETTINGS
    # ══════════════════════════════════════════════════════════════════════════

    hint_lifetime: float = Field(
        default=2.0,
        gt=0,
        description="Seconds a hint stays active before it expires"
    )

    solve_speed: str = Field(
        default="medium",
        description="Auto-solve speed preset name (key in speed_presets)"
    )

    speed_presets: dict[str, float] = Field(
        default_factory=lambda: dict(DEFAULT_SPEED_PRESETS),
        description="Delay in seconds between auto-solve moves, per preset"
    )

    @model_validator(mode="after")
    def _check_ranges(self) -> "GameConfig":
        if self.min_disks < 1 or self.min_disks > self.max_disks:
            raise ValueError(f"invalid disk range [{self.min_disks}, {self.max_disks}]")
        self.check_disk_count(self.disk_count)
        if self.solve_speed not in self.speed_presets:
            raise ValueError(
                f"unknown speed preset {self.solve_speed!r}; "
                f"choose from {sorted(self.speed_presets)}"
            )
        return self

    def check_disk_count(self, disk_count: int) -> int:
        """Return `disk_count` if it is in range, else raise ValueError."""
        if not self.min_disks <= disk_count <= self.max_disks:
            raise ValueError(
                f"disk count must be between {self.min_disks} and {self.max_disks}, got {disk_count}"
            )
        return disk_count

    def speed_delay(self, preset: str) -> float:
        """Delay in seconds for a speed preset name."""
        try:
            return self.speed_presets[preset]
        except KeyError:
            raise ValueError(
                f"unknown speed preset {preset!r}; choose from {sorted(self.speed_presets)}"
            ) from None
