"""Game configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


class ConfigError(ValueError):
    """Raised when a GameConfig holds values the simulation cannot run with."""


@dataclass(frozen=True)
class GameConfig:
    """Immutable constants for one game session.

    All distances are in playfield units (pixels in the reference front-end),
    all durations in milliseconds, all speeds in units per tick.

    Attributes:
        field_width: Playfield width.
        field_height: Playfield height. Objects at or below it are removed.
        player_width: Paddle width.
        player_height: Paddle height.
        player_margin: Gap between the paddle's bottom edge and the field floor.
        player_speed: Horizontal distance per tick while a direction key is held.
        object_size: Side of each square falling object.
        object_speed: Vertical distance per tick for every falling object.
        spawn_interval: Minimum wall-clock time between two spawns.
        combo_timeout: Window for the second press of the pause combo.
        combo_progress_scale: Progress value right after the first press.
        left_key: Key name that moves the paddle left.
        right_key: Key name that moves the paddle right.
    """

    field_width: float = 600.0
    field_height: float = 800.0
    player_width: float = 60.0
    player_height: float = 20.0
    player_margin: float = 20.0
    player_speed: float = 8.0
    object_size: float = 25.0
    object_speed: float = 4.0
    spawn_interval: float = 500.0
    combo_timeout: float = 4000.0
    combo_progress_scale: float = 50.0
    left_key: str = "ArrowLeft"
    right_key: str = "ArrowRight"

    def __post_init__(self) -> None:
        for name in (
            "field_width", "field_height", "player_width", "player_height",
            "player_speed", "object_size", "object_speed", "spawn_interval",
            "combo_timeout", "combo_progress_scale",
        ):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive")
        if self.player_margin < 0:
            raise ConfigError("player_margin must not be negative")
        if self.player_width > self.field_width:
            raise ConfigError("player_width exceeds field_width")
        if self.object_size > self.field_width:
            raise ConfigError("object_size exceeds field_width")
        if self.player_y < 0:
            raise ConfigError("player does not fit in field_height")
        if self.left_key == self.right_key:
            raise ConfigError("left_key and right_key must differ")

    @property
    def player_y(self) -> float:
        """Top edge of the paddle's fixed row."""
        return self.field_height - self.player_height - self.player_margin

    @property
    def combo_keys(self) -> tuple[str, str]:
        return (self.left_key, self.right_key)

    @property
    def player_start_x(self) -> float:
        return self.field_width / 2 - self.player_width / 2
