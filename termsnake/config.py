"""
termsnake - Configuration

All game parameters in one place. The module constants are the defaults;
``GameConfig.from_env`` lets any of them be overridden through ``TERMSNAKE_*``
environment variables or a ``.env`` file in the working directory.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .cell import Color
from .errors import ConfigError

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Geometry (terminal columns, rows)
CELL_SIZE = (2, 1)          # A cell is two columns wide so it looks square
GROUND_SIZE = (64, 32)      # Extent of the playfield including the wall

# Timing
TIME_STEP_MS = 150          # Simulation step
FRAME_INTERVAL_MS = TIME_STEP_MS // 2   # Render / input refresh

# Gameplay
INITIAL_LENGTH = 3
FOOD_PLACEMENT_ATTEMPTS = 1000

# Colors
FOOD_COLOR  = Color.RED
WALL_COLOR  = Color.BLUE
SNAKE_COLOR = Color.WHITE
TITLE_COLOR = Color.MAGENTA
SCORE_COLOR = Color.GREEN

# Header
TITLE = "Python Snake Game"
TITLE_POSITION = (10, 0)
SCORE_POSITION = (40, 0)

# Window mode
PIXELS_PER_COLUMN = 10      # A terminal column is half as wide as a row
PIXELS_PER_ROW = 20

# Logging
LOG_DIR = "logs"
LOG_LEVEL = "INFO"

ENV_PREFIX = "TERMSNAKE_"


@dataclass
class GameConfig:
    """Game parameters bundled for a single session."""

    cell_size: tuple = CELL_SIZE
    ground_size: tuple = GROUND_SIZE
    time_step_ms: int = TIME_STEP_MS
    frame_interval_ms: int = FRAME_INTERVAL_MS
    initial_length: int = INITIAL_LENGTH
    food_placement_attempts: int = FOOD_PLACEMENT_ATTEMPTS
    food_color: Color = FOOD_COLOR
    wall_color: Color = WALL_COLOR
    snake_color: Color = SNAKE_COLOR
    title: str = TITLE
    pixels_per_column: int = PIXELS_PER_COLUMN
    pixels_per_row: int = PIXELS_PER_ROW
    log_dir: str = LOG_DIR
    log_level: str = LOG_LEVEL
    seed: Optional[int] = None

    def __post_init__(self):
        self.validate()

    @property
    def time_step(self) -> float:
        """Simulation step in seconds."""
        return self.time_step_ms / 1000.0

    @property
    def frame_interval(self) -> float:
        """Render interval in seconds."""
        return self.frame_interval_ms / 1000.0

    def validate(self):
        cw, ch = self.cell_size
        if cw <= 0 or ch <= 0:
            raise ConfigError(f"cell size must be positive, got {self.cell_size}")
        if self.initial_length < 1:
            raise ConfigError("initial length must be at least 1")
        gw, gh = self.ground_size
        # Off-grid wall cells would sit between the snake's steps.
        if gw % cw or gh % ch:
            raise ConfigError(
                f"ground {self.ground_size} is not a whole number of "
                f"{self.cell_size} cells"
            )
        cols = gw // cw
        rows = gh // ch
        # The snake starts in the middle and trails to the left; its tail
        # must stay clear of the left wall (column 1).
        if cols // 2 - (self.initial_length - 1) < 2 or rows < 4:
            raise ConfigError(
                f"ground {self.ground_size} is too small for a snake of "
                f"length {self.initial_length}"
            )
        if self.time_step_ms <= 0 or self.frame_interval_ms <= 0:
            raise ConfigError("time step and frame interval must be positive")
        if self.food_placement_attempts < 0:
            raise ConfigError("food placement attempts cannot be negative")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigError(f"unknown log level {self.log_level!r}")

    @classmethod
    def from_env(cls, env=None, dotenv_path=None) -> "GameConfig":
        """Build a config from ``TERMSNAKE_*`` variables.

        ``env`` defaults to ``os.environ`` after loading ``.env``. Unset
        variables keep the module defaults.
        """
        if env is None:
            load_dotenv(dotenv_path)
            env = os.environ

        kwargs = {}
        for name, parse in _ENV_FIELDS.items():
            raw = env.get(ENV_PREFIX + name.upper())
            if raw is None or raw == "":
                continue
            try:
                kwargs[name] = parse(raw)
            except (ValueError, KeyError) as exc:
                raise ConfigError(
                    f"invalid value for {ENV_PREFIX}{name.upper()}: {raw!r}"
                ) from exc

        # Keep the frame interval at half a step unless it was set explicitly.
        if "time_step_ms" in kwargs and "frame_interval_ms" not in kwargs:
            kwargs["frame_interval_ms"] = max(1, kwargs["time_step_ms"] // 2)
        return cls(**kwargs)


# ---------------------------------------------------------------------------
# Environment parsing
# ---------------------------------------------------------------------------

def _parse_pair(raw: str) -> tuple:
    """Parse ``"64x32"`` or ``"64,32"`` into ``(64, 32)``."""
    parts = raw.lower().replace(",", "x").split("x")
    if len(parts) != 2:
        raise ValueError(raw)
    return int(parts[0]), int(parts[1])


def _parse_color(raw: str) -> Color:
    return Color[raw.strip().upper()]


_ENV_FIELDS = {
    "cell_size": _parse_pair,
    "ground_size": _parse_pair,
    "time_step_ms": int,
    "frame_interval_ms": int,
    "initial_length": int,
    "food_placement_attempts": int,
    "food_color": _parse_color,
    "wall_color": _parse_color,
    "snake_color": _parse_color,
    "title": str,
    "log_dir": str,
    "log_level": str.upper,
    "seed": int,
}
