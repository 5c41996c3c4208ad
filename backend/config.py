"""
Runtime configuration for the snake session core.

Values come from the environment (a local .env file is loaded first), falling
back to the built-in defaults in domain.constants.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Optional

from dotenv import load_dotenv

from domain.constants import DEFAULT_DIFFICULTY, EASY, GAME_SPEEDS, GRID_SIZE, HARD, NORMAL
from domain.food import DEFAULT_MAX_ATTEMPTS

load_dotenv()


@dataclass
class SessionConfig:
    grid_size: int = GRID_SIZE
    default_difficulty: str = DEFAULT_DIFFICULTY
    speeds: Dict[str, int] = field(default_factory=lambda: dict(GAME_SPEEDS))
    food_max_attempts: int = DEFAULT_MAX_ATTEMPTS
    log_level: str = "INFO"

    def __post_init__(self):
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level '{self.log_level}'")
        if self.grid_size < 2:
            raise ValueError(f"Grid size must be at least 2, got {self.grid_size}")
        for level, interval in self.speeds.items():
            if interval <= 0:
                raise ValueError(f"Tick interval for {level} must be positive, got {interval}")
        self.default_difficulty = self.resolve_difficulty(self.default_difficulty)

    def resolve_difficulty(self, level) -> str:
        """
        Map a difficulty name to its configured spelling, ignoring case.

        Raises:
            ValueError: If no configured difficulty matches.
        """
        if isinstance(level, str):
            wanted = level.strip().lower()
            for name in self.speeds:
                if name.lower() == wanted:
                    return name
        available = ", ".join(self.speeds)
        raise ValueError(f"Unknown difficulty '{level}'. Available difficulties: {available}")

    def interval_ms(self, difficulty: str) -> int:
        return self.speeds[difficulty]


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'") from None


def load_config(env_file: Optional[str] = None) -> SessionConfig:
    """
    Build a SessionConfig from environment variables.

    Recognized variables:
        SNAKE_GRID_SIZE, SNAKE_DEFAULT_DIFFICULTY, SNAKE_SPEED_EASY_MS,
        SNAKE_SPEED_NORMAL_MS, SNAKE_SPEED_HARD_MS, SNAKE_FOOD_MAX_ATTEMPTS,
        SNAKE_LOG_LEVEL

    Raises:
        ValueError: If a variable holds an unusable value.
    """
    if env_file:
        load_dotenv(env_file, override=True)

    speeds = {
        EASY: _int_env("SNAKE_SPEED_EASY_MS", GAME_SPEEDS[EASY]),
        NORMAL: _int_env("SNAKE_SPEED_NORMAL_MS", GAME_SPEEDS[NORMAL]),
        HARD: _int_env("SNAKE_SPEED_HARD_MS", GAME_SPEEDS[HARD]),
    }
    return SessionConfig(
        grid_size=_int_env("SNAKE_GRID_SIZE", GRID_SIZE),
        default_difficulty=os.getenv("SNAKE_DEFAULT_DIFFICULTY", DEFAULT_DIFFICULTY).strip(),
        speeds=speeds,
        food_max_attempts=_int_env("SNAKE_FOOD_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS),
        log_level=os.getenv("SNAKE_LOG_LEVEL", "INFO").strip().upper(),
    )
