"""
Tests for environment-driven configuration.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import config  # noqa: E402
from config import SessionConfig, load_config  # noqa: E402
from domain.constants import EASY, NORMAL, HARD, GAME_SPEEDS  # noqa: E402

ENV_VARS = [
    "SNAKE_GRID_SIZE",
    "SNAKE_DEFAULT_DIFFICULTY",
    "SNAKE_SPEED_EASY_MS",
    "SNAKE_SPEED_NORMAL_MS",
    "SNAKE_SPEED_HARD_MS",
    "SNAKE_FOOD_MAX_ATTEMPTS",
    "SNAKE_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    """Without overrides the built-in table is used."""
    cfg = load_config()
    assert cfg.grid_size == 20
    assert cfg.default_difficulty == NORMAL
    assert cfg.speeds == GAME_SPEEDS
    assert cfg.speeds[EASY] > cfg.speeds[NORMAL] > cfg.speeds[HARD]
    assert cfg.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    """SNAKE_* variables override the defaults."""
    monkeypatch.setenv("SNAKE_GRID_SIZE", "30")
    monkeypatch.setenv("SNAKE_DEFAULT_DIFFICULTY", "Hard")
    monkeypatch.setenv("SNAKE_SPEED_HARD_MS", "80")
    monkeypatch.setenv("SNAKE_FOOD_MAX_ATTEMPTS", "10")
    monkeypatch.setenv("SNAKE_LOG_LEVEL", "debug")

    cfg = load_config()

    assert cfg.grid_size == 30
    assert cfg.default_difficulty == HARD
    assert cfg.interval_ms(HARD) == 80
    assert cfg.interval_ms(EASY) == 200
    assert cfg.food_max_attempts == 10
    assert cfg.log_level == "DEBUG"


def test_env_file_is_loaded(tmp_path, monkeypatch):
    """An explicit .env file is read."""
    env_file = tmp_path / "snake.env"
    env_file.write_text("SNAKE_SPEED_EASY_MS=333\n")
    # Registered so monkeypatch removes the value load_dotenv writes
    monkeypatch.setenv("SNAKE_SPEED_EASY_MS", "1")

    cfg = load_config(str(env_file))

    assert cfg.interval_ms(EASY) == 333


@pytest.mark.parametrize(
    "name, value",
    [
        ("SNAKE_GRID_SIZE", "twenty"),
        ("SNAKE_GRID_SIZE", "1"),
        ("SNAKE_SPEED_NORMAL_MS", "0"),
        ("SNAKE_DEFAULT_DIFFICULTY", "Insane"),
        ("SNAKE_LOG_LEVEL", "verbose"),
    ],
)
def test_invalid_values_rejected(monkeypatch, name, value):
    """Unusable settings fail loudly at load time."""
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError):
        load_config()


def test_session_config_validation():
    """SessionConfig checks its own fields."""
    with pytest.raises(ValueError):
        SessionConfig(grid_size=0)
    with pytest.raises(ValueError):
        SessionConfig(speeds={EASY: 200})
    assert config.SessionConfig().interval_ms(NORMAL) == 150


def test_difficulty_names_ignore_case(monkeypatch):
    """Difficulty names resolve to their configured spelling in any case."""
    monkeypatch.setenv("SNAKE_DEFAULT_DIFFICULTY", "hard")

    cfg = load_config()

    assert cfg.default_difficulty == HARD
    assert cfg.resolve_difficulty(" EASY ") == EASY
    with pytest.raises(ValueError):
        cfg.resolve_difficulty("Insane")
