"""
Game constants for the snake session core.
"""

from typing import Dict, Tuple

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Screen coordinates: (0, 0) is the top-left cell, y grows downwards
DIRECTION_DELTAS: Dict[str, Tuple[int, int]] = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}
OPPOSITE: Dict[str, str] = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Board settings
GRID_SIZE = 20
INITIAL_SNAKE = [(5, 5)]
INITIAL_DIRECTION = RIGHT

# Difficulty levels -> tick interval in milliseconds
EASY = "Easy"
NORMAL = "Normal"
HARD = "Hard"
DEFAULT_DIFFICULTY = NORMAL
GAME_SPEEDS: Dict[str, int] = {
    EASY: 200,
    NORMAL: 150,
    HARD: 100,
}

# Session states
NOT_STARTED = "NotStarted"
PLAYING = "Playing"
PAUSED = "Paused"
GAME_OVER = "GameOver"
