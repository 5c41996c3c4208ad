"""
Domain entities for the snake session core.

This module contains the grid, snake, food and movement rules, which are
independent of timing and presentation concerns.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    EASY, NORMAL, HARD, GAME_SPEEDS,
    NOT_STARTED, PLAYING, PAUSED, GAME_OVER,
)
from .grid import wrap, step
from .snake import Snake
from .food import place_food, BoardFullError
from .direction import propose, opposite, validate_heading, DirectionMailbox
from .game_state import GameState
from .engine import SessionData, TickResult, advance

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'EASY', 'NORMAL', 'HARD', 'GAME_SPEEDS',
    'NOT_STARTED', 'PLAYING', 'PAUSED', 'GAME_OVER',
    'wrap', 'step',
    'Snake',
    'place_food', 'BoardFullError',
    'propose', 'opposite', 'validate_heading', 'DirectionMailbox',
    'GameState',
    'SessionData', 'TickResult', 'advance',
]
