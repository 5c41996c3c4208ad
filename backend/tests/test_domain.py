"""
Tests for the domain entities: Snake and GameState.
"""

import os
import sys
from collections import deque

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import Snake, GameState, PLAYING, GAME_OVER, RIGHT  # noqa: E402


class TestSnake:
    """Tests for the Snake class."""

    def test_snake_initialization_with_single_position(self):
        """Snake initializes with a single position."""
        snake = Snake([(5, 5)])
        assert list(snake.positions) == [(5, 5)]
        assert snake.alive is True
        assert snake.death_reason is None
        assert snake.death_tick is None

    def test_snake_head_and_tail(self):
        """head is the first position, tail the last."""
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        assert snake.head == (5, 5)
        assert snake.tail == (3, 5)
        assert len(snake) == 3

    def test_snake_positions_is_deque(self):
        """Snake positions are stored as a deque for cheap head/tail updates."""
        snake = Snake([(5, 5)])
        assert isinstance(snake.positions, deque)

    def test_empty_snake_rejected(self):
        """A snake must occupy at least one cell."""
        with pytest.raises(ValueError):
            Snake([])

    def test_grow_and_drop_tail(self):
        """grow_to prepends a head; drop_tail removes and returns the tail."""
        snake = Snake([(3, 3), (2, 3)])
        snake.grow_to((4, 3))
        assert snake.to_list() == [(4, 3), (3, 3), (2, 3)]
        assert snake.drop_tail() == (2, 3)
        assert snake.to_list() == [(4, 3), (3, 3)]

    def test_contains_and_occupied(self):
        """Membership covers every segment including the tail."""
        snake = Snake([(3, 3), (2, 3), (1, 3)])
        assert (1, 3) in snake
        assert (0, 3) not in snake
        assert snake.occupied() == {(3, 3), (2, 3), (1, 3)}

    def test_kill_records_reason(self):
        """kill() marks the snake dead with a reason and tick."""
        snake = Snake([(5, 5)])
        snake.kill("self", 12)
        assert snake.alive is False
        assert snake.death_reason == "self"
        assert snake.death_tick == 12


class TestGameState:
    """Tests for the GameState snapshot."""

    def _state(self, **overrides):
        params = dict(
            tick=3,
            snake_positions=[(2, 1), (1, 1)],
            food=(4, 0),
            score=1,
            status=PLAYING,
            heading=RIGHT,
            width=5,
            height=3,
            difficulty="Normal",
        )
        params.update(overrides)
        return GameState(**params)

    def test_print_board_marks_cells(self):
        """print_board() shows the head, body and food on the right rows."""
        board = self._state().print_board().split("\n")

        assert board[0] == " 0 . . . . F"
        assert board[1] == " 1 . S H . ."
        assert board[2] == " 2 . . . . ."
        assert board[3] == "   0 1 2 3 4"

    def test_print_board_without_food(self):
        """A missing food cell is simply not drawn."""
        board = self._state(food=None).print_board()
        assert "F" not in board

    def test_to_dict_is_json_friendly(self):
        """to_dict() converts tuples to lists."""
        data = self._state(status=GAME_OVER, death_reason="self").to_dict()

        assert data["snake_positions"] == [[2, 1], [1, 1]]
        assert data["food"] == [4, 0]
        assert data["status"] == GAME_OVER
        assert data["death_reason"] == "self"
        assert data["width"] == 5 and data["height"] == 3

    def test_head_property(self):
        """head is the first snake cell."""
        assert self._state().head == (2, 1)

    def test_repr(self):
        """GameState has a useful string representation."""
        repr_str = repr(self._state())
        assert "tick=3" in repr_str
        assert "score=1" in repr_str
