"""
GameState entity - a read-only snapshot of the session at a point in time.
"""

from typing import Any, Dict, List, Tuple, Optional


class GameState:
    """
    A snapshot of the session at a specific tick.

    Attributes:
        tick: number of ticks played in this session (0-based)
        snake_positions: list of (x, y), head first
        food: (x, y) of the food, or None before the first start
        score: foods eaten this session
        status: one of NotStarted, Playing, Paused, GameOver
        heading: heading committed at the last tick
        width, height: board dimensions
        difficulty: difficulty level name
        death_reason: why the session ended, if it has
    """

    def __init__(
        self,
        tick: int,
        snake_positions: List[Tuple[int, int]],
        food: Optional[Tuple[int, int]],
        score: int,
        status: str,
        heading: str,
        width: int,
        height: int,
        difficulty: str,
        death_reason: Optional[str] = None
    ):
        self.tick = tick
        self.snake_positions = snake_positions
        self.food = food
        self.score = score
        self.status = status
        self.heading = heading
        self.width = width
        self.height = height
        self.difficulty = difficulty
        self.death_reason = death_reason

    @property
    def head(self) -> Tuple[int, int]:
        return self.snake_positions[0]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = snake head
        S = snake body
        Row 0 is printed first, matching the screen coordinates the
        engine moves in (UP decreases y).
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'F'

        for pos_idx, (x, y) in enumerate(self.snake_positions):
            board[y][x] = 'H' if pos_idx == 0 else 'S'

        result = [f"{y:2d} {' '.join(board[y])}" for y in range(self.height)]
        # x-axis labels, last digit only so columns stay aligned
        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation; tuples become lists."""
        return {
            "tick": self.tick,
            "snake_positions": [list(cell) for cell in self.snake_positions],
            "food": list(self.food) if self.food is not None else None,
            "score": self.score,
            "status": self.status,
            "heading": self.heading,
            "width": self.width,
            "height": self.height,
            "difficulty": self.difficulty,
            "death_reason": self.death_reason,
        }

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, status={self.status}, food={self.food}, "
            f"length={len(self.snake_positions)}, score={self.score}>"
        )
