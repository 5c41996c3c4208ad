"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, List, Tuple, Optional


class Snake:
    """
    Represents the organism on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        alive: whether the snake is still alive
        death_reason: e.g., 'self', 'board_full'
        death_tick: The tick number when the snake died
    """

    def __init__(self, positions: Iterable[Tuple[int, int]]):
        self.positions = deque(positions)
        if not self.positions:
            raise ValueError("A snake needs at least one cell.")
        self.alive = True
        self.death_reason: Optional[str] = None
        self.death_tick: Optional[int] = None

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Tuple[int, int]:
        """Return the tail position (last element)."""
        return self.positions[-1]

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, cell) -> bool:
        return cell in self.positions

    def occupied(self) -> set:
        return set(self.positions)

    def grow_to(self, new_head: Tuple[int, int]) -> None:
        """Prepend a new head, keeping the tail."""
        self.positions.appendleft(new_head)

    def drop_tail(self) -> Tuple[int, int]:
        return self.positions.pop()

    def kill(self, reason: str, tick: int) -> None:
        self.alive = False
        self.death_reason = reason
        self.death_tick = tick

    def to_list(self) -> List[Tuple[int, int]]:
        return list(self.positions)

    def __repr__(self):
        return f"<Snake head={self.head}, length={len(self)}, alive={self.alive}>"
