"""
Movement & collision engine: advances a session by exactly one tick.

The session controller owns a SessionData record and calls advance() from
its tick handler; nothing else writes the snake, food, score or status.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .constants import GAME_OVER, GRID_SIZE, INITIAL_DIRECTION, NOT_STARTED, PLAYING
from .direction import DirectionMailbox, propose
from .food import DEFAULT_MAX_ATTEMPTS, BoardFullError, place_food
from .grid import step
from .snake import Snake

logger = logging.getLogger(__name__)

MOVED = "moved"
ATE = "ate"
COLLISION = "collision"
IDLE = "idle"


@dataclass
class SessionData:
    """Mutable aggregate behind a session. Single writer: the controller."""

    snake: Snake
    food: Optional[Tuple[int, int]] = None
    heading: str = INITIAL_DIRECTION
    width: int = GRID_SIZE
    height: int = GRID_SIZE
    score: int = 0
    status: str = NOT_STARTED
    tick: int = 0
    food_max_attempts: int = DEFAULT_MAX_ATTEMPTS
    mailbox: DirectionMailbox = field(default_factory=DirectionMailbox)


@dataclass(frozen=True)
class TickResult:
    outcome: str
    head: Tuple[int, int]
    tick: int

    @property
    def grew(self) -> bool:
        return self.outcome == ATE


def advance(data: SessionData, rng: Optional[random.Random] = None) -> TickResult:
    """
    Execute one tick:
      1) Resolve the heading from the pending request (reversals rejected)
      2) Compute the new head with wraparound
      3) Self-collision against the whole pre-move body, tail included
      4) Prepend the new head
      5) Eat (score + new food) or drop the tail

    Returns:
        TickResult describing what happened. Nothing is mutated when the
        session is not playing.
    """
    snake = data.snake
    if data.status != PLAYING:
        return TickResult(IDLE, snake.head, data.tick)

    requested = data.mailbox.drain()
    if requested is not None:
        data.heading = propose(data.heading, requested)

    new_head = step(snake.head, data.heading, data.width, data.height)

    # The tail cell still counts even though it would vacate this tick
    if new_head in snake:
        snake.kill("self", data.tick)
        data.status = GAME_OVER
        logger.info(
            "Self-collision at %s on tick %s (score %s)", new_head, data.tick, data.score
        )
        return TickResult(COLLISION, new_head, data.tick)

    snake.grow_to(new_head)

    if new_head == data.food:
        data.score += 1
        try:
            data.food = place_food(
                snake.occupied(),
                data.width,
                data.height,
                rng=rng,
                max_attempts=data.food_max_attempts,
            )
        except BoardFullError:
            # Nowhere left to put food: the snake has covered the board
            data.food = None
            snake.kill("board_full", data.tick)
            data.status = GAME_OVER
            logger.info("Board filled on tick %s (score %s)", data.tick, data.score)
        outcome = ATE
    else:
        snake.drop_tail()
        outcome = MOVED

    logger.debug("Tick %s: %s to %s", data.tick, outcome, new_head)
    data.tick += 1
    return TickResult(outcome, new_head, data.tick - 1)
