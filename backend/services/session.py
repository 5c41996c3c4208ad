"""
Session controller: the public contract between the snake core and any
presentation layer.

All writes to the session go through this class, under one reentrant lock
shared with the game clock, so input arriving on another thread can only
ever fill the direction mailbox.
"""

import logging
import random
import threading
from typing import Callable, List, Optional

from config import SessionConfig
from domain.constants import (
    GAME_OVER,
    INITIAL_DIRECTION,
    INITIAL_SNAKE,
    NOT_STARTED,
    PAUSED,
    PLAYING,
)
from domain.direction import validate_heading
from domain.engine import COLLISION, IDLE, SessionData, TickResult, advance
from domain.food import place_food
from domain.game_state import GameState
from domain.snake import Snake
from services.game_clock import GameClock


logger = logging.getLogger(__name__)

Listener = Callable[[GameState], None]


class SessionController:
    """
    Orchestrates one snake session.

    State machine:
        NotStarted --start()--> Playing --collision--> GameOver --restart()--> Playing
        Playing --pause()--> Paused --resume()--> Playing

    Args:
        config: Board size, difficulty table and food-placement budget
        rng: Random source for food placement (seed it for reproducible runs)
        clock: Pre-built GameClock; one driving tick() is created by default
    """

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        rng: Optional[random.Random] = None,
        clock: Optional[GameClock] = None,
    ):
        self.config = config or SessionConfig()
        self._rng = rng or random.Random()
        self._lock = threading.RLock()
        self._listeners: List[Listener] = []
        self._difficulty = self.config.default_difficulty
        self._data = self._fresh_data()
        self._data.food = self._place_food(self._data.snake)
        self.clock = clock or GameClock(
            self.tick,
            self.config.interval_ms(self._difficulty),
            lock=self._lock,
        )

    # --- Read side ---------------------------------------------------------

    @property
    def status(self) -> str:
        return self._data.status

    @property
    def difficulty(self) -> str:
        return self._difficulty

    @property
    def score(self) -> int:
        return self._data.score

    def snapshot(self) -> GameState:
        """Return a copy of the current state for presentation."""
        with self._lock:
            data = self._data
            return GameState(
                tick=data.tick,
                snake_positions=data.snake.to_list(),
                food=data.food,
                score=data.score,
                status=data.status,
                heading=data.heading,
                width=data.width,
                height=data.height,
                difficulty=self._difficulty,
                death_reason=data.snake.death_reason,
            )

    def subscribe(self, listener: Listener) -> None:
        """Register a callback receiving a snapshot after every change."""
        with self._lock:
            if listener not in self._listeners:
                self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    # --- Commands ------------------------------------------------------------

    def start(self) -> None:
        """Begin a fresh session. Same as restart()."""
        self.restart()

    def restart(self) -> None:
        """Reset snake, heading, score and food, then start ticking."""
        with self._lock:
            self.clock.stop()
            data = self._fresh_data()
            data.food = self._place_food(data.snake)
            data.status = PLAYING
            self._data = data
            self.clock.start()
            logger.info(
                "Session started: difficulty=%s (%sms/tick), food at %s",
                self._difficulty,
                self.clock.interval_ms,
                data.food,
            )
            self._notify()

    def request_direction(self, heading) -> bool:
        """
        Queue a heading change for the next tick.

        Args:
            heading: "UP", "DOWN", "LEFT" or "RIGHT" (case-insensitive)

        Returns:
            True if the request was queued; False when ignored because the
            session is not playing or the request reverses the snake.

        Raises:
            ValueError: If heading is not a known heading. Nothing changes.
        """
        heading = validate_heading(heading)
        with self._lock:
            if self._data.status != PLAYING:
                return False
            accepted = self._data.mailbox.put(self._data.heading, heading)
            if not accepted:
                logger.debug("Rejected reversal %s while heading %s", heading, self._data.heading)
            return accepted

    def set_difficulty(self, level: str) -> None:
        """
        Switch the tick rate. Level names match case-insensitively.

        An active (playing or paused) session is restarted so the whole run
        is played at one pace.

        Raises:
            ValueError: If level is not a configured difficulty. Nothing changes.
        """
        level = self.config.resolve_difficulty(level)

        with self._lock:
            previous = self._difficulty
            self._difficulty = level
            # Reconfigure without ticking; restart() below starts the clock
            self.clock.stop()
            self.clock.set_interval(self.config.interval_ms(level))
            logger.info("Difficulty changed: %s -> %s", previous, level)

            if self._data.status in (PLAYING, PAUSED):
                self.restart()
            else:
                self._notify()

    def pause(self) -> bool:
        """Freeze a playing session. Returns True if the state changed."""
        with self._lock:
            if self._data.status != PLAYING:
                return False
            self.clock.stop()
            self._data.status = PAUSED
            logger.info("Session paused at tick %s", self._data.tick)
            self._notify()
            return True

    def resume(self) -> bool:
        """Continue a paused session. Returns True if the state changed."""
        with self._lock:
            if self._data.status != PAUSED:
                return False
            self._data.status = PLAYING
            self.clock.start()
            logger.info("Session resumed at tick %s", self._data.tick)
            self._notify()
            return True

    def tick(self) -> TickResult:
        """Advance the session one step. This is the clock's callback."""
        with self._lock:
            result = advance(self._data, self._rng)
            if result.outcome == IDLE:
                return result

            if self._data.status == GAME_OVER:
                self.clock.stop()
                if result.outcome == COLLISION:
                    logger.info(
                        "Game over: collided with self at %s. Final score %s",
                        result.head,
                        self._data.score,
                    )
                else:
                    logger.info("Game over: board full. Final score %s", self._data.score)

            self._notify()
            return result

    # --- Internals -----------------------------------------------------------

    def _fresh_data(self) -> SessionData:
        size = self.config.grid_size
        cells = [(x % size, y % size) for x, y in INITIAL_SNAKE]
        return SessionData(
            snake=Snake(cells),
            heading=INITIAL_DIRECTION,
            width=size,
            height=size,
            status=NOT_STARTED,
            food_max_attempts=self.config.food_max_attempts,
        )

    def _place_food(self, snake: Snake):
        return place_food(
            snake.occupied(),
            self.config.grid_size,
            self.config.grid_size,
            rng=self._rng,
            max_attempts=self.config.food_max_attempts,
        )

    def _notify(self) -> None:
        if not self._listeners:
            return
        state = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("Session listener %r failed", listener)
