import argparse
import json
import logging
import random
import time
from typing import Dict, List, Optional

from config import load_config
from domain.constants import GAME_OVER, PLAYING
from domain.direction import validate_heading
from domain.game_state import GameState
from services.session import SessionController


def parse_moves(raw: Optional[str]) -> List[str]:
    """Split a comma-separated heading list such as 'RIGHT,up,LEFT'."""
    if not raw:
        return []
    return [validate_heading(token) for token in raw.split(",") if token.strip()]


def print_state(state: GameState) -> None:
    print(f"\nTick {state.tick} | {state.status} | score {state.score} | heading {state.heading}")
    print(state.print_board())


# -------------------------------
# Session Driver
# -------------------------------

def run_session(session: SessionController, moves: List[str], ticks: int, realtime: bool = False) -> Dict:
    """
    Play one session, feeding one scripted heading per tick.

    Args:
        session: The controller to drive
        moves: Headings requested before each tick, in order; the snake
            keeps its heading once the list runs out
        ticks: Maximum number of ticks to play
        realtime: Let the background clock drive ticks at the difficulty's
            pace instead of firing them back to back. Requests are then
            paced by sleeping on this thread, not by the clock, so the
            move-to-tick pairing is approximate: two requests can land in
            one tick and the later one replaces the earlier

    Returns:
        A dictionary summarizing the session.
    """
    session.start()

    if realtime:
        session.clock.run_in_background()
        interval = session.clock.interval_ms / 1000.0
        try:
            for i in range(ticks):
                if session.status != PLAYING:
                    break
                if i < len(moves):
                    session.request_direction(moves[i])
                time.sleep(interval)
        finally:
            session.clock.shutdown()
    else:
        for i in range(ticks):
            if session.status != PLAYING:
                break
            if i < len(moves):
                session.request_direction(moves[i])
            session.clock.fire()

    state = session.snapshot()
    return {
        "status": state.status,
        "score": state.score,
        "ticks": state.tick,
        "length": len(state.snake_positions),
        "difficulty": state.difficulty,
        "death_reason": state.death_reason,
        "game_over": state.status == GAME_OVER,
    }


# -------------------------------
# Main Entry Point
# -------------------------------
def main():
    parser = argparse.ArgumentParser(
        description="Run a headless snake session on a wrapping board."
    )
    parser.add_argument("--difficulty", type=str, required=False, default=None,
                        help="Easy, Normal or Hard, any case (default from SNAKE_DEFAULT_DIFFICULTY)")
    parser.add_argument("--moves", type=str, required=False, default="",
                        help="Comma-separated headings, one requested per tick (e.g. 'UP,UP,LEFT')")
    parser.add_argument("--ticks", type=int, required=False, default=50,
                        help="Maximum number of ticks to play")
    parser.add_argument("--seed", type=int, required=False, default=None,
                        help="Seed for food placement")
    parser.add_argument("--realtime", action="store_true",
                        help="Drive ticks from the game clock at the difficulty's pace")
    parser.add_argument("--show-board", action="store_true",
                        help="Print the board after every change")
    parser.add_argument("--env-file", type=str, required=False, default=None,
                        help="Extra .env file to load settings from")

    args = parser.parse_args()

    try:
        config = load_config(args.env_file)
    except ValueError as e:
        parser.error(str(e))
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    try:
        moves = parse_moves(args.moves)
    except ValueError as e:
        parser.error(str(e))

    session = SessionController(config=config, rng=random.Random(args.seed))
    if args.difficulty:
        try:
            session.set_difficulty(args.difficulty)
        except ValueError as e:
            parser.error(str(e))

    if args.show_board:
        session.subscribe(print_state)

    result = run_session(session, moves, args.ticks, realtime=args.realtime)

    print("\nSession Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
