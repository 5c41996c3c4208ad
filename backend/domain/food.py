"""
Food placement on the toroidal board.
"""

import logging
import random
from typing import Collection, Optional, Tuple

from .constants import GRID_SIZE
from .grid import all_cells

logger = logging.getLogger(__name__)

# Rejection sampling gives up after this many draws and samples the free list instead
DEFAULT_MAX_ATTEMPTS = 64

_default_rng = random.Random()


class BoardFullError(ValueError):
    """Raised when every cell is occupied and no food can be placed."""


def place_food(
    occupied: Collection[Tuple[int, int]],
    width: int = GRID_SIZE,
    height: int = GRID_SIZE,
    rng: Optional[random.Random] = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> Tuple[int, int]:
    """
    Return a random cell (x, y) not occupied by the snake.

    Draws uniformly from the whole board until a free cell turns up. After
    max_attempts misses the board is considered dense, so the explicit list
    of free cells is built and sampled directly. Both paths are uniform over
    the free cells.

    Args:
        occupied: Cells currently covered by the snake
        width: Board width in cells
        height: Board height in cells
        rng: Random source; the module-level generator when omitted
        max_attempts: Rejection-sampling budget before the fallback

    Returns:
        A free cell.

    Raises:
        BoardFullError: If there is no free cell at all.
    """
    rng = rng or _default_rng
    occupied = occupied if isinstance(occupied, (set, frozenset)) else set(occupied)

    for _ in range(max(0, max_attempts)):
        cell = (rng.randrange(width), rng.randrange(height))
        if cell not in occupied:
            return cell

    free_cells = [cell for cell in all_cells(width, height) if cell not in occupied]
    if not free_cells:
        raise BoardFullError(f"No free cell left on the {width}x{height} board.")

    logger.debug(
        "Rejection sampling missed %s times; picking from %s free cells",
        max_attempts,
        len(free_cells),
    )
    return rng.choice(free_cells)
