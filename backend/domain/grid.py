"""
Toroidal grid arithmetic.

Every coordinate produced here is inside the board: moving past an edge
re-enters from the opposite edge.
"""

from typing import Iterator, Tuple

from .constants import DIRECTION_DELTAS, GRID_SIZE, VALID_MOVES

Cell = Tuple[int, int]


def wrap(coord: int, axis_size: int) -> int:
    """Return coord folded into [0, axis_size) for any sign or magnitude."""
    # Python's modulo already takes the sign of the divisor
    return coord % axis_size


def step(cell: Cell, heading: str, width: int = GRID_SIZE, height: int = GRID_SIZE) -> Cell:
    """
    Move one cell in the given heading, wrapping both axes independently.

    Args:
        cell: Starting (x, y) cell
        heading: One of "UP", "DOWN", "LEFT", "RIGHT"
        width: Board width in cells
        height: Board height in cells

    Returns:
        The neighbouring cell after wraparound.

    Raises:
        ValueError: If heading is not a known direction.
    """
    if heading not in DIRECTION_DELTAS:
        raise ValueError(
            f"Unknown heading '{heading}'. Valid headings: {', '.join(sorted(VALID_MOVES))}"
        )
    dx, dy = DIRECTION_DELTAS[heading]
    x, y = cell
    return (wrap(x + dx, width), wrap(y + dy, height))


def all_cells(width: int = GRID_SIZE, height: int = GRID_SIZE) -> Iterator[Cell]:
    """Yield every cell of the board, row by row."""
    for y in range(height):
        for x in range(width):
            yield (x, y)
