"""
Direction arbitration: turning raw heading requests into the heading used
by the next tick.
"""

from typing import Optional

from .constants import OPPOSITE, VALID_MOVES


def opposite(heading: str) -> str:
    """Return the heading pointing the other way."""
    return OPPOSITE[heading]


def validate_heading(token) -> str:
    """
    Normalize a heading token to one of the four canonical values.

    Args:
        token: A heading such as "UP" or "left"

    Returns:
        The upper-case heading.

    Raises:
        ValueError: If the token is not a known heading.
    """
    heading = token.strip().upper() if isinstance(token, str) else None
    if heading not in VALID_MOVES:
        available = ", ".join(sorted(VALID_MOVES))
        raise ValueError(f"Unknown heading '{token}'. Valid headings: {available}")
    return heading


def propose(current: str, requested: str) -> str:
    """Return requested unless it is a 180-degree reversal of current."""
    if requested == OPPOSITE[current]:
        return current
    return requested


class DirectionMailbox:
    """
    Single-slot mailbox holding the latest accepted heading request.

    Every request is checked against the heading committed at the last tick,
    never against another pending request, so UP-then-LEFT from RIGHT cannot
    sneak a reversal in before the snake has actually turned. A rejected
    reversal leaves the previous request in place.
    """

    def __init__(self):
        self._pending: Optional[str] = None

    def put(self, committed: str, requested: str) -> bool:
        """Store requested if it is legal from committed. Returns True if stored."""
        if propose(committed, requested) != requested:
            return False
        self._pending = requested
        return True

    def peek(self) -> Optional[str]:
        return self._pending

    def drain(self) -> Optional[str]:
        """Return and clear the pending request."""
        pending, self._pending = self._pending, None
        return pending

    def clear(self) -> None:
        self._pending = None

    def __repr__(self):
        return f"<DirectionMailbox pending={self._pending}>"
