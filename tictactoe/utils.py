"""
utils.py - Constants, enumerations and helpers for the tic-tac-toe board

The board dimensions are fixed. Winning lines are precomputed as linear
cell indices so the victory check is a handful of array reads.
"""

from enum import Enum
from typing import Iterable, List, Tuple, Union

import numpy as np

# Board constants
WIDTH = 3
HEIGHT = 3
CELL_COUNT = WIDTH * HEIGHT


class BoardEvent(str, Enum):
    """Events emitted by a Board."""
    RESET = "reset"
    MOVE = "move"
    VICTORY = "victory"
    DRAW = "draw"
    BADMOVE = "badmove"

    def __str__(self):
        return self.value


def cell_index(x: int, y: int, width: int = WIDTH) -> int:
    """Linear index of the cell at (x, y)."""
    return y * width + x


def is_valid_position(x: int, y: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        x: Column index
        y: Row index

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= x < WIDTH and 0 <= y < HEIGHT


def _build_winning_lines() -> np.ndarray:
    lines = []
    for y in range(HEIGHT):
        lines.append([cell_index(x, y) for x in range(WIDTH)])
    for x in range(WIDTH):
        lines.append([cell_index(x, y) for y in range(HEIGHT)])
    lines.append([cell_index(i, i) for i in range(WIDTH)])
    lines.append([cell_index(WIDTH - 1 - i, i) for i in range(WIDTH)])
    return np.array(lines, dtype=int)


# Rows, then columns, then the two diagonals; shape (8, 3)
WINNING_LINES = _build_winning_lines()


def line_positions(line: Iterable[int], width: int = WIDTH) -> List[Tuple[int, int]]:
    """Convert a line of linear indices back into (x, y) tuples."""
    return [(int(index) % width, int(index) // width) for index in line]


EventNames = Union[str, BoardEvent, Iterable[Union[str, BoardEvent]]]


def split_event_names(events: EventNames) -> List[str]:
    """
    Normalize the event argument of on()/off() into a list of names.

    A string may hold several whitespace-separated names. BoardEvent members
    map to their value. Anything that is neither a string nor an iterable of
    names yields an empty list.
    """
    if isinstance(events, BoardEvent):
        return [events.value]
    if isinstance(events, str):
        return events.split()

    try:
        items = iter(events)
    except TypeError:
        return []

    names = []
    for item in items:
        if isinstance(item, BoardEvent):
            names.append(item.value)
        elif isinstance(item, str):
            names.extend(item.split())
    return names
