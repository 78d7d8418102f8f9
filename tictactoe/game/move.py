"""
move.py - Record of a single mark placed on the board
"""

import datetime
from dataclasses import dataclass, field
from typing import Any, Dict

from tictactoe.utils import WIDTH, cell_index


@dataclass(frozen=True)
class Move:
    """
    An immutable record that a player occupied a cell.

    Moves are created by Board.move() and owned by that board until it is
    reset. The player is opaque: any hashable or comparable token works.
    """
    player: Any
    x: int
    y: int
    time: datetime.datetime = field(default_factory=datetime.datetime.now, compare=False)

    def index(self, width: int = WIDTH) -> int:
        """Linear cell index of this move on a board of the given width."""
        return cell_index(self.x, self.y, width)

    def to_dict(self) -> Dict[str, Any]:
        """Plain snapshot of the move, safe to hand out to callers."""
        return {
            'player': self.player,
            'x': self.x,
            'y': self.y,
            'time': self.time,
        }
