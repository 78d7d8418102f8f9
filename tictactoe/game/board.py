"""
board.py - Board representation and core game mechanics for tic-tac-toe

This module implements the Board class which stores the marks placed on a
3x3 grid, validates and records moves, detects victory and draw, and
notifies registered handlers through named events.
"""

from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from tictactoe.debug import debug
from tictactoe.game.errors import ArgumentError, RangeError
from tictactoe.game.events import EventEmitter
from tictactoe.game.move import Move
from tictactoe.utils import (WIDTH, HEIGHT, CELL_COUNT, WINNING_LINES, BoardEvent,
                             cell_index, is_valid_position, line_positions)

_MISSING = object()


class Board(EventEmitter):
    """
    A tic-tac-toe board.

    Cells are stored in a flat object array indexed by y * width + x, each
    holding the Move that occupies it or None. Every successful move is also
    appended to the history in placement order.

    Events:
        reset()           after the board is cleared
        move(Move)        after a mark is placed
        victory(player)   after a move completes a line
        draw()            after a move fills the board without a line
        badmove(x, y)     after an attempt on an occupied cell
    """

    def __init__(self):
        """Initialize an empty board."""
        super().__init__()
        self._width = WIDTH
        self._height = HEIGHT
        debug.debug("Initializing new Board", "board")
        self.reset()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def state(self) -> np.ndarray:
        """Read-only view of the grid."""
        view = self._state.view()
        view.flags.writeable = False
        return view

    @property
    def move_count(self) -> int:
        return self._move_count

    @property
    def last_move(self) -> Optional[Move]:
        return self._history[-1] if self._history else None

    def reset(self) -> 'Board':
        """
        Clear the grid and the move history.

        Registered handlers are kept.

        Returns:
            The board, for chaining
        """
        debug.debug("Resetting board", "board")
        self._history = []
        self._state = np.full(self._width * self._height, None, dtype=object)
        self._move_count = 0
        self._emit(BoardEvent.RESET)
        return self

    def _get(self, x: int, y: int) -> Optional[Move]:
        return self._state[cell_index(x, y, self._width)]

    def is_available(self, x: int, y: int) -> bool:
        """True if no mark occupies (x, y). Bounds are not checked."""
        return not isinstance(self._get(x, y), Move)

    def is_full(self) -> bool:
        return self._move_count == CELL_COUNT

    def move(self, player: Any = _MISSING, x: int = _MISSING, y: int = _MISSING) -> bool:
        """
        Place a mark for a player.

        Args:
            player: Opaque player token
            x: Column index (0-indexed)
            y: Row index (0-indexed)

        Returns:
            True if the mark was placed, False if the cell was occupied

        Raises:
            ArgumentError: if player, x or y is missing
            RangeError: if (x, y) is off the board
        """
        if player is _MISSING or x is _MISSING or y is _MISSING:
            raise ArgumentError()
        if not is_valid_position(x, y):
            raise RangeError(x, y, self._width, self._height)

        debug.debug(f"Attempting move at ({x}, {y}) for player {player!r}", "board")

        if not self.is_available(x, y):
            debug.debug(f"Invalid move: ({x}, {y}) is occupied", "board")
            self._emit(BoardEvent.BADMOVE, x, y)
            return False

        item = Move(player, x, y)
        self._history.append(item)
        debug.trace(f"Placing {player!r} at index {item.index(self._width)}", "board")
        self._state[item.index(self._width)] = item
        self._move_count += 1
        self._emit(BoardEvent.MOVE, item)

        debug.start_timer("win_check")
        won = self.detect_victory(player)
        debug.end_timer("win_check", "board")

        if won:
            debug.info(f"Player {player!r} wins after move at ({x}, {y})", "board")
            self._emit(BoardEvent.VICTORY, player)
        elif self.is_full():
            debug.info("Game ends in a draw", "board")
            self._emit(BoardEvent.DRAW)

        return True

    def get_winning_line(self, player: Any) -> List[Tuple[int, int]]:
        """
        Get the first line fully owned by a player.

        Returns:
            List of (x, y) positions forming the line, or an empty list
        """
        for line in WINNING_LINES:
            cells = self._state[line]
            if all(cell is not None and cell.player == player for cell in cells):
                return line_positions(line, self._width)
        return []

    def detect_victory(self, player: Any) -> bool:
        """Check the rows, columns and diagonals for a line owned by player."""
        return bool(self.get_winning_line(player))

    def history(self) -> List[Dict[str, Any]]:
        """Snapshots of every move since the last reset, oldest first."""
        return [item.to_dict() for item in self._history]

    def __repr__(self) -> str:
        return f"Board(width={self._width}, height={self._height}, moves={self._move_count})"
