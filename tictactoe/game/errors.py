"""
errors.py - Exceptions raised by the tic-tac-toe board

Both errors signal a broken call site. An attempt on an occupied cell is
not an error; Board.move() reports it through its return value and the
badmove event.
"""


class TicTacToeError(Exception):
    """Base class for errors raised by this package."""


class ArgumentError(TicTacToeError, TypeError):
    """
    Raised when Board.move() is called without all of
        player, x and y.

    """

    def __init__(self, msg="Arguments for `player`, `x` and `y` are required"):
        TicTacToeError.__init__(self, msg)


class RangeError(TicTacToeError, IndexError):
    """Raised when Board.move() coordinates fall outside the board."""

    def __init__(self, x, y, width, height):
        self.x = x
        self.y = y
        msg = f"Index out of range: ({x}, {y}) is not on a {width}x{height} board"
        TicTacToeError.__init__(self, msg)
