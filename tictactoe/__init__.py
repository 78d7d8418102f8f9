"""
tictactoe - Game-state library for a 3x3 tic-tac-toe board

This package tracks marks placed by players, detects victory and draw,
keeps the move history and notifies observers through named events.
"""

from tictactoe.game import (Board, Move, Event, ArgumentError, RangeError,
                            TicTacToeError)
from tictactoe.utils import BoardEvent

# Version number
__version__ = '0.1.0'

__all__ = ['Board', 'Move', 'Event', 'BoardEvent', 'ArgumentError',
           'RangeError', 'TicTacToeError']
