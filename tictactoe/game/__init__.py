"""
tictactoe.game - Core game mechanics for tic-tac-toe

This package contains the board state machine, the move record and the
event bus the board uses to notify observers.
"""

from tictactoe.game.board import Board
from tictactoe.game.errors import ArgumentError, RangeError, TicTacToeError
from tictactoe.game.events import Event, EventEmitter
from tictactoe.game.move import Move

__all__ = ['Board', 'Move', 'Event', 'EventEmitter', 'ArgumentError',
           'RangeError', 'TicTacToeError']
