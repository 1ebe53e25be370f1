"""
Osero package.
A two-player Reversi (Othello) game for the console.
"""

from .board import Board, CellKind, InvalidMove, Position, Side
from .game import MalformedPosition, OseroGame, TurnOutcome, parse_position

__all__ = [
    'Board', 'CellKind', 'InvalidMove', 'Position', 'Side',
    'MalformedPosition', 'OseroGame', 'TurnOutcome', 'parse_position',
]
