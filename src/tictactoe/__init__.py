"""tictactoe package.

Two-player console tic-tac-toe: board state machine, rendering, the
turn loop and a simple CLI.

Convenience imports are exposed for common workflows.
"""

from .board import Board, MoveError, OccupiedError, OutOfRangeError
from .console import play
from .game_basics import Player, get_winner

__all__ = [
    "Board",
    "MoveError",
    "OccupiedError",
    "OutOfRangeError",
    "Player",
    "get_winner",
    "play",
]
