"""
Board state machine for a two-player game.

The board owns nine cells (row-major), the side to move and the outcome.
A turn is driven from outside in three steps: ``place`` the mark, ``evaluate``
the lines, and ``toggle_turn`` only if nobody has won. Keeping the steps apart
lets the driver print the board between placing and deciding.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .game_basics import Cell, Player, deserialize_board, get_winner, serialize_board

SIZE = 3
NUM_SQUARES = SIZE * SIZE


class MoveError(ValueError):
    """A placement the board refuses."""

    def __init__(self, square: int, message: str) -> None:
        super().__init__(message)
        self.square = square


class OutOfRangeError(MoveError):
    def __init__(self, square: int) -> None:
        super().__init__(square, f"Square {square} is outside 0-{NUM_SQUARES - 1}")


class OccupiedError(MoveError):
    def __init__(self, square: int, occupant: Player) -> None:
        super().__init__(square, f"Square {square} is already taken by {occupant}")
        self.occupant = occupant


@dataclass
class Board:
    cells: List[Cell] = field(default_factory=lambda: [None] * NUM_SQUARES)
    current_turn: Player = Player.X
    outcome: Optional[Player] = None

    def __post_init__(self) -> None:
        if len(self.cells) != NUM_SQUARES:
            raise ValueError(f"Board needs {NUM_SQUARES} cells, got {len(self.cells)}")

    @classmethod
    def from_string(cls, board_str: str, current_turn: Player = Player.X) -> "Board":
        """Build a board from a 9-char string (0=empty, 1=X, 2=O).

        The outcome is left unset; call ``evaluate`` to compute it.
        """
        return cls(cells=deserialize_board(board_str), current_turn=current_turn)

    def to_string(self) -> str:
        return serialize_board(self.cells)

    def cell(self, row: int, col: int) -> Cell:
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise IndexError(f"Invalid position ({row}, {col}). Must be 0-{SIZE - 1}.")
        return self.cells[row * SIZE + col]

    @property
    def grid(self) -> Tuple[Tuple[Cell, ...], ...]:
        return tuple(tuple(self.cells[r * SIZE:(r + 1) * SIZE]) for r in range(SIZE))

    @property
    def squares(self) -> Tuple[Cell, ...]:
        return tuple(self.cells)

    @property
    def occupied_count(self) -> int:
        return sum(1 for c in self.cells if c is not None)

    @property
    def is_over(self) -> bool:
        return self.outcome is not None

    def place(self, square: int) -> None:
        """Mark ``square`` (0..8) for the side to move.

        Raises:
            OutOfRangeError: square is not on the board.
            OccupiedError: square already holds a mark.

        The board is untouched when an error is raised. The turn does not pass.
        """
        if not 0 <= square < NUM_SQUARES:
            raise OutOfRangeError(square)
        occupant = self.cells[square]
        if occupant is not None:
            raise OccupiedError(square, occupant)
        self.cells[square] = self.current_turn

    def evaluate(self) -> Optional[Player]:
        """Scan all eight lines and record the winner, if any.

        When several lines are complete, the last one in scan order
        (rows, columns, main diagonal, anti-diagonal) decides.
        """
        self.outcome = get_winner(self.cells)
        return self.outcome

    def toggle_turn(self) -> None:
        self.current_turn = self.current_turn.opposite()
