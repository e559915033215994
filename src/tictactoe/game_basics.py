"""
Game basics: players, win lines, winner scan and the board string codec.
Notes:
- Squares are numbered 0..8 row-major; players see them as 1..9.
- A board string is 9 chars: 0=empty, 1=X, 2=O.
- Lines are scanned rows, then columns, then the main and anti diagonal.
  Every complete line overwrites the result, so the last one scanned decides.
"""
from enum import Enum
from typing import List, Optional, Sequence


class Player(Enum):
    X = "X"
    O = "O"

    @property
    def label(self) -> str:
        return self.value

    @property
    def code(self) -> int:
        return 1 if self is Player.X else 2

    def opposite(self) -> "Player":
        return Player.O if self is Player.X else Player.X

    def __str__(self) -> str:
        return self.label


Cell = Optional[Player]

WIN_PATTERNS = [
    [0, 1, 2], [3, 4, 5], [6, 7, 8],
    [0, 3, 6], [1, 4, 7], [2, 5, 8],
    [0, 4, 8], [2, 4, 6]
]

BOARD_CHARS = "012"


def get_winner(cells: Sequence[Cell]) -> Optional[Player]:
    winner: Optional[Player] = None
    for a, b, c in WIN_PATTERNS:
        v = cells[a]
        if v is not None and v == cells[b] and v == cells[c]:
            winner = v
    return winner


def winning_lines(cells: Sequence[Cell]) -> List[List[int]]:
    """All complete lines, in scan order."""
    return [
        pat for pat in WIN_PATTERNS
        if cells[pat[0]] is not None and all(cells[i] == cells[pat[0]] for i in pat)
    ]


def is_board_string(raw: str) -> bool:
    return len(raw) == 9 and all(c in BOARD_CHARS for c in raw)


def serialize_board(cells: Sequence[Cell]) -> str:
    return ''.join('0' if cell is None else str(cell.code) for cell in cells)


def deserialize_board(board_str: str) -> List[Cell]:
    if not is_board_string(board_str):
        raise ValueError(f"Invalid board string: {board_str!r}. Must be 9 chars of 0/1/2.")
    decode = {'0': None, '1': Player.X, '2': Player.O}
    return [decode[c] for c in board_str]


def next_to_move(cells: Sequence[Cell]) -> Player:
    """Side to move when X opened and turns alternated."""
    x = sum(1 for c in cells if c is Player.X)
    o = sum(1 for c in cells if c is Player.O)
    return Player.X if x == o else Player.O
