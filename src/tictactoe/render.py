"""Text rendering for the console game."""
from typing import Iterable, Sequence

from .game_basics import Cell, Player

RULE = "-------------"

BANNER = (
    "tic tac toe!\n"
    "Board squares are numbered as follows:\n"
    "------------\n"
    "| 1 | 2 | 3 |\n"
    "-------------\n"
    "| 4 | 5 | 6 |\n"
    "-------------\n"
    "| 7 | 8 | 9 |\n"
    "-------------\n"
)


def render_cell(cell: Cell) -> str:
    return "   " if cell is None else f" {cell} "


def render_row(row: Iterable[Cell]) -> str:
    return "".join("|" + render_cell(c) for c in row) + "|"


def render_grid(grid: Sequence[Sequence[Cell]]) -> str:
    lines = [RULE]
    for row in grid:
        lines.append(render_row(row))
        lines.append(RULE)
    return "\n".join(lines) + "\n"


def prompt_for(player: Player) -> str:
    return f"Player {player}, enter a square>>"


def result_message(winner: Player) -> str:
    return f"{winner} wins"
