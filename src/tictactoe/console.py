"""
Console driver: one blocking read per iteration, then
validate -> place -> print -> evaluate -> toggle or stop.

Rejected input (not a number, off the board, taken square) re-prompts the
same player without any message. End of input and stream errors are fatal
and propagate to the caller.
"""
from __future__ import annotations

import logging
import re
import sys
from typing import Optional, TextIO

from .board import Board, MoveError
from .game_basics import Player
from .render import BANNER, prompt_for, render_grid, result_message

logger = logging.getLogger(__name__)

_NUMBER = re.compile(r"\+?[0-9]+")
_MAX_NUMBER = 2 ** 64 - 1


def parse_square(text: str) -> Optional[int]:
    """Turn one line of user input into a zero-based square.

    Returns None when the trimmed text is not a non-negative decimal number.
    ``"0"`` parses to -1, which the board rejects as out of range.
    Numbers above 2**64 - 1 count as unparsable.
    """
    raw = text.strip()
    if not _NUMBER.fullmatch(raw) or len(raw.lstrip("+").lstrip("0")) > 20:
        return None
    value = int(raw)
    if value > _MAX_NUMBER:
        return None
    return value - 1


def read_move(inp: TextIO, out: TextIO, player: Player) -> str:
    out.write(prompt_for(player))
    out.flush()
    line = inp.readline()
    if line == "":
        raise EOFError("Input closed before the game finished")
    return line


def play(inp: Optional[TextIO] = None, out: Optional[TextIO] = None,
         board: Optional[Board] = None) -> Player:
    """Run a game to completion and return the winner."""
    inp = sys.stdin if inp is None else inp
    out = sys.stdout if out is None else out
    board = Board() if board is None else board

    out.write(BANNER)
    while True:
        line = read_move(inp, out, board.current_turn)
        square = parse_square(line)
        if square is None:
            logger.debug("ignored input %r", line.strip())
            continue
        try:
            board.place(square)
        except MoveError as e:
            logger.debug("rejected move: %s", e)
            continue
        logger.debug("player %s took square %d", board.current_turn, square + 1)

        out.write(render_grid(board.grid))

        winner = board.evaluate()
        if winner is not None:
            out.write(result_message(winner))
            out.flush()
            logger.info("Game over after %d moves: %s wins", board.occupied_count, winner)
            return winner
        board.toggle_turn()
