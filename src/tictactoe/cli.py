from __future__ import annotations

import argparse
import logging
import sys

from .board import Board
from .config import configure_logging
from .console import play
from .game_basics import is_board_string, next_to_move, winning_lines
from .render import render_grid

PACKAGE = "tictactoe-console"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt", description="Two-player tic-tac-toe in the terminal")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print environment info and exit",
    )

    sub.add_parser("play", help="Play a game on stdin/stdout (default)")

    p_eval = sub.add_parser(
        "evaluate",
        help="Report the winner of a board (9 digits, 0=empty,1=X,2=O)",
    )
    p_eval.add_argument("--board", help="Board string, e.g., 111220000 (omit with --stdin)")
    p_eval.add_argument(
        "--stdin", action="store_true", help="Read many boards from stdin and stream CSV output"
    )

    p_ren = sub.add_parser("render", help="Draw a board string as the game prints it")
    p_ren.add_argument("--board", required=True, help="Board string, e.g., 100020000")

    return p


def _package_version() -> str:
    try:
        from importlib.metadata import version as _ver

        return _ver(PACKAGE)
    except Exception:
        return "unknown"


def _print_info() -> None:
    import platform

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    print(f"{PACKAGE}={_package_version()}")


def _run_game() -> int:
    try:
        play()
    except EOFError:
        print(file=sys.stdout)
        logging.error("Input ended before anyone won.")
        return 1
    except OSError as e:
        logging.error("I/O failure: %s", e)
        return 1
    except KeyboardInterrupt:
        print(file=sys.stdout)
        return 130
    return 0


def _evaluate_stream() -> int:
    import csv as _csv

    w = _csv.writer(sys.stdout)
    w.writerow(["board", "winner"])
    for line in sys.stdin:
        raw = line.strip()
        if not raw or not is_board_string(raw):
            continue
        winner = Board.from_string(raw).evaluate()
        w.writerow([raw, "" if winner is None else winner.label])
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    configure_logging(getattr(ns, "verbose", False))

    # Early exits
    if getattr(ns, "version", False):
        print(_package_version())
        return 0
    if getattr(ns, "info", False):
        _print_info()
        return 0

    if ns.cmd is None or ns.cmd == "play":
        return _run_game()

    if ns.cmd == "evaluate":
        if ns.stdin:
            return _evaluate_stream()
        raw = (ns.board or "").strip()
        if not is_board_string(raw):
            logging.error("Invalid board string. Must be 9 chars of 0/1/2.")
            return 2
        board = Board.from_string(raw)
        winner = board.evaluate()
        logging.info(
            "winner=%s to_move=%s lines=%s",
            "none" if winner is None else winner,
            next_to_move(board.cells),
            winning_lines(board.cells),
        )
        return 0

    if ns.cmd == "render":
        raw = ns.board.strip()
        if not is_board_string(raw):
            logging.error("Invalid board string. Must be 9 chars of 0/1/2.")
            return 2
        sys.stdout.write(render_grid(Board.from_string(raw).grid))
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
