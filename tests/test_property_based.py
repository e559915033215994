from typing import List

import pytest
try:
    from hypothesis import given, strategies as st  # type: ignore
    HAS_HYP = True
except ModuleNotFoundError:  # pragma: no cover - test infra
    HAS_HYP = False
    import pytest as _pytest  # type: ignore
    _pytest.skip("Hypothesis not installed", allow_module_level=True)

from tictactoe.board import Board, MoveError
from tictactoe.game_basics import WIN_PATTERNS, Player, deserialize_board, get_winner

boards = st.text(alphabet="012", min_size=9, max_size=9)


@given(boards)
def test_winner_iff_some_line_is_complete(raw: str):
    cells = deserialize_board(raw)
    complete = [cells[pat[0]] for pat in WIN_PATTERNS
                if cells[pat[0]] is not None and all(cells[i] == cells[pat[0]] for i in pat)]
    w = get_winner(cells)
    if not complete:
        assert w is None
    else:
        # last complete line in scan order decides
        assert w is complete[-1]


@given(boards, st.integers(min_value=-20, max_value=20))
def test_failed_place_leaves_board_unchanged(raw: str, square: int):
    b = Board.from_string(raw)
    before = b.to_string()
    try:
        b.place(square)
    except MoveError:
        assert b.to_string() == before
    else:
        assert 0 <= square <= 8
        assert raw[square] == "0"
        assert b.squares[square] is Player.X


@given(boards)
def test_evaluate_twice_same_result(raw: str):
    b = Board.from_string(raw)
    assert b.evaluate() is b.evaluate()


@given(st.permutations(list(range(9))))
def test_random_game_turns_alternate_until_win(order: List[int]):
    b = Board()
    for sq in order:
        mover = b.current_turn
        b.place(sq)
        if b.evaluate() is not None:
            assert b.outcome is mover
            assert b.current_turn is mover
            break
        b.toggle_turn()
        assert b.current_turn is mover.opposite()
    assert b.occupied_count <= 9
