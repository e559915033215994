import pytest

from tictactoe.game_basics import (
    WIN_PATTERNS,
    Player,
    deserialize_board,
    get_winner,
    is_board_string,
    next_to_move,
    serialize_board,
    winning_lines,
)


def test_player_labels_and_opposite():
    assert str(Player.X) == "X"
    assert Player.O.label == "O"
    assert Player.X.opposite() is Player.O
    assert Player.O.opposite() is Player.X


def test_scan_order_rows_columns_diagonals():
    assert WIN_PATTERNS[:3] == [[0, 1, 2], [3, 4, 5], [6, 7, 8]]
    assert WIN_PATTERNS[3:6] == [[0, 3, 6], [1, 4, 7], [2, 5, 8]]
    assert WIN_PATTERNS[6] == [0, 4, 8]
    assert WIN_PATTERNS[-1] == [2, 4, 6]


@pytest.mark.parametrize("pattern", WIN_PATTERNS)
def test_every_line_wins(pattern):
    for p in Player:
        cells = [None] * 9
        for i in pattern:
            cells[i] = p
        assert get_winner(cells) is p
        assert winning_lines(cells) == [pattern]


def test_two_of_three_is_not_a_win():
    assert get_winner(deserialize_board("110220000")) is None
    assert winning_lines(deserialize_board("110220000")) == []


def test_board_string_codec():
    cells = deserialize_board("120000002")
    assert cells[0] is Player.X
    assert cells[1] is Player.O
    assert cells[8] is Player.O
    assert cells[4] is None
    assert serialize_board(cells) == "120000002"


@pytest.mark.parametrize("bad", ["", "abc", "12345678", "0123456789", "12000000x"])
def test_board_string_rejects(bad: str):
    assert not is_board_string(bad)
    with pytest.raises(ValueError):
        deserialize_board(bad)


def test_next_to_move():
    assert next_to_move(deserialize_board("000000000")) is Player.X
    assert next_to_move(deserialize_board("100000000")) is Player.O
    assert next_to_move(deserialize_board("100020000")) is Player.X
