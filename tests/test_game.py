import pytest

from iksoks.game import (
    GameState,
    check_winner,
    is_valid_move,
    new_board,
    other_symbol,
    render_board,
)


def board_from(text):
    return list(text)


def test_new_board_shows_positions():
    assert new_board() == ["1", "2", "3", "4", "5", "6", "7", "8", "9"]


def test_new_board_is_playing():
    assert check_winner(new_board()) is GameState.PLAYING


@pytest.mark.parametrize(
    "text",
    ["XXX456789", "123XXX789", "123456XXX", "X23X56X89", "1X34X67X9", "X234X678X", "12X4X6X89"],
)
def test_x_wins_on_every_line(text):
    assert check_winner(board_from(text)) is GameState.X_WON


@pytest.mark.parametrize("text", ["O23O56O89", "12O4O6O89", "OOO456789"])
def test_o_wins(text):
    assert check_winner(board_from(text)) is GameState.O_WON


def test_full_board_without_line_is_draw():
    assert check_winner(board_from("XOXXOOOXX")) is GameState.DRAW


def test_partial_board_without_line_is_playing():
    assert check_winner(board_from("XO3456789")) is GameState.PLAYING


def test_first_winning_line_decides():
    assert check_winner(board_from("XXXOOO789")) is GameState.X_WON
    assert check_winner(board_from("OOOXXX789")) is GameState.O_WON


@pytest.mark.parametrize("position", [0, 10, -1])
def test_out_of_range_moves_are_invalid(position):
    assert not is_valid_move(new_board(), position)


def test_taken_cells_are_invalid():
    board = board_from("XO3456789")
    assert not is_valid_move(board, 1)
    assert not is_valid_move(board, 2)
    assert is_valid_move(board, 3)
    assert is_valid_move(board, 9)


def test_other_symbol_alternates():
    assert other_symbol("X") == "O"
    assert other_symbol("O") == "X"
    assert other_symbol(other_symbol("X")) == "X"


def test_render_board_contains_cells_in_rows():
    text = render_board(board_from("XO3456789"))
    assert "=== IKS-OKS ===" in text
    assert "\t\t   X   |   O   |   3   \n" in text
    assert "\t\t   7   |   8   |   9   \n" in text
    assert text.count("_______|_______|_______") == 2