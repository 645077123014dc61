"""Board representation and rules of a single game of tic-tac-toe."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

PLAYER_SYMBOLS = ("X", "O")

WINNING_LINES = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)

_NEXT_SYMBOL = {"X": "O", "O": "X"}


class GameState(Enum):
    """Outcome of inspecting a board."""

    PLAYING = 0
    X_WON = 1
    O_WON = 2
    DRAW = 3


def new_board() -> list[str]:
    """Return an empty board whose cells show their position numbers."""
    return [str(n) for n in range(1, 10)]


def _line_owned_by(board: Sequence[str], line: tuple[int, int, int], symbol: str) -> bool:
    return all(board[cell] == symbol for cell in line)


def check_winner(board: Sequence[str]) -> GameState:
    """Decide whether X or O has won, the board is drawn, or play goes on."""
    for line in WINNING_LINES:
        if _line_owned_by(board, line, "X"):
            return GameState.X_WON
        if _line_owned_by(board, line, "O"):
            return GameState.O_WON
    if any(cell not in PLAYER_SYMBOLS for cell in board):
        return GameState.PLAYING
    return GameState.DRAW


def is_valid_move(board: Sequence[str], position: int) -> bool:
    """Return True if ``position`` (1-9) names a free cell."""
    return 1 <= position <= 9 and board[position - 1] not in PLAYER_SYMBOLS


def other_symbol(symbol: str) -> str:
    """Return the symbol of the player who moves after ``symbol``.

    X is followed by O; any other symbol is followed by X.
    """
    next_symbol = _NEXT_SYMBOL.get(symbol, "X")
    return next_symbol


def render_board(board: Sequence[str]) -> str:
    """Return the text drawing of the board."""
    spacer = "\t\t       |       |       \n"
    divider = "\t\t_______|_______|_______\n"

    def row(a: str, b: str, c: str) -> str:
        return f"\t\t   {a}   |   {b}   |   {c}   \n"

    parts = [
        "\n\t\t    === IKS-OKS ===\n\n",
        spacer,
        row(*board[0:3]),
        divider,
        spacer,
        row(*board[3:6]),
        divider,
        spacer,
        row(*board[6:9]),
        spacer + "\n",
    ]
    return "".join(parts)