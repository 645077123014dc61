"""Interactive console game with a score-management menu."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from collections.abc import Iterator, Sequence
from enum import IntEnum
from typing import TextIO

from iksoks.game import GameState, check_winner, is_valid_move, new_board, render_board
from iksoks.game import other_symbol
from iksoks.scores import DEFAULT_SCORE_FILE, NAME_LIMIT, PlayerScore, ScoreBook, format_scores


class MenuOption(IntEnum):
    """Entries of the score-management menu."""

    ADD_SCORE = 1
    UPDATE_SCORE = 2
    DELETE_SCORE = 3
    EXIT = 4


def clear_screen() -> None:
    """Clear the terminal."""
    subprocess.run("cls" if os.name == "nt" else "clear", shell=True, check=False)


def _is_terminal(out: TextIO) -> bool:
    isatty = getattr(out, "isatty", None)
    return bool(isatty and isatty())


def _show_board(board: Sequence[str], out: TextIO) -> None:
    if _is_terminal(out):
        clear_screen()
    print(render_board(board), end="", file=out)


def _next_token(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError("input ended") from None


def _read_int(tokens: Iterator[str]) -> int | None:
    try:
        return int(_next_token(tokens))
    except ValueError:
        return None


def _read_name(tokens: Iterator[str]) -> str:
    return _next_token(tokens)[:NAME_LIMIT]


def read_move(board: Sequence[str], tokens: Iterator[str], out: TextIO) -> int:
    """Read positions until a free cell (1-9) is given and return it."""
    print("Unesite svoje polje izbora: ", file=out)
    while True:
        position = _read_int(tokens)
        if position is None:
            print("Neispravan unos. Unesite broj (1-9): ", end="", file=out)
            continue
        if is_valid_move(board, position):
            return position
        print("Nevazeci potez. Pokusajte ponovo: ", end="", file=out)


def _announce_turn(players: Sequence[PlayerScore], symbol: str, out: TextIO) -> None:
    player = players[0] if symbol == "X" else players[1]
    print(f"{player.name} je na potezu ({symbol})!", file=out)


def play_round(
    players: Sequence[PlayerScore], symbol: str, tokens: Iterator[str], out: TextIO
) -> tuple[GameState, str]:
    """Play one round, credit the winner, and return the result and next starting symbol."""
    board = new_board()
    _show_board(board, out)
    _announce_turn(players, symbol, out)
    while True:
        x_player, o_player = players
        print(f"Igrac 'X' : {x_player.name}", file=out)
        print(f"Igrac 'O' : {o_player.name}", file=out)
        print(f"\t\t{x_player.name}: {x_player.score} pobjeda", file=out)
        print(f"\t\t{o_player.name}: {o_player.score} pobjeda", file=out)

        position = read_move(board, tokens, out)
        board[position - 1] = symbol
        _show_board(board, out)

        result = check_winner(board)
        if result is GameState.X_WON:
            x_player.score += 1
            print(f"{x_player.name} POBJEDJUJE OVU RUNDU!", file=out)
            return result, symbol
        if result is GameState.O_WON:
            o_player.score += 1
            print(f"{o_player.name} POBJEDJUJE OVU RUNDU!", file=out)
            return result, symbol
        if result is GameState.DRAW:
            print("NERIJESENO!", file=out)
            return result, symbol
        symbol = other_symbol(symbol)
        _announce_turn(players, symbol, out)


def _show_scores(book: ScoreBook, out: TextIO) -> None:
    scores = book.read_scores()
    if not scores:
        return
    if _is_terminal(out):
        clear_screen()
    print(format_scores(scores), end="", file=out)


def _ask_names(book: ScoreBook, tokens: Iterator[str], out: TextIO) -> list[PlayerScore]:
    print("Unesite ime igraca 'X': ", end="", file=out)
    while True:
        x_name = _read_name(tokens)
        if book.is_name_available(x_name):
            break
        print(f"Ime '{x_name}' je vec zauzeto. Unesite drugo ime: ", end="", file=out)

    print("Unesite ime igraca 'O': ", end="", file=out)
    while True:
        o_name = _read_name(tokens)
        if book.is_name_available(o_name) and o_name != x_name:
            break
        print(f"Ime '{o_name}' je vec zauzeto. Unesite drugo ime: ", end="", file=out)
    return [PlayerScore(x_name), PlayerScore(o_name)]


def _ask_new_game(tokens: Iterator[str], out: TextIO) -> bool:
    print("\n\t=== NOVA IGRA? ===\n", file=out)
    print(" Pritisnite [D] za pocetak nove igre", file=out)
    print(" Pritisnite [N] za zavrsetak igre.\n", file=out)
    while True:
        for char in _next_token(tokens):
            if char in "dD":
                return True
            if char in "nN":
                return False


def _run_menu(book: ScoreBook, tokens: Iterator[str], out: TextIO) -> None:
    while True:
        print("\n\t=== UPRAVLJANJE REZULTATIMA ===", file=out)
        print(f"{MenuOption.ADD_SCORE.value}. Dodaj novog igraca", file=out)
        print(f"{MenuOption.UPDATE_SCORE.value}. Azuriraj rezultat igraca", file=out)
        print(f"{MenuOption.DELETE_SCORE.value}. Obrisi rezultat igraca", file=out)
        print(f"{MenuOption.EXIT.value}. Izlaz", file=out)
        print("Odaberite opciju: ", end="", file=out)

        choice = _read_int(tokens)
        try:
            if choice == MenuOption.ADD_SCORE:
                print("Unesite ime novog igraca: ", end="", file=out)
                name = _read_name(tokens)
                print("Unesite broj pobjeda: ", end="", file=out)
                score = _read_int(tokens)
                if score is not None:
                    book.add(name, score)
            elif choice == MenuOption.UPDATE_SCORE:
                print("Unesite ime igraca za azuriranje: ", end="", file=out)
                name = _read_name(tokens)
                print("Unesite novi broj pobjeda: ", end="", file=out)
                score = _read_int(tokens)
                if score is not None:
                    book.update(name, score)
            elif choice == MenuOption.DELETE_SCORE:
                print("Unesite ime igraca za brisanje: ", end="", file=out)
                book.delete(_read_name(tokens))
            elif choice == MenuOption.EXIT:
                print("Izlaz...", file=out)
                return
        except FileNotFoundError as exc:
            print(f"Greska pri otvaranju datoteke za citanje: {exc}", file=sys.stderr)
        except OSError as exc:
            print(f"Greska pri otvaranju datoteke: {exc}", file=sys.stderr)
        _show_scores(book, out)


def _stdin_tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game and the score menu; return the exit status."""
    parser = argparse.ArgumentParser(prog="iksoks", description="Two-player tic-tac-toe.")
    parser.add_argument("--file", default=DEFAULT_SCORE_FILE, help="score file")
    args = parser.parse_args(argv)

    out = sys.stdout
    book = ScoreBook(args.file)
    tokens = _stdin_tokens()

    print("\n\t\t\t=== IKS-OKS ===\n", file=out)
    print("Pravila:", file=out)
    print(
        " - Postavite tri svoja simbola u jedan red, stupac ili dijagonalu kako biste pobijedili.",
        file=out,
    )
    print(" - Pobjednik prethodne runde zapocinje sljedecu rundu.\n", file=out)

    try:
        players = _ask_names(book, tokens, out)
    except EOFError:
        print("Greska pri unosu imena igraca", file=sys.stderr)
        return 1

    symbol = "X"
    try:
        while True:
            _, symbol = play_round(players, symbol, tokens, out)
            if not _ask_new_game(tokens, out):
                break
    except EOFError:
        return 1

    try:
        book.append(players)
    except OSError as exc:
        print(f"Neuspjesno spremanje rezultata: {exc}", file=sys.stderr)

    _show_scores(book, out)
    try:
        _run_menu(book, tokens, out)
    except EOFError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())