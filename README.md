# iksoks

Iks-Oks is tic-tac-toe for two players who share one terminal. It keeps a running tally of
wins in a plain text score file. The prompts and messages are in Croatian.

## Installing

```
pip install .
```

## Playing

```
iksoks
iksoks --file my_scores.txt
```

`--file` names the score file; it defaults to `rezultati.txt` in the current directory.

1. Each player enters a name, X first and then O. Names are cut to 19 characters. A name that
   already has an entry in the score file is refused, and O cannot take the same name as X.
2. Players take turns. On each turn you type the number (1–9) of a free square:

```
 1 | 2 | 3
 4 | 5 | 6
 7 | 8 | 9
```

   Anything that is not a number, or names a square that is taken or off the board, is
   refused and you are asked again.
3. The first player with three symbols in a row, a column or a diagonal wins the round. If all
   nine squares fill up with no winner, the round is a draw.
4. The player who made the last move of a round starts the next one, so the winner of a round
   starts the next.
5. When a round ends, type `D` to play again or `N` to stop.

When you stop, a record for each player's win total is appended to the score file. The game
then shows the full ranking, highest score first, and opens a menu:

1. Add a new player with a number of wins (refused if the name already has an entry)
2. Update a player's number of wins
3. Delete a player's entry
4. Exit

The screen is cleared before the board and the ranking are drawn, but only when output goes to
a terminal. If input ends while the game is waiting for it, the command exits with status 1.

## Score file

Each entry is one line: a dash, the player's name, a space and the number of wins.

```
-Ana 3
-Marko 1
```

Lines that do not start with `-`, or whose score is not a number, are kept as they are but are
not counted. Updating a player replaces every entry whose line contains the given name;
deleting removes every entry whose name is exactly the given one. Both rewrite the file through
a temporary file in the same directory.

## Using it as a library

```python
from iksoks.game import GameState, check_winner, is_valid_move, new_board, render_board
from iksoks.scores import PlayerScore, ScoreBook, format_scores, sort_scores

board = new_board()
board[0] = board[4] = board[8] = "X"
assert check_winner(board) is GameState.X_WON
assert not is_valid_move(board, 5)
print(render_board(board), end="")

book = ScoreBook("rezultati.txt")
book.add("Ana", 3)               # False if "Ana" already has an entry
book.update("Ana", 4)            # False if no entry matched
print(format_scores(book.read_scores()), end="")
```

- `iksoks.game`: `new_board`, `check_winner`, `is_valid_move`, `other_symbol`, `render_board`
  and the `GameState` enum (`PLAYING`, `X_WON`, `O_WON`, `DRAW`).
- `iksoks.scores`: the `PlayerScore` dataclass, `sort_scores` (most wins first),
  `format_scores` (the ranked table as text) and `ScoreBook` with `read_scores`,
  `is_name_available`, `append`, `add`, `update` and `delete`. `update` and `delete` raise
  `FileNotFoundError` if the score file does not exist.
- `iksoks.cli`: `main`, `play_round`, `read_move`, `clear_screen` and the `MenuOption` enum.
  `play_round` and `read_move` take an iterator of input tokens and a text stream for output.

## Running the tests

```
pip install .[test]
pytest
```