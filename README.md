# polychess

A small chess program for the terminal, in two independent parts: a board
that checks each piece's movement rules, and a framed text display that draws
a position and applies moves according to outcome codes typed in by the user.

## The board game

`polychess` starts a two-player game on an 8x8 board. The starting position
holds rooks and kings only. White (capital letters) moves first, and the turn
passes to the other side after each legal move. The board is printed before
every move, with empty squares shown as `#`:

```
r # # # k # # r 
# # # # # # # # 
...
R # # # K # # R 
Enter move (e.g., a2 a3): 
```

Enter a move as two squares separated by whitespace, such as `a1 a4`. Files
are `a`-`h` and ranks `1`-`8`. A square that cannot be read is reported as
`Move failed. not a square: '...'`. When a move is refused, the game prints
`Move failed. Code: <n>`:

| Code | Meaning                                          |
|------|--------------------------------------------------|
| 11   | there is no piece on the source square           |
| 12   | the piece on the source belongs to the opponent  |
| 13   | one of your own pieces is on the destination     |
| 21   | that piece cannot move that way                  |

The game runs until its input ends. The same loop can be started with
`python -m polychess.game`.

### In code

- `polychess.pieces` holds `Piece` and its subclasses `Pawn`, `Knight`,
  `Bishop`, `Rook`, `Queen` and `King`. Each is made with a colour
  (`Rook(True)` is a white rook), gives its letter through `symbol()` and
  answers `is_valid_move(src_row, src_col, dest_row, dest_col, board)`.
  Row 0 is rank 8; white pawns move toward row 0.
- `polychess.board.Board` holds the pieces and whose turn it is. It can be
  given a mapping of `(row, col)` to pieces and the side to play. `get_piece`
  returns the piece on a square or `None`; `move_piece` makes the move and
  returns `MoveCode.LEGAL`, or raises `IllegalMoveError`, whose `code` is a
  `MoveCode`; `render()` returns the printed picture. Squares off the board
  raise `IndexError`.
- `polychess.game.parse_square("e2")` returns `(6, 4)`; `Game(board).run(stdin,
  stdout)` plays moves read from a stream.

```python
from polychess.board import Board, IllegalMoveError
from polychess.pieces import King, Queen

board = Board({(7, 3): Queen(True), (0, 4): King(False)})
board.move_piece(7, 3, 3, 7)      # MoveCode.LEGAL
try:
    board.move_piece(3, 7, 2, 7)  # white again: refused
except IllegalMoveError as error:
    print(error.code)             # MoveCode.OPPONENT_PIECE
```

## The framed display

`polychess-screen` clears the terminal and draws a full starting position
inside a framed text board. Rows are labelled `A`-`H` down the sides and
columns `1`-`8` along the top and bottom. An optional argument gives another
position as 64 characters, eight per row, with `#` for an empty square.

Enter a move as four characters, source then destination, such as `a2a4`
(row letters may be upper or lower case). Malformed input and a move whose
source and destination are the same are rejected with a message. After each
move the display asks for a response code and shows the message that goes
with it on the next screen:

- 11, 12, 13, 21, 31: the move is refused and the same player tries again;
- 41: the move is made and gives check;
- 42: the move is made and the turn passes.

Any other code is ignored and the previous one stays in force. Type `exit`,
`quit`, `EXIT` or `QUIT` to leave; the end of input also ends the program.

In code, `polychess.screen.ChessScreen(start, tokens, stdout)` does the same
work: `get_input()` applies the last recorded code and returns the next move
(with row letters lower-cased) or `"exit"`, `set_code_response(code)` records
an outcome, and `render()` returns the framed board.

## What it does not do

- The board does not look for check or checkmate, so `move_piece` never
  reports codes 31 or 41, and a game never ends by itself.
- There is no castling, en passant or pawn promotion.
- The framed display does not check any chess rules: whether a move is made
  depends only on the code the user types in. It is not connected to `Board`.

## Installing

```
pip install .
```

Run the tests with:

```
pip install ".[test]"
pytest
```