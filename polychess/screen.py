"""Framed text chess screen that reads moves and shows the outcome of each."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Iterator, TextIO

from polychess.board import EMPTY_SYMBOL, MoveCode

SIZE = 21
DEFAULT_START = "RNBQKBNRPPPPPPPP" + EMPTY_SYMBOL * 32 + "pppppppprnbqkbnr"
CLEAR = "\033[2J\033[3J\033[H"
EXIT = "exit"

_EXIT_WORDS = frozenset({"exit", "quit", "EXIT", "QUIT"})
_LETTERS = "abcdefgh"
_DIGITS = "12345678"

_MESSAGES = {
    MoveCode.NO_PIECE: "there is not piece at the source \n",
    MoveCode.OPPONENT_PIECE: "the piece in the source is piece of your opponent \n",
    MoveCode.OWN_PIECE_AT_DESTINATION: "there one of your pieces at the destination \n",
    MoveCode.ILLEGAL_MOVEMENT: "illegal movement of that piece \n",
    MoveCode.SELF_CHECK: "this movement will cause you checkmate \n",
    MoveCode.LEGAL_CHECK: "the last movement was legal and cause check \n",
    MoveCode.LEGAL: "the last movement was legal \n",
}
_EXECUTING = frozenset({MoveCode.LEGAL_CHECK, MoveCode.LEGAL})

_WHITE_PROMPT = "Player 1 (White - Capital letters) >> "
_BLACK_PROMPT = "Player 2 (Black - Small letters)   >> "


def _read_tokens(stream: TextIO) -> Iterator[str]:
    """Yield whitespace-separated words from a text stream."""
    for line in stream:
        yield from line.split()


def _frame() -> list[list[str]]:
    """The empty framed grid with row letters and column numbers."""
    grid = [[" "] * SIZE for _ in range(SIZE)]
    last = SIZE - 1
    for i in range(1, last):
        grid[0][i] = grid[last][i] = "-"
        grid[i][0] = grid[i][last] = "|"
    for row, col in ((0, 0), (0, last), (last, 0), (last, last)):
        grid[row][col] = "+"
    for row in range(2, last - 1):
        for col in range(2, last - 1):
            if row % 2 == 0:
                grid[row][col] = "+" if col % 2 == 0 else "-"
            elif col % 2 == 0:
                grid[row][col] = "|"
    for index, (digit, letter) in enumerate(zip(_DIGITS, _LETTERS.upper())):
        pos = 3 + 2 * index
        grid[1][pos] = grid[last - 1][pos] = digit
        grid[pos][1] = grid[pos][last - 1] = letter
    return grid


class ChessScreen:
    """Shows the board, reads moves such as ``b1c1`` and applies reported outcomes.

    The layout is 64 characters, eight per row; rows are named by letters A-H
    and columns by digits 1-8, and ``#`` marks an empty square.
    """

    def __init__(
        self,
        start: str = DEFAULT_START,
        tokens: Iterable[str] | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        if len(start) != 64:
            raise ValueError(f"board layout needs 64 squares, got {len(start)}")
        self._layout = list(start)
        self._tokens = iter(tokens) if tokens is not None else _read_tokens(sys.stdin)
        self._out = stdout if stdout is not None else sys.stdout
        self._white_turn = True
        self._input = ""
        self._msg = "\n"
        self._error_msg = "\n"
        self._code: MoveCode | None = None
        self._first = True
        self._grid = _frame()
        self._place_pieces()

    @property
    def white_turn(self) -> bool:
        return self._white_turn

    def _place_pieces(self) -> None:
        for index, symbol in enumerate(self._layout):
            row, col = divmod(index, 8)
            self._grid[3 + 2 * row][3 + 2 * col] = " " if symbol == EMPTY_SYMBOL else symbol

    def render(self) -> str:
        """The framed board as text, one line per grid row."""
        return "".join("".join(row) + "\n" for row in self._grid)

    def _display(self) -> None:
        self._out.write(CLEAR + self.render() + self._msg + self._error_msg)

    def _ask(self) -> None:
        self._out.write(_WHITE_PROMPT if self._white_turn else _BLACK_PROMPT)
        self._out.flush()

    def _read_wants_exit(self) -> bool:
        """Read the next word; True when it asks to leave or input has ended."""
        word = next(self._tokens, None)
        if word is None:
            return True
        self._input = word
        return word in _EXIT_WORDS

    def _is_valid(self) -> bool:
        text = self._input
        return (
            len(text) >= 4
            and text[0].lower() in _LETTERS
            and text[1] in _DIGITS
            and text[2].lower() in _LETTERS
            and text[3] in _DIGITS
        )

    def _is_same(self) -> bool:
        text = self._input
        return text[0] == text[2] and text[1] == text[3]

    def _square_index(self, letter: str, digit: str) -> int:
        return _LETTERS.index(letter) * 8 + _DIGITS.index(digit)

    def _execute(self) -> None:
        text = self._input
        src = self._square_index(text[0], text[1])
        dest = self._square_index(text[2], text[3])
        piece = self._layout[src]
        self._layout[src] = EMPTY_SYMBOL
        self._layout[dest] = piece
        self._place_pieces()

    def _do_turn(self) -> None:
        self._error_msg = "\n"
        code = self._code
        if code is None:
            return
        if code in _EXECUTING:
            self._execute()
            self._white_turn = not self._white_turn
        self._msg = _MESSAGES[code]

    def get_input(self) -> str:
        """Apply the last reported outcome, then read a move or ``"exit"``."""
        if self._first:
            self._first = False
        else:
            self._do_turn()

        self._display()
        self._ask()
        if self._read_wants_exit():
            return EXIT
        while not self._is_valid() or self._is_same():
            if not self._is_valid():
                self._error_msg = "Invalid input !! \n"
            else:
                self._error_msg = "The source and the destination are the same !! \n"
            self._display()
            self._ask()
            if self._read_wants_exit():
                return EXIT

        text = self._input
        self._input = text[0].lower() + text[1] + text[2].lower() + text[3:]
        return self._input

    def set_code_response(self, code_response: int) -> None:
        """Record the outcome of the last move; unknown codes are ignored."""
        if code_response in _MESSAGES:
            self._code = MoveCode(code_response)


def main(argv: list[str] | None = None) -> int:
    """Read moves and, after each, the outcome code from standard input."""
    parser = argparse.ArgumentParser(
        description="Framed chess screen; enter a move, then its outcome code."
    )
    parser.add_argument(
        "start",
        nargs="?",
        default=DEFAULT_START,
        help="64-character board layout, '#' for an empty square",
    )
    args = parser.parse_args(argv)

    tokens = _read_tokens(sys.stdin)
    out = sys.stdout
    try:
        screen = ChessScreen(args.start, tokens, out)
    except ValueError as error:
        parser.error(str(error))

    result = screen.get_input()
    while result != EXIT:
        out.write("code response >> ")
        out.flush()
        word = next(tokens, None)
        if word is None:
            break
        try:
            code = int(word)
        except ValueError:
            code = 0
        screen.set_code_response(code)
        result = screen.get_input()

    out.write("\nExiting \n")
    return 0


if __name__ == "__main__":
    sys.exit(main())