"""Console game loop: read moves as square pairs and play them on a board."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, TextIO

from polychess.board import SIZE, Board, IllegalMoveError

FILES = "abcdefgh"
RANKS = "12345678"
PROMPT = "Enter move (e.g., a2 a3): "


def _read_tokens(stream: TextIO) -> Iterator[str]:
    """Yield whitespace-separated words from a text stream."""
    for line in stream:
        yield from line.split()


def parse_square(text: str) -> tuple[int, int]:
    """Turn a square such as ``e2`` into a (row, column) pair; row 0 is rank 8."""
    if len(text) != 2 or text[0] not in FILES or text[1] not in RANKS:
        raise ValueError(f"not a square: {text!r}")
    return SIZE - int(text[1]), FILES.index(text[0])


class Game:
    """Plays moves read from a stream on a board, reporting refused ones."""

    def __init__(self, board: Board | None = None) -> None:
        self.board = board if board is not None else Board()

    def run(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        """Read move pairs until the input ends."""
        stdin = sys.stdin if stdin is None else stdin
        stdout = sys.stdout if stdout is None else stdout
        tokens = _read_tokens(stdin)
        while True:
            stdout.write(self.board.render())
            stdout.write(PROMPT)
            stdout.flush()
            src = next(tokens, None)
            dest = next(tokens, None)
            if src is None or dest is None:
                stdout.write("\n")
                return
            try:
                move = parse_square(src) + parse_square(dest)
            except ValueError as error:
                stdout.write(f"Move failed. {error}\n")
                continue
            try:
                self.board.move_piece(*move)
            except IllegalMoveError as error:
                stdout.write(f"Move failed. Code: {int(error.code)}\n")


def main(argv: list[str] | None = None) -> int:
    """Play a game on standard input and output."""
    parser = argparse.ArgumentParser(
        description="Play chess moves typed as square pairs, e.g. 'a1 a5'."
    )
    parser.parse_args(argv)
    Game().run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())