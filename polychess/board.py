"""An 8x8 board that checks and carries out moves in turn."""

from __future__ import annotations

from enum import IntEnum
from typing import Mapping

from polychess.pieces import King, Piece, Rook

SIZE = 8
EMPTY_SYMBOL = "#"


class MoveCode(IntEnum):
    """Outcome codes of a move."""

    NO_PIECE = 11
    OPPONENT_PIECE = 12
    OWN_PIECE_AT_DESTINATION = 13
    ILLEGAL_MOVEMENT = 21
    SELF_CHECK = 31
    LEGAL_CHECK = 41
    LEGAL = 42


class IllegalMoveError(Exception):
    """A move was refused; ``code`` tells why."""

    def __init__(self, code: MoveCode) -> None:
        super().__init__(f"illegal move ({code.name}, code {int(code)})")
        self.code = code


def _default_setup() -> dict[tuple[int, int], Piece]:
    return {
        (0, 0): Rook(False),
        (0, 7): Rook(False),
        (0, 4): King(False),
        (7, 0): Rook(True),
        (7, 7): Rook(True),
        (7, 4): King(True),
    }


class Board:
    """Holds the pieces and whose turn it is."""

    def __init__(
        self,
        pieces: Mapping[tuple[int, int], Piece] | None = None,
        white_turn: bool = True,
    ) -> None:
        self._grid: list[list[Piece | None]] = [[None] * SIZE for _ in range(SIZE)]
        setup = _default_setup() if pieces is None else pieces
        for (row, col), piece in setup.items():
            self._check_square(row, col)
            self._grid[row][col] = piece
        self._white_turn = white_turn

    @property
    def white_turn(self) -> bool:
        return self._white_turn

    @staticmethod
    def _check_square(row: int, col: int) -> None:
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise IndexError(f"square ({row}, {col}) is off the board")

    def get_piece(self, row: int, col: int) -> Piece | None:
        """The piece on a square, or None if it is empty."""
        self._check_square(row, col)
        return self._grid[row][col]

    def move_piece(
        self, src_row: int, src_col: int, dest_row: int, dest_col: int
    ) -> MoveCode:
        """Make a move for the side to play, or raise IllegalMoveError."""
        piece = self.get_piece(src_row, src_col)
        if piece is None:
            raise IllegalMoveError(MoveCode.NO_PIECE)
        if piece.is_white != self._white_turn:
            raise IllegalMoveError(MoveCode.OPPONENT_PIECE)

        target = self.get_piece(dest_row, dest_col)
        if target is not None and target.is_white == self._white_turn:
            raise IllegalMoveError(MoveCode.OWN_PIECE_AT_DESTINATION)

        if not piece.is_valid_move(src_row, src_col, dest_row, dest_col, self):
            raise IllegalMoveError(MoveCode.ILLEGAL_MOVEMENT)

        self._grid[dest_row][dest_col] = piece
        self._grid[src_row][src_col] = None
        self._white_turn = not self._white_turn
        return MoveCode.LEGAL

    def render(self) -> str:
        """Text picture of the board, one line per row."""
        return "".join(
            "".join(
                f"{cell.symbol() if cell is not None else EMPTY_SYMBOL} "
                for cell in row
            )
            + "\n"
            for row in self._grid
        )

    def __str__(self) -> str:
        return self.render()