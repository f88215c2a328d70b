"""Chess pieces and the movement rules each of them follows."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Iterator

if TYPE_CHECKING:
    from polychess.board import Board


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _squares_between(
    src_row: int, src_col: int, dest_row: int, dest_col: int
) -> Iterator[tuple[int, int]]:
    """Yield the squares strictly between two squares on a line or diagonal."""
    row_step = _sign(dest_row - src_row)
    col_step = _sign(dest_col - src_col)
    distance = max(abs(dest_row - src_row), abs(dest_col - src_col))
    for step in range(1, distance):
        yield src_row + step * row_step, src_col + step * col_step


def _path_is_clear(
    src_row: int, src_col: int, dest_row: int, dest_col: int, board: Board
) -> bool:
    return all(
        board.get_piece(row, col) is None
        for row, col in _squares_between(src_row, src_col, dest_row, dest_col)
    )


@dataclass(frozen=True)
class Piece(ABC):
    """A piece of one colour; subclasses define its letter and its moves."""

    is_white: bool

    LETTER: ClassVar[str] = "?"

    def symbol(self) -> str:
        """Upper-case letter for white, lower-case for black."""
        return self.LETTER.upper() if self.is_white else self.LETTER.lower()

    @abstractmethod
    def is_valid_move(
        self, src_row: int, src_col: int, dest_row: int, dest_col: int, board: Board
    ) -> bool:
        """Whether the piece may move from the source to the destination."""


@dataclass(frozen=True)
class Rook(Piece):
    """Moves along a row or a column over empty squares."""

    LETTER: ClassVar[str] = "R"

    def is_valid_move(self, src_row, src_col, dest_row, dest_col, board):
        if src_row != dest_row and src_col != dest_col:
            return False
        return _path_is_clear(src_row, src_col, dest_row, dest_col, board)


@dataclass(frozen=True)
class Bishop(Piece):
    """Moves along a diagonal over empty squares."""

    LETTER: ClassVar[str] = "B"

    def is_valid_move(self, src_row, src_col, dest_row, dest_col, board):
        if abs(dest_row - src_row) != abs(dest_col - src_col):
            return False
        return _path_is_clear(src_row, src_col, dest_row, dest_col, board)


@dataclass(frozen=True)
class Queen(Piece):
    """Moves like a rook or like a bishop."""

    LETTER: ClassVar[str] = "Q"

    def is_valid_move(self, src_row, src_col, dest_row, dest_col, board):
        return Rook(self.is_white).is_valid_move(
            src_row, src_col, dest_row, dest_col, board
        ) or Bishop(self.is_white).is_valid_move(
            src_row, src_col, dest_row, dest_col, board
        )


@dataclass(frozen=True)
class King(Piece):
    """Moves one square in any direction."""

    LETTER: ClassVar[str] = "K"

    def is_valid_move(self, src_row, src_col, dest_row, dest_col, board):
        return abs(dest_row - src_row) <= 1 and abs(dest_col - src_col) <= 1


@dataclass(frozen=True)
class Knight(Piece):
    """Jumps two squares one way and one square the other."""

    LETTER: ClassVar[str] = "N"

    def is_valid_move(self, src_row, src_col, dest_row, dest_col, board):
        rows = abs(dest_row - src_row)
        cols = abs(dest_col - src_col)
        return {rows, cols} == {1, 2}


@dataclass(frozen=True)
class Pawn(Piece):
    """Advances toward the opponent and captures diagonally forward."""

    LETTER: ClassVar[str] = "P"

    def is_valid_move(self, src_row, src_col, dest_row, dest_col, board):
        direction = -1 if self.is_white else 1
        start_row = 6 if self.is_white else 1

        if dest_col == src_col and board.get_piece(dest_row, dest_col) is None:
            if dest_row == src_row + direction:
                return True
            if (
                src_row == start_row
                and dest_row == src_row + 2 * direction
                and board.get_piece(src_row + direction, dest_col) is None
            ):
                return True

        if abs(dest_col - src_col) == 1 and dest_row == src_row + direction:
            target = board.get_piece(dest_row, dest_col)
            if target is not None:
                return target.is_white != self.is_white

        return False