import io

import pytest

from polychess.board import Board, MoveCode
from polychess.game import PROMPT, Game, main, parse_square
from polychess.pieces import King, Rook


def test_parse_square_top_left():
    assert parse_square("a8") == (0, 0)


def test_parse_square_finds_starting_pieces():
    board = Board()
    assert board.get_piece(*parse_square("e1")) == King(True)
    assert board.get_piece(*parse_square("e8")) == King(False)
    assert board.get_piece(*parse_square("h1")) == Rook(True)
    assert board.get_piece(*parse_square("a8")) == Rook(False)


def test_parse_square_covers_every_square_once():
    squares = {parse_square(f + r) for f in "abcdefgh" for r in "12345678"}
    assert squares == {(row, col) for row in range(8) for col in range(8)}


@pytest.mark.parametrize("text", ["", "a", "i1", "a0", "a9", "A1", "a12", "11"])
def test_parse_square_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_square(text)


def test_run_plays_a_legal_move():
    game = Game()
    out = io.StringIO()
    game.run(io.StringIO("a1 a5\n"), out)
    assert game.board.get_piece(*parse_square("a5")) == Rook(True)
    assert game.board.get_piece(*parse_square("a1")) is None
    assert game.board.white_turn is False
    assert out.getvalue().count(PROMPT) == 2
    assert "Move failed" not in out.getvalue()


def test_run_reports_illegal_movement_code():
    game = Game()
    out = io.StringIO()
    game.run(io.StringIO("a1 b2\n"), out)
    assert f"Move failed. Code: {int(MoveCode.ILLEGAL_MOVEMENT)}" in out.getvalue()
    assert game.board.get_piece(*parse_square("a1")) == Rook(True)


def test_run_reports_moving_opponent_piece():
    game = Game()
    out = io.StringIO()
    game.run(io.StringIO("a8 a7"), out)
    assert f"Code: {int(MoveCode.OPPONENT_PIECE)}" in out.getvalue()


def test_run_reports_empty_source():
    out = io.StringIO()
    Game().run(io.StringIO("c3\nc4\n"), out)
    assert f"Code: {int(MoveCode.NO_PIECE)}" in out.getvalue()


def test_run_reports_bad_square_and_continues():
    game = Game()
    out = io.StringIO()
    game.run(io.StringIO("z9 a5 a1 a5\n"), out)
    assert "Move failed. not a square" in out.getvalue()
    assert game.board.get_piece(*parse_square("a5")) == Rook(True)
    assert out.getvalue().count(PROMPT) == 3


def test_run_alternates_turns():
    game = Game()
    out = io.StringIO()
    game.run(io.StringIO("a1 a5 a8 a6 a5 a6\n"), out)
    assert game.board.get_piece(*parse_square("a6")) == Rook(True)
    assert "Move failed" not in out.getvalue()
    assert game.board.white_turn is False


def test_run_shows_board_each_turn():
    board = Board()
    out = io.StringIO()
    Game(board).run(io.StringIO(""), out)
    assert out.getvalue().startswith(Board().render())


def test_main_reads_standard_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("a1 b2\n"))
    assert main([]) == 0
    captured = capsys.readouterr().out
    assert PROMPT in captured
    assert f"Code: {int(MoveCode.ILLEGAL_MOVEMENT)}" in captured