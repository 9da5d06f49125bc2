"""
Tests for plain-text rendering and the terminal host.
"""

from io import StringIO

from manuals_control import handle_command, main
from tilemerge.core.gameboard import Board
from tilemerge.session import GameSession, GameStatus, SessionView
from tilemerge.utils import render_board, render_view


class TestRenderBoard:
    """Tests for render_board."""

    def test_small_tiles(self):
        board = Board.from_rows([[2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 4]])
        assert render_board(board) == '2 . . .\n. . . .\n. . . .\n. . . 4'

    def test_alignment(self):
        board = Board.from_rows([[2048, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        first_line = render_board(board).splitlines()[0]
        assert first_line == '2048    2    .    .'

    def test_rows_from_view(self):
        board = Board.from_rows([[2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 4]])
        assert render_board(board.rows()) == render_board(board)


class TestRenderView:
    """Tests for render_view."""

    def test_lines(self):
        view = SessionView(
            board=Board.empty().rows(), score=12, status=GameStatus.WON, mode=2048, can_undo=True, max_tile=0
        )
        lines = render_view(view).splitlines()
        assert lines[4] == 'score: 12'
        assert lines[5] == 'mode: 2048  max tile: 0'
        assert lines[6] == 'status: won  (undo available)'


class TestConsoleHost:
    """Tests for the terminal host."""

    def test_quit(self):
        session = GameSession(seed=0)
        output = StringIO()
        assert handle_command(session, 'q\n', output) is False
        assert output.getvalue() == ''

    def test_undo_with_empty_history(self):
        session = GameSession(seed=0)
        output = StringIO()
        assert handle_command(session, 'u', output) is True
        assert 'nothing to undo' in output.getvalue()

    def test_invalid_command(self):
        session = GameSession(seed=0)
        output = StringIO()
        assert handle_command(session, 'jump', output) is True
        assert 'invalid command' in output.getvalue()

        handle_command(session, 'm 100', output)
        assert session.mode == 2048

    def test_set_mode(self):
        session = GameSession(seed=0)
        handle_command(session, 'm 4096', StringIO())
        assert session.mode == 4096

    def test_move_keys(self):
        session = GameSession(seed=0)
        session._board = Board.from_rows([[0, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        output = StringIO()
        handle_command(session, 'a', output)
        assert session.board.rows()[0][0] == 2
        assert 'score: 0' in output.getvalue()

    def test_main(self):
        output = StringIO()
        assert main(['--seed', '3', '--mode', '4096'], stdin=StringIO('r\nleft\nq\nd\n'), stdout=output) == 0
        assert output.getvalue().count('mode: 4096') >= 2
