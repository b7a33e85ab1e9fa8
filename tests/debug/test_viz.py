"""
Tests for othello_engine.debug.viz
"""

from othello_engine.core.types import BLACK, EMPTY, WHITE
from othello_engine.debug.viz import RESET, render_board, render_status


class TestRenderBoard:
    """render_board function tests."""

    def test_plain_opening(self, opening_board):
        lines = render_board(opening_board, color=False).splitlines()
        assert len(lines) == 9
        assert lines[4] == " 3 " + " . " * 3 + " O  X " + " . " * 3
        assert lines[5] == " 4 " + " . " * 3 + " X  O " + " . " * 3

    def test_plain_hints(self, opening_board):
        text = render_board(opening_board, hints=[(2, 3), (3, 2)], color=False)
        assert text.count(" * ") == 2
        assert text.splitlines()[3].startswith(" 2 " + " . " * 3 + " * ")

    def test_hint_ignored_on_occupied_cell(self, opening_board):
        text = render_board(opening_board, hints=[(3, 3)], color=False)
        assert " * " not in text

    def test_color_uses_ansi(self, opening_board):
        text = render_board(opening_board, last_move=(3, 4), flipped=[(3, 3)])
        assert RESET in text
        assert len(text.splitlines()) == 9


class TestRenderStatus:
    """render_status function tests."""

    def test_to_move(self):
        text = render_status({BLACK: 2, WHITE: 2}, BLACK, False, None, color=False)
        assert text == "Black 2  White 2  Black to move"

    def test_win(self):
        text = render_status({BLACK: 40, WHITE: 24}, WHITE, True, BLACK, color=False)
        assert text.endswith("Black wins by 16")

    def test_draw(self):
        text = render_status({BLACK: 32, WHITE: 32}, BLACK, True, EMPTY, color=False)
        assert text.endswith("Draw")
