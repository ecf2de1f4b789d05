from __future__ import annotations

from conftest import board_from
from tictactoe.core.board import Board
from tictactoe.ui.render import banner, format_board, print_banner, render


def test_empty_board():
    assert format_board(Board()).split("\n") == [
        "- - -",
        "- - -",
        "- - -",
        "-----------------",
    ]


def test_marked_board():
    assert format_board(board_from("X-O-X-O--")).split("\n") == [
        "X - O",
        "- X -",
        "O - -",
        "-----------------",
    ]


def test_render_prints(capsys):
    render(board_from("XO-------"))
    assert capsys.readouterr().out == "X O -\n- - -\n- - -\n-----------------\n"


def test_banner(capsys):
    print_banner()
    out = capsys.readouterr().out
    assert out == banner() + "\n"
    assert out.startswith("Tic Tac Toe\n")
    assert "- - -\t0 1 2\n- - -\t3 4 5\n- - -\t6 7 8\n" in out
    assert "Player enters cell number to play their turn." in out
