import re

import pytest

from kongboard.config import GAME_HEIGHT, GAME_WIDTH
from kongboard.terminal import (
    bending_dir_x,
    bending_dir_y,
    clear_screen,
    gotoxy,
    show_cursor,
)

_POS = re.compile(r"^\x1b\[(\d+);(\d+)H$")


@pytest.mark.parametrize("x,y", [(0, 0), (3, 5), (79, 24), (40, 12)])
def test_gotoxy_round_trip(capsys, x, y):
    gotoxy(x, y)
    out = capsys.readouterr().out
    match = _POS.match(out)
    assert match is not None
    row, col = int(match.group(1)), int(match.group(2))
    assert (col - 1, row - 1) == (x, y)


def test_show_and_hide_cursor(capsys):
    show_cursor(False)
    hidden = capsys.readouterr().out
    show_cursor(True)
    shown = capsys.readouterr().out
    assert hidden == "\x1b[?25l"
    assert shown == "\x1b[?25h"


def test_clear_screen_clears_and_homes(capsys):
    clear_screen()
    out = capsys.readouterr().out
    assert "\x1b[2J" in out
    assert out.endswith("\x1b[H")


def test_bending_dir_x_halves():
    assert bending_dir_x(0) == 1
    assert bending_dir_x(GAME_WIDTH // 2 - 1) == 1
    assert bending_dir_x(GAME_WIDTH // 2) == -1
    assert bending_dir_x(GAME_WIDTH - 1) == -1


def test_bending_dir_y_halves():
    assert bending_dir_y(0) == 1
    assert bending_dir_y(GAME_HEIGHT // 2 - 1) == 1
    assert bending_dir_y(GAME_HEIGHT // 2) == -1
    assert bending_dir_y(GAME_HEIGHT - 1) == -1


def test_bending_dirs_are_unit():
    for x in range(GAME_WIDTH):
        assert bending_dir_x(x) in (1, -1)
    for y in range(GAME_HEIGHT):
        assert bending_dir_y(y) in (1, -1)