import pytest

from kongboard.config import GAME_HEIGHT, GAME_WIDTH, LIMIT
from kongboard.screens import Screen, render, screen_lines

ERROR_SCREENS = [
    Screen.NO_FILES,
    Screen.DONKEY_KONG_ILLEGAL_PLACE,
    Screen.FILE_NOT_FOUND,
    Screen.LOADING_FAILED,
    Screen.CHARACTER_MISSING,
    Screen.UNACCEPTABLE_CHARACTER,
]


@pytest.mark.parametrize("screen", list(Screen))
def test_every_screen_fills_the_board_height(screen):
    assert len(screen_lines(screen)) == GAME_HEIGHT


@pytest.mark.parametrize("screen", list(Screen))
def test_top_and_bottom_rows_are_limit_borders(screen):
    lines = screen_lines(screen)
    assert set(lines[0]) == {LIMIT}
    assert set(lines[-1]) == {LIMIT}
    assert lines[0] == lines[-1]


@pytest.mark.parametrize("screen", list(Screen))
def test_every_row_is_framed_by_limits(screen):
    for line in screen_lines(screen):
        assert line.startswith(LIMIT)
        assert line.endswith(LIMIT)


@pytest.mark.parametrize("screen", list(Screen))
def test_render_joins_rows_without_trailing_newline(screen):
    text = render(screen)
    assert text.split("\n") == list(screen_lines(screen))
    assert not text.endswith("\n")


@pytest.mark.parametrize("screen", ERROR_SCREENS)
def test_error_screens_share_heading_and_hint(screen):
    lines = screen_lines(screen)
    assert lines[9].strip(" " + LIMIT) == "ERROR"
    assert lines[13].strip(" " + LIMIT) == "Check your files and try again"


def test_error_messages_are_distinct():
    messages = {screen_lines(s)[11] for s in ERROR_SCREENS}
    assert len(messages) == len(ERROR_SCREENS)


def test_specific_messages():
    assert "No suitable files for the game to begin" in screen_lines(Screen.NO_FILES)[11]
    assert "Level complete!" in screen_lines(Screen.WON_LEVEL)[9]
    assert "Moving on to the next stage!" in screen_lines(Screen.WON_LEVEL)[11]
    assert "Well Done! You finished all the levels" in screen_lines(Screen.VICTORY)[3]


def test_pause_screen_lists_options():
    lines = screen_lines(Screen.PAUSE)
    assert "Press:" in lines[13]
    assert "ESC to continue" in lines[14]
    assert "ENTER to exit and lose the game :(" in lines[15]


def test_border_widths():
    assert len(screen_lines(Screen.PAUSE)[0]) == GAME_WIDTH
    assert len(screen_lines(Screen.VICTORY)[0]) == GAME_WIDTH - 1


def test_blank_rows_are_empty_between_borders():
    row = screen_lines(Screen.NO_FILES)[1]
    assert row[1:-1].strip() == ""
    assert len(row) == GAME_WIDTH