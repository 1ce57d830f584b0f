"""Full-screen layouts shown for pauses, errors and the end of a game."""

from __future__ import annotations

from enum import Enum, auto

from kongboard.config import GAME_HEIGHT, GAME_WIDTH, LIMIT


class Screen(Enum):
    """The full-screen layouts the game can show."""

    PAUSE = auto()
    NO_FILES = auto()
    DONKEY_KONG_ILLEGAL_PLACE = auto()
    FILE_NOT_FOUND = auto()
    LOADING_FAILED = auto()
    CHARACTER_MISSING = auto()
    UNACCEPTABLE_CHARACTER = auto()
    WON_LEVEL = auto()
    VICTORY = auto()
    DISQUALIFIED = auto()
    LOSS = auto()


def _frame(rows: dict[int, str], width: int = GAME_WIDTH) -> tuple[str, ...]:
    """Build a bordered layout, filling rows not given with an empty framed line."""
    border = LIMIT * width
    blank = LIMIT + " " * (width - 2) + LIMIT
    lines = []
    for row in range(GAME_HEIGHT):
        if row in (0, GAME_HEIGHT - 1):
            lines.append(border)
        else:
            lines.append(rows.get(row, blank))
    return tuple(lines)


_ERROR_LINE = "Q                                 ERROR                                        Q"
_CHECK_LINE = "Q                       Check your files and try again                         Q"


def _error(message_line: str) -> tuple[str, ...]:
    return _frame({9: _ERROR_LINE, 11: message_line, 13: _CHECK_LINE})


_SCREENS: dict[Screen, tuple[str, ...]] = {
    Screen.PAUSE: _frame({
        6: "Q                                                      _                       Q",
        7: "Q                       _ __   __ _ _   _ ___  ___  __| |                      Q",
        8: "Q                      | '_ \\ / _` | | | / __|/ _ \\/ _` |                      Q",
        9: "Q                      | |_) | (_| | |_| \\__ \\  __/ (_| |                      Q",
        10: "Q                      | .__/ \\__,_|\\__,_|___/\\___|\\__,_|                      Q",
        11: "Q                      |_|                                                     Q",
        13: "Q                    Press:                                                    Q",
        14: "Q                    ESC to continue                                           Q",
        15: "Q                    ENTER to exit and lose the game :(                        Q",
        16: "Q                    K to reset the level with one less live :\\                Q",
    }),
    Screen.NO_FILES: _error(
        "Q                  No suitable files for the game to begin                     Q"
    ),
    Screen.DONKEY_KONG_ILLEGAL_PLACE: _error(
        "Q             Donkey Kong is in illegal place (has to be on a floor)           Q"
    ),
    Screen.FILE_NOT_FOUND: _error(
        "Q             You asked to play on a board that does not exist.                Q"
    ),
    Screen.LOADING_FAILED: _error(
        "Q                          Failed to load th file                              Q"
    ),
    Screen.CHARACTER_MISSING: _error(
        "Q            Significant character is missing cannot begin the game            Q"
    ),
    Screen.UNACCEPTABLE_CHARACTER: _error(
        "Q            An unacceptable character was found in the keyboard.              Q"
    ),
    Screen.WON_LEVEL: _frame({
        9: "Q                             Level complete!                                  Q",
        11: "Q                        Moving on to the next stage!                          Q",
    }),
    Screen.VICTORY: _frame({
        3: "Q                  Well Done! You finished all the levels                     Q",
        6: "Q                            _                       _                        Q",
        7: "Q                  __      _(_)_ __  _ __   ___ _ __| |                       Q",
        8: "Q                  \\ \\ /\\ / / | '_ \\| '_ \\ / _ \\ '__| |                       Q",
        9: "Q                   \\ V  V /| | | | | | | |  __/ |  |_|                       Q",
        10: "Q                    \\_/\\_/ |_|_| |_|_| |_|\\___|_|  (_)                       Q",
        14: "Q                              \\'-=======-'/                                  Q",
        15: "Q                              _|   .=.   |_                                  Q",
        16: "Q                             ((|  {{1}}  |))                                 Q",
        17: "Q                              \\|   /|\\   |/                                  Q",
        18: "Q                               \\__ '`' __/                                   Q",
        19: "Q                                 _`) (`_                                     Q",
        20: "Q                               _/_______\\_                                   Q",
        21: "Q                              /___________\\                                  Q",
    }, width=GAME_WIDTH - 1),
    Screen.DISQUALIFIED: _frame({
        8: "Q       __                                                                     Q",
        9: "Q      /\\ \\__                                                __                Q",
        10: "Q      \\ \\ ,_\\  _ __   __  __         __       __      __   /\\_\\    ___        Q",
        11: "Q       \\ \\ \\/ /\\`'__\\/\\ \\/\\ \\      /'__`\\   /'_ `\\  /'__`\\ \\/\\ \\ /' _ `\\      Q",
        12: "Q        \\ \\ \\_\\ \\ \\/ \\ \\ \\_\\ \\    /\\ \\L\\.\\_/\\ \\L\\ \\/\\ \\L\\.\\_\\ \\ \\/\\ \\/\\ \\     Q",
        13: "Q         \\ \\__\\\\ \\_\\  \\/`____ \\   \\ \\__/.\\_\\ \\____ \\ \\__/.\\_\\\\ \\_\\ \\_\\ \\_\\    Q",
        14: "Q          \\/__/ \\/_/   `/___/> \\   \\/__/\\/_/\\/___L\\ \\/__/\\/_/ \\/_/\\/_/\\/_/    Q",
        15: "Q                          /\\___/              /\\____/                         Q",
        16: "Q                          \\/__/               \\_/__/                          Q",
    }),
    Screen.LOSS: _frame({
        6: "Q                  __   __            _                   _                    Q",
        7: "Q                  \\ \\ / /__  _   _  | |    ___  ___  ___| |                   Q",
        8: "Q                   \\ V / _ \\| | | | | |   / _ \\/ __|/ _ \\ |                   Q",
        9: "Q                    | | (_) | |_| | | |__| (_) \\__ \\  __/_|                   Q",
        10: "Q                    |_|\\___/ \\__,_| |_____\\___/|___/\\___(_)                   Q",
        14: "Q                             _'''''''''_                                      Q",
        15: "Q                           .'          '.                                     Q",
        16: "Q                          /   O      O   \\                                    Q",
        17: "Q                         :           `    :                                   Q",
        18: "Q                         |                |                                   Q",
        19: "Q                         :    .------.    :                                   Q",
        20: "Q                          \\  '        '  /                                    Q",
        21: "Q                           '.          .'                                     Q",
        22: "Q                             '-......-'                                       Q",
    }),
}


def screen_lines(screen: Screen) -> tuple[str, ...]:
    """Return the rows of ``screen``, top to bottom."""
    return _SCREENS[screen]


def render(screen: Screen) -> str:
    """Return ``screen`` as text, rows joined by newlines with none at the end."""
    return "\n".join(_SCREENS[screen])