"""The level board: loading a screen file, tracking key positions and drawing it."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Union

from kongboard.config import (
    DONKEYKONG,
    FLOOR,
    GAME_HEIGHT,
    GAME_WIDTH,
    GHOST,
    HAMMER,
    INFO_POS,
    LADDER,
    LFLOOR,
    LIMIT,
    MARIO,
    MAX_SCORE,
    OPEN_SPACE,
    PAULINE,
    RFLOOR,
    SPECIAL_GHOST,
)
from kongboard.screens import Screen, screen_lines
from kongboard.terminal import clear_screen, gotoxy

Position = tuple[int, int]

_LIVES_OFFSET = (9, 2)
_LEVEL_OFFSET = (12, 0)
_HAMMER_OFFSET = (19, 2)
_SCORE_OFFSET = (12, 1)

_INFO_WIDTH = 20
_INFO_HEIGHT = 3
_INFO_LINES = (
    "    Level: 1        ",
    "    Score: 0000     ",
    " Lives: 3  Hammer:X ",
)

_PLAIN_TILES = frozenset({LIMIT, FLOOR, LFLOOR, RFLOOR, LADDER, OPEN_SPACE})
_REQUIRED = frozenset({PAULINE, DONKEYKONG, HAMMER, MARIO, INFO_POS})
_DONKEY_SUPPORT = frozenset({FLOOR, LFLOOR, RFLOOR})


class BoardError(Exception):
    """A board file could not be used; ``screen`` is the layout that explains why."""

    screen: Screen = Screen.LOADING_FAILED


class BoardFileError(BoardError):
    """The board file could not be opened."""

    screen = Screen.LOADING_FAILED


class MissingCharacterError(BoardError):
    """Mario, Donkey Kong, Pauline, the hammer or the info marker is missing."""

    screen = Screen.CHARACTER_MISSING


class IllegalDonkeyKongError(BoardError):
    """Donkey Kong does not stand on a floor."""

    screen = Screen.DONKEY_KONG_ILLEGAL_PLACE


class UnacceptableCharacterError(BoardError):
    """The board file holds a character the game does not know."""

    screen = Screen.UNACCEPTABLE_CHARACTER

    def __init__(self, char: str, x: int, y: int) -> None:
        super().__init__(f"unacceptable character {char!r} at column {x}, row {y}")
        self.char = char
        self.x = x
        self.y = y


def _blank_row() -> list[str]:
    return [OPEN_SPACE] * GAME_WIDTH


def _max_score_indentation() -> int:
    return len(str(MAX_SCORE)) - 1


class Board:
    """The tiles of one level, as loaded and as currently shown."""

    def __init__(self) -> None:
        self._original: list[list[str]] = [_blank_row() for _ in range(GAME_HEIGHT)]
        self._current: list[list[str]] = [row.copy() for row in self._original]
        self.mario_start: Optional[Position] = None
        self.donkey_pos: Optional[Position] = None
        self.hammer_pos: Optional[Position] = None
        self.info_pos: Optional[Position] = None
        self.ghost_positions: list[Position] = []
        self.special_ghost_positions: list[Position] = []

    # Info section positions

    def _info_offset(self, offset: Position) -> Position:
        x, y = self.info_pos
        return x + offset[0], y + offset[1]

    @property
    def lives_position(self) -> Position:
        return self._info_offset(_LIVES_OFFSET)

    @property
    def hammer_status_position(self) -> Position:
        return self._info_offset(_HAMMER_OFFSET)

    @property
    def level_position(self) -> Position:
        return self._info_offset(_LEVEL_OFFSET)

    @property
    def score_position(self) -> Position:
        return self._info_offset(_SCORE_OFFSET)

    # Board management

    def reset(self) -> None:
        """Restore the shown tiles to the loaded layout."""
        self._current = [row.copy() for row in self._original]

    def render(self) -> str:
        """Return the shown tiles as text, rows joined by newlines."""
        return "\n".join("".join(row) for row in self._current)

    def print(self) -> None:
        """Write the shown tiles to the console."""
        sys.stdout.write(self.render())
        sys.stdout.flush()

    def load(self, path: Union[str, Path]) -> None:
        """Load a level from a screen file."""
        try:
            with open(path, encoding="latin-1") as handle:
                text = handle.read()
        except OSError as exc:
            raise BoardFileError(f"cannot open board file {path}: {exc}") from exc
        self.loads(text)

    def loads(self, text: str) -> None:
        """Load a level from the text of a screen file.

        Rows beyond the board's height and columns beyond its width are ignored;
        short rows and missing rows are filled with open space.
        """
        found: dict[str, Position] = {}
        ghosts: list[Position] = []
        special_ghosts: list[Position] = []
        rows: list[list[str]] = []

        for y, line in enumerate(text.split("\n")[:GAME_HEIGHT]):
            row = _blank_row()
            for x, ch in enumerate(line[:GAME_WIDTH]):
                row[x] = self._place(ch, x, y, found, ghosts, special_ghosts)
            rows.append(row)
        rows.extend(_blank_row() for _ in range(GAME_HEIGHT - len(rows)))

        if not _REQUIRED <= found.keys():
            missing = "".join(sorted(_REQUIRED - found.keys()))
            raise MissingCharacterError(f"significant characters missing: {missing!r}")

        dk_x, dk_y = found[DONKEYKONG]
        if not (dk_y < GAME_HEIGHT - 2 and rows[dk_y + 1][dk_x] in _DONKEY_SUPPORT):
            raise IllegalDonkeyKongError(
                f"Donkey Kong at column {dk_x}, row {dk_y} is not on a floor"
            )

        self._original = rows
        self.mario_start = found[MARIO]
        self.donkey_pos = found[DONKEYKONG]
        self.hammer_pos = found[HAMMER]
        self.info_pos = found[INFO_POS]
        self.ghost_positions.extend(ghosts)
        self.special_ghost_positions.extend(special_ghosts)
        self._add_info(*self.info_pos)

    @staticmethod
    def _place(
        ch: str,
        x: int,
        y: int,
        found: dict[str, Position],
        ghosts: list[Position],
        special_ghosts: list[Position],
    ) -> str:
        """Record what ``ch`` marks and return the tile left in its place."""
        if ch in (MARIO, INFO_POS):
            found.setdefault(ch, (x, y))
            return OPEN_SPACE
        if ch in (DONKEYKONG, HAMMER, PAULINE):
            if ch in found:
                return OPEN_SPACE
            found[ch] = (x, y)
            return ch
        if ch == GHOST:
            ghosts.append((x, y))
            return OPEN_SPACE
        if ch == SPECIAL_GHOST:
            special_ghosts.append((x, y))
            return OPEN_SPACE
        if ch in _PLAIN_TILES:
            return ch
        raise UnacceptableCharacterError(ch, x, y)

    def _add_info(self, info_x: int, info_y: int) -> None:
        if info_y + _INFO_HEIGHT > GAME_HEIGHT or info_x + _INFO_WIDTH > GAME_WIDTH:
            print("Error: Info position is out of bounds.", file=sys.stderr)
            return
        start = info_x + 1
        for row, text in zip(self._original[info_y:], _INFO_LINES):
            chars = list(text[: GAME_WIDTH - start])
            row[start : start + len(chars)] = chars

    # Tile access

    def get_char(self, x: int, y: int) -> str:
        """Return the shown tile at (x, y); open space outside the board."""
        if 0 <= y < len(self._current):
            row = self._current[y]
            if 0 <= x < len(row):
                return row[x]
        return OPEN_SPACE

    def set_char(self, x: int, y: int, ch: str) -> None:
        """Replace the shown tile at (x, y)."""
        if not (0 <= y < len(self._current) and 0 <= x < len(self._current[y])):
            raise IndexError(f"position ({x}, {y}) is outside the board")
        self._current[y][x] = ch

    def set_line(self, line: str, x: int, y: int) -> None:
        """Write ``line`` into the shown tiles from (x, y), cut at the row's end."""
        if not 0 <= y < len(self._current):
            raise IndexError(f"row {y} is outside the board")
        row = self._current[y]
        if not 0 <= x <= len(row):
            raise IndexError(f"column {x} is outside the board")
        chars = list(line[: len(row) - x])
        row[x : x + len(chars)] = chars

    # Score handling

    def score_indentation(self, score: int) -> int:
        """Return how far into the score field ``score`` starts, right-aligned."""
        return _max_score_indentation() - (len(str(abs(score))) - 1)

    def add_score(self, score: int, returning_x: int, returning_y: int) -> None:
        """Show ``score`` in the info section and put the cursor back."""
        indentation = self.score_indentation(score)
        score_x, score_y = self.score_position
        gotoxy(score_x + indentation, score_y)
        sys.stdout.write(str(score))
        sys.stdout.flush()
        gotoxy(returning_x, returning_y)
        self.set_line(str(score), score_x + indentation, score_y)

    # Full-screen layouts

    def show(self, screen: Screen) -> None:
        """Clear the console and show a full-screen layout in place of the level."""
        clear_screen()
        self._current = [list(line) for line in screen_lines(screen)]
        self.print()

    def reset_ghost_positions(self) -> None:
        """Forget the ghost positions gathered by earlier loads."""
        self.ghost_positions.clear()
        self.special_ghost_positions.clear()