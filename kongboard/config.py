"""Game-wide constants: board size, tile characters, keys and directions."""

from __future__ import annotations

from enum import Enum, IntEnum

GAME_WIDTH = 80
GAME_HEIGHT = 25

# Characters for the game's figures
PAULINE = "$"
DONKEYKONG = "&"
BARREL = "O"
MARIO = "@"
GHOST = "x"
SPECIAL_GHOST = "X"
HAMMER = "p"

# Characters for terrain and markers
LIMIT = "Q"
FLOOR = "="
LFLOOR = "<"
RFLOOR = ">"
LADDER = "H"
OPEN_SPACE = " "
INFO_POS = "L"

WITH_HAMMER = "V"
WITHOUT_HAMMER = "X"

MAX_SCORE = 9999

FLOOR_CHARS = frozenset({FLOOR, LFLOOR, RFLOOR, LIMIT})


class Key(IntEnum):
    """Key codes the game reacts to."""

    LEFT = ord("a")
    RIGHT = ord("d")
    UP = ord("w")
    DOWN = ord("x")
    STAY = ord("s")
    HAMMER = ord("p")
    SUICIDE = ord("k")
    ESC = 27
    EXIT = ord("\r")


class Direction(Enum):
    """A movement direction, valued by its (dx, dy) step."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def delta(self) -> tuple[int, int]:
        return self.value


def is_floor(ch: str) -> bool:
    """Return True if ``ch`` is something a figure can stand on."""
    return ch in FLOOR_CHARS