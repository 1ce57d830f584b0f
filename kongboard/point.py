"""A position on the board with velocity and fall tracking."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Protocol

from kongboard.config import GAME_HEIGHT, GAME_WIDTH, LADDER, OPEN_SPACE, is_floor
from kongboard.terminal import gotoxy


class CharGrid(Protocol):
    """Anything a point can read tiles from."""

    def get_char(self, x: int, y: int) -> str: ...


class State(Enum):
    """What a moving figure is doing."""

    FALLING = auto()
    JUMPING = auto()
    CLIMBING = auto()
    WALKING_OR_STAYING = auto()
    EXPLODING = auto()


@dataclass
class Point:
    """A figure's place on the board, its last step and how far it has fallen."""

    x: int = 0
    y: int = 0
    dx: int = 0
    dy: int = 0
    height_falling: int = 0
    board: Optional[CharGrid] = field(default=None, repr=False, compare=False)

    def is_out_of_limit(self, x: int, y: int) -> bool:
        """Return True if (x, y) lies outside the playable area.

        The top row counts as outside.
        """
        return x >= GAME_WIDTH or y >= GAME_HEIGHT or x < 0 or y <= 0

    def move(self, dx: int, dy: int) -> None:
        """Step by (dx, dy), standing still if the target is off-board or a floor."""
        new_x = self.x + dx
        new_y = self.y + dy
        if self.is_out_of_limit(new_x, new_y) or is_floor(self.board.get_char(new_x, new_y)):
            dx = dy = 0
        self.dx = dx
        self.dy = dy
        self.height_falling = self.height_falling + 1 if dy == 1 else 0
        self.x += dx
        self.y += dy

    def draw(self, ch: str) -> None:
        """Write ``ch`` at this point's position on the console."""
        gotoxy(self.x, self.y)
        sys.stdout.write(ch)
        sys.stdout.flush()

    def erase(self) -> None:
        """Redraw the board tile underneath this point."""
        self.draw(self.board.get_char(self.x, self.y))

    def erase_completely(self) -> None:
        """Draw open space at this point's position."""
        self.draw(OPEN_SPACE)

    def is_on_floor(self) -> bool:
        """Return True if standing on a floor tile or on the bottom row."""
        if self.y == GAME_HEIGHT - 1:
            return True
        return is_floor(self.board.get_char(self.x, self.y + 1))

    def is_falling(self, curr_char: str) -> bool:
        """Return True if nothing holds this point up."""
        if self.is_out_of_limit(self.x, self.y + 1):
            return False
        if curr_char == LADDER:
            return False
        return not self.is_on_floor()