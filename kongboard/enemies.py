"""Barrels and ghosts: the figures that move around the board on their own."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Iterable, Protocol

from kongboard.config import (
    BARREL,
    FLOOR,
    GAME_HEIGHT,
    GAME_WIDTH,
    GHOST,
    LADDER,
    LFLOOR,
    LIMIT,
    RFLOOR,
    SPECIAL_GHOST,
    Direction,
    is_floor,
)
from kongboard.point import CharGrid, Point, State

_VERTICAL = frozenset({Direction.UP, Direction.DOWN})


class RandomSource(Protocol):
    """The part of :mod:`random` the ghosts use."""

    def randrange(self, stop: int) -> int: ...


def _within_bounds(x: int, y: int) -> bool:
    return 0 <= x < GAME_WIDTH and 0 <= y < GAME_HEIGHT


class Enemy(ABC):
    """A figure that moves by itself and can hurt Mario."""

    def __init__(self, board: CharGrid, x: int, y: int) -> None:
        self.point = Point(x, y, board=board)

    @property
    def board(self) -> CharGrid:
        return self.point.board

    @property
    def x(self) -> int:
        return self.point.x

    @property
    def y(self) -> int:
        return self.point.y

    @property
    def dx(self) -> int:
        return self.point.dx

    @property
    def dy(self) -> int:
        return self.point.dy

    @property
    def exploded(self) -> bool:
        """True once the enemy is gone from the game."""
        return False

    @abstractmethod
    def move(self, enemies: Iterable[Enemy] = ()) -> None:
        """Take one step; ``enemies`` are the other figures on the board."""

    @abstractmethod
    def draw(self) -> None:
        """Draw the enemy at its position."""

    def erase(self) -> None:
        """Redraw the board tile underneath the enemy."""
        self.point.erase()

    def change_direction_x(self) -> None:
        """Turn around horizontally; enemies that cannot turn ignore this."""

    def change_direction_y(self) -> None:
        """Reverse the current vertical velocity; the next move sets it anew."""
        self.point.dy = -self.point.dy


class Barrel(Enemy):
    """A barrel that rolls along sloped floors and breaks after a long fall."""

    HEIGHT_TO_EXPLODE = 8

    def __init__(self, board: CharGrid, x: int, y: int) -> None:
        super().__init__(board, x, y)
        self._exploded = False

    @property
    def exploded(self) -> bool:
        return self._exploded

    def _explode(self) -> None:
        self.point.erase()
        self._exploded = True

    def move(self, enemies: Iterable[Enemy] = ()) -> None:
        """Fall, roll or explode depending on what is under the barrel."""
        p = self.point
        curr_char = self.board.get_char(p.x, p.y)
        char_below = self.board.get_char(p.x, p.y + 1)
        state = State.FALLING if p.is_falling(curr_char) else State.WALKING_OR_STAYING

        if state is State.FALLING:
            p.move(0, 1)
        elif p.height_falling >= self.HEIGHT_TO_EXPLODE:
            self._explode()
        else:
            self._roll(char_below)
            p.height_falling = 0

    def _roll(self, char_below: str) -> None:
        p = self.point
        if char_below in (FLOOR, LIMIT):
            if p.dx == 0:
                self._explode()
            else:
                p.move(p.dx, 0)
        elif char_below == RFLOOR:
            p.move(1, 0)
        elif char_below == LFLOOR:
            p.move(-1, 0)
        if p.is_out_of_limit(p.x, p.y + 1):
            self._explode()

    def draw(self) -> None:
        self.point.draw(BARREL)


class Ghost(Enemy):
    """A ghost that paces along floors, turning at edges and walls."""

    _MAX_ATTEMPTS = 2

    def __init__(
        self,
        board: CharGrid,
        x: int,
        y: int,
        rng: RandomSource | None = None,
    ) -> None:
        super().__init__(board, x, y)
        self.direction = Direction.RIGHT
        self._rng: RandomSource = rng if rng is not None else random

    def change_direction_x(self) -> None:
        """Face left if facing right, otherwise face right."""
        self.direction = Direction.LEFT if self.direction is Direction.RIGHT else Direction.RIGHT

    def draw(self) -> None:
        self.point.draw(GHOST)

    def _fall_if_unsupported(self) -> bool:
        p = self.point
        if _within_bounds(p.x, p.y + 1) and not is_floor(self.board.get_char(p.x, p.y + 1)):
            p.move(0, 1)
            return True
        return False

    def _maybe_turn(self) -> None:
        if self._rng.randrange(100) < 5:
            self.change_direction_x()

    def move(self, enemies: Iterable[Enemy] = ()) -> None:
        """Fall if nothing holds the ghost up, else walk on, turning when blocked."""
        if self._fall_if_unsupported():
            return
        self._maybe_turn()
        self._walk(list(enemies))

    def _next_position(self) -> tuple[int, int]:
        dx, dy = self.direction.delta
        return self.point.x + dx, self.point.y + dy

    def _can_step_to(self, x: int, y: int) -> bool:
        return (
            _within_bounds(x, y)
            and is_floor(self.board.get_char(x, y + 1))
            and not is_floor(self.board.get_char(x, y))
        )

    def _walk(self, enemies: list[Enemy]) -> None:
        for _ in range(self._MAX_ATTEMPTS):
            self._prevent_collision(enemies)
            next_x, next_y = self._next_position()
            if self._can_step_to(next_x, next_y):
                self.point.move(*self.direction.delta)
                return
            self.change_direction_x()

    def _prevent_collision(self, enemies: Iterable[Enemy]) -> None:
        target = self._next_position()
        for other in enemies:
            if other is self or not isinstance(other, Ghost):
                continue
            if target == (other.x, other.y):
                self._avoid(other)
                return

    def _avoid(self, other: Ghost) -> None:
        self.change_direction_x()
        other.change_direction_x()


class SpecialGhost(Ghost):
    """A ghost that can also climb up and down ladders."""

    _MAX_ATTEMPTS = 4

    def change_direction_y(self) -> None:
        """Face up if facing down, otherwise face down."""
        self.direction = Direction.UP if self.direction is Direction.DOWN else Direction.DOWN

    def draw(self) -> None:
        self.point.draw(SPECIAL_GHOST)

    def move(self, enemies: Iterable[Enemy] = ()) -> None:
        """Fall, climb, take a ladder or walk on, in that order of preference."""
        p = self.point
        board = self.board
        current = board.get_char(p.x, p.y)
        below = board.get_char(p.x, p.y + 1)
        above = board.get_char(p.x, p.y - 1)
        below2 = board.get_char(p.x, p.y + 2)

        if current != LADDER and self._fall_if_unsupported():
            return

        if self.direction not in _VERTICAL:
            self._maybe_turn()

        if current == LADDER:
            if self.direction is Direction.UP and above == LADDER:
                p.move(0, -1)
                return
            if self.direction is Direction.UP and is_floor(above):
                p.move(0, -2)
                return
            if self.direction is Direction.DOWN and below == LADDER:
                p.move(0, 1)
                return

        if below2 == LADDER and p.is_on_floor() and self._rng.randrange(2) == 0:
            self.direction = Direction.DOWN
            p.move(0, 2)
            return

        if current == LADDER and p.is_on_floor() and self._rng.randrange(2) == 0:
            self.direction = Direction.UP
            p.move(0, -1)
            return

        self._walk(list(enemies))

    def _avoid(self, other: Ghost) -> None:
        mine = self.direction in _VERTICAL
        theirs = other.direction in _VERTICAL
        if mine and theirs:
            self.change_direction_y()
            other.change_direction_y()
        elif mine:
            self.change_direction_y()
        else:
            self.change_direction_x()
            other.change_direction_x()