"""Level selection and the per-frame handling of the enemies on a board."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, MutableSequence, Optional, Union

from kongboard.board import Board
from kongboard.enemies import Barrel, Enemy, Ghost, SpecialGhost
from kongboard.terminal import bending_dir_x

BOARD_PREFIX = "dkong_"
BOARD_SUFFIX = ".screen"

LEVELS_PER_PAGE = 2
BARREL_DELAY = 30

BACK_TO_MENU = -1

_NO_MORE_PAGES = "No more pages. Press any key to continue..."
_NO_PREVIOUS_PAGE = "No previous page. Press any key to continue..."
_INVALID_CHOICE = "Invalid choice. Please try again."
_INVALID_INPUT = "Invalid input. Please try again."

_LEADING_NUMBER = re.compile(r"[1-9]\d*")


def find_board_files(directory: Union[str, Path, None] = None) -> list[Path]:
    """Return the level files in ``directory`` (default: the current one), sorted by name.

    A level file is named ``dkong_<anything>.screen``.
    """
    root = Path.cwd() if directory is None else Path(directory)
    found = (
        entry
        for entry in root.iterdir()
        if entry.name.startswith(BOARD_PREFIX) and entry.suffix == BOARD_SUFFIX
    )
    return sorted(found, key=lambda entry: entry.name)


def create_ghosts(board: Board) -> list[Enemy]:
    """Create the plain ghosts, then the special ghosts, found on ``board``."""
    ghosts: list[Enemy] = [Ghost(board, x, y) for x, y in board.ghost_positions]
    ghosts.extend(SpecialGhost(board, x, y) for x, y in board.special_ghost_positions)
    return ghosts


def barrel_spawn_position(board: Board) -> tuple[int, int]:
    """Return where Donkey Kong drops new barrels: beside him, towards the board's middle."""
    dk_x, dk_y = board.donkey_pos
    return dk_x + bending_dir_x(dk_x), dk_y


def move_enemies(enemies: MutableSequence[Enemy]) -> None:
    """Move and redraw every enemy once; exploded barrels are removed from ``enemies``."""
    for enemy in list(enemies):
        if isinstance(enemy, Ghost):
            enemy.move(enemies)
            enemy.draw()
        elif isinstance(enemy, Barrel):
            enemy.move()
            if enemy.exploded:
                enemies.remove(enemy)
            else:
                enemy.draw()


def erase_enemies(enemies: Iterable[Enemy]) -> None:
    """Redraw the board tile under every enemy."""
    for enemy in enemies:
        enemy.erase()


@dataclass
class LevelPager:
    """The paged list of levels a player chooses a starting level from."""

    file_names: list[str]
    page: int = 0
    per_page: int = LEVELS_PER_PAGE
    message: Optional[str] = None

    @property
    def _start(self) -> int:
        return self.page * self.per_page

    @property
    def _has_next(self) -> bool:
        return self._start + self.per_page < len(self.file_names)

    def page_lines(self) -> list[str]:
        """Return the lines shown for the current page, prompt last."""
        start = self._start
        shown = self.file_names[start : start + self.per_page]
        lines = ["Choose a level to play:"]
        lines.extend(f"{number}. {name}" for number, name in enumerate(shown, start + 1))
        if self._has_next:
            lines.append("n. Next page")
        if self.page > 0:
            lines.append("p. Previous page")
        lines.append("m. Return to main menu")
        lines.append("Enter the level number and press Enter: ")
        return lines

    def handle(self, choice: str) -> Optional[int]:
        """Act on one answer from the player.

        Returns the chosen level number (from 1), ``BACK_TO_MENU`` when the
        player asks for the main menu, or None when the pager stays open; then
        ``message`` holds what to tell the player, if anything.
        """
        self.message = None
        lowered = choice.lower()
        if lowered == "m":
            return BACK_TO_MENU
        if lowered == "n":
            if self._has_next:
                self.page += 1
            else:
                self.message = _NO_MORE_PAGES
            return None
        if lowered == "p":
            if self.page > 0:
                self.page -= 1
            else:
                self.message = _NO_PREVIOUS_PAGE
            return None

        match = _LEADING_NUMBER.match(choice)
        if match is None:
            self.message = _INVALID_INPUT
            return None
        level = int(match.group())
        if 1 <= level <= len(self.file_names):
            return level
        self.message = _INVALID_CHOICE
        return None