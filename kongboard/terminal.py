"""Cursor control for the console the game is drawn on."""

from __future__ import annotations

import sys

from kongboard.config import GAME_HEIGHT, GAME_WIDTH

_CSI = "\x1b["


def _emit(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def gotoxy(x: int, y: int) -> None:
    """Move the cursor to column ``x``, row ``y`` (both zero-based)."""
    sys.stdout.flush()
    _emit(f"{_CSI}{y + 1};{x + 1}H")


def show_cursor(show: bool) -> None:
    """Show or hide the console cursor."""
    _emit(f"{_CSI}?25{'h' if show else 'l'}")


def clear_screen() -> None:
    """Clear the console and home the cursor."""
    _emit(f"{_CSI}2J{_CSI}H")


def bending_dir_x(pos_x: int) -> int:
    """Return 1 for the left half of the board, -1 for the right half."""
    middle = GAME_WIDTH // 2
    if pos_x < middle:
        return 1
    return -1


def bending_dir_y(pos_y: int) -> int:
    """Return 1 for the top half of the board, -1 for the bottom half."""
    middle = GAME_HEIGHT // 2
    if pos_y < middle:
        return 1
    return -1