"""Keyboard and mouse handling, and validation of command-line numbers."""

from __future__ import annotations

import enum
import re
from typing import Sequence

from .chars import isdigit
from .fractals import HEIGHT, WIDTH, Fractal
from .strings import atoi

MOVE_STEP = 50
ZOOM_STEP = 50
_NUMBER = re.compile(r"-?([0-9]*)(?:\.([0-9]*))?")


class Key(enum.IntEnum):
    """Key codes reported by the window system."""

    A = 0
    S = 1
    D = 2
    F = 3
    C = 8
    Q = 12
    W = 13
    E = 14
    ESC = 53


class Button(enum.IntEnum):
    """Mouse buttons reported by the window system."""

    SCROLL_UP = 4
    SCROLL_DOWN = 5


class InputError(ValueError):
    """Raised for command-line input that cannot be used."""

    def __init__(self, message: str = "Invalid input.") -> None:
        super().__init__(message)


def check_number(text: str) -> bool:
    """Whether ``text`` is an optionally signed decimal of limited length.

    At most five digits may precede a decimal point, and at most ten digits
    may appear in total when there is one; at least one digit is required.
    """
    match = _NUMBER.fullmatch(text)
    if match is None:
        return False
    whole, fraction = match.group(1), match.group(2)
    if fraction is None:
        return len(whole) > 0
    return len(whole) <= 5 and 0 < len(whole) + len(fraction) <= 10


def parse_julia_args(args: Sequence[str], fractal: Fractal) -> None:
    """Apply the optional colour arguments given after the fractal name.

    No arguments leave the fractal alone; exactly three set its r, g and b.
    Any other count, or a value whose number is an ASCII digit code, raises
    InputError.
    """
    if not args:
        return
    if len(args) != 3:
        raise InputError()
    values = [atoi(arg) for arg in args]
    if any(isdigit(value) for value in values):
        raise InputError()
    fractal.r, fractal.g, fractal.b = values


def handle_key(fractal: Fractal, keycode: int) -> bool:
    """Apply a key press to the view; True when the key asks to quit."""
    if keycode == Key.ESC:
        return True
    if keycode == Key.A:
        fractal.x0 -= MOVE_STEP
    elif keycode == Key.D:
        fractal.x0 += MOVE_STEP
    elif keycode == Key.W:
        fractal.y0 += MOVE_STEP
    elif keycode == Key.S:
        fractal.y0 -= MOVE_STEP
    elif keycode == Key.C:
        fractal.r += 20
        fractal.g += 15
        fractal.b += 3
    return False


def _zoom(fractal: Fractal, button: int) -> None:
    if button == Button.SCROLL_UP:
        fractal.scale += fractal.zoom_in_scale
        fractal.zoom_out_scale = ZOOM_STEP
    elif fractal.scale > 0:
        fractal.scale -= fractal.zoom_out_scale
        fractal.zoom_in_scale = ZOOM_STEP


def handle_mouse(fractal: Fractal, button: int, x: int, y: int) -> None:
    """Apply a scroll at pixel (x, y): recentre towards it and zoom."""
    if button not in (Button.SCROLL_UP, Button.SCROLL_DOWN):
        return
    half_w, half_h = WIDTH // 2, HEIGHT // 2
    if button == Button.SCROLL_UP:
        fractal.x0 += (x - half_w) * 0.5
        fractal.y0 -= (y - half_h) * 0.5
    else:
        fractal.x0 -= (half_w - x) * 0.5
        fractal.y0 += (half_h - y) * 0.5
    _zoom(fractal, button)