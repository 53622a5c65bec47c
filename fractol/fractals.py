"""Escape-time fractals: Mandelbrot, Julia and Burning Ship."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import List, Tuple

WIDTH = 800
HEIGHT = 800
MAX_ITER = 100
JULIA_C = (0.36, 0.41)


class FractalKind(enum.IntEnum):
    """The fractals that can be drawn."""

    MANDELBROT = 0
    JULIA = 1
    SHIP = 2


def escape_time(x: float, y: float, c_re: float, c_im: float) -> int:
    """Iterations of z -> z*z + c from z = x + iy before |z| reaches 2."""
    count = 0
    while count < MAX_ITER and x * x + y * y < 4:
        x, y = x * x - y * y + c_re, 2 * x * y + c_im
        count += 1
    return count


def burning_ship_time(x: float, y: float, c_re: float, c_im: float) -> int:
    """Escape time of the Burning Ship iteration, drawn with y pointing up."""
    count = 0
    while count < MAX_ITER and x * x + y * y < 4:
        x, y = x * x - y * y + c_re, -2 * abs(x * y) + c_im
        count += 1
    return count


def _divide(a: float, b: float) -> float:
    if b:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


@dataclass
class Fractal:
    """A fractal together with the view and colour settings used to draw it."""

    kind: FractalKind = FractalKind.MANDELBROT
    max_iter: int = MAX_ITER
    scale: float = 250.0
    x0: float = -500.0
    y0: float = 500.0
    r: int = 5
    g: int = 50
    b: int = 20
    zoom_in_scale: int = 50
    zoom_out_scale: int = 50

    def iterations(self, x: float, y: float) -> int:
        """Escape time of the point (x, y) for this fractal."""
        if self.kind == FractalKind.JULIA:
            return escape_time(x, y, *JULIA_C)
        if self.kind == FractalKind.SHIP:
            return burning_ship_time(x, y, x, y)
        return escape_time(x, y, x, y)

    def color(self, iteration: int) -> int:
        """0xRRGGBB colour for an escape time, as a 32-bit unsigned value."""
        value = (
            ((255 - iteration * self.r) << 16)
            + ((255 - iteration * self.g) << 8)
            + (255 - iteration * self.b)
        )
        return value & 0xFFFFFFFF

    def point(self, i: int, j: int) -> Tuple[float, float]:
        """The plane coordinates shown at pixel column ``i``, row ``j``."""
        return _divide(i + self.x0, self.scale), _divide(self.y0 - j, self.scale)


def render(fractal: Fractal, width: int = WIDTH, height: int = HEIGHT) -> List[List[int]]:
    """Colours of every pixel, as rows from top to bottom."""
    return [
        [fractal.color(fractal.iterations(*fractal.point(i, j))) for i in range(width)]
        for j in range(height)
    ]