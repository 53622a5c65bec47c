"""Command-line entry point: choose a fractal and show it in a window."""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional, Sequence

from .controls import Button, InputError, Key, handle_key, handle_mouse, parse_julia_args
from .formatting import printf
from .fractals import HEIGHT, WIDTH, Fractal, FractalKind, render

INVALID_DATA = -3
INIT_ERROR = -2
BAD_MEMALLOC = 1

WINDOW_TITLE = "My fractlolol"
_NAME_LENGTHS = frozenset({4, 5, 10})
_NAMES = {
    "mandelbrot": FractalKind.MANDELBROT,
    "julia": FractalKind.JULIA,
    "ship": FractalKind.SHIP,
}


def _usage() -> None:
    printf("\nUsage: fractol <fractal name>\n")
    printf("Fractals: julia, mandelbrot, ship\n")
    printf("Options for Julia: r, g, b\n\n")


def build_fractal(argv: Sequence[str]) -> Fractal:
    """Build the fractal described by the arguments after the program name.

    The first argument names the fractal. Mandelbrot takes no further
    arguments; Julia takes none or three colour values; Ship ignores any
    that follow. Anything else raises InputError.
    """
    if not argv:
        raise InputError()
    name, extra = argv[0], list(argv[1:])
    if len(name) not in _NAME_LENGTHS:
        raise InputError()
    kind = _NAMES.get(name)
    if kind is None:
        raise InputError()
    fractal = Fractal(kind=kind)
    if kind == FractalKind.MANDELBROT and extra:
        raise InputError()
    if kind == FractalKind.JULIA:
        parse_julia_args(extra, fractal)
    return fractal


def _to_rgb_bytes(pixels: Iterable[Iterable[int]]) -> bytes:
    """Pack rows of 0xRRGGBB colours into packed RGB bytes."""
    out = bytearray()
    for row in pixels:
        for color in row:
            out += bytes(((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF))
    return bytes(out)


def run(fractal: Fractal) -> None:
    """Open a window on ``fractal`` and handle input until it is closed."""
    import pygame

    keymap = {
        pygame.K_ESCAPE: Key.ESC,
        pygame.K_a: Key.A,
        pygame.K_s: Key.S,
        pygame.K_d: Key.D,
        pygame.K_f: Key.F,
        pygame.K_q: Key.Q,
        pygame.K_w: Key.W,
        pygame.K_e: Key.E,
        pygame.K_c: Key.C,
    }
    buttons = {4: Button.SCROLL_UP, 5: Button.SCROLL_DOWN}

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)

        def draw() -> None:
            data = _to_rgb_bytes(render(fractal, WIDTH, HEIGHT))
            image = pygame.image.frombuffer(data, (WIDTH, HEIGHT), "RGB")
            screen.blit(image, (0, 0))
            pygame.display.flip()

        draw()
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return
            if event.type == pygame.KEYDOWN:
                code = keymap.get(event.key, -1)
                if handle_key(fractal, code):
                    return
                draw()
            elif event.type == pygame.MOUSEBUTTONDOWN:
                x, y = event.pos
                handle_mouse(fractal, buttons.get(event.button, event.button), x, y)
                draw()
    finally:
        pygame.quit()


def main(argv: Optional[List[str]] = None) -> int:
    """Run the program; returns the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        _usage()
        return 0
    try:
        fractal = build_fractal(args)
    except InputError as exc:
        printf("%s\n", str(exc))
        return INVALID_DATA
    try:
        run(fractal)
    except MemoryError:
        return BAD_MEMALLOC
    except Exception as exc:  # the window system could not start
        if type(exc).__name__ == "error":
            return INIT_ERROR
        raise
    return 0