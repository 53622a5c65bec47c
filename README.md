# fractol

An interactive fractal explorer. It draws the Mandelbrot set, a Julia set
(with c = 0.36 + 0.41i) and the Burning Ship fractal in an 800×800 window,
and lets you pan, zoom and shift the colour palette.

## Installation

```
pip install .
```

The window is drawn with pygame, which is installed as a dependency.

## Usage

Run the command with no arguments to print the help text:

```
fractol
```

Choose a fractal by name:

```
fractol mandelbrot
fractol julia
fractol ship
```

A Julia set also takes three optional colour weights, one each for red,
green and blue:

```
fractol julia 3 7 11
```

The weights are read as leading integers. `mandelbrot` takes no further
arguments, `julia` takes none or exactly three, and `ship` ignores any that
follow. Any other name, a wrong number of arguments, or a colour weight
equal to one of the character codes 48–57 prints `Invalid input.` and the
program exits with a non-zero status.

## Controls

| Input         | Action                                            |
|---------------|---------------------------------------------------|
| `W` / `S`     | move the view up / down                           |
| `A` / `D`     | move the view left / right                        |
| `C`           | shift the colour palette                          |
| scroll up     | recentre towards the pointer and zoom in          |
| scroll down   | recentre and zoom out, while the scale is above 0 |
| `Esc`         | quit                                              |

Closing the window also quits. The image is redrawn after every key press
and mouse click.

## Using it as a library

The computation lives apart from the window, so a fractal can be rendered
into a grid of `0xRRGGBB` colours without any display:

```python
from fractol.fractals import Fractal, FractalKind, render

fractal = Fractal(kind=FractalKind.JULIA)
pixels = render(fractal, 800, 800)   # rows, top to bottom
```

- `fractol.fractals` — `FractalKind`, `Fractal` (with `iterations`,
  `color` and `point`), `escape_time`, `burning_ship_time` and `render`.
- `fractol.controls` — `handle_key` and `handle_mouse` apply the same
  panning, zooming and colour changes the window does; `parse_julia_args`
  and `check_number` validate command-line values, raising `InputError`.
- `fractol.app` — `build_fractal` turns command-line arguments into a
  `Fractal`, `run` opens the window, and `main` is the `fractol` command.

The package also carries small helpers with C-string semantics:
`fractol.chars` (ASCII classification), `fractol.strings` and
`fractol.strbuild` (searching, comparing, converting and building strings),
`fractol.memory` (byte-buffer operations on `bytearray`),
`fractol.linkedlist` (`LinkedList`), `fractol.output` (writing to a text
stream) and `fractol.formatting` (a small `printf` supporting
`%c %s %p %d %i %u %x %X %%`).

## What it does not do

The explorer only shows the fractal on screen: it has no option to save
the image to a file, and the iteration limit (100) and window size are fixed.

## Running the tests

```
pip install .[test]
pytest
```