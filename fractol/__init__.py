"""Interactive explorer for the Mandelbrot, Julia and Burning Ship fractals, with small string, buffer and formatting helpers."""

__version__ = "0.1.0"