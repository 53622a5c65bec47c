import pytest

from fractol.fractals import (
    HEIGHT,
    JULIA_C,
    MAX_ITER,
    WIDTH,
    Fractal,
    FractalKind,
    burning_ship_time,
    escape_time,
    render,
)


def test_origin_never_escapes():
    assert escape_time(0.0, 0.0, 0.0, 0.0) == MAX_ITER
    assert burning_ship_time(0.0, 0.0, 0.0, 0.0) == MAX_ITER


def test_far_point_escapes_immediately():
    assert escape_time(2.0, 2.0, 2.0, 2.0) == 0
    assert burning_ship_time(2.0, 2.0, 2.0, 2.0) == 0


@pytest.mark.parametrize("x,y", [(0.3, 0.5), (-0.75, 0.1), (0.25, 0.6), (-1.2, 0.2)])
def test_mandelbrot_conjugate_symmetry(x, y):
    assert escape_time(x, y, x, y) == escape_time(x, -y, x, -y)


@pytest.mark.parametrize("x,y", [(0.3, 0.5), (-1.7, -0.05), (1.5, 1.5), (-0.5, -0.5)])
def test_iterations_within_bounds(x, y):
    assert 0 <= escape_time(x, y, x, y) <= MAX_ITER
    assert 0 <= burning_ship_time(x, y, x, y) <= MAX_ITER


def test_iterations_dispatch_by_kind():
    x, y = -0.4, 0.3
    assert Fractal(FractalKind.MANDELBROT).iterations(x, y) == escape_time(x, y, x, y)
    assert Fractal(FractalKind.SHIP).iterations(x, y) == burning_ship_time(x, y, x, y)
    assert Fractal(FractalKind.JULIA).iterations(x, y) == escape_time(x, y, *JULIA_C)


def test_color_at_zero_is_white():
    assert Fractal().color(0) == 0xFFFFFF


def test_color_without_tint_is_white():
    fractal = Fractal(r=0, g=0, b=0)
    assert fractal.color(MAX_ITER) == 0xFFFFFF


def test_color_fits_32_bits():
    fractal = Fractal(r=200, g=200, b=200)
    assert 0 <= fractal.color(MAX_ITER) <= 0xFFFFFFFF


def test_default_view_maps_centre_to_origin():
    assert Fractal().point(500, 500) == (0.0, 0.0)


def test_point_scales_with_scale():
    near = Fractal(scale=100.0).point(600, 400)
    far = Fractal(scale=200.0).point(600, 400)
    assert near[0] == 2 * far[0]
    assert near[1] == 2 * far[1]


def test_zero_scale_gives_zero_iterations():
    fractal = Fractal(scale=0.0)
    assert fractal.iterations(*fractal.point(10, 10)) == 0
    assert fractal.iterations(*fractal.point(500, 500)) == 0


def test_render_shape_and_pixels():
    fractal = Fractal(FractalKind.JULIA, scale=3.0, x0=-2.0, y0=2.0)
    pixels = render(fractal, 4, 3)
    assert len(pixels) == 3
    assert all(len(row) == 4 for row in pixels)
    for j, row in enumerate(pixels):
        for i, colour in enumerate(row):
            assert colour == fractal.color(fractal.iterations(*fractal.point(i, j)))


def test_default_view_window_corners():
    fractal = Fractal()
    assert fractal.point(0, 0) == pytest.approx((-2.0, 2.0))
    assert fractal.point(WIDTH, HEIGHT) == pytest.approx((1.2, -1.2))