import pytest
from PIL import Image

from chartkit.drawing.color import COLOR_RED, COLOR_BLUE
from chartkit.drawing.line import bresenham, polyline_bresenham

RED = (255, 0, 0, 255)
BLANK = (0, 0, 0, 0)


def _painted(img, value=RED):
    width, height = img.size
    return {
        (x, y)
        for x in range(width)
        for y in range(height)
        if img.getpixel((x, y)) == value
    }


def test_horizontal_line_pixels():
    img = Image.new("RGBA", (10, 10))
    bresenham(img, COLOR_RED, 1, 3, 6, 3)
    assert _painted(img) == {(x, 3) for x in range(1, 7)}


def test_diagonal_line_pixels():
    img = Image.new("RGBA", (10, 10))
    bresenham(img, COLOR_RED, 0, 0, 5, 5)
    assert _painted(img) == {(i, i) for i in range(6)}


@pytest.mark.parametrize("end", [(8, 2), (2, 8), (0, 9), (9, 9)])
def test_line_pixel_count_and_endpoints(end):
    img = Image.new("RGBA", (10, 10))
    x1, y1 = end
    bresenham(img, COLOR_RED, 0, 0, x1, y1)
    painted = _painted(img)
    assert (0, 0) in painted
    assert end in painted
    assert len(painted) == max(abs(x1), abs(y1)) + 1


def test_reverse_direction_same_length():
    a = Image.new("RGBA", (10, 10))
    b = Image.new("RGBA", (10, 10))
    bresenham(a, COLOR_RED, 1, 2, 8, 5)
    bresenham(b, COLOR_RED, 8, 5, 1, 2)
    assert len(_painted(a)) == len(_painted(b))


def test_out_of_bounds_points_are_skipped():
    img = Image.new("RGBA", (5, 5))
    bresenham(img, COLOR_RED, -3, 2, 7, 2)
    assert _painted(img) == {(x, 2) for x in range(5)}


def test_rgb_image_receives_rgb_triplet():
    img = Image.new("RGB", (4, 4))
    bresenham(img, COLOR_BLUE, 0, 1, 3, 1)
    assert img.getpixel((2, 1)) == (0, 0, 255)


def test_polyline_rounds_and_connects():
    img = Image.new("RGBA", (10, 10))
    polyline_bresenham(img, COLOR_RED, 0.4, 0.4, 4.6, 0.2, 4.6, 4.4)
    painted = _painted(img)
    assert {(x, 0) for x in range(6)} <= painted
    assert {(5, y) for y in range(5)} <= painted
    assert len(painted) == 10


def test_polyline_single_point_draws_nothing():
    img = Image.new("RGBA", (4, 4))
    polyline_bresenham(img, COLOR_RED, 1.0, 1.0)
    assert _painted(img) == set()
    assert img.getpixel((1, 1)) == BLANK


def test_polyline_odd_coordinates_rejected():
    img = Image.new("RGBA", (4, 4))
    with pytest.raises(ValueError):
        polyline_bresenham(img, COLOR_RED, 1.0, 1.0, 2.0)