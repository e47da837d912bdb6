import pytest

from chartkit.drawing.util import (
    distance,
    pixels_to_points,
    points_to_pixels,
    vector_distance,
)


@pytest.mark.parametrize("dpi", [72.0, 96.0, 150.0, 300.0])
@pytest.mark.parametrize("value", [0.0, 1.0, 12.5, 400.0])
def test_points_pixels_round_trip(dpi, value):
    assert pixels_to_points(dpi, points_to_pixels(dpi, value)) == pytest.approx(value)


def test_points_to_pixels_at_default_dpi():
    assert points_to_pixels(96.0, 72.0) == pytest.approx(96.0)
    assert pixels_to_points(96.0, 96.0) == pytest.approx(72.0)


def test_identity_at_72_dpi():
    assert points_to_pixels(72.0, 33.0) == pytest.approx(33.0)


def test_vector_distance_right_triangle():
    assert vector_distance(3.0, 4.0) == pytest.approx(5.0)


def test_distance_is_symmetric_and_matches_vector():
    assert distance(1.0, 2.0, 4.0, 6.0) == pytest.approx(distance(4.0, 6.0, 1.0, 2.0))
    assert distance(1.0, 2.0, 4.0, 6.0) == pytest.approx(vector_distance(3.0, 4.0))


def test_distance_to_self_is_zero():
    assert distance(7.5, -2.0, 7.5, -2.0) == 0.0