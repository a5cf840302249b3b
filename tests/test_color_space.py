import numpy as np
import pytest

from contrast_color.color_space import (
    LabColor,
    RGBColor,
    from_lab,
    lab_to_rgb,
    rgb_to_lab,
    to_lab,
)


def test_white_and_black_reference_points():
    white = to_lab(RGBColor(1.0, 1.0, 1.0))
    black = to_lab(RGBColor(0.0, 0.0, 0.0))
    assert white == pytest.approx((100.0, 0.0, 0.0), abs=1e-3)
    assert black == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)


def test_primary_red():
    red = to_lab(RGBColor(1.0, 0.0, 0.0))
    assert isinstance(red, LabColor)
    assert red.L == pytest.approx(53.24, abs=0.05)
    assert red.a == pytest.approx(80.09, abs=0.05)
    assert red.b == pytest.approx(67.20, abs=0.05)


def test_magenta():
    magenta = to_lab((1.0, 0.0, 1.0))
    assert magenta == pytest.approx((60.32, 98.23, -60.82), abs=0.05)


def test_dark_colors_use_linear_segment():
    # 0.02 is below the 0.04045 companding threshold
    lab = to_lab((0.02, 0.02, 0.02))
    assert 0 < lab.L < 5
    assert lab.a == pytest.approx(0.0, abs=1e-3)
    assert lab.b == pytest.approx(0.0, abs=1e-3)


def test_vectorized_conversion_matches_scalar():
    rgbs = np.array([[0.1, 0.2, 0.3], [0.9, 0.5, 0.0], [1.0, 1.0, 1.0]])
    labs = rgb_to_lab(rgbs)
    assert labs.shape == (3, 3)
    for rgb, lab in zip(rgbs, labs):
        assert to_lab(rgb) == pytest.approx(tuple(lab))


def test_empty_array_converts_to_empty():
    assert rgb_to_lab(np.empty((0, 3))).shape == (0, 3)


def test_round_trip_through_lab():
    rng = np.random.default_rng(7)
    rgbs = rng.random((200, 3))
    back = lab_to_rgb(rgb_to_lab(rgbs))
    np.testing.assert_allclose(back, rgbs, atol=1e-6)


def test_from_lab_returns_rgb_color():
    rgb = RGBColor(0.25, 0.5, 0.75)
    back = from_lab(to_lab(rgb))
    assert isinstance(back, RGBColor)
    assert back == pytest.approx(rgb, abs=1e-6)
