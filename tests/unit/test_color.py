# tests/unit/test_color.py

import colorsys
from typing import Tuple

import pytest

from grid_identicon.color import HSL, hue_to_rgb, to_channel


@pytest.mark.parametrize(
    "hsl, expected",
    [
        # Boundary cases
        ((0, 0, 0), (0, 0, 0)),
        ((0, 0, 100), (255, 255, 255)),
        ((120, 100, 50), (0, 255, 0)),
        # Primaries and secondaries
        ((0, 100, 50), (255, 0, 0)),
        ((240, 100, 50), (0, 0, 255)),
        ((60, 100, 50), (255, 255, 0)),
        ((180, 100, 50), (0, 255, 255)),
        ((300, 100, 50), (255, 0, 255)),
        # Grays ignore hue
        ((0, 0, 50), (128, 128, 128)),
        ((200, 0, 50), (128, 128, 128)),
        # Hue of 360 wraps onto red
        ((360, 100, 50), (255, 0, 0)),
    ],
)
def test_hsl_to_rgb(
    hsl: Tuple[float, float, float], expected: Tuple[int, int, int]
) -> None:
    assert HSL(*hsl).rgb() == expected


@pytest.mark.parametrize(
    "hue, sat, lum",
    [
        (0.0, 65.0, 75.0),
        (17.5, 50.0, 60.0),
        (93.0, 45.0, 55.0),
        (211.0, 60.0, 70.0),
        (333.3, 64.0, 56.0),
    ],
)
def test_hsl_matches_colorsys(hue: float, sat: float, lum: float) -> None:
    r, g, b = colorsys.hls_to_rgb(hue / 360.0, lum / 100.0, sat / 100.0)
    expected = tuple(int(c * 255.0 + 0.5) for c in (r, g, b))
    actual = HSL(hue, sat, lum).rgb()
    for got, want in zip(actual, expected):
        assert abs(got - want) <= 1


def test_hue_to_rgb_wraps_offsets() -> None:
    a, b = 0.2, 0.8
    assert hue_to_rgb(a, b, -0.25) == pytest.approx(hue_to_rgb(a, b, 0.75))
    assert hue_to_rgb(a, b, 1.25) == pytest.approx(hue_to_rgb(a, b, 0.25))


@pytest.mark.parametrize(
    "hue, expected",
    [
        (0.0, 0.2),
        (1.0 / 12.0, 0.5),
        (0.25, 0.8),
        (0.6, 0.2 + 0.6 * (2.0 / 3.0 - 0.6) * 6.0),
        (0.9, 0.2),
    ],
)
def test_hue_to_rgb_pieces(hue: float, expected: float) -> None:
    assert hue_to_rgb(0.2, 0.8, hue) == pytest.approx(expected)


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.0, 0),
        (1.0, 255),
        (0.5, 128),  # 127.5 rounds away from zero
        (-0.1, 0),
        (1.1, 255),
    ],
)
def test_to_channel(value: float, expected: int) -> None:
    assert to_channel(value) == expected


def test_hsl_is_immutable() -> None:
    color = HSL(10.0, 20.0, 30.0)
    with pytest.raises(AttributeError):
        color.hue = 0.0  # type: ignore[misc]
