# tests/unit/test_math.py

import pytest

from grid_identicon.utils.math import clamp, map_range


@pytest.mark.parametrize(
    "args, expected",
    [
        ((0, 0, 4095, 0, 360), 0.0),
        ((4095, 0, 4095, 0, 360), 360.0),
        ((255, 0, 255, 0, 20), 20.0),
        ((51, 0, 255, 0, 20), 4.0),
        ((5, 0, 10, 100, 200), 150.0),
        ((5, 0, 10, 200, 100), 150.0),
        ((15, 10, 20, 0, 1), 0.5),
        # Outside the source range extrapolates
        ((20, 0, 10, 0, 1), 2.0),
    ],
)
def test_map_range(args: tuple, expected: float) -> None:
    assert map_range(*args) == pytest.approx(expected)


def test_map_range_degenerate_source() -> None:
    with pytest.raises(ValueError):
        map_range(1, 3, 3, 0, 10)


@pytest.mark.parametrize(
    "value, expected",
    [(-1, 0), (0, 0), (128, 128), (255, 255), (300, 255)],
)
def test_clamp(value: int, expected: int) -> None:
    assert clamp(value, 0, 255) == expected
