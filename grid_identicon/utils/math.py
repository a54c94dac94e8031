"""Scalar helpers shared by the color derivation."""

from typing import TypeVar

Number = TypeVar("Number", int, float)


def map_range(
    value: float, src_min: float, src_max: float, dst_min: float, dst_max: float
) -> float:
    """Rescale ``value`` from ``[src_min, src_max]`` into ``[dst_min, dst_max]``.

    Same contract as Processing's ``map()``. Values outside the source range
    are extrapolated, not clamped.
    """
    if src_max == src_min:
        raise ValueError(f"Degenerate source range: [{src_min}, {src_max}]")
    return (value - src_min) / (src_max - src_min) * (dst_max - dst_min) + dst_min


def clamp(value: Number, low: Number, high: Number) -> Number:
    """Return ``value`` limited to the closed interval ``[low, high]``."""
    return max(low, min(high, value))
