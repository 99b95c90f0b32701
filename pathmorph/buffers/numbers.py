"""Scalar helpers shared by the blend arithmetic.

All helpers accept Python floats or numpy arrays (broadcasting applies).
"""

from __future__ import annotations

from typing import TypeVar

import numpy as np

from pathmorph.buffers.errors import InvalidArgumentError

T = TypeVar("T", float, np.ndarray)


def lerp(a: T, b: T, t: T) -> T:
    """Linear interpolation, ``a`` at ``t=0`` and ``b`` at ``t=1``.

    Uses ``(1 - t) * a + t * b`` rather than ``a + t * (b - a)``: both
    endpoints are then reproduced exactly in floating point.
    """
    return (1.0 - t) * a + t * b


def clamp(lo: float, hi: float, value: T) -> T:
    """Limit ``value`` to ``[lo, hi]``.

    Raises
    ------
    InvalidArgumentError
        If ``lo > hi``.
    """
    if lo > hi:
        raise InvalidArgumentError(f"clamp bounds inverted: lo={lo} > hi={hi}")
    if isinstance(value, np.ndarray):
        return np.clip(value, lo, hi)
    return lo if value <= lo else hi if value >= hi else value


def clamp01(value: T) -> T:
    return clamp(0.0, 1.0, value)
