"""Easing curves for tween progress.

Each curve maps progress u in [0, 1] to [0, 1] with f(0) = 0 and f(1) = 1.
Curves accept floats or numpy arrays.
"""

from __future__ import annotations

from typing import Callable, Dict, List

import numpy as np

from pathmorph.buffers.errors import InvalidArgumentError

EasingFn = Callable[[np.ndarray], np.ndarray]


def linear(u):
    return u


def ease_in_quad(u):
    return u * u


def ease_out_quad(u):
    return u * (2.0 - u)


def ease_in_out_quad(u):
    u = np.asarray(u, dtype=np.float64)
    return np.where(u < 0.5, 2.0 * u * u, 1.0 - 2.0 * (1.0 - u) ** 2)


def ease_in_out_cubic(u):
    u = np.asarray(u, dtype=np.float64)
    return np.where(u < 0.5, 4.0 * u ** 3, 1.0 - 4.0 * (1.0 - u) ** 3)


def smoothstep(u):
    return u * u * (3.0 - 2.0 * u)


_EASINGS: Dict[str, EasingFn] = {
    "linear": linear,
    "ease_in_quad": ease_in_quad,
    "ease_out_quad": ease_out_quad,
    "ease_in_out_quad": ease_in_out_quad,
    "ease_in_out_cubic": ease_in_out_cubic,
    "smoothstep": smoothstep,
}


def available_easings() -> List[str]:
    return sorted(_EASINGS)


def get_easing(name: str) -> EasingFn:
    """Look up an easing curve by name.

    Raises
    ------
    InvalidArgumentError
        If ``name`` is not registered (message lists the valid names).
    """
    try:
        return _EASINGS[name]
    except KeyError as e:
        raise InvalidArgumentError(
            f"Unknown easing '{name}'. Available: {', '.join(available_easings())}"
        ) from e
