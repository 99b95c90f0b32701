"""Blend weights: a scalar for every point, or an explicit per-point sequence.

Two variants share one normalization path:

    Uniform(0.25)          -> every point blended at 0.25
    PerPoint((0.0, 1.0))   -> 0, 1, 0, 1, ... (cyclic reuse)

broadcast(weights, n) expands either variant to a length-n array by indexing
the sequence modulo its own length. Sequences shorter than n repeat, longer
ones are cut at n. All values must be finite and in [0, 1].
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Sequence, Tuple, Union

import numpy as np

from pathmorph.buffers.errors import InvalidArgumentError


def _check_weight(value: float, where: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgumentError(f"{where} must be a real number, got {value!r}")
    value = float(value)
    if not math.isfinite(value) or not 0.0 <= value <= 1.0:
        raise InvalidArgumentError(f"{where} must be in [0, 1], got {value}")
    return value


@dataclass(frozen=True, slots=True)
class Uniform:
    """Single blend weight applied to every point."""

    weight: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "weight", _check_weight(self.weight, "weight"))

    @property
    def values(self) -> Tuple[float, ...]:
        return (self.weight,)


@dataclass(frozen=True, slots=True)
class PerPoint:
    """Explicit per-point weights, reused cyclically.

    Parameters
    ----------
    weights : tuple[float, ...]
        Non-empty sequence of weights in [0, 1]. Any sequence or 1-D numpy
        array is accepted and stored as a tuple of floats.
    """

    weights: Tuple[float, ...]

    def __post_init__(self) -> None:
        if isinstance(self.weights, np.ndarray):
            raw = self.weights.ravel().tolist()
        else:
            try:
                raw = list(self.weights)
            except TypeError as e:
                raise InvalidArgumentError(
                    f"PerPoint weights must be a sequence, got {type(self.weights).__name__}"
                ) from e
        if not raw:
            raise InvalidArgumentError("PerPoint weights must contain at least one value")
        checked = tuple(_check_weight(w, f"weights[{i}]") for i, w in enumerate(raw))
        object.__setattr__(self, "weights", checked)

    @property
    def values(self) -> Tuple[float, ...]:
        return self.weights


Weights = Union[Uniform, PerPoint]
WeightsLike = Union[Weights, float, Sequence[float], np.ndarray]


def as_weights(value: WeightsLike) -> Weights:
    """Normalize a scalar, sequence, array, or variant into a variant."""
    if isinstance(value, (Uniform, PerPoint)):
        return value
    if isinstance(value, np.ndarray) and value.ndim == 0:
        return Uniform(value.item())
    if isinstance(value, Real) and not isinstance(value, bool):
        return Uniform(value)
    if isinstance(value, (str, bytes)):
        raise InvalidArgumentError(f"weights must be numeric, got {value!r}")
    try:
        return PerPoint(value)
    except TypeError as e:
        raise InvalidArgumentError(
            f"weights must be a number or a sequence of numbers, got {type(value).__name__}"
        ) from e


def broadcast(weights: WeightsLike, n: int) -> np.ndarray:
    """Expand weights to length ``n`` by cyclic indexing.

    Parameters
    ----------
    weights : Uniform, PerPoint, float or sequence
        Weights to expand
    n : int
        Target length, >= 1

    Returns
    -------
    np.ndarray
        Fresh float64 array of shape (n,), entry i = seq[i % len(seq)]
    """
    if n < 1:
        raise InvalidArgumentError(f"broadcast length must be >= 1, got {n}")
    seq = np.asarray(as_weights(weights).values, dtype=np.float64)
    return seq[np.arange(n) % seq.size]
