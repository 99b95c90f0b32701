"""PointBuffer: the flat coordinate array every buffer operation consumes.

A PointBuffer holds ``2*P`` floats encoding ``P`` points of an open polyline:

    [x0, y0, x1, y1, ..., x(P-1), y(P-1)]

Order matters (it is a path, not a set). Buffers are value objects: the
backing array is copied on construction and flagged read-only, so no
operation can mutate a buffer in place and every result is a fresh buffer.

Terminology:
    - point_count P: number of (x, y) pairs, always >= 1
    - edge_count E: segments between consecutive points, P - 1

Usage:
    from pathmorph.buffers import PointBuffer

    buf = PointBuffer([0, 0, 10, 0, 10, 10])
    buf.point_count            # 3
    buf.points                 # array([[0., 0.], [10., 0.], [10., 10.]])
    PointBuffer.from_points([(0, 0), (10, 0)])
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, List, Sequence, Tuple, Union

import numpy as np

from pathmorph.buffers.errors import MalformedBufferError

BufferLike = Union["PointBuffer", Sequence[float], np.ndarray]


@dataclass(frozen=True, eq=False, repr=False)
class PointBuffer:
    """Immutable flat buffer of 2D points.

    Parameters
    ----------
    coords : sequence of float
        Flat coordinates ``[x0, y0, x1, y1, ...]``. Must be one-dimensional,
        of even non-zero length, and finite.

    Raises
    ------
    MalformedBufferError
        If the coordinates violate any of the above.
    """

    coords: np.ndarray

    def __post_init__(self) -> None:
        try:
            arr = np.array(self.coords, dtype=np.float64, copy=True)
        except (TypeError, ValueError, OverflowError) as e:
            raise MalformedBufferError(f"Coordinates are not numeric: {e}") from e

        if arr.ndim != 1:
            raise MalformedBufferError(
                f"Expected flat coordinate sequence, got shape {arr.shape}"
            )
        if arr.size == 0:
            raise MalformedBufferError("PointBuffer requires at least one point, got 0 coordinates")
        if arr.size % 2 != 0:
            raise MalformedBufferError(
                f"Coordinate count must be even (x, y pairs), got {arr.size}"
            )
        if not np.isfinite(arr).all():
            nan_count = int(np.isnan(arr).sum())
            inf_count = int(np.isinf(arr).sum())
            raise MalformedBufferError(
                f"Coordinates contain non-finite values: {nan_count} NaNs, {inf_count} Infs"
            )

        arr.setflags(write=False)
        object.__setattr__(self, "coords", arr)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_points(cls, points: Sequence[Sequence[float]]) -> "PointBuffer":
        """Build from ``(P, 2)`` point pairs."""
        try:
            arr = np.asarray(points, dtype=np.float64)
        except (TypeError, ValueError, OverflowError) as e:
            raise MalformedBufferError(f"Points are not numeric pairs: {e}") from e
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise MalformedBufferError(f"Expected points of shape (P, 2), got {arr.shape}")
        return cls(arr.reshape(-1))

    @classmethod
    def coerce(cls, value: BufferLike) -> "PointBuffer":
        """Return ``value`` unchanged if it is a PointBuffer, else wrap it."""
        if isinstance(value, cls):
            return value
        return cls(value)

    # ------------------------------------------------------------------
    # Geometry accessors
    # ------------------------------------------------------------------

    @property
    def point_count(self) -> int:
        return self.coords.size // 2

    @property
    def edge_count(self) -> int:
        return self.point_count - 1

    @property
    def points(self) -> np.ndarray:
        """Writable ``(P, 2)`` copy of the points."""
        return self.coords.reshape(-1, 2).copy()

    @property
    def first_point(self) -> Tuple[float, float]:
        return float(self.coords[0]), float(self.coords[1])

    @property
    def last_point(self) -> Tuple[float, float]:
        return float(self.coords[-2]), float(self.coords[-1])

    def to_list(self) -> List[float]:
        return [float(v) for v in self.coords]

    # ------------------------------------------------------------------
    # Sequence protocol (over flat coordinates)
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self.coords.size

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_list())

    def __getitem__(self, index: Any) -> Any:
        value = self.coords[index]
        if isinstance(value, np.ndarray):
            return value
        return float(value)

    def __array__(self, dtype: Any = None, copy: Any = None) -> np.ndarray:
        if dtype is not None and np.dtype(dtype) != self.coords.dtype:
            if copy is False:
                raise ValueError(f"Cannot convert PointBuffer to {np.dtype(dtype)} without a copy")
            return self.coords.astype(dtype)
        if copy:
            return self.coords.copy()
        return self.coords

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PointBuffer):
            return bool(np.array_equal(self.coords, other.coords))
        if isinstance(other, (list, tuple, np.ndarray)):
            try:
                other_arr = np.asarray(other, dtype=np.float64)
            except (TypeError, ValueError):
                return False
            return other_arr.shape == self.coords.shape and bool(
                np.array_equal(self.coords, other_arr)
            )
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PointBuffer(points={self.point_count}, coords={self.to_list()})"
