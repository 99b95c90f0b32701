"""Resampler: insert evenly spread points into a PointBuffer.

distribute(buffer, points_to_add) returns a buffer with exactly
``P + points_to_add`` points. Original vertices are kept (copied, never
recomputed), so the first and last point survive bit-for-bit; every inserted
point lies on the straight edge between two original vertices.

Edge allocation (E = P - 1 edges, N points to add):
    - every edge gets base = N // E new points
    - the remainder R = N - base*E is spread with a fixed interval
      step = round_half_up(E / R): edge i takes one extra point when
      i % step == 0, and the last edge takes whatever is still outstanding

The interval rule is an approximation, not a uniform spread: extras cluster
near multiples of ``step``. Downstream animation depends on this exact
placement, so it is kept as is.

Single-point buffers (E = 0) cannot be interpolated; output point i is the
source point i mod P (cyclic replication).
"""

from __future__ import annotations

import logging
import math
from numbers import Integral
from typing import List

import numpy as np

from pathmorph.buffers.errors import InvalidArgumentError
from pathmorph.buffers.numbers import lerp
from pathmorph.buffers.point_buffer import BufferLike, PointBuffer

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; 2.5 must give 3 here.
    return int(math.floor(value + 0.5))


def _validate_points_to_add(points_to_add: int) -> int:
    if isinstance(points_to_add, bool) or not isinstance(points_to_add, Integral):
        raise InvalidArgumentError(
            f"points_to_add must be an integer, got {type(points_to_add).__name__}"
        )
    if points_to_add < 0:
        raise InvalidArgumentError(f"points_to_add must be >= 0, got {points_to_add}")
    return int(points_to_add)


def edge_allocation(edge_count: int, points_to_add: int) -> List[int]:
    """Number of new points each edge receives.

    Parameters
    ----------
    edge_count : int
        Number of edges E, >= 1
    points_to_add : int
        Total points to insert N, >= 0

    Returns
    -------
    List[int]
        Length E, sums to N

    Examples
    --------
    >>> edge_allocation(2, 2)
    [1, 1]
    >>> edge_allocation(5, 2)
    [1, 0, 0, 1, 0]
    """
    if edge_count < 1:
        raise InvalidArgumentError(f"edge_count must be >= 1, got {edge_count}")
    points_to_add = _validate_points_to_add(points_to_add)

    base, remainder = divmod(points_to_add, edge_count)
    counts = [base] * edge_count
    if remainder == 0:
        return counts

    step = _round_half_up(edge_count / remainder)
    remaining = remainder
    last_edge = edge_count - 1

    for edge_index in range(edge_count):
        if remaining == 0:
            break
        if edge_index == last_edge:
            counts[edge_index] += remaining
            remaining = 0
        elif edge_index % step == 0:
            counts[edge_index] += 1
            remaining -= 1

    return counts


def distribute(
    buffer: BufferLike,
    points_to_add: int,
    *,
    replicate_single_edge: bool = False
) -> PointBuffer:
    """Insert ``points_to_add`` points along the edges of ``buffer``.

    Parameters
    ----------
    buffer : PointBuffer or flat sequence
        Source polyline, >= 1 point
    points_to_add : int
        Number of points to insert, >= 0
    replicate_single_edge : bool
        If True, a two-point buffer is replicated cyclically instead of
        interpolated along its single edge (legacy placement), default False

    Returns
    -------
    PointBuffer
        New buffer with ``P + points_to_add`` points

    Raises
    ------
    InvalidArgumentError
        If ``points_to_add`` is negative or not an integer
    MalformedBufferError
        If ``buffer`` is not a valid PointBuffer

    Notes
    -----
    Inserted points on an edge A→B with k new points sit at parametric
    offsets o = j/(k+1), j = 1..k, computed as (1-o)*A + o*B.
    """
    buf = PointBuffer.coerce(buffer)
    points_to_add = _validate_points_to_add(points_to_add)

    point_count = buf.point_count
    edge_count = buf.edge_count
    final_count = point_count + points_to_add

    if edge_count == 0 or (edge_count == 1 and replicate_single_edge):
        logger.debug(
            "Replicating %d-point buffer cyclically to %d points",
            point_count, final_count
        )
        return PointBuffer(np.resize(buf.coords, final_count * 2))

    allocation = edge_allocation(edge_count, points_to_add)
    base, remainder = divmod(points_to_add, edge_count)
    step = _round_half_up(edge_count / remainder) if remainder else 0
    logger.debug(
        "Distributing %d points over %d edges (base=%d, remainder=%d, step=%d)",
        points_to_add, edge_count, base, remainder, step
    )

    src = buf.coords.reshape(-1, 2)
    out = np.empty((final_count, 2), dtype=np.float64)
    out[0] = src[0]
    r = 1

    for edge_index, k in enumerate(allocation):
        a = src[edge_index]
        b = src[edge_index + 1]
        if k:
            offsets = (np.arange(1, k + 1, dtype=np.float64) / (k + 1))[:, None]
            out[r:r + k] = lerp(a, b, offsets)
            r += k
        # Original vertex, copied verbatim
        out[r] = b
        r += 1

    return PointBuffer(out.reshape(-1))
