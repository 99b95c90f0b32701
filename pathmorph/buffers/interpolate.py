"""Interpolator: blend two PointBuffers point by point.

interpolate(source, target, weights) aligns both buffers, broadcasts the
weights to one value per point, and blends each point independently:

    x_i = (1 - w_i) * a.x_i + w_i * b.x_i      (same for y)

This is a componentwise linear blend, not a distance- or curvature-aware
morph. w_i = 0 reproduces the aligned source point exactly, w_i = 1 the
aligned target point.
"""

from __future__ import annotations

from pathmorph.buffers.align import align
from pathmorph.buffers.numbers import lerp
from pathmorph.buffers.point_buffer import BufferLike, PointBuffer
from pathmorph.buffers.weights import WeightsLike, broadcast


def interpolate(
    source: BufferLike,
    target: BufferLike,
    weights: WeightsLike = 0.5
) -> PointBuffer:
    """Morph ``source`` toward ``target``.

    Parameters
    ----------
    source, target : PointBuffer or flat sequence
        Buffers to blend; point counts may differ
    weights : float, sequence of float, Uniform or PerPoint
        Blend weight(s) in [0, 1], default 0.5. Sequences are reused
        cyclically when shorter than the point count.

    Returns
    -------
    PointBuffer
        New buffer with ``max(P_source, P_target)`` points

    Raises
    ------
    InvalidArgumentError
        If any weight is outside [0, 1] or the sequence is empty
    MalformedBufferError
        If either buffer is malformed

    Examples
    --------
    >>> interpolate([0, 0, 10, 0], [0, 0, 5, 5, 10, 10], 0.5).to_list()
    [0.0, 0.0, 5.0, 2.5, 10.0, 5.0]
    """
    a, b = align(source, target)
    w = broadcast(weights, a.point_count)[:, None]

    blended = lerp(a.coords.reshape(-1, 2), b.coords.reshape(-1, 2), w)
    return PointBuffer(blended.reshape(-1))
