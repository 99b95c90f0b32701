"""Frame sequencing: turn one morph into an ordered list of animation frames.

morph_frames(source, target, n_frames) aligns the two buffers once and
interpolates at evenly spaced progress values u_t = t / (n_frames - 1),
optionally shaped by an easing curve and scaled per point by a profile:

    w_i(t) = easing(u_t) * profile_i

The first frame is the aligned source, the last the aligned target (for an
all-ones profile). A single frame is the target itself.

Usage:
    from pathmorph.animation import morph_frames

    frames = morph_frames(circle_buf, star_buf, n_frames=30, easing="smoothstep")
"""

from __future__ import annotations

import logging
from numbers import Integral
from typing import List, Optional

import numpy as np

from pathmorph.animation.easing import get_easing
from pathmorph.buffers import (
    BufferLike,
    InvalidArgumentError,
    PerPoint,
    PointBuffer,
    align,
    broadcast,
    clamp01,
    interpolate,
)
from pathmorph.buffers.weights import WeightsLike

logger = logging.getLogger(__name__)


def _validate_frame_count(n_frames: int) -> int:
    if isinstance(n_frames, bool) or not isinstance(n_frames, Integral):
        raise InvalidArgumentError(f"n_frames must be an integer, got {type(n_frames).__name__}")
    if n_frames < 1:
        raise InvalidArgumentError(f"n_frames must be >= 1, got {n_frames}")
    return int(n_frames)


def frame_progress(n_frames: int, easing: str = "linear") -> np.ndarray:
    """Eased progress value for each frame.

    Parameters
    ----------
    n_frames : int
        Number of frames, >= 1
    easing : str
        Easing curve name, default "linear"

    Returns
    -------
    np.ndarray
        Shape (n_frames,), values in [0, 1]; starts at 0 and ends at 1 when
        ``n_frames > 1``, ``[1.0]`` for a single frame
    """
    n_frames = _validate_frame_count(n_frames)
    ease = get_easing(easing)

    if n_frames == 1:
        return np.ones(1, dtype=np.float64)

    u = np.arange(n_frames, dtype=np.float64) / (n_frames - 1)
    return clamp01(np.asarray(ease(u), dtype=np.float64))


def morph_frames(
    source: BufferLike,
    target: BufferLike,
    n_frames: int,
    easing: str = "linear",
    weights: Optional[WeightsLike] = None
) -> List[PointBuffer]:
    """Interpolated frames from ``source`` to ``target``.

    Parameters
    ----------
    source, target : PointBuffer or flat sequence
        Start and end shapes; point counts may differ
    n_frames : int
        Number of frames, >= 1
    easing : str
        Easing curve applied to frame progress, default "linear"
    weights : float, sequence or weight variant, optional
        Per-point profile in [0, 1] multiplied into every frame's weight,
        reused cyclically; None means all ones

    Returns
    -------
    List[PointBuffer]
        ``n_frames`` buffers, each with ``max(P_source, P_target)`` points
    """
    progress = frame_progress(n_frames, easing)
    a, b = align(source, target)

    if weights is None:
        profile = np.ones(a.point_count, dtype=np.float64)
    else:
        profile = broadcast(weights, a.point_count)

    logger.debug(
        "Building %d frames over %d points (easing=%s)",
        len(progress), a.point_count, easing
    )
    return [interpolate(a, b, PerPoint(u * profile)) for u in progress]
