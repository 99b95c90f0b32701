"""pathmorph: polyline resampling and morphing for 2D generative art.

Architecture layers (strict one-way dependency):
    scripts/ → pathmorph.animation → pathmorph.buffers
    every layer may use pathmorph.utils; utils imports nothing above it

Key invariants:
    - Buffers are flat [x0, y0, x1, y1, ...] float arrays, never mutated
    - Resampling keeps the first and last point bit-for-bit
    - Blend weights live in [0, 1] and are reused cyclically per point
    - YAML-only job and frame files
"""

__version__ = "0.3.0"

from pathmorph.buffers import (
    AlignedPair,
    InvalidArgumentError,
    MalformedBufferError,
    PerPoint,
    PointBuffer,
    PointBufferError,
    Uniform,
    align,
    distribute,
    interpolate,
)

__all__ = [
    "AlignedPair",
    "InvalidArgumentError",
    "MalformedBufferError",
    "PerPoint",
    "PointBuffer",
    "PointBufferError",
    "Uniform",
    "__version__",
    "align",
    "distribute",
    "interpolate",
]
