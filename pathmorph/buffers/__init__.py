"""Point-buffer core: resampling, alignment and interpolation.

Call chain (no other dependencies):
    interpolate → align → distribute

All operations are pure: inputs are never mutated and every call returns a
fresh PointBuffer.

Convenience imports:
    from pathmorph.buffers import PointBuffer, distribute, align, interpolate
"""

from pathmorph.buffers.align import AlignedPair, align
from pathmorph.buffers.errors import (
    InvalidArgumentError,
    MalformedBufferError,
    PointBufferError,
)
from pathmorph.buffers.interpolate import interpolate
from pathmorph.buffers.numbers import clamp, clamp01, lerp
from pathmorph.buffers.point_buffer import BufferLike, PointBuffer
from pathmorph.buffers.resample import distribute, edge_allocation
from pathmorph.buffers.weights import PerPoint, Uniform, Weights, as_weights, broadcast

__all__ = [
    "AlignedPair",
    "BufferLike",
    "InvalidArgumentError",
    "MalformedBufferError",
    "PerPoint",
    "PointBuffer",
    "PointBufferError",
    "Uniform",
    "Weights",
    "align",
    "as_weights",
    "broadcast",
    "clamp",
    "clamp01",
    "distribute",
    "edge_allocation",
    "interpolate",
    "lerp",
]
