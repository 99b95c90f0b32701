"""Exception taxonomy for point-buffer operations.

Every error raised by :mod:`pathmorph.buffers` derives from
:class:`PointBufferError`, itself a :class:`ValueError`, so callers may catch
either the specific class, the package base, or plain ``ValueError``.

Degenerate geometry (a single-point buffer) is *not* an error: the resampler
falls back to cyclic replication and logs it at DEBUG.
"""

from __future__ import annotations


class PointBufferError(ValueError):
    """Base class for all point-buffer errors."""

    pass


class InvalidArgumentError(PointBufferError):
    """Raised for caller arguments outside their domain.

    Examples: negative ``points_to_add``, weights outside ``[0, 1]``,
    an empty weight sequence, ``n_frames < 1``, an unknown easing name.
    """

    pass


class MalformedBufferError(PointBufferError):
    """Raised when coordinates cannot form a valid PointBuffer.

    Examples: odd coordinate count, zero points, non-finite values,
    multi-dimensional input.
    """

    pass
