"""BufferAligner: bring two PointBuffers to the same point count.

The shorter buffer is resampled with :func:`distribute` until it matches the
longer one. Slot order is preserved: the first element of the result always
corresponds to ``source`` and the second to ``target``.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from pathmorph.buffers.point_buffer import BufferLike, PointBuffer
from pathmorph.buffers.resample import distribute

logger = logging.getLogger(__name__)


class AlignedPair(NamedTuple):
    """Two buffers with equal point count, in the caller's slot order."""

    source: PointBuffer
    target: PointBuffer

    @property
    def point_count(self) -> int:
        return self.source.point_count


def align(source: BufferLike, target: BufferLike) -> AlignedPair:
    """Equalize point counts of ``source`` and ``target``.

    Parameters
    ----------
    source, target : PointBuffer or flat sequence
        Buffers to align

    Returns
    -------
    AlignedPair
        ``(source', target')`` with point count ``max(P_source, P_target)``.
        When the counts already match, the inputs are returned as they are
        (same objects if they were PointBuffers).
    """
    source = PointBuffer.coerce(source)
    target = PointBuffer.coerce(target)

    if source.point_count == target.point_count:
        return AlignedPair(source, target)

    source_is_shorter = source.point_count < target.point_count
    shorter, longer = (source, target) if source_is_shorter else (target, source)
    point_diff = longer.point_count - shorter.point_count

    logger.debug(
        "Aligning buffers: resampling %s from %d to %d points",
        "source" if source_is_shorter else "target",
        shorter.point_count, longer.point_count
    )
    resampled = distribute(shorter, point_diff)

    if source_is_shorter:
        return AlignedPair(resampled, longer)
    return AlignedPair(longer, resampled)
