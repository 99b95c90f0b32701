"""Animation helpers built on the point-buffer core.

No module in animation/ is imported by pathmorph.buffers.
"""

from pathmorph.animation.easing import available_easings, get_easing
from pathmorph.animation.tween import frame_progress, morph_frames

__all__ = [
    "available_easings",
    "frame_progress",
    "get_easing",
    "morph_frames",
]
