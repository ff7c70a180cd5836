"""Staggered reveal where each segment sharpens out of a blur."""

from enum import Enum
from typing import Any, Tuple

from ..base_effect import SegmentFrame, register_effect
from .split_text import StaggeredRevealEffect


class BlurDirection(Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    NONE = "none"


@register_effect("blur_text")
class BlurTextEffect(StaggeredRevealEffect):
    """Blur sigma falls from ``max_sigma`` to zero as the segment appears."""

    def __init__(
        self,
        parent_widget: Any = None,
        text: str = "",
        *,
        max_sigma: float = 10.0,
        direction=BlurDirection.TOP,
        distance: float = 10.0,
        **kwargs,
    ):
        super().__init__(parent_widget, text, **kwargs)
        self.max_sigma = max_sigma
        self.direction = BlurDirection(direction)
        self.distance = distance

    def slide_from(self) -> Tuple[float, float]:
        d = self.distance
        return {
            BlurDirection.TOP: (0.0, d),
            BlurDirection.BOTTOM: (0.0, -d),
            BlurDirection.LEFT: (d, 0.0),
            BlurDirection.RIGHT: (-d, 0.0),
            BlurDirection.NONE: (0.0, 0.0),
        }[self.direction]

    def segment_frame(self, segment: str, t: float) -> SegmentFrame:
        fx, fy = self.slide_from()
        return SegmentFrame(
            segment,
            opacity=t,
            offset_x=fx * (1 - t),
            offset_y=fy * (1 - t),
            blur=self.max_sigma * (1 - t),
        )
