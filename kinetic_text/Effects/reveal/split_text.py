"""Staggered per-segment reveal: each word fades in while sliding into place."""

from enum import Enum
from typing import Any, List, Tuple

from ..base_effect import BaseEffect, SegmentFrame, register_effect
from ...Motion.clock import AnimationClock
from ...Motion.easing import get_curve
from ...Motion.motion_trigger import MotionTrigger
from ...Motion.segmented_text import AnimateBy, split
from ...Motion.stagger import interval01


class SplitDirection(Enum):
    """Where a segment travels from."""
    UP = "up"        # rises from below
    DOWN = "down"    # drops from above
    LEFT = "left"    # enters from the right
    RIGHT = "right"  # enters from the left


class StaggeredRevealEffect(BaseEffect):
    """
    Shared machinery for reveals driven by one forward clock.

    The eased clock value is fanned out into per-segment progress with
    ``interval01``; subclasses turn each segment's progress into a frame.
    """

    DEFAULT_TRIGGER = MotionTrigger.ON_VISIBLE

    def __init__(
        self,
        parent_widget: Any = None,
        text: str = "",
        *,
        duration: float = 0.9,
        delay_fraction: float = 0.35,
        animate_by=AnimateBy.WORDS,
        curve="ease_out_cubic",
        **kwargs,
    ):
        super().__init__(parent_widget, text, **kwargs)
        self.animate_by = AnimateBy(animate_by)
        self.delay_fraction = delay_fraction
        self.curve = get_curve(curve)
        self.segments = split(text, self.animate_by)
        self.clock = AnimationClock(duration)

    def on_begin(self) -> None:
        self.clock.start()

    def advance(self, dt: float) -> None:
        self.clock.advance(dt)

    @property
    def progress(self) -> float:
        return self.curve(self.clock.value)

    def segment_progress(self) -> List[float]:
        p = self.progress
        count = len(self.segments)
        return [interval01(i, count, self.delay_fraction, p) for i in range(count)]

    def segment_frame(self, segment: str, t: float) -> SegmentFrame:
        return SegmentFrame(segment, opacity=t)

    def frames(self) -> List[SegmentFrame]:
        return [
            self.segment_frame(segment, t)
            for segment, t in zip(self.segments, self.segment_progress())
        ]

    def reset(self) -> None:
        super().reset()
        self.clock = AnimationClock(self.clock.duration)


@register_effect("split_text")
class SplitTextEffect(StaggeredRevealEffect):
    """Segments fade in and slide from ``direction`` by ``distance`` pixels."""

    def __init__(self, parent_widget: Any = None, text: str = "", *, direction=SplitDirection.UP, distance: float = 18.0, **kwargs):
        super().__init__(parent_widget, text, **kwargs)
        self.direction = SplitDirection(direction)
        self.distance = distance

    def from_offset(self) -> Tuple[float, float]:
        d = self.distance
        return {
            SplitDirection.UP: (0.0, d),
            SplitDirection.DOWN: (0.0, -d),
            SplitDirection.LEFT: (d, 0.0),
            SplitDirection.RIGHT: (-d, 0.0),
        }[self.direction]

    def segment_frame(self, segment: str, t: float) -> SegmentFrame:
        fx, fy = self.from_offset()
        return SegmentFrame(
            segment,
            opacity=t,
            offset_x=fx * (1 - t),
            offset_y=fy * (1 - t),
        )
