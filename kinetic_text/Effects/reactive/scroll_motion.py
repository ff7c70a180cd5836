"""Effects reacting to the velocity of an enclosing scroll view."""

import time
from typing import Any, List, Optional

from ..base_effect import BaseEffect, SegmentFrame, register_effect, CELL_HEIGHT_PX
from ...Motion.velocity_tracker import VELOCITY_RETAIN, VelocityTracker


class ScrollVelocityEffect(BaseEffect):
    """Feeds scroll positions (in cells) into a smoothed velocity in pixels per second."""

    VELOCITY_SCALE = 2200.0

    def __init__(self, parent_widget: Any = None, text: str = "", *, velocity_retain: float = VELOCITY_RETAIN, **kwargs):
        super().__init__(parent_widget, text, **kwargs)
        self.tracker = VelocityTracker(retain=velocity_retain)

    def on_scroll(self, position: float, timestamp_ms: Optional[float] = None) -> None:
        if timestamp_ms is None:
            timestamp_ms = time.monotonic() * 1000.0
        self.tracker.on_sample(timestamp_ms, position * CELL_HEIGHT_PX)

    @property
    def intensity(self) -> float:
        return self.tracker.normalized(self.VELOCITY_SCALE)

    def reset(self) -> None:
        super().reset()
        self.tracker.reset()


@register_effect("scroll_float_text")
class ScrollFloatTextEffect(ScrollVelocityEffect):
    """Drifts along the scroll direction and fades while scrolling fast."""

    VELOCITY_SCALE = 2200.0

    def __init__(self, parent_widget: Any = None, text: str = "", *, max_offset: float = 24.0, max_fade: float = 0.35, **kwargs):
        super().__init__(parent_widget, text, **kwargs)
        self.max_offset = max_offset
        self.max_fade = max_fade

    def frames(self) -> List[SegmentFrame]:
        t = self.intensity
        return [SegmentFrame(
            self.text,
            offset_y=self.max_offset * t * self.tracker.direction,
            opacity=min(max(1.0 - self.max_fade * t, 0.0), 1.0),
        )]


@register_effect("scroll_velocity_text")
class ScrollVelocityTextEffect(ScrollVelocityEffect):
    """Skews and blurs in proportion to scroll speed."""

    VELOCITY_SCALE = 2600.0

    def __init__(self, parent_widget: Any = None, text: str = "", *, max_skew: float = 0.25, max_blur: float = 6.0, **kwargs):
        super().__init__(parent_widget, text, **kwargs)
        self.max_skew = max_skew
        self.max_blur = max_blur

    def frames(self) -> List[SegmentFrame]:
        t = self.intensity
        return [SegmentFrame(
            self.text,
            skew=self.max_skew * t * self.tracker.direction,
            blur=self.max_blur * t,
        )]
