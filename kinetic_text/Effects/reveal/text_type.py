"""Typewriter reveal with a blinking cursor."""

from typing import Any, List

from ..base_effect import BaseEffect, SegmentFrame, register_effect
from ...Motion.clock import AnimationClock, ClockMode
from ...Motion.easing import get_curve
from ...Motion.motion_trigger import MotionTrigger
from ...Motion.segmented_text import graphemes


@register_effect("text_type")
class TextTypeEffect(BaseEffect):
    DEFAULT_TRIGGER = MotionTrigger.ON_VISIBLE

    def __init__(
        self,
        parent_widget: Any = None,
        text: str = "",
        *,
        duration: float = 1.4,
        curve="linear",
        show_cursor: bool = True,
        cursor: str = "▍",
        cursor_blink: float = 0.52,
        **kwargs,
    ):
        super().__init__(parent_widget, text, **kwargs)
        self.glyphs = graphemes(text)
        self.curve = get_curve(curve)
        self.show_cursor = show_cursor
        self.cursor = cursor
        self.clock = AnimationClock(duration)
        # The cursor blinks from construction, before typing starts
        self.blink = AnimationClock(cursor_blink, ClockMode.PING_PONG)
        self.blink.start()

    def on_begin(self) -> None:
        self.clock.start()

    def advance(self, dt: float) -> None:
        self.clock.advance(dt)
        self.blink.advance(dt)

    @property
    def visible_count(self) -> int:
        p = self.curve(self.clock.value)
        return min(max(int(p * len(self.glyphs)), 0), len(self.glyphs))

    def frames(self) -> List[SegmentFrame]:
        out = [SegmentFrame("".join(self.glyphs[:self.visible_count]))]
        if self.show_cursor:
            out.append(SegmentFrame(self.cursor, opacity=self.blink.value))
        return out

    def reset(self) -> None:
        super().reset()
        self.clock = AnimationClock(self.clock.duration)
        self.blink = AnimationClock(self.blink.duration, ClockMode.PING_PONG)
        self.blink.start()
