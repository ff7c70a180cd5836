"""A sharp focus window gliding back and forth over blurred text."""

from typing import Any, List

from ..base_effect import BaseEffect, SegmentFrame, glyph_centers, register_effect
from ...Motion.clock import AnimationClock, ClockMode
from ...Motion.easing import get_curve


@register_effect("true_focus")
class TrueFocusEffect(BaseEffect):

    def __init__(
        self,
        parent_widget: Any = None,
        text: str = "",
        *,
        duration: float = 1.8,
        blur_sigma: float = 8.0,
        focus_width_fraction: float = 0.35,
        curve="ease_in_out",
        **kwargs,
    ):
        super().__init__(parent_widget, text, **kwargs)
        self.blur_sigma = blur_sigma
        self.focus_width_fraction = focus_width_fraction
        self.curve = get_curve(curve)
        self.clock = AnimationClock(duration, ClockMode.PING_PONG)

    def on_begin(self) -> None:
        self.clock.start()

    def advance(self, dt: float) -> None:
        self.clock.advance(dt)

    def focus_window(self):
        """Left and right pixel edges of the sharp region."""
        w = self.width_px
        focus_w = w * self.focus_width_fraction
        x = (w - focus_w) * self.curve(self.clock.value)
        return x, x + focus_w

    def frames(self) -> List[SegmentFrame]:
        left, right = self.focus_window()
        out = []
        for glyph, cx, _ in glyph_centers(self.text):
            in_focus = glyph == "\n" or left <= cx <= right
            out.append(SegmentFrame(glyph, blur=0.0 if in_focus else self.blur_sigma))
        return out

    def reset(self) -> None:
        super().reset()
        self.clock = AnimationClock(self.clock.duration, ClockMode.PING_PONG)
