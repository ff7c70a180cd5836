"""A bright band sweeping across text, and a slowly turning colour gradient."""

import math
from typing import Any, List, Sequence

from ..base_effect import (
    BaseEffect,
    SegmentFrame,
    even_stops,
    glyph_centers,
    gradient_color,
    register_effect,
    CELL_HEIGHT_PX,
)
from ...Motion.clock import AnimationClock, ClockMode

SHINE_STOPS = (0.0, 0.35, 0.5, 0.65, 1.0)


class LoopingColorEffect(BaseEffect):
    """Colours each grapheme from its position and a repeating clock."""

    def __init__(self, parent_widget: Any = None, text: str = "", *, duration: float = 2.0, **kwargs):
        super().__init__(parent_widget, text, **kwargs)
        self.clock = AnimationClock(duration, ClockMode.REPEAT)

    def on_begin(self) -> None:
        self.clock.start()

    def advance(self, dt: float) -> None:
        self.clock.advance(dt)

    def alignment(self, x_px: float, y_px: float):
        """Map a pixel position into [-1, 1] alignment space over the text box."""
        ax = -1.0 + 2.0 * x_px / self.width_px
        ay = -1.0 + 2.0 * y_px / max(self.height * CELL_HEIGHT_PX, 1.0)
        return ax, ay

    def color_at(self, ax: float, ay: float) -> str:
        raise NotImplementedError

    def frames(self) -> List[SegmentFrame]:
        out = []
        for glyph, cx, cy in glyph_centers(self.text):
            if glyph == "\n" or not glyph.strip():
                out.append(SegmentFrame(glyph))
                continue
            out.append(SegmentFrame(glyph, color=self.color_at(*self.alignment(cx, cy))))
        return out

    def reset(self) -> None:
        super().reset()
        self.clock = AnimationClock(self.clock.duration, ClockMode.REPEAT)


@register_effect("shiny_text")
class ShinyTextEffect(LoopingColorEffect):
    """The shine centre travels from -1.2 to 1.2 across the text every cycle."""

    def __init__(
        self,
        parent_widget: Any = None,
        text: str = "",
        *,
        duration: float = 1.8,
        base_color: str = "#CBD5E1",
        shine_color: str = "#FFFFFF",
        **kwargs,
    ):
        kwargs.setdefault("color", base_color)
        super().__init__(parent_widget, text, duration=duration, **kwargs)
        self.base_color = base_color
        self.shine_color = shine_color
        colors = [base_color, base_color, shine_color, base_color, base_color]
        self.stops = list(zip(SHINE_STOPS, colors))

    @property
    def center(self) -> float:
        return -1.2 + 2.4 * self.clock.value

    def color_at(self, ax: float, ay: float) -> str:
        # The gradient spans [center - 1, center + 1]
        position = (ax - (self.center - 1.0)) / 2.0
        return gradient_color(self.stops, position)


@register_effect("gradient_text")
class GradientTextEffect(LoopingColorEffect):
    """A diagonal gradient whose end points orbit, so the fill keeps shifting."""

    def __init__(
        self,
        parent_widget: Any = None,
        text: str = "",
        *,
        duration: float = 2.4,
        colors: Sequence[str] = ("#7C3AED", "#06B6D4", "#F59E0B"),
        **kwargs,
    ):
        super().__init__(parent_widget, text, duration=duration, **kwargs)
        self.colors = list(colors) or [self.foreground]
        self.stops = even_stops(self.colors)

    def endpoints(self):
        angle = self.clock.value * math.pi * 2
        dx = math.cos(angle) * 0.35
        dy = math.sin(angle) * 0.35
        return (-1 - dx, -1 - dy), (1 - dx, 1 - dy)

    def color_at(self, ax: float, ay: float) -> str:
        (bx, by), (ex, ey) = self.endpoints()
        vx, vy = ex - bx, ey - by
        length_sq = vx * vx + vy * vy
        position = ((ax - bx) * vx + (ay - by) * vy) / length_sq
        return gradient_color(self.stops, position)
