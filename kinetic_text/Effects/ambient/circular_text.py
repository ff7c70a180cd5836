"""Characters evenly spaced on a rotating circle."""

import math
from typing import Any, List, Optional

from rich.style import Style
from rich.text import Text

from ..base_effect import BaseEffect, register_effect
from ...Motion.clock import AnimationClock, ClockMode
from ...Motion.path_walker import GlyphPlacement
from ...Motion.segmented_text import graphemes, is_blank

RADIUS_FRACTION = 0.35


@register_effect("circular_text")
class CircularTextEffect(BaseEffect):
    """
    Glyph ``i`` of ``n`` sits at angle ``base + 2*pi*i/n`` measured
    clockwise from twelve o'clock, where ``base`` turns once per
    ``period`` seconds. Glyphs are rotated to stand along the radius.
    """

    USES_CANVAS = True
    CANVAS_SIZE = (32, 12)

    def __init__(
        self,
        parent_widget: Any = None,
        text: str = "",
        *,
        period: float = 8.0,
        clockwise: bool = True,
        radius: Optional[float] = None,
        **kwargs,
    ):
        super().__init__(parent_widget, text, **kwargs)
        self.clockwise = clockwise
        self.radius = radius
        self.glyphs = graphemes(text)
        self.clock = AnimationClock(period, ClockMode.REPEAT)

    @property
    def effective_radius(self) -> float:
        if self.radius is not None:
            return self.radius
        return min(self.width_px, self.height_px) * RADIUS_FRACTION

    def on_begin(self) -> None:
        self.clock.start()

    def advance(self, dt: float) -> None:
        self.clock.advance(dt)

    def placements(self) -> List[GlyphPlacement]:
        n = len(self.glyphs)
        if n == 0:
            return []
        direction = 1.0 if self.clockwise else -1.0
        base = direction * self.clock.value * math.pi * 2
        r = self.effective_radius
        cx, cy = self.width_px / 2, self.height_px / 2
        out = []
        for i, glyph in enumerate(self.glyphs):
            angle = base + (i / n) * math.pi * 2
            out.append(GlyphPlacement(
                glyph=glyph,
                char_index=i,
                x=cx + r * math.sin(angle),
                y=cy - r * math.cos(angle),
                angle=angle + math.pi / 2,
            ))
        return out

    def render(self) -> Text:
        grid, style_grid = self._new_grid()
        style = Style(color=self.foreground)
        for p in self.placements():
            if not is_blank(p.glyph):
                self._plot(grid, style_grid, p.x, p.y, p.glyph, style)
        return self._grid_to_text(grid, style_grid)

    def reset(self) -> None:
        super().reset()
        self.clock = AnimationClock(self.clock.duration, ClockMode.REPEAT)
