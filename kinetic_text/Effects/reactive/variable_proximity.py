"""Glyphs that swell and brighten as the pointer approaches."""

import math
from typing import Any, List, Optional, Tuple

from ..base_effect import BaseEffect, SegmentFrame, cell_to_px, glyph_centers, register_effect
from ...Motion.easing import get_curve
from ...Motion.segmented_text import is_blank


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


@register_effect("variable_proximity_text")
class VariableProximityTextEffect(BaseEffect):
    """
    Scale and opacity of each glyph interpolate between their minimum and
    maximum over ``max_radius`` pixels around the pointer.
    Whitespace is never transformed.
    """

    def __init__(
        self,
        parent_widget: Any = None,
        text: str = "",
        *,
        max_radius: float = 140.0,
        min_scale: float = 0.95,
        max_scale: float = 1.20,
        min_opacity: float = 0.55,
        max_opacity: float = 1.0,
        curve="ease_out",
        **kwargs,
    ):
        super().__init__(parent_widget, text, **kwargs)
        self.max_radius = max_radius
        self.min_scale = min_scale
        self.max_scale = max_scale
        self.min_opacity = min_opacity
        self.max_opacity = max_opacity
        self.curve = get_curve(curve)
        self.pointer: Optional[Tuple[float, float]] = None
        self._centers = glyph_centers(text)

    def on_pointer_move(self, position: Tuple[float, float]) -> None:
        self.pointer = cell_to_px(position)

    def on_pointer_leave(self) -> None:
        self.pointer = None

    def influence(self, x: float, y: float) -> float:
        """Eased proximity in [0, 1] of a point to the pointer."""
        if self.pointer is None or self.max_radius <= 0:
            return 0.0
        d = math.hypot(self.pointer[0] - x, self.pointer[1] - y)
        return self.curve(min(max(1.0 - d / self.max_radius, 0.0), 1.0))

    def frames(self) -> List[SegmentFrame]:
        out = []
        for glyph, cx, cy in self._centers:
            if is_blank(glyph):
                out.append(SegmentFrame(glyph))
                continue
            t = self.influence(cx, cy)
            out.append(SegmentFrame(
                glyph,
                scale=lerp(self.min_scale, self.max_scale, t),
                opacity=lerp(self.min_opacity, self.max_opacity, t),
            ))
        return out

    def reset(self) -> None:
        super().reset()
        self.pointer = None


@register_effect("text_pressure")
class TextPressureEffect(VariableProximityTextEffect):
    """High-contrast proximity preset."""

    def __init__(self, parent_widget: Any = None, text: str = "", *, max_radius: float = 160.0, **kwargs):
        kwargs.setdefault("min_scale", 0.92)
        kwargs.setdefault("max_scale", 1.28)
        kwargs.setdefault("min_opacity", 0.45)
        kwargs.setdefault("max_opacity", 1.0)
        super().__init__(parent_widget, text, max_radius=max_radius, **kwargs)
