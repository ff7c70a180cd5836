"""Characters left behind at recent pointer positions, fading out."""

from dataclasses import dataclass
from typing import Any, List, Tuple

from rich.style import Style
from rich.text import Text

from ..base_effect import BaseEffect, blend_colors, cell_to_px, register_effect
from ...Motion.segmented_text import graphemes


@dataclass(frozen=True)
class TrailPoint:
    x: float
    y: float
    born: float
    index: int


@register_effect("text_cursor_trail")
class TextCursorTrailEffect(BaseEffect):
    """Keeps at most ``max_points`` positions; each fades over ``fade`` seconds."""

    USES_CANVAS = True

    def __init__(
        self,
        parent_widget: Any = None,
        text: str = "",
        *,
        max_points: int = 22,
        fade: float = 0.7,
        **kwargs,
    ):
        super().__init__(parent_widget, text, **kwargs)
        self.max_points = max(1, max_points)
        self.fade = fade
        self.glyphs = [g for g in graphemes(text) if g != "\n"] or ["*"]
        self.points: List[TrailPoint] = []
        self._counter = 0

    def on_pointer_move(self, position: Tuple[float, float]) -> None:
        x, y = cell_to_px(position)
        self.points.append(TrailPoint(x, y, self.elapsed, self._counter))
        self._counter += 1
        while len(self.points) > self.max_points:
            self.points.pop(0)

    def opacity_of(self, point: TrailPoint) -> float:
        if self.fade <= 0:
            return 0.0
        age = (self.elapsed - point.born) / self.fade
        return min(max(1.0 - age, 0.0), 1.0)

    def render(self) -> Text:
        grid, style_grid = self._new_grid()
        for point in self.points:
            o = self.opacity_of(point)
            if o <= 0:
                continue
            glyph = self.glyphs[point.index % len(self.glyphs)]
            style = Style(color=blend_colors(self.background, self.foreground, o))
            self._plot(grid, style_grid, point.x, point.y, glyph, style)
        return self._grid_to_text(grid, style_grid)

    def reset(self) -> None:
        super().reset()
        self.points = []
        self._counter = 0
