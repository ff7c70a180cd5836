"""
Marquee text scrolling endlessly along curves.

By default two opposing arcs are used and the lower one scrolls the
other way. Dragging scrubs the ribbon and leaves a decaying residual
velocity.
"""

from typing import Any, Callable, List, Optional, Tuple

from rich.cells import cell_len
from rich.style import Style
from rich.text import Text

from ..base_effect import BaseEffect, register_effect, CELL_WIDTH_PX, CELL_HEIGHT_PX, FONT_SIZE_PX
from ...Motion.loop_scroller import DRAG_DECAY_PER_SECOND, LoopScroller
from ...Motion.path_walker import GlyphPlacement, PathWalker, band_width
from ...Motion.paths import SampledPath, default_loop_paths
from ...Motion.segmented_text import is_blank

PathBuilder = Callable[[float, float], List[SampledPath]]


def cell_measure(glyph: str) -> float:
    """Advance width of a glyph on the cell grid, in pixels."""
    return cell_len(glyph) * CELL_WIDTH_PX


@register_effect("curved_loop")
class CurvedLoopEffect(BaseEffect):

    USES_CANVAS = True
    CANVAS_SIZE = (48, 12)

    def __init__(
        self,
        parent_widget: Any = None,
        text: str = "",
        *,
        speed: float = 60.0,
        reverse: bool = False,
        interactive: bool = True,
        gap: str = "   •   ",
        path_builder: Optional[PathBuilder] = None,
        strip_color: Optional[str] = None,
        strip_padding: float = 6.0,
        drag_decay: float = DRAG_DECAY_PER_SECOND,
        **kwargs,
    ):
        super().__init__(parent_widget, text, **kwargs)
        self.interactive = interactive
        self.gap = gap
        self.path_builder = path_builder or default_loop_paths
        self.strip_color = strip_color
        self.strip_padding = strip_padding
        self.scroller = LoopScroller(speed=speed, reverse=reverse, drag_decay=drag_decay)
        self.walker = PathWalker.from_text(text, gap, font_size=FONT_SIZE_PX, measure=cell_measure)
        self._paths_key: Optional[Tuple[int, int]] = None
        self._paths: List[SampledPath] = []

    @property
    def settled_text(self) -> str:
        return self.render_static().plain

    @property
    def offset(self) -> float:
        return self.scroller.offset

    def paths(self) -> List[SampledPath]:
        key = (self.width, self.height)
        if key != self._paths_key:
            self._paths = self.path_builder(self.width_px, self.height_px)
            self._paths_key = key
        return self._paths

    def placements(self, offset: Optional[float] = None) -> List[GlyphPlacement]:
        return self.walker.layout(self.paths(), self.offset if offset is None else offset)

    def advance(self, dt: float) -> None:
        if self.started:
            self.scroller.tick(dt)

    def on_drag(self, dx: float) -> None:
        if self.interactive:
            self.scroller.drag(dx * CELL_WIDTH_PX)

    def _paint_strip(self, grid, style_grid, path: SampledPath, style: Style) -> None:
        half = band_width(FONT_SIZE_PX, self.strip_padding) / 2
        distance = 0.0
        while distance <= path.length:
            t = path.tangent_at(distance)
            y = t.y - half
            while y <= t.y + half:
                self._plot(grid, style_grid, t.x, y, " ", style)
                y += CELL_HEIGHT_PX / 2
            distance += CELL_WIDTH_PX / 2

    def _render_at(self, offset: float) -> Text:
        grid, style_grid = self._new_grid()
        glyph_style = Style(color=self.foreground)
        if self.strip_color:
            strip_style = Style(bgcolor=self.strip_color)
            for path in self.paths():
                self._paint_strip(grid, style_grid, path, strip_style)
            glyph_style = Style(color=self.foreground, bgcolor=self.strip_color)
        for p in self.placements(offset):
            if not is_blank(p.glyph):
                self._plot(grid, style_grid, p.x, p.y, p.glyph, glyph_style)
        return self._grid_to_text(grid, style_grid)

    def render(self) -> Text:
        return self._render_at(self.offset)

    def render_static(self) -> Text:
        return self._render_at(0.0)

    def reset(self) -> None:
        super().reset()
        self.scroller = LoopScroller(
            speed=self.scroller.speed,
            reverse=self.scroller.reverse,
            drag_decay=self.scroller.drag_decay,
        )
