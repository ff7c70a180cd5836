"""Glyphs from the text raining down under gravity."""

from typing import Any

from rich.style import Style
from rich.text import Text

from ..base_effect import BaseEffect, register_effect
from ...Motion.particle_field import DEFAULT_GRAVITY, DEFAULT_PARTICLE_COUNT, DEFAULT_SEED, ParticleField
from ...Motion.segmented_text import is_blank


@register_effect("falling_text")
class FallingTextEffect(BaseEffect):

    USES_CANVAS = True

    def __init__(
        self,
        parent_widget: Any = None,
        text: str = "",
        *,
        particle_count: int = DEFAULT_PARTICLE_COUNT,
        gravity: float = DEFAULT_GRAVITY,
        **kwargs,
    ):
        super().__init__(parent_widget, text, **kwargs)
        self.field = ParticleField(
            text,
            self.width_px,
            self.height_px,
            count=particle_count,
            gravity=gravity,
            seed=DEFAULT_SEED if self.seed is None else self.seed,
        )

    def advance(self, dt: float) -> None:
        if self.started:
            self.field.step(dt)

    def resize(self, width: int, height: int) -> None:
        super().resize(width, height)
        if self.started:
            # Keep falling particles; only the recycle bound moves
            self.field.width = self.width_px
            self.field.height = self.height_px
        else:
            self.field.reset(self.width_px, self.height_px)

    def render(self) -> Text:
        grid, style_grid = self._new_grid()
        style = Style(color=self.foreground)
        for p in self.field.particles:
            if not is_blank(p.glyph):
                self._plot(grid, style_grid, p.x, p.y, p.glyph, style)
        return self._grid_to_text(grid, style_grid)

    def reset(self) -> None:
        super().reset()
        self.field.reset(self.width_px, self.height_px)
