"""
Periodic glitch bursts.

For the last part of every cycle the text jumps by a random offset and
a random horizontal slice is split into cyan and pink channels. The
channels sit one cell either side of the glyph, so neighbouring glyphs
in the slice trade places.
"""

from typing import Any, List, Optional, Tuple

from ..base_effect import BaseEffect, SegmentFrame, register_effect, CELL_HEIGHT_PX, CELL_WIDTH_PX
from ...Motion.clock import AnimationClock, ClockMode
from ...Motion.segmented_text import graphemes

BURST_THRESHOLD = 0.86
CYAN = "#00BCD4"
PINK = "#E91E63"
CHANNEL_OFFSET_PX = CELL_WIDTH_PX


@register_effect("glitch_text")
class GlitchTextEffect(BaseEffect):

    def __init__(self, parent_widget: Any = None, text: str = "", *, period: float = 1.2, **kwargs):
        super().__init__(parent_widget, text, **kwargs)
        self.clock = AnimationClock(period, ClockMode.REPEAT)
        self.jump: Tuple[float, float] = (0.0, 0.0)
        # Rows [top, bottom) of the sliced band, in cells
        self.slice_rows: Optional[Tuple[int, int]] = None

    @property
    def burst(self) -> bool:
        return self.clock.running and self.clock.value > BURST_THRESHOLD

    def on_begin(self) -> None:
        self.clock.start()

    def advance(self, dt: float) -> None:
        self.clock.advance(dt)
        if not self.burst:
            self.jump = (0.0, 0.0)
            self.slice_rows = None
            return
        self.jump = ((self.rng.random() - 0.5) * 10, (self.rng.random() - 0.5) * 6)
        h = self.height * CELL_HEIGHT_PX
        top = self.rng.random() * h * 0.75
        slice_h = min(max(h * (0.12 + self.rng.random() * 0.18), 2.0), h)
        first = int(top // CELL_HEIGHT_PX)
        last = max(first + 1, int((top + slice_h) // CELL_HEIGHT_PX) + 1)
        self.slice_rows = (first, min(last, self.height))

    def frames(self) -> List[SegmentFrame]:
        if self.slice_rows is None:
            return [SegmentFrame(self.text)]
        dx, dy = self.jump
        first, last = self.slice_rows
        out = []
        row = 0
        col = 0
        for glyph in graphemes(self.text):
            if glyph == "\n":
                out.append(SegmentFrame(glyph))
                row += 1
                col = 0
                continue
            if first <= row < last and glyph.strip():
                # Alternate channels across the slice
                color = CYAN if col % 2 == 0 else PINK
                channel_dx = CHANNEL_OFFSET_PX if color == CYAN else -CHANNEL_OFFSET_PX
                out.append(SegmentFrame(glyph, color=color, offset_x=dx + channel_dx, offset_y=dy))
            else:
                out.append(SegmentFrame(glyph, offset_x=dx, offset_y=dy))
            col += 1
        return out

    def reset(self) -> None:
        super().reset()
        self.clock = AnimationClock(self.clock.duration, ClockMode.REPEAT)
        self.jump = (0.0, 0.0)
        self.slice_rows = None
