"""
Curved-loop text layout.

Walks a repeating (text + gap) glyph sequence along one or more paths by
arc length. The scroll offset is reduced modulo the width of one cycle,
so the ribbon loops forever without a visible snap.
"""

import math
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from rich.cells import cell_len

from .paths import SampledPath
from .segmented_text import graphemes, is_blank

# Whitespace advances at least this fraction of the font size
MIN_SPACE_RATIO = 0.25
# Backdrop strip height relative to the font size
BAND_EM_RATIO = 1.4


@dataclass(frozen=True)
class GlyphCursor:
    """First glyph on the path and how far it has already scrolled past."""
    char_index: int
    intra_offset: float


@dataclass(frozen=True)
class GlyphPlacement:
    glyph: str
    char_index: int
    x: float
    y: float
    angle: float
    flipped: bool = False
    width: float = 0.0
    path_index: int = 0


def normalize_angle(angle: float):
    """
    Keep glyphs upright.

    Returns the angle folded into [-pi/2, pi/2] and whether the glyph was
    turned by 180 degrees to get there (tangents on right-to-left runs).
    """
    if angle > math.pi / 2:
        return angle - math.pi, True
    if angle < -math.pi / 2:
        return angle + math.pi, True
    return angle, False


def band_width(font_size: float, padding: float) -> float:
    """Stroke width of the solid backdrop strip drawn under the glyphs."""
    return font_size * BAND_EM_RATIO + padding * 2


class PathWalker:
    """Lays out an endlessly repeating glyph sequence along paths."""

    def __init__(self, glyphs: Sequence[str], widths: Sequence[float]):
        if len(glyphs) != len(widths):
            raise ValueError("glyphs and widths must have the same length")
        self.glyphs = list(glyphs)
        self.widths = [max(0.0, float(w)) for w in widths]
        self.repeat_width = sum(self.widths)

    @classmethod
    def from_text(
        cls,
        text: str,
        gap: str = "",
        *,
        font_size: float = 16.0,
        measure: Optional[Callable[[str], float]] = None,
    ) -> "PathWalker":
        """
        Measure ``text + gap`` once.

        Args:
            text: The repeated text.
            gap: Separator placed after each repetition.
            font_size: Font size in the same units as ``measure``.
            measure: Glyph width function; defaults to terminal cell width.
        """
        measure = measure or cell_len
        glyphs = graphemes(text + gap)
        widths = []
        for g in glyphs:
            w = float(measure(g))
            if is_blank(g):
                w = max(w, font_size * MIN_SPACE_RATIO)
            widths.append(w)
        return cls(glyphs, widths)

    def wrap_offset(self, offset: float) -> float:
        """Reduce ``offset`` into [0, repeat_width)."""
        if self.repeat_width <= 0:
            return 0.0
        wrapped = math.fmod(offset, self.repeat_width)
        if wrapped < 0:
            wrapped += self.repeat_width
        if wrapped >= self.repeat_width:
            wrapped = 0.0
        return wrapped

    def resolve_cursor(self, offset: float) -> GlyphCursor:
        """Find the glyph under ``offset`` and the distance into it."""
        start = self.wrap_offset(offset)
        acc = 0.0
        for k, w in enumerate(self.widths):
            nxt = acc + w
            if nxt > start:
                return GlyphCursor(k, start - acc)
            acc = nxt
        return GlyphCursor(0, 0.0)

    def walk(
        self,
        path: SampledPath,
        offset: float,
        direction: float = 1.0,
        path_index: int = 0,
    ) -> List[GlyphPlacement]:
        """Place glyphs along one path for the given scroll offset."""
        path_len = path.length
        if self.repeat_width <= 0 or path_len <= 0 or not self.glyphs:
            return []

        cursor_state = self.resolve_cursor(direction * offset)
        char_index = cursor_state.char_index
        cursor = -cursor_state.intra_offset
        count = len(self.glyphs)
        placements: List[GlyphPlacement] = []

        while cursor < path_len:
            idx = char_index % count
            w = self.widths[idx]
            if cursor + w > 0:
                pos = min(max(cursor + w / 2, 0.0), max(path_len - 0.001, 0.0))
                tangent = path.tangent_at(pos)
                angle, flipped = normalize_angle(tangent.angle)
                placements.append(GlyphPlacement(
                    glyph=self.glyphs[idx],
                    char_index=idx,
                    x=tangent.x,
                    y=tangent.y,
                    angle=angle,
                    flipped=flipped,
                    width=w,
                    path_index=path_index,
                ))
            cursor += w
            char_index += 1
        return placements

    def layout(self, paths: Sequence[SampledPath], offset: float) -> List[GlyphPlacement]:
        """Walk every path; odd-indexed paths scroll the opposite way."""
        placements: List[GlyphPlacement] = []
        for i, path in enumerate(paths):
            direction = -1.0 if i % 2 else 1.0
            placements.extend(self.walk(path, offset, direction, path_index=i))
        return placements
