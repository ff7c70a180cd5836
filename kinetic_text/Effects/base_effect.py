"""
Base class and utilities for text animation effects.

This module provides the foundation for all effects: the base class,
the per-segment frame record, Rich composition helpers and the
registration system.

Effects compute geometry in pixel units. The terminal host converts
between pixels and character cells with a fixed cell metric, and every
signal input (pointer, scroll, drag) arrives in cell units.
"""

from dataclasses import dataclass
from functools import lru_cache
import random
from typing import Any, Dict, List, Optional, Sequence, Tuple

from loguru import logger
from rich.cells import cell_len
from rich.color import Color, ColorTriplet, blend_rgb
from rich.style import Style
from rich.text import Text

from ..Motion.motion_trigger import MotionTrigger
from ..Motion.segmented_text import graphemes, is_blank


# Cell metric used to map core pixel units onto the terminal grid
CELL_WIDTH_PX = 8.0
CELL_HEIGHT_PX = 16.0
FONT_SIZE_PX = 16.0

DEFAULT_FOREGROUND = "#E2E8F0"
DEFAULT_BACKGROUND = "#0F172A"

# Terminal approximations of properties a cell grid cannot draw literally
MIN_VISIBLE_OPACITY = 0.01
DIM_BLUR_THRESHOLD = 0.5
BOLD_SCALE_THRESHOLD = 1.05
ITALIC_SKEW_THRESHOLD = 0.05


class KineticTextError(Exception):
    """Base exception for kinetic_text errors."""
    pass


class UnknownEffectError(KineticTextError):
    """Raised when an effect name is not in the registry."""
    pass


@dataclass(frozen=True)
class SegmentFrame:
    """Render properties of one segment for one frame."""
    text: str
    opacity: float = 1.0
    offset_x: float = 0.0
    offset_y: float = 0.0
    scale: float = 1.0
    blur: float = 0.0
    skew: float = 0.0
    color: Optional[str] = None


@lru_cache(maxsize=256)
def parse_color(value: str) -> ColorTriplet:
    """Parse any Rich colour definition into an RGB triplet."""
    return Color.parse(value).get_truecolor()


def blend_colors(start: str, end: str, t: float) -> str:
    """Blend two colours; ``t=0`` gives ``start`` and ``t=1`` gives ``end``."""
    t = min(max(t, 0.0), 1.0)
    return blend_rgb(parse_color(start), parse_color(end), t).hex


def gradient_color(stops: Sequence[Tuple[float, str]], position: float) -> str:
    """Sample a multi-stop linear gradient at ``position`` (clamped to the stops)."""
    if not stops:
        return DEFAULT_FOREGROUND
    if position <= stops[0][0]:
        return stops[0][1]
    for (p0, c0), (p1, c1) in zip(stops, stops[1:]):
        if position <= p1:
            span = p1 - p0
            return blend_colors(c0, c1, (position - p0) / span if span > 0 else 1.0)
    return stops[-1][1]


def even_stops(colors: Sequence[str]) -> List[Tuple[float, str]]:
    """Spread colours evenly over [0, 1]."""
    if len(colors) == 1:
        return [(0.0, colors[0]), (1.0, colors[0])]
    return [(i / (len(colors) - 1), c) for i, c in enumerate(colors)]


def blank_out(text: str) -> str:
    """Replace every glyph with spaces of the same cell width, keeping newlines."""
    return "".join(g if g == "\n" else " " * cell_len(g) for g in graphemes(text))


def frame_style(frame: SegmentFrame, foreground: str, background: str) -> Style:
    """Approximate a segment's render properties with a Rich style."""
    fg = parse_color(frame.color or foreground)
    opacity = min(max(frame.opacity, 0.0), 1.0)
    if opacity < 1.0:
        fg = blend_rgb(parse_color(background), fg, opacity)
    return Style(
        color=Color.from_triplet(fg),
        bold=True if frame.scale > BOLD_SCALE_THRESHOLD else None,
        dim=True if frame.blur > DIM_BLUR_THRESHOLD else None,
        italic=True if abs(frame.skew) > ITALIC_SKEW_THRESHOLD else None,
    )


def cell_offset(frame: SegmentFrame) -> Tuple[int, int]:
    """A segment's pixel offset rounded to whole cells."""
    return int(round(frame.offset_x / CELL_WIDTH_PX)), int(round(frame.offset_y / CELL_HEIGHT_PX))


def compose_segments(
    frames: Sequence[SegmentFrame],
    foreground: str = DEFAULT_FOREGROUND,
    background: str = DEFAULT_BACKGROUND,
) -> Text:
    """
    Join segment frames into one Rich ``Text``.

    Offsets move glyphs by whole cells inside the block the unshifted text
    occupies, so the frame size never changes. Glyphs pushed past the block
    edge are clipped and a later glyph overwrites an earlier one in the
    same cell.
    """
    frames = [frame for frame in frames if frame.text]
    if any(cell_offset(frame) != (0, 0) for frame in frames):
        return _place_segments(frames, foreground, background)

    out = Text()
    for frame in frames:
        if frame.opacity <= MIN_VISIBLE_OPACITY:
            out.append(blank_out(frame.text))
            continue
        out.append(frame.text, style=frame_style(frame, foreground, background))
    return out


# Marks the trailing cells of a wide glyph
_CONTINUATION = object()


def _clear_cell(cells: List[Any], index: int) -> None:
    """Erase the glyph covering ``index``, all of its cells included."""
    start = index
    while start > 0 and cells[start] is _CONTINUATION:
        start -= 1
    if cells[start] is None:
        return
    cells[start] = None
    end = start + 1
    while end < len(cells) and cells[end] is _CONTINUATION:
        cells[end] = None
        end += 1


def _put_glyph(rows: List[List[Any]], row: int, col: int, glyph: str, width: int, style: Style) -> None:
    if not 0 <= row < len(rows):
        return
    cells = rows[row]
    if col < 0 or col + width > len(cells):
        return
    for index in range(col, col + width):
        _clear_cell(cells, index)
    cells[col] = (glyph, style)
    for index in range(col + 1, col + width):
        cells[index] = _CONTINUATION


def _place_segments(frames: Sequence[SegmentFrame], foreground: str, background: str) -> Text:
    lines = "".join(frame.text for frame in frames).split("\n")
    rows: List[List[Any]] = [[None] * cell_len(line) for line in lines]

    row = 0
    col = 0
    for frame in frames:
        visible = frame.opacity > MIN_VISIBLE_OPACITY
        style = frame_style(frame, foreground, background) if visible else None
        dx, dy = cell_offset(frame)
        for glyph in graphemes(frame.text):
            if glyph == "\n":
                row += 1
                col = 0
                continue
            width = cell_len(glyph)
            # Blank and transparent glyphs leave the cells underneath alone
            if visible and width and not is_blank(glyph):
                _put_glyph(rows, row + dy, col + dx, glyph, width, style)
            col += width

    out = Text()
    for index, cells in enumerate(rows):
        if index:
            out.append("\n")
        for cell in cells:
            if cell is None:
                out.append(" ")
            elif cell is not _CONTINUATION:
                out.append(cell[0], style=cell[1])
    return out


def glyph_centers(text: str) -> List[Tuple[str, float, float]]:
    """
    Lay ``text`` out on the cell grid and return each grapheme with the
    pixel coordinates of its centre. Newlines are returned with the
    position where they occur.
    """
    out = []
    col = 0
    row = 0
    for g in graphemes(text):
        w = cell_len(g)
        cx = (col + w / 2) * CELL_WIDTH_PX
        cy = (row + 0.5) * CELL_HEIGHT_PX
        out.append((g, cx, cy))
        if g == "\n":
            row += 1
            col = 0
        else:
            col += w
    return out


def cell_to_px(position: Tuple[float, float]) -> Tuple[float, float]:
    """Pixel coordinates of the centre of a cell position."""
    x, y = position
    return (x + 0.5) * CELL_WIDTH_PX, (y + 0.5) * CELL_HEIGHT_PX


def text_size(text: str) -> Tuple[int, int]:
    """Width and height of ``text`` in cells."""
    lines = text.split("\n")
    return max((cell_len(line) for line in lines), default=0), len(lines)


class BaseEffect:
    """
    Base class for text effects.

    Lifecycle: the host creates the effect, its trigger controller calls
    ``begin()`` once, and every tick calls ``update(dt)`` with the elapsed
    seconds since the previous tick. Frames depend only on accumulated
    elapsed time and on the signals delivered through ``on_*`` methods.
    """

    DEFAULT_TRIGGER = MotionTrigger.ON_BUILD
    # Effects that paint a 2D field rather than a line of text
    USES_CANVAS = False
    CANVAS_SIZE = (40, 12)
    _effect_name = "base"

    def __init__(
        self,
        parent_widget: Any = None,
        text: str = "",
        *,
        width: Optional[int] = None,
        height: Optional[int] = None,
        seed: Optional[int] = None,
        color: Optional[str] = None,
        background: Optional[str] = None,
        **kwargs,
    ):
        self.parent = parent_widget
        self.text = text
        natural_w, natural_h = self.CANVAS_SIZE if self.USES_CANVAS else text_size(text)
        self.width = max(1, width if width is not None else natural_w)
        self.height = max(1, height if height is not None else natural_h)
        self.seed = seed
        self.rng = random.Random(seed)
        self.foreground = color or DEFAULT_FOREGROUND
        self.background = background or DEFAULT_BACKGROUND
        self.started = False
        self.elapsed = 0.0
        self.frame_count = 0
        if kwargs:
            logger.debug(f"{type(self).__name__} ignoring options: {sorted(kwargs)}")

    @property
    def name(self) -> str:
        return self._effect_name

    @property
    def settled_text(self) -> str:
        """The text shown once the animation has finished, or when motion is reduced."""
        return self.text

    @property
    def can_animate(self) -> bool:
        """False when there is nothing to animate; the host then shows the static state."""
        return True

    @property
    def width_px(self) -> float:
        return self.width * CELL_WIDTH_PX

    @property
    def height_px(self) -> float:
        return self.height * CELL_HEIGHT_PX

    # Lifecycle

    def begin(self) -> None:
        """Start the effect's clocks. Called at most once by the trigger controller."""
        if self.started:
            return
        self.started = True
        self.on_begin()

    def on_begin(self) -> None:
        pass

    def advance(self, dt: float) -> None:
        """Advance owned clocks or simulations by ``dt`` seconds."""
        pass

    def update(self, dt: float = 0.0) -> Text:
        """Advance and return the next frame."""
        self.frame_count += 1
        if dt > 0:
            self.elapsed += dt
            self.advance(dt)
        return self.render()

    def frames(self) -> List[SegmentFrame]:
        """Per-segment render properties for the current state."""
        return [SegmentFrame(self.settled_text)]

    def render(self) -> Text:
        """The current frame, without advancing."""
        return self.compose(self.frames())

    def render_static(self) -> Text:
        """The settled final state, used when motion is suppressed."""
        return self.compose([SegmentFrame(self.settled_text)])

    def compose(self, frames: Sequence[SegmentFrame]) -> Text:
        return compose_segments(frames, self.foreground, self.background)

    def reset(self) -> None:
        """Reset the animation to its initial state."""
        self.started = False
        self.elapsed = 0.0
        self.frame_count = 0
        self.rng = random.Random(self.seed)

    def resize(self, width: int, height: int) -> None:
        """The host area changed size (in cells)."""
        self.width = max(1, int(width))
        self.height = max(1, int(height))

    # Signal inputs, in cell units

    def on_pointer_move(self, position: Tuple[float, float]) -> None:
        pass

    def on_pointer_leave(self) -> None:
        pass

    def on_scroll(self, position: float, timestamp_ms: Optional[float] = None) -> None:
        pass

    def on_drag(self, dx: float) -> None:
        pass

    # Canvas helpers

    def _new_grid(self) -> Tuple[List[List[str]], List[List[Optional[Style]]]]:
        grid = [[" " for _ in range(self.width)] for _ in range(self.height)]
        style_grid: List[List[Optional[Style]]] = [[None for _ in range(self.width)] for _ in range(self.height)]
        return grid, style_grid

    def _plot(
        self,
        grid: List[List[str]],
        style_grid: List[List[Optional[Style]]],
        x_px: float,
        y_px: float,
        glyph: str,
        style: Optional[Style] = None,
    ) -> bool:
        """Place a glyph whose centre is at the given pixel position. Returns False if clipped."""
        x = int(x_px // CELL_WIDTH_PX)
        y = int(y_px // CELL_HEIGHT_PX)
        if not (0 <= y < len(grid) and 0 <= x < len(grid[0])):
            return False
        if cell_len(glyph) != 1:
            glyph = glyph[:1] if cell_len(glyph[:1]) == 1 else "?"
        grid[y][x] = glyph
        style_grid[y][x] = style
        return True

    def _grid_to_text(self, grid: List[List[str]], style_grid: List[List[Optional[Style]]]) -> Text:
        """Convert a glyph grid and style grid to a Rich ``Text``."""
        out = Text()
        for y in range(len(grid)):
            current_style = None
            current_text = ""
            for x in range(len(grid[y])):
                char = grid[y][x]
                style = style_grid[y][x]
                if style != current_style:
                    if current_text:
                        out.append(current_text, style=current_style)
                    current_text = char
                    current_style = style
                else:
                    current_text += char
            if current_text:
                out.append(current_text, style=current_style)
            if y < len(grid) - 1:
                out.append("\n")
        return out


# Effect registration system
EFFECTS_REGISTRY: Dict[str, type] = {}


def register_effect(name: str):
    """
    Decorator to register an effect class.

    Usage:
        @register_effect("split_text")
        class SplitTextEffect(BaseEffect):
            ...
    """
    def decorator(cls):
        if name in EFFECTS_REGISTRY:
            logger.warning(f"Effect '{name}' is already registered, overwriting...")
        EFFECTS_REGISTRY[name] = cls
        cls._effect_name = name  # Store the registration name on the class
        logger.debug(f"Registered effect: {name} -> {cls.__name__}")
        return cls
    return decorator


def get_effect_class(name: str) -> Optional[type]:
    """Get an effect class by its registered name."""
    return EFFECTS_REGISTRY.get(name)


def list_available_effects() -> List[str]:
    """Get a list of all registered effect names."""
    return sorted(EFFECTS_REGISTRY.keys())
