"""Animated numeric counter."""

import math
from typing import Any, Callable, List, Optional, Union

from ..base_effect import BaseEffect, SegmentFrame, register_effect
from ...Motion.clock import AnimationClock
from ...Motion.easing import get_curve
from ...Motion.motion_trigger import MotionTrigger

Number = Union[int, float]


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer; halves move away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def format_counter(value: Number, decimals: int = 0, formatter: Optional[Callable[[Number], str]] = None) -> str:
    """
    Format a counter value.

    A formatter, when supplied, wins. Otherwise ``decimals <= 0`` prints a
    rounded integer and positive ``decimals`` prints fixed-point.
    """
    if formatter is not None:
        return formatter(value)
    if decimals <= 0:
        return str(round_half_away_from_zero(value))
    return f"{value:.{decimals}f}"


def _parse_number(text: Any) -> Number:
    if isinstance(text, (int, float)):
        return text
    text = str(text).strip()
    if not text:
        return 0
    try:
        return int(text)
    except ValueError:
        return float(text)


@register_effect("count_up")
class CountUpEffect(BaseEffect):
    """
    Counts from ``from_value`` to ``to`` along an eased forward clock.

    ``to`` may be passed explicitly or as the effect text.
    """

    DEFAULT_TRIGGER = MotionTrigger.ON_VISIBLE

    def __init__(
        self,
        parent_widget: Any = None,
        text: Any = "",
        *,
        to: Optional[Number] = None,
        from_value: Number = 0,
        decimals: int = 0,
        formatter: Optional[Callable[[Number], str]] = None,
        duration: float = 1.1,
        curve="ease_out_cubic",
        **kwargs,
    ):
        self.to = to if to is not None else _parse_number(text)
        self.from_value = from_value
        self.decimals = decimals
        self.formatter = formatter
        self.curve = get_curve(curve)
        self.clock = AnimationClock(duration)
        super().__init__(parent_widget, self.format(self.to), **kwargs)

    def format(self, value: Number) -> str:
        return format_counter(value, self.decimals, self.formatter)

    @property
    def settled_text(self) -> str:
        return self.format(self.to)

    @property
    def value(self) -> float:
        p = self.curve(self.clock.value)
        return self.from_value + (self.to - self.from_value) * p

    def on_begin(self) -> None:
        self.clock.start()

    def advance(self, dt: float) -> None:
        self.clock.advance(dt)

    def frames(self) -> List[SegmentFrame]:
        if self.clock.is_complete:
            return [SegmentFrame(self.settled_text)]
        return [SegmentFrame(self.format(self.value))]

    def reset(self) -> None:
        super().reset()
        self.clock = AnimationClock(self.clock.duration)
