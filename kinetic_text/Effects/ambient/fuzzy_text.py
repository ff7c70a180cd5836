"""Looping jitter under a light blur."""

import math
from typing import Any, List

from ..base_effect import BaseEffect, SegmentFrame, register_effect
from ...Motion.clock import AnimationClock, ClockMode


@register_effect("fuzzy_text")
class FuzzyTextEffect(BaseEffect):

    def __init__(
        self,
        parent_widget: Any = None,
        text: str = "",
        *,
        period: float = 1.4,
        jitter: float = 1.4,
        blur_sigma: float = 0.8,
        **kwargs,
    ):
        super().__init__(parent_widget, text, **kwargs)
        self.jitter = jitter
        self.blur_sigma = blur_sigma
        self.clock = AnimationClock(period, ClockMode.REPEAT)

    def on_begin(self) -> None:
        self.clock.start()

    def advance(self, dt: float) -> None:
        self.clock.advance(dt)

    def frames(self) -> List[SegmentFrame]:
        t = self.clock.value * math.pi * 2
        return [SegmentFrame(
            self.text,
            offset_x=math.sin(t) * self.jitter,
            offset_y=math.cos(t * 1.3) * self.jitter,
            blur=self.blur_sigma,
        )]

    def reset(self) -> None:
        super().reset()
        self.clock = AnimationClock(self.clock.duration, ClockMode.REPEAT)
