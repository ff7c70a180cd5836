"""Cycles through a list of strings, sliding each new one in."""

from typing import Any, List, Sequence, Union

from rich.cells import cell_len

from ..base_effect import BaseEffect, SegmentFrame, register_effect, CELL_HEIGHT_PX
from ...Motion.easing import get_curve

# New items rise from this fraction of their own height
SLIDE_FROM = 0.6


@register_effect("rotating_text")
class RotatingTextEffect(BaseEffect):
    """
    Item ``floor(t / period) % n`` is current at ``t`` seconds after
    begin; each switch fades and slides the new item in over
    ``transition`` seconds. Needs at least two items to animate.
    """

    def __init__(
        self,
        parent_widget: Any = None,
        text: Union[str, Sequence[str]] = "",
        *,
        period: float = 1.8,
        transition: float = 0.45,
        curve="ease_out_cubic",
        **kwargs,
    ):
        self.items: List[str] = [text] if isinstance(text, str) else [str(item) for item in text]
        self.period = period
        self.transition = transition
        self.curve = get_curve(curve)
        self.running_time = 0.0
        super().__init__(parent_widget, self.items[0] if self.items else "", **kwargs)
        if "width" not in kwargs and self.items:
            self.width = max(1, max(cell_len(item) for item in self.items))

    @property
    def can_animate(self) -> bool:
        return len(self.items) > 1

    @property
    def settled_text(self) -> str:
        return self.items[0] if self.items else ""

    @property
    def switches(self) -> int:
        if self.period <= 0:
            return 0
        return int(self.running_time // self.period)

    @property
    def index(self) -> int:
        if not self.items:
            return 0
        return self.switches % len(self.items)

    @property
    def transition_progress(self) -> float:
        """Progress of the most recent switch; 1.0 when no switch is in flight."""
        if self.switches == 0 or self.transition <= 0:
            return 1.0
        since = self.running_time - self.switches * self.period
        return self.curve(min(since / self.transition, 1.0))

    def begin(self) -> None:
        if not self.can_animate:
            return
        super().begin()

    def advance(self, dt: float) -> None:
        if self.started:
            self.running_time += dt

    def frames(self) -> List[SegmentFrame]:
        if not self.items:
            return []
        a = self.transition_progress
        return [SegmentFrame(
            self.items[self.index],
            opacity=a,
            offset_y=SLIDE_FROM * CELL_HEIGHT_PX * (1 - a),
        )]

    def reset(self) -> None:
        super().reset()
        self.running_time = 0.0
