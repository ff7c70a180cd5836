"""
Scramble reveals.

Unlocked glyphs are drawn from a charset; whitespace is never scrambled.
Noise is redrawn once per tick from the effect's own seeded generator,
so rendering the same state twice gives the same frame.
"""

from typing import Any, List, Set

from ..base_effect import BaseEffect, SegmentFrame, register_effect
from ...Motion.clock import AnimationClock
from ...Motion.easing import get_curve
from ...Motion.motion_trigger import MotionTrigger
from ...Motion.segmented_text import graphemes, is_blank

ALPHANUMERIC = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
SYMBOLS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789!@#%^&*()-_=+[]{}"
ASCII_RAMP = " .,:;i1tfLCG08@"


def lock_count(progress: float, total: int) -> int:
    """How many leading glyphs are settled at ``progress``."""
    return min(max(int(progress * total), 0), total)


class ScrambleEffect(BaseEffect):
    """Base for effects that show noise until a glyph is revealed."""

    DEFAULT_TRIGGER = MotionTrigger.ON_VISIBLE

    def __init__(
        self,
        parent_widget: Any = None,
        text: str = "",
        *,
        duration: float = 1.1,
        charset: str = ALPHANUMERIC,
        curve="linear",
        **kwargs,
    ):
        super().__init__(parent_widget, text, **kwargs)
        self.target = graphemes(text)
        self.charset = charset or ALPHANUMERIC
        self.curve = get_curve(curve)
        self.clock = AnimationClock(duration)
        self._noise = self._draw_noise()

    def _draw_noise(self) -> List[str]:
        return [self.rng.choice(self.charset) for _ in self.target]

    def on_begin(self) -> None:
        self.clock.start()

    def advance(self, dt: float) -> None:
        if self.clock.running:
            self.clock.advance(dt)
            self._noise = self._draw_noise()

    @property
    def progress(self) -> float:
        return self.curve(self.clock.value)

    def revealed(self) -> Set[int]:
        return set(range(lock_count(self.progress, len(self.target))))

    def current_text(self) -> str:
        revealed = self.revealed()
        out = []
        for i, glyph in enumerate(self.target):
            if i in revealed or is_blank(glyph):
                out.append(glyph)
            else:
                out.append(self._noise[i])
        return "".join(out)

    def frames(self) -> List[SegmentFrame]:
        return [SegmentFrame(self.current_text())]

    def reset(self) -> None:
        super().reset()
        self.clock = AnimationClock(self.clock.duration)
        self._noise = self._draw_noise()


@register_effect("shuffle_text")
class ShuffleTextEffect(ScrambleEffect):
    """Locks glyphs in left to right out of random noise."""


@register_effect("ascii_scramble_text")
class AsciiScrambleTextEffect(ShuffleTextEffect):
    """Shuffle reveal drawing noise from an ASCII density ramp."""

    def __init__(self, parent_widget: Any = None, text: str = "", *, charset: str = ASCII_RAMP, **kwargs):
        super().__init__(parent_widget, text, charset=charset, **kwargs)


@register_effect("decrypted_text")
class DecryptedTextEffect(ScrambleEffect):
    """Left-to-right decryption with an ease-out-cubic lock rate."""

    def __init__(
        self,
        parent_widget: Any = None,
        text: str = "",
        *,
        duration: float = 1.4,
        charset: str = SYMBOLS,
        curve="ease_out_cubic",
        **kwargs,
    ):
        super().__init__(parent_widget, text, duration=duration, charset=charset, curve=curve, **kwargs)


@register_effect("scrambled_text")
class ScrambledTextEffect(ScrambleEffect):
    """Glyphs settle in a random order chosen when the effect begins."""

    def __init__(self, parent_widget: Any = None, text: str = "", *, duration: float = 1.2, **kwargs):
        super().__init__(parent_widget, text, duration=duration, **kwargs)
        self.order: List[int] = []

    def on_begin(self) -> None:
        self.order = list(range(len(self.target)))
        self.rng.shuffle(self.order)
        super().on_begin()

    def revealed(self) -> Set[int]:
        return set(self.order[:lock_count(self.progress, len(self.target))])

    def reset(self) -> None:
        super().reset()
        self.order = []
