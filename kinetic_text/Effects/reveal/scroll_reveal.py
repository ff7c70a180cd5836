"""Word-by-word rise used for content revealed while scrolling."""

from typing import Any

from ..base_effect import register_effect
from ...Motion.segmented_text import AnimateBy
from .split_text import SplitDirection, SplitTextEffect


@register_effect("scroll_reveal_text")
class ScrollRevealTextEffect(SplitTextEffect):
    """A split-text preset: words rising into place once visible."""

    def __init__(self, parent_widget: Any = None, text: str = "", *, duration: float = 0.9, **kwargs):
        kwargs.pop("animate_by", None)
        kwargs.pop("direction", None)
        super().__init__(
            parent_widget,
            text,
            duration=duration,
            animate_by=AnimateBy.WORDS,
            direction=SplitDirection.UP,
            **kwargs,
        )
