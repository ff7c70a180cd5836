"""Animated kinetic text effects for Textual terminal apps."""

__version__ = "0.1.0"

from .Effects import (
    BaseEffect,
    KineticTextError,
    SegmentFrame,
    UnknownEffectError,
    create_effect,
    list_available_effects,
)
from .Motion import AnimateBy, MotionTrigger
from .Widgets import TextEffect

__all__ = [
    'AnimateBy',
    'BaseEffect',
    'KineticTextError',
    'MotionTrigger',
    'SegmentFrame',
    'TextEffect',
    'UnknownEffectError',
    'create_effect',
    'list_available_effects',
]
