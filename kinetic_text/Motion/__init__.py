"""
Animation timing and layout core.

Framework-free building blocks shared by every effect: segmentation,
stagger scheduling, easing, clocks, triggers, scroll velocity, curved
text layout and the falling-glyph particle field.
"""

from .clock import AnimationClock, ClockMode
from .easing import CURVES, CubicBezierCurve, ease_in_out, ease_out, ease_out_cubic, get_curve, linear
from .loop_scroller import DRAG_DECAY_PER_SECOND, LoopScroller
from .motion_trigger import (
    DEFAULT_VISIBLE_THRESHOLD,
    MotionTrigger,
    MotionTriggerController,
    TriggerEvent,
    TriggerState,
    transition,
)
from .particle_field import Particle, ParticleField
from .path_walker import GlyphCursor, GlyphPlacement, PathWalker, band_width, normalize_angle
from .paths import SampledPath, Tangent, cubic_bezier, default_loop_paths, line, quadratic_bezier
from .reduced_motion import MotionSignals, should_suppress_motion, signals_for
from .segmented_text import AnimateBy, SegmentedText, graphemes, is_blank, split
from .stagger import Stagger, clamp01, interval01, stagger_window
from .velocity_tracker import VELOCITY_RETAIN, VelocityTracker

__all__ = [
    'AnimateBy',
    'AnimationClock',
    'ClockMode',
    'CURVES',
    'CubicBezierCurve',
    'DEFAULT_VISIBLE_THRESHOLD',
    'DRAG_DECAY_PER_SECOND',
    'GlyphCursor',
    'GlyphPlacement',
    'LoopScroller',
    'MotionSignals',
    'MotionTrigger',
    'MotionTriggerController',
    'Particle',
    'ParticleField',
    'PathWalker',
    'SampledPath',
    'SegmentedText',
    'Stagger',
    'Tangent',
    'TriggerEvent',
    'TriggerState',
    'VELOCITY_RETAIN',
    'VelocityTracker',
    'band_width',
    'clamp01',
    'cubic_bezier',
    'default_loop_paths',
    'ease_in_out',
    'ease_out',
    'ease_out_cubic',
    'get_curve',
    'graphemes',
    'interval01',
    'is_blank',
    'line',
    'linear',
    'normalize_angle',
    'quadratic_bezier',
    'should_suppress_motion',
    'signals_for',
    'split',
    'stagger_window',
    'transition',
]
