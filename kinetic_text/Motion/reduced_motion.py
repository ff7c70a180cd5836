"""
Reduced-motion query.

Combines the host's explicit "reduce motion" preference with the
platform-level accessibility flag. When either is set, effects render
their settled final state and schedule nothing.
"""

import os
from dataclasses import dataclass
from typing import Any, Optional

# Environment switch standing in for a platform accessibility flag
REDUCE_MOTION_ENV = "KINETIC_TEXT_REDUCE_MOTION"
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class MotionSignals:
    """The two boolean accessibility signals an effect consults."""
    reduce_motion_preference: bool = False
    platform_disable_animations: bool = False


def should_suppress_motion(signals: MotionSignals) -> bool:
    """True if either signal asks for motion to be suppressed."""
    return bool(signals.reduce_motion_preference or signals.platform_disable_animations)


def platform_disables_animations(app: Optional[Any] = None) -> bool:
    """Read the platform flag from the environment and Textual's animation level."""
    if os.environ.get(REDUCE_MOTION_ENV, "").strip().lower() in _TRUTHY:
        return True
    return getattr(app, "animation_level", "full") == "none"


def signals_for(app: Optional[Any], preference: Optional[bool], configured: bool = False) -> MotionSignals:
    """
    Build the signals for one effect instance.

    Args:
        app: The running Textual app, if any.
        preference: Explicit per-effect override; ``None`` defers to ``configured``.
        configured: The ``[motion] reduce_motion`` configuration value.
    """
    pref = configured if preference is None else preference
    return MotionSignals(
        reduce_motion_preference=bool(pref),
        platform_disable_animations=platform_disables_animations(app),
    )
