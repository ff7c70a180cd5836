"""
Trigger state machine deciding when an effect's clock starts.

State is a frozen record; every event goes through one pure
``transition`` function that dispatches on the trigger strategy. The
controller wraps that function with the owning effect's start callback
and guarantees the callback runs at most once per instance.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional, Tuple

from loguru import logger

DEFAULT_VISIBLE_THRESHOLD = 0.15


class MotionTrigger(Enum):
    """When an animation begins."""
    ON_BUILD = "on_build"
    ON_VISIBLE = "on_visible"
    MANUAL = "manual"

    @classmethod
    def coerce(cls, value) -> "MotionTrigger":
        """Accept a member, its value (``"on_visible"``) or its name."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls[str(value).upper()]


class TriggerEvent(Enum):
    FRAME = "frame"             # a rendering frame after mount
    VISIBILITY = "visibility"   # visible fraction changed
    START = "start"             # explicit external start
    DISPOSE = "dispose"         # owner torn down


@dataclass(frozen=True)
class TriggerState:
    started: bool = False
    disposed: bool = False


def transition(
    state: TriggerState,
    trigger: MotionTrigger,
    event: TriggerEvent,
    *,
    enabled: bool = True,
    visible_fraction: float = 0.0,
    threshold: float = DEFAULT_VISIBLE_THRESHOLD,
) -> Tuple[TriggerState, bool]:
    """
    Apply one event.

    Returns:
        The next state and whether the start callback must fire now.
    """
    if event is TriggerEvent.DISPOSE:
        return replace(state, disposed=True), False
    if state.started or state.disposed or not enabled:
        return state, False

    if event is TriggerEvent.START:
        qualifies = True
    elif trigger is MotionTrigger.ON_BUILD:
        qualifies = event is TriggerEvent.FRAME
    elif trigger is MotionTrigger.ON_VISIBLE:
        qualifies = event is TriggerEvent.VISIBILITY and visible_fraction >= threshold
    else:
        # Manual triggers only start through START
        qualifies = False

    if not qualifies:
        return state, False
    return replace(state, started=True), True


class MotionTriggerController:
    """Owns one effect instance's TriggerState and its start callback."""

    def __init__(
        self,
        trigger: MotionTrigger,
        on_start: Callable[[], None],
        *,
        enabled: bool = True,
        visible_threshold: float = DEFAULT_VISIBLE_THRESHOLD,
        name: Optional[str] = None,
    ):
        self.trigger = MotionTrigger.coerce(trigger)
        self.enabled = enabled
        self.visible_threshold = visible_threshold
        self.name = name or "effect"
        self._on_start = on_start
        self._state = TriggerState()

    @property
    def state(self) -> TriggerState:
        return self._state

    @property
    def started(self) -> bool:
        return self._state.started

    @property
    def disposed(self) -> bool:
        return self._state.disposed

    @property
    def wants_visibility(self) -> bool:
        """True while visibility notifications can still start the effect."""
        return (
            self.trigger is MotionTrigger.ON_VISIBLE
            and self.enabled
            and not self._state.started
            and not self._state.disposed
        )

    def _dispatch(self, event: TriggerEvent, visible_fraction: float = 0.0) -> bool:
        self._state, fire = transition(
            self._state,
            self.trigger,
            event,
            enabled=self.enabled,
            visible_fraction=visible_fraction,
            threshold=self.visible_threshold,
        )
        if fire:
            logger.debug(f"Motion trigger fired for {self.name} ({self.trigger.value}, {event.value})")
            self._on_start()
        return fire

    def notify_frame(self) -> bool:
        """A rendering frame passed; starts ON_BUILD effects."""
        return self._dispatch(TriggerEvent.FRAME)

    def notify_visibility(self, fraction: float) -> bool:
        """Report the visible fraction of the effect's region."""
        return self._dispatch(TriggerEvent.VISIBILITY, visible_fraction=fraction)

    def start(self) -> bool:
        """Start explicitly. Idempotent; a no-op when disabled or disposed."""
        return self._dispatch(TriggerEvent.START)

    def dispose(self) -> None:
        """Tear down; the start callback can never fire afterwards."""
        self._dispatch(TriggerEvent.DISPOSE)
