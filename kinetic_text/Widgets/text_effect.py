# text_effect.py
# Textual host widget for kinetic text effects

import time
from typing import Any, Dict, Iterable, Optional

from rich.text import Text
from textual import events
from textual.geometry import Region
from textual.message import Message
from textual.reactive import reactive
from textual.timer import Timer
from textual.widget import Widget
from textual.widgets import Static

from loguru import logger

from ..config import get_motion_settings
from ..Effects import BaseEffect, KineticTextError, create_effect
from ..Motion.motion_trigger import MotionTrigger, MotionTriggerController
from ..Motion.reduced_motion import platform_disables_animations, should_suppress_motion, signals_for


def visible_fraction(region: Region, clips: Iterable[Region]) -> float:
    """Fraction of ``region`` left after clipping by every region in ``clips``."""
    if region.area <= 0:
        return 0.0
    visible = region
    for clip in clips:
        visible = visible.intersection(clip)
        if visible.area <= 0:
            return 0.0
    return visible.area / region.area


class TextEffect(Static):
    """Displays one registered effect and drives it from a Textual timer."""

    DEFAULT_CSS = """
    TextEffect {
        width: auto;
        height: auto;
    }
    """

    started: reactive[bool] = reactive(False)

    def __init__(
        self,
        effect_name: str,
        text: Any = "",
        *,
        trigger: Optional[Any] = None,
        enabled: bool = True,
        reduce_motion: Optional[bool] = None,
        frame_interval: Optional[float] = None,
        visible_threshold: Optional[float] = None,
        options: Optional[Dict[str, Any]] = None,
        name: Optional[str] = None,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        """Initialize the effect widget.

        Args:
            effect_name: Registered effect name, e.g. ``"split_text"``
            text: Source text (a list of strings for rotating_text)
            trigger: Override of the effect's default trigger
            enabled: False renders the settled state and schedules nothing
            reduce_motion: Per-widget override of the configured preference
            frame_interval: Seconds between ticks (default from config)
            visible_threshold: Fraction that starts on_visible effects
            options: Effect-specific keyword arguments
        """
        super().__init__("", markup=False, name=name, id=id, classes=classes)
        self.effect_name = effect_name
        self.source_text = text
        self.trigger_override = trigger
        self.enabled = enabled
        self.reduce_motion = reduce_motion
        self.frame_interval = frame_interval
        self.visible_threshold = visible_threshold
        self.options = dict(options or {})

        self.effect: Optional[BaseEffect] = None
        self.controller: Optional[MotionTriggerController] = None
        self.animation_timer: Optional[Timer] = None
        self.motion_suppressed = False
        self.last_frame: Optional[Text] = None
        self._last_tick: Optional[float] = None
        self._scroll_source: Optional[Widget] = None
        self._dragging = False

        try:
            self.effect = create_effect(effect_name, text, self, **self.options)
        except KineticTextError as e:
            logger.warning(f"{e}. Showing plain text.")
        except Exception as e:
            logger.error(f"Failed to create effect '{effect_name}': {e}")

    def on_mount(self) -> None:
        """Handle mount event."""
        if self.effect is None:
            self._display_static_fallback()
            return

        settings = get_motion_settings()
        self._apply_motion_settings(settings)
        if self.effect.USES_CANVAS:
            self.styles.width = self.effect.width
            self.styles.height = self.effect.height

        signals = signals_for(self.app, self.reduce_motion, settings.reduce_motion)
        self.motion_suppressed = (
            should_suppress_motion(signals) or not self.enabled or not self.effect.can_animate
        )
        if self.motion_suppressed:
            logger.info(f"Motion suppressed for '{self.effect_name}', showing settled state")
            self._show(self.effect.render_static())
            return

        trigger = (
            MotionTrigger.coerce(self.trigger_override)
            if self.trigger_override is not None
            else self.effect.DEFAULT_TRIGGER
        )
        threshold = self.visible_threshold if self.visible_threshold is not None else settings.visible_threshold
        self.controller = MotionTriggerController(
            trigger,
            self._on_trigger_fired,
            visible_threshold=threshold,
            name=self.effect_name,
        )
        self._scroll_source = self._find_scroll_source()
        self._show(self.effect.render())

        interval = self.frame_interval or settings.frame_interval
        self._last_tick = time.monotonic()
        self.animation_timer = self.set_interval(interval, self._tick)
        if trigger is MotionTrigger.ON_BUILD:
            self.call_after_refresh(self._notify_first_frame)
        logger.debug(f"Effect '{self.effect_name}' mounted - trigger: {trigger.value}, interval: {interval}s")

    def on_unmount(self) -> None:
        if self.controller is not None:
            self.controller.dispose()
        self._stop_timer()
        logger.debug(f"Effect '{self.effect_name}' unmounted")

    def start(self) -> bool:
        """Start the effect now (manual trigger). Returns True if this call started it."""
        if self.controller is None:
            return False
        return self.controller.start()

    def visible_fraction(self) -> float:
        """Share of this widget's screen region not clipped by its ancestors."""
        clips = [self.screen.region]
        clips.extend(ancestor.region for ancestor in self.ancestors if isinstance(ancestor, Widget))
        return visible_fraction(self.region, clips)

    def _apply_motion_settings(self, settings) -> None:
        """Configured smoothing and drag decay, unless the options set them."""
        tracker = getattr(self.effect, "tracker", None)
        if tracker is not None and "velocity_retain" not in self.options:
            tracker.retain = settings.velocity_retain
        scroller = getattr(self.effect, "scroller", None)
        if scroller is not None and "drag_decay" not in self.options:
            scroller.drag_decay = settings.drag_decay

    def _notify_first_frame(self) -> None:
        if self.controller is not None:
            self.controller.notify_frame()

    def _on_trigger_fired(self) -> None:
        self.effect.begin()
        self.started = True
        self.post_message(self.Started(self))

    def _tick(self) -> None:
        if self.effect is None or self.controller is None:
            return
        now = time.monotonic()
        dt = now - self._last_tick if self._last_tick is not None else 0.0
        self._last_tick = now
        try:
            if platform_disables_animations(self.app):
                self._settle()
                return
            # Trigger first so a start is visible in the same frame
            if self.controller.wants_visibility:
                self.controller.notify_visibility(self.visible_fraction())
            if self._scroll_source is not None:
                self.effect.on_scroll(self._scroll_source.scroll_y, now * 1000.0)
            self._show(self.effect.update(dt))
        except Exception as e:
            logger.error(f"Error updating effect '{self.effect_name}': {e}")
            self._stop_timer()
            self._display_static_fallback()

    def _settle(self) -> None:
        """Animations were switched off while running: show the settled state."""
        logger.info(f"Animations disabled, settling '{self.effect_name}'")
        self.motion_suppressed = True
        self._stop_timer()
        if self.controller is not None:
            self.controller.dispose()
        self._show(self.effect.render_static())

    def _find_scroll_source(self) -> Optional[Widget]:
        for ancestor in self.ancestors:
            if isinstance(ancestor, Widget) and ancestor.is_scrollable:
                return ancestor
        return None

    def _show(self, frame: Text) -> None:
        self.last_frame = frame
        self.update(frame)

    def _display_static_fallback(self) -> None:
        """Display the plain source text."""
        if self.effect is not None:
            try:
                self._show(self.effect.render_static())
                return
            except Exception as e:
                logger.error(f"Static render failed for '{self.effect_name}': {e}")
        text = self.source_text
        if not isinstance(text, str):
            text = " ".join(str(item) for item in text) if isinstance(text, (list, tuple)) else str(text)
        logger.info(f"Displaying static fallback for '{self.effect_name}'")
        self._show(Text(text))

    def _stop_timer(self) -> None:
        if self.animation_timer is not None:
            self.animation_timer.stop()
            self.animation_timer = None

    # Input forwarding

    def on_mouse_move(self, event: events.MouseMove) -> None:
        if self.effect is None or self.motion_suppressed:
            return
        if self._dragging:
            self.effect.on_drag(event.delta_x)
        self.effect.on_pointer_move((event.x, event.y))

    def on_leave(self, event: events.Leave) -> None:
        if self.effect is not None and not self.motion_suppressed:
            self.effect.on_pointer_leave()

    def on_mouse_down(self, event: events.MouseDown) -> None:
        if self.effect is not None and not self.motion_suppressed:
            self._dragging = True
            self.capture_mouse()

    def on_mouse_up(self, event: events.MouseUp) -> None:
        if self._dragging:
            self._dragging = False
            self.release_mouse()

    class Started(Message):
        """Message sent when the effect's trigger fires."""

        def __init__(self, text_effect: "TextEffect") -> None:
            super().__init__()
            self.text_effect = text_effect

        @property
        def control(self) -> "TextEffect":
            return self.text_effect
