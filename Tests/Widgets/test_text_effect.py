"""
Tests for the TextEffect host widget.
"""

import time

import pytest
from textual.geometry import Region

from kinetic_text.Widgets import TextEffect, visible_fraction

from textual_test_utils import ScrollingTestApp, WidgetTestApp

pytestmark = pytest.mark.ui


class TestVisibleFraction:

    def test_unclipped(self):
        assert visible_fraction(Region(0, 0, 10, 2), []) == 1.0

    def test_half_clipped(self):
        assert visible_fraction(Region(0, 0, 10, 2), [Region(0, 1, 10, 5)]) == pytest.approx(0.5)

    def test_fully_clipped(self):
        assert visible_fraction(Region(0, 30, 10, 2), [Region(0, 0, 80, 24)]) == 0.0

    def test_empty_region(self):
        assert visible_fraction(Region(0, 0, 0, 0), []) == 0.0


@pytest.mark.asyncio
async def test_reduced_motion_renders_final_value():
    app = WidgetTestApp(TextEffect, "count_up", 100, reduce_motion=True)
    async with app.run_test() as pilot:
        await pilot.pause()
        widget = app.test_widget
        assert widget.motion_suppressed
        assert widget.last_frame.plain == "100"
        assert widget.animation_timer is None
        assert widget.controller is None
        assert widget.effect.frame_count == 0


@pytest.mark.asyncio
async def test_configured_reduce_motion(write_config):
    write_config("[motion]\nreduce_motion = true\n")
    app = WidgetTestApp(TextEffect, "split_text", "Hi there")
    async with app.run_test() as pilot:
        await pilot.pause()
        assert app.test_widget.last_frame.plain == "Hi there"
        assert app.test_widget.controller is None


@pytest.mark.asyncio
async def test_disabled_shows_settled_state():
    app = WidgetTestApp(TextEffect, "shuffle_text", "SETTLED", enabled=False)
    async with app.run_test() as pilot:
        await pilot.pause()
        assert app.test_widget.last_frame.plain == "SETTLED"
        assert app.test_widget.start() is False


@pytest.mark.asyncio
async def test_unknown_effect_falls_back_to_plain_text():
    app = WidgetTestApp(TextEffect, "no_such_effect", "plain words")
    async with app.run_test() as pilot:
        await pilot.pause()
        widget = app.test_widget
        assert widget.effect is None
        assert widget.last_frame.plain == "plain words"


@pytest.mark.asyncio
async def test_single_item_rotation_is_static():
    app = WidgetTestApp(TextEffect, "rotating_text", ["only"])
    async with app.run_test() as pilot:
        await pilot.pause()
        assert app.test_widget.motion_suppressed
        assert app.test_widget.last_frame.plain == "only"


@pytest.mark.asyncio
async def test_on_build_starts_after_first_frame():
    app = WidgetTestApp(TextEffect, "fuzzy_text", "fuzz")
    async with app.run_test() as pilot:
        await pilot.pause(0.1)
        widget = app.test_widget
        assert widget.started
        assert widget.effect.started
        assert len(app.messages) == 1


@pytest.mark.asyncio
async def test_manual_start():
    app = WidgetTestApp(TextEffect, "split_text", "Hi there", trigger="manual")
    async with app.run_test() as pilot:
        await pilot.pause(0.1)
        widget = app.test_widget
        assert not widget.started
        assert widget.start() is True
        assert widget.start() is False
        await pilot.pause(0.1)
        assert widget.started
        assert len(app.messages) == 1


@pytest.mark.asyncio
async def test_visible_effect_starts_when_on_screen():
    app = WidgetTestApp(TextEffect, "split_text", "Hi there", frame_interval=0.01)
    async with app.run_test() as pilot:
        await pilot.pause(0.2)
        assert app.test_widget.started


@pytest.mark.asyncio
async def test_visible_effect_waits_until_scrolled_into_view():
    app = ScrollingTestApp(lambda: TextEffect("split_text", "Below the fold", frame_interval=0.01))
    async with app.run_test() as pilot:
        await pilot.pause(0.2)
        widget = app.test_widget
        assert not widget.started
        app.query_one("#scroller").scroll_end(animate=False)
        await pilot.pause(0.3)
        assert widget.started


@pytest.mark.asyncio
async def test_animation_advances_frames():
    app = WidgetTestApp(TextEffect, "count_up", 100, frame_interval=0.01, options={"duration": 0.2})
    async with app.run_test() as pilot:
        await pilot.pause(0.6)
        widget = app.test_widget
        assert widget.effect.frame_count > 1
        assert widget.last_frame.plain == "100"


@pytest.mark.asyncio
async def test_unmount_disposes_controller():
    app = WidgetTestApp(TextEffect, "split_text", "bye", trigger="manual")
    async with app.run_test() as pilot:
        await pilot.pause()
        widget = app.test_widget
        controller = widget.controller
        await widget.remove()
        await pilot.pause()
        assert controller.disposed
        assert widget.animation_timer is None
        assert controller.start() is False


@pytest.mark.asyncio
async def test_tick_error_falls_back_to_static(monkeypatch):
    app = WidgetTestApp(TextEffect, "fuzzy_text", "stable", frame_interval=0.01)
    async with app.run_test() as pilot:
        await pilot.pause()
        widget = app.test_widget

        def explode(dt=0.0):
            raise RuntimeError("boom")

        monkeypatch.setattr(widget.effect, "update", explode)
        await pilot.pause(0.1)
        assert widget.animation_timer is None
        assert widget.last_frame.plain == "stable"


@pytest.mark.asyncio
async def test_configured_motion_constants_reach_effects(write_config):
    write_config("[motion]\nvelocity_retain = 0.5\ndrag_decay = 0.2\n")
    app = WidgetTestApp(TextEffect, "scroll_velocity_text", "fast", trigger="manual")
    async with app.run_test() as pilot:
        await pilot.pause()
        assert app.test_widget.effect.tracker.retain == 0.5

    app = WidgetTestApp(TextEffect, "curved_loop", "LOOP", trigger="manual", options={"drag_decay": 0.5})
    async with app.run_test() as pilot:
        await pilot.pause()
        assert app.test_widget.effect.scroller.drag_decay == 0.5


@pytest.mark.asyncio
async def test_trigger_fires_before_the_frame_of_the_same_tick():
    # A long interval keeps the timer out of the way; ticks are driven by hand
    app = WidgetTestApp(TextEffect, "split_text", "Hi there", frame_interval=60.0)
    async with app.run_test() as pilot:
        await pilot.pause()
        widget = app.test_widget
        before = widget.last_frame.plain
        assert not widget.started
        assert before.strip() == ""

        widget._last_tick = time.monotonic() - 0.3
        widget._tick()

        assert widget.started
        assert widget.effect.frame_count == 1
        assert widget.effect.clock.value > 0.0
        assert widget.last_frame.plain != before


@pytest.mark.asyncio
async def test_disabling_animations_settles_a_running_effect():
    app = WidgetTestApp(TextEffect, "split_text", "Hi there", frame_interval=0.01)
    async with app.run_test() as pilot:
        await pilot.pause(0.1)
        widget = app.test_widget
        assert widget.started
        controller = widget.controller

        app.animation_level = "none"
        await pilot.pause(0.1)

        assert widget.motion_suppressed
        assert widget.animation_timer is None
        assert controller.disposed
        assert widget.last_frame.plain == "Hi there"
