"""
Tests for looping ambient effects and pointer/scroll driven effects.
"""

import pytest

from kinetic_text.Effects import create_effect
from kinetic_text.Effects.ambient.glitch_text import CYAN, PINK


class TestShinyAndGradient:

    def test_shine_moves_across_text(self):
        effect = create_effect("shiny_text", "abcdefghij", duration=1.0)
        effect.begin()
        effect.update(0.5)
        colors = [f.color for f in effect.frames()]
        # Centre of the sweep sits on the middle of the text
        assert colors[0].lower() == colors[-1].lower() == "#cbd5e1"
        assert len(set(colors)) > 1

    def test_whitespace_uncolored(self):
        effect = create_effect("gradient_text", "a b")
        assert effect.frames()[1].color is None

    def test_gradient_spans_colors(self):
        effect = create_effect("gradient_text", "abcdefghijklmnop", colors=["#000000", "#FFFFFF"])
        colors = [f.color for f in effect.frames()]
        assert colors[0] != colors[-1]


class TestFuzzyAndFocus:

    def test_fuzzy_jitters(self):
        effect = create_effect("fuzzy_text", "fuzz", period=1.0)
        effect.begin()
        effect.update(0.25)
        frame = effect.frames()[0]
        assert frame.offset_x == pytest.approx(1.4)
        assert frame.blur == pytest.approx(0.8)

    def test_true_focus_blurs_outside_window(self):
        effect = create_effect("true_focus", "abcdefghijklmnopqrst")
        blurred = [f.blur > 0 for f in effect.frames()]
        # The window starts at the left edge
        assert not blurred[0]
        assert blurred[-1]

    def test_true_focus_window_glides(self):
        effect = create_effect("true_focus", "abcdefghijklmnopqrst", duration=1.0)
        effect.begin()
        effect.update(1.0)
        left, right = effect.focus_window()
        assert right == pytest.approx(effect.width_px)


class TestGlitch:

    def test_calm_outside_burst(self):
        effect = create_effect("glitch_text", "GLITCH", period=1.0, seed=4)
        effect.begin()
        effect.update(0.5)
        assert not effect.burst
        assert effect.slice_rows is None
        assert all(f.offset_x == 0 for f in effect.frames())

    def test_burst_splits_channels(self):
        effect = create_effect("glitch_text", "GLITCH", period=1.0, seed=4)
        effect.begin()
        effect.update(0.9)
        assert effect.burst
        assert effect.slice_rows == (0, 1)
        colors = [f.color for f in effect.frames()]
        assert colors[:2] == [CYAN, PINK]
        # The split channels move glyphs, not only their colours
        plain = effect.render().plain
        assert plain != "GLITCH"
        assert len(plain) == len("GLITCH")

    def test_never_bursts_before_begin(self):
        effect = create_effect("glitch_text", "GLITCH", period=1.0)
        effect.update(0.9)
        assert not effect.burst


class TestVariableProximity:

    def test_no_pointer_uses_minimums(self):
        effect = create_effect("variable_proximity_text", "ab")
        frame = effect.frames()[0]
        assert frame.scale == pytest.approx(0.95)
        assert frame.opacity == pytest.approx(0.55)

    def test_pointer_on_glyph_uses_maximums(self):
        effect = create_effect("variable_proximity_text", "ab")
        effect.on_pointer_move((0, 0))
        frame = effect.frames()[0]
        assert frame.scale == pytest.approx(1.2)
        assert frame.opacity == pytest.approx(1.0)
        assert effect.render().spans[0].style.bold

    def test_influence_falls_off_with_distance(self):
        effect = create_effect("variable_proximity_text", "abcdefghijklmnop")
        effect.on_pointer_move((0, 0))
        scales = [f.scale for f in effect.frames()]
        assert scales == sorted(scales, reverse=True)

    def test_leave_clears_pointer(self):
        effect = create_effect("variable_proximity_text", "ab")
        effect.on_pointer_move((0, 0))
        effect.on_pointer_leave()
        assert effect.pointer is None
        assert effect.frames()[0].scale == pytest.approx(0.95)

    def test_whitespace_untouched(self):
        effect = create_effect("text_pressure", "a b")
        effect.on_pointer_move((1, 0))
        space = effect.frames()[1]
        assert (space.scale, space.opacity) == (1.0, 1.0)

    def test_pressure_preset(self):
        effect = create_effect("text_pressure", "a")
        assert (effect.max_radius, effect.min_scale, effect.max_scale) == (160.0, 0.92, 1.28)


class TestScrollEffects:

    def test_velocity_from_scroll_samples(self):
        effect = create_effect("scroll_velocity_text", "fast")
        effect.on_scroll(0, timestamp_ms=0.0)
        effect.on_scroll(10, timestamp_ms=100.0)
        # 160 px in 100 ms, smoothed once
        assert effect.tracker.velocity == pytest.approx(1600.0 * 0.15)
        frame = effect.frames()[0]
        assert frame.skew == pytest.approx(0.25 * 240.0 / 2600.0)
        assert frame.blur == pytest.approx(6.0 * 240.0 / 2600.0)

    def test_float_follows_direction(self):
        effect = create_effect("scroll_float_text", "float")
        effect.on_scroll(10, timestamp_ms=0.0)
        effect.on_scroll(0, timestamp_ms=50.0)
        frame = effect.frames()[0]
        assert frame.offset_y < 0
        assert frame.opacity < 1.0

    def test_still_when_not_scrolling(self):
        effect = create_effect("scroll_float_text", "float")
        frame = effect.frames()[0]
        assert frame.offset_y == 0.0
        assert frame.opacity == 1.0

    def test_velocity_decays_when_position_holds(self):
        effect = create_effect("scroll_velocity_text", "fast")
        effect.on_scroll(0, timestamp_ms=0.0)
        effect.on_scroll(20, timestamp_ms=33.0)
        peak = effect.intensity
        for i in range(2, 40):
            effect.on_scroll(20, timestamp_ms=33.0 * i)
        assert effect.intensity < peak * 0.01
