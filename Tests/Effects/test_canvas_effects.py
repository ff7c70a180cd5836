"""
Tests for effects that paint a 2D cell grid.
"""

import pytest

from kinetic_text.Effects import create_effect
from kinetic_text.Motion.paths import line


def rows(text):
    return text.plain.split("\n")


class TestCircularText:

    def test_canvas_shape(self):
        effect = create_effect("circular_text", "ABCD")
        lines = rows(effect.render())
        assert len(lines) == 12
        assert all(len(row) == 32 for row in lines)

    def test_first_glyph_at_twelve_o_clock(self):
        effect = create_effect("circular_text", "ABCD")
        # r = 0.35 * min(256, 192) = 67.2 px above the centre (128, 96)
        assert rows(effect.render())[1][16] == "A"

    def test_glyphs_evenly_spaced(self):
        effect = create_effect("circular_text", "ABCD", radius=40.0)
        placements = effect.placements()
        assert [p.glyph for p in placements] == ["A", "B", "C", "D"]
        assert placements[1].x == pytest.approx(128 + 40.0)
        assert placements[2].y == pytest.approx(96 + 40.0)

    def test_rotation_direction(self):
        cw = create_effect("circular_text", "AB", period=4.0, radius=40.0)
        ccw = create_effect("circular_text", "AB", period=4.0, radius=40.0, clockwise=False)
        for effect in (cw, ccw):
            effect.begin()
            effect.update(1.0)
        assert cw.placements()[0].x == pytest.approx(128 + 40.0)
        assert ccw.placements()[0].x == pytest.approx(128 - 40.0)


class TestCurvedLoop:

    def test_static_is_offset_zero(self):
        effect = create_effect("curved_loop", "LOOP", width=60, height=10)
        assert effect.render_static().plain == effect.render().plain
        assert len(rows(effect.render())) == 10

    def test_scrolls_only_after_begin(self):
        effect = create_effect("curved_loop", "LOOP", speed=60.0)
        effect.update(1.0)
        assert effect.offset == 0.0
        effect.begin()
        effect.update(1.0)
        assert effect.offset == pytest.approx(60.0)

    def test_drag_in_cells(self):
        effect = create_effect("curved_loop", "LOOP", speed=0.0)
        effect.on_drag(2)
        assert effect.offset == pytest.approx(16.0)

    def test_drag_ignored_when_not_interactive(self):
        effect = create_effect("curved_loop", "LOOP", interactive=False)
        effect.on_drag(5)
        assert effect.offset == 0.0

    def test_custom_path(self):
        effect = create_effect(
            "curved_loop",
            "AB",
            gap="",
            width=10,
            height=1,
            path_builder=lambda w, h: [line((0, h / 2), (w, h / 2))],
        )
        assert effect.render().plain == "ABABABABAB"

    def test_strip_painted_behind_glyphs(self):
        effect = create_effect("curved_loop", "LOOP", strip_color="#1E293B")
        styles = [span.style for span in effect.render().spans]
        assert any(getattr(style, "bgcolor", None) is not None for style in styles)

    def test_paths_cached_per_size(self):
        effect = create_effect("curved_loop", "LOOP")
        first = effect.paths()
        assert effect.paths() is first
        effect.resize(20, 8)
        assert effect.paths() is not first


class TestFallingText:

    def test_nothing_moves_before_begin(self):
        effect = create_effect("falling_text", "RAIN")
        before = [(p.x, p.y) for p in effect.field.particles]
        effect.update(1.0)
        assert [(p.x, p.y) for p in effect.field.particles] == before

    def test_glyphs_fall_into_view(self):
        effect = create_effect("falling_text", "RAIN", width=60, height=10)
        effect.begin()
        for _ in range(15):
            frame = effect.update(1 / 30)
        assert any(ch in "RAIN" for ch in frame.plain)

    def test_seeded_fields_match(self):
        a = create_effect("falling_text", "RAIN", seed=8)
        b = create_effect("falling_text", "RAIN", seed=8)
        a.begin()
        b.begin()
        for _ in range(10):
            assert a.update(0.05).plain == b.update(0.05).plain

    def test_resize_before_begin_rescatters(self):
        effect = create_effect("falling_text", "RAIN", width=10, height=5)
        effect.resize(100, 50)
        assert effect.field.width == 800
        assert all(-800 <= p.y <= 0 for p in effect.field.particles)

    def test_resize_while_running_keeps_particles(self):
        effect = create_effect("falling_text", "RAIN")
        effect.begin()
        effect.update(0.1)
        particles = list(effect.field.particles)
        effect.resize(30, 6)
        assert effect.field.particles == particles
        assert effect.field.height == 6 * 16


class TestCursorTrail:

    def test_point_left_at_pointer(self):
        effect = create_effect("text_cursor_trail", "xyz", width=10, height=4)
        effect.on_pointer_move((3, 1))
        assert rows(effect.render())[1][3] == "x"

    def test_glyphs_cycle(self):
        effect = create_effect("text_cursor_trail", "xy", width=10, height=2)
        for col in range(3):
            effect.on_pointer_move((col, 0))
        assert rows(effect.render())[0][:3] == "xyx"

    def test_points_fade(self):
        effect = create_effect("text_cursor_trail", "x", width=10, height=2, fade=0.5)
        effect.on_pointer_move((0, 0))
        effect.update(0.6)
        assert effect.render().plain.strip() == ""

    def test_bounded_history(self):
        effect = create_effect("text_cursor_trail", "x", max_points=3)
        for col in range(10):
            effect.on_pointer_move((col, 0))
        assert len(effect.points) == 3
        assert effect.points[0].index == 7
