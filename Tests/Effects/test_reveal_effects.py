"""
Tests for the staggered, scramble, typewriter and rotating reveals.
"""

import pytest

from kinetic_text.Effects import create_effect
from kinetic_text.Effects.reveal.blur_text import BlurDirection
from kinetic_text.Effects.reveal.shuffle_text import ASCII_RAMP, lock_count
from kinetic_text.Effects.reveal.split_text import SplitDirection
from kinetic_text.Motion.motion_trigger import MotionTrigger
from kinetic_text.Motion.segmented_text import AnimateBy


class TestSplitText:

    def test_hidden_before_begin(self):
        effect = create_effect("split_text", "Hi there")
        assert effect.render().plain == " " * len("Hi there")
        assert effect.DEFAULT_TRIGGER is MotionTrigger.ON_VISIBLE

    def test_settles_after_duration(self):
        effect = create_effect("split_text", "Hi there", duration=0.9)
        effect.begin()
        effect.update(1.0)
        assert effect.render().plain == "Hi there"
        assert all(f.opacity == 1.0 and f.offset_y == 0.0 for f in effect.frames())

    def test_later_segments_lag(self):
        effect = create_effect("split_text", "one two three four", duration=1.0)
        effect.begin()
        effect.update(0.3)
        progress = effect.segment_progress()
        assert progress == sorted(progress, reverse=True)
        assert progress[0] > progress[-1]

    @pytest.mark.parametrize("direction,expected", [
        ("up", (0.0, 18.0)),
        ("down", (0.0, -18.0)),
        ("left", (18.0, 0.0)),
        ("right", (-18.0, 0.0)),
    ])
    def test_segments_start_displaced(self, direction, expected):
        effect = create_effect("split_text", "a", direction=direction)
        frame = effect.frames()[0]
        assert (frame.offset_x, frame.offset_y) == expected
        assert effect.direction is SplitDirection(direction)

    def test_slide_moves_segment_across_cells(self):
        effect = create_effect(
            "split_text", "ab    ", direction="left", distance=16.0, delay_fraction=0.0, curve="linear", duration=1.0
        )
        effect.begin()
        # Halfway: still one cell to the right of its resting place
        assert effect.update(0.5).plain == " ab   "
        assert effect.update(0.5).plain == "ab    "

    def test_grapheme_mode(self):
        effect = create_effect("split_text", "abc", animate_by="graphemes")
        assert effect.segments == ["a", "b", "c"]

    def test_scroll_reveal_is_word_rise(self):
        effect = create_effect("scroll_reveal_text", "a b", animate_by="graphemes", direction="down")
        assert effect.animate_by is AnimateBy.WORDS
        assert effect.direction is SplitDirection.UP


class TestBlurText:

    def test_starts_blurred(self):
        effect = create_effect("blur_text", "soft focus")
        assert all(f.blur == 10.0 for f in effect.frames())

    def test_sharpens(self):
        effect = create_effect("blur_text", "soft focus", duration=0.5)
        effect.begin()
        effect.update(0.6)
        assert all(f.blur == 0.0 for f in effect.frames())

    def test_top_rises_from_below(self):
        effect = create_effect("blur_text", "x", direction="top")
        assert effect.direction is BlurDirection.TOP
        assert effect.frames()[0].offset_y == 10.0

    def test_none_does_not_slide(self):
        frame = create_effect("blur_text", "x", direction="none").frames()[0]
        assert (frame.offset_x, frame.offset_y) == (0.0, 0.0)


class TestScramble:

    @pytest.mark.parametrize("name", ["shuffle_text", "ascii_scramble_text", "decrypted_text", "scrambled_text"])
    def test_settles_to_target(self, name):
        effect = create_effect(name, "HELLO WORLD", seed=5)
        effect.begin()
        effect.update(5.0)
        assert effect.render().plain == "HELLO WORLD"

    @pytest.mark.parametrize("name", ["shuffle_text", "decrypted_text", "scrambled_text"])
    def test_whitespace_never_scrambled(self, name):
        effect = create_effect(name, "A B  C", seed=5)
        effect.begin()
        for _ in range(10):
            text = effect.update(0.05).plain
            assert len(text) == len("A B  C")
            assert text[1] == " " and text[3:5] == "  "

    def test_same_seed_same_frames(self):
        a = create_effect("shuffle_text", "DETERMINISM", seed=42)
        b = create_effect("shuffle_text", "DETERMINISM", seed=42)
        a.begin()
        b.begin()
        for _ in range(5):
            assert a.update(0.1).plain == b.update(0.1).plain

    def test_render_does_not_redraw_noise(self):
        effect = create_effect("shuffle_text", "STABLE", seed=1)
        assert effect.render().plain == effect.render().plain

    def test_ascii_noise_uses_ramp(self):
        effect = create_effect("ascii_scramble_text", "XXXX", seed=2)
        assert all(ch in ASCII_RAMP for ch in effect.render().plain)

    def test_shuffle_locks_left_to_right(self):
        effect = create_effect("shuffle_text", "ABCDEFGHIJ", seed=9, duration=1.0)
        effect.begin()
        effect.update(0.5)
        assert effect.revealed() == set(range(5))
        assert effect.render().plain[:5] == "ABCDE"

    def test_scrambled_order_is_permutation(self):
        effect = create_effect("scrambled_text", "ABCDEFGH", seed=9)
        effect.begin()
        assert sorted(effect.order) == list(range(8))

    def test_lock_count(self):
        assert lock_count(0.0, 10) == 0
        assert lock_count(0.55, 10) == 5
        assert lock_count(1.5, 10) == 10


class TestTextType:

    def test_types_progressively(self):
        effect = create_effect("text_type", "Hello", show_cursor=False, duration=1.0)
        assert effect.render().plain == ""
        effect.begin()
        assert effect.update(0.4).plain == "He"
        assert effect.update(1.0).plain == "Hello"

    def test_cursor_blinks_before_typing(self):
        effect = create_effect("text_type", "Hi", cursor="|", cursor_blink=0.5)
        effect.update(0.25)
        frames = effect.frames()
        assert frames[-1].text == "|"
        assert frames[-1].opacity == pytest.approx(0.5)

    def test_static_has_no_cursor(self):
        effect = create_effect("text_type", "Hello")
        assert effect.render_static().plain == "Hello"


class TestRotatingText:

    def test_single_item_does_not_animate(self):
        effect = create_effect("rotating_text", ["only"])
        assert not effect.can_animate
        effect.begin()
        assert not effect.started

    def test_width_fits_widest_item(self):
        effect = create_effect("rotating_text", ["a", "three", "bb"])
        assert effect.width == 5

    def test_cycles_items(self):
        effect = create_effect("rotating_text", ["a", "bb", "ccc"], period=1.0, transition=0.5)
        effect.begin()
        assert effect.render().plain == "a"
        effect.update(1.0)
        assert effect.index == 1
        # The new item has just started fading in
        assert effect.transition_progress == 0.0
        effect.update(0.5)
        assert effect.render().plain == "bb"
        effect.update(2.0)
        assert effect.index == 0

    def test_slides_in_from_below(self):
        effect = create_effect("rotating_text", ["a", "b"], period=1.0, transition=0.5, curve="linear")
        effect.begin()
        effect.update(1.25)
        frame = effect.frames()[0]
        assert frame.opacity == pytest.approx(0.5)
        assert frame.offset_y == pytest.approx(0.6 * 16.0 * 0.5)

    def test_static_is_first_item(self):
        effect = create_effect("rotating_text", ["first", "second"])
        assert effect.render_static().plain == "first"

    def test_does_not_run_before_begin(self):
        effect = create_effect("rotating_text", ["a", "b"], period=1.0)
        effect.update(5.0)
        assert effect.index == 0
