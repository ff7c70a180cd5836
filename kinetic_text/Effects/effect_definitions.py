"""Predefined gallery entries for every effect."""

from typing import Any, Dict, Optional


def get_all_effect_definitions() -> Dict[str, Dict[str, Any]]:
    """Get the gallery definition of every effect, keyed by registry name."""
    return {
        # Reveal
        "split_text": {
            "category": "reveal",
            "title": "Split text",
            "options": {"duration": 0.9, "delay_fraction": 0.35, "animate_by": "words", "direction": "up"},
        },
        "blur_text": {
            "category": "reveal",
            "title": "Blur text",
            "options": {"duration": 0.9, "delay_fraction": 0.35, "max_sigma": 10.0, "direction": "top"},
        },
        "scroll_reveal_text": {
            "category": "reveal",
            "title": "Scroll reveal",
            "options": {"duration": 0.9},
        },
        "text_type": {
            "category": "reveal",
            "title": "Typewriter",
            "options": {"duration": 1.4, "cursor": "▍", "cursor_blink": 0.52},
        },
        "shuffle_text": {
            "category": "reveal",
            "title": "Shuffle",
            "text": "DECODE ME",
            "options": {"duration": 1.1},
        },
        "ascii_scramble_text": {
            "category": "reveal",
            "title": "ASCII scramble",
            "options": {"duration": 1.1},
        },
        "decrypted_text": {
            "category": "reveal",
            "title": "Decrypted",
            "text": "CLASSIFIED",
            "options": {"duration": 1.4},
        },
        "scrambled_text": {
            "category": "reveal",
            "title": "Scrambled",
            "options": {"duration": 1.2},
        },
        "count_up": {
            "category": "reveal",
            "title": "Count up",
            "text": "2048",
            "options": {"from_value": 0, "decimals": 0, "duration": 1.1},
        },
        "rotating_text": {
            "category": "reveal",
            "title": "Rotating",
            "text": ["fast", "fluid", "kinetic", "terminal"],
            "options": {"period": 1.8, "transition": 0.45},
        },
        # Ambient
        "circular_text": {
            "category": "ambient",
            "title": "Circular",
            "text": "KINETIC • TEXT • ",
            "options": {"period": 8.0, "clockwise": True, "width": 32, "height": 12},
        },
        "shiny_text": {
            "category": "ambient",
            "title": "Shiny",
            "options": {"duration": 1.8, "base_color": "#CBD5E1", "shine_color": "#FFFFFF"},
        },
        "gradient_text": {
            "category": "ambient",
            "title": "Gradient",
            "options": {"duration": 2.4, "colors": ["#7C3AED", "#06B6D4", "#F59E0B"]},
        },
        "fuzzy_text": {
            "category": "ambient",
            "title": "Fuzzy",
            "options": {"period": 1.4, "jitter": 1.4, "blur_sigma": 0.8},
        },
        "glitch_text": {
            "category": "ambient",
            "title": "Glitch",
            "options": {"period": 1.2},
        },
        "true_focus": {
            "category": "ambient",
            "title": "True focus",
            "options": {"duration": 1.8, "blur_sigma": 8.0, "focus_width_fraction": 0.35},
        },
        "curved_loop": {
            "category": "ambient",
            "title": "Curved loop",
            "options": {"speed": 60.0, "gap": "   •   ", "strip_padding": 6.0, "width": 60, "height": 10},
        },
        "falling_text": {
            "category": "ambient",
            "title": "Falling",
            "text": "RAIN",
            "options": {"particle_count": 80, "gravity": 900.0, "seed": 1, "width": 60, "height": 10},
        },
        # Reactive
        "variable_proximity_text": {
            "category": "reactive",
            "title": "Variable proximity",
            "text": "Hover over me",
            "options": {"max_radius": 140.0, "min_scale": 0.95, "max_scale": 1.2, "min_opacity": 0.55},
        },
        "text_pressure": {
            "category": "reactive",
            "title": "Text pressure",
            "text": "Push me around",
            "options": {"max_radius": 160.0},
        },
        "text_cursor_trail": {
            "category": "reactive",
            "title": "Cursor trail",
            "text": "trail",
            "options": {"max_points": 22, "fade": 0.7, "width": 60, "height": 6},
        },
        "scroll_float_text": {
            "category": "reactive",
            "title": "Scroll float",
            "text": "Scroll the gallery",
            "options": {"max_offset": 24.0, "max_fade": 0.35},
        },
        "scroll_velocity_text": {
            "category": "reactive",
            "title": "Scroll velocity",
            "text": "Scroll faster",
            "options": {"max_skew": 0.25, "max_blur": 6.0},
        },
    }


def get_effect_definition(name: str) -> Optional[Dict[str, Any]]:
    """Get one gallery definition, or None if the effect has no entry."""
    return get_all_effect_definitions().get(name)
