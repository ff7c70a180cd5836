"""
Easing curves.

The CSS-style names are cubic-bezier timing curves through (0, 0) and
(1, 1) with fixed control points, solved by bisection on the x
polynomial. Any other name resolves to one of Textual's animation
curves (``out_bounce``, ``in_out_sine``, ...). Curves are callables
mapping 0..1 to 0..1.
"""

from dataclasses import dataclass
from typing import Callable, Dict

from textual._easing import EASING

Curve = Callable[[float], float]

_CUBIC_ERROR_BOUND = 0.001
_MAX_ITERATIONS = 64


def _evaluate_cubic(a: float, b: float, m: float) -> float:
    return 3 * a * (1 - m) * (1 - m) * m + 3 * b * (1 - m) * m * m + m * m * m


@dataclass(frozen=True)
class CubicBezierCurve:
    """A cubic timing curve with control points (a, b) and (c, d)."""
    a: float
    b: float
    c: float
    d: float

    def __call__(self, t: float) -> float:
        if t <= 0.0:
            return 0.0
        if t >= 1.0:
            return 1.0
        start, end = 0.0, 1.0
        midpoint = 0.5
        for _ in range(_MAX_ITERATIONS):
            midpoint = (start + end) / 2
            estimate = _evaluate_cubic(self.a, self.c, midpoint)
            if abs(t - estimate) < _CUBIC_ERROR_BOUND:
                break
            if estimate < t:
                start = midpoint
            else:
                end = midpoint
        return _evaluate_cubic(self.b, self.d, midpoint)


def linear(t: float) -> float:
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    return t


ease_out = CubicBezierCurve(0.0, 0.0, 0.58, 1.0)
ease_in_out = CubicBezierCurve(0.42, 0.0, 0.58, 1.0)
ease_out_cubic = CubicBezierCurve(0.215, 0.61, 0.355, 1.0)

CURVES: Dict[str, Curve] = {
    "linear": linear,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
    "ease_out_cubic": ease_out_cubic,
}


def get_curve(curve) -> Curve:
    """Resolve a curve given by name or as a callable."""
    if callable(curve):
        return curve
    if curve in CURVES:
        return CURVES[curve]
    try:
        return EASING[curve]
    except KeyError:
        raise ValueError(f"Unknown easing curve: {curve!r}") from None
