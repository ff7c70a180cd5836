"""
Arc-length parameterised open paths.

Curves are flattened into polylines with cumulative arc lengths so a
position and tangent angle can be looked up by distance travelled along
the curve. Coordinates follow screen conventions: x grows right, y grows
down, angles are ``atan2(dy, dx)`` in radians.
"""

import bisect
import math
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

Point = Tuple[float, float]

DEFAULT_SAMPLES = 96


@dataclass(frozen=True)
class Tangent:
    x: float
    y: float
    angle: float


class SampledPath:
    """A polyline with cumulative arc-length lookup."""

    def __init__(self, points: Sequence[Point]):
        pts = [(float(x), float(y)) for x, y in points]
        # Drop consecutive duplicates so every segment has a direction
        self.points: List[Point] = []
        for p in pts:
            if not self.points or p != self.points[-1]:
                self.points.append(p)
        self._cumulative: List[float] = [0.0]
        for (x0, y0), (x1, y1) in zip(self.points, self.points[1:]):
            self._cumulative.append(self._cumulative[-1] + math.hypot(x1 - x0, y1 - y0))

    @property
    def length(self) -> float:
        return self._cumulative[-1]

    def tangent_at(self, distance: float) -> Tangent:
        """Position and direction at ``distance`` along the path (clamped)."""
        if len(self.points) < 2:
            x, y = self.points[0] if self.points else (0.0, 0.0)
            return Tangent(x, y, 0.0)
        distance = min(max(distance, 0.0), self.length)
        i = bisect.bisect_right(self._cumulative, distance) - 1
        i = min(max(i, 0), len(self.points) - 2)
        (x0, y0), (x1, y1) = self.points[i], self.points[i + 1]
        seg_len = self._cumulative[i + 1] - self._cumulative[i]
        t = (distance - self._cumulative[i]) / seg_len if seg_len > 0 else 0.0
        return Tangent(x0 + (x1 - x0) * t, y0 + (y1 - y0) * t, math.atan2(y1 - y0, x1 - x0))


def sample_curve(fn: Callable[[float], Point], samples: int = DEFAULT_SAMPLES) -> SampledPath:
    samples = max(1, samples)
    return SampledPath([fn(i / samples) for i in range(samples + 1)])


def line(p0: Point, p1: Point) -> SampledPath:
    return SampledPath([p0, p1])


def quadratic_bezier(p0: Point, p1: Point, p2: Point, samples: int = DEFAULT_SAMPLES) -> SampledPath:
    def point(t: float) -> Point:
        u = 1 - t
        return (
            u * u * p0[0] + 2 * u * t * p1[0] + t * t * p2[0],
            u * u * p0[1] + 2 * u * t * p1[1] + t * t * p2[1],
        )
    return sample_curve(point, samples)


def cubic_bezier(p0: Point, p1: Point, p2: Point, p3: Point, samples: int = DEFAULT_SAMPLES) -> SampledPath:
    def point(t: float) -> Point:
        u = 1 - t
        return (
            u ** 3 * p0[0] + 3 * u * u * t * p1[0] + 3 * u * t * t * p2[0] + t ** 3 * p3[0],
            u ** 3 * p0[1] + 3 * u * u * t * p1[1] + 3 * u * t * t * p2[1] + t ** 3 * p3[1],
        )
    return sample_curve(point, samples)


def default_loop_paths(width: float, height: float) -> List[SampledPath]:
    """Two opposing arcs: the top one bows upward, the bottom one downward."""
    top = quadratic_bezier((0, height * 0.30), (width * 0.5, height * 0.05), (width, height * 0.30))
    bottom = quadratic_bezier((0, height * 0.70), (width * 0.5, height * 0.95), (width, height * 0.70))
    return [top, bottom]
