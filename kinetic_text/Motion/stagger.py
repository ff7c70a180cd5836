"""Per-segment stagger scheduling over one global progress value."""

from typing import Tuple


def clamp01(value: float) -> float:
    """Clamp value into [0, 1]."""
    if value < 0.0:
        return 0.0
    if value > 1.0:
        return 1.0
    return value


def stagger_window(index: int, delay_fraction: float) -> Tuple[float, float]:
    """Return the (start, end) window of segment ``index`` on the global timeline."""
    start = clamp01(index * delay_fraction)
    end = clamp01(start + (1.0 - delay_fraction))
    return start, end


def interval01(index: int, count: int, delay_fraction: float, progress01: float) -> float:
    """
    Map global progress to the local 0..1 progress of one segment.

    Args:
        index: Segment index.
        count: Total number of segments.
        delay_fraction: Stagger spread, 0 = simultaneous, 1 = maximum spread.
        progress01: Global progress.

    Returns:
        Local progress of the segment, clamped to [0, 1].
    """
    if count <= 1:
        return clamp01(progress01)
    # A finished timeline settles every segment, including those whose
    # window collapsed onto 1.0.
    if progress01 >= 1.0:
        return 1.0
    start, end = stagger_window(index, delay_fraction)
    if progress01 <= start:
        return 0.0
    if progress01 >= end:
        return 1.0
    return clamp01((progress01 - start) / (end - start))


class Stagger:
    """Namespaced access to :func:`interval01`."""

    interval01 = staticmethod(interval01)
    window = staticmethod(stagger_window)
