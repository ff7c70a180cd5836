"""Smoothed scroll velocity from discrete position samples."""

import time
from typing import Optional

# Exponential smoothing: v' = v * RETAIN + instantaneous * (1 - RETAIN)
VELOCITY_RETAIN = 0.85
MIN_SAMPLE_DT_MS = 1.0
MAX_SAMPLE_DT_MS = 1000.0


class VelocityTracker:
    """
    Turns (timestamp, position) samples into a decaying velocity estimate.

    Velocity is in position units per second. The first sample only
    records a reference point; it contributes no velocity.
    """

    def __init__(
        self,
        retain: float = VELOCITY_RETAIN,
        min_dt_ms: float = MIN_SAMPLE_DT_MS,
        max_dt_ms: float = MAX_SAMPLE_DT_MS,
    ):
        self.retain = retain
        self.min_dt_ms = min_dt_ms
        self.max_dt_ms = max_dt_ms
        self.velocity = 0.0
        self._last_timestamp_ms: Optional[float] = None
        self._last_position = 0.0

    def on_sample(self, timestamp_ms: float, position: float) -> float:
        """Consume one sample and return the smoothed velocity."""
        if self._last_timestamp_ms is None:
            self._last_timestamp_ms = timestamp_ms
            self._last_position = position
            return self.velocity

        dt = min(max(timestamp_ms - self._last_timestamp_ms, self.min_dt_ms), self.max_dt_ms)
        instantaneous = (position - self._last_position) / dt * 1000.0
        self._last_timestamp_ms = timestamp_ms
        self._last_position = position
        self.velocity = self.velocity * self.retain + instantaneous * (1.0 - self.retain)
        return self.velocity

    def sample(self, position: float) -> float:
        """Consume a sample stamped with the monotonic clock."""
        return self.on_sample(time.monotonic() * 1000.0, position)

    def normalized(self, scale: float) -> float:
        """Velocity magnitude mapped to [0, 1] against ``scale``."""
        if scale <= 0:
            return 0.0
        return min(max(abs(self.velocity) / scale, 0.0), 1.0)

    @property
    def direction(self) -> float:
        return -1.0 if self.velocity < 0 else 1.0

    def reset(self) -> None:
        self.velocity = 0.0
        self._last_timestamp_ms = None
        self._last_position = 0.0
