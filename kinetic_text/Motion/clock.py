"""
Animation clock driven by elapsed-time deltas.

The host delivers ticks; the clock only accumulates elapsed seconds.
Its value is always recomputed from the accumulated time, never from a
previous value, so a clock can be restarted or resumed without drift.
"""

from enum import Enum


class ClockMode(Enum):
    FORWARD = "forward"          # 0 -> 1 once, then hold at 1
    REPEAT = "repeat"            # 0 -> 1, jump back to 0, forever
    PING_PONG = "ping_pong"      # 0 -> 1 -> 0, forever


class AnimationClock:
    """A progress source owned by exactly one effect."""

    def __init__(self, duration: float, mode: ClockMode = ClockMode.FORWARD):
        self.duration = max(0.0, float(duration))
        self.mode = mode
        self.elapsed = 0.0
        self.running = False
        self.started = False

    def start(self) -> None:
        """Run from the beginning."""
        self.elapsed = 0.0
        self.running = True
        self.started = True

    def stop(self) -> None:
        self.running = False

    def advance(self, dt: float) -> None:
        """Accumulate ``dt`` seconds if the clock is running."""
        if not self.running or dt <= 0:
            return
        self.elapsed += dt
        if self.mode is ClockMode.FORWARD and self.elapsed >= self.duration:
            self.elapsed = self.duration
            self.running = False

    @property
    def cycles(self) -> float:
        """Elapsed time measured in durations."""
        if self.duration <= 0:
            return 1.0 if self.started else 0.0
        return self.elapsed / self.duration

    @property
    def value(self) -> float:
        """Current progress in [0, 1]."""
        if self.duration <= 0:
            return 1.0 if self.started else 0.0
        cycles = self.cycles
        if self.mode is ClockMode.FORWARD:
            return min(cycles, 1.0)
        phase = cycles % 1.0
        if self.mode is ClockMode.REPEAT:
            return phase
        # Ping-pong: even cycles rise, odd cycles fall
        if int(cycles) % 2 == 0:
            return phase
        return 1.0 - phase

    @property
    def is_complete(self) -> bool:
        return (
            self.mode is ClockMode.FORWARD
            and self.started
            and self.elapsed >= self.duration
        )
