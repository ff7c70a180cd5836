"""Scroll offset for the curved marquee: constant speed plus drag coasting."""

# Fraction of residual drag velocity left after one second
DRAG_DECAY_PER_SECOND = 0.08
# Drag deltas are treated as per-frame movement at this frame rate
DRAG_VELOCITY_SCALE = 60.0


class LoopScroller:
    """Signed, unbounded scroll offset in pixels."""

    def __init__(
        self,
        speed: float = 60.0,
        reverse: bool = False,
        drag_decay: float = DRAG_DECAY_PER_SECOND,
        drag_velocity_scale: float = DRAG_VELOCITY_SCALE,
    ):
        self.speed = speed
        self.reverse = reverse
        self.drag_decay = drag_decay
        self.drag_velocity_scale = drag_velocity_scale
        self.offset = 0.0
        self.drag_velocity = 0.0

    def tick(self, dt: float) -> float:
        """Advance by ``dt`` seconds and return the new offset."""
        if dt <= 0:
            return self.offset
        direction = -1.0 if self.reverse else 1.0
        self.offset += direction * self.speed * dt
        self.offset += self.drag_velocity * dt
        self.drag_velocity *= self.drag_decay ** dt
        return self.offset

    def drag(self, dx: float) -> None:
        """Scrub the ribbon directly and leave a residual velocity."""
        self.offset += dx
        self.drag_velocity = dx * self.drag_velocity_scale
