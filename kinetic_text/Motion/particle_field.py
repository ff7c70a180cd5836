"""
Falling-glyph particle system.

Particles start above the visible area and fall under gravity. A
particle that drops past the bottom bound plus a slack margin is moved
back above the top and falls again; particles are never reallocated.
"""

import math
import random
from dataclasses import dataclass
from typing import List, Optional

from .segmented_text import graphemes

DEFAULT_GRAVITY = 900.0
DEFAULT_PARTICLE_COUNT = 80
DEFAULT_SEED = 1
RECYCLE_SLACK = 60.0
RESPAWN_Y = -60.0


@dataclass
class Particle:
    glyph: str
    x: float
    y: float
    vx: float
    vy: float
    rotation: float
    angular_velocity: float


class ParticleField:
    """Owns a fixed set of particles over a ``width`` x ``height`` field."""

    def __init__(
        self,
        text: str,
        width: float,
        height: float,
        *,
        count: int = DEFAULT_PARTICLE_COUNT,
        gravity: float = DEFAULT_GRAVITY,
        seed: Optional[int] = DEFAULT_SEED,
        slack: float = RECYCLE_SLACK,
        respawn_y: float = RESPAWN_Y,
    ):
        self.text = text
        self.count = max(0, count)
        self.gravity = gravity
        self.slack = slack
        self.respawn_y = respawn_y
        self.seed = seed
        self.width = width
        self.height = height
        self.particles: List[Particle] = []
        self.reset(width, height)

    def reset(self, width: float, height: float) -> None:
        """Scatter a fresh set of particles for a field of the given size."""
        self.width = width
        self.height = height
        rnd = random.Random(self.seed)
        chars = [g for g in graphemes(self.text) if g]
        if not chars:
            self.particles = []
            return
        self.particles = [
            Particle(
                glyph=chars[i % len(chars)],
                x=rnd.random() * width,
                y=-rnd.random() * height,
                vx=(rnd.random() - 0.5) * 60,
                vy=rnd.random() * 40,
                rotation=rnd.random() * math.pi * 2,
                angular_velocity=(rnd.random() - 0.5) * 2.0,
            )
            for i in range(self.count)
        ]

    @property
    def recycle_threshold(self) -> float:
        return self.height + self.slack

    def step(self, dt: float) -> None:
        """Integrate gravity over ``dt`` seconds, then recycle fallen particles."""
        if dt <= 0:
            return
        threshold = self.recycle_threshold
        for p in self.particles:
            p.vy += self.gravity * dt
            p.x += p.vx * dt
            p.y += p.vy * dt
            p.rotation += p.angular_velocity * dt
            if p.y > threshold:
                p.y = self.respawn_y
                p.vy = 0.0
