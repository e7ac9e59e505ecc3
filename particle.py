"""Particle records for hit bursts."""

import random
from dataclasses import dataclass
from typing import Tuple

from config import Config

Color = Tuple[int, int, int]


@dataclass
class Particle:
    """
    A short-lived visual fragment.

    Size and velocity are sampled once at creation and never change.
    Life starts at 1.0 and the particle is gone once it reaches zero.
    """

    x: float
    y: float
    color: Color
    size: float
    vx: float
    vy: float
    life: float = 1.0

    @property
    def position(self) -> Tuple[float, float]:
        """Get particle position as tuple."""
        return (self.x, self.y)


def create_particle(
    x: float, y: float, color: Color, config: Config, rng: random.Random
) -> Particle:
    """
    Create a particle at a point with a random size and drift.

    Args:
        x, y: Spawn position
        color: RGB color of the particle
        config: Game configuration (size and speed ranges)
        rng: Random source

    Returns:
        A fresh particle with full life
    """
    size = rng.random() * config.particle_size_range + config.particle_min_size
    speed = config.particle_speed_range
    vx = rng.random() * speed * 2 - speed
    vy = rng.random() * speed * 2 - speed
    return Particle(x=x, y=y, color=color, size=size, vx=vx, vy=vy)


def advance(particle: Particle, decay: float) -> None:
    """Move a particle by its velocity and burn some of its life."""
    particle.x += particle.vx
    particle.y += particle.vy
    particle.life -= decay


def is_expired(particle: Particle) -> bool:
    return particle.life <= 0
