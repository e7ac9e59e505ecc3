"""Particle bursts and screen shake for Pong Arena."""

import random
from typing import List, Optional, Tuple

from config import Config
from particle import Color, Particle, advance, create_particle, is_expired


class EffectsManager:
    """
    Owns the live particles and the screen-shake countdown.

    Particles are created in bursts when the ball hits a paddle and
    are advanced once per rendered frame. The shake countdown is also
    consumed per rendered frame, so its duration is measured in frames
    drawn rather than simulation updates.
    """

    def __init__(self, config: Optional[Config] = None, rng: Optional[random.Random] = None):
        self.config = config or Config()
        self.rng = rng or random.Random()
        self.particles: List[Particle] = []
        self.shake_frames_remaining = 0
        self.shake_intensity = self.config.initial_shake_intensity

    def trigger_shake(self, duration: int, intensity: float) -> None:
        """Start a shake. Both values are taken as given, negatives included."""
        self.shake_frames_remaining = duration
        self.shake_intensity = intensity

    @property
    def is_shaking(self) -> bool:
        return self.shake_frames_remaining > 0

    def shake_offset(self) -> Tuple[float, float]:
        """
        Get the camera offset for the frame about to be drawn.

        Consumes one shake frame when a shake is active.

        Returns:
            (dx, dy) offset, (0, 0) when not shaking
        """
        if self.shake_frames_remaining <= 0:
            return (0.0, 0.0)
        dx = (self.rng.random() - 0.5) * self.shake_intensity
        dy = (self.rng.random() - 0.5) * self.shake_intensity
        self.shake_frames_remaining -= 1
        return (dx, dy)

    def spawn_burst(self, x: float, y: float, color: Color) -> List[Particle]:
        """
        Add a burst of particles at a point.

        Args:
            x, y: Burst origin
            color: Color shared by every particle in the burst

        Returns:
            The newly created particles
        """
        burst = [
            create_particle(x, y, color, self.config, self.rng)
            for _ in range(self.config.particle_burst_size)
        ]
        self.particles.extend(burst)
        return burst

    def update_particles(self) -> int:
        """
        Advance every particle and drop the expired ones.

        Walks the list backwards so deleting in place never skips
        an element.

        Returns:
            Number of particles removed
        """
        removed = 0
        for i in range(len(self.particles) - 1, -1, -1):
            particle = self.particles[i]
            advance(particle, self.config.particle_decay)
            if is_expired(particle):
                del self.particles[i]
                removed += 1
        return removed

    def clear(self) -> None:
        """Remove all particles and stop any shake."""
        self.particles = []
        self.shake_frames_remaining = 0
