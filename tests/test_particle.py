"""Tests for Particle records."""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import random
import unittest

from config import Config
from particle import Particle, advance, create_particle, is_expired


class FixedRandom(random.Random):
    """Random source that always returns the same value."""

    def __init__(self, value: float):
        super().__init__()
        self.value = value

    def random(self):
        return self.value


class TestCreateParticle(unittest.TestCase):
    """Test particle creation."""

    def setUp(self):
        self.config = Config()

    def test_initial_properties(self):
        """Particle should start at the given point with full life."""
        particle = create_particle(100, 200, (255, 0, 0), self.config, random.Random(0))
        self.assertEqual(particle.position, (100, 200))
        self.assertEqual(particle.color, (255, 0, 0))
        self.assertEqual(particle.life, 1.0)

    def test_sampled_ranges(self):
        """Size should be in [2, 6) and speeds in [-2, 2)."""
        rng = random.Random(42)
        for _ in range(200):
            particle = create_particle(0, 0, (0, 0, 0), self.config, rng)
            self.assertGreaterEqual(particle.size, 2)
            self.assertLess(particle.size, 6)
            self.assertGreaterEqual(particle.vx, -2)
            self.assertLess(particle.vx, 2)
            self.assertGreaterEqual(particle.vy, -2)
            self.assertLess(particle.vy, 2)

    def test_fixed_random_values(self):
        """A random value of 0.25 gives size 3 and speed -1 on both axes."""
        particle = create_particle(0, 0, (0, 0, 0), self.config, FixedRandom(0.25))
        self.assertEqual(particle.size, 3)
        self.assertEqual(particle.vx, -1)
        self.assertEqual(particle.vy, -1)


class TestAdvance(unittest.TestCase):
    """Test per-frame particle movement."""

    def test_moves_by_velocity(self):
        """Position should change by velocity."""
        particle = Particle(x=10, y=20, color=(0, 0, 0), size=3, vx=1.5, vy=-0.5)
        advance(particle, 0.05)
        self.assertEqual(particle.x, 11.5)
        self.assertEqual(particle.y, 19.5)

    def test_life_decays(self):
        """Life should drop by the decay step."""
        particle = Particle(x=0, y=0, color=(0, 0, 0), size=3, vx=0, vy=0)
        advance(particle, 0.05)
        self.assertAlmostEqual(particle.life, 0.95)

    def test_size_and_velocity_fixed(self):
        """Size and velocity should never change."""
        particle = Particle(x=0, y=0, color=(0, 0, 0), size=3, vx=1, vy=1)
        for _ in range(5):
            advance(particle, 0.05)
        self.assertEqual(particle.size, 3)
        self.assertEqual((particle.vx, particle.vy), (1, 1))


class TestIsExpired(unittest.TestCase):
    """Test particle expiry."""

    def test_expired_at_zero(self):
        """Life of exactly zero is expired."""
        particle = Particle(x=0, y=0, color=(0, 0, 0), size=3, vx=0, vy=0, life=0)
        self.assertTrue(is_expired(particle))

    def test_expired_below_zero(self):
        particle = Particle(x=0, y=0, color=(0, 0, 0), size=3, vx=0, vy=0, life=-0.1)
        self.assertTrue(is_expired(particle))

    def test_alive_above_zero(self):
        particle = Particle(x=0, y=0, color=(0, 0, 0), size=3, vx=0, vy=0, life=0.01)
        self.assertFalse(is_expired(particle))


if __name__ == "__main__":
    unittest.main()
