"""Tests for the scripted opponent."""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import unittest

from config import Config
from opponent import move_opponent, track_target
from state import SimulationState


def make_state(opponent_y: float, ball_y: float) -> SimulationState:
    return SimulationState(
        player_paddle_y=200, opponent_paddle_y=opponent_y, ball_x=400, ball_y=ball_y
    )


class TestMoveOpponent(unittest.TestCase):
    """Test opponent paddle movement."""

    def setUp(self):
        self.config = Config()
        self.half = self.config.paddle_height / 2

    def test_moves_down_toward_ball(self):
        """Ball well below the paddle center: move down one step."""
        state = make_state(100, 100 + self.half + 30)
        move_opponent(state, self.config)
        self.assertEqual(state.opponent_paddle_y, 106)

    def test_moves_up_toward_ball(self):
        """Ball well above the paddle center: move up one step."""
        state = make_state(200, 200 + self.half - 30)
        move_opponent(state, self.config)
        self.assertEqual(state.opponent_paddle_y, 194)

    def test_holds_at_center(self):
        """Ball level with the paddle center: no movement."""
        state = make_state(200, 200 + self.half)
        move_opponent(state, self.config)
        self.assertEqual(state.opponent_paddle_y, 200)

    def test_holds_within_dead_zone(self):
        """Ball within 20 units of the center: no movement."""
        for offset in [-10, 10, -20, 20]:
            state = make_state(200, 200 + self.half + offset)
            move_opponent(state, self.config)
            self.assertEqual(state.opponent_paddle_y, 200)

    def test_moves_just_outside_dead_zone(self):
        """Ball 21 units away triggers movement."""
        state = make_state(200, 200 + self.half + 21)
        move_opponent(state, self.config)
        self.assertEqual(state.opponent_paddle_y, 206)

    def test_clamped_at_top(self):
        """Paddle never goes above the surface."""
        state = make_state(-10, 0)
        move_opponent(state, self.config)
        self.assertEqual(state.opponent_paddle_y, 0)

    def test_clamped_at_bottom(self):
        """Paddle never goes below the surface."""
        height = self.config.surface_height
        state = make_state(height, height)
        move_opponent(state, self.config)
        self.assertEqual(state.opponent_paddle_y, height - self.config.paddle_height)

    def test_stops_at_bottom_edge(self):
        """A step that would overshoot the bottom is clamped."""
        state = make_state(398, 500)
        move_opponent(state, self.config)
        self.assertEqual(state.opponent_paddle_y, 400)

    def test_only_opponent_moves(self):
        """The player paddle and ball are untouched."""
        state = make_state(100, 400)
        move_opponent(state, self.config)
        self.assertEqual(state.player_paddle_y, 200)
        self.assertEqual(state.ball_position, (400, 400))


class TestTrackTarget(unittest.TestCase):
    """Test the shared tracking heuristic."""

    def test_deterministic(self):
        """Same input gives the same output every time."""
        config = Config()
        results = {track_target(120, 330, 6, config) for _ in range(10)}
        self.assertEqual(results, {126})

    def test_custom_step(self):
        """Step size is taken from the caller."""
        config = Config()
        self.assertEqual(track_target(100, 400, 2.5, config), 102.5)


if __name__ == "__main__":
    unittest.main()
