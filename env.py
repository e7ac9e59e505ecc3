"""Gymnasium environment for Pong Arena."""

import random
from typing import Optional, Dict, Any
import numpy as np

try:
    from gymnasium import spaces
    GYM_AVAILABLE = True
except ImportError:
    GYM_AVAILABLE = False

from config import Config
from events import PointScored, Side
from game import Game
from state import clamp_paddle_y

# Discrete actions for the player paddle
STAY, UP, DOWN = 0, 1, 2
NUM_ACTIONS = 3


class PongEnv:
    """Gymnasium-compatible single-agent environment.

    The agent drives the player paddle; the scripted opponent plays the
    other side. Reward is +1 for every point won and -1 for every point
    lost. An episode is one match.
    """

    metadata = {"render_modes": ["human"]}

    def __init__(self, config: Optional[Config] = None, render_mode: Optional[str] = None,
                 max_steps: int = 10000):
        if not GYM_AVAILABLE:
            raise ImportError("gymnasium required: pip install gymnasium")

        self.config = config or Config()
        self.rng = random.Random()
        self.game = Game(self.config, rng=self.rng)
        self.render_mode = render_mode
        self.renderer = None
        self.max_steps = max_steps
        self.steps = 0

        self.observation_space = spaces.Box(-1.0, 1.0, (6,), np.float32)
        self.action_space = spaces.Discrete(NUM_ACTIONS)

    def _max_speed(self) -> float:
        return self.config.ball_speed * 4

    def _get_observation(self) -> np.ndarray:
        """Ball position, ball velocity and both paddles, scaled into [-1, 1]."""
        s, c = self.game.state, self.config
        ms = self._max_speed()
        obs = np.array([
            s.ball_x / c.surface_width,
            s.ball_y / c.surface_height,
            s.ball_vx / ms,
            s.ball_vy / ms,
            s.player_paddle_y / c.max_paddle_y,
            s.opponent_paddle_y / c.max_paddle_y,
        ], dtype=np.float32)
        return np.clip(np.nan_to_num(obs), -1.0, 1.0)

    def reset(self, seed: Optional[int] = None, options: Optional[Dict] = None):
        if seed is not None:
            self.rng.seed(seed)
        self.game = Game(self.config, rng=self.rng)
        self.steps = 0
        return self._get_observation(), {"scores": self.game.state.scores}

    def step(self, action: int):
        """Step environment. Returns (obs, reward, terminated, truncated, info)."""
        move = {STAY: 0.0, UP: -self.config.opponent_step, DOWN: self.config.opponent_step}[int(action)]
        state = self.game.state
        state.player_paddle_y = clamp_paddle_y(state.player_paddle_y + move, self.config)

        result = self.game.tick()
        self.steps += 1

        reward = 0.0
        for event in result.events:
            if isinstance(event, PointScored):
                reward += 1.0 if event.side == Side.PLAYER else -1.0

        terminated = result.game_over
        truncated = not terminated and self.steps >= self.max_steps
        info = {"events": result.events, "scores": state.scores, "phase": result.phase.value}
        return self._get_observation(), reward, terminated, truncated, info

    def render(self) -> None:
        """Draw the current frame in a pygame window (render_mode "human" only)."""
        if self.render_mode != "human":
            return
        if self.renderer is None:
            try:
                import pygame  # noqa: F401
            except ImportError:
                raise ImportError(
                    "pygame is required for visual rendering mode. "
                    "Install with: pip install pygame"
                )
            from renderer import Renderer
            self.renderer = Renderer(self.config)
        self.renderer.render(self.game.state, self.game.particles)
        self.renderer.handle_events()
        self.renderer.tick()

    def close(self) -> None:
        if self.renderer:
            self.renderer.close()
            self.renderer = None
