"""Simulation state for Pong Arena."""

import random
from dataclasses import dataclass
from typing import Optional, Tuple

from config import Config


@dataclass
class SimulationState:
    """
    The authoritative mutable game state.

    Paddle y values are top-left offsets and always stay within
    [0, surface_height - paddle_height]. The ball is tracked by its
    center and is only clamped when a collision is resolved.
    """

    player_paddle_y: float
    opponent_paddle_y: float
    ball_x: float
    ball_y: float
    ball_vx: float = 0.0
    ball_vy: float = 0.0
    player_score: int = 0
    opponent_score: int = 0
    is_game_over: bool = False

    @property
    def ball_position(self) -> Tuple[float, float]:
        """Get ball position as tuple."""
        return (self.ball_x, self.ball_y)

    @property
    def ball_velocity(self) -> Tuple[float, float]:
        """Get ball velocity as tuple."""
        return (self.ball_vx, self.ball_vy)

    @property
    def scores(self) -> Tuple[int, int]:
        """Get (player_score, opponent_score)."""
        return (self.player_score, self.opponent_score)


def clamp_paddle_y(y: float, config: Config) -> float:
    """Clamp a paddle top offset so the paddle stays on the surface."""
    return max(0, min(config.max_paddle_y, y))


def paddle_center(paddle_y: float, config: Config) -> float:
    return paddle_y + config.paddle_height / 2


def serve_velocity(config: Config, rng: random.Random) -> Tuple[float, float]:
    """
    Pick a serve velocity.

    Horizontal speed is the base speed toward a random side, vertical
    speed is uniform within the configured serve range.
    """
    vx = config.ball_speed * (1 if rng.random() >= 0.5 else -1)
    vy = rng.uniform(-config.serve_vy_range, config.serve_vy_range)
    return (vx, vy)


def create_initial_state(
    config: Config, rng: Optional[random.Random] = None
) -> SimulationState:
    """
    Create a fresh state with both paddles and the ball centered.

    Args:
        config: Game configuration
        rng: Random source for the serve velocity

    Returns:
        SimulationState ready for the first tick
    """
    rng = rng or random.Random()
    center_x, center_y = config.center
    paddle_y = center_y - config.paddle_height / 2
    vx, vy = serve_velocity(config, rng)
    return SimulationState(
        player_paddle_y=paddle_y,
        opponent_paddle_y=paddle_y,
        ball_x=center_x,
        ball_y=center_y,
        ball_vx=vx,
        ball_vy=vy,
    )
