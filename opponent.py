"""Scripted opponent paddle for Pong Arena."""

from config import Config
from state import SimulationState, clamp_paddle_y, paddle_center


def track_target(paddle_y: float, target_y: float, step: float, config: Config) -> float:
    """
    Move a paddle one step toward a target height.

    Strategy:
    - Paddle center more than the dead zone above the target: step down
    - Paddle center more than the dead zone below the target: step up
    - Otherwise hold still

    Args:
        paddle_y: Current paddle top offset
        target_y: Height the paddle center should follow
        step: Distance moved per call
        config: Game configuration

    Returns:
        New paddle top offset, clamped to the surface
    """
    center = paddle_center(paddle_y, config)
    dead_zone = config.opponent_dead_zone

    if center < target_y - dead_zone:
        paddle_y += step
    elif center > target_y + dead_zone:
        paddle_y -= step

    return clamp_paddle_y(paddle_y, config)


def move_opponent(state: SimulationState, config: Config) -> None:
    """Follow the ball with the opponent paddle. No prediction, no randomness."""
    state.opponent_paddle_y = track_target(
        state.opponent_paddle_y, state.ball_y, config.opponent_step, config
    )
