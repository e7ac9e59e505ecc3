"""Ball movement and collision resolution for Pong Arena."""

from typing import List, Optional

from config import Config
from events import GameEvent, PaddleHit, Side, WallBounce
from state import SimulationState, paddle_center


def advance_ball(state: SimulationState) -> None:
    """Move the ball by its velocity."""
    state.ball_x += state.ball_vx
    state.ball_y += state.ball_vy


def resolve_wall_collisions(state: SimulationState, config: Config) -> List[WallBounce]:
    """
    Bounce the ball off the top and bottom of the surface.

    A bounce only happens when the ball has penetrated the wall; a ball
    resting exactly tangent to a wall is left alone. On a bounce the
    ball is put back at the tangent position and its vertical speed
    is negated.

    Args:
        state: Simulation state to mutate
        config: Game configuration

    Returns:
        One WallBounce per wall that was hit (normally zero or one)
    """
    bounces = []
    radius = config.ball_radius

    if state.ball_y - radius < 0:
        state.ball_y = radius
        state.ball_vy = -state.ball_vy
        bounces.append(WallBounce("top", state.ball_x, state.ball_y))

    if state.ball_y + radius > config.surface_height:
        state.ball_y = config.surface_height - radius
        state.ball_vy = -state.ball_vy
        bounces.append(WallBounce("bottom", state.ball_x, state.ball_y))

    return bounces


def hit_deflection(ball_y: float, paddle_y: float, config: Config) -> float:
    """
    Extra vertical speed given to the ball by a paddle hit.

    The hit offset from the paddle center is normalized to -1..1
    (top edge to bottom edge) and scaled by the deflection gain.
    """
    half_height = config.paddle_height / 2
    offset = (ball_y - paddle_center(paddle_y, config)) / half_height
    return offset * config.deflection_gain


def resolve_paddle_collision(
    state: SimulationState, config: Config, side: Side
) -> Optional[PaddleHit]:
    """
    Return the ball off one paddle.

    The ball hits when its leading edge is past the paddle's facing edge
    and its center lies strictly between the paddle's top and bottom.
    A center exactly level with either end of the paddle is a miss.

    Args:
        state: Simulation state to mutate
        config: Game configuration
        side: Which paddle to test

    Returns:
        PaddleHit at the clamped contact point, or None on a miss
    """
    radius = config.ball_radius

    if side == Side.PLAYER:
        paddle_y = state.player_paddle_y
        facing_edge = config.player_paddle_x + config.paddle_width
        crossed = state.ball_x - radius < facing_edge
        tangent_x = facing_edge + radius
    else:
        paddle_y = state.opponent_paddle_y
        facing_edge = config.opponent_paddle_x
        crossed = state.ball_x + radius > facing_edge
        tangent_x = facing_edge - radius

    if not crossed:
        return None
    if not paddle_y < state.ball_y < paddle_y + config.paddle_height:
        return None

    state.ball_x = tangent_x
    state.ball_vx = -state.ball_vx
    state.ball_vy += hit_deflection(state.ball_y, paddle_y, config)

    return PaddleHit(side, state.ball_x, state.ball_y)


def step_physics(state: SimulationState, config: Config) -> List[GameEvent]:
    """
    Advance the ball one tick and resolve every collision.

    Order is fixed: walls, player paddle, opponent paddle. Each check
    runs even if an earlier one fired.

    Returns:
        Events produced this tick, in resolution order
    """
    advance_ball(state)

    events: List[GameEvent] = []
    events.extend(resolve_wall_collisions(state, config))

    for side in (Side.PLAYER, Side.OPPONENT):
        hit = resolve_paddle_collision(state, config, side)
        if hit is not None:
            events.append(hit)

    return events
