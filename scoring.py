"""Scoring and match lifecycle for Pong Arena."""

import random
from enum import Enum
from typing import List, Optional, Sequence

from config import Config
from events import BallServed, GameEvent, PointScored, Side
from state import SimulationState, serve_velocity


class GamePhase(Enum):
    """Lifecycle phase of a match."""

    PLAYING = "playing"  # Ball in play
    POINT_SCORED = "point_scored"  # A point ended this tick, ball re-served
    GAME_OVER = "game_over"  # A side reached the winning score


def reset_ball(state: SimulationState, config: Config, rng: random.Random) -> BallServed:
    """
    Put the ball back in the middle with a new serve velocity.

    Returns:
        BallServed describing the new ball
    """
    state.ball_x, state.ball_y = config.center
    state.ball_vx, state.ball_vy = serve_velocity(config, rng)
    return BallServed(state.ball_x, state.ball_y, state.ball_vx, state.ball_vy)


def full_reset(state: SimulationState, config: Config, rng: random.Random) -> BallServed:
    """Start a new match: zero both scores, clear game over, re-serve."""
    state.player_score = 0
    state.opponent_score = 0
    state.is_game_over = False
    return reset_ball(state, config, rng)


def _award_point(
    state: SimulationState, side: Side, config: Config, rng: random.Random
) -> List[GameEvent]:
    if side == Side.PLAYER:
        state.player_score += 1
        score = state.player_score
    else:
        state.opponent_score += 1
        score = state.opponent_score

    game_over = score >= config.winning_score
    events: List[GameEvent] = [
        PointScored(side, state.player_score, state.opponent_score, game_over)
    ]

    if game_over:
        state.is_game_over = True
    else:
        events.append(reset_ball(state, config, rng))

    return events


def check_scoring(
    state: SimulationState, config: Config, rng: random.Random
) -> List[GameEvent]:
    """
    Award points for a ball that left the surface on either side.

    The left exit is checked first, then the right exit. Both checks
    always run: with extreme positions both sides can score in the same
    tick.

    Args:
        state: Simulation state to mutate
        config: Game configuration
        rng: Random source for the re-serve

    Returns:
        PointScored events, each followed by a BallServed unless the
        point ended the match
    """
    events: List[GameEvent] = []
    radius = config.ball_radius

    # Ball past the player's side: opponent scores
    if state.ball_x - radius < 0:
        events.extend(_award_point(state, Side.OPPONENT, config, rng))

    # Ball past the opponent's side: player scores
    if state.ball_x + radius > config.surface_width:
        events.extend(_award_point(state, Side.PLAYER, config, rng))

    return events


def winner(state: SimulationState, config: Config) -> Optional[Side]:
    """Get the side that reached the winning score, None while playing."""
    if not state.is_game_over:
        return None
    if state.player_score >= config.winning_score:
        return Side.PLAYER
    return Side.OPPONENT


def phase_of(state: SimulationState, events: Sequence[GameEvent] = ()) -> GamePhase:
    """Work out the lifecycle phase from the state and this tick's events."""
    if state.is_game_over:
        return GamePhase.GAME_OVER
    if any(isinstance(e, PointScored) for e in events):
        return GamePhase.POINT_SCORED
    return GamePhase.PLAYING
