"""Event values emitted by the simulation core."""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Side(Enum):
    """Which paddle an event belongs to."""

    PLAYER = "player"  # Left paddle, pointer controlled
    OPPONENT = "opponent"  # Right paddle, scripted


class SoundCue(Enum):
    """Named sound cues played by the sound collaborator."""

    WALL = "wall"
    HIT = "hit"
    SCORE = "score"


@dataclass(frozen=True)
class WallBounce:
    """Ball bounced off the top or bottom of the surface."""

    wall: str  # 'top' or 'bottom'
    x: float
    y: float


@dataclass(frozen=True)
class PaddleHit:
    """Ball was returned by a paddle. x, y is the clamped contact point."""

    side: Side
    x: float
    y: float


@dataclass(frozen=True)
class PointScored:
    """A side won a point."""

    side: Side
    player_score: int
    opponent_score: int
    game_over: bool


@dataclass(frozen=True)
class BallServed:
    """Ball was put back in the middle with a fresh velocity."""

    x: float
    y: float
    vx: float
    vy: float


GameEvent = Union[WallBounce, PaddleHit, PointScored, BallServed]
