"""
Pong Arena

A real-time two-paddle ball game against a scripted opponent.
The simulation core is deterministic per tick and free of I/O;
rendering, sound and input are pluggable collaborators.
"""

from config import DEFAULT_CONFIG, Config
from effects import EffectsManager
from events import BallServed, PaddleHit, PointScored, Side, SoundCue, WallBounce
from game import Game, TickResult
from particle import Particle, advance, create_particle, is_expired
from scheduler import FrameScheduler, Scheduler
from scoring import GamePhase
from state import SimulationState, create_initial_state

__version__ = "0.1.0"

__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "EffectsManager",
    "Particle",
    "create_particle",
    "advance",
    "is_expired",
    "Side",
    "SoundCue",
    "WallBounce",
    "PaddleHit",
    "PointScored",
    "BallServed",
    "SimulationState",
    "create_initial_state",
    "GamePhase",
    "Game",
    "TickResult",
    "Scheduler",
    "FrameScheduler",
]
