"""Frame orchestration for Pong Arena."""

import random
from dataclasses import dataclass, field as dataclass_field
from typing import Any, List, Optional

from config import Config
from debug import DebugLogger, EventType, StateValidator
from effects import EffectsManager
from events import BallServed, GameEvent, PaddleHit, Side, SoundCue, WallBounce
from opponent import move_opponent
from particle import Color, Particle
from physics import step_physics
from scheduler import Scheduler
from scoring import GamePhase, check_scoring, full_reset, phase_of
from scoring import winner as match_winner
from state import SimulationState, clamp_paddle_y, create_initial_state


@dataclass
class TickResult:
    """Result of a single tick."""

    events: List[GameEvent] = dataclass_field(default_factory=list)
    game_over: bool = False
    phase: GamePhase = GamePhase.PLAYING


class Game:
    """
    Main game class that ties the simulation together once per tick.

    Handles:
    - Running physics, the opponent and scoring while the match is live
    - Turning core events into sounds, particle bursts and shakes
    - Rendering every tick, including after the match is over
    - Pointer and restart input between ticks

    Renderer and sound are optional collaborators. Any exception they
    raise is recorded on the logger and never stops the tick.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        renderer: Optional[Any] = None,
        sound: Optional[Any] = None,
        scheduler: Optional[Scheduler] = None,
        rng: Optional[random.Random] = None,
        logger: Optional[DebugLogger] = None,
    ):
        self.config = config or Config()
        self.renderer = renderer
        self.sound = sound
        self.scheduler = scheduler
        self.rng = rng or random.Random()
        self.logger = logger or DebugLogger(enabled=False)
        self.validator = StateValidator(self.logger, self.config)

        self.state: SimulationState = create_initial_state(self.config, self.rng)
        self.effects = EffectsManager(self.config, self.rng)
        self.total_ticks = 0
        self.last_phase = GamePhase.PLAYING

    def tick(self) -> TickResult:
        """
        Run one frame.

        Updates the simulation unless the match is over, always renders,
        then asks the scheduler for the next frame.

        Returns:
            TickResult with the events produced this tick
        """
        events: List[GameEvent] = []
        if not self.state.is_game_over:
            events = self.update()

        self.render()

        self.total_ticks += 1
        self.logger.next_frame()
        self.last_phase = phase_of(self.state, events)

        if self.scheduler is not None:
            self.scheduler.schedule(self.tick)

        return TickResult(
            events=events,
            game_over=self.state.is_game_over,
            phase=self.last_phase,
        )

    def update(self) -> List[GameEvent]:
        """
        Advance the simulation by one step: physics, opponent, scoring.

        Returns:
            Events produced by this step
        """
        events = step_physics(self.state, self.config)
        move_opponent(self.state, self.config)
        events.extend(check_scoring(self.state, self.config, self.rng))

        for event in events:
            self._dispatch(event)

        if self.logger.enabled:
            self.validator.validate(self.state)

        return events

    def render(self) -> None:
        """Maintain effects for this frame and hand everything to the renderer."""
        offset = self.effects.shake_offset()
        self.effects.update_particles()

        if self.renderer is None:
            return
        try:
            self.renderer.render(self.state, self.effects.particles, offset)
        except Exception as e:
            self._collaborator_failed("renderer", e)

    def _dispatch(self, event: GameEvent) -> None:
        self.logger.log_game_event(event)

        if isinstance(event, WallBounce):
            self._play(SoundCue.WALL)
        elif isinstance(event, PaddleHit):
            self._play(SoundCue.HIT)
            self.effects.spawn_burst(event.x, event.y, self.side_color(event.side))
        elif isinstance(event, BallServed):
            self._play(SoundCue.SCORE)
            self.effects.trigger_shake(
                self.config.shake_duration, self.config.shake_intensity
            )

    def _play(self, cue: SoundCue) -> None:
        if self.sound is None:
            return
        try:
            self.sound.play(cue)
        except Exception as e:
            self._collaborator_failed("sound", e)

    def _collaborator_failed(self, name: str, error: Exception) -> None:
        self.logger.log(
            EventType.COLLABORATOR_ERROR,
            {"collaborator": name, "error": repr(error)},
            f"{name} failed: {error}",
        )

    def side_color(self, side: Side) -> Color:
        """Get the color used for a side's paddle and particles."""
        if side == Side.PLAYER:
            return self.config.player_color
        return self.config.opponent_color

    def move_pointer(self, pointer_y: float) -> None:
        """Center the player's paddle on the pointer, kept on the surface."""
        target = pointer_y - self.config.paddle_height / 2
        self.state.player_paddle_y = clamp_paddle_y(target, self.config)

    def click(self) -> bool:
        """
        Handle the restart trigger.

        Returns:
            True if a new match was started
        """
        if not self.state.is_game_over:
            return False
        self.restart()
        return True

    def restart(self) -> None:
        """Start a new match: scores to zero, game over cleared, ball re-served."""
        served = full_reset(self.state, self.config, self.rng)
        self.effects.clear()
        self.logger.log(EventType.GAME_RESET, {}, "New match")
        self._dispatch(served)
        self.last_phase = GamePhase.PLAYING

    @property
    def particles(self) -> List[Particle]:
        return self.effects.particles

    @property
    def phase(self) -> GamePhase:
        """Lifecycle phase as of the last tick."""
        if self.state.is_game_over:
            return GamePhase.GAME_OVER
        return self.last_phase

    @property
    def is_game_over(self) -> bool:
        """Check if the match is over."""
        return self.state.is_game_over

    @property
    def winner(self) -> Optional[Side]:
        """Get the winning side if the match is over, None otherwise."""
        return match_winner(self.state, self.config)
