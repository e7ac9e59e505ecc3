"""
Debug logging system for Pong Arena.

Records game events and invariant violations frame by frame so a
session can be inspected after the fact or printed as it happens.
"""

import json
from dataclasses import dataclass
from typing import List, Dict, Any
from enum import Enum

from config import Config
from events import BallServed, GameEvent, PaddleHit, PointScored, WallBounce
from state import SimulationState


class EventType(Enum):
    """Types of debug events."""

    # Ball events
    WALL_BOUNCE = "wall_bounce"
    PADDLE_HIT = "paddle_hit"
    BALL_SERVED = "ball_served"

    # Match events
    POINT_SCORED = "point_scored"
    GAME_OVER = "game_over"
    GAME_RESET = "game_reset"

    # Collaborators (renderer, sound)
    COLLABORATOR_ERROR = "collaborator_error"

    # Validation events
    VALIDATION_ERROR = "validation_error"


@dataclass
class DebugEvent:
    """A single debug event."""

    frame: int
    event_type: EventType
    data: Dict[str, Any]
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "frame": self.frame,
            "type": self.event_type.value,
            "data": self.data,
            "message": self.message,
        }


class DebugLogger:
    """
    Logger for tracking game events.

    Use this to:
    - Follow bounces, hits and points as they happen
    - See collaborator failures that were swallowed mid-tick
    - Catch state invariants being broken
    """

    def __init__(self, enabled: bool = True, max_events: int = 10000):
        self.enabled = enabled
        self.max_events = max_events
        self.events: List[DebugEvent] = []
        self.frame = 0
        self.print_live = False  # Print events as they happen

    def log(self, event_type: EventType, data: Dict[str, Any], message: str = ""):
        """Log a debug event."""
        if not self.enabled:
            return

        event = DebugEvent(
            frame=self.frame,
            event_type=event_type,
            data=data,
            message=message,
        )
        self.events.append(event)

        if self.print_live:
            self._print_event(event)

        # Limit stored events
        if len(self.events) > self.max_events:
            self.events = self.events[-self.max_events:]

    def log_game_event(self, event: GameEvent):
        """Log an event emitted by the simulation core."""
        if isinstance(event, WallBounce):
            self.log(
                EventType.WALL_BOUNCE,
                {"wall": event.wall, "x": event.x, "y": event.y},
                f"Ball bounced off {event.wall} wall",
            )
        elif isinstance(event, PaddleHit):
            self.log(
                EventType.PADDLE_HIT,
                {"side": event.side.value, "x": event.x, "y": event.y},
                f"{event.side.value} paddle hit at ({event.x:.1f}, {event.y:.1f})",
            )
        elif isinstance(event, PointScored):
            self.log(
                EventType.POINT_SCORED,
                {
                    "side": event.side.value,
                    "player_score": event.player_score,
                    "opponent_score": event.opponent_score,
                },
                f"Point to {event.side.value} "
                f"({event.player_score}-{event.opponent_score})",
            )
            if event.game_over:
                self.log(
                    EventType.GAME_OVER,
                    {"winner": event.side.value},
                    f"Match won by {event.side.value}",
                )
        elif isinstance(event, BallServed):
            self.log(
                EventType.BALL_SERVED,
                {"vx": event.vx, "vy": event.vy},
                f"Serve with velocity ({event.vx:.1f}, {event.vy:.2f})",
            )

    def _print_event(self, event: DebugEvent):
        """Print an event to console."""
        print(f"[{event.frame:05d}] {event.event_type.value}: {event.message}")
        if event.data:
            for key, value in event.data.items():
                print(f"        {key}: {value}")

    def next_frame(self):
        """Advance to next frame."""
        self.frame += 1

    def get_events_by_type(self, event_type: EventType) -> List[DebugEvent]:
        """Get all events of a specific type."""
        return [e for e in self.events if e.event_type == event_type]

    def get_last_n_events(self, n: int) -> List[DebugEvent]:
        """Get the last n events."""
        return self.events[-n:]

    def print_summary(self):
        """Print a summary of logged events."""
        print("\n" + "=" * 60)
        print("DEBUG LOG SUMMARY")
        print("=" * 60)
        print(f"Total frames: {self.frame}")
        print(f"Total events: {len(self.events)}")

        # Count by type
        counts: Dict[str, int] = {}
        for event in self.events:
            type_name = event.event_type.value
            counts[type_name] = counts.get(type_name, 0) + 1

        print("\nEvents by type:")
        for type_name, count in sorted(counts.items()):
            print(f"  {type_name}: {count}")

        for event_type, label in [
            (EventType.VALIDATION_ERROR, "VALIDATION ERRORS"),
            (EventType.COLLABORATOR_ERROR, "COLLABORATOR ERRORS"),
        ]:
            problems = self.get_events_by_type(event_type)
            if problems:
                print(f"\n⚠ {label}: {len(problems)}")
                for event in problems[:5]:  # Show first 5
                    print(f"  Frame {event.frame}: {event.message}")
                if len(problems) > 5:
                    print(f"  ... and {len(problems) - 5} more")

        last = self.get_last_n_events(5)
        if last:
            print("\nLast events:")
            for event in last:
                print(f"  Frame {event.frame}: {event.message}")

        print("=" * 60)

    def export_json(self, filepath: str):
        """Export all events to JSON file."""
        data = {
            "total_frames": self.frame,
            "events": [e.to_dict() for e in self.events],
        }
        with open(filepath, "w") as f:
            json.dump(data, f, indent=2)
        print(f"Exported {len(self.events)} events to {filepath}")


class StateValidator:
    """
    Validates simulation state to catch bugs early.

    Checks for:
    - Paddles leaving the surface
    - Negative scores
    """

    def __init__(self, logger: DebugLogger, config: Config):
        self.logger = logger
        self.config = config

    def validate_paddles(self, state: SimulationState) -> bool:
        """Check both paddles are within the surface."""
        is_valid = True
        for name, y in [
            ("player", state.player_paddle_y),
            ("opponent", state.opponent_paddle_y),
        ]:
            if not 0 <= y <= self.config.max_paddle_y:
                self.logger.log(
                    EventType.VALIDATION_ERROR,
                    {"paddle": name, "y": y, "max_y": self.config.max_paddle_y},
                    f"{name} paddle out of bounds: {y}",
                )
                is_valid = False
        return is_valid

    def validate_scores(self, state: SimulationState) -> bool:
        """Check scores never go negative."""
        if state.player_score < 0 or state.opponent_score < 0:
            self.logger.log(
                EventType.VALIDATION_ERROR,
                {"player_score": state.player_score, "opponent_score": state.opponent_score},
                "Negative score",
            )
            return False
        return True

    def validate(self, state: SimulationState) -> bool:
        """Run every check. Returns True when the state is valid."""
        paddles_ok = self.validate_paddles(state)
        scores_ok = self.validate_scores(state)
        return paddles_ok and scores_ok
