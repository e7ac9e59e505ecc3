"""Configuration for Pong Arena."""

from dataclasses import dataclass, asdict
from typing import Dict, Any, Tuple


@dataclass
class Config:
    """Configuration parameters for the pong simulation."""

    # Drawing surface
    surface_width: int = 800
    surface_height: int = 500

    # Paddles
    paddle_width: int = 15
    paddle_height: int = 100
    paddle_margin: int = 20  # Gap between a paddle and its side of the surface

    # Ball
    ball_radius: int = 12
    ball_speed: float = 5.0  # Base horizontal serve speed
    serve_vy_range: float = 2.0  # Serve vertical speed in [-range, range]
    deflection_gain: float = 3.0

    # Match rules
    winning_score: int = 5

    # Opponent heuristic
    opponent_step: float = 6.0
    opponent_dead_zone: float = 20.0

    # Particles
    particle_burst_size: int = 15
    particle_decay: float = 0.05
    particle_min_size: float = 2.0
    particle_size_range: float = 4.0
    particle_speed_range: float = 2.0

    # Screen shake
    shake_duration: int = 20
    shake_intensity: float = 10.0
    initial_shake_intensity: float = 5.0

    # Side colors (paddles and hit particles)
    player_color: Tuple[int, int, int] = (0, 255, 0)
    opponent_color: Tuple[int, int, int] = (255, 0, 0)

    # Display settings
    fps: int = 60

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create config from dictionary."""
        return cls(**{k: v for k, v in data.items() if hasattr(cls, k)})

    @property
    def player_paddle_x(self) -> float:
        """Left edge of the player's paddle."""
        return self.paddle_margin

    @property
    def opponent_paddle_x(self) -> float:
        """Left edge of the opponent's paddle."""
        return self.surface_width - self.paddle_width - self.paddle_margin

    @property
    def max_paddle_y(self) -> float:
        """Largest paddle top offset that keeps the paddle on the surface."""
        return self.surface_height - self.paddle_height

    @property
    def center(self) -> Tuple[float, float]:
        """Get the center of the drawing surface."""
        return (self.surface_width / 2, self.surface_height / 2)


# Default configuration instance
DEFAULT_CONFIG = Config()
