"""Pygame renderer for Pong Arena."""

from typing import Optional, Sequence, Tuple
import math

try:
    import pygame
    PYGAME_AVAILABLE = True
except ImportError:
    PYGAME_AVAILABLE = False

from config import Config
from particle import Particle
from state import SimulationState

# Colors
WHITE, BLACK = (255, 255, 255), (0, 0, 0)
BACKGROUND, DIVIDER = (17, 17, 17), (85, 85, 85)

TRAIL_ALPHA = int(255 * 0.3)  # Background repaint opacity, leaves motion trails
OVERLAY_ALPHA = int(255 * 0.7)
DASH_LENGTH = 10


def game_over_message(state: SimulationState, config: Config) -> str:
    """Headline shown on the game-over overlay."""
    return "You Win!" if state.player_score >= config.winning_score else "Game Over"


def _finite(value: float) -> float:
    return 0.0 if (math.isnan(value) or math.isinf(value)) else value


class Renderer:
    """
    Draws the simulation state onto a pygame window.

    Everything except the game-over overlay is drawn onto an off-screen
    canvas which is then blitted at the shake offset, so a shake moves
    the whole playfield like a camera.
    """

    def __init__(self, config: Optional[Config] = None):
        if not PYGAME_AVAILABLE:
            raise ImportError("pygame required: pip install pygame")

        self.config = config or Config()
        self.width = self.config.surface_width
        self.height = self.config.surface_height

        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("Pong Arena")
        self.clock = pygame.time.Clock()
        self.score_font = pygame.font.Font(None, 36)
        self.title_font = pygame.font.Font(None, 60)
        self.prompt_font = pygame.font.Font(None, 24)

        self.canvas = pygame.Surface((self.width, self.height))
        self.canvas.fill(BACKGROUND)
        self.trail = pygame.Surface((self.width, self.height))
        self.trail.fill(BACKGROUND)
        self.trail.set_alpha(TRAIL_ALPHA)
        self.overlay = pygame.Surface((self.width, self.height))
        self.overlay.fill(BLACK)
        self.overlay.set_alpha(OVERLAY_ALPHA)
        self._initialized = True

    def _to_screen(self, x: float, y: float) -> Tuple[int, int]:
        return (int(_finite(x)), int(_finite(y)))

    def _draw_background(self) -> None:
        self.canvas.blit(self.trail, (0, 0))

    def _draw_divider(self) -> None:
        center_x = self.width // 2
        for y in range(0, self.height, DASH_LENGTH * 2):
            end_y = min(y + DASH_LENGTH, self.height)
            pygame.draw.line(self.canvas, DIVIDER, (center_x, y), (center_x, end_y), 1)

    def _draw_paddles(self, state: SimulationState) -> None:
        for x, y, color in [
            (self.config.player_paddle_x, state.player_paddle_y, self.config.player_color),
            (self.config.opponent_paddle_x, state.opponent_paddle_y, self.config.opponent_color),
        ]:
            rect = pygame.Rect(*self._to_screen(x, y), self.config.paddle_width, self.config.paddle_height)
            pygame.draw.rect(self.canvas, color, rect)

    def _draw_ball(self, state: SimulationState) -> None:
        pos = self._to_screen(state.ball_x, state.ball_y)
        pygame.draw.circle(self.canvas, WHITE, pos, self.config.ball_radius)

    def _draw_scores(self, state: SimulationState) -> None:
        center_x = self.width // 2
        for score, left in [(state.player_score, center_x - 50), (state.opponent_score, center_x + 20)]:
            text = self.score_font.render(str(score), True, WHITE)
            self.canvas.blit(text, text.get_rect(bottomleft=(left, 50)))

    def _draw_particles(self, particles: Sequence[Particle]) -> None:
        for particle in particles:
            alpha = max(0, min(255, int(255 * particle.life)))
            radius = max(1, int(round(particle.size)))
            sprite = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
            pygame.draw.circle(sprite, (*particle.color, alpha), (radius, radius), radius)
            x, y = self._to_screen(particle.x, particle.y)
            self.canvas.blit(sprite, (x - radius, y - radius))

    def _draw_game_over(self, state: SimulationState) -> None:
        self.screen.blit(self.overlay, (0, 0))
        center = (self.width // 2, self.height // 2)

        title = self.title_font.render(game_over_message(state, self.config), True, WHITE)
        self.screen.blit(title, title.get_rect(center=(center[0], center[1] - 40)))

        prompt = self.prompt_font.render("Click to Restart", True, WHITE)
        self.screen.blit(prompt, prompt.get_rect(center=(center[0], center[1] + 20)))

    def render(
        self,
        state: SimulationState,
        particles: Sequence[Particle] = (),
        offset: Tuple[float, float] = (0.0, 0.0),
    ) -> None:
        self._draw_background()
        self._draw_divider()
        self._draw_paddles(state)
        self._draw_ball(state)
        self._draw_scores(state)
        self._draw_particles(particles)

        self.screen.fill(BACKGROUND)
        self.screen.blit(self.canvas, self._to_screen(*offset))

        if state.is_game_over:
            self._draw_game_over(state)
        pygame.display.flip()

    def handle_events(self) -> bool:
        """Drain the window's event queue. Returns False once closing was requested."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT or (event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE):
                return False
        return True

    def tick(self, fps: Optional[int] = None) -> None:
        self.clock.tick(self.config.fps if fps is None else fps)

    def close(self) -> None:
        pygame.quit()
        self._initialized = False
