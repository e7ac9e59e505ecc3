"""Input handling for Pong Arena."""

from dataclasses import dataclass
from typing import Callable, Dict, Optional

try:
    import pygame

    PYGAME_AVAILABLE = True
except ImportError:
    PYGAME_AVAILABLE = False

from game import Game


@dataclass
class InputState:
    """Current state of input controls."""

    quit_requested: bool = False
    paused: bool = False
    pointer_y: Optional[float] = None  # Last pointer height seen
    clicks: int = 0


class InputHandler:
    """Translates pygame events into pointer, restart and quit input.

    Events are applied to the game between ticks, so they never race
    with a tick in progress.
    """

    def __init__(self, game: Game):
        if not PYGAME_AVAILABLE:
            raise ImportError("pygame required: pip install pygame")
        self.game = game
        self.state = InputState()
        self._key_bindings: Dict[int, Callable[[], None]] = self._setup_bindings()

    def _setup_bindings(self) -> Dict[int, Callable[[], None]]:
        """Configure key bindings."""
        return {
            pygame.K_ESCAPE: lambda: setattr(self.state, "quit_requested", True),
            pygame.K_SPACE: lambda: setattr(self.state, "paused", not self.state.paused),
            pygame.K_r: self._restart,
        }

    def _restart(self) -> None:
        self.state.clicks += 1
        self.game.click()

    def process_events(self) -> None:
        """Process all pending pygame events and apply them to the game."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.state.quit_requested = True
            elif event.type == pygame.MOUSEMOTION:
                self.state.pointer_y = event.pos[1]
                self.game.move_pointer(event.pos[1])
            elif event.type == pygame.MOUSEBUTTONDOWN:
                self._restart()
            elif event.type == pygame.KEYDOWN:
                if event.key in self._key_bindings:
                    self._key_bindings[event.key]()

    @property
    def running(self) -> bool:
        """True if game should continue running."""
        return not self.state.quit_requested
