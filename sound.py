"""Sound cues for Pong Arena, synthesized as short tones."""

from typing import Dict, Optional

import numpy as np

try:
    import pygame
    PYGAME_AVAILABLE = True
except ImportError:
    PYGAME_AVAILABLE = False

from events import SoundCue

SAMPLE_RATE = 22050

# Cue: (frequency in Hz, duration in seconds)
TONES = {
    SoundCue.WALL: (300.0, 0.05),
    SoundCue.HIT: (400.0, 0.05),
    SoundCue.SCORE: (200.0, 0.3),
}


def make_tone(frequency: float, duration: float, sample_rate: int = SAMPLE_RATE,
              channels: int = 2, volume: float = 0.5) -> np.ndarray:
    """
    Build a sine tone as 16-bit samples.

    Args:
        frequency: Tone frequency in Hz
        duration: Length in seconds
        sample_rate: Samples per second
        channels: Number of interleaved channels (1 returns a flat array)
        volume: Peak amplitude as a fraction of full scale

    Returns:
        int16 array shaped (n_samples,) for mono or (n_samples, channels)
    """
    n_samples = int(round(duration * sample_rate))
    t = np.arange(n_samples) / sample_rate
    max_sample = 2 ** 15 - 1
    wave = (np.sin(2 * np.pi * frequency * t) * max_sample * volume).astype(np.int16)
    if channels == 1:
        return wave
    return np.ascontiguousarray(np.repeat(wave[:, np.newaxis], channels, axis=1))


class SoundBoard:
    """
    Plays named cues through pygame's mixer.

    Each play restarts its cue from the beginning; nothing is queued.
    If the mixer cannot be opened (no audio device) the board stays
    silent instead of failing.
    """

    def __init__(self, sample_rate: int = SAMPLE_RATE):
        if not PYGAME_AVAILABLE:
            raise ImportError("pygame required: pip install pygame")

        self.sample_rate = sample_rate
        self.sounds: Dict[SoundCue, "pygame.mixer.Sound"] = {}
        self.enabled = False

        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=sample_rate, size=-16, channels=2, buffer=512)
        except pygame.error as e:
            print(f"Warning: audio unavailable ({e}). Sound disabled.")
            return

        frequency, _size, channels = pygame.mixer.get_init()
        for cue, (tone_hz, duration) in TONES.items():
            samples = make_tone(tone_hz, duration, sample_rate=frequency, channels=channels)
            self.sounds[cue] = pygame.sndarray.make_sound(samples)
        self.enabled = True

    def play(self, cue: SoundCue) -> None:
        """Play a cue from the start, cutting off any earlier play of it."""
        sound: Optional["pygame.mixer.Sound"] = self.sounds.get(cue)
        if sound is None:
            return
        sound.stop()
        sound.play()

    def close(self) -> None:
        if self.enabled:
            pygame.mixer.quit()
            self.enabled = False
