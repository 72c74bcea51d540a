import logging

import numpy as np
import pygame

logger = logging.getLogger(__name__)

# event name -> (frequency Hz, duration s, volume)
TONES = {
    "start": (880, 0.12, 0.25),
    "eat": (660, 0.10, 0.22),
    "pause": (440, 0.06, 0.15),
    "resume": (520, 0.06, 0.15),
    "die": (220, 0.28, 0.35),
}


def make_sine_sound(freq=440, duration=0.12, volume=0.2, sample_rate=44100):
    """Generate a pygame Sound with a sine wave tone."""
    t = np.linspace(0, duration, int(sample_rate * duration), False)
    wave = volume * np.sin(2 * np.pi * freq * t)
    # Quick attack and release so the tone doesn't click
    env = np.ones_like(wave)
    attack = int(0.01 * sample_rate)
    release = int(0.03 * sample_rate)
    env[:attack] = np.linspace(0, 1, attack)
    env[-release:] = np.linspace(1, 0, release)
    wave = (wave * env * (2**15 - 1)).astype(np.int16)
    stereo = np.column_stack([wave, wave])
    return pygame.sndarray.make_sound(stereo)


def load_sounds():
    """Build the effect sounds, or an empty dict if the mixer is unavailable."""
    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init(frequency=44100, channels=2)
        return {name: make_sine_sound(*tone) for name, tone in TONES.items()}
    except (pygame.error, ValueError) as exc:
        logger.warning("Sound disabled: %s", exc)
        return {}
