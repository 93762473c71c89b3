"""Sound hooks: any callable taking a label ("flap", "score", "gameOver")."""

import pygame

from .config import get_path
from .logger import get_logger

log = get_logger(__name__)

SOUND_FILES = {
    'flap': 'audio/sfx_wing.wav',
    'score': 'audio/sfx_point.wav',
    'gameOver': 'audio/sfx_die.wav',
}


def log_sound(label):
    log.debug("Playing sound: %s", label)


def load_sound(path):
    abs_path = get_path(path)
    try:
        return pygame.mixer.Sound(abs_path)
    except (pygame.error, FileNotFoundError):
        return None


class MixerSounds:
    """Plays the bundled effects through pygame.mixer, when it's available."""

    def __init__(self, files=None):
        self.sounds = {}
        if not pygame.mixer.get_init():
            log.info("Mixer unavailable, sounds are logged only")
            return
        for label, path in (files or SOUND_FILES).items():
            self.sounds[label] = load_sound(path)

    def __call__(self, label):
        log_sound(label)
        fx = self.sounds.get(label)
        if fx is not None:
            fx.play()
