import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from flappy.config import GameConfig
from flappy.game import Game


@pytest.fixture(scope="session", autouse=True)
def pygame_headless():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def sounds():
    return []


@pytest.fixture
def game(sounds):
    return Game(GameConfig(), sound=sounds.append, rng=random.Random(1234))
