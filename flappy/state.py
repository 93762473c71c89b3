from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .config import GameConfig
from .entities import Bird, Particle, Pipe


class GameState(Enum):
    START = 'start'
    PLAYING = 'playing'
    GAME_OVER = 'gameOver'


@dataclass
class World:
    """Everything the simulation step mutates and the renderer reads."""
    config: GameConfig = field(default_factory=GameConfig)
    bird: Bird = None
    pipes: List[Pipe] = field(default_factory=list)
    particles: List[Particle] = field(default_factory=list)
    state: GameState = GameState.START
    score: int = 0
    best_score: int = 0
    frame: int = 0

    def __post_init__(self):
        if self.bird is None:
            self.bird = Bird.for_config(self.config)

    def reset_run(self):
        self.score = 0
        # Negative frame count is the grace period before the first pipe
        self.frame = -self.config.grace_frames
        self.pipes = []
        self.particles = []
        self.bird.recenter(self.config)


@dataclass(frozen=True)
class Overlays:
    start: bool
    score: bool
    game_over: bool
    mobile_controls: bool


def overlays_for(world):
    """Which overlay regions are visible for the current state."""
    return Overlays(
        start=world.state is GameState.START,
        score=world.state is GameState.PLAYING,
        game_over=world.state is GameState.GAME_OVER,
        mobile_controls=world.config.narrow,
    )
