import random

from .config import GameConfig
from .entities import flap_burst
from .logger import get_logger
from .simulation import step
from .sound import log_sound
from .state import GameState, World
from .storage import load_best_score, save_best_score

log = get_logger(__name__)


class Game:
    """Owns the world and drives the start/playing/game-over state machine."""

    def __init__(self, config=None, store=None, sound=log_sound, rng=None):
        self.world = World(config or GameConfig())
        self.store = store
        self.sound = sound
        self.rng = rng or random.Random()
        self.world.best_score = load_best_score(store)

    @property
    def state(self):
        return self.world.state

    def primary_input(self):
        """Space, click or tap."""
        if self.world.state is GameState.START:
            self.start()
        elif self.world.state is GameState.PLAYING:
            self.flap()

    def start(self):
        self.world.reset_run()
        self.world.state = GameState.PLAYING
        log.info("Run started")

    def flap(self):
        world = self.world
        world.bird.velocity = world.config.flap_strength
        world.particles.extend(flap_burst(world.bird, self.rng,
                                          world.config.flap_particles,
                                          world.config.particle_life))
        self.sound('flap')

    def game_over(self):
        world = self.world
        if world.state is not GameState.PLAYING:
            return
        world.state = GameState.GAME_OVER
        if world.score > world.best_score:
            world.best_score = world.score
            save_best_score(self.store, world.best_score)
            log.info("New best score: %d", world.best_score)
        log.info("Game over with score %d", world.score)
        self.sound('gameOver')

    def restart(self):
        """Back to the start prompt. Entities reset on the next start()."""
        if self.world.state is GameState.GAME_OVER:
            self.world.state = GameState.START

    def resize(self, width, height):
        config = self.world.config
        config.apply_viewport(width, height)
        self.world.bird.recenter(config)
        log.debug("Viewport %dx%d, canvas %dx%d", width, height,
                  config.canvas_width, config.canvas_height)

    def tick(self):
        outcome = step(self.world, self.rng)
        for _ in range(outcome.scored):
            self.sound('score')
        if outcome.crashed:
            self.game_over()
        return outcome
