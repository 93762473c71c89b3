import argparse
import random

import pygame
from pygame.locals import VIDEORESIZE

from .config import BLACK, DEFAULT_WINDOW, FPS, IS_ANDROID
from .controls import is_primary_input, is_quit, pointer_position
from .game import Game
from .hud import Hud
from .logger import get_logger, setup_logging
from .render import render
from .sound import MixerSounds, log_sound
from .storage import ScoreStore, reset_best_score

log = get_logger(__name__)


def letterbox(canvas_size, window_size):
    """Scale ratio and offset that fit the canvas inside the window."""
    cw, ch = canvas_size
    ww, wh = window_size
    ratio = min(ww / cw, wh / ch)
    offset = ((ww - cw * ratio) // 2, (wh - ch * ratio) // 2)
    return ratio, offset


def to_canvas(pos, canvas_size, window_size):
    """Converts real screen mouse/touch position to canvas coordinates."""
    if pos is None:
        return None
    ratio, (ox, oy) = letterbox(canvas_size, window_size)
    return (pos[0] - ox) / ratio, (pos[1] - oy) / ratio


class FlappyApp:
    def __init__(self, game, window_size=DEFAULT_WINDOW, fullscreen=False):
        self.game = game
        if fullscreen:
            self.screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.screen = pygame.display.set_mode(window_size, pygame.RESIZABLE)
        pygame.display.set_caption("Flappy Bird")
        self.clock = pygame.time.Clock()
        self.hud = Hud()
        self.game.resize(*self.screen.get_size())
        self.render_surface = pygame.Surface(game.world.config.canvas_size)

    def handle_resize(self, size):
        self.game.resize(*size)
        config = self.game.world.config
        if self.render_surface.get_size() != config.canvas_size:
            self.render_surface = pygame.Surface(config.canvas_size)

    def run(self):
        run = True
        pointer = None
        while run:
            self.clock.tick(FPS)
            evs = pygame.event.get()
            window_size = self.screen.get_size()
            canvas_size = self.game.world.config.canvas_size

            for e in evs:
                if is_quit(e):
                    run = False
                elif e.type == VIDEORESIZE:
                    self.handle_resize(e.size)
                elif is_primary_input(e):
                    self.game.primary_input()
                pos = pointer_position(e, window_size)
                if pos is not None:
                    pointer = to_canvas(pos, canvas_size, window_size)

            self.game.tick()

            render(self.render_surface, self.game.world)
            if self.hud.draw(self.render_surface, self.game.world, pointer, evs):
                self.game.restart()

            self.screen.fill(BLACK)
            ratio, offset = letterbox(self.render_surface.get_size(),
                                      self.screen.get_size())
            if ratio == 1:
                self.screen.blit(self.render_surface, offset)
            else:
                new_size = (int(self.render_surface.get_width() * ratio),
                            int(self.render_surface.get_height() * ratio))
                self.screen.blit(pygame.transform.scale(
                    self.render_surface, new_size), offset)
            pygame.display.flip()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Flappy Bird in pygame.")
    parser.add_argument("--width", type=int, default=DEFAULT_WINDOW[0])
    parser.add_argument("--height", type=int, default=DEFAULT_WINDOW[1])
    parser.add_argument("--fullscreen", action="store_true", default=IS_ANDROID)
    parser.add_argument("--scores",
                        help="Best score file (JSON), default ~/.flappy_bird.json.")
    parser.add_argument("--reset-best", action="store_true",
                        help="Wipe the stored best score before playing.")
    parser.add_argument("--sound", action="store_true",
                        help="Play sound effects through pygame.mixer.")
    parser.add_argument("--log-level", default="info",
                        choices=["debug", "info", "warning", "error"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_level)

    store = ScoreStore(args.scores)
    if args.reset_best:
        reset_best_score(store)

    if args.sound:
        pygame.mixer.pre_init(48000, -16, 2, 4096)
    pygame.init()
    sound = MixerSounds() if args.sound else log_sound

    game = Game(store=store, sound=sound, rng=random.Random())
    log.info("Best score so far: %d", game.world.best_score)
    try:
        FlappyApp(game, (args.width, args.height), args.fullscreen).run()
    finally:
        pygame.quit()
