import copy
import random

import pygame
import pytest

from flappy.config import GameConfig
from flappy.entities import Particle, Pipe
from flappy.hud import RESTART_DELAY, Button, Hud
from flappy.render import (bird_angle, cloud_x, faded_cloud, linear_gradient, render,
                           star_points)
from flappy.state import GameState, World


@pytest.fixture
def world():
    world = World(GameConfig())
    world.state = GameState.PLAYING
    world.frame = 42
    world.bird.velocity = 3
    world.pipes.append(Pipe(400, 120, 260))
    world.particles.append(Particle(110, 210, 1, 2, 10, 25))
    return world


def test_render_leaves_world_untouched(world):
    surface = pygame.Surface(world.config.canvas_size)
    before = copy.deepcopy(world)
    render(surface, world, random.Random(0))
    assert world == before


def test_sky_gradient_runs_top_to_bottom(world):
    surface = pygame.Surface(world.config.canvas_size)
    world.pipes.clear()
    render(surface, world, random.Random(0))
    assert surface.get_at((700, 0))[:3] == (0x87, 0xCE, 0xEB)


def test_pipe_is_drawn_green(world):
    surface = pygame.Surface(world.config.canvas_size)
    render(surface, world, random.Random(0))
    r, g, b, _ = surface.get_at((430, 60))
    assert g > r and g > b


def test_gradient_endpoints():
    stops = ((0, '#000000'), (1, '#FFFFFF'))
    surf = linear_gradient((4, 11), stops)
    assert surf.get_at((0, 0))[:3] == (0, 0, 0)
    assert surf.get_at((0, 10))[:3] == (255, 255, 255)


def test_bird_tilt_is_clamped():
    assert bird_angle(0) == 0
    assert bird_angle(5) == pytest.approx(0.4)
    assert bird_angle(20) == 0.5
    assert bird_angle(-20) == -0.5


def test_clouds_loop_horizontally():
    assert cloud_x(0, 0.3, 0, 800) == -150
    assert cloud_x(1900, 0.5, 0, 800) == -150
    assert cloud_x(10, 0.5, 200, 800) == 55


def test_star_has_five_points():
    assert len(star_points(0, 0, 0.3)) == 5


def test_hud_restart_button_triggers_on_release(world):
    surface = pygame.Surface(world.config.canvas_size)
    hud = Hud()
    world.state = GameState.GAME_OVER
    for _ in range(RESTART_DELAY):
        assert not hud.draw(surface, world)
    centre = hud.restart_btn.rect.center
    press = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=centre)
    release = pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=centre)
    assert not hud.draw(surface, world, centre, [press])
    assert hud.draw(surface, world, centre, [release])


def test_button_release_elsewhere_does_nothing():
    surface = pygame.Surface((200, 200))
    button = Button('GO', (100, 40))
    button.rect.center = (100, 100)
    down = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(100, 100))
    up = pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(5, 5))
    button.draw(surface, (100, 100), [down])
    assert not button.draw(surface, (5, 5), [up])


def test_restart_ignores_press_carried_over_from_the_crash(world):
    surface = pygame.Surface(world.config.canvas_size)
    hud = Hud()
    hud.draw(surface, world)
    world.state = GameState.GAME_OVER
    hud.draw(surface, world)
    centre = hud.restart_btn.rect.center
    press = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=centre)
    release = pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=centre)
    assert not hud.draw(surface, world, centre, [press])
    assert not hud.draw(surface, world, centre, [release])
    assert not hud.restart_btn.is_pressed


def test_faded_cloud_is_cached():
    sprite, anchor = faded_cloud(40, 0.6)
    again, _ = faded_cloud(40, 0.6)
    assert again is sprite
    assert sprite.get_alpha() == int(255 * 0.6)
