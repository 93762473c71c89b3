import random

import pytest

from flappy.config import GameConfig
from flappy.entities import Bird, Particle, Pipe
from flappy.simulation import (advance_pipes, gap_bounds, pipe_collides, spawn_due,
                               spawn_pipe, step, update_bird, update_particles)
from flappy.state import GameState, World


@pytest.fixture
def config():
    return GameConfig()


def test_velocity_stays_clamped(config):
    rng = random.Random(7)
    bird = Bird.for_config(config)
    for _ in range(500):
        if rng.random() < 0.1:
            bird.velocity = config.flap_strength
        update_bird(bird, config)
        assert config.max_up_speed <= bird.velocity <= config.max_fall_speed


def test_ceiling_stops_the_bird(config):
    bird = Bird(config.bird_x, 2, config.bird_size, velocity=-6)
    assert not update_bird(bird, config)
    assert bird.y == 0
    assert bird.velocity == 0


def test_ground_hit_is_reported(config):
    bird = Bird(config.bird_x, config.ground_y - config.bird_size - 1,
                config.bird_size, velocity=5)
    assert update_bird(bird, config)
    assert bird.bottom == config.ground_y
    assert bird.velocity == 0


def test_gap_always_within_bounds(config):
    rng = random.Random(99)
    low, high = gap_bounds(config)
    assert (low, high) == (80, 400 - 140 - 80)
    for _ in range(1000):
        pipe = spawn_pipe(config, rng)
        assert low <= pipe.top_height <= high
        assert pipe.bottom_y - pipe.top_height == config.pipe_gap
        assert pipe.x == config.canvas_width


def test_gap_centred_when_viewport_too_short():
    config = GameConfig().apply_viewport(320, 300)
    pipe = spawn_pipe(config, random.Random(0))
    assert pipe.top_height == (300 - 160) / 2


def test_spawn_waits_for_grace_period(config):
    assert not spawn_due(-60, config)
    assert not spawn_due(0, config)
    assert not spawn_due(149, config)
    assert spawn_due(150, config)
    assert spawn_due(300, config)


def test_pipe_reaches_left_edge_after_expected_ticks(config):
    bird = Bird(config.bird_x, 180, config.bird_size)
    pipes = [Pipe(config.canvas_width, 120, 260)]
    for _ in range(533):
        pipes, _ = advance_pipes(pipes, bird, config)
    assert pipes[0].x > 0
    pipes, _ = advance_pipes(pipes, bird, config)
    assert pipes[0].x <= 0


def test_pipe_scores_once_when_right_edge_passes_bird(config):
    bird = Bird(config.bird_x, 180, config.bird_size)
    pipes = [Pipe(config.canvas_width, 120, 260)]
    total = 0
    for tick in range(1, 600):
        pipes, scored = advance_pipes(pipes, bird, config)
        total += scored
        if pipes and tick == 506:
            assert not pipes[0].scored
        if tick == 507:
            assert scored == 1
            assert pipes[0].scored
    assert total == 1


def test_offscreen_pipes_are_dropped(config):
    bird = Bird(config.bird_x, 180, config.bird_size)
    gone = Pipe(-config.pipe_width + 1, 120, 260, scored=True)
    kept = Pipe(300, 120, 260)
    pipes, _ = advance_pipes([gone, kept], bird, config)
    assert pipes == [kept]


def test_bird_inside_gap_does_not_collide(config):
    pipe = Pipe(config.bird_x - 10, 100, 240)
    bird = Bird(config.bird_x, 150, config.bird_size)
    assert not pipe_collides(bird, pipe, config)


def test_tolerance_forgives_grazing_the_pipe(config):
    pipe = Pipe(config.bird_x - 10, 100, 240)
    # Bird top 5px above the top pipe's edge: inside the 3+3 px tolerance
    bird = Bird(config.bird_x, 95, config.bird_size)
    assert not pipe_collides(bird, pipe, config)
    bird.y = 90
    assert pipe_collides(bird, pipe, config)


def test_bird_hits_bottom_pipe(config):
    pipe = Pipe(config.bird_x - 10, 100, 240)
    bird = Bird(config.bird_x, 235, config.bird_size)
    assert pipe_collides(bird, pipe, config)


def test_no_collision_outside_horizontal_span(config):
    pipe = Pipe(config.bird_x + config.bird_size, 100, 240)
    bird = Bird(config.bird_x, 0, config.bird_size)
    assert not pipe_collides(bird, pipe, config)


def test_expired_particles_removed_in_same_pass():
    particles = [Particle(0, 0, 1, 1, 1, 25), Particle(0, 0, 1, 1, 3, 25)]
    survivors = update_particles(particles)
    assert len(survivors) == 1
    assert survivors[0].life == 2
    assert survivors[0].x == 1
    assert all(p.life > 0 for p in survivors)


def test_step_only_moves_bird_while_playing(config):
    world = World(config)
    y = world.bird.y
    step(world, random.Random(0))
    assert world.bird.y == y
    assert world.frame == 1


def test_step_spawns_after_grace_period(config):
    world = World(config)
    world.reset_run()
    world.state = GameState.PLAYING
    rng = random.Random(3)
    world.bird.y = 150
    for _ in range(config.grace_frames + config.pipe_spawn_rate):
        world.bird.velocity = 0
        world.bird.y = 150
        step(world, rng)
    assert world.frame == config.pipe_spawn_rate
    assert len(world.pipes) == 1
