from dataclasses import dataclass

from .entities import Pipe
from .state import GameState


@dataclass
class StepOutcome:
    scored: int = 0
    crashed: bool = False


# --- Bird ---

def update_bird(bird, config):
    """Applies gravity and keeps the bird inside the play area.

    Returns True when the bird touched the ground.
    """
    bird.velocity += config.gravity
    bird.velocity = max(config.max_up_speed,
                        min(config.max_fall_speed, bird.velocity))
    bird.y += bird.velocity

    if bird.bottom >= config.ground_y:
        bird.y, bird.velocity = config.ground_y - bird.size, 0.0
        return True
    if bird.y <= 0:
        bird.y, bird.velocity = 0.0, 0.0
    return False


# --- Pipes ---

def spawn_due(frame, config):
    return frame > 0 and frame % config.pipe_spawn_rate == 0


def gap_bounds(config):
    low = config.gap_margin
    high = config.canvas_height - config.pipe_gap - config.gap_margin
    return low, high


def spawn_pipe(config, rng):
    """New pipe at the right edge with its gap away from the extremes."""
    low, high = gap_bounds(config)
    if high < low:
        # Viewport too short for the margins, keep the gap centred
        top = (config.canvas_height - config.pipe_gap) / 2
    else:
        top = rng.random() * (high - low) + low
    return Pipe(config.canvas_width, top, top + config.pipe_gap)


def advance_pipes(pipes, bird, config):
    """Scrolls pipes left, scores the ones the bird passed.

    Returns the surviving pipes and the number of points earned.
    """
    scored = 0
    survivors = []
    for pipe in pipes:
        pipe.x -= config.pipe_speed
        if not pipe.scored and pipe.right(config) < bird.x:
            pipe.scored = True
            scored += 1
        if pipe.right(config) >= 0:
            survivors.append(pipe)
    return survivors, scored


def pipe_collides(bird, pipe, config):
    tolerance = config.collision_tolerance
    bird_left = bird.x + tolerance
    bird_right = bird.x + bird.size - tolerance
    bird_top = bird.y + tolerance
    bird_bottom = bird.y + bird.size - tolerance

    if bird_right > pipe.x and bird_left < pipe.right(config):
        return (bird_top < pipe.top_height - tolerance
                or bird_bottom > pipe.bottom_y + tolerance)
    return False


# --- Particles ---

def update_particles(particles):
    for p in particles:
        p.update()
    return [p for p in particles if p.life > 0]


def step(world, rng):
    """One tick of the simulation. Only PLAYING moves the bird and pipes."""
    outcome = StepOutcome()
    world.frame += 1
    config = world.config

    if world.state is GameState.PLAYING:
        if update_bird(world.bird, config):
            outcome.crashed = True
        else:
            if spawn_due(world.frame, config):
                world.pipes.append(spawn_pipe(config, rng))
            world.pipes, outcome.scored = advance_pipes(
                world.pipes, world.bird, config)
            world.score += outcome.scored
            outcome.crashed = any(pipe_collides(world.bird, p, config)
                                  for p in world.pipes)

    world.particles = update_particles(world.particles)
    return outcome
