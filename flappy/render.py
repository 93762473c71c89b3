import math
import random

import pygame

# --- Palette ---
SKY_STOPS = ((0, '#87CEEB'), (0.3, '#98D8E8'), (0.7, '#90EE90'), (1, '#32CD32'))
GROUND_STOPS = ((0, '#8B4513'), (0.5, '#A0522D'), (1, '#654321'))
PIPE_STOPS = ((0, '#228B22'), (0.3, '#32CD32'), (0.7, '#228B22'), (1, '#006400'))
CAP_STOPS = ((0, '#32CD32'), (0.5, '#90EE90'), (1, '#228B22'))
BODY_STOPS = ((0, '#FFD700'), (0.7, '#FFA500'), (1, '#FF8C00'))

GROUND_BORDER = pygame.Color('#654321')
GRASS = pygame.Color('#228B22')
PIPE_BORDER = pygame.Color('#006400')
PIPE_LINE = pygame.Color('#90EE90')

CAP_HEIGHT, CAP_OVERHANG = 25, 5

# (speed, offset, y, size, opacity)
CLOUD_LAYERS = (
    (0.3, 0, 60, 35, 1.0),
    (0.2, 200, 100, 25, 1.0),
    (0.15, 400, 80, 30, 1.0),
    (0.1, 300, 120, 40, 0.6),
)


# --- Gradient helpers ---

def _lerp_color(stops, t):
    for (t0, c0), (t1, c1) in zip(stops, stops[1:]):
        if t <= t1:
            f = 0 if t1 == t0 else (t - t0) / (t1 - t0)
            return pygame.Color(c0).lerp(pygame.Color(c1), max(0.0, min(1.0, f)))
    return pygame.Color(stops[-1][1])


_GRADIENTS = {}


def linear_gradient(size, stops, vertical=True):
    """Surface filled with a linear gradient, cached per size and stops."""
    w, h = max(1, int(size[0])), max(1, int(size[1]))
    key = (w, h, stops, vertical)
    if key not in _GRADIENTS:
        surf = pygame.Surface((w, h))
        length = h if vertical else w
        for i in range(length):
            color = _lerp_color(stops, i / max(1, length - 1))
            if vertical:
                pygame.draw.line(surf, color, (0, i), (w - 1, i))
            else:
                pygame.draw.line(surf, color, (i, 0), (i, h - 1))
        _GRADIENTS[key] = surf
    return _GRADIENTS[key]


# --- Scenery ---

def draw_background(surface, config):
    surface.fill((0, 0, 0))
    surface.blit(linear_gradient(config.canvas_size, SKY_STOPS), (0, 0))


def draw_ground(surface, config, rng=random):
    """Ground strip with grass blades that flicker every frame."""
    ground_y = config.ground_y
    gradient = linear_gradient(
        (config.canvas_width, config.ground_height), GROUND_STOPS)
    surface.blit(gradient, (0, ground_y))
    pygame.draw.line(surface, GROUND_BORDER, (0, ground_y),
                     (config.canvas_width, ground_y), 2)

    for x in range(0, config.canvas_width, 10):
        blade = rng.random() * 5 + 3
        surface.fill(GRASS, pygame.Rect(x, ground_y - blade, 2, blade))


_CLOUDS = {}


def _cloud_surface(size):
    """Cloud sprite and the offset of its anchor puff inside the sprite."""
    if size in _CLOUDS:
        return _CLOUDS[size]
    surf = pygame.Surface((size * 3, size * 3), pygame.SRCALPHA)
    ox, oy = size, size + size // 2

    def puffs(dx, dy, color):
        for cx, cy, r in ((0, 0, 0.5), (0.5, 0, 0.7), (1, 0, 0.5),
                          (0.2, -0.3, 0.4), (0.8, -0.3, 0.4)):
            pygame.draw.circle(surf, color,
                               (ox + cx * size + dx, oy + cy * size + dy), r * size)

    puffs(2, 2, (200, 200, 200, 77))
    puffs(0, 0, (255, 255, 255, 230))
    pygame.draw.circle(surf, (255, 255, 255, 255),
                       (ox + size * 0.3, oy - size * 0.2), size * 0.15)
    _CLOUDS[size] = (surf, (ox, oy))
    return _CLOUDS[size]


def cloud_x(frame, speed, offset, canvas_width):
    return (frame * speed + offset) % (canvas_width + 150) - 150


def faded_cloud(size, opacity):
    key = (size, opacity)
    if key not in _CLOUDS:
        sprite, anchor = _cloud_surface(size)
        sprite = sprite.copy()
        sprite.set_alpha(int(255 * opacity))
        _CLOUDS[key] = (sprite, anchor)
    return _CLOUDS[key]


def draw_clouds(surface, config, frame):
    for speed, offset, y, size, opacity in CLOUD_LAYERS:
        if opacity < 1.0:
            sprite, (ox, oy) = faded_cloud(size, opacity)
        else:
            sprite, (ox, oy) = _cloud_surface(size)
        x = cloud_x(frame, speed, offset, config.canvas_width)
        surface.blit(sprite, (x - ox, y - oy))


# --- Pipes ---

def draw_pipe(surface, pipe, config):
    w, h = config.pipe_width, config.canvas_height
    x = pipe.x
    body = linear_gradient((w, h), PIPE_STOPS, vertical=False)
    cap = linear_gradient((w + CAP_OVERHANG * 2, CAP_HEIGHT), CAP_STOPS,
                          vertical=False)

    top = pygame.Rect(x, 0, w, pipe.top_height)
    bottom = pygame.Rect(x, pipe.bottom_y, w, h - pipe.bottom_y)
    top_cap = pygame.Rect(x - CAP_OVERHANG, pipe.top_height - CAP_HEIGHT,
                          w + CAP_OVERHANG * 2, CAP_HEIGHT)
    bottom_cap = pygame.Rect(x - CAP_OVERHANG, pipe.bottom_y,
                             w + CAP_OVERHANG * 2, CAP_HEIGHT)

    surface.blit(body, top, area=pygame.Rect(0, 0, top.w, top.h))
    surface.blit(cap, top_cap)
    surface.blit(body, bottom, area=pygame.Rect(0, 0, bottom.w, bottom.h))
    surface.blit(cap, bottom_cap)

    for rect in (top, top_cap, bottom, bottom_cap):
        pygame.draw.rect(surface, PIPE_BORDER, rect, 3)

    for i in range(1, 3):
        line_x = x + (w / 3) * i
        pygame.draw.line(surface, PIPE_LINE, (line_x, 0), (line_x, pipe.top_height))
        pygame.draw.line(surface, PIPE_LINE, (line_x, pipe.bottom_y), (line_x, h))


def draw_pipes(surface, pipes, config):
    for pipe in pipes:
        draw_pipe(surface, pipe, config)


# --- Bird ---

def _ellipse(surf, color, center, cx, cy, rx, ry, width=0):
    rect = pygame.Rect(0, 0, rx * 2, ry * 2)
    rect.center = (center + cx, center + cy)
    pygame.draw.ellipse(surf, color, rect, width)


class BirdSprite:
    """Layered ellipse bird, drawn once per size and cached per angle."""
    CACHE = {}

    @classmethod
    def base(cls, size):
        key = (size, None)
        if key in cls.CACHE:
            return cls.CACHE[key]
        side = size * 2 + 20
        c = side // 2
        surf = pygame.Surface((side, side), pygame.SRCALPHA)

        _ellipse(surf, (0, 0, 0, 51), c, 2, 2, size / 2, size / 2.5)
        # Radial body gradient as shrinking ellipses
        steps = 8
        for i in range(steps):
            t = 1 - i / steps
            _ellipse(surf, _lerp_color(BODY_STOPS, t), c, 0, 0,
                     size / 2 * t, size / 2.5 * t)
        _ellipse(surf, '#FF6347', c, 0, 0, size / 2, size / 2.5, 2)

        _ellipse(surf, '#FF8C00', c, -size / 6, -size / 8, size / 3, size / 4)
        _ellipse(surf, '#FF6347', c, -size / 6, -size / 8, size / 3, size / 4, 1)

        _ellipse(surf, 'white', c, size / 6, -size / 6, size / 5, size / 4)
        _ellipse(surf, '#333333', c, size / 6, -size / 6, size / 5, size / 4, 1)
        _ellipse(surf, 'black', c, size / 4, -size / 6, size / 8, size / 7)
        _ellipse(surf, 'white', c, size / 3.5, -size / 5, size / 15, size / 12)

        beak = [(c + size / 2, c - size / 8), (c + size / 2 + 10, c),
                (c + size / 2, c + size / 8)]
        pygame.draw.polygon(surf, '#FF4500', beak)
        pygame.draw.polygon(surf, '#DC143C', beak, 1)

        cls.CACHE[key] = surf
        return surf

    @classmethod
    def rotated(cls, size, degrees):
        key = (size, degrees)
        if key not in cls.CACHE:
            # pygame rotates counter-clockwise, canvas angles run clockwise
            cls.CACHE[key] = pygame.transform.rotate(cls.base(size), -degrees)
        return cls.CACHE[key]


def bird_angle(velocity):
    """Tilt in radians, nose up when rising, down when falling."""
    return max(-0.5, min(0.5, velocity * 0.08))


def draw_bird(surface, bird):
    degrees = int(round(math.degrees(bird_angle(bird.velocity))))
    image = BirdSprite.rotated(bird.size, degrees)
    surface.blit(image, image.get_rect(center=bird.center))


# --- Particles ---

def star_points(x, y, rotation, radius=3):
    return [(x + math.cos(rotation + i * math.pi * 2 / 5) * radius,
             y + math.sin(rotation + i * math.pi * 2 / 5) * radius)
            for i in range(5)]


def draw_particles(surface, particles, frame):
    rotation = frame * 0.1
    spark = pygame.Surface((8, 8), pygame.SRCALPHA)
    for p in particles:
        spark.fill((0, 0, 0, 0))
        color = (255, 255, 0, int(255 * p.alpha))
        pygame.draw.polygon(spark, color, star_points(4, 4, rotation))
        surface.blit(spark, (p.x - 4, p.y - 4))


def render(surface, world, rng=random):
    """Draws one frame of the world. Never touches the entities."""
    config = world.config
    draw_background(surface, config)
    draw_ground(surface, config, rng)
    draw_clouds(surface, config, world.frame)
    draw_pipes(surface, world.pipes, config)
    draw_bird(surface, world.bird)
    draw_particles(surface, world.particles, world.frame)
