from dataclasses import dataclass


@dataclass
class Bird:
    x: float
    y: float
    size: int
    velocity: float = 0.0

    @classmethod
    def for_config(cls, config):
        return cls(config.bird_x, config.canvas_height / 2, config.bird_size)

    def recenter(self, config):
        """Puts the bird back at mid height with no vertical speed."""
        self.x = config.bird_x
        self.y = config.canvas_height / 2
        self.velocity = 0.0

    @property
    def center(self):
        return self.x + self.size / 2, self.y + self.size / 2

    @property
    def bottom(self):
        return self.y + self.size


@dataclass
class Pipe:
    x: float
    top_height: float
    bottom_y: float
    scored: bool = False

    def right(self, config):
        return self.x + config.pipe_width


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    life: int
    max_life: int

    @property
    def alpha(self):
        return max(0.0, self.life / self.max_life)

    def update(self):
        self.x += self.vx
        self.y += self.vy
        self.life -= 1


def flap_burst(bird, rng, count=5, life=25):
    """Sparkles thrown out from the bird's centre on every flap."""
    cx, cy = bird.center
    return [Particle(cx, cy,
                     (rng.random() - 0.5) * 4,
                     rng.random() * 3 + 1,
                     life, life)
            for _ in range(count)]
