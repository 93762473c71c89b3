import os
from dataclasses import dataclass

# --- Configuration Constants ---
FPS = 60
DEFAULT_WINDOW = (800, 400)
NARROW_MAX_WIDTH = 480
BEST_SCORE_KEY = 'bestScore'

WHITE, BLACK, GREEN, ORANGE = (255,)*3, (0,)*3, (0, 150, 0), (255, 140, 0)

# Physics profiles, applied wholesale on viewport changes
DESKTOP_PROFILE = dict(gravity=0.25, flap_strength=-6,
                       pipe_gap=140, pipe_speed=1.5)
NARROW_PROFILE = dict(gravity=0.2, flap_strength=-5,
                      pipe_gap=160, pipe_speed=1.2)

# Detect Android using environment variables
IS_ANDROID = 'ANDROID_ARGUMENT' in os.environ or 'ANDROID_PRIVATE' in os.environ

# Base path for assets - required for absolute paths on Android
BASE_PATH = os.path.dirname(os.path.abspath(__file__))


def get_path(relative_path):
    return os.path.join(BASE_PATH, relative_path)


@dataclass
class GameConfig:
    """Tunable game constants. Desktop profile by default."""
    canvas_width: int = 800
    canvas_height: int = 400
    bird_size: int = 20
    bird_x: int = 100
    gravity: float = 0.25
    flap_strength: float = -6
    max_up_speed: float = -6
    max_fall_speed: float = 5
    pipe_width: int = 60
    pipe_gap: int = 140
    pipe_speed: float = 1.5
    pipe_spawn_rate: int = 150
    ground_height: int = 30
    gap_margin: int = 80
    collision_tolerance: int = 3
    grace_frames: int = 60
    flap_particles: int = 5
    particle_life: int = 25
    narrow: bool = False

    @property
    def ground_y(self):
        return self.canvas_height - self.ground_height

    @property
    def canvas_size(self):
        return self.canvas_width, self.canvas_height

    def apply_viewport(self, width, height):
        """Switches between the desktop and narrow profiles for a viewport."""
        self.narrow = width <= NARROW_MAX_WIDTH
        if self.narrow:
            self.canvas_width, self.canvas_height = int(width), int(height)
            profile = NARROW_PROFILE
        else:
            self.canvas_width, self.canvas_height = DEFAULT_WINDOW
            profile = DESKTOP_PROFILE
        for name, value in profile.items():
            setattr(self, name, value)
        return self
