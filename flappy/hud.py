import pygame
from pygame.locals import FINGERDOWN, FINGERUP, MOUSEBUTTONDOWN, MOUSEBUTTONUP

from .config import BLACK, GREEN, ORANGE, WHITE, get_path
from .state import GameState, overlays_for

# Frames the restart button ignores input after a crash
RESTART_DELAY = 10

_FONTS = {}


def load_font(size):
    if size not in _FONTS:
        try:
            _FONTS[size] = pygame.font.Font(get_path('04B_19.ttf'), size)
        except (FileNotFoundError, OSError, pygame.error):
            _FONTS[size] = pygame.font.SysFont('Arial', size)
    return _FONTS[size]


def render_text(text, size, color=WHITE):
    """Renders text with a simple drop shadow."""
    font = load_font(size)
    text = str(text)
    main_surf = font.render(text, True, color)
    shadow_surf = font.render(text, True, BLACK)
    w, h = main_surf.get_size()
    surf = pygame.Surface((w + 2, h + 2), pygame.SRCALPHA)
    surf.blit(shadow_surf, (2, 2))
    surf.blit(main_surf, (0, 0))
    return surf


class Button:
    """Press-and-release button; triggers only when released over itself."""

    def __init__(self, label, size, fill=ORANGE):
        self.label, self.fill = label, fill
        self.rect = pygame.Rect((0, 0), size)
        self.is_pressed = False

    def draw(self, surface, pointer=None, events=None):
        triggered = False
        over_button = pointer is not None and self.rect.collidepoint(pointer)

        if events:
            for e in events:
                if e.type in (MOUSEBUTTONDOWN, FINGERDOWN) and over_button:
                    self.is_pressed = True
                if e.type in (MOUSEBUTTONUP, FINGERUP):
                    if self.is_pressed and over_button:
                        triggered = True
                    self.is_pressed = False

        # Pressed state: slightly smaller to give a "pushed" feel
        rect = self.rect
        if self.is_pressed and over_button:
            rect = rect.inflate(-rect.w // 10, -rect.h // 10)
        pygame.draw.rect(surface, self.fill, rect, border_radius=8)
        pygame.draw.rect(surface, WHITE, rect, 2, border_radius=8)
        label = render_text(self.label, max(12, rect.h // 2))
        surface.blit(label, label.get_rect(center=rect.center))
        return triggered


class Hud:
    """Draws the overlay regions that are visible for the current state."""

    def __init__(self):
        self.restart_btn = Button('RESTART', (160, 44))
        # Visual cue only: in the narrow profile any tap is already a flap
        self.flap_btn = Button('FLAP', (120, 56), fill=GREEN)
        self.restart_delay = 0
        self.last_state = None

    def draw(self, surface, world, pointer=None, events=None):
        """Returns True when the restart button was activated."""
        overlays = overlays_for(world)
        w, h = world.config.canvas_size
        restart = False

        if overlays.start:
            title = render_text('FLAPPY BIRD', 48, ORANGE)
            surface.blit(title, title.get_rect(center=(w // 2, h // 3)))
            prompt = render_text('Press SPACE or tap to start', 24)
            surface.blit(prompt, prompt.get_rect(center=(w // 2, h // 2)))
            best = render_text(f'Best: {world.best_score}', 22)
            surface.blit(best, best.get_rect(center=(w // 2, h // 2 + 36)))

        if overlays.score:
            score = render_text(world.score, 48)
            surface.blit(score, score.get_rect(center=(w // 2, 40)))

        if overlays.game_over:
            title = render_text('GAME OVER', 48, ORANGE)
            surface.blit(title, title.get_rect(center=(w // 2, h // 4)))
            summary = render_text(
                f'Score: {world.score}   Best: {world.best_score}', 26)
            surface.blit(summary, summary.get_rect(center=(w // 2, h // 2 - 20)))
            self.restart_btn.rect.center = (w // 2, h // 2 + 40)
            if self.last_state is not GameState.GAME_OVER:
                # The click that ended the run must not press restart
                self.restart_delay = RESTART_DELAY
                self.restart_btn.is_pressed = False
            if self.restart_delay > 0:
                self.restart_btn.draw(surface, pointer)
                self.restart_delay -= 1
            else:
                restart = self.restart_btn.draw(surface, pointer, events)

        if overlays.mobile_controls:
            self.flap_btn.rect.midbottom = (w // 2, h - 40)
            self.flap_btn.draw(surface, pointer, events)

        self.last_state = world.state
        return restart
