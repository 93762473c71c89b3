import pygame
from pygame.locals import FINGERDOWN, KEYDOWN, K_AC_BACK, K_ESCAPE, K_SPACE, MOUSEBUTTONDOWN, QUIT

LEFT_BUTTON = 1


def is_primary_input(event):
    """Space, left click or a finger touching the screen.

    Right clicks, wheel scrolling and other keys are swallowed.
    """
    if event.type == KEYDOWN:
        return event.key == K_SPACE
    if event.type == MOUSEBUTTONDOWN:
        # SDL mirrors touches as mouse clicks; count each tap once
        return event.button == LEFT_BUTTON and not getattr(event, 'touch', False)
    return event.type == FINGERDOWN


def is_quit(event):
    if event.type == QUIT:
        return True
    return event.type == KEYDOWN and event.key in (K_ESCAPE, K_AC_BACK)


def pointer_position(event, screen_size):
    """Event position in window pixels, or None for non-pointer events."""
    if event.type in (pygame.FINGERDOWN, pygame.FINGERUP, pygame.FINGERMOTION):
        # Finger coordinates come normalised to 0..1
        return event.x * screen_size[0], event.y * screen_size[1]
    return getattr(event, 'pos', None)
