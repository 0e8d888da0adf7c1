import math

import pygame

from levelgen.core.constants import WHITE


def distance(a, b):
    """Euclidean distance between two (x, y) points."""
    return math.hypot(b[0] - a[0], b[1] - a[1])


def clamp(value, low, high):
    return max(low, min(high, value))


# Lazy font getter to avoid init-order issues
_fonts = {}

def get_font(size=18, bold=False):
    key = (size, bold)
    if key not in _fonts:
        if not pygame.font.get_init():
            pygame.font.init()
        _fonts[key] = pygame.font.SysFont("consolas", size, bold=bold)
    return _fonts[key]

def draw_text(surf, text, pos, col=WHITE, size=18, bold=False):
    font = get_font(size=size, bold=bold)
    surf.blit(font.render(text, True, col), pos)
