import pygame

from levelgen.core.constants import WIDTH, HEIGHT, PIXELS_PER_UNIT, SCREEN_MARGIN

class Camera:
    """Maps world units (y up) to screen pixels (y down)."""

    def __init__(self, screen_size=(WIDTH, HEIGHT)):
        self.screen_w, self.screen_h = screen_size
        # world point shown at the screen's top-left corner
        self.x = 0.0
        self.y = 0.0
        # pixels per world unit
        self.zoom = float(PIXELS_PER_UNIT)

    def fit(self, world, margin=SCREEN_MARGIN):
        """Zoom and position so the whole world (plus the ground) is visible."""
        view_w = max(1, self.screen_w - 2 * margin)
        view_h = max(1, self.screen_h - 2 * margin)
        world_h = max(1e-6, world.height - world.ground_y)
        self.zoom = min(view_w / world.width, view_h / world_h)
        self.x = -world.half_width - margin / self.zoom
        self.y = world.height + margin / self.zoom

    def to_screen(self, p):
        return (int((p[0] - self.x) * self.zoom), int((self.y - p[1]) * self.zoom))

    def to_screen_rect(self, center, size):
        """Screen rect for a box of the given world size centered on a world point."""
        w = max(1, int(size[0] * self.zoom))
        h = max(1, int(size[1] * self.zoom))
        cx, cy = self.to_screen(center)
        return pygame.Rect(cx - w // 2, cy - h // 2, w, h)
