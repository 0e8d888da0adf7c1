import pygame
import logging
logger = logging.getLogger(__name__)

from levelgen.core.constants import YELLOW, GREEN, BLUE, RED, CYAN, MAGENTA, ACCENT
from levelgen.core.utils import draw_text, get_font
from levelgen.level.traversal_verification import reachability_edges, reachable_from_start

class DebugOverlays:
    """Draws a generated platform layout onto a pygame surface."""

    def __init__(self, camera):
        self.camera = camera

    def draw_world_bounds(self, surf, world):
        top_left = self.camera.to_screen((-world.half_width, world.height))
        bottom_right = self.camera.to_screen((world.half_width, world.ground_y))
        rect = pygame.Rect(top_left, (bottom_right[0] - top_left[0], bottom_right[1] - top_left[1]))
        pygame.draw.rect(surf, YELLOW, rect, width=1)

    def draw_ground(self, surf, ground_segments):
        for seg in ground_segments:
            start = self.camera.to_screen((seg.x, seg.y))
            end = self.camera.to_screen((seg.x + seg.width, seg.y))
            pygame.draw.line(surf, GREEN, start, end, 3)
            # segment joints
            pygame.draw.line(surf, GREEN, (start[0], start[1] - 4), (start[0], start[1] + 4), 1)

    def draw_platforms(self, surf, positions, platform_size, unreachable=()):
        for index, pos in enumerate(positions):
            rect = self.camera.to_screen_rect(pos, platform_size)
            col = RED if index in unreachable else BLUE
            pygame.draw.rect(surf, col, rect, width=2)

    def draw_start_marker(self, surf, start):
        center = self.camera.to_screen(start)
        pygame.draw.circle(surf, RED, center, max(3, int(0.5 * self.camera.zoom)), width=1)

    def draw_reach_box(self, surf, start, movement):
        """Box around the start spanning one jump in every direction."""
        size = (movement.max_jump_distance * 2, movement.max_jump_height * 2)
        pygame.draw.rect(surf, CYAN, self.camera.to_screen_rect(start, size), width=1)

    def draw_connections(self, surf, positions, movement):
        edges = reachability_edges(positions, movement)
        for i, j in edges:
            pygame.draw.line(surf, MAGENTA, self.camera.to_screen(positions[i]), self.camera.to_screen(positions[j]), 1)
        return len(edges)

    def draw_info_panel(self, surf, result, stranded):
        lines = [
            f"platforms: {result.achieved_count}/{result.requested_count}",
            f"attempts: {result.attempts}",
            f"stranded: {stranded}",
        ]
        line_h = get_font(14).get_linesize()
        for i, line in enumerate(lines):
            draw_text(surf, line, (8, 6 + i * line_h), ACCENT, size=14)

    def draw_layout(self, surf, config, result, show_connections=False, show_labels=True):
        """
        Draw the whole layout: bounds, ground, platforms, start and reach box.

        Platforms the player cannot get to from the start are drawn in red.
        """
        positions = result.placed_positions
        reached = reachable_from_start(positions, config.movement, config.world.ground_y)
        stranded = {i for i in range(len(positions)) if i not in reached}
        if stranded:
            logger.debug("%d platforms not reachable from the start", len(stranded))

        self.draw_world_bounds(surf, config.world)
        self.draw_ground(surf, result.ground_segments)
        if show_connections:
            self.draw_connections(surf, positions, config.movement)
        self.draw_platforms(surf, positions, config.platform_size, unreachable=stranded)
        self.draw_start_marker(surf, config.starting_position)
        self.draw_reach_box(surf, config.starting_position, config.movement)
        if show_labels:
            self.draw_info_panel(surf, result, len(stranded))
        return stranded
