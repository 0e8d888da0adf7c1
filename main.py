import sys

import pygame
import logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Per-candidate rejections are logged at DEBUG; keep only run summaries and warnings
logging.getLogger('levelgen.level.platform_generator').setLevel(logging.INFO)
logging.getLogger('levelgen.debug.overlays').setLevel(logging.WARNING)

from dataclasses import replace

from levelgen.core.constants import WIDTH, HEIGHT, FPS, BG, WHITE
from levelgen.core.utils import draw_text
from levelgen.debug import DebugOverlays
from levelgen.level.config_loader import load_generation_config, load_runtime_config, resolve_seed
from levelgen.level.platform_data import GenerationConfigError
from levelgen.level.platform_generator import PlatformGenerator
from levelgen.systems.camera import Camera


class LayoutPreview:
    """Window that shows generated layouts and regenerates them on demand."""

    def __init__(self, config_path="config/platform_config.json"):
        pygame.init()
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Platform Layout Preview")
        self.clock = pygame.time.Clock()
        self.camera = Camera((WIDTH, HEIGHT))
        self.overlays = DebugOverlays(self.camera)

        self.config = load_generation_config(config_path)
        self.runtime = load_runtime_config(config_path)
        self.config.seed = resolve_seed(self.runtime)
        logger.info("Seed mode: %s, seed: %d", self.runtime.seed_mode, self.config.seed)

        self.generator = None
        self.result = None
        self.error = None
        self.show_connections = False

        if self.runtime.generate_on_start:
            self.regenerate(new_seed=False)

    def regenerate(self, new_seed=True):
        if new_seed:
            self.config.seed = resolve_seed(self.runtime._replace(seed_mode="random"))
        self.generator = PlatformGenerator(self.config)
        try:
            self.result = self.generator.generate()
            self.error = None
        except GenerationConfigError as e:
            logger.error("World generation aborted due to invalid settings: %s", e)
            self.result = None
            self.error = str(e)
            return
        self.camera.fit(self.config.world)

    def change_platform_count(self, delta):
        self.config = replace(self.config, number_of_platforms=max(1, self.config.number_of_platforms + delta))
        logger.info("Number of platforms: %d", self.config.number_of_platforms)
        self.regenerate()

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key == pygame.K_r:
                self.regenerate()
            elif event.key == pygame.K_c:
                self.show_connections = not self.show_connections
            elif event.key == pygame.K_UP:
                self.change_platform_count(1)
            elif event.key == pygame.K_DOWN:
                self.change_platform_count(-1)
        return True

    def draw(self):
        self.screen.fill(BG)
        if self.result is not None:
            self.overlays.draw_layout(self.screen, self.config, self.result, show_connections=self.show_connections)
        elif self.error:
            draw_text(self.screen, self.error, (8, 8), WHITE, size=14)
        draw_text(self.screen, "R: regenerate  C: links  Up/Down: count  Esc: quit", (8, HEIGHT - 22), WHITE, size=14)
        pygame.display.flip()

    def run(self):
        running = True
        while running:
            self.clock.tick(FPS)
            for event in pygame.event.get():
                if not self.handle_event(event):
                    running = False
                    break
            self.draw()
        pygame.quit()


if __name__ == "__main__":
    config_path = sys.argv[1] if len(sys.argv) > 1 else "config/platform_config.json"
    LayoutPreview(config_path).run()
