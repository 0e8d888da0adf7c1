import pygame
import pytest

from levelgen.core.constants import BLUE, GREEN
from levelgen.debug import DebugOverlays
from levelgen.level.platform_data import GenerationResult, PlatformPosition
from levelgen.level.platform_generator import build_ground_segments
from levelgen.systems.camera import Camera


@pytest.fixture
def camera(default_world):
    cam = Camera((320, 240))
    cam.fit(default_world)
    return cam


def make_result(config, positions):
    return GenerationResult(
        placed_positions=positions,
        achieved_count=len(positions),
        requested_count=config.number_of_platforms,
        ground_segments=build_ground_segments(config.world, config.ground_segment_width),
    )


def test_camera_keeps_world_on_screen(camera, default_world):
    left, top = camera.to_screen((-default_world.half_width, default_world.height))
    right, bottom = camera.to_screen((default_world.half_width, default_world.ground_y))
    assert 0 <= left < right <= 320
    assert 0 <= top < bottom <= 240


def test_camera_flips_y_axis(camera):
    _, low = camera.to_screen((0.0, 2.0))
    _, high = camera.to_screen((0.0, 10.0))
    assert high < low


def test_draw_layout_draws_ground_and_platforms(camera, default_config):
    surf = pygame.Surface((320, 240))
    result = make_result(default_config, [PlatformPosition(0.0, 2.0), PlatformPosition(4.0, 4.0)])

    stranded = DebugOverlays(camera).draw_layout(surf, default_config, result, show_connections=True, show_labels=False)

    assert stranded == set()
    ground_px = camera.to_screen((0.1, default_config.world.ground_y))
    assert tuple(surf.get_at(ground_px))[:3] == GREEN
    platform_rect = camera.to_screen_rect((4.0, 4.0), default_config.platform_size)
    assert tuple(surf.get_at(platform_rect.topleft))[:3] == BLUE


def test_draw_layout_reports_stranded_platforms(camera, default_config):
    surf = pygame.Surface((320, 240))
    result = make_result(default_config, [PlatformPosition(0.0, 2.0), PlatformPosition(20.0, 15.0)])

    stranded = DebugOverlays(camera).draw_layout(surf, default_config, result, show_labels=False)

    assert stranded == {1}


def test_draw_connections_counts_links(camera, default_config):
    surf = pygame.Surface((320, 240))
    positions = [PlatformPosition(0.0, 2.0), PlatformPosition(4.0, 4.0), PlatformPosition(8.0, 6.5)]
    assert DebugOverlays(camera).draw_connections(surf, positions, default_config.movement) == 2
