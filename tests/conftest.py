import os

# pygame drawing tests run without a display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from levelgen.level.platform_data import GenerationConfig, MovementConstraints, WorldBounds


@pytest.fixture
def default_movement():
    return MovementConstraints(max_jump_height=3.0, max_jump_distance=5.0, max_fall_distance=8.0)


@pytest.fixture
def default_world():
    return WorldBounds(width=50.0, height=20.0, ground_y=0.0)


@pytest.fixture
def default_config(default_movement, default_world):
    return GenerationConfig(
        number_of_platforms=20,
        world=default_world,
        movement=default_movement,
        min_platform_spacing=2.0,
    )
