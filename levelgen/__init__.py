"""Procedural platform layout generation for 2D platformer levels."""

__version__ = "0.1.0"

from levelgen.level.platform_data import (
    GenerationConfig,
    GenerationConfigError,
    GenerationResult,
    MovementConstraints,
    PlatformPosition,
    PlatformSize,
    WorldBounds,
)
from levelgen.level.platform_generator import PlatformGenerator

__all__ = [
    "GenerationConfig",
    "GenerationConfigError",
    "GenerationResult",
    "MovementConstraints",
    "PlatformGenerator",
    "PlatformPosition",
    "PlatformSize",
    "WorldBounds",
]
