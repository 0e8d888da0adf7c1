from typing import Iterable, Tuple

from levelgen.core.utils import distance
from levelgen.level.platform_data import GenerationConfig, PlatformSize, WorldBounds


def is_within_bounds(position: Tuple[float, float], world: WorldBounds) -> bool:
    """Check the x range and that y sits above the ground and under the ceiling."""
    return world.contains(position[0], position[1])


def footprints_overlap(a: Tuple[float, float], b: Tuple[float, float], size: PlatformSize) -> bool:
    """
    Check if two platform boxes overlap.

    Boxes overlap only when they are closer than one platform width
    horizontally AND one platform height vertically.
    """
    return abs(a[0] - b[0]) < size.width and abs(a[1] - b[1]) < size.height


def is_valid_position(
    candidate: Tuple[float, float],
    placed: Iterable[Tuple[float, float]],
    config: GenerationConfig,
) -> bool:
    """
    Check a candidate against the world bounds and every placed platform.

    Args:
        candidate: Position to test
        placed: Platforms placed so far in this run
        config: Generation settings (bounds, spacing, footprint)

    Returns:
        True if the candidate can be placed, False otherwise
    """
    if not is_within_bounds(candidate, config.world):
        return False

    for existing in placed:
        if distance(candidate, existing) < config.min_platform_spacing:
            return False
        if footprints_overlap(candidate, existing, config.platform_size):
            return False

    return True
