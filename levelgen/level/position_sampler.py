"""Candidate positions for new platforms.

Two strategies:
 - Directed: offset a known-reachable base platform by a gap jump, a climb
   or a drop, sized from the movement constraints.
 - Random: anywhere in the world; reachability is checked by the caller.
"""
from __future__ import annotations

import random
from typing import Tuple

from levelgen.core.constants import (
    GAP_JUMP_WEIGHT,
    CLIMB_WEIGHT,
    GAP_MIN_DISTANCE,
    GAP_VERTICAL_JITTER,
    CLIMB_MIN_HEIGHT,
    DROP_MIN_DISTANCE,
    HORIZONTAL_DRIFT,
    MIN_HEIGHT_ABOVE_GROUND,
)
from levelgen.core.utils import clamp
from levelgen.level.platform_data import MovementConstraints, PlatformPosition, WorldBounds

MOVE_GAP_JUMP = "gap_jump"
MOVE_CLIMB = "climb"
MOVE_DROP = "drop"


def choose_movement_type(rng: random.Random) -> str:
    """Weighted draw: 40% gap jump, 30% climb, 30% drop."""
    roll = rng.random()
    if roll < GAP_JUMP_WEIGHT:
        return MOVE_GAP_JUMP
    if roll < GAP_JUMP_WEIGHT + CLIMB_WEIGHT:
        return MOVE_CLIMB
    return MOVE_DROP


def clamp_to_world(x: float, y: float, world: WorldBounds) -> PlatformPosition:
    """Pull a point into the placeable part of the world."""
    return PlatformPosition(
        clamp(x, -world.half_width, world.half_width),
        clamp(y, world.ground_y + MIN_HEIGHT_ABOVE_GROUND, world.height),
    )


def movement_offset(movement_type: str, movement: MovementConstraints, rng: random.Random) -> Tuple[float, float]:
    """Return the (dx, dy) a move of the given type takes from its base."""
    if movement_type == MOVE_GAP_JUMP:
        direction = -1.0 if rng.random() < 0.5 else 1.0
        dx = direction * rng.uniform(GAP_MIN_DISTANCE, movement.max_jump_distance)
        # small vertical variation for realistic jumps
        dy = rng.uniform(*GAP_VERTICAL_JITTER)
    elif movement_type == MOVE_CLIMB:
        dy = rng.uniform(CLIMB_MIN_HEIGHT, movement.max_jump_height)
        dx = rng.uniform(-HORIZONTAL_DRIFT, HORIZONTAL_DRIFT)
    elif movement_type == MOVE_DROP:
        dy = -rng.uniform(DROP_MIN_DISTANCE, movement.max_fall_distance)
        dx = rng.uniform(-HORIZONTAL_DRIFT, HORIZONTAL_DRIFT)
    else:
        raise ValueError(f"Unknown movement type: {movement_type}")
    return dx, dy


def sample_directed(
    base: Tuple[float, float],
    movement: MovementConstraints,
    world: WorldBounds,
    rng: random.Random,
) -> PlatformPosition:
    """
    Propose a platform one move away from base.

    The result is clamped into the world, which can shorten the move; the
    generator decides whether to re-check reachability afterwards.
    """
    movement_type = choose_movement_type(rng)
    dx, dy = movement_offset(movement_type, movement, rng)
    return clamp_to_world(base[0] + dx, base[1] + dy, world)


def sample_random(world: WorldBounds, rng: random.Random) -> PlatformPosition:
    """Uniform point over the placeable part of the world."""
    x = rng.uniform(-world.half_width, world.half_width)
    y = rng.uniform(world.ground_y + MIN_HEIGHT_ABOVE_GROUND, world.height)
    return PlatformPosition(x, y)
