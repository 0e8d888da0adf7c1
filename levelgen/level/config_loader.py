"""Configuration loader for platform layout generation."""

import json
import logging
import os
import random
from typing import Any, Dict, NamedTuple, Optional

from levelgen.level.platform_data import (
    GenerationConfig,
    MovementConstraints,
    PlatformPosition,
    PlatformSize,
    WorldBounds,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/platform_config.json"
SECTION = "platform_generation"
RUNTIME_KEYS = ("seed_mode", "seed", "generate_on_start")


class RuntimeConfig(NamedTuple):
    seed_mode: str
    seed: int
    generate_on_start: bool


def config_to_dict(config: GenerationConfig) -> Dict[str, Any]:
    """Flatten a GenerationConfig into the JSON section layout."""
    return {
        "number_of_platforms": config.number_of_platforms,
        "world_width": config.world.width,
        "world_height": config.world.height,
        "ground_y": config.world.ground_y,
        "max_jump_height": config.movement.max_jump_height,
        "max_jump_distance": config.movement.max_jump_distance,
        "max_fall_distance": config.movement.max_fall_distance,
        "min_platform_spacing": config.min_platform_spacing,
        "platform_size": [config.platform_size.width, config.platform_size.height],
        "starting_position": [config.starting_position.x, config.starting_position.y],
        "requeue_probability": config.requeue_probability,
        "max_attempts_per_platform": config.max_attempts_per_platform,
        "random_attempts_per_iteration": config.random_attempts_per_iteration,
        "recheck_directed_reachability": config.recheck_directed_reachability,
        "ground_segment_width": config.ground_segment_width,
    }


def config_from_dict(data: Dict[str, Any]) -> GenerationConfig:
    """
    Build a GenerationConfig from a flat settings dictionary.

    Unknown keys are ignored and missing keys take their defaults. Values are
    not range-checked here; GenerationConfig.validate() does that before a run.
    """
    defaults = GenerationConfig()
    world = WorldBounds(
        width=data.get("world_width", defaults.world.width),
        height=data.get("world_height", defaults.world.height),
        ground_y=data.get("ground_y", defaults.world.ground_y),
    )
    movement = MovementConstraints(
        max_jump_height=data.get("max_jump_height", defaults.movement.max_jump_height),
        max_jump_distance=data.get("max_jump_distance", defaults.movement.max_jump_distance),
        max_fall_distance=data.get("max_fall_distance", defaults.movement.max_fall_distance),
    )

    kwargs: Dict[str, Any] = {"world": world, "movement": movement}
    if "platform_size" in data:
        kwargs["platform_size"] = PlatformSize(*data["platform_size"])
    if "starting_position" in data:
        kwargs["starting_position"] = PlatformPosition(*data["starting_position"])

    scalar_keys = {
        "number_of_platforms", "min_platform_spacing", "requeue_probability",
        "max_attempts_per_platform", "random_attempts_per_iteration",
        "recheck_directed_reachability", "ground_segment_width",
    }
    kwargs.update({k: v for k, v in data.items() if k in scalar_keys})
    return GenerationConfig(**kwargs)


def load_generation_config(config_path: str = DEFAULT_CONFIG_PATH) -> GenerationConfig:
    """
    Load generation settings from a JSON file.

    Args:
        config_path: Path to the configuration file

    Returns:
        GenerationConfig: Loaded configuration, or defaults if the file is
        missing or unreadable
    """
    if not os.path.exists(config_path):
        logger.warning("Config file not found: %s, using defaults", config_path)
        return GenerationConfig()

    try:
        with open(config_path, 'r') as f:
            data = json.load(f)
        return config_from_dict(data.get(SECTION, {}))
    except (OSError, ValueError, TypeError) as e:
        logger.warning("Error loading config: %s, using defaults", e)
        return GenerationConfig()


def _read_existing(config_path: str) -> Dict[str, Any]:
    if not os.path.exists(config_path):
        return {}
    try:
        with open(config_path, 'r') as f:
            return json.load(f) or {}
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config %s: %s", config_path, e)
        return {}


def save_generation_config(config: GenerationConfig, config_path: str = DEFAULT_CONFIG_PATH) -> None:
    """
    Save generation settings to a JSON file.

    Runtime keys already present in the file are preserved.
    """
    directory = os.path.dirname(config_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    section = config_to_dict(config)
    existing_section = _read_existing(config_path).get(SECTION, {})
    for key in RUNTIME_KEYS:
        if key in existing_section:
            section[key] = existing_section[key]

    with open(config_path, 'w') as f:
        json.dump({SECTION: section}, f, indent=2)


def load_runtime_config(config_path: str = DEFAULT_CONFIG_PATH) -> RuntimeConfig:
    """Load runtime toggles (seed_mode, seed, generate_on_start) with safe defaults."""
    seed_mode = "random"
    seed = 12345
    generate_on_start = True

    section = _read_existing(config_path).get(SECTION, {})
    if section:
        seed_mode = str(section.get('seed_mode', seed_mode))
        if seed_mode not in ("fixed", "random"):
            logger.warning("Unknown seed_mode %r, using 'random'", seed_mode)
            seed_mode = "random"
        try:
            seed = int(section.get('seed', seed))
        except (TypeError, ValueError):
            logger.warning("Invalid seed %r, using %d", section.get('seed'), 12345)
            seed = 12345
        generate_on_start = bool(section.get('generate_on_start', generate_on_start))

    return RuntimeConfig(seed_mode=seed_mode, seed=seed, generate_on_start=generate_on_start)


def save_runtime_config(runtime: RuntimeConfig, config_path: str = DEFAULT_CONFIG_PATH) -> None:
    """Persist runtime toggles back into the config file, keeping other settings."""
    directory = os.path.dirname(config_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    existing = _read_existing(config_path)
    section = existing.get(SECTION, {})
    section["seed_mode"] = str(runtime.seed_mode)
    section["seed"] = int(runtime.seed)
    section["generate_on_start"] = bool(runtime.generate_on_start)
    existing[SECTION] = section

    with open(config_path, 'w') as f:
        json.dump(existing, f, indent=2)


def resolve_seed(runtime: RuntimeConfig, rng: Optional[random.Random] = None) -> int:
    """Pick the seed for a run: the fixed seed, or a fresh one in random mode."""
    if runtime.seed_mode == "random":
        rng = rng or random.Random()
        return rng.randrange(0, 2**31 - 1)
    return runtime.seed
