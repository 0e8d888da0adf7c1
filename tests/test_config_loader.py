import json
import os
import random

import pytest

from levelgen.level.config_loader import (
    RuntimeConfig,
    config_from_dict,
    load_generation_config,
    load_runtime_config,
    resolve_seed,
    save_generation_config,
    save_runtime_config,
)
from levelgen.level.platform_data import (
    GenerationConfig,
    GenerationConfigError,
    MovementConstraints,
    PlatformPosition,
    PlatformSize,
    WorldBounds,
)
from levelgen.level.platform_generator import PlatformGenerator

BUNDLED_CONFIG = os.path.join(os.path.dirname(__file__), "..", "config", "platform_config.json")


def test_missing_file_gives_defaults(tmp_path, caplog):
    config = load_generation_config(str(tmp_path / "nope.json"))
    assert config == GenerationConfig()
    assert "Config file not found" in caplog.text


def test_malformed_file_gives_defaults(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{ not json")
    assert load_generation_config(str(path)) == GenerationConfig()


def test_save_then_load_keeps_settings(tmp_path):
    path = str(tmp_path / "config" / "platforms.json")
    config = GenerationConfig(
        number_of_platforms=12,
        world=WorldBounds(width=40.0, height=15.0, ground_y=-2.0),
        movement=MovementConstraints(max_jump_height=2.5, max_jump_distance=4.0, max_fall_distance=6.0),
        min_platform_spacing=1.5,
        platform_size=PlatformSize(2.0, 0.25),
        starting_position=PlatformPosition(-5.0, 1.0),
        requeue_probability=0.5,
        recheck_directed_reachability=False,
    )
    save_generation_config(config, path)
    assert load_generation_config(path) == config


def test_partial_section_fills_in_defaults():
    config = config_from_dict({"number_of_platforms": 8, "max_jump_height": 4.0, "unknown_key": 1})
    assert config.number_of_platforms == 8
    assert config.movement.max_jump_height == 4.0
    assert config.movement.max_jump_distance == 5.0
    assert config.world == WorldBounds()


def test_runtime_defaults_without_file(tmp_path):
    runtime = load_runtime_config(str(tmp_path / "nope.json"))
    assert runtime == RuntimeConfig(seed_mode="random", seed=12345, generate_on_start=True)


def test_runtime_values_are_sanitized(tmp_path):
    path = tmp_path / "runtime.json"
    path.write_text(json.dumps({"platform_generation": {"seed_mode": "sometimes", "seed": "abc"}}))
    runtime = load_runtime_config(str(path))
    assert runtime.seed_mode == "random"
    assert runtime.seed == 12345


def test_runtime_and_generation_settings_share_a_file(tmp_path):
    path = str(tmp_path / "shared.json")
    save_runtime_config(RuntimeConfig(seed_mode="fixed", seed=77, generate_on_start=False), path)
    save_generation_config(GenerationConfig(number_of_platforms=9), path)

    assert load_runtime_config(path) == RuntimeConfig(seed_mode="fixed", seed=77, generate_on_start=False)
    assert load_generation_config(path).number_of_platforms == 9

    save_runtime_config(RuntimeConfig(seed_mode="random", seed=5, generate_on_start=True), path)
    assert load_generation_config(path).number_of_platforms == 9


def test_resolve_seed():
    assert resolve_seed(RuntimeConfig("fixed", 42, True)) == 42
    seed = resolve_seed(RuntimeConfig("random", 42, True), rng=random.Random(1))
    assert 0 <= seed < 2**31 - 1
    assert seed == resolve_seed(RuntimeConfig("random", 0, True), rng=random.Random(1))


def test_bundled_config_file_is_valid():
    config = load_generation_config(BUNDLED_CONFIG)
    config.validate()
    assert config == GenerationConfig()


@pytest.mark.parametrize("key", [
    "requeue_probability",
    "max_attempts_per_platform",
    "random_attempts_per_iteration",
    "ground_segment_width",
    "min_platform_spacing",
])
def test_null_setting_is_a_configuration_error(tmp_path, key):
    path = tmp_path / "nulls.json"
    path.write_text(json.dumps({"platform_generation": {key: None}}))
    config = load_generation_config(str(path))

    with pytest.raises(GenerationConfigError) as excinfo:
        PlatformGenerator(config, rng=random.Random(0)).generate()
    assert f"{key} is missing" in excinfo.value.issues
