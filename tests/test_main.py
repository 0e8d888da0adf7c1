import json
from dataclasses import replace

import pygame
import pytest

from main import LayoutPreview


@pytest.fixture
def preview(tmp_path):
    path = tmp_path / "preview.json"
    path.write_text(json.dumps({"platform_generation": {
        "number_of_platforms": 3,
        "min_platform_spacing": 0.0,
        "seed_mode": "fixed",
        "seed": 21,
        "generate_on_start": False,
    }}))
    app = LayoutPreview(str(path))
    yield app
    pygame.quit()


def test_preview_waits_when_generate_on_start_is_off(preview):
    assert preview.result is None
    assert preview.config.seed == 21


def test_changing_platform_count_keeps_other_settings(preview):
    preview.change_platform_count(-10)

    assert preview.config.number_of_platforms == 1
    assert preview.config.min_platform_spacing == 0.0
    assert preview.result.achieved_count == 1


def test_invalid_settings_are_reported_not_raised(preview):
    preview.config = replace(preview.config, requeue_probability=None)
    preview.regenerate(new_seed=False)

    assert preview.result is None
    assert "requeue_probability is missing" in preview.error
