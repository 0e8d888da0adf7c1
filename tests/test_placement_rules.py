from dataclasses import replace

import pytest

from levelgen.level.platform_data import PlatformPosition, PlatformSize
from levelgen.level.placement_rules import footprints_overlap, is_valid_position, is_within_bounds


@pytest.fixture
def no_spacing_config(default_config):
    # Only the footprint test can reject a candidate
    return replace(default_config, min_platform_spacing=0.0)


@pytest.mark.parametrize("position, expected", [
    ((0.0, 0.0), False),      # on the ground
    ((0.0, 0.01), True),
    ((0.0, 20.0), True),      # ceiling is inclusive
    ((0.0, 20.01), False),
    ((25.0, 5.0), True),
    ((-25.0, 5.0), True),
    ((25.01, 5.0), False),
    ((-25.01, 5.0), False),
])
def test_is_within_bounds(default_world, position, expected):
    assert is_within_bounds(position, default_world) is expected


def test_footprints_overlap_needs_both_axes():
    size = PlatformSize(3.0, 0.5)
    assert footprints_overlap((0.0, 5.0), (2.9, 5.4), size)
    assert not footprints_overlap((0.0, 5.0), (3.0, 5.0), size)
    assert not footprints_overlap((0.0, 5.0), (1.0, 5.5), size)


def test_empty_layout_accepts_any_in_bounds_position(default_config):
    assert is_valid_position((10.0, 10.0), [], default_config)
    assert not is_valid_position((10.0, 25.0), [], default_config)


def test_min_spacing_rejects_close_candidates(default_config):
    placed = [PlatformPosition(0.0, 5.0)]
    assert not is_valid_position((0.0, 6.9), placed, default_config)
    # exactly min spacing apart is allowed
    assert is_valid_position((0.0, 7.0), placed, default_config)


def test_footprint_overlap_rejects_candidates(no_spacing_config):
    placed = [PlatformPosition(0.0, 5.0)]
    assert not is_valid_position((2.9, 5.4), placed, no_spacing_config)
    assert is_valid_position((3.0, 5.0), placed, no_spacing_config)
    assert is_valid_position((1.0, 5.5), placed, no_spacing_config)


def test_candidate_is_checked_against_every_placed_platform(default_config):
    placed = [PlatformPosition(-20.0, 15.0), PlatformPosition(10.0, 10.0), PlatformPosition(10.0, 3.0)]
    assert not is_valid_position((10.5, 3.2), placed, default_config)
    assert is_valid_position((0.0, 10.0), placed, default_config)
