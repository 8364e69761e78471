"""Shared fixtures for the Langton's Ant tests."""

import os

# Headless SDL for the renderer tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from langtons_ant.config import SimulationConfig


def _grid_config(width: int, height: int, **overrides) -> SimulationConfig:
    """Config whose grid is exactly width x height cells."""
    return SimulationConfig().with_overrides(
        screen_width=width, screen_height=height, cell_size=1, **overrides
    ).validate()


@pytest.fixture
def grid_config():
    return _grid_config


@pytest.fixture
def config_4x4() -> SimulationConfig:
    return _grid_config(4, 4, ant_count=1, seed=7)


@pytest.fixture
def config_20x20() -> SimulationConfig:
    return _grid_config(20, 20, ant_count=2, seed=11)
