"""Shared fixtures for the penguins test suite."""

from __future__ import annotations

import os
import random

# Headless pygame for every test module.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from penguins.bounds import SceneBounds
from penguins.penguin import Penguin
from tests.helpers import make_config


@pytest.fixture
def bounds() -> SceneBounds:
    """1000x800 scene, snow line at y=760."""
    return SceneBounds(1000, 800)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(42)


@pytest.fixture
def penguin() -> Penguin:
    """A penguin standing mid-scene with its feet inside the snow band."""
    return Penguin(500.0, 750.0)


@pytest.fixture
def pygame_env():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def placeholder_config(tmp_path):
    """Config pointing at an empty asset directory, so placeholders are used."""
    return make_config(asset_dir=str(tmp_path), seed=7)
