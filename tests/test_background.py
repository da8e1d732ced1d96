"""Tests for the procedural hill background."""

from __future__ import annotations

import math
import random

import pytest

from penguins.assets import make_placeholder_texture
from penguins.background import create_background, generate_hill_points
from penguins.bounds import SceneBounds
from penguins.constants import SKY_COLOR, SNOW_COLOR


@pytest.mark.parametrize("seed", range(10))
def test_hill_points_span_scene(bounds, seed):
    points = generate_hill_points(bounds, random.Random(seed))
    xs = [x for x, _ in points]

    assert xs[0] < 0
    assert xs[:-1] == sorted(xs[:-1])
    assert xs[-2] >= bounds.width
    assert points[-1] == (bounds.width + 25, bounds.height + 50)


@pytest.mark.parametrize("seed", range(10))
def test_hill_heights_stay_in_range(bounds, seed):
    points = generate_hill_points(bounds, random.Random(seed))
    for _, y in points[:-1]:
        assert bounds.height * 0.2 <= y <= math.ceil(bounds.height * 0.64)


def test_hill_steps_are_bounded(bounds):
    points = generate_hill_points(bounds, random.Random(4))
    xs = [x for x, _ in points[1:-1]]
    steps = [b - a for a, b in zip([0] + xs, xs)]
    assert all(25 <= s <= 75 for s in steps)


def test_background_layers(pygame_env):
    bounds = SceneBounds(400, 300)
    texture = make_placeholder_texture((64, 32), seed=0)
    background = create_background(bounds, texture, random.Random(0))

    assert background.get_size() == (400, 300)
    assert tuple(background.get_at((5, 2)))[:3] == SKY_COLOR
    assert tuple(background.get_at((200, 299)))[:3] == SNOW_COLOR
    assert tuple(background.get_at((200, 285)))[:3] == SNOW_COLOR
    hill = tuple(background.get_at((200, 270)))[:3]
    assert hill not in (SKY_COLOR, SNOW_COLOR)
