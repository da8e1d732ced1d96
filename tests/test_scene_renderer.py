"""Tests for background compositing and sprite drawing."""

from __future__ import annotations

import random

import pygame

from penguins.assets import load_assets
from penguins.bounds import SceneBounds
from penguins.constants import LEFT, PLACEHOLDER_PENGUIN_SIZE, RIGHT
from penguins.penguin import Penguin
from penguins.scene_renderer import SceneRenderer


def make_renderer(config):
    assets = load_assets(config, seed=0)
    return SceneRenderer(config, assets, random.Random(0))


def test_sprite_scaled_from_natural_size(pygame_env, placeholder_config):
    renderer = make_renderer(placeholder_config)
    w, h = PLACEHOLDER_PENGUIN_SIZE
    assert renderer.sprite_size == (int(w * 0.3), int(h * 0.3))
    assert renderer.sprite.get_size() == renderer.sprite_size
    assert renderer.sprite_mirrored.get_size() == renderer.sprite_size


def test_sprite_mirrored_by_direction(pygame_env, placeholder_config):
    renderer = make_renderer(placeholder_config)
    penguin = Penguin(10.0, 10.0)

    penguin.direction = RIGHT
    assert renderer.sprite_for(penguin) is renderer.sprite
    penguin.direction = LEFT
    assert renderer.sprite_for(penguin) is renderer.sprite_mirrored


def test_rebuild_matches_bounds(pygame_env, placeholder_config):
    renderer = make_renderer(placeholder_config)
    renderer.rebuild(SceneBounds(320, 240))
    assert renderer.background_surface.get_size() == (320, 240)

    renderer.rebuild(SceneBounds(200, 100))
    assert renderer.bounds == SceneBounds(200, 100)
    assert renderer.background_surface.get_size() == (200, 100)


def test_draw_background_then_penguins(pygame_env, placeholder_config):
    renderer = make_renderer(placeholder_config)
    renderer.rebuild(SceneBounds(320, 240))
    screen = pygame.Surface((320, 240))

    renderer.draw_background(screen)
    background_pixel = screen.get_at((30, 30))

    w, h = renderer.sprite_size
    penguin = Penguin(30.0 - w // 2, 30.0 - h // 2)
    renderer.draw_penguins(screen, [penguin])

    assert screen.get_at((30, 30)) != background_pixel
