import os
import logging
import numpy as np
import pygame
from scipy.ndimage import gaussian_filter
from penguins.constants import *
from penguins.errors import AssetLoadError

logger = logging.getLogger(__name__)

ASSET_NAMES = ('penguin', 'hill_overlay')


class Assets:
    """
    Holds the loaded images and tracks how many of them are ready.
    The frame loop must not start before is_complete() is True.
    """
    def __init__(self):
        self.images = {}
        self.placeholders = set()

    @property
    def penguin(self):
        return self.images.get('penguin')

    @property
    def hill_overlay(self):
        return self.images.get('hill_overlay')

    @property
    def loaded(self):
        return len(self.images)

    def add(self, name, surface, placeholder=False):
        self.images[name] = surface
        if placeholder:
            self.placeholders.add(name)

    def is_complete(self):
        return all(name in self.images for name in ASSET_NAMES)

    def require_complete(self):
        for name in ASSET_NAMES:
            if name not in self.images:
                raise AssetLoadError(name, "never finished loading")

    def penguin_size(self, scale):
        """Scaled draw size of the penguin sprite, from its natural pixel size."""
        w, h = self.penguin.get_size()
        return max(1, int(w * scale)), max(1, int(h * scale))


def make_placeholder_penguin(size=PLACEHOLDER_PENGUIN_SIZE):
    """Draws a right-facing penguin with pygame primitives."""
    w, h = size
    sprite = pygame.Surface((w, h), pygame.SRCALPHA)
    body = pygame.Rect(int(w * 0.15), int(h * 0.1), int(w * 0.7), int(h * 0.85))
    belly = body.inflate(-int(w * 0.25), -int(h * 0.2)).move(int(w * 0.05), int(h * 0.05))
    pygame.draw.ellipse(sprite, (20, 20, 30), body)
    pygame.draw.ellipse(sprite, (245, 245, 245), belly)
    pygame.draw.circle(sprite, (255, 255, 255), (int(w * 0.62), int(h * 0.24)), max(2, w // 14))
    pygame.draw.circle(sprite, (0, 0, 0), (int(w * 0.64), int(h * 0.24)), max(1, w // 30))
    beak = [(int(w * 0.78), int(h * 0.27)), (int(w * 0.98), int(h * 0.31)), (int(w * 0.78), int(h * 0.35))]
    pygame.draw.polygon(sprite, (250, 160, 30), beak)
    for foot_x in (0.3, 0.55):
        foot = pygame.Rect(int(w * foot_x), int(h * 0.92), int(w * 0.2), max(2, int(h * 0.06)))
        pygame.draw.ellipse(sprite, (250, 160, 30), foot)
    return sprite


def make_placeholder_texture(size=PLACEHOLDER_TEXTURE_SIZE, seed=None):
    """Smoothed noise in stone greys, used in place of the hill overlay image."""
    w, h = size
    noise = np.random.default_rng(seed).random((w, h))
    smooth = gaussian_filter(noise, sigma=3, truncate=2.5)
    span = smooth.max() - smooth.min()
    norm = (smooth - smooth.min()) / span if span > 0 else np.zeros_like(smooth)
    grey = (60 + norm * 70).astype(np.uint8)
    # surfarray expects (w, h, 3)
    rgb = np.stack([grey, grey, (grey * 1.1).clip(0, 255).astype(np.uint8)], axis=-1)
    return pygame.surfarray.make_surface(rgb)


PLACEHOLDER_FACTORIES = {
    'penguin': lambda seed: make_placeholder_penguin(),
    'hill_overlay': lambda seed: make_placeholder_texture(seed=seed),
}


def _load_image(path):
    image = pygame.image.load(path)
    # convert_alpha needs an initialised display mode
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image


def load_assets(config, seed=None):
    """
    Loads every image named in ASSET_NAMES from config.asset_dir.
    Missing or unreadable files are replaced with placeholders unless
    config.allow_placeholders is False, in which case AssetLoadError is raised.
    """
    assets = Assets()
    files = {'penguin': config.penguin_image, 'hill_overlay': config.hill_overlay_image}

    for name in ASSET_NAMES:
        path = os.path.join(config.asset_dir, files[name])
        try:
            assets.add(name, _load_image(path))
            logger.info("Loaded %s from %s", name, path)
        except (FileNotFoundError, pygame.error) as e:
            if not getattr(config, 'allow_placeholders', True):
                raise AssetLoadError(name, str(e)) from e
            logger.warning("Asset %s not found at %s (%s). Using placeholder.", name, path, e)
            assets.add(name, PLACEHOLDER_FACTORIES[name](seed), placeholder=True)
        logger.debug("Assets loaded: %d/%d", assets.loaded, len(ASSET_NAMES))

    assets.require_complete()
    return assets
