import logging
import pygame
from penguins.constants import *
from penguins.background import create_background

logger = logging.getLogger(__name__)


class SceneRenderer:
    """
    Owns the pre-rendered background and the scaled penguin sprites.
    The background is only regenerated on rebuild(), never per frame.
    """
    def __init__(self, config, assets, rng):
        self.config = config
        self.assets = assets
        self.rng = rng
        self.sky_color = getattr(config, 'sky_color', SKY_COLOR)

        scale = getattr(config, 'penguin_scale', PENGUIN_SCALE)
        self.sprite_size = assets.penguin_size(scale)
        self.sprite = pygame.transform.scale(assets.penguin, self.sprite_size)
        self.sprite_mirrored = pygame.transform.flip(self.sprite, True, False)

        self.bounds = None
        self.background_surface = None

    def rebuild(self, bounds):
        self.bounds = bounds
        self.background_surface = create_background(bounds, self.assets.hill_overlay, self.rng, self.sky_color)
        logger.info("Background rebuilt at %dx%d", bounds.width, bounds.height)

    def draw_background(self, screen):
        screen.fill((0, 0, 0))
        screen.blit(self.background_surface, (0, 0))

    def sprite_for(self, penguin):
        return self.sprite_mirrored if penguin.is_mirrored() else self.sprite

    def draw_penguins(self, screen, population):
        for penguin in population:
            screen.blit(self.sprite_for(penguin), (int(penguin.x), int(penguin.y)))
