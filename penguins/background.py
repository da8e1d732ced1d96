import math
import logging
import pygame
from penguins.constants import *

logger = logging.getLogger(__name__)


def generate_hill_points(bounds, rng):
    """
    Builds the hill silhouette as a list of (x, y) points, left to right.

    Peaks land between min and max height, with a 25% chance of a taller
    "ridge" point. The last point sits off the bottom-right corner so the
    closed polygon covers the whole lower scene.
    """
    w, h = bounds.width, bounds.height
    max_height = math.ceil(h * ((HILL_MAX_HEIGHT_PERCENT + math.floor(rng.random() * HILL_HEIGHT_JITTER)) / 100))
    min_height = math.ceil(h * ((HILL_MIN_HEIGHT_PERCENT + math.floor(rng.random() * HILL_HEIGHT_JITTER)) / 100))
    d_height = (max_height - min_height) / 2

    def random_step():
        return math.ceil(HILL_MIN_STEP + rng.random() * HILL_STEP_RANGE)

    def random_y():
        if rng.random() <= HILL_PEAK_CHANCE:
            return math.ceil(min_height + d_height + rng.random() * d_height)
        return math.ceil(min_height + d_height / 2 + rng.random() * d_height)

    points = []
    x = -random_step()
    points.append((x, random_y()))

    x = 0
    while x < w:
        x += random_step()
        points.append((x, random_y()))

    points.append((w + HILL_SIDE_OVERHANG, h + HILL_BOTTOM_OVERHANG))
    return points


def create_background(bounds, hill_overlay, rng, sky_color=SKY_COLOR):
    """Renders sky, textured hills and the snow band into a new surface."""
    w, h = bounds.width, bounds.height
    outline = [(-HILL_SIDE_OVERHANG, h + HILL_BOTTOM_OVERHANG)] + generate_hill_points(bounds, rng)

    background = pygame.Surface((w, h))
    background.fill(sky_color)

    hills = pygame.Surface((w, h), pygame.SRCALPHA)
    hills.fill((0, 0, 0, 0))
    pygame.draw.polygon(hills, (*HILL_COLOR, 255), outline)

    # Texture goes only where the hill was painted.
    overlay_top = math.ceil(h * HILL_OVERLAY_TOP)
    texture = pygame.transform.scale(hill_overlay, (w, max(1, math.ceil(h * HILL_OVERLAY_HEIGHT))))
    overlay = pygame.Surface((w, h), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 0))
    overlay.blit(texture, (0, overlay_top))

    mask = pygame.Surface((w, h), pygame.SRCALPHA)
    mask.fill((255, 255, 255, 0))
    pygame.draw.polygon(mask, (255, 255, 255, 255), outline)
    overlay.blit(mask, (0, 0), special_flags=pygame.BLEND_RGBA_MIN)

    hills.blit(overlay, (0, 0))
    background.blit(hills, (0, 0))
    pygame.draw.polygon(background, HILL_COLOR, outline, width=1)

    background.fill(SNOW_COLOR, pygame.Rect(0, math.ceil(h * SNOW_LINE), w, h))

    logger.debug("Background generated for %dx%d with %d hill points", w, h, len(outline))
    return background
