import random
import logging
from penguins.assets import load_assets
from penguins.frame_driver import FrameDriver
from penguins.population import Population
from penguins.scene_renderer import SceneRenderer

logger = logging.getLogger(__name__)


def build_frame_driver(config, screen, viewport):
    """
    Wires assets, renderer and population around one shared random source.
    load_assets() returns only once every image is available, so the frame
    loop can never start on a half-loaded scene.
    """
    rng = random.Random(config.seed)
    assets = load_assets(config, seed=config.seed)

    renderer = SceneRenderer(config, assets, rng)
    population = Population(viewport.bounds, rng)
    driver = FrameDriver(screen, viewport, renderer, population, fps=config.fps)
    driver.reset_scene()
    logger.info("Scene ready: %d penguins, sprite %dx%d", len(population), *renderer.sprite_size)
    return driver
