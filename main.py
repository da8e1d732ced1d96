import sys
import logging
import pygame

from penguins.app import build_frame_driver
from penguins.config import load_config
from penguins.errors import PenguinsError
from penguins.viewport import Viewport


def run_live(config_path='config.json'):
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        config = load_config(config_path)
    except PenguinsError as e:
        print(f"ERROR: {e}")
        return 1

    pygame.init()
    try:
        screen = pygame.display.set_mode((config.width, config.height), pygame.RESIZABLE)
        pygame.display.set_caption(config.caption)
        viewport = Viewport(*screen.get_size())
        driver = build_frame_driver(config, screen, viewport)
        print("Penguins initialized.")
        driver.run()
    except PenguinsError as e:
        print(f"ERROR: {e}")
        return 1
    finally:
        pygame.quit()
    return 0


if __name__ == '__main__':
    sys.exit(run_live(*sys.argv[1:2]))
