import math
import logging
from penguins.constants import *
from penguins.penguin import Penguin

logger = logging.getLogger(__name__)


class Population:
    """Owns the live penguins. The whole flock is replaced on every resize."""
    def __init__(self, bounds, rng):
        self.bounds = bounds
        self.rng = rng
        self.penguins = []

    def __len__(self):
        return len(self.penguins)

    def __iter__(self):
        return iter(self.penguins)

    def spawn_band(self):
        """Returns (top, height) of the strip penguins spawn in, just above the snow line."""
        top = self.bounds.snow_line - FOOT_OFFSET
        height = self.bounds.band_height - SPAWN_BAND_PADDING
        return top, height

    def create_population(self, bounds=None):
        if bounds is not None:
            self.bounds = bounds

        top, band = self.spawn_band()
        self.penguins = []

        count = POPULATION_MIN + int(self.rng.random() * POPULATION_SPREAD)
        for _ in range(count):
            x = self.rng.random() * (self.bounds.width - SPAWN_RIGHT_MARGIN)
            y = top + math.ceil(self.rng.random() * band)
            self.penguins.append(Penguin(x, y))

        logger.info("Spawned %d penguins for a %dx%d scene", count, self.bounds.width, self.bounds.height)
        return self.penguins

    def update(self, delta):
        for penguin in self.penguins:
            penguin.update(delta, self.bounds, self.rng)
