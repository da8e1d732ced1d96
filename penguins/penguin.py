import logging
from penguins.constants import *
from penguins.behaviors import BEHAVIORS

logger = logging.getLogger(__name__)


class Penguin:
    """
    A single wandering penguin.
    It runs one behavior at a time and picks a new one at random once the
    current behavior reports DONE.
    """
    def __init__(self, x, y):
        self.x = x
        self.y = y
        self.direction = RIGHT

        self.current_behavior = NO_BEHAVIOR
        self.state = None

        # Fresh spawns always walk first so they head into frame.
        self.is_new = True

    @property
    def behavior(self):
        if self.current_behavior == NO_BEHAVIOR:
            return None
        return BEHAVIORS[self.current_behavior]

    def update(self, delta, bounds, rng):
        if self.is_new:
            self.is_new = False
            self.activate(MOVE, bounds, rng)

        if self.current_behavior == NO_BEHAVIOR:
            self.activate(int(rng.random() * len(BEHAVIORS)), bounds, rng)

        if self.behavior.step(delta, self.state, self, bounds) == DONE:
            # Reselection waits for the next update call.
            self.kill_behavior()

    def activate(self, index, bounds, rng):
        self.current_behavior = index
        self.state = BEHAVIORS[index].enter(self, bounds, rng)
        logger.debug("Penguin at (%.1f, %.1f) started %s", self.x, self.y, BEHAVIOR_NAMES[index])

    def kill_behavior(self):
        self.current_behavior = NO_BEHAVIOR
        self.state = None

    def is_mirrored(self):
        return self.direction == LEFT
