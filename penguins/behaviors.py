import math
from penguins.constants import *


class MoveState:
    def __init__(self, mod, distance, speed, immunity_distance):
        self.mod = mod
        self.distance = distance
        self.speed = speed
        self.immunity_distance = immunity_distance


class WaitState:
    def __init__(self, time):
        self.time = time  # milliseconds


class TraverseState:
    def __init__(self, distance, speed, mod):
        self.distance = distance
        self.speed = speed
        self.mod = mod


def random_mod(rng):
    return RIGHT if rng.random() >= 0.5 else LEFT


class Behavior:
    """
    Abstract base class for all penguin behaviors.

    Behaviors are stateless and shared by every penguin. All per-activation
    data lives in the state object returned by enter(), which is handed back
    to step() on every tick until step() returns DONE.
    """
    name = None

    def enter(self, penguin, bounds, rng):
        raise NotImplementedError

    def step(self, delta, state, penguin, bounds):
        raise NotImplementedError


class MoveBehavior(Behavior):
    """
    Walks horizontally for a random share of the scene width.

    A penguin that starts off-screen is turned towards the scene and granted
    an immunity distance, during which the out-of-bounds check is skipped so
    it can walk back into view.
    """
    name = "Move"

    def enter(self, penguin, bounds, rng):
        if penguin.x < 0:
            mod = RIGHT
            immunity_distance = -penguin.x + EDGE_MARGIN
        elif penguin.x > bounds.width:
            mod = LEFT
            immunity_distance = (penguin.x - bounds.width) + EDGE_MARGIN
        else:
            mod = random_mod(rng)
            immunity_distance = 0

        fraction = max(MOVE_MIN_FRACTION, min(MOVE_MAX_FRACTION, rng.random()))
        distance = fraction * bounds.width
        speed = MOVE_MIN_SPEED + rng.random() * MOVE_SPEED_RANGE

        penguin.direction = mod
        return MoveState(mod, distance + immunity_distance, speed, immunity_distance)

    def step(self, delta, state, penguin, bounds):
        cover = state.speed * delta

        if state.immunity_distance <= 0 and (
                state.distance - cover < 0
                or penguin.x <= -EDGE_MARGIN
                or penguin.x >= bounds.width + EDGE_MARGIN):
            return DONE

        if state.immunity_distance > 0:
            state.immunity_distance -= cover
        state.distance -= cover
        penguin.x += penguin.direction * cover
        return CONTINUE


class WaitBehavior(Behavior):
    """Idles in place for 0.5 to 3.5 seconds."""
    name = "Wait"

    def enter(self, penguin, bounds, rng):
        return WaitState(WAIT_MIN_TIME + rng.random() * WAIT_TIME_RANGE)

    def step(self, delta, state, penguin, bounds):
        state.time -= delta * 1000
        return DONE if state.time <= 0 else CONTINUE


class TraverseBehavior(Behavior):
    """Bobs up or down the slope, staying inside the snow band."""
    name = "Traverse"

    def enter(self, penguin, bounds, rng):
        distance = math.ceil(rng.random() * bounds.band_height)
        speed = TRAVERSE_MIN_SPEED + rng.random() * TRAVERSE_SPEED_RANGE
        return TraverseState(distance, speed, random_mod(rng))

    def step(self, delta, state, penguin, bounds):
        cover = state.speed * delta
        # Feet position after this step
        projected = penguin.y + FOOT_OFFSET + cover * state.mod

        if (state.distance - cover <= 0
                or projected >= bounds.height
                or projected <= bounds.snow_line):
            return DONE

        penguin.y += cover * state.mod
        state.distance -= cover
        return CONTINUE


# Indexed by MOVE, WAIT and TRAVERSE
BEHAVIORS = (MoveBehavior(), WaitBehavior(), TraverseBehavior())
