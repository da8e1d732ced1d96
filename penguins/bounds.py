from collections import namedtuple
from penguins.constants import *


class SceneBounds(namedtuple('SceneBounds', ['width', 'height'])):
    """Viewport dimensions, the source of truth for spawning and culling."""
    __slots__ = ()

    @property
    def snow_line(self):
        return self.height * SNOW_LINE

    @property
    def band_height(self):
        return self.height - self.height * SNOW_LINE
