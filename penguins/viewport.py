import pygame
from penguins.bounds import SceneBounds


class Viewport:
    """Tracks the window size and reports when it changes."""
    def __init__(self, width, height):
        self.rect = pygame.Rect(0, 0, width, height)

    @property
    def bounds(self):
        return SceneBounds(self.rect.width, self.rect.height)

    def resize(self, width, height):
        width, height = max(1, int(width)), max(1, int(height))
        if (width, height) == self.rect.size:
            return False
        self.rect.size = (width, height)
        return True

    def handle_event(self, event):
        """Returns True when the event changed the viewport dimensions."""
        if event.type == pygame.VIDEORESIZE:
            return self.resize(event.w, event.h)
        if event.type == pygame.WINDOWSIZECHANGED:
            return self.resize(event.x, event.y)
        return False
