import logging
import pygame
from penguins.constants import *

logger = logging.getLogger(__name__)


class FrameDriver:
    """
    Runs the update + render cycle.

    Every tick measures the time since the previous one, redraws the
    background, advances every penguin and draws them on top. Resizes are
    handled between ticks, so a tick always finishes on the scene it
    started with.
    """
    def __init__(self, screen, viewport, renderer, population, fps=DEFAULT_FPS):
        self.screen = screen
        self.viewport = viewport
        self.renderer = renderer
        self.population = population
        self.fps = fps

        self.last_render_timestamp = 0
        self.frame_count = 0
        self.is_running = False

    def reset_scene(self):
        """Regenerates the background and replaces the whole population."""
        bounds = self.viewport.bounds
        self.renderer.rebuild(bounds)
        self.population.create_population(bounds)

    def start(self, now):
        self.last_render_timestamp = now
        self.frame_count = 0

    def tick(self, now):
        """One frame at timestamp `now` (milliseconds). Returns the delta in seconds."""
        delta = (now - self.last_render_timestamp) / 1000

        self.renderer.draw_background(self.screen)
        self.population.update(delta)
        self.renderer.draw_penguins(self.screen, self.population)

        self.last_render_timestamp = now
        self.frame_count += 1
        return delta

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.is_running = False
            elif self.viewport.handle_event(event):
                self.screen = pygame.display.get_surface()
                logger.info("Viewport resized to %dx%d", *self.viewport.rect.size)
                self.reset_scene()

    def run(self):
        clock = pygame.time.Clock()
        self.is_running = True
        self.start(pygame.time.get_ticks())

        while self.is_running:
            self.handle_events()
            if not self.is_running:
                break
            self.tick(pygame.time.get_ticks())
            pygame.display.flip()
            clock.tick(self.fps)

        logger.info("Frame loop stopped after %d frames", self.frame_count)
