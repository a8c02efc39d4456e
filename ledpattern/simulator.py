"""Pygame-based LED strip simulator. Shows each pixel as an upscaled square cell."""

import pygame

from ledpattern.strip import Strip


class Simulator:
    """Opens a window that displays the Strip contents, wrapped into rows of `columns` cells."""

    def __init__(self, strip: Strip, scale: int = 12, columns: int = 64,
                 title: str = "LED Strip Simulator"):
        self.strip = strip
        self.scale = scale
        self.columns = max(1, min(columns, strip.pixel_count))
        self.rows = max(1, -(-strip.pixel_count // self.columns))
        self.width = self.columns * scale
        self.height = self.rows * scale

        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        # Small surface at one pixel per LED, then upscale
        self.surface = pygame.Surface((self.columns, self.rows))

    def update(self) -> bool:
        """Blit strip to screen. Returns False if window was closed."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False

        self.surface.fill((0, 0, 0))
        buf = self.strip.buffer
        for i in range(self.strip.pixel_count):
            idx = i * 3
            x, y = i % self.columns, i // self.columns
            self.surface.set_at((x, y), (buf[idx], buf[idx + 1], buf[idx + 2]))

        pygame.transform.scale(self.surface, (self.width, self.height), self.screen)
        pygame.display.flip()
        return True

    def tick(self, fps: int = 30) -> None:
        """Limit framerate."""
        self.clock.tick(fps)

    def close(self) -> None:
        pygame.quit()
