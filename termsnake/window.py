"""
termsnake - Window front end

The same game drawn in a pygame window instead of the terminal. One terminal
column maps to ``pixels_per_column`` pixels and one row to ``pixels_per_row``,
so the layout matches the terminal version cell for cell.

Controls:
    Arrow Keys / WASD - Change direction
    Q / ESC           - Quit
"""

import logging
from collections import deque

import pygame

from .cell import Color, Direction
from .events import DirectionKey, OtherKey, QuitKey
from .game import Game

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

COLOR_BG = (15, 15, 26)      # Dark background

# Colors (R, G, B)
PALETTE = {
    Color.RED:     (255, 82, 82),
    Color.BLUE:    (60, 90, 200),
    Color.WHITE:   (220, 220, 220),
    Color.GREEN:   (0, 230, 118),
    Color.MAGENTA: (220, 80, 220),
}

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}

QUIT_KEYS = {pygame.K_ESCAPE, pygame.K_q}


def translate_event(event):
    """Map a pygame event to a game event, or None for non-key events."""
    if event.type == pygame.QUIT:
        return QuitKey()
    if event.type != pygame.KEYDOWN:
        return None
    if event.key in QUIT_KEYS:
        return QuitKey()
    direction = KEY_DIRECTIONS.get(event.key)
    if direction is not None:
        return DirectionKey(direction)
    return OtherKey(event.key)


def window_size(config) -> tuple[int, int]:
    gw, gh = config.ground_size
    ch = config.cell_size[1]
    return gw * config.pixels_per_column, (gh + ch) * config.pixels_per_row


# ---------------------------------------------------------------------------
# Collaborators
# ---------------------------------------------------------------------------

class WindowSurface:
    """Draws cells as rounded rectangles on a pygame surface."""

    def __init__(self, screen: pygame.Surface, pixels_per_column: int, pixels_per_row: int):
        self.screen = screen
        self.sx = pixels_per_column
        self.sy = pixels_per_row
        self.font = pygame.font.SysFont("Consolas", max(8, pixels_per_row - 4), bold=True)

    def to_rect(self, position, size) -> pygame.Rect:
        """Pixel rectangle of a cell, inset by one pixel on each side."""
        x, y = position
        w, h = size
        return pygame.Rect(x * self.sx + 1, y * self.sy + 1, w * self.sx - 2, h * self.sy - 2)

    def clear(self):
        self.screen.fill(COLOR_BG)

    def draw_cell(self, position, size, color):
        pygame.draw.rect(self.screen, PALETTE[color], self.to_rect(position, size), border_radius=4)

    def draw_text(self, position, text, color):
        x, y = position
        self.screen.blit(self.font.render(text, True, PALETTE[color]), (x * self.sx, y * self.sy))

    def flush(self):
        pygame.display.flip()


class WindowInput:
    """Buffers pygame key events as game events."""

    def __init__(self):
        self._queue = deque()

    def _pump(self):
        for event in pygame.event.get():
            translated = translate_event(event)
            if translated is not None:
                self._queue.append(translated)

    def poll(self, timeout: float) -> bool:
        # pygame's queue is always non-blocking; the timeout is not needed.
        if not self._queue:
            self._pump()
        return bool(self._queue)

    def read(self):
        while not self._queue:
            translated = translate_event(pygame.event.wait())
            if translated is not None:
                self._queue.append(translated)
        return self._queue.popleft()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def play(config) -> Game:
    """Play one game in a window and return the finished game."""
    pygame.init()
    try:
        size = window_size(config)
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption(config.title)
        logger.info("Window opened at %dx%d", *size)
        game = Game(config)
        surface = WindowSurface(screen, config.pixels_per_column, config.pixels_per_row)
        game.run(surface, WindowInput())
        return game
    finally:
        pygame.quit()
