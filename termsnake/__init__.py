"""
termsnake - Snake for the terminal.

The game core (``Game``, ``Snake``, ``Wall``, ``Cell``) is independent of the
screen; ``termsnake.terminal`` and ``termsnake.window`` plug it into curses
and pygame.
"""

from .cell import Cell, Color, Direction
from .config import GameConfig
from .errors import BoardFullError, ConfigError, SnakeError, TerminalTooSmallError
from .events import DirectionKey, OtherKey, QuitKey
from .game import Game, GameState, Snapshot
from .snake import Snake
from .wall import Wall

__version__ = "0.1.0"

__all__ = [
    'Cell', 'Color', 'Direction',
    'GameConfig',
    'SnakeError', 'BoardFullError', 'ConfigError', 'TerminalTooSmallError',
    'DirectionKey', 'QuitKey', 'OtherKey',
    'Game', 'GameState', 'Snapshot',
    'Snake',
    'Wall',
]
