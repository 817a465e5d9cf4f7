"""
termsnake - Collaborator contracts

The game never talks to a terminal or a window directly. It reads key events
from an ``InputSource`` and draws on a ``Surface``; ``terminal`` and
``window`` provide the real ones, tests provide fakes.
"""

from dataclasses import dataclass
from typing import Protocol, Union

from .cell import Color, Direction


@dataclass(frozen=True)
class DirectionKey:
    direction: Direction


@dataclass(frozen=True)
class QuitKey:
    pass


@dataclass(frozen=True)
class OtherKey:
    """Any key the game does not care about."""
    code: object = None


Event = Union[DirectionKey, QuitKey, OtherKey]


class InputSource(Protocol):
    def poll(self, timeout: float) -> bool:
        """Return True when an event can be read without blocking."""
        ...

    def read(self) -> Event:
        ...


class Surface(Protocol):
    def clear(self):
        ...

    def draw_cell(self, position: tuple[int, int], size: tuple[int, int], color: Color):
        ...

    def draw_text(self, position: tuple[int, int], text: str, color: Color):
        ...

    def flush(self):
        """Push everything drawn since ``clear`` to the screen."""
        ...
