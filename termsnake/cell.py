"""
termsnake - Cells

The atomic unit of the playfield. Every entity (snake segment, wall brick,
food) is a ``Cell``; two cells are the same cell when they sit at the same
position, whatever their size.
"""

from dataclasses import dataclass, field
from enum import Enum


class Direction(Enum):
    """Heading of the snake, valued by its unit step ``(dx, dy)``."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


class Color(Enum):
    """Colors a surface is asked to draw with."""
    RED = "red"
    BLUE = "blue"
    WHITE = "white"
    GREEN = "green"
    MAGENTA = "magenta"


@dataclass(frozen=True)
class Cell:
    """A rectangle of ``size`` (columns, rows) whose top-left is ``position``."""

    position: tuple[int, int]
    size: tuple[int, int] = field(default=(1, 1), compare=False)

    @property
    def x(self) -> int:
        return self.position[0]

    @property
    def y(self) -> int:
        return self.position[1]

    def translate(self, direction: Direction, distance: int = 1) -> "Cell":
        """Return a new cell ``distance`` cell-lengths away along ``direction``.

        No wraparound: leaving the playfield is the wall's business.
        """
        dx, dy = direction.delta
        x = self.position[0] + dx * distance * self.size[0]
        y = self.position[1] + dy * distance * self.size[1]
        return Cell((x, y), self.size)

    def equals(self, other: "Cell") -> bool:
        return self.position == other.position

    def render(self, surface, color: Color):
        """Draw this cell's rectangle on ``surface``."""
        surface.draw_cell(self.position, self.size, color)
