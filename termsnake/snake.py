"""
termsnake - Snake

The snake is an ordered body of cells, head first, plus a heading. It knows
how to step forward and how to tell whether its head ran into something;
deciding what happens next is up to the game.
"""

from collections import deque

from .cell import Cell, Color, Direction


class Snake:
    """
    A snake on the playfield.

    Attributes:
        body: deque of cells from head at index 0 to tail at the end
        heading: direction the next step will go
        last_step: direction the body last moved in (where the neck is)
    """

    def __init__(self, head_position: tuple[int, int], heading: Direction,
                 length: int = 3, cell_size: tuple[int, int] = (1, 1)):
        if length < 1:
            raise ValueError("a snake needs at least one cell")
        head = Cell(head_position, cell_size)
        behind = heading.opposite
        self.body = deque(head.translate(behind, i) for i in range(length))
        self.heading = heading
        self.last_step = heading

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self):
        return iter(self.body)

    def __repr__(self):
        return f"<Snake head={self.head().position} len={len(self)} heading={self.heading.name}>"

    # ----- Movement --------------------------------------------------------

    def head(self) -> Cell:
        return self.body[0]

    def peek_head(self) -> Cell:
        """Where the head lands on the next step."""
        return self.head().translate(self.heading, 1)

    def _push_head(self):
        self.body.appendleft(self.peek_head())
        self.last_step = self.heading

    def grow_body(self):
        """Step forward keeping the tail (after eating)."""
        self._push_head()

    def move_body(self):
        """Step forward dropping the tail."""
        self._push_head()
        self.body.pop()

    def set_heading(self, direction: Direction) -> bool:
        """Turn towards ``direction`` unless it would reverse the snake.

        Returns True when the heading changed.
        """
        if direction is self.heading.opposite:
            return False
        changed = direction is not self.heading
        self.heading = direction
        return changed

    # ----- Collisions ------------------------------------------------------

    def check_bite_self(self) -> bool:
        head = self.head()
        return any(cell == head for cell in list(self.body)[1:])

    def check_bite_food(self, food: Cell) -> bool:
        return self.head() == food

    def check_overlap_food(self, food: Cell) -> bool:
        """True when ``food`` sits on any body cell, head included."""
        return food in self.body

    def check_collide_wall(self, wall) -> bool:
        return wall.contains(self.head())

    # ----- Rendering -------------------------------------------------------

    def render(self, surface, color: Color):
        for cell in self.body:
            cell.render(surface, color)
