"""
termsnake - Wall

The fixed boundary of the playfield. Built once from the ground size and
never changed afterwards.
"""

from .cell import Cell, Color


class Wall:
    """Perimeter cells of a ``ground_size`` playfield.

    With cell size ``(cw, ch)`` the top row sits at ``y = ch``, the bottom row
    at ``y = ground_h``, the left column at ``x = cw`` and the right column at
    ``x = ground_w - cw``. Row 0 is left free for the score header.
    """

    def __init__(self, ground_size: tuple[int, int], cell_size: tuple[int, int]):
        self.ground_size = ground_size
        self.cell_size = cell_size

        gw, gh = ground_size
        cw, ch = cell_size
        cols, rows = gw // cw, gh // ch

        top = [(i * cw, ch) for i in range(1, cols)]
        bottom = [(i * cw, gh) for i in range(1, cols)]
        left = [(cw, i * ch) for i in range(2, rows)]
        right = [(gw - cw, i * ch) for i in range(2, rows)]

        self._cells = tuple(Cell(pos, cell_size) for pos in top + left + right + bottom)
        self._positions = frozenset(cell.position for cell in self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self):
        return iter(self._cells)

    def __contains__(self, cell: Cell) -> bool:
        return self.contains(cell)

    def contains(self, cell: Cell) -> bool:
        return cell.position in self._positions

    @property
    def cells(self) -> frozenset:
        return frozenset(self._cells)

    def interior(self) -> list[Cell]:
        """Every cell strictly inside the wall, row by row."""
        cw, ch = self.cell_size
        cols = self.ground_size[0] // cw
        rows = self.ground_size[1] // ch
        return [
            Cell((i * cw, j * ch), self.cell_size)
            for j in range(2, rows)
            for i in range(2, cols - 1)
            if (i * cw, j * ch) not in self._positions
        ]

    def render(self, surface, color: Color):
        for cell in self._cells:
            cell.render(surface, color)
