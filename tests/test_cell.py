"""Tests for cells and directions."""

import dataclasses
from unittest.mock import Mock

import pytest

from termsnake.cell import Cell, Color, Direction


class TestDirection:
    """Tests for the Direction enum."""

    @pytest.mark.parametrize("direction, opposite", [
        (Direction.UP, Direction.DOWN),
        (Direction.DOWN, Direction.UP),
        (Direction.LEFT, Direction.RIGHT),
        (Direction.RIGHT, Direction.LEFT),
    ])
    def test_opposite(self, direction, opposite):
        assert direction.opposite is opposite
        assert opposite.opposite is direction

    def test_up_decreases_row(self):
        """Row 0 is the top of the screen."""
        assert Direction.UP.delta == (0, -1)


class TestCell:
    """Tests for the Cell value type."""

    def test_equality_ignores_size(self):
        assert Cell((4, 2), (2, 1)) == Cell((4, 2), (1, 1))
        assert Cell((4, 2), (2, 1)).equals(Cell((4, 2), (3, 3)))
        assert Cell((4, 2)) != Cell((2, 4))

    def test_hash_follows_position(self):
        cells = {Cell((4, 2), (2, 1)), Cell((4, 2), (1, 1))}
        assert len(cells) == 1

    def test_cell_is_immutable(self):
        cell = Cell((4, 2), (2, 1))
        with pytest.raises(dataclasses.FrozenInstanceError):
            cell.position = (0, 0)

    @pytest.mark.parametrize("direction, expected", [
        (Direction.UP, (10, 4)),
        (Direction.DOWN, (10, 6)),
        (Direction.LEFT, (8, 5)),
        (Direction.RIGHT, (12, 5)),
    ])
    def test_translate_moves_one_cell_length(self, direction, expected):
        """Horizontal steps are a cell width, vertical steps a cell height."""
        cell = Cell((10, 5), (2, 1))
        moved = cell.translate(direction, 1)
        assert moved.position == expected
        assert moved.size == (2, 1)
        assert cell.position == (10, 5)

    def test_translate_distance(self):
        cell = Cell((10, 5), (2, 1))
        assert cell.translate(Direction.LEFT, 3).position == (4, 5)
        assert cell.translate(Direction.RIGHT, 0) == cell

    def test_translate_does_not_wrap(self):
        assert Cell((0, 0), (2, 1)).translate(Direction.LEFT).position == (-2, 0)

    def test_render_draws_rectangle(self):
        surface = Mock()
        Cell((6, 3), (2, 1)).render(surface, Color.RED)
        surface.draw_cell.assert_called_once_with((6, 3), (2, 1), Color.RED)

    def test_render_propagates_surface_errors(self):
        surface = Mock()
        surface.draw_cell.side_effect = OSError("broken pipe")
        with pytest.raises(OSError):
            Cell((6, 3)).render(surface, Color.RED)
