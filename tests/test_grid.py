"""Tests for the Grid module."""

import numpy as np
import pytest

from power_snake.grid import Grid, WallMode


class TestGridInit:
    def test_default_dimensions(self):
        grid = Grid()
        assert grid.width == 25
        assert grid.height == 25
        assert grid.wall_mode == WallMode.SOLID

    def test_custom_dimensions(self):
        grid = Grid(width=10, height=8)
        assert grid.width == 10
        assert grid.height == 8
        assert grid.size == 80

    def test_minimum_size_enforced(self):
        with pytest.raises(ValueError, match="at least 8"):
            Grid(width=7, height=8)
        with pytest.raises(ValueError, match="at least 8"):
            Grid(width=8, height=7)


class TestGridBounds:
    def test_in_bounds(self):
        grid = Grid(width=10, height=10)
        assert grid.in_bounds((0, 0))
        assert grid.in_bounds((9, 9))
        assert not grid.in_bounds((-1, 0))
        assert not grid.in_bounds((0, 10))
        assert not grid.in_bounds((10, 0))

    def test_wrap(self):
        grid = Grid(width=10, height=8)
        assert grid.wrap((-1, 0)) == (9, 0)
        assert grid.wrap((0, -1)) == (0, 7)
        assert grid.wrap((10, 8)) == (0, 0)

    def test_normalize_solid_is_identity(self):
        grid = Grid(width=10, height=10, wall_mode=WallMode.SOLID)
        assert grid.normalize((-1, 12)) == (-1, 12)

    def test_normalize_wrap(self):
        grid = Grid(width=10, height=10, wall_mode=WallMode.WRAP)
        assert grid.normalize((-1, 12)) == (9, 2)

    def test_normalize_mode_override(self):
        grid = Grid(width=10, height=10, wall_mode=WallMode.SOLID)
        assert grid.normalize((10, -3), WallMode.WRAP) == (0, 7)

    def test_wrapped_cells_always_in_bounds(self):
        grid = Grid(width=9, height=11, wall_mode=WallMode.WRAP)
        for x in range(-20, 20):
            for y in range(-20, 20):
                assert grid.in_bounds(grid.normalize((x, y)))


class TestGridOccupancy:
    def test_occupancy_mask(self):
        grid = Grid(width=8, height=8)
        mask = grid.occupancy([(1, 2), (7, 7), (-1, 3)])
        assert mask.shape == (8, 8)
        assert mask[2, 1]
        assert mask[7, 7]
        assert np.count_nonzero(mask) == 2

    def test_free_cells(self):
        grid = Grid(width=8, height=8)
        free = grid.free_cells([(0, 0), (3, 4)])
        assert len(free) == 62
        assert (0, 0) not in free
        assert (3, 4) not in free
        assert (4, 3) in free


class TestGridSerialization:
    def test_to_dict(self):
        grid = Grid(width=12, height=9, wall_mode=WallMode.WRAP)
        assert grid.to_dict() == {"width": 12, "height": 9, "walls": "wrap"}
