"""Tests for grazing_sim.domain.vegetation module."""

from __future__ import annotations

import numpy as np
import pytest

from grazing_sim.config.constants import INITIAL_VEGETATION_BOUND
from grazing_sim.domain.random_stream import RandomStream
from grazing_sim.domain.vegetation import VegetationGrid
from grazing_sim.errors import ConfigurationError, OutOfRangeError


class TestVegetationGridCreate:
    def test_random_values_within_initial_bound(self) -> None:
        grid = VegetationGrid.random(20, 15, RandomStream(1))
        values = grid.values
        assert values.shape == (20, 15)
        assert values.min() >= 0
        assert values.max() < INITIAL_VEGETATION_BOUND

    def test_random_is_deterministic_per_seed(self) -> None:
        a = VegetationGrid.random(10, 10, RandomStream(4))
        b = VegetationGrid.random(10, 10, RandomStream(4))
        assert np.array_equal(a.values, b.values)

    def test_random_differs_across_seeds(self) -> None:
        a = VegetationGrid.random(10, 10, RandomStream(1))
        b = VegetationGrid.random(10, 10, RandomStream(2))
        assert not np.array_equal(a.values, b.values)

    def test_default_coordinate_rectangle(self) -> None:
        grid = VegetationGrid(4, 7)
        assert (grid.xmin, grid.xmax, grid.ymin, grid.ymax) == (0.0, 7.0, 0.0, 4.0)

    @pytest.mark.parametrize(("nrows", "ncols"), [(0, 3), (3, 0), (-1, 5)])
    def test_non_positive_dimensions_rejected(self, nrows: int, ncols: int) -> None:
        with pytest.raises(ConfigurationError):
            VegetationGrid(nrows, ncols)

    def test_mismatched_values_shape_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            VegetationGrid(2, 2, np.zeros((3, 2), dtype=np.int64))

    def test_negative_initial_values_rejected(self) -> None:
        with pytest.raises(OutOfRangeError):
            VegetationGrid(1, 2, np.array([[1, -1]]))
        with pytest.raises(OutOfRangeError):
            VegetationGrid.filled(2, 2, -3)


class TestCellAt:
    def test_interior_points(self) -> None:
        grid = VegetationGrid(3, 3)
        assert grid.cell_at(0.0, 0.0) == (0, 0)
        assert grid.cell_at(1.5, 1.5) == (1, 1)
        assert grid.cell_at(2.99, 0.5) == (0, 2)
        assert grid.cell_at(0.5, 2.0) == (2, 0)

    def test_upper_edges_resolve_to_last_cell(self) -> None:
        grid = VegetationGrid(3, 4)
        assert grid.cell_at(grid.xmax, grid.ymax) == (2, 3)
        assert grid.cell_at(grid.xmax, 0.2) == (0, 3)

    @pytest.mark.parametrize(("x", "y"), [(-0.1, 1.0), (1.0, -0.01), (3.01, 1.0), (1.0, 3.5)])
    def test_outside_rectangle_raises(self, x: float, y: float) -> None:
        grid = VegetationGrid(3, 3)
        with pytest.raises(OutOfRangeError):
            grid.cell_at(x, y)

    def test_offset_origin_and_cellsize(self) -> None:
        grid = VegetationGrid(2, 4, xmin=10.0, ymin=-2.0, cellsize=0.5)
        assert (grid.xmax, grid.ymax) == (12.0, -1.0)
        assert grid.cell_at(10.0, -2.0) == (0, 0)
        assert grid.cell_at(11.2, -1.0) == (1, 2)

    def test_cell_center_round_trips(self) -> None:
        grid = VegetationGrid(4, 5)
        for row in range(4):
            for col in range(5):
                assert grid.cell_at(*grid.cell_center(row, col)) == (row, col)
        assert grid.cell_center(1, 2) == (2.5, 1.5)

    def test_cell_center_out_of_range(self) -> None:
        with pytest.raises(OutOfRangeError):
            VegetationGrid(2, 2).cell_center(2, 0)


class TestPointAccessors:
    def test_get_set(self) -> None:
        grid = VegetationGrid(3, 3)
        grid.set(2, 1, 7)
        assert grid.get(2, 1) == 7
        assert isinstance(grid.get(2, 1), int)

    def test_set_zero_allowed(self) -> None:
        grid = VegetationGrid.filled(2, 2, 4)
        grid.set(0, 0, 0)
        assert grid.get(0, 0) == 0

    def test_set_negative_raises(self) -> None:
        grid = VegetationGrid.filled(2, 2, 4)
        with pytest.raises(OutOfRangeError):
            grid.set(0, 0, -1)
        assert grid.get(0, 0) == 4

    @pytest.mark.parametrize(("row", "col"), [(3, 0), (0, 3), (-1, 0), (0, -1)])
    def test_out_of_range_indices_raise(self, row: int, col: int) -> None:
        grid = VegetationGrid(3, 3)
        with pytest.raises(OutOfRangeError):
            grid.get(row, col)
        with pytest.raises(OutOfRangeError):
            grid.set(row, col, 1)

    @pytest.mark.parametrize("value", [2.7, 3.0, "4", True, None])
    def test_set_non_integer_rejected(self, value: object) -> None:
        grid = VegetationGrid.filled(2, 2, 4)
        with pytest.raises(TypeError):
            grid.set(0, 0, value)  # type: ignore[arg-type]
        assert grid.get(0, 0) == 4

    def test_set_numpy_integer_accepted(self) -> None:
        grid = VegetationGrid.filled(2, 2, 4)
        grid.set(1, 1, np.int64(9))
        assert grid.get(1, 1) == 9

    def test_filled_and_growth_reject_non_integer(self) -> None:
        with pytest.raises(TypeError):
            VegetationGrid.filled(2, 2, 1.5)  # type: ignore[arg-type]
        grid = VegetationGrid.filled(2, 2, 1)
        with pytest.raises(TypeError):
            grid.grow_all(0.5)  # type: ignore[arg-type]
        assert grid.values.tolist() == [[1, 1], [1, 1]]

    def test_out_of_range_is_index_error(self) -> None:
        with pytest.raises(IndexError):
            VegetationGrid(1, 1).get(1, 1)

    def test_coordinate_accessors(self) -> None:
        grid = VegetationGrid(3, 3)
        grid.set_at(2.5, 0.5, 6)
        assert grid.get(0, 2) == 6
        assert grid.get_at(2.9, 0.1) == 6


class TestGrowth:
    def test_grow_all_adds_one_everywhere(self) -> None:
        grid = VegetationGrid.random(6, 5, RandomStream(2))
        before = grid.snapshot()
        grid.grow_all()
        assert np.array_equal(grid.values, before + 1)

    def test_grow_all_negative_amount_rejected(self) -> None:
        grid = VegetationGrid.filled(2, 2, 0)
        with pytest.raises(OutOfRangeError):
            grid.grow_all(-1)


class TestReadSurface:
    def test_values_view_is_read_only(self) -> None:
        grid = VegetationGrid.filled(2, 2, 1)
        with pytest.raises(ValueError):
            grid.values[0, 0] = 5
        assert grid.get(0, 0) == 1

    def test_snapshot_is_detached(self) -> None:
        grid = VegetationGrid.filled(2, 2, 1)
        snap = grid.snapshot()
        grid.grow_all()
        assert snap[0, 0] == 1
        assert not snap.flags.writeable

    def test_stats(self) -> None:
        grid = VegetationGrid(2, 2, np.array([[0, 2], [4, 6]]))
        stats = grid.stats()
        assert stats.n_cells == 4
        assert stats.total == 12
        assert (stats.minimum, stats.maximum) == (0, 6)
        assert stats.mean == pytest.approx(3.0)

    def test_rescaled_linear_map(self) -> None:
        grid = VegetationGrid(2, 2, np.array([[0, 5], [10, 10]]))
        assert grid.rescaled().tolist() == [[0, 127], [255, 255]]

    def test_rescaled_offset_min(self) -> None:
        grid = VegetationGrid(1, 3, np.array([[4, 6, 8]]))
        assert grid.rescaled(0, 100).tolist() == [[0, 50, 100]]

    def test_rescaled_flat_grid(self) -> None:
        grid = VegetationGrid.filled(2, 3, 7)
        assert grid.rescaled().tolist() == [[0, 0, 0], [0, 0, 0]]

    def test_rescaled_clamps_to_display_range(self) -> None:
        grid = VegetationGrid(1, 2, np.array([[0, 1]]))
        assert grid.rescaled(0, 1000).tolist() == [[0, 255]]

    def test_rescaled_does_not_modify_grid(self) -> None:
        grid = VegetationGrid(1, 2, np.array([[3, 9]]))
        grid.rescaled()
        assert grid.values.tolist() == [[3, 9]]
