"""Dense regrowing biomass raster mapped onto a continuous rectangle.

Invariant: every cell value is >= 0 at all times. Consumption goes through
``set``/``set_at``, which reject negative values, and ``grow_all`` only adds.
"""

from __future__ import annotations

import numpy as np

from grazing_sim.config.constants import (
    DISPLAY_MAX,
    DISPLAY_MIN,
    INITIAL_VEGETATION_BOUND,
    VEGETATION_GROWTH,
)
from grazing_sim.domain.random_stream import RandomStream
from grazing_sim.domain.snapshot import GridStats
from grazing_sim.errors import ConfigurationError, OutOfRangeError


class VegetationGrid:
    """``nrows x ncols`` integer biomass cells over ``[xmin,xmax] x [ymin,ymax]``.

    Rows are indexed from ``ymin`` and columns from ``xmin``; each cell is a
    square of side ``cellsize``.
    """

    def __init__(
        self,
        nrows: int,
        ncols: int,
        values: np.ndarray | None = None,
        xmin: float = 0.0,
        ymin: float = 0.0,
        cellsize: float = 1.0,
    ) -> None:
        if nrows < 1 or ncols < 1:
            raise ConfigurationError("grid dimensions must be >= 1")
        if cellsize <= 0:
            raise ConfigurationError("cellsize must be > 0")
        if values is None:
            data = np.zeros((nrows, ncols), dtype=np.int64)
        else:
            data = np.array(values, dtype=np.int64)
            if data.shape != (nrows, ncols):
                raise ConfigurationError(
                    f"values shape {data.shape} does not match ({nrows}, {ncols})"
                )
            if (data < 0).any():
                raise OutOfRangeError("biomass values must be >= 0")
        self.nrows = nrows
        self.ncols = ncols
        self.cellsize = float(cellsize)
        self.xmin = float(xmin)
        self.ymin = float(ymin)
        self.xmax = self.xmin + ncols * self.cellsize
        self.ymax = self.ymin + nrows * self.cellsize
        self._values = data

    @classmethod
    def random(
        cls,
        nrows: int,
        ncols: int,
        rng: RandomStream,
        bound: int = INITIAL_VEGETATION_BOUND,
    ) -> VegetationGrid:
        """Create a grid with each cell drawn from [0, bound) in row-major order."""
        grid = cls(nrows, ncols)
        for row in range(nrows):
            for col in range(ncols):
                grid._values[row, col] = rng.next_int(bound)
        return grid

    @classmethod
    def filled(cls, nrows: int, ncols: int, value: int) -> VegetationGrid:
        """Create a grid with every cell set to ``value``."""
        _require_int(value, "biomass value")
        if value < 0:
            raise OutOfRangeError("biomass values must be >= 0")
        return cls(nrows, ncols, np.full((nrows, ncols), value, dtype=np.int64))

    # ------------------------------------------------------------------
    # Addressing
    # ------------------------------------------------------------------

    def contains(self, x: float, y: float) -> bool:
        return self.xmin <= x <= self.xmax and self.ymin <= y <= self.ymax

    def cell_at(self, x: float, y: float) -> tuple[int, int]:
        """Resolve a coordinate to the ``(row, col)`` of the containing cell.

        Points on the upper edges belong to the last row/column.
        """
        if not self.contains(x, y):
            raise OutOfRangeError(
                f"({x}, {y}) outside [{self.xmin}, {self.xmax}] x [{self.ymin}, {self.ymax}]"
            )
        col = min(int((x - self.xmin) // self.cellsize), self.ncols - 1)
        row = min(int((y - self.ymin) // self.cellsize), self.nrows - 1)
        return row, col

    def cell_center(self, row: int, col: int) -> tuple[float, float]:
        """Return the ``(x, y)`` coordinate of the centre of a cell."""
        self._check_index(row, col)
        half = self.cellsize / 2
        return (
            self.xmin + col * self.cellsize + half,
            self.ymin + row * self.cellsize + half,
        )

    def _check_index(self, row: int, col: int) -> None:
        if not (0 <= row < self.nrows and 0 <= col < self.ncols):
            raise OutOfRangeError(
                f"cell ({row}, {col}) outside [0, {self.nrows}) x [0, {self.ncols})"
            )

    # ------------------------------------------------------------------
    # Point accessors
    # ------------------------------------------------------------------

    def get(self, row: int, col: int) -> int:
        self._check_index(row, col)
        return int(self._values[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        self._check_index(row, col)
        _require_int(value, "biomass value")
        if value < 0:
            raise OutOfRangeError(f"biomass value must be >= 0, got {value}")
        self._values[row, col] = value

    def get_at(self, x: float, y: float) -> int:
        return self.get(*self.cell_at(x, y))

    def set_at(self, x: float, y: float, value: int) -> None:
        self.set(*self.cell_at(x, y), value)

    # ------------------------------------------------------------------
    # Whole-grid operations
    # ------------------------------------------------------------------

    def grow_all(self, amount: int = VEGETATION_GROWTH) -> None:
        """Add ``amount`` to every cell."""
        _require_int(amount, "growth amount")
        if amount < 0:
            raise OutOfRangeError("growth amount must be >= 0")
        self._values += amount

    @property
    def values(self) -> np.ndarray:
        """Read-only view of the biomass raster."""
        view = self._values.view()
        view.flags.writeable = False
        return view

    def snapshot(self) -> np.ndarray:
        """Read-only copy of the biomass raster, detached from later ticks."""
        copy = self._values.copy()
        copy.flags.writeable = False
        return copy

    def stats(self) -> GridStats:
        return GridStats(
            n_cells=int(self._values.size),
            total=int(self._values.sum()),
            minimum=int(self._values.min()),
            maximum=int(self._values.max()),
            mean=float(self._values.mean()),
        )

    def rescaled(self, low: int = DISPLAY_MIN, high: int = DISPLAY_MAX) -> np.ndarray:
        """Map current min..max linearly onto [low, high] for display.

        Values are truncated toward zero and clamped to the display range.
        A flat grid maps to ``low`` everywhere. The grid is not modified.
        """
        minv = int(self._values.min())
        maxv = int(self._values.max())
        if maxv == minv:
            scaled = np.full(self._values.shape, low, dtype=np.int64)
        else:
            fraction = (self._values - minv) / float(maxv - minv)
            scaled = np.trunc(fraction * (high - low)).astype(np.int64) + low
        return np.clip(scaled, DISPLAY_MIN, DISPLAY_MAX)

    def __repr__(self) -> str:
        return (
            f"VegetationGrid(nrows={self.nrows}, ncols={self.ncols}, "
            f"x=[{self.xmin}, {self.xmax}], y=[{self.ymin}, {self.ymax}])"
        )


def _require_int(value: object, label: str) -> None:
    """Reject anything the int64 raster would silently truncate or coerce."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{label} must be an integer, got {value!r}")
