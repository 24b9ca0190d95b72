"""Typed read-only views of simulation state.

External collaborators (display, export) read the engine only through these
frozen records, never through mutable handles on the grid or the grazers.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class GridStats:
    """Summary statistics of the biomass field at one point in time."""

    n_cells: int
    total: int
    minimum: int
    maximum: int
    mean: float


@dataclass(frozen=True)
class GrazerState:
    """Immutable snapshot of a single grazer."""

    x: float
    y: float
    row: int
    col: int
    size: int
    store: int


@dataclass(frozen=True)
class TickStats:
    """Counters recorded after one completed tick."""

    tick: int
    n_grazers: int
    births: int
    deaths: int
    total_births: int
    total_deaths: int
    total_biomass: int
    min_biomass: int
    max_biomass: int


@dataclass(frozen=True, eq=False)
class SimulationSnapshot:
    """Everything a display needs to draw the current tick."""

    tick: int
    total_births: int
    total_deaths: int
    biomass: np.ndarray
    """Read-only copy of the biomass raster, shape (nrows, ncols)."""
    grazers: tuple[GrazerState, ...]

    @property
    def positions(self) -> tuple[tuple[float, float], ...]:
        return tuple((g.x, g.y) for g in self.grazers)
