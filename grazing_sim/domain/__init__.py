"""Domain layer: random stream, vegetation grid, grazers, population, snapshots."""

from grazing_sim.domain.grazer import Grazer
from grazing_sim.domain.population import Population
from grazing_sim.domain.random_stream import RandomStream
from grazing_sim.domain.snapshot import (
    GrazerState,
    GridStats,
    SimulationSnapshot,
    TickStats,
)
from grazing_sim.domain.vegetation import VegetationGrid

__all__ = [
    "Grazer",
    "GrazerState",
    "GridStats",
    "Population",
    "RandomStream",
    "SimulationSnapshot",
    "TickStats",
    "VegetationGrid",
]
