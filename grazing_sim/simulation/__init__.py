"""Simulation layer: tick controller and run engine with Parquet logs."""

from grazing_sim.simulation.controller import Simulation
from grazing_sim.simulation.engine import run_simulation

__all__ = [
    "Simulation",
    "run_simulation",
]
