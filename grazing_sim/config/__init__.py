"""Configuration layer: constants and typed config dataclasses."""

from grazing_sim.config.constants import (
    FLUSH_THRESHOLD,
    INITIAL_MAX_VEGETATION,
    INITIAL_N_GRAZERS,
    INITIAL_VEGETATION_BOUND,
    MAX_SIZE_GRAZER,
    MIN_SIZE_GRAZER,
    N_ITERATIONS,
    NCOLS,
    NROWS,
    POSITION_SNAPSHOT_INTERVAL,
    RANDOM_SEED,
)
from grazing_sim.config.types import (
    DEFAULT_BOUNDS,
    IterationMode,
    ParameterBounds,
    SimulationConfig,
    SimulationResult,
)

__all__ = [
    "DEFAULT_BOUNDS",
    "FLUSH_THRESHOLD",
    "INITIAL_MAX_VEGETATION",
    "INITIAL_N_GRAZERS",
    "INITIAL_VEGETATION_BOUND",
    "IterationMode",
    "MAX_SIZE_GRAZER",
    "MIN_SIZE_GRAZER",
    "N_ITERATIONS",
    "NCOLS",
    "NROWS",
    "POSITION_SNAPSHOT_INTERVAL",
    "ParameterBounds",
    "RANDOM_SEED",
    "SimulationConfig",
    "SimulationResult",
]
