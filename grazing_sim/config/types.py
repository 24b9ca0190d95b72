"""Configuration dataclasses and parameter bounds for simulation runs.

All frozen dataclasses that parameterise a grazing simulation live here.
Structural checks run in ``__post_init__``; range checks against the
parameter bounds run when a controller is constructed.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Any

from grazing_sim.config.constants import (
    INITIAL_MAX_VEGETATION,
    INITIAL_N_GRAZERS,
    MAX_SIZE_GRAZER,
    MIN_SIZE_GRAZER,
    N_ITERATIONS,
    NCOLS,
    NROWS,
    RANDOM_SEED,
)
from grazing_sim.errors import ConfigurationError

__all__ = [
    "DEFAULT_BOUNDS",
    "IterationMode",
    "ParameterBounds",
    "SimulationConfig",
    "SimulationResult",
]

# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SimulationResult:
    """Top-level result for one completed run."""

    run_id: str
    ticks: int
    n_grazers: int
    total_births: int
    total_deaths: int
    total_biomass: int
    extinct: bool


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


class IterationMode(Enum):
    """How the live set is walked while grazers act within one tick."""

    INDEXED = "indexed"
    """Walk by position against the shrinking live list; a death skips its successor."""
    SNAPSHOT = "snapshot"
    """Walk a copy taken at tick start; every grazer alive at tick start acts once."""


@dataclass(frozen=True)
class SimulationConfig:
    """Runtime parameters for one grazing simulation."""

    random_seed: int = RANDOM_SEED
    n_iterations: int = N_ITERATIONS
    nrows: int = NROWS
    ncols: int = NCOLS
    initial_max_vegetation: int = INITIAL_MAX_VEGETATION
    """Ceiling hint only; initial biomass is always drawn from [0, 9)."""
    initial_n_grazers: int = INITIAL_N_GRAZERS
    min_size_grazer: int = MIN_SIZE_GRAZER
    max_size_grazer: int = MAX_SIZE_GRAZER
    iteration_mode: IterationMode = IterationMode.INDEXED

    def __post_init__(self) -> None:
        if self.nrows < 1 or self.ncols < 1:
            raise ConfigurationError("grid dimensions must be >= 1")
        if self.n_iterations < 0:
            raise ConfigurationError("n_iterations must be >= 0")
        if self.initial_n_grazers < 0:
            raise ConfigurationError("initial_n_grazers must be >= 0")
        if self.min_size_grazer < 1:
            raise ConfigurationError("min_size_grazer must be >= 1")
        if self.min_size_grazer >= self.max_size_grazer:
            raise ConfigurationError("min_size_grazer must be < max_size_grazer")
        if not isinstance(self.iteration_mode, IterationMode):
            raise ConfigurationError("iteration_mode must be an IterationMode")

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serialisable mapping of all parameters."""
        payload = asdict(self)
        payload["iteration_mode"] = self.iteration_mode.value
        return payload


@dataclass(frozen=True)
class ParameterBounds:
    """Inclusive ``(min, max)`` limits for each tunable parameter."""

    n_iterations: tuple[int, int] = (1, 10_000)
    initial_max_vegetation: tuple[int, int] = (2, 200_000)
    initial_n_grazers: tuple[int, int] = (1, 100_000)
    nrows: tuple[int, int] = (1, 1_000)
    ncols: tuple[int, int] = (1, 1_000)
    max_size_grazer: tuple[int, int] = (4, 100)
    min_size_grazer: tuple[int, int] = (2, 10)

    def __post_init__(self) -> None:
        for field in fields(self):
            low, high = getattr(self, field.name)
            if low > high:
                raise ConfigurationError(f"{field.name} bounds must satisfy min <= max")

    def check(self, config: SimulationConfig) -> None:
        """Raise ConfigurationError naming the first parameter outside its bounds."""
        for field in fields(self):
            low, high = getattr(self, field.name)
            value = getattr(config, field.name)
            if not low <= value <= high:
                raise ConfigurationError(f"{field.name}={value} outside [{low}, {high}]")


DEFAULT_BOUNDS = ParameterBounds()
"""Parameter limits applied by the controller unless the caller overrides them."""
