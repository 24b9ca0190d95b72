"""Exception taxonomy for the grazing simulation."""

from __future__ import annotations


class SimulationError(Exception):
    """Base class for all errors raised by grazing_sim."""


class ConfigurationError(SimulationError, ValueError):
    """Invalid construction parameters. Raised before any tick runs."""


class OutOfRangeError(SimulationError, IndexError):
    """Grid addressed outside its bounds, or a negative biomass value was set."""
