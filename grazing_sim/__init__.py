"""Discrete-time grazing simulation: regrowing vegetation grazed by mobile agents."""

__version__ = "0.1.0"
