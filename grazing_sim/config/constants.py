"""Centralized domain constants for the grazing simulation.

Default parameter values and magic numbers shared across modules live here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

RANDOM_SEED = 1
"""Default seed for the simulation random stream."""

N_ITERATIONS = 100
"""Default tick budget."""

NROWS = 100
"""Default number of grid rows."""

NCOLS = 100
"""Default number of grid columns."""

INITIAL_MAX_VEGETATION = 10
"""Ceiling hint for initial biomass. Not used by the initial draw."""

INITIAL_N_GRAZERS = 1000
"""Default starting population size."""

MIN_SIZE_GRAZER = 2
"""Default lower size bound for new grazers."""

MAX_SIZE_GRAZER = 9
"""Default upper size bound for new grazers (exclusive for initial draws)."""

INITIAL_VEGETATION_BOUND = 9
"""Initial cell biomass is drawn from [0, INITIAL_VEGETATION_BOUND)."""

VEGETATION_GROWTH = 1
"""Biomass added to every cell once per tick."""

MOVE_DRAW_BOUND = 10
"""Movement draws are taken from [0, MOVE_DRAW_BOUND)."""

MOVE_NEGATIVE_BELOW = 3
"""Draws below this value step towards the lower bound of an axis."""

MOVE_POSITIVE_ABOVE = 6
"""Draws above this value step towards the upper bound of an axis."""

DISPLAY_MIN = 0
"""Lower end of the display range for rescaled biomass."""

DISPLAY_MAX = 255
"""Upper end of the display range for rescaled biomass."""

FLUSH_THRESHOLD = 8_192
"""Flush grazer log rows to Parquet once this in-memory row count is reached."""

POSITION_SNAPSHOT_INTERVAL = 10
"""Record grazer positions every K ticks in the run engine."""
