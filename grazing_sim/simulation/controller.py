"""Simulation controller: owns the grid, the population and the tick counter.

State machine: Running while ``tick < n_iterations``, then Complete. Each
``advance`` call while Running performs one full tick:

1. clear the born/died staging lists;
2. let every live grazer act (eat, grow, move);
3. merge births into the live set;
4. add this tick's births and deaths to the cumulative counters;
5. grow every vegetation cell by one;
6. increment the tick.

``advance`` is synchronous and not re-entrant; callers must not invoke it
concurrently or read state from another thread while it runs.
"""

from __future__ import annotations

import logging

from grazing_sim.config.types import DEFAULT_BOUNDS, ParameterBounds, SimulationConfig
from grazing_sim.domain.population import Population
from grazing_sim.domain.random_stream import RandomStream
from grazing_sim.domain.snapshot import SimulationSnapshot, TickStats
from grazing_sim.domain.vegetation import VegetationGrid
from grazing_sim.errors import ConfigurationError

logger = logging.getLogger(__name__)


class Simulation:
    """Discrete-time grazing simulation built from one ``SimulationConfig``."""

    def __init__(
        self,
        config: SimulationConfig | None = None,
        bounds: ParameterBounds | None = DEFAULT_BOUNDS,
        *,
        grid: VegetationGrid | None = None,
        population: Population | None = None,
    ) -> None:
        """Build the grid and population from ``config``.

        ``bounds=None`` skips range checks. A prebuilt ``grid`` or
        ``population`` replaces the random one; its dimensions must match
        the config.
        """
        self.config = config or SimulationConfig()
        if bounds is not None:
            bounds.check(self.config)
        self.rng = RandomStream(self.config.random_seed)
        if grid is None:
            grid = VegetationGrid.random(self.config.nrows, self.config.ncols, self.rng)
        elif (grid.nrows, grid.ncols) != (self.config.nrows, self.config.ncols):
            raise ConfigurationError("grid dimensions do not match config")
        self.grid = grid
        if population is None:
            population = Population.seeded(
                self.grid,
                self.rng,
                n_grazers=self.config.initial_n_grazers,
                min_size=self.config.min_size_grazer,
                max_size=self.config.max_size_grazer,
            )
        else:
            for grazer in population:
                if not self.grid.contains(grazer.x, grazer.y):
                    raise ConfigurationError(
                        f"grazer at ({grazer.x}, {grazer.y}) outside "
                        f"[{self.grid.xmin}, {self.grid.xmax}] x [{self.grid.ymin}, {self.grid.ymax}]"
                    )
        self.population = population
        self.tick = 0
        self.total_births = 0
        self.total_deaths = 0
        self.history: list[TickStats] = []
        logger.info(
            "initialised %dx%d grid (%s) with %d grazers, seed=%d",
            self.config.nrows,
            self.config.ncols,
            self.grid.stats(),
            len(self.population),
            self.config.random_seed,
        )

    @property
    def complete(self) -> bool:
        return self.tick >= self.config.n_iterations

    def advance(self) -> bool:
        """Run one tick and return whether more ticks remain.

        Once Complete this is a no-op returning False.
        """
        if self.complete:
            return False
        population = self.population
        population.begin_tick()
        population.act_all(self.grid, self.rng, self.config.iteration_mode)
        population.commit()
        births = len(population.born)
        deaths = len(population.died)
        self.total_births += births
        self.total_deaths += deaths
        self.grid.grow_all()
        stats = self.grid.stats()
        self.history.append(
            TickStats(
                tick=self.tick,
                n_grazers=len(population),
                births=births,
                deaths=deaths,
                total_births=self.total_births,
                total_deaths=self.total_deaths,
                total_biomass=stats.total,
                min_biomass=stats.minimum,
                max_biomass=stats.maximum,
            )
        )
        logger.debug(
            "tick %d: %d grazers, %d births, %d deaths, biomass %s",
            self.tick,
            len(population),
            births,
            deaths,
            stats,
        )
        self.tick += 1
        if self.complete:
            logger.info(
                "run complete after %d ticks: %d grazers, %d births, %d deaths",
                self.tick,
                len(population),
                self.total_births,
                self.total_deaths,
            )
        return not self.complete

    def run(self) -> list[TickStats]:
        """Advance until Complete and return the per-tick history."""
        while self.advance():
            pass
        return self.history

    def snapshot(self) -> SimulationSnapshot:
        """Read-only view of the current tick for display or export."""
        return SimulationSnapshot(
            tick=self.tick,
            total_births=self.total_births,
            total_deaths=self.total_deaths,
            biomass=self.grid.snapshot(),
            grazers=tuple(g.state(self.grid) for g in self.population),
        )
