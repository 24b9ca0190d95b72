"""Grazer agent: a mobile consumer that eats, grows, reproduces and starves.

Each tick a live grazer runs ``eat -> grow -> move``. A grazer never
inspects another grazer; it touches the vegetation grid only through
point accessors for the cell under its current position.

``store`` is a plain signed integer. Movement charges one unit per axis
step without a floor, so it can go transiently negative.
"""

from __future__ import annotations

from dataclasses import dataclass

from grazing_sim.config.constants import (
    MOVE_DRAW_BOUND,
    MOVE_NEGATIVE_BELOW,
    MOVE_POSITIVE_ABOVE,
)
from grazing_sim.domain.random_stream import RandomStream
from grazing_sim.domain.snapshot import GrazerState
from grazing_sim.domain.vegetation import VegetationGrid
from grazing_sim.errors import ConfigurationError


@dataclass(eq=False)
class Grazer:
    """A single grazer. Compared by identity, like any live agent."""

    x: float
    y: float
    min_size: int
    max_size: int
    size: int
    store: int

    def __post_init__(self) -> None:
        if not 1 <= self.min_size < self.max_size:
            raise ConfigurationError("grazer sizes must satisfy 1 <= min_size < max_size")
        if not 1 <= self.size <= self.max_size:
            raise ConfigurationError(f"size={self.size} outside [1, {self.max_size}]")
        # store may start negative; it must never exceed size.
        if self.store > self.size:
            raise ConfigurationError(f"store={self.store} exceeds size={self.size}")

    @classmethod
    def spawn(
        cls,
        grid: VegetationGrid,
        rng: RandomStream,
        min_size: int,
        max_size: int,
    ) -> Grazer:
        """Create a grazer at the centre of a random cell.

        Draw order: row, col, size in [min_size, max_size), store in
        [size // 2, size).
        """
        if min_size < 1 or min_size >= max_size:
            raise ConfigurationError("grazer sizes must satisfy 1 <= min_size < max_size")
        row = rng.next_int(grid.nrows)
        col = rng.next_int(grid.ncols)
        x, y = grid.cell_center(row, col)
        size = rng.next_int_between(min_size, max_size)
        store = rng.next_int_between(size // 2, size)
        return cls(x=x, y=y, min_size=min_size, max_size=max_size, size=size, store=store)

    @property
    def alive(self) -> bool:
        return self.size > 0

    def act(self, grid: VegetationGrid, rng: RandomStream) -> Grazer | None:
        """Run one tick of behavior and return the offspring, if any.

        A grazer that dies while eating takes no further action.
        """
        self.eat(grid)
        if not self.alive:
            return None
        offspring = self.grow()
        self.move(grid, rng)
        return offspring

    def eat(self, grid: VegetationGrid) -> None:
        """Eat from the current cell, or starve/shrink if it is bare."""
        row, col = grid.cell_at(self.x, self.y)
        v = grid.get(row, col)
        capacity = self.size - self.store
        if v > 0:
            if v >= capacity:
                grid.set(row, col, v - capacity)
                self.store = self.size
            else:
                grid.set(row, col, 0)
                self.store += v
        elif self.store > 0:
            self.store -= 1
        else:
            self.size -= 1

    def grow(self) -> Grazer | None:
        """Reproduce at full size with a full store, then grow if the store is full.

        On reproduction the parent's size is halved and its store divided by
        three; the offspring starts with exactly the same values. The
        store-full growth check runs afterwards regardless.
        """
        offspring = None
        if self.size == self.max_size and self.store == self.max_size:
            self.size //= 2
            self.store //= 3
            offspring = Grazer(
                x=self.x,
                y=self.y,
                min_size=self.min_size,
                max_size=self.max_size,
                size=self.size,
                store=self.store,
            )
        if self.store == self.size:
            self.size += 1
            self.store //= 2
        return offspring

    def move(self, grid: VegetationGrid, rng: RandomStream) -> None:
        """Random step on each axis, clamped to the grid rectangle.

        Each axis draws from [0, 10): below 3 steps down, above 6 steps up,
        anything else stays. Every step taken costs one unit of store.
        """
        step = _axis_step(rng)
        if step:
            self.x = min(max(self.x + step, grid.xmin), grid.xmax)
            self.store -= 1
        step = _axis_step(rng)
        if step:
            self.y = min(max(self.y + step, grid.ymin), grid.ymax)
            self.store -= 1

    def cell(self, grid: VegetationGrid) -> tuple[int, int]:
        return grid.cell_at(self.x, self.y)

    def state(self, grid: VegetationGrid) -> GrazerState:
        row, col = self.cell(grid)
        return GrazerState(
            x=self.x, y=self.y, row=row, col=col, size=self.size, store=self.store
        )


def _axis_step(rng: RandomStream) -> int:
    """Return -1, 0 or +1 from one movement draw."""
    draw = rng.next_int(MOVE_DRAW_BOUND)
    if draw < MOVE_NEGATIVE_BELOW:
        return -1
    if draw > MOVE_POSITIVE_ABOVE:
        return 1
    return 0
