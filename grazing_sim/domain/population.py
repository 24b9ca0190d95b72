"""Live grazers plus the per-tick staging lists for births and deaths."""

from __future__ import annotations

from collections.abc import Iterator

from grazing_sim.config.types import IterationMode
from grazing_sim.domain.grazer import Grazer
from grazing_sim.domain.random_stream import RandomStream
from grazing_sim.domain.vegetation import VegetationGrid


class Population:
    """Insertion-ordered live set with ``born``/``died`` staging for one tick.

    Births are merged into ``live`` only by ``commit`` after every agent has
    acted. Deaths leave ``live`` immediately, during the act pass.
    """

    def __init__(self, grazers: list[Grazer] | None = None) -> None:
        self.live: list[Grazer] = list(grazers) if grazers is not None else []
        self.born: list[Grazer] = []
        self.died: list[Grazer] = []

    @classmethod
    def seeded(
        cls,
        grid: VegetationGrid,
        rng: RandomStream,
        n_grazers: int,
        min_size: int,
        max_size: int,
    ) -> Population:
        """Create ``n_grazers`` grazers at random cells."""
        return cls([Grazer.spawn(grid, rng, min_size, max_size) for _ in range(n_grazers)])

    def __len__(self) -> int:
        return len(self.live)

    def __iter__(self) -> Iterator[Grazer]:
        return iter(self.live)

    def begin_tick(self) -> None:
        self.born = []
        self.died = []

    def act_all(
        self,
        grid: VegetationGrid,
        rng: RandomStream,
        mode: IterationMode = IterationMode.INDEXED,
    ) -> None:
        """Ask each live grazer to act once, staging births and deaths."""
        if mode == IterationMode.SNAPSHOT:
            self._act_snapshot(grid, rng)
        else:
            self._act_indexed(grid, rng)

    def _act_indexed(self, grid: VegetationGrid, rng: RandomStream) -> None:
        """Walk ``live`` by position against its current length.

        A death removes the grazer at position ``j`` and ``j`` still advances,
        so the successor that slid into the vacated slot does not act this tick.
        """
        j = 0
        while j < len(self.live):
            grazer = self.live[j]
            self._act_one(grazer, grid, rng)
            if not grazer.alive:
                del self.live[j]
                self.died.append(grazer)
            j += 1

    def _act_snapshot(self, grid: VegetationGrid, rng: RandomStream) -> None:
        """Walk a copy of ``live`` so every grazer alive at tick start acts once."""
        dead: list[Grazer] = []
        for grazer in list(self.live):
            self._act_one(grazer, grid, rng)
            if not grazer.alive:
                dead.append(grazer)
        if dead:
            dead_ids = {id(g) for g in dead}
            self.live = [g for g in self.live if id(g) not in dead_ids]
            self.died.extend(dead)

    def _act_one(self, grazer: Grazer, grid: VegetationGrid, rng: RandomStream) -> None:
        offspring = grazer.act(grid, rng)
        if offspring is not None:
            self.born.append(offspring)

    def commit(self) -> None:
        """Append this tick's births to the live set."""
        self.live.extend(self.born)
