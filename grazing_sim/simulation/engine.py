"""Run engine: drive one simulation to completion and persist its logs."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from grazing_sim.config.constants import FLUSH_THRESHOLD, POSITION_SNAPSHOT_INTERVAL
from grazing_sim.config.types import (
    DEFAULT_BOUNDS,
    ParameterBounds,
    SimulationConfig,
    SimulationResult,
)
from grazing_sim.io.schemas import (
    GRAZER_LOG_COLUMNS,
    GRAZER_LOG_SCHEMA,
    RUN_PAYLOAD_SCHEMA_VERSION,
    TICK_LOG_COLUMNS,
    TICK_LOG_SCHEMA,
)
from grazing_sim.simulation.controller import Simulation

logger = logging.getLogger(__name__)


def _deterministic_run_id(config: SimulationConfig) -> str:
    """Build reproducible run ID stable across runs for identical configs."""
    return (
        f"seed{config.random_seed}_{config.nrows}x{config.ncols}"
        f"_n{config.initial_n_grazers}_it{config.n_iterations}"
        f"_{config.iteration_mode.value}"
    )


def _flush_grazer_columns(
    grazer_columns: dict[str, list[int | float | str]],
    grazer_log_path: Path,
    grazer_writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Append buffered grazer rows to the position log and empty the buffers."""
    if not grazer_columns["run_id"]:
        return grazer_writer
    if grazer_writer is None:
        grazer_writer = pq.ParquetWriter(grazer_log_path, GRAZER_LOG_SCHEMA)
    grazer_writer.write_table(pa.Table.from_pydict(grazer_columns, schema=GRAZER_LOG_SCHEMA))
    for values in grazer_columns.values():
        values.clear()
    return grazer_writer


def _record_positions(
    sim: Simulation,
    run_id: str,
    tick: int,
    grazer_columns: dict[str, list[int | float | str]],
) -> None:
    for index, grazer in enumerate(sim.population):
        state = grazer.state(sim.grid)
        grazer_columns["run_id"].append(run_id)
        grazer_columns["tick"].append(tick)
        grazer_columns["grazer_index"].append(index)
        grazer_columns["x"].append(state.x)
        grazer_columns["y"].append(state.y)
        grazer_columns["row"].append(state.row)
        grazer_columns["col"].append(state.col)
        grazer_columns["size"].append(state.size)
        grazer_columns["store"].append(state.store)


def run_simulation(
    config: SimulationConfig | None = None,
    out_dir: Path | str = Path("out"),
    run_id: str | None = None,
    position_interval: int = POSITION_SNAPSHOT_INTERVAL,
    bounds: ParameterBounds | None = DEFAULT_BOUNDS,
) -> SimulationResult:
    """Run one seeded simulation and persist JSON/Parquet outputs.

    Writes ``logs/tick_log.parquet`` (one row per tick),
    ``logs/grazer_log.parquet`` (live grazers every ``position_interval``
    ticks and at the final tick) and ``runs/<run_id>.json``.
    """
    if position_interval < 1:
        raise ValueError("position_interval must be >= 1")

    sim = Simulation(config, bounds=bounds)
    cfg = sim.config
    run_id = run_id or _deterministic_run_id(cfg)

    out_dir = Path(out_dir)
    logs_dir = out_dir / "logs"
    runs_dir = out_dir / "runs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    runs_dir.mkdir(parents=True, exist_ok=True)
    tick_log_path = logs_dir / "tick_log.parquet"
    grazer_log_path = logs_dir / "grazer_log.parquet"
    logger.info("starting run %s -> %s", run_id, out_dir)

    grazer_columns: dict[str, list[int | float | str]] = {
        name: [] for name in GRAZER_LOG_COLUMNS
    }
    grazer_writer: pq.ParquetWriter | None = None
    try:
        running = not sim.complete
        while running:
            running = sim.advance()
            tick = sim.history[-1].tick
            if (tick + 1) % position_interval == 0 or not running:
                _record_positions(sim, run_id, tick, grazer_columns)
            if len(grazer_columns["run_id"]) >= FLUSH_THRESHOLD:
                grazer_writer = _flush_grazer_columns(
                    grazer_columns=grazer_columns,
                    grazer_log_path=grazer_log_path,
                    grazer_writer=grazer_writer,
                )
        grazer_writer = _flush_grazer_columns(
            grazer_columns=grazer_columns,
            grazer_log_path=grazer_log_path,
            grazer_writer=grazer_writer,
        )
        if grazer_writer is None:
            pq.write_table(GRAZER_LOG_SCHEMA.empty_table(), grazer_log_path)
    finally:
        if grazer_writer is not None:
            grazer_writer.close()

    tick_columns: dict[str, list[int | str]] = {name: [] for name in TICK_LOG_COLUMNS}
    for stats in sim.history:
        tick_columns["run_id"].append(run_id)
        for name in TICK_LOG_COLUMNS[1:]:
            tick_columns[name].append(getattr(stats, name))
    pq.write_table(pa.Table.from_pydict(tick_columns, schema=TICK_LOG_SCHEMA), tick_log_path)

    grid_stats = sim.grid.stats()
    result = SimulationResult(
        run_id=run_id,
        ticks=sim.tick,
        n_grazers=len(sim.population),
        total_births=sim.total_births,
        total_deaths=sim.total_deaths,
        total_biomass=grid_stats.total,
        extinct=len(sim.population) == 0,
    )
    run_payload = {
        "run_id": run_id,
        "config": cfg.to_dict(),
        "result": {
            "ticks": result.ticks,
            "n_grazers": result.n_grazers,
            "total_births": result.total_births,
            "total_deaths": result.total_deaths,
            "total_biomass": result.total_biomass,
            "extinct": result.extinct,
        },
        "schema_version": RUN_PAYLOAD_SCHEMA_VERSION,
    }
    (runs_dir / f"{run_id}.json").write_text(
        json.dumps(run_payload, ensure_ascii=False, indent=2)
    )
    logger.info("finished run %s: %s", run_id, result)
    return result
