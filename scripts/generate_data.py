"""
Synthetic dataset generator for Train Search.

Writes a deterministic pseudo-random `data.json` shaped train schedule: a JSON
array of objects with trainId, departureStationId, arrivalStationId, price,
arrivalTime and departureTime.
"""

from __future__ import annotations

import json
import random
import sys
import time
from pathlib import Path
from typing import Any, Dict, List

import typer

from train_search.domain.store import load_store

app = typer.Typer(help="Generate a synthetic train schedule dataset (JSON).")

SECONDS_PER_DAY = 24 * 60 * 60


def _format_seconds(total: int) -> str:
    total %= SECONDS_PER_DAY
    return f"{total // 3600:02d}:{total % 3600 // 60:02d}:{total % 60:02d}"


def _generate_trains(rows: int, stations: int, seed: int) -> List[Dict[str, Any]]:
    rng = random.Random(seed)
    trains: List[Dict[str, Any]] = []
    for train_id in range(1, rows + 1):
        departure_station = rng.randint(1, stations)
        arrival_station = rng.randint(1, stations)
        departure = rng.randrange(0, SECONDS_PER_DAY, 60)
        # Trips run 10 minutes to 6 hours; late trains wrap past midnight.
        arrival = departure + rng.randrange(10 * 60, 6 * 60 * 60, 60)
        trains.append(
            {
                "trainId": train_id,
                "departureStationId": departure_station,
                "arrivalStationId": arrival_station,
                "price": round(rng.uniform(5, 500), 2),
                "arrivalTime": _format_seconds(arrival),
                "departureTime": _format_seconds(departure),
            }
        )
    return trains


def _write_dataset(path: Path, trains: List[Dict[str, Any]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(trains, f, indent=1)


@app.command()
def main(
    rows: int = typer.Option(
        1_000,
        "--rows",
        "-r",
        min=0,
        help="Number of trains to generate.",
    ),
    stations: int = typer.Option(
        10,
        "--stations",
        "-s",
        min=1,
        help="Station ids are drawn from 1..stations.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path = typer.Option(
        Path("data.json"),
        "--output",
        "-o",
        help="Dataset output path.",
    ),
    verify: bool = typer.Option(
        True,
        "--verify/--no-verify",
        help="Decode the written file with the record store loader.",
    ),
) -> None:
    """
    Generate a synthetic train dataset and optionally verify it decodes.
    """
    start = time.perf_counter()
    typer.echo(f"Generating {rows:,} trains over {stations} stations -> {output} (seed={seed})")
    _write_dataset(output, _generate_trains(rows, stations, seed))
    typer.echo(f"Generation completed in {time.perf_counter() - start:.2f}s")

    if not verify:
        return

    store = load_store(output.read_bytes())
    typer.echo(f"Verified {len(store):,} records decode cleanly.")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
