from __future__ import annotations

import sys
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from train_search.config import Settings, get_settings
from train_search.engine import available_criteria, find_trains, top
from train_search.exceptions import TrainSearchError
from train_search.infrastructure.dataset_source import load_store_from_path
from train_search.reporter import print_json_results, print_results
from train_search.utils.logging import configure_logging, get_logger
from train_search.validation import parse_criterion, parse_station_id

app = typer.Typer(help="Find the best scheduled trains between two stations.")
log = get_logger(__name__)


class OutputFormat(str, Enum):
    JSON = "json"
    TABLE = "table"


def _ask(message: str, color: str) -> str:
    return typer.prompt(typer.style(message, fg=color), prompt_suffix="\n")


def _load_settings() -> Settings:
    """Effective settings; a bad environment value exits 1 with a one-line error."""
    try:
        return get_settings()
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        typer.secho(
            f"invalid settings: {first['msg']} ({location})", fg=typer.colors.RED, err=True
        )
        raise typer.Exit(code=1) from exc


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = _load_settings()
    typer.echo(
        f"data={settings.data_path} | top_n={settings.top_n} "
        f"default_criterion={settings.default_criterion or '-'} | "
        f"env={settings.app_env} log_level={settings.log_level}"
    )


@app.command()
def criteria() -> None:
    """
    List the supported ranking criteria.
    """
    typer.echo("Available criteria: " + ", ".join(available_criteria()))


@app.command()
def search(
    departure: Optional[str] = typer.Option(
        None,
        "--departure",
        "-d",
        help="Departure station id (prompted for when omitted).",
    ),
    arrival: Optional[str] = typer.Option(
        None,
        "--arrival",
        "-a",
        help="Arrival station id (prompted for when omitted).",
    ),
    criterion: Optional[str] = typer.Option(
        None,
        "--criterion",
        "-c",
        help="Ranking criterion: price, arrival-time or departure-time.",
    ),
    top_n: Optional[int] = typer.Option(
        None,
        "--top",
        "-n",
        min=1,
        help="Number of trains to show (default from settings).",
    ),
    data: Optional[Path] = typer.Option(
        None,
        "--data",
        help="Dataset path (default from settings).",
    ),
    output: OutputFormat = typer.Option(
        OutputFormat.JSON,
        "--format",
        "-f",
        help="Output format.",
    ),
) -> None:
    """
    Search trains between two stations and print the best matches.
    """
    settings = _load_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    if departure is None:
        departure = _ask("Please enter the departure station.", typer.colors.GREEN)
    if arrival is None:
        arrival = _ask("Please enter the station of arrival.", typer.colors.BLUE)
    if criterion is None:
        criterion = settings.default_criterion or _ask(
            "Please enter the criteria to sort search result.", typer.colors.GREEN
        )

    try:
        arrival_id = parse_station_id(arrival, "arrival")
        departure_id = parse_station_id(departure, "departure")
        ranking = parse_criterion(criterion)
        store = load_store_from_path(data)
        results = top(find_trains(store, departure_id, arrival_id, ranking), top_n or settings.top_n)
    except TrainSearchError as exc:
        log.debug(f"Search failed: {exc.message}", extra={"code": exc.code})
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    if output is OutputFormat.TABLE:
        print_results(results, criterion=ranking)
    else:
        print_json_results(results)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
