"""
Query engine: filter a record store to one station pair and rank the matches.

Usage:
    from train_search.engine import find_trains, top

    results = find_trains(store, 10, 20, Criterion.PRICE)
    best = top(results, 3)

The engine is a pure function of its inputs. It never mutates the store and
keeps no state between calls, so a store may be queried from several threads.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Union

from train_search.domain.models import Criterion, TrainRecord
from train_search.exceptions import ConfigurationError
from train_search.utils.logging import get_logger

log = get_logger(__name__)

SortKey = Callable[[TrainRecord], Any]


def _sort_keys() -> Dict[Criterion, SortKey]:
    """Registry of sort keys, one per criterion."""
    return {
        Criterion.PRICE: lambda record: record.price,
        Criterion.ARRIVAL_TIME: lambda record: record.arrival_time,
        Criterion.DEPARTURE_TIME: lambda record: record.departure_time,
    }


def available_criteria() -> List[str]:
    """List supported criterion names."""
    return sorted(criterion.value for criterion in _sort_keys())


def as_criterion(criterion: Union[Criterion, str]) -> Criterion:
    """Accept a Criterion member or its pre-validated name."""
    try:
        return Criterion(criterion)
    except ValueError:
        raise ConfigurationError(
            f"unsupported criteria '{criterion}'. Available: {', '.join(available_criteria())}"
        ) from None


def sort_key_for(criterion: Union[Criterion, str]) -> SortKey:
    """Select the ascending sort key for a criterion."""
    return _sort_keys()[as_criterion(criterion)]


def matches(record: TrainRecord, departure_station_id: int, arrival_station_id: int) -> bool:
    """Exact match on both ends; a station-to-itself pair is allowed."""
    return (
        record.departure_station_id == departure_station_id
        and record.arrival_station_id == arrival_station_id
    )


def find_trains(
    store: Iterable[TrainRecord],
    departure_station_id: int,
    arrival_station_id: int,
    criterion: Union[Criterion, str],
) -> List[TrainRecord]:
    """
    Return every train between two stations, best first.

    Parameters
    ----------
    store : Iterable[TrainRecord]
        Loaded records, typically a RecordStore.
    departure_station_id : int
        Station the train must leave from.
    arrival_station_id : int
        Station the train must arrive at.
    criterion : Criterion | str
        Ranking key, as a member or its name. Ordering is ascending and
        stable, so trains with an equal key keep their dataset order.

    Returns
    -------
    List[TrainRecord]
        The full ranked list, empty when nothing matches. Truncation is up to
        the caller (see `top`).
    """
    criterion = as_criterion(criterion)
    key = sort_key_for(criterion)
    filtered = [
        record
        for record in store
        if matches(record, departure_station_id, arrival_station_id)
    ]
    # list.sort is stable.
    filtered.sort(key=key)

    log.info(
        f"Found {len(filtered)} train(s) from {departure_station_id} to {arrival_station_id}",
        extra={
            "departure_station_id": departure_station_id,
            "arrival_station_id": arrival_station_id,
            "criterion": criterion.value,
            "matches": len(filtered),
        },
    )
    return filtered


def top(results: List[TrainRecord], n: int) -> List[TrainRecord]:
    """First `n` results, or all of them when fewer are available."""
    if n < 1:
        raise ConfigurationError(f"top-N must be a positive integer, got {n}")
    return results[:n]


__all__ = [
    "as_criterion",
    "available_criteria",
    "find_trains",
    "matches",
    "sort_key_for",
    "top",
]
