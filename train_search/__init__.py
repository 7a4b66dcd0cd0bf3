"""
Train Search - find the best scheduled trains between two stations.

This package loads a static dataset of train schedules and answers one query:
given a departure station, an arrival station, and a ranking criterion, return
the matching trains best first. It provides:

- A strictly decoded, read-only record store (`HH:MM:SS` times of day)
- A stateless filter-and-rank query engine with stable ordering
- Input validation, a typer CLI, and rich console output around that core
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from train_search.config import Settings, get_settings
from train_search.domain import Criterion, RecordStore, TimeOfDay, TrainRecord, load_store
from train_search.engine import available_criteria, find_trains, sort_key_for, top
from train_search.exceptions import (
    ConfigurationError,
    DatasetFormatError,
    DatasetNotFoundError,
    TrainSearchError,
)
from train_search.infrastructure import load_store_from_path
from train_search.utils.logging import configure_logging, get_logger
from train_search.validation import parse_criterion, parse_station_id

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Criterion",
    "RecordStore",
    "TimeOfDay",
    "TrainRecord",
    "load_store",
    "load_store_from_path",
    # Query engine
    "available_criteria",
    "find_trains",
    "sort_key_for",
    "top",
    # Validation
    "parse_criterion",
    "parse_station_id",
    # Errors
    "ConfigurationError",
    "DatasetFormatError",
    "DatasetNotFoundError",
    "TrainSearchError",
    # Logging
    "configure_logging",
    "get_logger",
]
