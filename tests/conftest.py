"""
Pytest configuration for Train Search.

Provides fixtures for:
- Dataset payloads and decoded record stores
- A dataset file on disk for CLI and source tests
- Settings isolation (environment overrides and cache reset)
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Generator, List

import pytest

from train_search.config import get_settings
from train_search.domain.store import RecordStore, load_store


def make_train(
    train_id: int,
    departure: int = 10,
    arrival: int = 20,
    price: float = 50.0,
    arrival_time: str = "09:00:00",
    departure_time: str = "08:00:00",
) -> Dict[str, Any]:
    return {
        "trainId": train_id,
        "departureStationId": departure,
        "arrivalStationId": arrival,
        "price": price,
        "arrivalTime": arrival_time,
        "departureTime": departure_time,
    }


@pytest.fixture
def train_factory():
    """Build one dataset-shaped train dict; defaults describe a 10 -> 20 trip."""
    return make_train


@pytest.fixture
def sample_trains() -> List[Dict[str, Any]]:
    """
    Two trains 10 -> 20 in opposite price/time order, plus noise on other pairs.
    """
    return [
        make_train(1, price=50.0, arrival_time="09:00:00", departure_time="08:00:00"),
        make_train(2, price=30.0, arrival_time="10:00:00", departure_time="08:30:00"),
        make_train(5, departure=20, arrival=10, price=10.0),
        make_train(6, departure=10, arrival=30, price=5.0),
    ]


@pytest.fixture
def sample_store(sample_trains: List[Dict[str, Any]]) -> RecordStore:
    return load_store(json.dumps(sample_trains).encode("utf-8"))


@pytest.fixture
def dataset_file(tmp_path: Path, sample_trains: List[Dict[str, Any]]) -> Path:
    path = tmp_path / "data.json"
    path.write_text(json.dumps(sample_trains), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def isolated_settings(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Generator[None, None, None]:
    """
    Keep tests independent of the developer's environment and `.env` file.
    """
    for name in (
        "TRAINS_DATA_PATH",
        "TRAINS_TOP_N",
        "TRAINS_DEFAULT_CRITERION",
        "APP_ENV",
        "LOG_LEVEL",
        "LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
