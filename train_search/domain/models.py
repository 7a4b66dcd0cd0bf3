"""
Domain models for Train Search.

Defines the train schedule record as it appears in the dataset (`data.json`),
the date-less time-of-day value its arrival/departure fields decode into, and
the closed set of ranking criteria a query can use.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, Field, GetCoreSchemaHandler, StrictInt
from pydantic_core import core_schema

TIME_OF_DAY_FORMAT = "HH:MM:SS"
_TIME_OF_DAY_RE = re.compile(r"([0-9]{2}):([0-9]{2}):([0-9]{2})")


@dataclass(frozen=True, order=True)
class TimeOfDay:
    """
    Wall-clock time without a date component.

    Instances order by (hour, minute, second), so two times compare purely by
    their clock value.
    """

    hour: int
    minute: int
    second: int

    def __post_init__(self) -> None:
        if not 0 <= self.hour <= 23:
            raise ValueError(f"hour out of range: {self.hour}")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"minute out of range: {self.minute}")
        if not 0 <= self.second <= 59:
            raise ValueError(f"second out of range: {self.second}")

    @classmethod
    def parse(cls, text: str) -> TimeOfDay:
        """Parse the exact `HH:MM:SS` form; anything else raises ValueError."""
        match = _TIME_OF_DAY_RE.fullmatch(text)
        if match is None:
            raise ValueError(f"time {text!r} does not match {TIME_OF_DAY_FORMAT}")
        hour, minute, second = (int(part) for part in match.groups())
        return cls(hour, minute, second)

    @classmethod
    def _coerce(cls, value: Any) -> TimeOfDay:
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"time of day must be a {TIME_OF_DAY_FORMAT} string")
        return cls.parse(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        # Decoded from and serialized back to the HH:MM:SS string form.
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.__str__, when_used="always"
            ),
        )

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"


class Criterion(str, Enum):
    """Ranking key for a train query."""

    PRICE = "price"
    ARRIVAL_TIME = "arrival-time"
    DEPARTURE_TIME = "departure-time"

    def __str__(self) -> str:
        return self.value


class TrainRecord(BaseModel):
    """
    One scheduled trip.

    Field aliases mirror the dataset's camelCase keys. Station ids are not
    required to differ and the price sign is not checked.
    """

    train_id: StrictInt = Field(..., alias="trainId", description="Train identifier.")
    departure_station_id: StrictInt = Field(
        ..., alias="departureStationId", description="Station the train leaves from."
    )
    arrival_station_id: StrictInt = Field(
        ..., alias="arrivalStationId", description="Station the train arrives at."
    )
    price: float = Field(..., strict=True, allow_inf_nan=False, description="Ticket price.")
    arrival_time: TimeOfDay = Field(..., alias="arrivalTime", description="Arrival time of day.")
    departure_time: TimeOfDay = Field(
        ..., alias="departureTime", description="Departure time of day."
    )

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "extra": "ignore",
    }

    def to_payload(self) -> Dict[str, Any]:
        """Dataset-shaped dict (camelCase keys, `HH:MM:SS` times)."""
        return self.model_dump(by_alias=True, mode="json")


__all__ = ["Criterion", "TIME_OF_DAY_FORMAT", "TimeOfDay", "TrainRecord"]
