"""
Domain package for Train Search.

Exports the record model, the time-of-day value type, the ranking criteria,
and the record store. Keep this package focused on data definitions and
decoding concerns.
"""

from train_search.domain.models import TIME_OF_DAY_FORMAT, Criterion, TimeOfDay, TrainRecord
from train_search.domain.store import RecordStore, load_store

__all__ = [
    "Criterion",
    "RecordStore",
    "TIME_OF_DAY_FORMAT",
    "TimeOfDay",
    "TrainRecord",
    "load_store",
]
