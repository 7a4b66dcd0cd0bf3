"""
Record store: the decoded, read-only collection of train records.

`load_store` is a pure decode of a JSON byte buffer. It either yields every
record in source order or raises `DatasetFormatError`; there is no partial load.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import List, Union, overload

from pydantic import TypeAdapter, ValidationError

from train_search.domain.models import TrainRecord
from train_search.exceptions import DatasetFormatError
from train_search.utils.logging import get_logger

log = get_logger(__name__)

_RECORDS_ADAPTER: TypeAdapter[List[TrainRecord]] = TypeAdapter(List[TrainRecord])


class RecordStore(Sequence[TrainRecord]):
    """
    Immutable sequence of TrainRecord in insertion order.

    Holds a tuple internally, so it can be shared across threads for
    concurrent read-only queries.
    """

    __slots__ = ("_records",)

    def __init__(self, records: Iterable[TrainRecord] = ()) -> None:
        self._records: tuple[TrainRecord, ...] = tuple(records)

    @overload
    def __getitem__(self, index: int) -> TrainRecord: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[TrainRecord, ...]: ...

    def __getitem__(self, index):
        return self._records[index]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[TrainRecord]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"RecordStore({len(self._records)} records)"


def load_store(data: Union[bytes, str]) -> RecordStore:
    """
    Decode a JSON array of train objects into a RecordStore.

    Parameters
    ----------
    data : bytes | str
        Buffer holding the dataset, e.g. the contents of `data.json`.

    Raises
    ------
    DatasetFormatError
        If the buffer is not a JSON array of well-formed records, or any
        arrival/departure time is not `HH:MM:SS`.
    """
    try:
        records = _RECORDS_ADAPTER.validate_json(data)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        detail = f"{first['msg']} at {location}" if location else first["msg"]
        raise DatasetFormatError(
            f"invalid train dataset ({exc.error_count()} error(s)): {detail}"
        ) from exc

    log.debug("Decoded train dataset", extra={"records": len(records)})
    return RecordStore(records)


__all__ = ["RecordStore", "load_store"]
