"""
Dataset source for Train Search.

Reads the train schedule dataset from local storage in a single call and hands
the bytes to the record store decoder. This is the only module that touches
the filesystem for dataset loading.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from train_search.config import get_settings
from train_search.domain.store import RecordStore, load_store
from train_search.exceptions import DatasetNotFoundError
from train_search.utils.logging import get_logger

log = get_logger(__name__)


def resolve_dataset_path(path: Optional[Path | str] = None) -> Path:
    """Explicit path if given, otherwise the configured `data_path`."""
    return Path(path) if path is not None else Path(get_settings().data_path)


def read_dataset_bytes(path: Optional[Path | str] = None) -> bytes:
    """
    Read the whole dataset file.

    Raises
    ------
    DatasetNotFoundError
        If the file does not exist or cannot be read.
    """
    dataset_path = resolve_dataset_path(path)
    try:
        data = dataset_path.read_bytes()
    except OSError as exc:
        raise DatasetNotFoundError(
            f"cannot read dataset '{dataset_path}': {exc.strerror or exc}"
        ) from exc
    log.debug("Read dataset", extra={"path": str(dataset_path), "bytes": len(data)})
    return data


def load_store_from_path(path: Optional[Path | str] = None) -> RecordStore:
    """Read and decode the dataset into a RecordStore."""
    dataset_path = resolve_dataset_path(path)
    store = load_store(read_dataset_bytes(dataset_path))
    log.info(
        f"Loaded {len(store)} train record(s) from {dataset_path}",
        extra={"path": str(dataset_path), "records": len(store)},
    )
    return store


__all__ = ["load_store_from_path", "read_dataset_bytes", "resolve_dataset_path"]
