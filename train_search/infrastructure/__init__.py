"""
Infrastructure package for Train Search.

Centralizes storage concerns (reading the dataset file). Keep this layer
focused on I/O, decoupled from the query engine.
"""

from train_search.infrastructure.dataset_source import (
    load_store_from_path,
    read_dataset_bytes,
    resolve_dataset_path,
)

__all__ = [
    "load_store_from_path",
    "read_dataset_bytes",
    "resolve_dataset_path",
]
