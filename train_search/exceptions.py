"""
Exception hierarchy for Train Search.

The core raises these to its immediate caller; the CLI is the only layer that
turns them into user-facing messages and exit codes.
"""

from __future__ import annotations


class TrainSearchError(Exception):
    """Base error carrying a short machine-friendly code."""

    def __init__(self, message: str, code: str = "INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class DatasetFormatError(TrainSearchError):
    """The dataset bytes could not be decoded into train records."""

    def __init__(self, message: str = "dataset is not well-formed") -> None:
        super().__init__(message, code="DATASET_FORMAT")


class DatasetNotFoundError(TrainSearchError):
    def __init__(self, message: str = "dataset could not be read") -> None:
        super().__init__(message, code="DATASET_NOT_FOUND")


class ConfigurationError(TrainSearchError, ValueError):
    """Rejected query input: unknown criterion, bad station id, bad top-N."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="CONFIGURATION")


__all__ = [
    "ConfigurationError",
    "DatasetFormatError",
    "DatasetNotFoundError",
    "TrainSearchError",
]
