"""
Validation of raw user input into typed query parameters.

Runs before the query engine is invoked; the engine itself assumes its inputs
are already well-formed.
"""

from __future__ import annotations

import re

from train_search.domain.models import Criterion
from train_search.engine import as_criterion
from train_search.exceptions import ConfigurationError

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_station_id(raw: str, role: str) -> int:
    """
    Parse a station identifier entered by the user.

    `role` names the station in the error message ("departure" or "arrival").
    """
    text = raw.strip()
    if not _INTEGER_RE.fullmatch(text):
        raise ConfigurationError(f"bad {role} station input")
    return int(text)


def parse_criterion(raw: str) -> Criterion:
    """Exact, case-sensitive lookup in the closed criterion set."""
    return as_criterion(raw.strip())


__all__ = ["parse_criterion", "parse_station_id"]
