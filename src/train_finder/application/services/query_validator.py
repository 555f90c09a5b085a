"""Validation of raw query input into a typed Query."""

import re

from train_finder.domain.models.errors import (
    BadArrivalStationInputError,
    BadDepartureStationInputError,
    EmptyArrivalStationError,
    EmptyDepartureStationError,
    UnsupportedCriteriaError,
)
from train_finder.domain.models.query import Criterion, Query

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_MAX_STATION_ID = 2**63 - 1


def _parse_station_id(raw: str) -> int | None:
    """Parse a positive station id, or return None if the text is not one."""
    if not _INTEGER_PATTERN.fullmatch(raw):
        return None
    try:
        value = int(raw)
    except ValueError:
        # Too many digits to convert
        return None
    return value if 1 <= value <= _MAX_STATION_ID else None


def validate_query(departure_raw: str, arrival_raw: str, criterion_raw: str) -> Query:
    """Turn three raw strings into a Query.

    Checks run in a fixed order and the first failing check wins, so
    ``validate_query("", "", "")`` reports the empty departure station.

    Args:
        departure_raw: Departure station id as typed by the caller.
        arrival_raw: Arrival station id as typed by the caller.
        criterion_raw: One of ``price``, ``arrival-time``, ``departure-time``.

    Returns:
        The validated query.

    Raises:
        QueryValidationError: One of its five subclasses for the first check that fails.
    """
    departure_raw = departure_raw.strip()
    arrival_raw = arrival_raw.strip()
    criterion_raw = criterion_raw.strip()

    if not departure_raw:
        raise EmptyDepartureStationError()
    departure_station_id = _parse_station_id(departure_raw)
    if departure_station_id is None:
        raise BadDepartureStationInputError()

    if not arrival_raw:
        raise EmptyArrivalStationError()
    arrival_station_id = _parse_station_id(arrival_raw)
    if arrival_station_id is None:
        raise BadArrivalStationInputError()

    try:
        criterion = Criterion(criterion_raw)
    except ValueError:
        raise UnsupportedCriteriaError() from None

    return Query(
        departure_station_id=departure_station_id,
        arrival_station_id=arrival_station_id,
        criterion=criterion,
    )
