"""Domain models for train queries."""

from train_finder.domain.models.errors import (
    BadArrivalStationInputError,
    BadDepartureStationInputError,
    EmptyArrivalStationError,
    EmptyDepartureStationError,
    QueryValidationError,
    ScheduleDecodeError,
    UnsupportedCriteriaError,
)
from train_finder.domain.models.query import Criterion, Query
from train_finder.domain.models.train_record import TrainRecord

__all__ = [
    "BadArrivalStationInputError",
    "BadDepartureStationInputError",
    "Criterion",
    "EmptyArrivalStationError",
    "EmptyDepartureStationError",
    "Query",
    "QueryValidationError",
    "ScheduleDecodeError",
    "TrainRecord",
    "UnsupportedCriteriaError",
]
