"""Train search use case."""

import logging

from train_finder.application.services.query_validator import validate_query
from train_finder.application.services.train_query_engine import find_trains
from train_finder.domain.models.train_record import TrainRecord
from train_finder.domain.ports.schedule_repository import ScheduleRepository

logger = logging.getLogger(__name__)


class TrainSearchService:
    """Service answering "best trains from A to B" questions against a schedule."""

    def __init__(self, schedule_repository: ScheduleRepository) -> None:
        """Initialize with a schedule repository."""
        self._schedule_repository = schedule_repository

    def search(self, departure_raw: str, arrival_raw: str, criterion_raw: str) -> list[TrainRecord]:
        """Validate raw input, load the schedule and return the best trains.

        Input is validated before the schedule is read, so invalid queries
        never touch the data source.

        Raises:
            QueryValidationError: If the input is invalid.
            ScheduleDecodeError: If the schedule cannot be decoded.
        """
        query = validate_query(departure_raw, arrival_raw, criterion_raw)
        logger.debug(
            f"Searching trains {query.departure_station_id} -> {query.arrival_station_id} "
            f"by {query.criterion.value}"
        )

        records = self._schedule_repository.load_records()
        result = find_trains(query, records)

        logger.info(
            f"Found {len(result)} train(s) from {query.departure_station_id} "
            f"to {query.arrival_station_id} out of {len(records)} scheduled"
        )
        return result
