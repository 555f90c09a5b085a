"""Schedule repository port."""

from typing import Protocol

from train_finder.domain.models.train_record import TrainRecord


class ScheduleRepository(Protocol):
    """Port for retrieving the full set of scheduled trains."""

    def load_records(self) -> list[TrainRecord]:
        """Load and decode every train in the schedule."""
        ...
