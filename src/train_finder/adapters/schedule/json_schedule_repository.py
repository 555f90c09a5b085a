"""JSON file adapter for the schedule repository port."""

import logging
from pathlib import Path

from train_finder.adapters.schedule.schedule_decoder import decode_schedule
from train_finder.domain.models.train_record import TrainRecord

logger = logging.getLogger(__name__)


class JsonScheduleRepository:
    """Loads the schedule from a JSON file on every call."""

    def __init__(self, path: str | Path) -> None:
        """Initialize with the path to the schedule JSON file."""
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load_records(self) -> list[TrainRecord]:
        """Read and decode the schedule file.

        Raises:
            FileNotFoundError: If the schedule file does not exist.
            ScheduleDecodeError: If the file content is not a valid schedule.
        """
        if not self._path.is_file():
            raise FileNotFoundError(f"Schedule file not found: {self._path}")

        logger.debug(f"Loading schedule from {self._path}")
        return decode_schedule(self._path.read_bytes())
