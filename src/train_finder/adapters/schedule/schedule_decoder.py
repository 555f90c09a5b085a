"""Decoder for schedule JSON into TrainRecord objects.

Decoding runs in two stages: the raw JSON is validated into RawTrainRecord
DTOs that keep the times as text, then each DTO is mapped field by field into
a TrainRecord with parse_time_of_day doing the only conversion. Any failure
rejects the whole schedule.
"""

import logging
import re
from collections.abc import Mapping, Sequence
from datetime import time
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from train_finder.domain.models.errors import ScheduleDecodeError
from train_finder.domain.models.train_record import TrainRecord

logger = logging.getLogger(__name__)

_TIME_OF_DAY_PATTERN = re.compile(r"([0-9]{2}):([0-9]{2}):([0-9]{2})")


class RawTrainRecord(BaseModel):
    """A schedule entry exactly as it appears in the JSON source."""

    # Aliases are matched exactly; wrongly cased keys count as missing
    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")

    train_id: int = Field(alias="trainId")
    departure_station_id: int = Field(alias="departureStationId")
    arrival_station_id: int = Field(alias="arrivalStationId")
    price: float = Field(alias="price", ge=0, allow_inf_nan=False)
    arrival_time: str = Field(alias="arrivalTime")
    departure_time: str = Field(alias="departureTime")

    def to_domain(self) -> TrainRecord:
        """Map to a TrainRecord, parsing both time-of-day fields."""
        return TrainRecord(
            train_id=self.train_id,
            departure_station_id=self.departure_station_id,
            arrival_station_id=self.arrival_station_id,
            price=self.price,
            arrival_time=parse_time_of_day(self.arrival_time),
            departure_time=parse_time_of_day(self.departure_time),
        )


_RAW_SCHEDULE_ADAPTER = TypeAdapter(list[RawTrainRecord])


def parse_time_of_day(text: str) -> time:
    """Parse a zero-padded 24-hour ``HH:MM:SS`` string into a time of day.

    Raises:
        ValueError: If the text is not exactly in that format or out of range.
    """
    match = _TIME_OF_DAY_PATTERN.fullmatch(text)
    if not match:
        raise ValueError(f"time of day must be HH:MM:SS, got {text!r}")
    hour, minute, second = (int(part) for part in match.groups())
    # time() rejects out-of-range parts such as hour 25
    return time(hour, minute, second)


def _validate_raw(raw: bytes | str | Sequence[Mapping[str, Any]]) -> list[RawTrainRecord]:
    """Validate the schedule source into raw DTOs."""
    if isinstance(raw, (bytes, bytearray, str)):
        return _RAW_SCHEDULE_ADAPTER.validate_json(raw)
    entries = [dict(entry) if isinstance(entry, Mapping) else entry for entry in raw]
    return _RAW_SCHEDULE_ADAPTER.validate_python(entries)


def decode_schedule(raw: bytes | str | Sequence[Mapping[str, Any]]) -> list[TrainRecord]:
    """Decode a schedule into train records, preserving source order.

    Args:
        raw: JSON text or bytes holding an array of entries, or an already
            parsed sequence of entry mappings.

    Returns:
        One TrainRecord per entry, in source order.

    Raises:
        ScheduleDecodeError: If any entry is malformed. No records are returned.
    """
    try:
        raw_records = _validate_raw(raw)
    except ValidationError as e:
        logger.error(f"Schedule failed validation with {e.error_count()} error(s)")
        raise ScheduleDecodeError(f"invalid schedule: {e}") from e

    records: list[TrainRecord] = []
    for index, raw_record in enumerate(raw_records):
        try:
            records.append(raw_record.to_domain())
        except ValueError as e:
            logger.error(f"Schedule entry {index} (train {raw_record.train_id}) has bad time: {e}")
            raise ScheduleDecodeError(
                f"invalid schedule entry {index} (train {raw_record.train_id}): {e}"
            ) from e

    logger.debug(f"Decoded {len(records)} scheduled train(s)")
    return records
