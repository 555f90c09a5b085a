"""Schedule source adapters."""

from train_finder.adapters.schedule.json_schedule_repository import JsonScheduleRepository
from train_finder.adapters.schedule.schedule_decoder import (
    RawTrainRecord,
    decode_schedule,
    parse_time_of_day,
)

__all__ = [
    "JsonScheduleRepository",
    "RawTrainRecord",
    "decode_schedule",
    "parse_time_of_day",
]
