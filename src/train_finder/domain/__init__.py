"""Domain layer - core business logic and models."""

from train_finder.domain.models import Criterion, Query, TrainRecord
from train_finder.domain.ports import ScheduleRepository

__all__ = [
    "Criterion",
    "Query",
    "ScheduleRepository",
    "TrainRecord",
]
