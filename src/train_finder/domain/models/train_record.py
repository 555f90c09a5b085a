"""Train record domain model."""

from dataclasses import dataclass
from datetime import time


@dataclass(frozen=True)
class TrainRecord:
    """Represents a single scheduled train between two stations."""

    train_id: int
    departure_station_id: int
    arrival_station_id: int
    price: float
    arrival_time: time  # Time of day, no calendar date
    departure_time: time
