"""Train query domain model."""

from dataclasses import dataclass
from enum import Enum


class Criterion(str, Enum):
    """Ranking key for a train query."""

    PRICE = "price"
    ARRIVAL_TIME = "arrival-time"
    DEPARTURE_TIME = "departure-time"


@dataclass(frozen=True)
class Query:
    """A validated request for the best trains between two stations.

    Departure and arrival may be the same station.
    """

    departure_station_id: int
    arrival_station_id: int
    criterion: Criterion

    def __post_init__(self) -> None:
        if self.departure_station_id < 1 or self.arrival_station_id < 1:
            raise ValueError("station ids must be positive integers")
