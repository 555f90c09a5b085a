"""Filtering and ranking of scheduled trains for a query."""

from collections.abc import Callable, Iterable
from typing import Any

from train_finder.domain.models.query import Criterion, Query
from train_finder.domain.models.train_record import TrainRecord

MAX_RESULTS = 3

_SORT_KEYS: dict[Criterion, Callable[[TrainRecord], Any]] = {
    Criterion.PRICE: lambda record: record.price,
    Criterion.ARRIVAL_TIME: lambda record: record.arrival_time,
    Criterion.DEPARTURE_TIME: lambda record: record.departure_time,
}


def find_trains(query: Query, records: Iterable[TrainRecord]) -> list[TrainRecord]:
    """Return the best trains for a query.

    Keeps records whose departure and arrival stations both match the query,
    sorts them ascending by the query criterion with the train id as
    tie-break, and returns at most MAX_RESULTS of them. No match yields an
    empty list.
    """
    matching = [
        record
        for record in records
        if record.departure_station_id == query.departure_station_id
        and record.arrival_station_id == query.arrival_station_id
    ]

    key = _SORT_KEYS[query.criterion]
    # sorted() is stable; equal keys fall back to the id, never to input order
    ranked = sorted(matching, key=lambda record: (key(record), record.train_id))

    return ranked[:MAX_RESULTS]
