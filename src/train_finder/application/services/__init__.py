"""Application services (use cases) for train queries."""

from train_finder.application.services.query_validator import validate_query
from train_finder.application.services.train_query_engine import MAX_RESULTS, find_trains
from train_finder.application.services.train_search_service import TrainSearchService

__all__ = [
    "MAX_RESULTS",
    "TrainSearchService",
    "find_trains",
    "validate_query",
]
