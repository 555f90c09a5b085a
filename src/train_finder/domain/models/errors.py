"""Domain errors for query validation and schedule decoding."""


class QueryValidationError(ValueError):
    """Caller-supplied query input is invalid."""

    message = "invalid query"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class EmptyDepartureStationError(QueryValidationError):
    message = "empty departure station"


class BadDepartureStationInputError(QueryValidationError):
    message = "bad departure station input"


class EmptyArrivalStationError(QueryValidationError):
    message = "empty arrival station"


class BadArrivalStationInputError(QueryValidationError):
    message = "bad arrival station input"


class UnsupportedCriteriaError(QueryValidationError):
    message = "unsupported criteria"


class ScheduleDecodeError(ValueError):
    """The schedule source could not be decoded into train records."""
