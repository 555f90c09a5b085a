"""Tests for query validation."""

import pytest

from train_finder.application.services import validate_query
from train_finder.domain.models import (
    BadArrivalStationInputError,
    BadDepartureStationInputError,
    Criterion,
    EmptyArrivalStationError,
    EmptyDepartureStationError,
    Query,
    QueryValidationError,
    UnsupportedCriteriaError,
)


@pytest.mark.parametrize(
    ("criterion_raw", "expected"),
    [
        ("price", Criterion.PRICE),
        ("arrival-time", Criterion.ARRIVAL_TIME),
        ("departure-time", Criterion.DEPARTURE_TIME),
    ],
)
def test_valid_input_returns_query(criterion_raw: str, expected: Criterion) -> None:
    """Given valid raw strings, when validating, then a typed Query is returned."""
    query = validate_query("1902", "1929", criterion_raw)

    assert query == Query(departure_station_id=1902, arrival_station_id=1929, criterion=expected)


def test_surrounding_whitespace_is_ignored() -> None:
    """Given input lines with whitespace, when validating, then it is stripped."""
    query = validate_query(" 1902\n", "1929 ", "\tprice\n")

    assert query.departure_station_id == 1902
    assert query.arrival_station_id == 1929
    assert query.criterion is Criterion.PRICE


def test_station_id_one_is_valid() -> None:
    """Given station id 1, when validating, then it is accepted."""
    query = validate_query("1", "1", "price")

    assert query.departure_station_id == 1
    assert query.arrival_station_id == 1


def test_explicit_plus_sign_is_valid() -> None:
    """Given ids with a leading plus sign, when validating, then they parse as integers."""
    query = validate_query("+5", "+1929", "price")

    assert query.departure_station_id == 5
    assert query.arrival_station_id == 1929


def test_largest_64_bit_station_id_is_valid() -> None:
    """Given the largest signed 64-bit id, when validating, then it is accepted."""
    query = validate_query("9223372036854775807", "1929", "price")

    assert query.departure_station_id == 2**63 - 1


@pytest.mark.parametrize(
    ("departure", "arrival", "criterion", "error"),
    [
        ("", "1929", "price", EmptyDepartureStationError),
        ("   ", "1929", "price", EmptyDepartureStationError),
        ("serg", "1922", "price", BadDepartureStationInputError),
        ("0", "1929", "price", BadDepartureStationInputError),
        ("-5", "1929", "price", BadDepartureStationInputError),
        ("12.5", "1929", "price", BadDepartureStationInputError),
        ("1902", "", "price", EmptyArrivalStationError),
        ("1902", "serg", "price", BadArrivalStationInputError),
        ("1902", "0", "price", BadArrivalStationInputError),
        ("1" * 5000, "1929", "price", BadDepartureStationInputError),
        ("1902", "1" * 5000, "price", BadArrivalStationInputError),
        ("9223372036854775808", "1929", "price", BadDepartureStationInputError),
        ("1902", "9223372036854775808", "price", BadArrivalStationInputError),
        ("1902", "1929", "awef", UnsupportedCriteriaError),
        ("1902", "1929", "", UnsupportedCriteriaError),
        ("1902", "1929", "Price", UnsupportedCriteriaError),
        ("1902", "1929", "ARRIVAL-TIME", UnsupportedCriteriaError),
    ],
)
def test_invalid_input_raises_specific_error(
    departure: str, arrival: str, criterion: str, error: type[QueryValidationError]
) -> None:
    """Given one invalid field, when validating, then the matching error is raised."""
    with pytest.raises(error):
        validate_query(departure, arrival, criterion)


@pytest.mark.parametrize(
    ("departure", "arrival", "criterion", "error"),
    [
        ("", "", "", EmptyDepartureStationError),
        ("", "serg", "awef", EmptyDepartureStationError),
        ("serg", "", "awef", BadDepartureStationInputError),
        ("1902", "", "awef", EmptyArrivalStationError),
        ("1902", "", "departure", EmptyArrivalStationError),
        ("1902", "serg", "awef", BadArrivalStationInputError),
    ],
)
def test_first_failing_check_wins(
    departure: str, arrival: str, criterion: str, error: type[QueryValidationError]
) -> None:
    """Given several invalid fields, when validating, then the earliest check is reported."""
    with pytest.raises(error):
        validate_query(departure, arrival, criterion)


def test_errors_are_value_errors_with_messages() -> None:
    """Given an empty departure, when validating, then the error reads like the CLI message."""
    with pytest.raises(ValueError, match="^empty departure station$"):
        validate_query("", "1929", "price")
