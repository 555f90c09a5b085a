"""Command-line interface for finding the best trains between two stations."""

import argparse
import json
import logging
import sys
from typing import Any, TextIO

from pydantic import ValidationError

from train_finder.adapters.config import AppConfig
from train_finder.adapters.schedule import JsonScheduleRepository
from train_finder.application.services import TrainSearchService
from train_finder.domain.models import QueryValidationError, ScheduleDecodeError, TrainRecord

logger = logging.getLogger(__name__)

_TIME_FORMAT = "%H:%M:%S"


def format_train(train: TrainRecord) -> str:
    """Format a train as a single human-readable line."""
    return (
        f"Train {train.train_id}: {train.departure_station_id} -> {train.arrival_station_id}, "
        f"departs {train.departure_time:{_TIME_FORMAT}}, "
        f"arrives {train.arrival_time:{_TIME_FORMAT}}, "
        f"price {train.price:.2f}"
    )


def train_to_dict(train: TrainRecord) -> dict[str, Any]:
    """Convert a train to a dict using the schedule's wire field names."""
    return {
        "trainId": train.train_id,
        "departureStationId": train.departure_station_id,
        "arrivalStationId": train.arrival_station_id,
        "price": train.price,
        "arrivalTime": train.arrival_time.strftime(_TIME_FORMAT),
        "departureTime": train.departure_time.strftime(_TIME_FORMAT),
    }


def _prompt(question: str, stream: TextIO) -> str:
    """Ask a question on stderr and read one answer line from the stream."""
    print(question, file=sys.stderr)
    return stream.readline().strip()


def _setup_argparse() -> argparse.ArgumentParser:
    """Set up argument parser."""
    parser = argparse.ArgumentParser(
        description="Find the best 3 trains between two stations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Cheapest trains from station 1902 to station 1929
  train-finder --from 1902 --to 1929 --criteria price

  # Earliest arrivals, as JSON, from a specific schedule file
  train-finder --from 1902 --to 1929 --criteria arrival-time --json --data-file data.json

  # Missing values are asked for interactively
  train-finder
        """,
    )
    parser.add_argument("--from", dest="departure", help="Departure station id")
    parser.add_argument("--to", dest="arrival", help="Arrival station id")
    parser.add_argument(
        "--criteria",
        dest="criterion",
        help="Ranking criterion: price, arrival-time or departure-time",
    )
    parser.add_argument("--data-file", help="Path to the schedule JSON file")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    return parser


def _print_result(
    trains: list[TrainRecord], departure: str, arrival: str, output_format: str
) -> None:
    """Print the search result in the requested format."""
    if output_format == "json":
        print(json.dumps([train_to_dict(t) for t in trains], indent=2))
        return

    if not trains:
        print(f"No trains found from {departure.strip()} to {arrival.strip()}.")
        return

    for train in trains:
        print(format_train(train))


def main(argv: list[str] | None = None, stdin: TextIO | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = _setup_argparse().parse_args(argv)

    try:
        config = AppConfig()
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    stream = stdin if stdin is not None else sys.stdin
    departure = args.departure
    if departure is None:
        departure = _prompt("Departure station?", stream)
    arrival = args.arrival
    if arrival is None:
        arrival = _prompt("Arrival station?", stream)
    criterion = args.criterion
    if criterion is None:
        criterion = _prompt("Sort by: price, arrival-time, departure-time", stream)

    data_file = args.data_file or config.data_file
    output_format = "json" if args.json else config.output_format
    service = TrainSearchService(JsonScheduleRepository(data_file))

    try:
        trains = service.search(departure, arrival, criterion)
    except QueryValidationError as e:
        print(e, file=sys.stderr)
        return 1
    except (FileNotFoundError, ScheduleDecodeError) as e:
        logger.debug(f"Search failed on {data_file}", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    _print_result(trains, departure, arrival, output_format)
    return 0


def cli_main() -> None:
    """Entry point for the train-finder command."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
