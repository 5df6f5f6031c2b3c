import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from tickets_analyzer._errors import TicketsStructureError
from tickets_analyzer.schema import ParseFailure, ParseResult, Ticket, parse_timestamp

logger = logging.getLogger(__name__)

STRING_FIELDS = ("carrier", "origin", "destination")
TIMESTAMP_FIELDS = {
    "departure": ("departure_date", "departure_time"),
    "arrival": ("arrival_date", "arrival_time"),
}


@dataclass
class ParseOutcome:
    tickets: list[Ticket] = field(default_factory=list)
    failures: list[ParseFailure] = field(default_factory=list)


def extract_ticket_records(root: Any) -> list:
    """
    Locates the raw ticket records in a parsed JSON document.

    Args:
        root: The parsed JSON value.

    Returns:
        The list stored under the "tickets" key.

    Raises:
        TicketsStructureError: If the root is not an object or has no "tickets" array.
    """
    if not isinstance(root, Mapping):
        raise TicketsStructureError(
            f"Top-level JSON value must be an object, got {type(root).__name__}"
        )
    if "tickets" not in root:
        raise TicketsStructureError("Key 'tickets' not found in JSON document")

    records = root["tickets"]
    if not isinstance(records, list):
        raise TicketsStructureError(
            f"'tickets' must be an array, got {type(records).__name__}"
        )
    return records


def _require_string(record: Mapping, key: str) -> str:
    if key not in record:
        raise ValueError(f"missing field '{key}'")
    value = record[key]
    if not isinstance(value, str):
        raise ValueError(f"field '{key}' must be a string, got {type(value).__name__}")
    return value


def _require_price(record: Mapping) -> int:
    if "price" not in record:
        raise ValueError("missing field 'price'")
    value = record["price"]
    # bool is a subclass of int but is never a valid price
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field 'price' must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"field 'price' must be non-negative, got {value}")
    return value


def parse_ticket(record: Any, index: int) -> ParseResult:
    """
    Converts one raw record into a Ticket.

    Args:
        record: The raw record from the "tickets" array.
        index: 1-based position of the record, used in the failure reason.

    Returns:
        A Ticket on success, otherwise a ParseFailure naming the problem.
    """
    if not isinstance(record, Mapping):
        return ParseFailure(index, f"expected an object, got {type(record).__name__}")

    try:
        fields = {}
        for key in STRING_FIELDS:
            value = _require_string(record, key)
            if not value:
                raise ValueError(f"field '{key}' must not be empty")
            fields[key] = value

        fields["price"] = _require_price(record)

        for name, (date_key, time_key) in TIMESTAMP_FIELDS.items():
            fields[name] = parse_timestamp(
                _require_string(record, date_key), _require_string(record, time_key)
            )
    except ValueError as e:
        return ParseFailure(index, str(e))

    return Ticket(**fields)


def parse_tickets(records: list) -> ParseOutcome:
    """
    Parses every raw record, skipping the invalid ones.

    Invalid records are reported on the diagnostic logger and never abort
    the batch. Valid tickets keep their original order.
    """
    outcome = ParseOutcome()
    for index, record in enumerate(records, start=1):
        result = parse_ticket(record, index)
        if isinstance(result, ParseFailure):
            logger.warning(f"Skipping invalid ticket #{result.index}: {result.reason}")
            outcome.failures.append(result)
        else:
            outcome.tickets.append(result)

    logger.info(
        f"Parsed {len(outcome.tickets)} tickets, skipped {len(outcome.failures)}"
    )
    return outcome
