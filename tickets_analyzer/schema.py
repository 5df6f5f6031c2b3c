# tickets_analyzer/schema.py

import re
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Union

# dd.mm.yy H:mm, e.g. "12.05.18 16:20" or "12.05.18 9:05"
TIMESTAMP_PATTERN = re.compile(r"(\d{2})\.(\d{2})\.(\d{2}) (\d{1,2}):(\d{2})", re.ASCII)
CENTURY_BASE = 2000


def parse_timestamp(date_str: str, time_str: str) -> datetime:
    """
    Parses a ticket date ("dd.mm.yy") and time ("H:mm") into a datetime.

    Two-digit years map to 2000-2099. Raises ValueError for anything that
    does not match the format or is not a real calendar date/time.
    """
    text = f"{date_str} {time_str}"
    match = TIMESTAMP_PATTERN.fullmatch(text)
    if match is None:
        raise ValueError(f"'{text}' does not match format 'dd.mm.yy H:mm'")

    day, month, year, hour, minute = (int(part) for part in match.groups())
    try:
        return datetime(CENTURY_BASE + year, month, day, hour, minute)
    except ValueError as e:
        raise ValueError(f"'{text}' is not a valid date/time: {e}") from e


def format_date(value: datetime) -> str:
    return f"{value.day:02d}.{value.month:02d}.{value.year % 100:02d}"


def format_time(value: datetime) -> str:
    return f"{value.hour}:{value.minute:02d}"


@dataclass(frozen=True)
class Ticket:
    carrier: str
    origin: str
    destination: str
    departure: datetime
    arrival: datetime
    price: int

    @property
    def flight_duration(self) -> timedelta:
        """Arrival minus departure; negative when the input data is inconsistent."""
        return self.arrival - self.departure

    @property
    def duration_minutes(self) -> int:
        """Flight duration in whole minutes, truncated toward zero."""
        return int(self.flight_duration.total_seconds() / 60)

    def to_record(self) -> dict:
        """Serializes the ticket back into the raw input record shape."""
        return {
            "carrier": self.carrier,
            "origin": self.origin,
            "destination": self.destination,
            "price": self.price,
            "departure_date": format_date(self.departure),
            "departure_time": format_time(self.departure),
            "arrival_date": format_date(self.arrival),
            "arrival_time": format_time(self.arrival),
        }


@dataclass(frozen=True)
class ParseFailure:
    index: int  # 1-based position in the tickets array
    reason: str


ParseResult = Union[Ticket, ParseFailure]
