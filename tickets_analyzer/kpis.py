import logging
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Optional

import pandas as pd

from tickets_analyzer.schema import Ticket

logger = logging.getLogger(__name__)

TICKET_COLUMNS = [
    "carrier", "origin", "destination", "price", "departure", "arrival", "duration_minutes",
]


@dataclass
class RouteSummary:
    origin: str
    destination: str
    ticket_count: int
    min_by_carrier: dict[str, timedelta] = field(default_factory=dict)
    average: float = 0.0
    median: float = 0.0

    @property
    def difference(self) -> int:
        return duration_difference(self.average, self.median)


def filter_by_route(tickets: list[Ticket], origin: str, destination: str) -> list[Ticket]:
    """Keeps tickets whose origin and destination match exactly, in their original order."""
    return [t for t in tickets if t.origin == origin and t.destination == destination]


def tickets_to_frame(tickets: list[Ticket]) -> pd.DataFrame:
    """
    Builds a DataFrame with one row per ticket.

    Args:
        tickets: Parsed tickets.

    Returns:
        A DataFrame with the ticket fields plus 'flight_duration' (Timedelta)
        and 'duration_minutes' (int).
    """
    rows = [
        {
            "carrier": t.carrier,
            "origin": t.origin,
            "destination": t.destination,
            "price": t.price,
            "departure": t.departure,
            "arrival": t.arrival,
            "duration_minutes": t.duration_minutes,
        }
        for t in tickets
    ]
    df = pd.DataFrame(rows, columns=TICKET_COLUMNS)
    df["departure"] = pd.to_datetime(df["departure"])
    df["arrival"] = pd.to_datetime(df["arrival"])

    df["flight_duration"] = df["arrival"] - df["departure"]
    df["duration_minutes"] = df["duration_minutes"].astype("int64")
    return df


def min_duration_by_carrier(tickets: list[Ticket]) -> dict[str, timedelta]:
    """
    Finds the smallest signed flight duration for each carrier.

    Negative durations count as smaller than any positive one.
    """
    if not tickets:
        return {}
    return _min_by_carrier(tickets_to_frame(tickets))


def _min_by_carrier(df: pd.DataFrame) -> dict[str, timedelta]:
    minimums = df.groupby("carrier", sort=True)["flight_duration"].min()
    return {carrier: value.to_pytimedelta() for carrier, value in minimums.items()}


def average_minutes(minutes: list[int]) -> float:
    if not minutes:
        raise ValueError("Cannot average an empty list of durations")
    return float(pd.Series(minutes, dtype="int64").mean())


def median_minutes(minutes: list[int]) -> float:
    """Middle value of the sorted durations; mean of the two central values for an even count."""
    if not minutes:
        raise ValueError("Cannot take the median of an empty list of durations")
    return float(pd.Series(minutes, dtype="int64").median())


def duration_difference(average: float, median: float) -> int:
    """Truncates both values to whole minutes first, then subtracts."""
    return int(average) - int(median)


def summarize_route(
    tickets: list[Ticket], origin: str, destination: str
) -> Optional[RouteSummary]:
    """
    Computes duration statistics for one route.

    Args:
        tickets: All parsed tickets.
        origin: Origin airport code (case-sensitive).
        destination: Destination airport code (case-sensitive).

    Returns:
        A RouteSummary, or None when no ticket matches the route.
    """
    filtered = filter_by_route(tickets, origin, destination)
    logger.info(f"Route {origin} -> {destination}: {len(filtered)} of {len(tickets)} tickets")
    if not filtered:
        return None

    df = tickets_to_frame(filtered)
    minutes = df["duration_minutes"].tolist()
    return RouteSummary(
        origin=origin,
        destination=destination,
        ticket_count=len(filtered),
        min_by_carrier=_min_by_carrier(df),
        average=average_minutes(minutes),
        median=median_minutes(minutes),
    )
