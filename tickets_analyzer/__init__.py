"""Flight ticket duration analysis."""

from tickets_analyzer._errors import (
    ConfigError,
    TicketsError,
    TicketsFileError,
    TicketsStructureError,
)
from tickets_analyzer.kpis import RouteSummary, summarize_route
from tickets_analyzer.load import load_raw_tickets
from tickets_analyzer.preprocess import ParseOutcome, parse_ticket, parse_tickets
from tickets_analyzer.schema import ParseFailure, Ticket

__all__ = [
    "ConfigError",
    "ParseFailure",
    "ParseOutcome",
    "RouteSummary",
    "Ticket",
    "TicketsError",
    "TicketsFileError",
    "TicketsStructureError",
    "load_raw_tickets",
    "parse_ticket",
    "parse_tickets",
    "summarize_route",
]
