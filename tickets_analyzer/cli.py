# cli.py
import argparse
import sys

from tickets_analyzer._errors import TicketsError
from tickets_analyzer.config import load_config
from tickets_analyzer.kpis import summarize_route
from tickets_analyzer.load import load_raw_tickets
from tickets_analyzer.log import get_logger
from tickets_analyzer.preprocess import parse_tickets
from tickets_analyzer.report import render_not_found, render_report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tickets-analyzer",
        description="Flight duration statistics for one route of a tickets.json file.",
    )
    parser.add_argument("path", help="Path to tickets.json ('~' is expanded)")
    parser.add_argument(
        "route",
        nargs="*",
        metavar="CODE",
        help="Route to analyze (both codes or neither)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if len(args.route) not in (0, 2):
        parser.error("ORIGIN and DESTINATION must be given together")

    try:
        config = load_config()
    except TicketsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    get_logger(level=config.log_level)
    origin, destination = args.route or (config.default_origin, config.default_destination)

    try:
        records = load_raw_tickets(args.path)
    except TicketsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    outcome = parse_tickets(records)
    summary = summarize_route(outcome.tickets, origin, destination)
    if summary is None:
        print(render_not_found(origin, destination))
        return 0

    print(render_report(summary))
    return 0


if __name__ == "__main__":
    sys.exit(main())
