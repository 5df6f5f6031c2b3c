"""Shared test fixtures."""

import json
import logging
from pathlib import Path

import pytest


def make_record(
    carrier: str = "TK",
    origin: str = "VVO",
    destination: str = "TLV",
    departure: tuple[str, str] = ("12.05.18", "16:20"),
    arrival: tuple[str, str] = ("12.05.18", "22:10"),
    price: int = 12400,
) -> dict:
    return {
        "origin": origin,
        "origin_name": "Владивосток",
        "destination": destination,
        "destination_name": "Тель-Авив",
        "departure_date": departure[0],
        "departure_time": departure[1],
        "arrival_date": arrival[0],
        "arrival_time": arrival[1],
        "carrier": carrier,
        "stops": 3,
        "price": price,
    }


@pytest.fixture
def write_tickets(tmp_path: Path):
    """Write a tickets document to a temp file and return its path."""

    def _write(records: list, name: str = "tickets.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps({"tickets": records}, ensure_ascii=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path: Path):
    """Isolate tests from local config files and TICKETS_ANALYZER_* variables."""
    for name in (
        "TICKETS_ANALYZER_ORIGIN",
        "TICKETS_ANALYZER_DESTINATION",
        "TICKETS_ANALYZER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers bound to a previous test's captured stderr."""
    yield
    logger = logging.getLogger("tickets_analyzer")
    logger.handlers.clear()
    logger.propagate = True
