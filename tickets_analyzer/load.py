import json
import logging
import os
from typing import Any

from tickets_analyzer._errors import TicketsFileError, TicketsStructureError
from tickets_analyzer.preprocess import extract_ticket_records

logger = logging.getLogger(__name__)


def expand_home(path: str) -> str:
    """Replaces a leading '~' with the user's home directory (plain string substitution)."""
    if path.startswith("~"):
        return os.path.expanduser("~") + path[1:]
    return path


def read_text(path: str) -> str:
    """
    Reads the whole tickets file into memory.

    Args:
        path: File path; a leading '~' is expanded.

    Returns:
        The file content decoded as UTF-8.

    Raises:
        TicketsFileError: If the file is missing, unreadable or not valid UTF-8.
    """
    resolved = expand_home(path)
    try:
        with open(resolved, encoding="utf-8") as f:
            content = f.read()
    except OSError as e:
        raise TicketsFileError(f"Cannot read file {resolved}: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise TicketsFileError(f"Cannot decode file {resolved}: {e}") from e

    logger.debug(f"Read {len(content)} characters from {resolved}")
    return content


def parse_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise TicketsStructureError(f"Invalid JSON: {e}") from e


def load_raw_tickets(path: str) -> list:
    """
    Loads the raw ticket records from a JSON file.

    Args:
        path: Path to the tickets JSON file.

    Returns:
        The untyped records found under the "tickets" key.
    """
    records = extract_ticket_records(parse_json(read_text(path)))
    logger.info(f"Loaded {len(records)} raw ticket records from {path}")
    return records
