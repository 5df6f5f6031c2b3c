"""Configuration loading for tickets_analyzer.

Settings are read from a local TOML file and can be overridden by
environment variables.

Precedence (highest to lowest):
1. Environment variables (TICKETS_ANALYZER_*)
2. Local config (./tickets_analyzer.toml, section [analyzer])
3. Default values
"""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from tickets_analyzer._errors import ConfigError

CONFIG_FILENAME = "tickets_analyzer.toml"

ENV_ORIGIN = "TICKETS_ANALYZER_ORIGIN"
ENV_DESTINATION = "TICKETS_ANALYZER_DESTINATION"
ENV_LOG_LEVEL = "TICKETS_ANALYZER_LOG_LEVEL"


@dataclass
class AnalyzerConfig:
    """Analyzer settings.

    Attributes:
        default_origin: Origin airport used when the route is not given.
        default_destination: Destination airport used when the route is not given.
        log_level: Level for diagnostics written to stderr.
    """

    default_origin: str = "VVO"
    default_destination: str = "TLV"
    log_level: str = "WARNING"


def _load_toml(path: Path) -> dict[str, Any]:
    """Load a TOML file, returning empty dict if not found."""
    if not path.exists():
        return {}
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Cannot decode config file {path}: {e}") from e


def load_config(path: Path | None = None) -> AnalyzerConfig:
    """
    Builds the analyzer configuration.

    Args:
        path: Config file to read. Defaults to ./tickets_analyzer.toml.

    Returns:
        An AnalyzerConfig with file values and environment overrides applied.
    """
    if path is None:
        path = Path.cwd() / CONFIG_FILENAME

    section = _load_toml(path).get("analyzer", {})
    if not isinstance(section, dict):
        raise ConfigError(f"[analyzer] in {path} must be a table")

    defaults = AnalyzerConfig()
    origin = section.get("default_origin", defaults.default_origin)
    destination = section.get("default_destination", defaults.default_destination)
    log_level = section.get("log_level", defaults.log_level)

    # --- Environment overrides ---
    origin = os.environ.get(ENV_ORIGIN, origin)
    destination = os.environ.get(ENV_DESTINATION, destination)
    log_level = os.environ.get(ENV_LOG_LEVEL, log_level)

    for key, value in (
        ("default_origin", origin),
        ("default_destination", destination),
        ("log_level", log_level),
    ):
        if not isinstance(value, str) or not value:
            raise ConfigError(f"'{key}' must be a non-empty string, got {value!r}")

    return AnalyzerConfig(
        default_origin=origin,
        default_destination=destination,
        log_level=log_level.upper(),
    )
