"""Error classes for tickets_analyzer."""


class TicketsError(Exception):
    """Base class for fatal errors that abort an analysis run."""

    pass


class TicketsFileError(TicketsError):
    """Raised when the tickets file cannot be read."""

    pass


class TicketsStructureError(TicketsError):
    """Raised when the document is not valid JSON or has no 'tickets' array."""

    pass


class ConfigError(TicketsError):
    """Raised when the configuration file cannot be parsed."""

    pass
