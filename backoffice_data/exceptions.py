"""Custom exception hierarchy for backoffice-data-gen."""


class DataGenError(Exception):
    """Base exception for all backoffice-data-gen errors."""


class EmptyPoolError(DataGenError):
    """Raised when a value is selected from an empty literal pool."""


class InvalidCountError(DataGenError):
    """Raised when a record count is negative or not an integer."""


class ConfigurationError(DataGenError):
    """Raised when configuration is invalid or missing."""


class SinkError(DataGenError):
    """Raised when a sink operation fails."""
