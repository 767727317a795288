"""Output sinks for exporting generated records."""

from backoffice_data.sinks.console import ConsoleSink
from backoffice_data.sinks.json_file import JsonFileSink

__all__ = ["ConsoleSink", "JsonFileSink"]
