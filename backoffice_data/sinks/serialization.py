"""Shared serialization utilities for sinks."""

from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from backoffice_data.formatting import format_currency, format_date

# Decimal fields holding rates rather than money
RATE_FIELDS = frozenset({"interest_rate"})


def to_dict(obj: Any, display: bool = False) -> dict:
    """Convert a record to a dictionary.

    Parameters
    ----------
    obj : Any
        Dataclass record or mapping.
    display : bool
        Render dates as ``"MMM DD, YYYY"`` and money as currency strings
        instead of ISO dates and decimal strings.
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        return {
            f.name: serialize_value(getattr(obj, f.name), display and f.name not in RATE_FIELDS)
            for f in fields(obj)
        }
    elif isinstance(obj, Mapping):
        return {k: serialize_value(v, display) for k, v in obj.items()}
    else:
        return {"value": str(obj)}


def to_display_dict(obj: Any) -> dict:
    """Convert a record to a dictionary of display strings."""
    return to_dict(obj, display=True)


def serialize_value(value: Any, display: bool = False) -> Any:
    """Serialize a value for JSON output."""
    if is_dataclass(value) and not isinstance(value, type):
        return to_dict(value, display)
    elif isinstance(value, Decimal):
        return format_currency(value) if display else str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return format_date(value) if display else value.isoformat()
    elif isinstance(value, Mapping):
        return {k: serialize_value(v, display) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v, display) for v in value]
    return value
