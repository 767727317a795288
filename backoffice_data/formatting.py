"""Display formatters for dates, currency, phone numbers and emails."""

import re
from datetime import date
from decimal import Decimal

MONTH_LABELS = (
    "Jan", "Feb", "Mar", "Apr", "May", "June",
    "July", "Aug", "Sept", "Oct", "Nov", "Dec",
)

_MONTH_INDEX = {label: i + 1 for i, label in enumerate(MONTH_LABELS)}

CURRENCY_SYMBOL = "₦"
COUNTRY_CODE = "+234"

_WHITESPACE = re.compile(r"\s+")


def format_date(day: date) -> str:
    """Render ``day`` as ``"MMM DD, YYYY"`` (e.g. ``"Sept 04, 2025"``)."""
    return f"{MONTH_LABELS[day.month - 1]} {day.day:02d}, {day.year}"


def parse_date(text: str) -> date:
    """Parse a date rendered by :func:`format_date`."""
    try:
        month_label, day_part, year_part = text.split(" ")
        return date(int(year_part), _MONTH_INDEX[month_label], int(day_part.rstrip(",")))
    except (KeyError, ValueError) as exc:
        raise ValueError(f"Not a display date: {text!r}") from exc


def format_currency(amount: Decimal | float | int, symbol: str = CURRENCY_SYMBOL) -> str:
    """Render ``amount`` with a currency symbol and thousands grouping."""
    value = Decimal(str(amount))
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


def nigerian_phone(prefix: int, middle: int, line: int) -> str:
    """``+234 XXX XXX XXXX`` mobile number."""
    return f"{COUNTRY_CODE} {prefix:03d} {middle:03d} {line:04d}"


def officer_phone(number: int) -> str:
    """``+234 XXXXXXXXX`` staff line (9 digits)."""
    return f"{COUNTRY_CODE} {number:09d}"


def email_local_part(name: str) -> str:
    """Lowercase ``name`` with all whitespace removed."""
    return _WHITESPACE.sub("", name.lower())


def make_email(name: str, domain: str, suffix: str = "") -> str:
    """``{localpart}{suffix}@{domain}``."""
    return f"{email_local_part(name)}{suffix}@{domain}"
