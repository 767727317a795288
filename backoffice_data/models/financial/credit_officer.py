"""Credit officer model."""

from dataclasses import dataclass
from datetime import date

from backoffice_data.models.financial.enums import Gender


@dataclass(frozen=True)
class CreditOfficer:
    """Credit officer profile."""

    id: str
    name: str
    co_id: str
    date_joined: date
    email: str
    phone: str  # +234 XXXXXXXXX
    gender: Gender
