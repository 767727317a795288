"""Customer model."""

from dataclasses import dataclass
from datetime import date

from backoffice_data.models.financial.enums import CustomerStatus


@dataclass(frozen=True)
class Customer:
    """Customer row of the customers table."""

    id: str  # customer-1, customer-2, ...
    customer_number: str  # "ID: 12345"
    name: str
    status: CustomerStatus
    phone_number: str  # +234 XXX XXX XXXX
    email: str
    date_joined: date
