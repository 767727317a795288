"""Transaction models."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from backoffice_data.models.financial.enums import (
    CollectionStatus,
    CollectionType,
    RepaymentStatus,
    TransactionStatus,
    TransactionType,
)


@dataclass(frozen=True)
class CollectionTransaction:
    """Transaction on a credit officer's collections tab."""

    id: str
    transaction_id: str  # TXN + 8 digits
    type: CollectionType
    amount: Decimal
    status: CollectionStatus
    date: date
    credit_officer_id: str


@dataclass(frozen=True)
class RepaymentTransaction:
    """Repayment collected on a loan disbursed by a credit officer."""

    id: str
    transaction_id: str  # 5 digits
    type: TransactionType
    amount: Decimal
    status: RepaymentStatus
    date: date
    credit_officer_id: str


@dataclass(frozen=True)
class TransactionRecord:
    """Transaction on a customer's history."""

    id: str
    transaction_id: str  # TXN-XXXXXX
    type: TransactionType
    amount: Decimal
    status: TransactionStatus
    date: date
