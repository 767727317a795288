"""Composite customer details model."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from backoffice_data.models.financial.enums import Gender
from backoffice_data.models.financial.loan import ActiveLoan
from backoffice_data.models.financial.transaction import TransactionRecord


@dataclass(frozen=True)
class LoanRepaymentSummary:
    """Loan repayment card.

    ``chart_data`` is ``(paid %, remaining %)`` of the active loan.
    ``synthetic_growth`` is a generated figure, not a historical delta.
    """

    amount: Decimal
    next_payment: date
    synthetic_growth: float
    chart_data: tuple[float, float]


@dataclass(frozen=True)
class SavingsAccountSummary:
    """Savings account card. ``synthetic_growth`` is generated."""

    balance: Decimal
    synthetic_growth: float
    chart_data: tuple[float, ...]


@dataclass(frozen=True)
class CustomerDetails:
    """Everything the customer detail page shows, from one root seed."""

    id: str
    name: str
    user_id: str  # USR-XXXXX
    date_joined: date
    email: str
    phone_number: str
    gender: Gender
    address: str
    loan_repayment: LoanRepaymentSummary
    savings_account: SavingsAccountSummary
    active_loan: ActiveLoan
    transactions: tuple[TransactionRecord, ...]
