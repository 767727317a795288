"""Loan models."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from backoffice_data.models.financial.enums import (
    DisbursedLoanStatus,
    LoanStatus,
    PaymentStatus,
)


@dataclass(frozen=True)
class Loan:
    """Branch loan row."""

    id: str
    loan_id: str  # 5 digits
    borrower_name: str
    status: LoanStatus
    amount: Decimal  # Naira, multiple of 1,000
    interest_rate: Decimal  # Percentage (e.g. 7.25)
    outstanding: Decimal
    next_repayment_date: date
    disbursement_date: date
    branch_id: str
    missed_payments: int | None = None  # Only for MISSED_PAYMENT


@dataclass(frozen=True)
class OfficerLoan:
    """Loan in a credit officer's portfolio."""

    id: str
    loan_id: str
    borrower_name: str
    status: LoanStatus
    amount: Decimal
    interest_rate: Decimal  # Fraction (e.g. 0.0725)
    outstanding: Decimal
    next_repayment: date
    credit_officer_id: str


@dataclass(frozen=True)
class DisbursedLoan:
    """Loan disbursed by a credit officer."""

    id: str
    loan_id: str  # LN + 6 digits
    name: str
    status: DisbursedLoanStatus
    amount: Decimal
    interest: int  # Whole percent, 5-15
    outstanding: Decimal
    next_repayment: date
    credit_officer_id: str


@dataclass(frozen=True)
class PaymentScheduleEntry:
    """One installment of an active loan's repayment schedule."""

    id: str
    payment_number: int  # 1, 2, 3, ...
    due_date: date
    amount_due: Decimal
    amount_paid: Decimal
    cumulative_paid: Decimal
    remaining_balance: Decimal
    status: PaymentStatus

    @property
    def is_paid(self) -> bool:
        return self.status == PaymentStatus.PAID


@dataclass(frozen=True)
class ActiveLoan:
    """A customer's active loan with its schedule."""

    loan_id: str  # LN-XXXXXX
    amount: Decimal
    outstanding: Decimal
    monthly_payment: Decimal
    interest_rate: Decimal  # Percentage
    start_date: date
    end_date: date
    payment_schedule: tuple[PaymentScheduleEntry, ...]
