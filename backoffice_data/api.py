"""Entry points used by the dashboard's detail and demo screens.

Every function is synchronous and pure: the same arguments always return
equal records, and nothing is cached between calls. ``pools`` and
``today`` are optional injections; leave them out to use the built-in
pools and the current date.
"""

from __future__ import annotations

from datetime import date

from backoffice_data.generators.financial import (
    BranchLoanGenerator,
    CreditOfficerGenerator,
    CustomerDetailsGenerator,
    CustomerGenerator,
)
from backoffice_data.generators.pool import DataPools
from backoffice_data.generators.seeding import hash_string
from backoffice_data.models.financial import (
    CollectionTransaction,
    CreditOfficer,
    Customer,
    CustomerDetails,
    DisbursedLoan,
    Loan,
    OfficerLoan,
    RepaymentTransaction,
)
from backoffice_data.statistics import calculate_loan_statistics

__all__ = [
    "calculate_loan_statistics",
    "generate_collection_transactions",
    "generate_credit_officer_details",
    "generate_credit_officer_loans",
    "generate_credit_officer_transactions",
    "generate_customer_details",
    "generate_customers",
    "generate_disbursed_loans",
    "generate_loans_data",
    "hash_string",
]


def generate_credit_officer_details(
    officer_id: str,
    *,
    pools: DataPools | None = None,
    today: date | None = None,
) -> CreditOfficer:
    """Profile of the credit officer ``officer_id``."""
    return CreditOfficerGenerator(officer_id, pools=pools, today=today).details()


def generate_credit_officer_loans(
    officer_id: str,
    count: int = 50,
    *,
    pools: DataPools | None = None,
    today: date | None = None,
) -> list[OfficerLoan]:
    """Loan portfolio of the credit officer ``officer_id``."""
    return CreditOfficerGenerator(officer_id, pools=pools, today=today).loans(count)


def generate_credit_officer_transactions(
    officer_id: str,
    count: int = 50,
    *,
    pools: DataPools | None = None,
    today: date | None = None,
) -> list[RepaymentTransaction]:
    """Repayments on loans disbursed by the credit officer ``officer_id``."""
    return CreditOfficerGenerator(officer_id, pools=pools, today=today).repayments(count)


def generate_collection_transactions(
    officer_id: str,
    count: int = 50,
    *,
    pools: DataPools | None = None,
    today: date | None = None,
) -> list[CollectionTransaction]:
    """Collections tab of the credit officer ``officer_id``."""
    return CreditOfficerGenerator(officer_id, pools=pools, today=today).collections(count)


def generate_disbursed_loans(
    officer_id: str,
    count: int = 50,
    *,
    pools: DataPools | None = None,
    today: date | None = None,
) -> list[DisbursedLoan]:
    """Loans disbursed tab of the credit officer ``officer_id``."""
    return CreditOfficerGenerator(officer_id, pools=pools, today=today).disbursed_loans(count)


def generate_customers(
    count: int = 100,
    seed: str = "customers",
    *,
    pools: DataPools | None = None,
    today: date | None = None,
) -> list[Customer]:
    """``count`` customers for the batch ``seed``."""
    return list(CustomerGenerator(seed, pools=pools, today=today).generate_batch(count))


def generate_customer_details(
    customer_id: str,
    *,
    pools: DataPools | None = None,
    today: date | None = None,
) -> CustomerDetails:
    """Nested detail record of the customer ``customer_id``."""
    return CustomerDetailsGenerator(customer_id, pools=pools, today=today).generate()


def generate_loans_data(
    branch_id: str,
    count: int = 100,
    *,
    pools: DataPools | None = None,
    today: date | None = None,
) -> list[Loan]:
    """``count`` loans of the branch ``branch_id``."""
    return list(BranchLoanGenerator(branch_id, pools=pools, today=today).generate_batch(count))
