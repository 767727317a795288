"""Deterministic synthetic data for the loan back-office dashboard."""

from backoffice_data.api import (
    calculate_loan_statistics,
    generate_collection_transactions,
    generate_credit_officer_details,
    generate_credit_officer_loans,
    generate_credit_officer_transactions,
    generate_customer_details,
    generate_customers,
    generate_disbursed_loans,
    generate_loans_data,
    hash_string,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
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
