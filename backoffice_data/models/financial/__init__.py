"""Back-office domain models."""

from backoffice_data.models.financial.credit_officer import CreditOfficer
from backoffice_data.models.financial.customer import Customer
from backoffice_data.models.financial.customer_details import (
    CustomerDetails,
    LoanRepaymentSummary,
    SavingsAccountSummary,
)
from backoffice_data.models.financial.enums import (
    CollectionStatus,
    CollectionType,
    CustomerStatus,
    DisbursedLoanStatus,
    Gender,
    LoanStatus,
    PaymentStatus,
    RepaymentStatus,
    TransactionStatus,
    TransactionType,
)
from backoffice_data.models.financial.loan import (
    ActiveLoan,
    DisbursedLoan,
    Loan,
    OfficerLoan,
    PaymentScheduleEntry,
)
from backoffice_data.models.financial.statistics import LoanStatistics, StatCard
from backoffice_data.models.financial.transaction import (
    CollectionTransaction,
    RepaymentTransaction,
    TransactionRecord,
)

__all__ = [
    "ActiveLoan",
    "CollectionStatus",
    "CollectionTransaction",
    "CollectionType",
    "CreditOfficer",
    "Customer",
    "CustomerDetails",
    "CustomerStatus",
    "DisbursedLoan",
    "DisbursedLoanStatus",
    "Gender",
    "Loan",
    "LoanRepaymentSummary",
    "LoanStatistics",
    "LoanStatus",
    "OfficerLoan",
    "PaymentScheduleEntry",
    "PaymentStatus",
    "RepaymentStatus",
    "RepaymentTransaction",
    "SavingsAccountSummary",
    "StatCard",
    "TransactionRecord",
    "TransactionStatus",
    "TransactionType",
]
