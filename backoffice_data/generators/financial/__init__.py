"""Back-office record generators."""

from backoffice_data.generators.financial.credit_officer import CreditOfficerGenerator
from backoffice_data.generators.financial.customer import CustomerGenerator
from backoffice_data.generators.financial.customer_details import CustomerDetailsGenerator
from backoffice_data.generators.financial.loan import BranchLoanGenerator

__all__ = [
    "BranchLoanGenerator",
    "CreditOfficerGenerator",
    "CustomerDetailsGenerator",
    "CustomerGenerator",
]
