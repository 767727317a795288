"""Enumeration types for back-office entities."""

from enum import Enum


class CustomerStatus(str, Enum):
    ACTIVE = "Active"
    SCHEDULED = "Scheduled"


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"


class LoanStatus(str, Enum):
    ACTIVE = "Active"
    SCHEDULED = "Scheduled"
    COMPLETED = "Completed"
    OVERDUE = "Overdue"
    MISSED_PAYMENT = "Missed Payment"


class DisbursedLoanStatus(str, Enum):
    ACTIVE = "Active"
    COMPLETED = "Completed"
    DEFAULTED = "Defaulted"


class CollectionType(str, Enum):
    DEPOSIT = "Deposit"
    WITHDRAWAL = "Withdrawal"
    TRANSFER = "Transfer"


class CollectionStatus(str, Enum):
    COMPLETED = "Completed"
    PENDING = "Pending"
    FAILED = "Failed"


class RepaymentStatus(str, Enum):
    SUCCESSFUL = "Successful"
    PENDING = "Pending"


class TransactionType(str, Enum):
    REPAYMENT = "Repayment"
    SAVINGS = "Savings"


class TransactionStatus(str, Enum):
    SUCCESSFUL = "Successful"
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"


class PaymentStatus(str, Enum):
    PAID = "Paid"
    MISSED = "Missed"
    UPCOMING = "Upcoming"
