"""Tests for the public entry points."""

from datetime import date

import pytest

import backoffice_data
from backoffice_data import api
from backoffice_data.exceptions import InvalidCountError
from backoffice_data.generators.pool import DataPools
from backoffice_data.models.financial import PaymentStatus


class TestHashString:
    """Tests for the exported hash function."""

    def test_known_value(self) -> None:
        assert api.hash_string("abc") == 96354

    def test_stable(self) -> None:
        assert api.hash_string("officer-7") == api.hash_string("officer-7")

    def test_empty(self) -> None:
        assert api.hash_string("") == 0


class TestOfficerEntryPoints:
    """Tests for the credit officer entry points."""

    def test_details_idempotent(self, today: date) -> None:
        first = api.generate_credit_officer_details("test-123", today=today)
        second = api.generate_credit_officer_details("test-123", today=today)

        assert first == second
        assert first.id == "test-123"

    def test_default_counts(self, officer_id: str, today: date) -> None:
        assert len(api.generate_collection_transactions(officer_id, today=today)) == 50
        assert len(api.generate_disbursed_loans(officer_id, today=today)) == 50
        assert len(api.generate_credit_officer_loans(officer_id, today=today)) == 50
        assert len(api.generate_credit_officer_transactions(officer_id, today=today)) == 50

    def test_zero_count(self, officer_id: str) -> None:
        assert api.generate_collection_transactions(officer_id, 0) == []
        assert api.generate_disbursed_loans(officer_id, 0) == []

    def test_negative_count(self, officer_id: str) -> None:
        with pytest.raises(InvalidCountError):
            api.generate_collection_transactions(officer_id, -1)


class TestCustomerEntryPoints:
    """Tests for customer entry points."""

    def test_default_count(self, today: date) -> None:
        customers = api.generate_customers(today=today)

        assert len(customers) == 100
        assert customers[0].id == "customer-1"
        assert customers[-1].id == "customer-100"

    def test_seeded_batches(self, today: date) -> None:
        first = api.generate_customers(5, "seed-A", today=today)
        again = api.generate_customers(5, "seed-A", today=today)
        other = api.generate_customers(5, "seed-B", today=today)

        assert first == again
        assert first != other

    def test_customer_details_missed_installment(self, today: date) -> None:
        details = api.generate_customer_details("cust-001", today=today)
        assert details.active_loan.payment_schedule[4].status == PaymentStatus.MISSED

    def test_pool_injection(self, today: date) -> None:
        pools = DataPools(customer_names=("Only Name",))
        customers = api.generate_customers(3, pools=pools, today=today)
        assert {c.name for c in customers} == {"Only Name"}


class TestBranchEntryPoints:
    """Tests for branch loans and statistics."""

    def test_loans_and_statistics(self, branch_id: str, today: date) -> None:
        loans = api.generate_loans_data(branch_id, today=today)
        stats = api.calculate_loan_statistics(loans)

        assert len(loans) == 100
        assert stats.total_loans.count == 100
        assert stats.active_loans.count + stats.completed_loans.count == 100

    def test_reproducible(self, branch_id: str, today: date) -> None:
        assert api.generate_loans_data(branch_id, 10, today=today) == api.generate_loans_data(
            branch_id, 10, today=today
        )


class TestPackageExports:
    """Tests for the package namespace."""

    def test_reexports(self) -> None:
        assert backoffice_data.generate_customers is api.generate_customers
        assert backoffice_data.hash_string is api.hash_string

    def test_version(self) -> None:
        assert backoffice_data.__version__ == "0.1.0"
