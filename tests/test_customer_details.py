"""Tests for the customer details generator and payment schedules."""

from datetime import date
from decimal import Decimal

import pytest

from backoffice_data.exceptions import InvalidCountError
from backoffice_data.generators.financial import CustomerDetailsGenerator
from backoffice_data.generators.financial.schedule import (
    DEMO_SCHEDULE_RULES,
    ScheduleRule,
    assign_statuses,
    build_payment_schedule,
    due_dates,
)
from backoffice_data.generators.pool import DataPools
from backoffice_data.models.financial import (
    CustomerDetails,
    PaymentStatus,
    TransactionStatus,
    TransactionType,
)
from tests.conftest import CUSTOMER_PHONE_PATTERN


@pytest.fixture
def details(customer_id: str, today: date) -> CustomerDetails:
    return CustomerDetailsGenerator(customer_id, today=today).generate()


class TestDueDates:
    """Tests for monthly due dates."""

    def test_monthly_steps(self) -> None:
        assert due_dates(date(2025, 1, 10), 3) == [
            date(2025, 1, 10),
            date(2025, 2, 10),
            date(2025, 3, 10),
        ]

    def test_month_end_clamped(self) -> None:
        dates = due_dates(date(2025, 1, 31), 3)
        assert dates[1] == date(2025, 2, 28)
        assert dates[2] == date(2025, 3, 31)

    def test_strictly_increasing(self) -> None:
        dates = due_dates(date(2024, 8, 31), 24)
        assert all(a < b for a, b in zip(dates, dates[1:]))


class TestAssignStatuses:
    """Tests for schedule status assignment."""

    def test_by_date_without_rules(self) -> None:
        today = date(2025, 6, 15)
        dates = [date(2025, 5, 1), date(2025, 6, 15), date(2025, 7, 1)]

        statuses = assign_statuses(dates, today, rules=())

        assert statuses == [PaymentStatus.PAID, PaymentStatus.UPCOMING, PaymentStatus.UPCOMING]

    def test_demo_rules(self) -> None:
        """Test the demo table overrides the by-date pass entirely."""
        today = date(2020, 1, 1)
        statuses = assign_statuses(due_dates(date(2025, 1, 1), 10), today)

        assert statuses[:4] == [PaymentStatus.PAID] * 4
        assert statuses[4] == PaymentStatus.MISSED
        assert statuses[5:7] == [PaymentStatus.PAID] * 2
        assert statuses[7:] == [PaymentStatus.UPCOMING] * 3

    def test_later_rules_win(self) -> None:
        rules = (
            ScheduleRule(range(0, 3), PaymentStatus.MISSED),
            ScheduleRule(range(1, 2), PaymentStatus.PAID),
        )
        statuses = assign_statuses(due_dates(date(2030, 1, 1), 3), date(2025, 1, 1), rules)
        assert statuses == [PaymentStatus.MISSED, PaymentStatus.PAID, PaymentStatus.MISSED]

    def test_rules_beyond_length_ignored(self) -> None:
        statuses = assign_statuses(due_dates(date(2030, 1, 1), 3), date(2025, 1, 1))
        assert len(statuses) == 3
        assert statuses == [PaymentStatus.PAID] * 3


class TestBuildPaymentSchedule:
    """Tests for build_payment_schedule."""

    def test_balances_consistent(self) -> None:
        amount = Decimal("300000.00")
        outstanding = Decimal("120000.01")

        schedule = build_payment_schedule(
            amount, outstanding, date(2025, 1, 1), date(2025, 9, 1)
        )

        assert len(schedule) == 10
        paid = [entry for entry in schedule if entry.is_paid]
        assert len(paid) == 6
        assert sum(entry.amount_paid for entry in schedule) == amount - outstanding
        assert paid[-1].remaining_balance == outstanding
        assert schedule[-1].remaining_balance == outstanding
        for entry in schedule:
            assert entry.cumulative_paid + entry.remaining_balance == amount
            if not entry.is_paid:
                assert entry.amount_paid == 0

    def test_cumulative_non_decreasing(self) -> None:
        schedule = build_payment_schedule(
            Decimal("100000.00"), Decimal("33333.33"), date(2025, 1, 1), date(2025, 9, 1)
        )
        cumulative = [entry.cumulative_paid for entry in schedule]
        assert cumulative == sorted(cumulative)

    def test_ids_and_numbers(self) -> None:
        schedule = build_payment_schedule(
            Decimal("100000.00"), Decimal("50000.00"), date(2025, 1, 1), date(2025, 9, 1)
        )
        assert [entry.id for entry in schedule][:2] == ["payment-1", "payment-2"]
        assert [entry.payment_number for entry in schedule] == list(range(1, 11))

    def test_installments_cover_principal(self) -> None:
        """Test amount due is the principal split over all installments."""
        amount = Decimal("250000.00")

        schedule = build_payment_schedule(
            amount, Decimal("175000.00"), date(2025, 1, 1), date(2025, 9, 1)
        )

        assert all(entry.amount_due == Decimal("25000.00") for entry in schedule)
        assert sum(entry.amount_due for entry in schedule) == amount
        assert sum(entry.amount_paid for entry in schedule) == Decimal("75000.00")

    def test_no_paid_installments(self) -> None:
        """Test nothing is paid when every installment is upcoming."""
        schedule = build_payment_schedule(
            Decimal("100000.00"),
            Decimal("100000.00"),
            date(2030, 1, 1),
            date(2025, 1, 1),
            count=4,
            rules=(),
        )

        assert all(entry.status == PaymentStatus.UPCOMING for entry in schedule)
        assert all(entry.amount_due == Decimal("25000.00") for entry in schedule)
        assert schedule[-1].remaining_balance == Decimal("100000.00")

    def test_empty_schedule(self) -> None:
        schedule = build_payment_schedule(
            Decimal("100000.00"), Decimal("0.00"), date(2025, 1, 1), date(2025, 9, 1), count=0
        )
        assert schedule == ()


class TestCustomerDetailsGenerator:
    """Tests for CustomerDetailsGenerator."""

    def test_header(self, details: CustomerDetails, customer_id: str, today: date, pools: DataPools) -> None:
        assert details.id == customer_id
        assert details.name in pools.customer_names
        assert details.user_id.startswith("USR-")
        assert details.address in pools.addresses
        assert details.email.endswith("@gmail.com")
        assert CUSTOMER_PHONE_PATTERN.match(details.phone_number)
        assert 1 <= (today - details.date_joined).days <= 730

    def test_reproducible(self, customer_id: str, today: date) -> None:
        first = CustomerDetailsGenerator(customer_id, today=today).generate()
        second = CustomerDetailsGenerator(customer_id, today=today).generate()
        assert first == second

    def test_different_customers_differ(self, today: date) -> None:
        first = CustomerDetailsGenerator("cust-a", today=today).generate()
        second = CustomerDetailsGenerator("cust-b", today=today).generate()
        assert first != second

    @pytest.mark.parametrize("customer_id", ["cust-001", "cust-002", "", "x" * 40, "客户-7"])
    def test_fifth_installment_missed(self, customer_id: str, today: date) -> None:
        details = CustomerDetailsGenerator(customer_id, today=today).generate()
        schedule = details.active_loan.payment_schedule

        assert len(schedule) == 10
        assert schedule[4].status == PaymentStatus.MISSED
        assert all(entry.status == PaymentStatus.PAID for entry in schedule[:4] + schedule[5:7])
        assert all(entry.status == PaymentStatus.UPCOMING for entry in schedule[7:])

    def test_schedule_matches_loan(self, details: CustomerDetails) -> None:
        loan = details.active_loan
        schedule = loan.payment_schedule
        last_paid = [entry for entry in schedule if entry.is_paid][-1]

        assert loan.loan_id.startswith("LN-")
        assert Decimal("100000") <= loan.amount <= Decimal("500000")
        assert Decimal("0") <= loan.outstanding <= loan.amount
        assert last_paid.remaining_balance == loan.outstanding
        assert loan.monthly_payment == schedule[0].amount_due
        assert schedule[0].due_date == loan.start_date
        assert all(a.due_date < b.due_date for a, b in zip(schedule, schedule[1:]))
        assert loan.start_date < loan.end_date

    def test_monthly_payment_spreads_principal(self, details: CustomerDetails) -> None:
        loan = details.active_loan
        total_due = sum(entry.amount_due for entry in loan.payment_schedule)

        assert abs(total_due - loan.amount) <= Decimal("0.05")
        assert loan.monthly_payment * len(loan.payment_schedule) >= loan.amount - Decimal("0.05")

    def test_interest_rate_is_percentage(self, details: CustomerDetails) -> None:
        rate = details.active_loan.interest_rate

        assert Decimal("5") <= rate <= Decimal("15")
        assert rate == round(rate, 2)
        assert rate.as_tuple().exponent >= -2

    def test_repayment_summary(self, details: CustomerDetails, today: date) -> None:
        summary = details.loan_repayment
        loan = details.active_loan

        assert summary.amount == loan.amount - loan.outstanding
        assert sum(summary.chart_data) == pytest.approx(100, abs=0.01)
        assert 2.0 <= summary.synthetic_growth <= 5.0
        assert 1 <= (summary.next_payment - today).days <= 30

    def test_savings_summary(self, details: CustomerDetails) -> None:
        savings = details.savings_account

        assert Decimal("5000") <= savings.balance <= Decimal("10000")
        assert 1.5 <= savings.synthetic_growth <= 3.5
        assert len(savings.chart_data) == 4
        assert all(20 <= point <= 30 for point in savings.chart_data)

    def test_transactions(self, details: CustomerDetails, today: date) -> None:
        transactions = details.transactions

        assert 50 <= len(transactions) <= 80
        dates = [tx.date for tx in transactions]
        assert dates == sorted(dates, reverse=True)
        for tx in transactions:
            assert tx.transaction_id.startswith("TXN-")
            assert tx.type in (TransactionType.REPAYMENT, TransactionType.SAVINGS)
            assert tx.status in list(TransactionStatus)
            assert Decimal("1000") <= tx.amount <= Decimal("20000")
            assert 1 <= (today - tx.date).days <= 365

    def test_custom_schedule(self, customer_id: str, today: date) -> None:
        """Test schedule length and rules are configurable."""
        details = CustomerDetailsGenerator(
            customer_id, today=today, schedule_length=6, schedule_rules=()
        ).generate()
        schedule = details.active_loan.payment_schedule

        assert len(schedule) == 6
        assert PaymentStatus.MISSED not in {entry.status for entry in schedule}
        assert schedule[-1].remaining_balance == details.active_loan.outstanding

    def test_invalid_schedule_length(self, customer_id: str) -> None:
        with pytest.raises(InvalidCountError):
            CustomerDetailsGenerator(customer_id, schedule_length=-1)

    def test_demo_rules_exported(self) -> None:
        assert DEMO_SCHEDULE_RULES[1].positions == range(4, 5)
