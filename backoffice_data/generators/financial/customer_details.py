"""Customer detail page generator."""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Sequence

from backoffice_data.formatting import make_email, nigerian_phone
from backoffice_data.generators.base import BaseGenerator
from backoffice_data.generators.fields import (
    WeightedRoll,
    add_months,
    offset_days,
    to_money,
)
from backoffice_data.generators.financial.schedule import (
    DEMO_SCHEDULE_RULES,
    ScheduleRule,
    build_payment_schedule,
)
from backoffice_data.generators.pool import DataPools
from backoffice_data.generators.seeding import SeedCursor, hash_string
from backoffice_data.models.financial import (
    ActiveLoan,
    CustomerDetails,
    Gender,
    LoanRepaymentSummary,
    SavingsAccountSummary,
    TransactionRecord,
    TransactionStatus,
    TransactionType,
)

logger = logging.getLogger(__name__)


class CustomerDetailsGenerator(BaseGenerator):
    """Generate the nested record behind the customer detail page.

    Every field comes from one cursor seeded by
    ``"customer-details-{customer_id}"``, pulled in a fixed order: header,
    summary cards, active loan, transactions. Reordering the draws changes
    every value after the moved one.

    The loan, its schedule and the repayment card agree with each other:
    the schedule's last Paid installment leaves exactly the loan's
    ``outstanding``, and the repayment chart is ``(paid %, remaining %)``
    of the same loan.

    Parameters
    ----------
    customer_id : str
        Customer identifier.
    pools : DataPools | None
        Literal pools.
    today : date | None
        Reference date.
    schedule_length : int
        Number of installments in the payment schedule.
    schedule_rules : Sequence[ScheduleRule]
        Positional status overrides for the schedule.
    """

    EMAIL_DOMAIN = "gmail.com"
    SAVINGS_CHART_POINTS = 4

    TRANSACTION_TYPE = WeightedRoll.from_weights(
        [(TransactionType.REPAYMENT, 60), (TransactionType.SAVINGS, 40)]
    )
    TRANSACTION_STATUS = WeightedRoll.from_weights(
        [
            (TransactionStatus.SUCCESSFUL, 80),
            (TransactionStatus.PENDING, 15),
            (TransactionStatus.IN_PROGRESS, 5),
        ]
    )

    def __init__(
        self,
        customer_id: str,
        pools: DataPools | None = None,
        today: date | None = None,
        schedule_length: int = 10,
        schedule_rules: Sequence[ScheduleRule] = DEMO_SCHEDULE_RULES,
    ) -> None:
        super().__init__(pools, today)
        self.customer_id = customer_id
        self.schedule_length = self._validate_count(schedule_length)
        self.schedule_rules = tuple(schedule_rules)

    def generate(self) -> CustomerDetails:
        """Generate the customer's details."""
        seed = hash_string(f"customer-details-{self.customer_id}")
        cursor = SeedCursor.from_seed(seed)

        # Header
        name, cursor = cursor.choice(self.pools.customer_names)
        user_number, cursor = cursor.next_int(10000, 99999)
        gender, cursor = cursor.choice(self.pools.genders)
        address, cursor = cursor.choice(self.pools.addresses)
        joined_days_ago, cursor = cursor.next_int(1, 730)
        prefix, cursor = cursor.next_int(800, 909)
        middle, cursor = cursor.next_int(100, 999)
        line, cursor = cursor.next_int(1000, 9999)

        # Summary cards
        next_payment_in, cursor = cursor.next_int(1, 30)
        repayment_growth, cursor = cursor.next_float(2.0, 5.0)
        savings_balance, cursor = cursor.next_float(5000, 10000)
        savings_growth, cursor = cursor.next_float(1.5, 3.5)
        savings_chart = []
        for _ in range(self.SAVINGS_CHART_POINTS):
            point, cursor = cursor.next_float(20, 30)
            savings_chart.append(round(point, 2))

        active_loan, cursor = self._active_loan(cursor)
        transactions, cursor = self._transactions(cursor)

        repaid = active_loan.amount - active_loan.outstanding
        paid_share = round(float(repaid / active_loan.amount) * 100, 2)

        logger.debug(
            "Generated details for customer %r with %d transactions",
            self.customer_id,
            len(transactions),
            extra={"entity": "customer_details", "count": len(transactions), "seed": seed},
        )

        return CustomerDetails(
            id=self.customer_id,
            name=name,
            user_id=f"USR-{user_number}",
            date_joined=offset_days(self.today, -joined_days_ago),
            email=make_email(name, self.EMAIL_DOMAIN),
            phone_number=nigerian_phone(prefix, middle, line),
            gender=Gender(gender),
            address=address,
            loan_repayment=LoanRepaymentSummary(
                amount=repaid,
                next_payment=offset_days(self.today, next_payment_in),
                synthetic_growth=round(repayment_growth, 1),
                chart_data=(paid_share, round(100 - paid_share, 2)),
            ),
            savings_account=SavingsAccountSummary(
                balance=to_money(round(savings_balance, 2)),
                synthetic_growth=round(savings_growth, 1),
                chart_data=tuple(savings_chart),
            ),
            active_loan=active_loan,
            transactions=transactions,
        )

    def _active_loan(self, cursor: SeedCursor) -> tuple[ActiveLoan, SeedCursor]:
        raw_amount, cursor = cursor.next_float(100000, 500000)
        outstanding_share, cursor = cursor.next_float(0.3, 0.7)
        interest_rate, cursor = cursor.next_float(5, 15)
        started_months_ago, cursor = cursor.next_int(6, 24)
        ends_in_months, cursor = cursor.next_int(6, 24)
        loan_number, cursor = cursor.next_int(100000, 999999)

        amount = to_money(round(raw_amount, 2))
        outstanding = min(amount, to_money(float(amount) * outstanding_share))
        start_date = add_months(self.today, -started_months_ago)

        schedule = build_payment_schedule(
            amount=amount,
            outstanding=outstanding,
            start_date=start_date,
            today=self.today,
            count=self.schedule_length,
            rules=self.schedule_rules,
        )
        if schedule:
            outstanding = schedule[-1].remaining_balance
            monthly_payment = schedule[0].amount_due
        else:
            monthly_payment = to_money(0)

        loan = ActiveLoan(
            loan_id=f"LN-{loan_number}",
            amount=amount,
            outstanding=outstanding,
            monthly_payment=monthly_payment,
            interest_rate=Decimal(str(round(interest_rate, 2))),
            start_date=start_date,
            end_date=add_months(self.today, ends_in_months),
            payment_schedule=schedule,
        )
        return loan, cursor

    def _transactions(
        self, cursor: SeedCursor
    ) -> tuple[tuple[TransactionRecord, ...], SeedCursor]:
        count, cursor = cursor.next_int(50, 80)

        records = []
        for i in range(count):
            tx_type, cursor = self.TRANSACTION_TYPE.draw(cursor)
            amount, cursor = cursor.next_float(1000, 20000)
            status, cursor = self.TRANSACTION_STATUS.draw(cursor)
            days_ago, cursor = cursor.next_int(1, 365)
            number, cursor = cursor.next_int(100000, 999999)

            records.append(
                TransactionRecord(
                    id=f"transaction-{i + 1}",
                    transaction_id=f"TXN-{number}",
                    type=tx_type,
                    amount=to_money(round(amount, 2)),
                    status=status,
                    date=offset_days(self.today, -days_ago),
                )
            )

        # Most recent first; ties keep generation order
        records.sort(key=lambda record: record.date, reverse=True)
        return tuple(records), cursor
