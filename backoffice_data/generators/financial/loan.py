"""Branch loan generator."""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Iterator

from backoffice_data.generators.base import BaseGenerator
from backoffice_data.generators.fields import (
    WeightedRoll,
    add_months,
    offset_days,
    round_to_step,
    to_money,
)
from backoffice_data.generators.pool import DataPools
from backoffice_data.generators.seeding import SeedCursor, hash_string
from backoffice_data.models.financial import Loan, LoanStatus

logger = logging.getLogger(__name__)


class BranchLoanGenerator(BaseGenerator):
    """Generate the loan book of a branch.

    Parameters
    ----------
    branch_id : str
        Branch identifier used as the batch seed.
    pools : DataPools | None
        Literal pools (first and last names are combined).
    today : date | None
        Reference date for disbursement and repayment dates.
    """

    STATUS = WeightedRoll.from_weights(
        [
            (LoanStatus.ACTIVE, 70),
            (LoanStatus.SCHEDULED, 20),
            (LoanStatus.MISSED_PAYMENT, 10),
        ]
    )

    AMOUNT_RANGE = (40000, 100000)  # Naira
    AMOUNT_STEP = 1000
    RATE_RANGE = (6.75, 8.50)  # Percent
    DISBURSED_WITHIN_MONTHS = 24
    REPAYMENT_WITHIN_MONTHS = 12

    def __init__(
        self,
        branch_id: str,
        pools: DataPools | None = None,
        today: date | None = None,
    ) -> None:
        super().__init__(pools, today)
        self.branch_id = branch_id
        self.base_seed = hash_string(branch_id)

    def generate(self, index: int) -> Loan:
        """Generate the loan at position ``index`` of the branch book."""
        cursor = SeedCursor.from_seed(self.base_seed + index)

        loan_number, cursor = cursor.next_int(10000, 99999)
        first_name, cursor = cursor.choice(self.pools.first_names)
        last_name, cursor = cursor.choice(self.pools.last_names)
        status, cursor = self.STATUS.draw(cursor)

        missed_payments = None
        if status == LoanStatus.MISSED_PAYMENT:
            missed_payments, cursor = cursor.next_int(1, 3)

        raw_amount, cursor = cursor.next_float(*self.AMOUNT_RANGE)
        amount = to_money(round_to_step(raw_amount, self.AMOUNT_STEP))
        raw_rate, cursor = cursor.next_float(*self.RATE_RANGE)

        disbursed_span = (self.today - add_months(self.today, -self.DISBURSED_WITHIN_MONTHS)).days
        disbursed_ago, cursor = cursor.next_int(0, disbursed_span)
        repayment_span = (add_months(self.today, self.REPAYMENT_WITHIN_MONTHS) - self.today).days
        repayment_in, cursor = cursor.next_int(1, repayment_span)

        outstanding_share, cursor = cursor.next_float(0.1, 1.0)

        return Loan(
            id=f"{self.branch_id}-loan-{index}",
            loan_id=str(loan_number),
            borrower_name=f"{first_name} {last_name}",
            status=status,
            amount=amount,
            interest_rate=Decimal(str(round(raw_rate, 2))),
            outstanding=min(amount, to_money(float(amount) * outstanding_share)),
            next_repayment_date=offset_days(self.today, repayment_in),
            disbursement_date=offset_days(self.today, -disbursed_ago),
            branch_id=self.branch_id,
            missed_payments=missed_payments,
        )

    def generate_batch(self, count: int = 100) -> Iterator[Loan]:
        """Generate ``count`` loans in book order.

        Raises
        ------
        InvalidCountError
            If ``count`` is negative or not an integer.
        """
        self._validate_count(count)
        logger.debug(
            "Generating %d loans for branch %r",
            count,
            self.branch_id,
            extra={"entity": "branch_loans", "count": count, "seed": self.base_seed},
        )
        return (self.generate(i) for i in range(count))
