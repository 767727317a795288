"""Credit officer generator: profile, portfolio, repayments and collections."""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Callable, TypeVar

from backoffice_data.formatting import make_email, officer_phone
from backoffice_data.generators.base import BaseGenerator
from backoffice_data.generators.fields import (
    WeightedRoll,
    offset_days,
    pick_by_seed,
    to_money,
)
from backoffice_data.generators.pool import DataPools
from backoffice_data.generators.seeding import hash_string, seeded_float, seeded_int
from backoffice_data.models.financial import (
    CollectionStatus,
    CollectionTransaction,
    CollectionType,
    CreditOfficer,
    DisbursedLoan,
    DisbursedLoanStatus,
    Gender,
    LoanStatus,
    OfficerLoan,
    RepaymentStatus,
    RepaymentTransaction,
    TransactionType,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CreditOfficerGenerator(BaseGenerator):
    """Generate everything the credit officer detail page shows.

    All records derive from ``hash_string(officer_id)``. Batch element
    ``i`` uses the seed ``hash + i`` and each of its fields reads its own
    sub-stream (``seed``, ``seed * 2``, ... ``seed * 6``), so a field's
    value does not depend on how many fields were drawn before it.

    Parameters
    ----------
    officer_id : str
        Credit officer identifier.
    pools : DataPools | None
        Literal pools.
    today : date | None
        Reference date for repayment and transaction dates.
    """

    CO_ID_OFFSET = 46729233
    DATE_JOINED = date(2025, 1, 15)
    EMAIL_DOMAIN = "email.com"

    LOAN_STATUS = WeightedRoll.from_weights(
        [
            (LoanStatus.ACTIVE, 60),
            (LoanStatus.SCHEDULED, 20),
            (LoanStatus.COMPLETED, 15),
            (LoanStatus.OVERDUE, 5),
        ]
    )
    REPAYMENT_STATUS = WeightedRoll.from_weights(
        [(RepaymentStatus.SUCCESSFUL, 80), (RepaymentStatus.PENDING, 20)]
    )
    COLLECTION_TYPE = WeightedRoll.from_weights(
        [
            (CollectionType.DEPOSIT, 50),
            (CollectionType.WITHDRAWAL, 30),
            (CollectionType.TRANSFER, 20),
        ]
    )
    COLLECTION_STATUS = WeightedRoll.from_weights(
        [
            (CollectionStatus.COMPLETED, 70),
            (CollectionStatus.PENDING, 20),
            (CollectionStatus.FAILED, 10),
        ]
    )
    DISBURSED_STATUS = WeightedRoll.from_weights(
        [
            (DisbursedLoanStatus.ACTIVE, 60),
            (DisbursedLoanStatus.COMPLETED, 30),
            (DisbursedLoanStatus.DEFAULTED, 10),
        ]
    )

    def __init__(
        self,
        officer_id: str,
        pools: DataPools | None = None,
        today: date | None = None,
    ) -> None:
        super().__init__(pools, today)
        self.officer_id = officer_id
        self.base_seed = hash_string(officer_id)

    def details(self) -> CreditOfficer:
        """Generate the officer's profile."""
        seed = self.base_seed
        name = pick_by_seed(self.pools.officer_names, seed)

        return CreditOfficer(
            id=self.officer_id,
            name=name,
            co_id=str(self.CO_ID_OFFSET + seed),
            date_joined=self.DATE_JOINED,
            email=make_email(name, self.EMAIL_DOMAIN, suffix="234"),
            phone=officer_phone(seeded_int(seed * 6, 800000000, 919999999)),
            gender=Gender(pick_by_seed(self.pools.genders, seed)),
        )

    def loans(self, count: int = 50) -> list[OfficerLoan]:
        """Generate the officer's loan portfolio."""
        return self._batch("loans", count, self._loan)

    def repayments(self, count: int = 50) -> list[RepaymentTransaction]:
        """Generate repayments collected on the officer's disbursed loans."""
        return self._batch("repayments", count, self._repayment)

    def collections(self, count: int = 50) -> list[CollectionTransaction]:
        """Generate the officer's collection transactions."""
        return self._batch("collections", count, self._collection)

    def disbursed_loans(self, count: int = 50) -> list[DisbursedLoan]:
        """Generate loans disbursed by the officer."""
        return self._batch("disbursed_loans", count, self._disbursed_loan)

    def _batch(self, label: str, count: int, build: Callable[[int], T]) -> list[T]:
        self._validate_count(count)
        logger.debug(
            "Generating %d %s for officer %r",
            count,
            label,
            self.officer_id,
            extra={"entity": label, "count": count, "seed": self.base_seed},
        )
        return [build(index) for index in range(count)]

    def _loan(self, index: int) -> OfficerLoan:
        seed = self.base_seed + index

        status = self.LOAN_STATUS.draw_seeded(seed * 2)
        amount = to_money(seeded_int(seed * 3, 10000, 100000))
        # 5.00% - 10.00% stored as a fraction
        interest_rate = Decimal(seeded_int(seed * 4, 500, 1000)) / Decimal(10000)

        if status in (LoanStatus.ACTIVE, LoanStatus.SCHEDULED):
            days_offset = seeded_int(seed * 5, 1, 180)
        else:
            days_offset = seeded_int(seed * 5, -365, -1)

        if status == LoanStatus.COMPLETED:
            outstanding = Decimal("0.00")
        else:
            outstanding = min(amount, to_money(float(amount) * seeded_float(seed * 6, 0.1, 1.0)))

        return OfficerLoan(
            id=f"loan-{self.officer_id}-{index}",
            loan_id=str(seeded_int(seed, 10000, 99999)),
            borrower_name=pick_by_seed(self.pools.borrower_names, seed),
            status=status,
            amount=amount,
            interest_rate=interest_rate,
            outstanding=outstanding,
            next_repayment=offset_days(self.today, days_offset),
            credit_officer_id=self.officer_id,
        )

    def _repayment(self, index: int) -> RepaymentTransaction:
        seed = self.base_seed + index

        return RepaymentTransaction(
            id=f"transaction-{self.officer_id}-{index}",
            transaction_id=str(seeded_int(seed, 10000, 99999)),
            type=TransactionType.REPAYMENT,
            amount=to_money(seeded_int(seed * 3, 25000, 50000)),
            status=self.REPAYMENT_STATUS.draw_seeded(seed * 2),
            date=offset_days(self.today, -seeded_int(seed * 5, 0, 365)),
            credit_officer_id=self.officer_id,
        )

    def _collection(self, index: int) -> CollectionTransaction:
        seed = self.base_seed + index

        return CollectionTransaction(
            id=f"collection-{self.officer_id}-{index}",
            transaction_id=f"TXN{seeded_int(seed, 10000000, 99999999)}",
            type=self.COLLECTION_TYPE.draw_seeded(seed * 2),
            amount=to_money(seeded_int(seed * 3, 5000, 100000)),
            status=self.COLLECTION_STATUS.draw_seeded(seed * 4),
            date=offset_days(self.today, -seeded_int(seed * 5, 0, 365)),
            credit_officer_id=self.officer_id,
        )

    def _disbursed_loan(self, index: int) -> DisbursedLoan:
        seed = self.base_seed + index

        status = self.DISBURSED_STATUS.draw_seeded(seed * 2)
        amount = to_money(seeded_int(seed * 3, 10000, 500000))

        # Active loans repay in the future, closed ones last repaid in the past
        if status == DisbursedLoanStatus.ACTIVE:
            days_offset = seeded_int(seed * 5, 1, 90)
        else:
            days_offset = seeded_int(seed * 5, -365, -1)

        if status == DisbursedLoanStatus.COMPLETED:
            outstanding = Decimal("0.00")
        else:
            outstanding = min(amount, to_money(float(amount) * seeded_float(seed * 6, 0.2, 1.0)))

        return DisbursedLoan(
            id=f"disbursed-{self.officer_id}-{index}",
            loan_id=f"LN{seeded_int(seed, 100000, 999999)}",
            name=pick_by_seed(self.pools.borrower_names, seed),
            status=status,
            amount=amount,
            interest=seeded_int(seed * 4, 5, 15),
            outstanding=outstanding,
            next_repayment=offset_days(self.today, days_offset),
            credit_officer_id=self.officer_id,
        )
