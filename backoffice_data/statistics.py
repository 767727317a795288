"""Summary statistics for loan tables."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Protocol, Sequence

from backoffice_data.generators.seeding import SeedCursor
from backoffice_data.models.financial import LoanStatistics, StatCard

logger = logging.getLogger(__name__)

GROWTH_SEED = "statistics"

# (low, high) percentage ranges for the generated growth figures
TOTAL_GROWTH_RANGE = (5.0, 15.0)
ACTIVE_GROWTH_RANGE = (3.0, 12.0)
COMPLETED_GROWTH_RANGE = (2.0, 10.0)


class LoanLike(Protocol):
    status: str
    amount: Decimal
    outstanding: Decimal


def calculate_loan_statistics(loans: Sequence[LoanLike]) -> LoanStatistics:
    """Aggregate a batch of loans for the summary cards.

    Counts and sums are recomputed from ``loans`` on every call. Growth
    percentages are not derived from history: they are drawn from a fixed
    stream (seed ``"statistics"``) and exposed as ``synthetic_growth``.

    Parameters
    ----------
    loans : Sequence[LoanLike]
        Any loan records with ``status``, ``amount`` and ``outstanding``.

    Returns
    -------
    LoanStatistics
        Card counts, synthetic growth, status counts and money totals.
    """
    total = len(loans)
    status_counts: dict[str, int] = {}
    for loan in loans:
        key = getattr(loan.status, "value", loan.status)
        status_counts[key] = status_counts.get(key, 0) + 1
    active = status_counts.get("Active", 0)

    cursor = SeedCursor.from_identifier(GROWTH_SEED)
    total_growth, cursor = cursor.next_float(*TOTAL_GROWTH_RANGE)
    active_growth, cursor = cursor.next_float(*ACTIVE_GROWTH_RANGE)
    completed_growth, cursor = cursor.next_float(*COMPLETED_GROWTH_RANGE)

    logger.debug("Computed statistics over %d loans (%d active)", total, active)

    return LoanStatistics(
        total_loans=StatCard(total, round(total_growth, 1)),
        active_loans=StatCard(active, round(active_growth, 1)),
        completed_loans=StatCard(total - active, round(completed_growth, 1)),
        total_amount=sum((loan.amount for loan in loans), Decimal("0.00")),
        total_outstanding=sum((loan.outstanding for loan in loans), Decimal("0.00")),
        status_counts=status_counts,
    )
