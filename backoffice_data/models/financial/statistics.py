"""Loan statistics models."""

from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class StatCard:
    """Summary card value.

    ``count`` is computed from the loans; ``synthetic_growth`` is a
    generated demo percentage and never reflects real trend data.
    """

    count: int
    synthetic_growth: float


@dataclass(frozen=True)
class LoanStatistics:
    """Aggregates over a batch of loans.

    ``status_counts`` is a read-only view keyed by status display value.
    """

    total_loans: StatCard
    active_loans: StatCard
    completed_loans: StatCard  # Every loan not currently Active
    total_amount: Decimal
    total_outstanding: Decimal
    status_counts: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        if not isinstance(self.status_counts, MappingProxyType):
            object.__setattr__(self, "status_counts", MappingProxyType(dict(self.status_counts)))
