"""Field synthesizers: turn stream draws into typed field values."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Generic, Sequence, TypeVar

from backoffice_data.exceptions import ConfigurationError, EmptyPoolError
from backoffice_data.generators.seeding import SeedCursor, seeded_int

T = TypeVar("T")

ROLL_MIN = 1
ROLL_MAX = 100

_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class WeightedRoll(Generic[T]):
    """Map a roll in ``[1, 100]`` to a category through cumulative thresholds.

    ``thresholds`` is an ordered tuple of ``(upper_bound, category)``. A roll
    lands in the first category whose upper bound is ``>= roll``. Bounds
    must be strictly increasing and the last one must be exactly 100, so
    the table partitions ``[1, 100]`` with no gap or overlap.

    Example::

        status = WeightedRoll.from_weights([("Active", 60), ("Scheduled", 20),
                                            ("Completed", 15), ("Overdue", 5)])
        status.pick(61)  # "Scheduled"
    """

    thresholds: tuple[tuple[int, T], ...]

    def __post_init__(self) -> None:
        if not self.thresholds:
            raise ConfigurationError("Weighted roll needs at least one category")
        previous = ROLL_MIN - 1
        for bound, category in self.thresholds:
            if bound <= previous:
                raise ConfigurationError(
                    f"Threshold {bound} for {category!r} does not follow {previous}"
                )
            previous = bound
        if previous != ROLL_MAX:
            raise ConfigurationError(
                f"Thresholds must end at {ROLL_MAX}, last bound is {previous}"
            )

    @classmethod
    def from_weights(cls, weights: Sequence[tuple[T, int]]) -> WeightedRoll[T]:
        """Build the cumulative table from ``(category, percent)`` pairs."""
        thresholds = []
        total = 0
        for category, percent in weights:
            total += percent
            thresholds.append((total, category))
        return cls(tuple(thresholds))

    @property
    def categories(self) -> list[T]:
        return [category for _, category in self.thresholds]

    def weight_of(self, category: T) -> int:
        """Configured percentage of ``category``."""
        previous = 0
        for bound, candidate in self.thresholds:
            if candidate == category:
                return bound - previous
            previous = bound
        raise KeyError(category)

    def pick(self, roll: int) -> T:
        """Category for ``roll``; rolls outside ``[1, 100]`` are clamped."""
        roll = max(ROLL_MIN, min(roll, ROLL_MAX))
        for bound, category in self.thresholds:
            if roll <= bound:
                return category
        raise AssertionError("unreachable: last threshold is 100")

    def draw(self, cursor: SeedCursor) -> tuple[T, SeedCursor]:
        """Roll with the next value of ``cursor``."""
        roll, cursor = cursor.next_int(ROLL_MIN, ROLL_MAX)
        return self.pick(roll), cursor

    def draw_seeded(self, seed: int) -> T:
        """Roll with the first value of the stream for ``seed``."""
        return self.pick(seeded_int(seed, ROLL_MIN, ROLL_MAX))


def pick_by_seed(pool: Sequence[T], seed: int) -> T:
    """Select ``pool[seed % len(pool)]``."""
    if not pool:
        raise EmptyPoolError("Cannot select from an empty pool")
    return pool[seed % len(pool)]


def round_to_step(value: float, step: int) -> int:
    """Round ``value`` to the nearest multiple of ``step``."""
    return int(round(value / step)) * step


def to_money(value: float | int | Decimal) -> Decimal:
    """Convert an amount to a 2-decimal ``Decimal``."""
    return Decimal(str(value)).quantize(_CENTS, rounding=ROUND_HALF_UP)


def offset_days(today: date, days: int) -> date:
    """``today`` shifted by ``days`` (negative for the past)."""
    return today + timedelta(days=days)


def add_months(day: date, months: int) -> date:
    """Shift ``day`` by whole calendar months, clamping to the month's end."""
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))
