"""Repayment schedule construction for active loans.

Statuses are assigned in two passes. The general pass labels each
installment by its due date (past is Paid, otherwise Upcoming). An ordered
table of :class:`ScheduleRule` then overrides fixed positions; later rules
win. ``DEMO_SCHEDULE_RULES`` pins the customer detail page's fixture:
installments 1-7 paid except installment 5, which is always missed, and
installments 8-10 upcoming.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_DOWN, Decimal
from typing import Sequence

from backoffice_data.generators.fields import add_months, to_money
from backoffice_data.models.financial import PaymentScheduleEntry, PaymentStatus

_CENTS = Decimal("0.01")
_ZERO = Decimal("0.00")


@dataclass(frozen=True)
class ScheduleRule:
    """Force ``status`` on every zero-based position in ``positions``."""

    positions: range
    status: PaymentStatus


DEMO_SCHEDULE_RULES: tuple[ScheduleRule, ...] = (
    ScheduleRule(range(0, 7), PaymentStatus.PAID),
    ScheduleRule(range(4, 5), PaymentStatus.MISSED),
    ScheduleRule(range(7, 10), PaymentStatus.UPCOMING),
)


def due_dates(start_date: date, count: int) -> list[date]:
    """Monthly due dates, the first one on ``start_date``."""
    return [add_months(start_date, i) for i in range(count)]


def assign_statuses(
    dates: Sequence[date],
    today: date,
    rules: Sequence[ScheduleRule] = DEMO_SCHEDULE_RULES,
) -> list[PaymentStatus]:
    """Label installments by due date, then apply ``rules`` in order."""
    statuses = [
        PaymentStatus.PAID if due < today else PaymentStatus.UPCOMING for due in dates
    ]
    for rule in rules:
        for position in rule.positions:
            if 0 <= position < len(statuses):
                statuses[position] = rule.status
    return statuses


def build_payment_schedule(
    amount: Decimal,
    outstanding: Decimal,
    start_date: date,
    today: date,
    count: int = 10,
    rules: Sequence[ScheduleRule] = DEMO_SCHEDULE_RULES,
) -> tuple[PaymentScheduleEntry, ...]:
    """Build a repayment schedule consistent with a loan's balance.

    The amount already repaid (``amount - outstanding``) is split evenly
    over the Paid installments; the last Paid installment absorbs the
    rounding remainder, so its remaining balance equals ``outstanding``
    exactly. Missed and Upcoming installments pay nothing. Every
    installment is due ``amount / count``.

    Parameters
    ----------
    amount : Decimal
        Loan principal.
    outstanding : Decimal
        Balance still owed, ``0 <= outstanding <= amount``.
    start_date : date
        Due date of the first installment.
    today : date
        Reference date for the by-date status pass.
    count : int
        Number of installments.
    rules : Sequence[ScheduleRule]
        Positional status overrides.

    Returns
    -------
    tuple[PaymentScheduleEntry, ...]
        Installments in due-date order.
    """
    dates = due_dates(start_date, count)
    statuses = assign_statuses(dates, today, rules)

    repaid = amount - outstanding
    paid_positions = [i for i, status in enumerate(statuses) if status == PaymentStatus.PAID]

    installment = to_money(amount / count) if count else _ZERO
    if paid_positions:
        share = (repaid / len(paid_positions)).quantize(_CENTS, rounding=ROUND_DOWN)
    else:
        share = _ZERO

    entries = []
    cumulative = _ZERO
    for i, (due, status) in enumerate(zip(dates, statuses)):
        if status == PaymentStatus.PAID:
            paid = share if i != paid_positions[-1] else repaid - cumulative
        else:
            paid = _ZERO
        cumulative += paid

        entries.append(
            PaymentScheduleEntry(
                id=f"payment-{i + 1}",
                payment_number=i + 1,
                due_date=due,
                amount_due=installment,
                amount_paid=paid,
                cumulative_paid=cumulative,
                remaining_balance=amount - cumulative,
                status=status,
            )
        )

    return tuple(entries)
