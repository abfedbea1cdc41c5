"""Domain services classifying receivables by aging.

Every function here is pure: the reference date is an argument and the
system clock is only consulted when a caller leaves it out.
"""

from collections.abc import Callable
from datetime import date, datetime
from decimal import Decimal

from src.domain.constants import (
    MOST_SEVERE_OVERDUE_LEVEL,
    OVERDUE_LEVEL_THRESHOLDS,
)
from src.domain.models import (
    ClassifiedReceivable,
    OverdueLevel,
    PaymentStatus,
    ReceivableRecord,
)
from src.utils.decimal_utils import coerce_decimal

PaymentRule = Callable[[Decimal, Decimal, int], bool]

# Evaluated top to bottom, first match wins.
PAYMENT_STATUS_RULES: tuple[tuple[PaymentRule, PaymentStatus], ...] = (
    (lambda total, paid, days: paid >= total, PaymentStatus.PAID),
    (lambda total, paid, days: days > 0, PaymentStatus.OVERDUE),
    (lambda total, paid, days: paid > 0, PaymentStatus.PARTIAL),
    (lambda total, paid, days: True, PaymentStatus.UNPAID),
)


def _as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def classify_overdue_days(
    due_date: date | datetime,
    reference_date: date | datetime | None = None,
) -> int:
    """Return whole days elapsed since the due date.

    Args:
        due_date: Date the payment was due. Time components are dropped.
        reference_date: "Now" for the computation. Defaults to today.

    Returns:
        int: Days past due, 0 when the due date is today or later.
    """
    reference = _as_date(reference_date or date.today())
    elapsed = (reference - _as_date(due_date)).days
    return max(0, elapsed)


def classify_overdue_level(overdue_days: int) -> OverdueLevel:
    """Map days past due to an overdue level.

    Bands are inclusive on their upper bound: 60, 90 and 180 stay in the
    lower band, 61, 91 and 181 move up.

    Args:
        overdue_days: Days past due.

    Returns:
        OverdueLevel: Matching severity bucket.
    """
    for upper_bound, level in OVERDUE_LEVEL_THRESHOLDS:
        if overdue_days <= upper_bound:
            return level
    return MOST_SEVERE_OVERDUE_LEVEL


def classify_payment_status(
    total_amount: Decimal | int,
    paid_amount: Decimal | int,
    overdue_days: int,
) -> PaymentStatus:
    """Return the payment status using PAYMENT_STATUS_RULES.

    Full settlement wins over being past due, past due wins over a partial
    payment. Over-payment and negative amounts are accepted as is.

    Args:
        total_amount: Amount owed.
        paid_amount: Amount collected.
        overdue_days: Days past due.

    Returns:
        PaymentStatus: First status whose rule matches.
    """
    total = coerce_decimal(total_amount)
    paid = coerce_decimal(paid_amount)
    for predicate, status in PAYMENT_STATUS_RULES:
        if predicate(total, paid, overdue_days):
            return status
    return PaymentStatus.UNPAID


def classify_receivable(
    record: ReceivableRecord,
    reference_date: date | datetime | None = None,
) -> ClassifiedReceivable:
    """Derive remaining amount, overdue days, level and status."""
    total = coerce_decimal(record.total_amount)
    paid = coerce_decimal(record.paid_amount)
    overdue_days = classify_overdue_days(record.due_date, reference_date)
    return ClassifiedReceivable(
        record=record,
        remaining_amount=total - paid,
        overdue_days=overdue_days,
        overdue_level=classify_overdue_level(overdue_days),
        payment_status=classify_payment_status(total, paid, overdue_days),
    )


__all__ = [
    "PAYMENT_STATUS_RULES",
    "classify_overdue_days",
    "classify_overdue_level",
    "classify_payment_status",
    "classify_receivable",
]
