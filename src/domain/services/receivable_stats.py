"""Domain services aggregating classified receivables."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.models import (
    ClassifiedReceivable,
    ClientType,
    ClientTypeTotals,
    OverdueAlert,
    OverdueLevel,
    OverdueLevelAmount,
    PaymentStatus,
    ReceivableStats,
)


def compute_receivable_stats(
    receivables: Iterable[ClassifiedReceivable],
) -> ReceivableStats:
    """Compute totals, collection rate and partition counts.

    Args:
        receivables: Receivables already classified against a reference date.

    Returns:
        ReceivableStats: Aggregated figures. The collection rate is 0 when
        the total amount is 0.
    """
    total_count = 0
    total_amount = Decimal("0")
    paid_amount = Decimal("0")
    remaining_amount = Decimal("0")
    overdue_amount = Decimal("0")
    by_status = {status: 0 for status in PaymentStatus}
    by_level = {level: 0 for level in OverdueLevel}
    client_counts = {client_type: 0 for client_type in ClientType}
    client_amounts = {client_type: Decimal("0") for client_type in ClientType}

    for item in receivables:
        total_count += 1
        total_amount += item.total_amount
        paid_amount += item.paid_amount
        remaining_amount += item.remaining_amount
        if item.payment_status is PaymentStatus.OVERDUE:
            overdue_amount += item.remaining_amount
        by_status[item.payment_status] += 1
        by_level[item.overdue_level] += 1
        if item.client_type is not None:
            client_counts[item.client_type] += 1
            client_amounts[item.client_type] += item.total_amount

    collection_rate = (
        paid_amount / total_amount if total_amount != 0 else Decimal("0")
    )
    by_client_type = {
        client_type: ClientTypeTotals(
            count=client_counts[client_type],
            amount=client_amounts[client_type],
        )
        for client_type in ClientType
    }
    return ReceivableStats(
        total_count=total_count,
        total_amount=total_amount,
        paid_amount=paid_amount,
        remaining_amount=remaining_amount,
        overdue_amount=overdue_amount,
        collection_rate=collection_rate,
        by_status=by_status,
        by_client_type=by_client_type,
        by_overdue_level=by_level,
    )


def compute_overdue_level_breakdown(
    receivables: Iterable[ClassifiedReceivable],
) -> list[OverdueLevelAmount]:
    """Count overdue receivables and sum their remaining amount per level.

    Only receivables whose status is overdue are counted. Every level is
    present in the result, in severity order.
    """
    counts = {level: 0 for level in OverdueLevel}
    amounts = {level: Decimal("0") for level in OverdueLevel}
    for item in receivables:
        if item.payment_status is not PaymentStatus.OVERDUE:
            continue
        counts[item.overdue_level] += 1
        amounts[item.overdue_level] += item.remaining_amount
    return [
        OverdueLevelAmount(
            level=level,
            count=counts[level],
            amount=amounts[level],
        )
        for level in OverdueLevel
    ]


def build_overdue_alerts(
    receivables: Iterable[ClassifiedReceivable],
) -> list[OverdueAlert]:
    """Return one alert per overdue receivable, most overdue first."""
    alerts = [
        OverdueAlert(
            receivable_id=item.record.id,
            receivable_number=item.record.receivable_number,
            project_name=item.record.project_name,
            company_name=item.record.company_name,
            overdue_days=item.overdue_days,
            overdue_level=item.overdue_level,
            remaining_amount=item.remaining_amount,
            due_date=item.due_date,
        )
        for item in receivables
        if item.payment_status is PaymentStatus.OVERDUE
    ]
    return sorted(alerts, key=lambda alert: alert.overdue_days, reverse=True)


__all__ = [
    "compute_receivable_stats",
    "compute_overdue_level_breakdown",
    "build_overdue_alerts",
]
