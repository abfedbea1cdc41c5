"""Display labels for domain enumerations."""

from enum import Enum

from src.domain.constants import (
    ACHIEVEMENT_UNIT_LABELS,
    CLIENT_TYPE_LABELS,
    MISSING_LABEL,
    NEW_WITH_CHANGES_LABEL,
    ORDER_STATUS_LABELS,
    ORDER_TYPE_LABELS,
    OVERDUE_LEVEL_LABELS,
    PAYMENT_STATUS_LABELS,
    TRANSPORT_TYPE_LABELS,
)
from src.domain.models import (
    AchievementUnit,
    ClientType,
    OrderStatus,
    OrderType,
    OverdueLevel,
    PaymentStatus,
    ProjectSummary,
    TransportType,
)

LABEL_TABLES: dict[type[Enum], dict] = {
    OverdueLevel: OVERDUE_LEVEL_LABELS,
    PaymentStatus: PAYMENT_STATUS_LABELS,
    ClientType: CLIENT_TYPE_LABELS,
    OrderType: ORDER_TYPE_LABELS,
    OrderStatus: ORDER_STATUS_LABELS,
    TransportType: TRANSPORT_TYPE_LABELS,
    AchievementUnit: ACHIEVEMENT_UNIT_LABELS,
}


def label_for(member: Enum | None) -> str:
    """Return the Korean display label of an enumeration member.

    Args:
        member: Enumeration member or None.

    Returns:
        str: Display label, or the missing label for None.

    Raises:
        ValueError: If the enumeration has no label table.
    """
    if member is None:
        return MISSING_LABEL
    table = LABEL_TABLES.get(type(member))
    if table is None:
        raise ValueError(f"No display labels for {type(member).__name__}")
    return table[member]


def project_order_type_label(summary: ProjectSummary) -> str:
    """Return the order type label of a project summary row."""
    if summary.has_amendments and summary.representative.is_original:
        return NEW_WITH_CHANGES_LABEL
    return label_for(summary.record.order_type)


__all__ = ["LABEL_TABLES", "label_for", "project_order_type_label"]
