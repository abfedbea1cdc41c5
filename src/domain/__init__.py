"""Domain package for business rules and core models."""

from .constants import OVERDUE_LEVEL_THRESHOLDS
from .models import (
    ClassifiedReceivable,
    ClientType,
    ContaminationItem,
    ContractRecord,
    OrderStatus,
    OrderType,
    OverdueLevel,
    PaymentStatus,
    ProjectSummary,
    ReceivableRecord,
    ReceivableStats,
    TransportType,
)
from .services import (
    classify_overdue_days,
    classify_overdue_level,
    classify_payment_status,
    classify_receivable,
    compute_receivable_stats,
    group_by_project,
    label_for,
    summarize_project,
    summarize_projects,
)

__all__ = [
    "OVERDUE_LEVEL_THRESHOLDS",
    "ClassifiedReceivable",
    "ClientType",
    "ContaminationItem",
    "ContractRecord",
    "OrderStatus",
    "OrderType",
    "OverdueLevel",
    "PaymentStatus",
    "ProjectSummary",
    "ReceivableRecord",
    "ReceivableStats",
    "TransportType",
    "classify_overdue_days",
    "classify_overdue_level",
    "classify_payment_status",
    "classify_receivable",
    "compute_receivable_stats",
    "group_by_project",
    "label_for",
    "summarize_project",
    "summarize_projects",
]
