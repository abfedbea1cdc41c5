"""Domain models package."""

from .achievements import Achievement
from .enums import (
    AchievementUnit,
    ClientType,
    OrderStatus,
    OrderType,
    OverdueLevel,
    PaymentStatus,
    TransportType,
)
from .orders import ContaminationItem, ContractRecord, ProjectSummary
from .receivables import (
    ClassifiedReceivable,
    ClientTypeTotals,
    OverdueAlert,
    OverdueLevelAmount,
    ReceivableRecord,
    ReceivableStats,
)

__all__ = [
    "Achievement",
    "AchievementUnit",
    "ClientType",
    "OrderStatus",
    "OrderType",
    "OverdueLevel",
    "PaymentStatus",
    "TransportType",
    "ContaminationItem",
    "ContractRecord",
    "ProjectSummary",
    "ClassifiedReceivable",
    "ClientTypeTotals",
    "OverdueAlert",
    "OverdueLevelAmount",
    "ReceivableRecord",
    "ReceivableStats",
]
