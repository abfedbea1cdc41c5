"""Closed enumerations shared by the ERP domain models."""

from enum import Enum


class OverdueLevel(str, Enum):
    """Aging bucket of a receivable, ordered by severity."""

    NORMAL = "normal"
    WARNING = "warning"
    LONGTERM = "longterm"
    BAD = "bad"

    @property
    def severity(self) -> int:
        """Return the rank of the level (0 is the least severe)."""
        return list(OverdueLevel).index(self)


class PaymentStatus(str, Enum):
    """Collection status of a receivable."""

    UNPAID = "unpaid"
    PARTIAL = "partial"
    PAID = "paid"
    OVERDUE = "overdue"


class ClientType(str, Enum):
    """Public (관수) or private (민수) client."""

    GOVERNMENT = "government"
    PRIVATE = "private"


class OrderType(str, Enum):
    """Original contract or numbered change order."""

    NEW = "new"
    CHANGE1 = "change1"
    CHANGE2 = "change2"
    CHANGE3 = "change3"
    CHANGE4 = "change4"
    CHANGE5 = "change5"

    @property
    def is_amendment(self) -> bool:
        """Return True for change orders."""
        return self is not OrderType.NEW


class OrderStatus(str, Enum):
    """Contract lifecycle status."""

    BIDDING = "bidding"
    CONTRACTED = "contracted"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class TransportType(str, Enum):
    """Where the soil is treated."""

    ONSITE = "onsite"
    TRANSPORT = "transport"


class AchievementUnit(str, Enum):
    """Unit a work achievement is measured in."""

    TON = "ton"
    CUBIC_METER = "m3"
    UNIT = "unit"
    NONE = "none"


__all__ = [
    "OverdueLevel",
    "PaymentStatus",
    "ClientType",
    "OrderType",
    "OrderStatus",
    "TransportType",
    "AchievementUnit",
]
