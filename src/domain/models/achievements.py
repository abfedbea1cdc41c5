"""Domain model for recorded work achievements."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from .enums import AchievementUnit, ClientType, OrderStatus, TransportType


@dataclass(frozen=True)
class Achievement:
    """Quantity of remediation work performed on a project on one day.

    Client type, status, manager and transport type are copied from the
    linked order when the achievement is recorded.

    Attributes:
        quantity: Measured quantity, two decimal places.
        amount: Quantity times unit price, or an amount entered directly.
    """

    id: str
    order_id: str
    project_name: str
    achievement_date: date | None
    unit: AchievementUnit | None
    quantity: Decimal
    unit_price: Decimal
    amount: Decimal
    project_id: str | None = None
    client_type: ClientType | None = None
    status: OrderStatus | None = None
    transport_type: TransportType | None = None
    manager: str | None = None
    remarks: str | None = None


__all__ = ["Achievement"]
