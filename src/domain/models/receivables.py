"""Domain models for receivables and their aging."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from src.utils.decimal_utils import round_half_up

from .enums import ClientType, OverdueLevel, PaymentStatus


@dataclass(frozen=True)
class ReceivableRecord:
    """Receivable row as fetched from the database.

    Attributes:
        total_amount: Amount owed, VAT included.
        paid_amount: Amount collected so far. May exceed total_amount.
        due_date: Calendar date the payment was due.
    """

    id: str
    receivable_number: str
    order_number: str
    project_name: str
    company_name: str
    client_type: ClientType | None
    total_amount: Decimal
    paid_amount: Decimal
    due_date: date
    primary_manager: str | None = None


@dataclass(frozen=True)
class ClassifiedReceivable:
    """Receivable with its derived aging fields."""

    record: ReceivableRecord
    remaining_amount: Decimal
    overdue_days: int
    overdue_level: OverdueLevel
    payment_status: PaymentStatus

    @property
    def client_type(self) -> ClientType | None:
        return self.record.client_type

    @property
    def total_amount(self) -> Decimal:
        return self.record.total_amount

    @property
    def paid_amount(self) -> Decimal:
        return self.record.paid_amount

    @property
    def due_date(self) -> date:
        return self.record.due_date


@dataclass(frozen=True)
class ClientTypeTotals:
    """Count and amount for one client type partition."""

    count: int = 0
    amount: Decimal = Decimal("0")


@dataclass(frozen=True)
class ReceivableStats:
    """Collection-level figures over classified receivables.

    Attributes:
        collection_rate: paid_amount / total_amount, 0 when nothing is owed.
    """

    total_count: int
    total_amount: Decimal
    paid_amount: Decimal
    remaining_amount: Decimal
    overdue_amount: Decimal
    collection_rate: Decimal
    by_status: dict[PaymentStatus, int] = field(default_factory=dict)
    by_client_type: dict[ClientType, ClientTypeTotals] = field(
        default_factory=dict
    )
    by_overdue_level: dict[OverdueLevel, int] = field(default_factory=dict)

    @property
    def collection_rate_percent(self) -> int:
        """Return the collection rate as a whole percentage."""
        return round_half_up(self.collection_rate * Decimal("100"))


@dataclass(frozen=True)
class OverdueLevelAmount:
    """Count and remaining amount of overdue receivables in one level."""

    level: OverdueLevel
    count: int
    amount: Decimal


@dataclass(frozen=True)
class OverdueAlert:
    """Alert line for an overdue receivable."""

    receivable_id: str
    receivable_number: str
    project_name: str
    company_name: str
    overdue_days: int
    overdue_level: OverdueLevel
    remaining_amount: Decimal
    due_date: date


__all__ = [
    "ReceivableRecord",
    "ClassifiedReceivable",
    "ClientTypeTotals",
    "ReceivableStats",
    "OverdueLevelAmount",
    "OverdueAlert",
]
