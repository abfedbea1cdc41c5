"""Domain models for orders, contract amendments and projects."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from .enums import ClientType, OrderStatus, OrderType, TransportType


@dataclass(frozen=True)
class ContaminationItem:
    """Pollutant measured on a site, with its concentration in mg/kg."""

    type: str
    value: float


@dataclass(frozen=True)
class ContractRecord:
    """Single order row: an original contract or one of its change orders.

    Attributes:
        order_type: Amendment marker. ``OrderType.NEW`` is the original.
        progress_percentage: Progress between 0 and 100.
        contamination_text: Stored contamination note when it is free text
            rather than a list of measured items.
    """

    id: str
    order_number: str
    project_name: str | None
    company_name: str
    contract_date: date | None
    contract_amount: Decimal
    order_type: OrderType | None
    progress_percentage: int = 0
    project_id: str | None = None
    client_type: ClientType | None = None
    status: OrderStatus | None = None
    transport_type: TransportType | None = None
    contamination_info: tuple[ContaminationItem, ...] = field(
        default_factory=tuple
    )
    contamination_text: str | None = None
    primary_manager: str | None = None
    secondary_manager: str | None = None
    file_count: int = 0

    @property
    def project_key(self) -> str | None:
        """Return the default grouping identifier (the project name)."""
        if not self.project_name:
            return None
        cleaned = self.project_name.strip()
        return cleaned or None

    @property
    def contamination_source(self) -> tuple[ContaminationItem, ...] | str:
        """Return the measured items, or the free-text note without them."""
        if self.contamination_info:
            return self.contamination_info
        return self.contamination_text or ()

    @property
    def is_original(self) -> bool:
        """Return True when the record is the original (new) contract."""
        return self.order_type is OrderType.NEW


@dataclass(frozen=True)
class ProjectSummary:
    """One row per project in the orders summary view.

    Attributes:
        record: Representative contract with the summed amount and the
            averaged progress.
        representative: The chosen representative, untouched.
        amendments: Change orders of the project in input order.
        members: Every record of the project in input order.
    """

    project_key: str
    record: ContractRecord
    representative: ContractRecord
    amendments: tuple[ContractRecord, ...]
    members: tuple[ContractRecord, ...]

    @property
    def contract_amount(self) -> Decimal:
        return self.record.contract_amount

    @property
    def progress_percentage(self) -> int:
        return self.record.progress_percentage

    @property
    def has_amendments(self) -> bool:
        return bool(self.amendments)

    @property
    def member_count(self) -> int:
        return len(self.members)


__all__ = ["ContaminationItem", "ContractRecord", "ProjectSummary"]
