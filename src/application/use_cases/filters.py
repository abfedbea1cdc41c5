"""List filters shared by the orders, receivables and achievements screens."""

from dataclasses import dataclass
from datetime import date

from src.domain.models import (
    Achievement,
    ClassifiedReceivable,
    ClientType,
    ContractRecord,
    OrderStatus,
    OverdueLevel,
    PaymentStatus,
)


def _matches_search(term: str, *values: str | None) -> bool:
    needle = term.strip().lower()
    if not needle:
        return True
    return any(value and needle in value.lower() for value in values)


def _within_period(
    value: date | None,
    start_date: date | None,
    end_date: date | None,
) -> bool:
    if not start_date and not end_date:
        return True
    if value is None:
        return False
    if start_date and value < start_date:
        return False
    if end_date and value > end_date:
        return False
    return True


@dataclass(frozen=True)
class OrdersFilter:
    """Filter applied to order rows before grouping.

    Attributes:
        search_term: Matched against project name, company and order number.
        client_type: Client type to keep, None for all.
        status: Order status to keep, None for all.
        start_date: Inclusive lower bound on the contract date.
        end_date: Inclusive upper bound on the contract date.
    """

    search_term: str = ""
    client_type: ClientType | None = None
    status: OrderStatus | None = None
    start_date: date | None = None
    end_date: date | None = None

    def matches(self, record: ContractRecord) -> bool:
        """Return True when the record passes every active criterion."""
        if not _matches_search(
            self.search_term,
            record.project_name,
            record.company_name,
            record.order_number,
        ):
            return False
        if self.client_type and record.client_type is not self.client_type:
            return False
        if self.status and record.status is not self.status:
            return False
        return _within_period(
            record.contract_date,
            self.start_date,
            self.end_date,
        )

    @property
    def active_count(self) -> int:
        """Return how many criteria are set; the date range counts once."""
        return sum(
            (
                bool(self.search_term.strip()),
                self.client_type is not None,
                self.status is not None,
                self.start_date is not None or self.end_date is not None,
            )
        )


@dataclass(frozen=True)
class ReceivablesFilter:
    """Filter applied to classified receivables."""

    search_term: str = ""
    payment_status: PaymentStatus | None = None
    client_type: ClientType | None = None
    overdue_level: OverdueLevel | None = None

    def matches(self, item: ClassifiedReceivable) -> bool:
        """Return True when the receivable passes every active criterion."""
        record = item.record
        if not _matches_search(
            self.search_term,
            record.project_name,
            record.company_name,
            record.receivable_number,
            record.order_number,
        ):
            return False
        if (
            self.payment_status
            and item.payment_status is not self.payment_status
        ):
            return False
        if self.client_type and item.client_type is not self.client_type:
            return False
        if self.overdue_level and item.overdue_level is not self.overdue_level:
            return False
        return True


@dataclass(frozen=True)
class AchievementsFilter:
    """Filter applied to achievement rows.

    Attributes:
        search_term: Matched against project name, manager and remarks.
        project_name: Exact project to keep, None for all.
        start_date: Inclusive lower bound on the achievement date.
        end_date: Inclusive upper bound on the achievement date.
    """

    search_term: str = ""
    project_name: str | None = None
    client_type: ClientType | None = None
    status: OrderStatus | None = None
    start_date: date | None = None
    end_date: date | None = None

    def matches(self, achievement: Achievement) -> bool:
        """Return True when the achievement passes every criterion."""
        if not _matches_search(
            self.search_term,
            achievement.project_name,
            achievement.manager,
            achievement.remarks,
        ):
            return False
        if (
            self.project_name
            and achievement.project_name != self.project_name
        ):
            return False
        if (
            self.client_type
            and achievement.client_type is not self.client_type
        ):
            return False
        if self.status and achievement.status is not self.status:
            return False
        return _within_period(
            achievement.achievement_date,
            self.start_date,
            self.end_date,
        )


__all__ = ["AchievementsFilter", "OrdersFilter", "ReceivablesFilter"]
