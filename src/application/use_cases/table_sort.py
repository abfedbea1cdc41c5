"""Tri-state column sorting shared by every list screen."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Literal

from src.domain.models import ProjectSummary
from src.domain.services.contamination import contamination_display
from src.domain.services.labels import label_for, project_order_type_label
from src.utils.decimal_utils import coerce_decimal

SortDirection = Literal["asc", "desc"]

NUMERIC_COLUMNS = frozenset(
    {
        "contract_amount",
        "progress_percentage",
        "total_amount",
        "paid_amount",
        "remaining_amount",
        "overdue_days",
        "file_count",
        "quantity",
        "unit_price",
        "amount",
    }
)
DATE_COLUMNS = frozenset({"contract_date", "due_date", "achievement_date"})
LABEL_COLUMNS = frozenset(
    {
        "status",
        "transport_type",
        "client_type",
        "order_type",
        "payment_status",
        "overdue_level",
        "contamination_info",
        "unit",
    }
)


@dataclass(frozen=True)
class SortState:
    """Current sort column and direction. A None column means unsorted."""

    column: str | None = None
    direction: SortDirection = "asc"


def toggle_sort(state: SortState, column: str) -> SortState:
    """Advance the sort state after a click on a column header.

    Clicking the sorted column cycles asc, desc, then cleared. Clicking any
    other column sorts it ascending.
    """
    if state.column != column:
        return SortState(column=column, direction="asc")
    if state.direction == "asc":
        return SortState(column=column, direction="desc")
    return SortState(column=None, direction="asc")


def _column_value(row, column: str):
    if hasattr(row, column):
        return getattr(row, column)
    record = getattr(row, "record", None)
    return getattr(record, column, None)


def _label_value(row, column: str, value) -> str:
    if column == "contamination_info":
        return contamination_display(
            _column_value(row, "contamination_source")
        )
    if column == "order_type" and isinstance(row, ProjectSummary):
        return project_order_type_label(row)
    if isinstance(value, Enum):
        return label_for(value)
    return label_for(None) if value is None else str(value)


def sort_key(column: str) -> Callable[[object], object]:
    """Return a key function comparing rows on the given column."""

    def _key(row):
        value = _column_value(row, column)
        if column in NUMERIC_COLUMNS:
            return coerce_decimal(value)
        if column in DATE_COLUMNS:
            if isinstance(value, datetime):
                return value.date()
            return value or date.min
        if column in LABEL_COLUMNS:
            return _label_value(row, column, value).lower()
        return str(value or "").lower()

    return _key


def sort_rows(rows: Sequence, state: SortState) -> list:
    """Return the rows sorted by the state, or unchanged when cleared.

    Sorting is stable: rows comparing equal keep their input order in both
    directions.
    """
    if not state.column:
        return list(rows)
    return sorted(
        rows,
        key=sort_key(state.column),
        reverse=state.direction == "desc",
    )


__all__ = [
    "SortDirection",
    "SortState",
    "toggle_sort",
    "sort_key",
    "sort_rows",
]
