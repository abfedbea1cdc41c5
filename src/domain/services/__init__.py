"""Domain services package."""

from .aging import (
    classify_overdue_days,
    classify_overdue_level,
    classify_payment_status,
    classify_receivable,
)
from .contamination import (
    contamination_display,
    contamination_groups,
    to_contamination_items,
)
from .labels import label_for, project_order_type_label
from .normalization import normalize_date, normalize_enum, normalize_text
from .projects import (
    group_by_project,
    select_representative,
    summarize_project,
    summarize_projects,
)
from .receivable_stats import (
    build_overdue_alerts,
    compute_overdue_level_breakdown,
    compute_receivable_stats,
)

__all__ = [
    "classify_overdue_days",
    "classify_overdue_level",
    "classify_payment_status",
    "classify_receivable",
    "contamination_display",
    "contamination_groups",
    "to_contamination_items",
    "normalize_date",
    "normalize_enum",
    "normalize_text",
    "label_for",
    "project_order_type_label",
    "group_by_project",
    "select_representative",
    "summarize_project",
    "summarize_projects",
    "build_overdue_alerts",
    "compute_overdue_level_breakdown",
    "compute_receivable_stats",
]
