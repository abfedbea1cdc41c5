"""Table and chart presentation logic for the Streamlit UI.

Pure transformations from use case results to rows ready for
``st.dataframe`` and Altair. No IO and no Streamlit calls here.
"""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from src.domain.constants import OVERDUE_LEVEL_DESCRIPTIONS
from src.domain.models import (
    Achievement,
    ClassifiedReceivable,
    ContractRecord,
    OverdueLevelAmount,
    ProjectSummary,
)
from src.domain.services.contamination import contamination_display
from src.domain.services.labels import label_for, project_order_type_label

MISSING_CELL = "—"

# Column key -> header, for the sortable orders table.
ORDER_COLUMNS = {
    "status": "계약상태",
    "client_type": "구분",
    "project_name": "프로젝트명",
    "company_name": "고객사",
    "contract_date": "계약일",
    "contract_amount": "계약금액",
    "transport_type": "정화장소",
    "progress_percentage": "진행률",
    "contamination_info": "오염정보",
}

RECEIVABLE_COLUMNS = {
    "receivable_number": "채권번호",
    "company_name": "고객사",
    "total_amount": "총 금액",
    "remaining_amount": "미수금액",
    "due_date": "만료일",
    "overdue_days": "연체일수",
    "overdue_level": "연체단계",
    "payment_status": "상태",
}

ACHIEVEMENT_COLUMNS = {
    "status": "상태",
    "client_type": "고객사 유형",
    "project_name": "프로젝트명",
    "manager": "담당자",
    "achievement_date": "일자",
    "transport_type": "정화장소",
    "unit": "단위",
    "quantity": "수량",
    "unit_price": "단가",
    "amount": "금액",
}


def format_currency(value: Decimal, currency_code: str = "KRW") -> str:
    """Format whole currency units for display."""
    symbol = "₩" if currency_code == "KRW" else f"{currency_code} "
    return f"{symbol}{value:,.0f}"


def format_quantity(value: Decimal) -> str:
    """Format a measured quantity with two decimal places."""
    return f"{value:,.2f}"


def format_date(value: date | None) -> str:
    """Format a calendar date for display."""
    if value is None:
        return MISSING_CELL
    return value.isoformat()


def sort_indicator(
    column: str,
    sort_column: str | None,
    direction: str,
) -> str:
    """Return the arrow shown next to a column header."""
    if column != sort_column:
        return ""
    return " ▲" if direction == "asc" else " ▼"


def _order_row(
    record: ContractRecord,
    currency_code: str,
    order_type_label: str,
    project_label: str,
) -> dict[str, str | int]:
    return {
        ORDER_COLUMNS["status"]: label_for(record.status),
        ORDER_COLUMNS["client_type"]: label_for(record.client_type),
        ORDER_COLUMNS["project_name"]: project_label,
        "수주번호": record.order_number,
        ORDER_COLUMNS["company_name"]: record.company_name,
        "수주유형": order_type_label,
        ORDER_COLUMNS["contract_date"]: format_date(record.contract_date),
        ORDER_COLUMNS["contract_amount"]: format_currency(
            record.contract_amount,
            currency_code,
        ),
        ORDER_COLUMNS["transport_type"]: label_for(record.transport_type),
        ORDER_COLUMNS["progress_percentage"]: record.progress_percentage,
        ORDER_COLUMNS["contamination_info"]: contamination_display(
            record.contamination_source
        ),
        "파일": record.file_count,
    }


def build_project_rows(
    summaries: Sequence[ProjectSummary],
    currency_code: str = "KRW",
) -> list[dict[str, str | int]]:
    """Build one table row per project summary."""
    rows = []
    for summary in summaries:
        project_label = summary.record.project_name or MISSING_CELL
        if summary.member_count > 1:
            project_label = f"{project_label} ({summary.member_count})"
        rows.append(
            _order_row(
                summary.record,
                currency_code,
                project_order_type_label(summary),
                project_label,
            )
        )
    return rows


def build_order_rows(
    records: Sequence[ContractRecord],
    currency_code: str = "KRW",
) -> list[dict[str, str | int]]:
    """Build one table row per order."""
    return [
        _order_row(
            record,
            currency_code,
            label_for(record.order_type),
            record.project_name or MISSING_CELL,
        )
        for record in records
    ]


def build_receivable_rows(
    receivables: Sequence[ClassifiedReceivable],
    currency_code: str = "KRW",
) -> list[dict[str, str | int]]:
    """Build one table row per classified receivable."""
    rows = []
    for item in receivables:
        record = item.record
        rows.append(
            {
                RECEIVABLE_COLUMNS["receivable_number"]: (
                    record.receivable_number
                ),
                "프로젝트명": record.project_name,
                RECEIVABLE_COLUMNS["company_name"]: record.company_name,
                "구분": label_for(record.client_type),
                RECEIVABLE_COLUMNS["total_amount"]: format_currency(
                    item.total_amount,
                    currency_code,
                ),
                RECEIVABLE_COLUMNS["remaining_amount"]: format_currency(
                    item.remaining_amount,
                    currency_code,
                ),
                RECEIVABLE_COLUMNS["due_date"]: format_date(item.due_date),
                RECEIVABLE_COLUMNS["overdue_days"]: item.overdue_days,
                RECEIVABLE_COLUMNS["overdue_level"]: label_for(
                    item.overdue_level
                ),
                RECEIVABLE_COLUMNS["payment_status"]: label_for(
                    item.payment_status
                ),
                "담당자": record.primary_manager or MISSING_CELL,
            }
        )
    return rows


def build_achievement_rows(
    achievements: Sequence[Achievement],
    currency_code: str = "KRW",
) -> list[dict[str, str]]:
    """Build one table row per achievement."""
    return [
        {
            ACHIEVEMENT_COLUMNS["status"]: label_for(achievement.status),
            ACHIEVEMENT_COLUMNS["client_type"]: label_for(
                achievement.client_type
            ),
            ACHIEVEMENT_COLUMNS["project_name"]: achievement.project_name,
            ACHIEVEMENT_COLUMNS["manager"]: (
                achievement.manager or MISSING_CELL
            ),
            ACHIEVEMENT_COLUMNS["achievement_date"]: format_date(
                achievement.achievement_date
            ),
            ACHIEVEMENT_COLUMNS["transport_type"]: label_for(
                achievement.transport_type
            ),
            ACHIEVEMENT_COLUMNS["unit"]: label_for(achievement.unit),
            ACHIEVEMENT_COLUMNS["quantity"]: format_quantity(
                achievement.quantity
            ),
            ACHIEVEMENT_COLUMNS["unit_price"]: format_currency(
                achievement.unit_price,
                currency_code,
            ),
            ACHIEVEMENT_COLUMNS["amount"]: format_currency(
                achievement.amount,
                currency_code,
            ),
            "비고": achievement.remarks or "",
        }
        for achievement in achievements
    ]


def build_level_chart_data(
    breakdown: Sequence[OverdueLevelAmount],
    currency_code: str = "KRW",
) -> list[dict[str, str | int | float]]:
    """Prepare Altair-ready data for the overdue amount per level chart."""
    return [
        {
            "level": label_for(entry.level),
            "severity": entry.level.severity,
            "description": OVERDUE_LEVEL_DESCRIPTIONS[entry.level],
            "count": entry.count,
            "amount": float(entry.amount),
            "amount_label": format_currency(entry.amount, currency_code),
        }
        for entry in breakdown
    ]


__all__ = [
    "ORDER_COLUMNS",
    "RECEIVABLE_COLUMNS",
    "ACHIEVEMENT_COLUMNS",
    "format_currency",
    "format_date",
    "format_quantity",
    "sort_indicator",
    "build_project_rows",
    "build_order_rows",
    "build_receivable_rows",
    "build_achievement_rows",
    "build_level_chart_data",
]
