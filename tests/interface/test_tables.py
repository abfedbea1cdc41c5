"""Tests for the Streamlit table builders."""

from datetime import date
from decimal import Decimal

from src.adapters.interface.streamlit import tables
from src.domain.models import (
    Achievement,
    AchievementUnit,
    ClientType,
    ContaminationItem,
    ContractRecord,
    OrderStatus,
    OrderType,
    OverdueLevel,
    OverdueLevelAmount,
    ReceivableRecord,
    TransportType,
)
from src.domain.services.aging import classify_receivable
from src.domain.services.projects import summarize_projects


def _contract(order_number: str, amount: str, order_type: OrderType):
    return ContractRecord(
        id=order_number,
        order_number=order_number,
        project_name="Ulsan refinery site",
        company_name="한국석유",
        contract_date=date(2024, 4, 15),
        contract_amount=Decimal(amount),
        order_type=order_type,
        progress_percentage=40,
        client_type=ClientType.PRIVATE,
        status=OrderStatus.CONTRACTED,
        contamination_info=(ContaminationItem(type="TPH", value=900.0),),
    )


def test_format_helpers() -> None:
    """Currency, dates and sort arrows are formatted for display."""
    assert tables.format_currency(Decimal("1234567")) == "₩1,234,567"
    assert tables.format_currency(Decimal("10"), "USD") == "USD 10"
    assert tables.format_date(None) == "—"
    assert tables.format_date(date(2024, 1, 2)) == "2024-01-02"
    assert tables.sort_indicator("a", "a", "asc") == " ▲"
    assert tables.sort_indicator("a", "a", "desc") == " ▼"
    assert tables.sort_indicator("a", "b", "asc") == ""


def test_build_project_rows_labels_amended_projects() -> None:
    """Project rows show the member count and combined order type."""
    summaries = summarize_projects(
        [
            _contract("A1", "1000000", OrderType.NEW),
            _contract("A2", "500000", OrderType.CHANGE1),
        ]
    )

    rows = tables.build_project_rows(summaries)

    assert len(rows) == 1
    row = rows[0]
    assert row["프로젝트명"] == "Ulsan refinery site (2)"
    assert row["수주유형"] == "신규+변경"
    assert row["계약금액"] == "₩1,500,000"
    assert row["계약상태"] == "계약"
    assert row["구분"] == "민수"
    assert row["정화장소"] == "정보 없음"
    assert row["오염정보"] == "유류"


def test_build_order_rows_keep_one_row_per_order() -> None:
    """Full view rows use each order's own type label."""
    rows = tables.build_order_rows(
        [
            _contract("A1", "1000000", OrderType.NEW),
            _contract("A2", "500000", OrderType.CHANGE1),
        ]
    )

    assert [row["수주유형"] for row in rows] == ["신규", "1차 변경"]
    assert rows[1]["프로젝트명"] == "Ulsan refinery site"


def test_build_receivable_rows() -> None:
    """Receivable rows carry the aging labels."""
    item = classify_receivable(
        ReceivableRecord(
            id="r1",
            receivable_number="RCV-1",
            order_number="ORD-1",
            project_name="Pohang site",
            company_name="포항시",
            client_type=ClientType.GOVERNMENT,
            total_amount=Decimal("2000"),
            paid_amount=Decimal("500"),
            due_date=date(2024, 1, 1),
        ),
        date(2024, 7, 1),
    )

    row = tables.build_receivable_rows([item])[0]

    assert row["미수금액"] == "₩1,500"
    assert row["연체일수"] == 182
    assert row["연체단계"] == "부실"
    assert row["상태"] == "연체"
    assert row["담당자"] == "—"


def test_build_level_chart_data() -> None:
    """Chart data keeps severity for ordering and float amounts."""
    data = tables.build_level_chart_data(
        [
            OverdueLevelAmount(OverdueLevel.NORMAL, 0, Decimal("0")),
            OverdueLevelAmount(OverdueLevel.BAD, 2, Decimal("4500")),
        ]
    )

    assert data[1] == {
        "level": "부실",
        "severity": 3,
        "description": "181일 이상 연체",
        "count": 2,
        "amount": 4500.0,
        "amount_label": "₩4,500",
    }


def test_order_rows_label_free_text_contamination() -> None:
    """Free-text contamination notes are matched against substance groups."""
    record = ContractRecord(
        **{
            **_contract("A1", "1000", OrderType.NEW).__dict__,
            "contamination_info": (),
            "contamination_text": "TCE 및 납 검출",
        }
    )

    row = tables.build_order_rows([record])[0]

    assert row["오염정보"] == "중금속류, 염소계용매"


def test_achievement_rows_format_units_and_amounts() -> None:
    """Achievement rows show unit labels, quantities and currency."""
    achievement = Achievement(
        id="a1",
        order_id="o-1",
        project_name="Ulsan refinery site",
        achievement_date=date(2024, 5, 20),
        unit=AchievementUnit.CUBIC_METER,
        quantity=Decimal("1234.5"),
        unit_price=Decimal("30000"),
        amount=Decimal("37035000"),
        transport_type=TransportType.ONSITE,
    )

    row = tables.build_achievement_rows([achievement])[0]

    assert row["단위"] == "㎥"
    assert row["수량"] == "1,234.50"
    assert row["단가"] == "₩30,000"
    assert row["금액"] == "₩37,035,000"
    assert row["일자"] == "2024-05-20"
    assert row["담당자"] == tables.MISSING_CELL
    assert row["상태"] == "정보 없음"
    assert row["비고"] == ""
