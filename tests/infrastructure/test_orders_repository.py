"""Tests for the SQLAlchemy orders repository."""

from datetime import date, datetime
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from src.domain.models import (
    ClientType,
    ContaminationItem,
    OrderStatus,
    OrderType,
    TransportType,
)
from src.domain.services.contamination import contamination_display
from src.infrastructure.orders_repository import SqlAlchemyOrdersRepository


class _FakeResult:
    def __init__(self, rows: list[SimpleNamespace]) -> None:
        self._rows = rows

    def all(self):
        return self._rows


def _build_db_port(
    rows: list[SimpleNamespace],
) -> tuple[MagicMock, MagicMock]:
    engine = MagicMock()
    conn = MagicMock()
    context = MagicMock()
    context.__enter__.return_value = conn
    engine.connect.return_value = context
    conn.execute.return_value = _FakeResult(rows)

    db_port = MagicMock()
    db_port.get_erp_engine.return_value = engine
    return db_port, conn


def _row(**overrides) -> SimpleNamespace:
    values = {
        "id": 7,
        "order_number": "ORD-2024-007",
        "project_id": None,
        "project_name": "  Ulsan refinery site ",
        "company_name": "한국석유",
        "client_type": "private",
        "contract_date": datetime(2024, 4, 15, 9, 30),
        "contract_amount": 120000000,
        "order_type": "change1",
        "status": "in_progress",
        "transport_type": "onsite",
        "progress_percentage": 42.5,
        "contamination_info": '[{"type": "TPH", "value": 850}]',
        "primary_manager": "김민수",
        "secondary_manager": None,
        "file_count": 3,
    }
    values.update(overrides)
    return SimpleNamespace(**values)


def test_fetch_contracts_maps_rows() -> None:
    """Rows are normalized into contract records."""
    db_port, conn = _build_db_port([_row()])
    repository = SqlAlchemyOrdersRepository(db_port, logger=MagicMock())

    records = repository.fetch_contracts()

    assert len(records) == 1
    record = records[0]
    assert record.id == "7"
    assert record.project_name == "Ulsan refinery site"
    assert record.client_type is ClientType.PRIVATE
    assert record.contract_date == date(2024, 4, 15)
    assert record.contract_amount == Decimal("120000000")
    assert record.order_type is OrderType.CHANGE1
    assert record.status is OrderStatus.IN_PROGRESS
    assert record.transport_type is TransportType.ONSITE
    assert record.progress_percentage == 43
    assert record.contamination_info == (
        ContaminationItem(type="TPH", value=850.0),
    )
    assert record.file_count == 3
    query = str(conn.execute.call_args.args[0])
    assert "FROM orders o" in query
    assert "COUNT(f.id) AS file_count" in query


def test_fetch_contracts_tolerates_missing_values() -> None:
    """Null columns become None or zero; unknown codes are logged."""
    logger = MagicMock()
    db_port, _ = _build_db_port(
        [
            _row(
                project_name="   ",
                project_id=15,
                client_type=None,
                contract_amount=None,
                order_type="change9",
                status="",
                transport_type=None,
                progress_percentage=None,
                contamination_info=None,
                file_count=None,
            )
        ]
    )
    repository = SqlAlchemyOrdersRepository(db_port, logger=logger)

    record = repository.fetch_contracts()[0]

    assert record.project_name is None
    assert record.project_key is None
    assert record.project_id == "15"
    assert record.contract_amount == Decimal("0")
    assert record.order_type is None
    assert record.status is None
    assert record.progress_percentage == 0
    assert record.contamination_info == ()
    assert record.file_count == 0
    logger.warning.assert_called_once()


def test_fetch_contracts_keeps_free_text_contamination() -> None:
    """Free-text contamination notes survive mapping and are labelled."""
    db_port, _ = _build_db_port([_row(contamination_info=" TPH, 벤젠 ")])
    repository = SqlAlchemyOrdersRepository(db_port, logger=MagicMock())

    record = repository.fetch_contracts()[0]

    assert record.contamination_info == ()
    assert record.contamination_text == "TPH, 벤젠"
    assert contamination_display(record.contamination_source) == "유류"


def test_fetch_contracts_drops_text_when_items_parse() -> None:
    """A parsed item list leaves no free-text note behind."""
    db_port, _ = _build_db_port([_row()])
    repository = SqlAlchemyOrdersRepository(db_port, logger=MagicMock())

    record = repository.fetch_contracts()[0]

    assert record.contamination_text is None
    assert record.contamination_source == record.contamination_info
