"""Tests for the SQLAlchemy receivables repository."""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from src.domain.models import ClientType
from src.infrastructure.receivables_repository import (
    SqlAlchemyReceivablesRepository,
)


class _FakeResult:
    def __init__(self, rows: list[SimpleNamespace]) -> None:
        self._rows = rows

    def all(self):
        return self._rows


def _build_db_port(rows: list[SimpleNamespace]) -> MagicMock:
    engine = MagicMock()
    conn = MagicMock()
    context = MagicMock()
    context.__enter__.return_value = conn
    engine.connect.return_value = context
    conn.execute.return_value = _FakeResult(rows)

    db_port = MagicMock()
    db_port.get_erp_engine.return_value = engine
    return db_port


def _row(number: str, due_date, **overrides) -> SimpleNamespace:
    values = {
        "id": number.lower(),
        "receivable_number": number,
        "order_number": "ORD-1",
        "project_name": "Pohang site",
        "company_name": "포항시",
        "client_type": "government",
        "total_amount": Decimal("55000000"),
        "paid_amount": None,
        "due_date": due_date,
        "primary_manager": None,
    }
    values.update(overrides)
    return SimpleNamespace(**values)


def test_fetch_receivables_maps_rows() -> None:
    """Rows are mapped into receivable records."""
    db_port = _build_db_port([_row("RCV-1", "2024-05-31")])
    repository = SqlAlchemyReceivablesRepository(db_port, logger=MagicMock())

    records = repository.fetch_receivables()

    assert len(records) == 1
    record = records[0]
    assert record.receivable_number == "RCV-1"
    assert record.client_type is ClientType.GOVERNMENT
    assert record.total_amount == Decimal("55000000")
    assert record.paid_amount == Decimal("0")
    assert record.due_date == date(2024, 5, 31)


def test_fetch_receivables_skips_rows_without_due_date() -> None:
    """Undated receivables are skipped with a warning."""
    logger = MagicMock()
    db_port = _build_db_port(
        [_row("RCV-1", None), _row("RCV-2", date(2024, 6, 30))]
    )
    repository = SqlAlchemyReceivablesRepository(db_port, logger=logger)

    records = repository.fetch_receivables()

    assert [record.receivable_number for record in records] == ["RCV-2"]
    logger.warning.assert_called_once()
    assert "RCV-1" in logger.warning.call_args.args[0]
