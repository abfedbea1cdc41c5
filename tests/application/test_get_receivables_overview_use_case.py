"""Tests for the GetReceivablesOverviewUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.filters import ReceivablesFilter
from src.application.use_cases.get_receivables_overview import (
    GetReceivablesOverviewUseCase,
)
from src.domain.models import (
    ClientType,
    OverdueLevel,
    PaymentStatus,
    ReceivableRecord,
)

REFERENCE = date(2024, 7, 1)


def _receivable(
    number: str,
    total: str,
    paid: str,
    due_date: date,
    client_type: ClientType = ClientType.GOVERNMENT,
) -> ReceivableRecord:
    return ReceivableRecord(
        id=number,
        receivable_number=number,
        order_number=f"ORD-{number}",
        project_name=f"Project {number}",
        company_name="Co",
        client_type=client_type,
        total_amount=Decimal(total),
        paid_amount=Decimal(paid),
        due_date=due_date,
    )


def _build_repository(records: list[ReceivableRecord]) -> MagicMock:
    repository = MagicMock()
    repository.fetch_receivables.return_value = records
    return repository


def test_execute_classifies_against_reference_date() -> None:
    """Receivables are aged against the given date."""
    repository = _build_repository(
        [
            _receivable("R1", "1000", "0", date(2024, 8, 1)),
            _receivable("R2", "2000", "500", date(2024, 4, 1)),
            _receivable("R3", "500", "500", date(2023, 1, 1)),
        ]
    )
    use_case = GetReceivablesOverviewUseCase(repository, logger=MagicMock())

    result = use_case.execute(reference_date=REFERENCE)

    statuses = [item.payment_status for item in result.receivables]
    assert statuses == [
        PaymentStatus.UNPAID,
        PaymentStatus.OVERDUE,
        PaymentStatus.PAID,
    ]
    assert result.receivables[1].overdue_days == 91
    assert result.receivables[1].overdue_level is OverdueLevel.LONGTERM
    assert result.stats.total_amount == Decimal("3500")
    assert result.stats.overdue_amount == Decimal("1500")
    assert result.reference_date == REFERENCE
    assert [alert.receivable_number for alert in result.alerts] == ["R2"]


def test_execute_filters_list_but_not_stats() -> None:
    """Statistics always cover every receivable."""
    repository = _build_repository(
        [
            _receivable("R1", "1000", "0", date(2024, 8, 1)),
            _receivable(
                "R2", "2000", "0", date(2024, 4, 1), ClientType.PRIVATE
            ),
        ]
    )
    use_case = GetReceivablesOverviewUseCase(repository, logger=MagicMock())

    result = use_case.execute(
        reference_date=REFERENCE,
        filters=ReceivablesFilter(client_type=ClientType.PRIVATE),
    )

    assert [item.record.id for item in result.receivables] == ["R2"]
    assert result.stats.total_count == 2
    assert result.stats.total_amount == Decimal("3000")


def test_execute_defaults_reference_date_to_today() -> None:
    """Without a reference date the use case ages against today."""
    repository = _build_repository([])
    use_case = GetReceivablesOverviewUseCase(repository, logger=MagicMock())

    result = use_case.execute()

    assert result.reference_date == date.today()
    assert result.stats.collection_rate == 0
    assert result.alerts == []


def test_execute_logs_computed_figures() -> None:
    """The use case reports what it computed."""
    logger = MagicMock()
    repository = _build_repository(
        [_receivable("R1", "1000", "250", date(2024, 6, 1))]
    )

    GetReceivablesOverviewUseCase(repository, logger=logger).execute(
        reference_date=REFERENCE
    )

    messages = [call.args[0] for call in logger.info.call_args_list]
    assert any("Fetched 1 receivables" in message for message in messages)
    assert any("overdue=750" in message for message in messages)
