"""Tests for the project aggregation services."""

import logging
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.models import ContractRecord, OrderType
from src.domain.services.projects import (
    group_by_project,
    select_representative,
    summarize_project,
    summarize_projects,
)


def _contract(
    order_number: str,
    project_name: str | None,
    amount: str = "0",
    progress: int = 0,
    order_type: OrderType | None = OrderType.NEW,
    company_name: str = "한국환경공단",
) -> ContractRecord:
    return ContractRecord(
        id=order_number,
        order_number=order_number,
        project_name=project_name,
        company_name=company_name,
        contract_date=date(2024, 1, 1),
        contract_amount=Decimal(amount),
        order_type=order_type,
        progress_percentage=progress,
    )


def test_group_by_project_is_stable() -> None:
    """Groups keep input order within and first-seen order across."""
    a1 = _contract("A1", "Alpha")
    b1 = _contract("B1", "Beta")
    a2 = _contract("A2", "Alpha", order_type=OrderType.CHANGE1)

    groups = group_by_project([a1, b1, a2])

    assert list(groups) == ["Alpha", "Beta"]
    assert groups["Alpha"] == [a1, a2]
    assert groups["Beta"] == [b1]


def test_group_by_project_skips_and_logs_orphans() -> None:
    """Records without a project key are excluded and reported."""
    logger = MagicMock()
    orphan = _contract("X1", None)
    blank = _contract("X2", "   ")
    kept = _contract("A1", "Alpha")

    groups = group_by_project([orphan, kept, blank], logger=logger)

    assert groups == {"Alpha": [kept]}
    logger.warning.assert_called_once()
    message = logger.warning.call_args.args[0]
    assert "X1" in message and "X2" in message


def test_group_by_project_accepts_custom_key() -> None:
    """Grouping can use another field such as the project id."""
    first = _contract("A1", "Alpha")
    renamed = _contract("A2", "Alpha (renamed)")
    records = [
        ContractRecord(**{**first.__dict__, "project_id": "p-1"}),
        ContractRecord(**{**renamed.__dict__, "project_id": "p-1"}),
    ]

    groups = group_by_project(records, key=lambda record: record.project_id)

    assert list(groups) == ["p-1"]
    assert len(groups["p-1"]) == 2


def test_summarize_project_sums_amounts_and_averages_progress() -> None:
    """Amounts are summed and progress averaged then rounded."""
    group = [
        _contract("A1", "Alpha", "100", 50),
        _contract("A2", "Alpha", "50", 100, OrderType.CHANGE1),
        _contract("A3", "Alpha", "30", 0, OrderType.CHANGE2),
    ]

    summary = summarize_project(group)

    assert summary.project_key == "Alpha"
    assert summary.contract_amount == Decimal("180")
    assert summary.progress_percentage == 50
    assert summary.amendments == (group[1], group[2])
    assert summary.members == tuple(group)
    assert summary.has_amendments is True
    assert summary.member_count == 3


def test_summarize_project_rounds_half_up() -> None:
    """A mean ending in .5 rounds up."""
    group = [
        _contract("A1", "Alpha", progress=0),
        _contract("A2", "Alpha", progress=5, order_type=OrderType.CHANGE1),
    ]

    assert summarize_project(group).progress_percentage == 3


def test_representative_prefers_original_contract() -> None:
    """The first new contract represents the project."""
    change = _contract(
        "A2",
        "Alpha",
        order_type=OrderType.CHANGE1,
        company_name="Changed Co",
    )
    original = _contract("A1", "Alpha", company_name="Original Co")

    summary = summarize_project([change, original])

    assert select_representative([change, original]) is original
    assert summary.representative is original
    assert summary.record.company_name == "Original Co"
    assert summary.record.order_number == "A1"
    assert summary.amendments == (change,)


def test_representative_falls_back_to_first_record() -> None:
    """Without an original contract the first record is used."""
    first = _contract("A2", "Alpha", order_type=OrderType.CHANGE1)
    second = _contract("A3", "Alpha", order_type=OrderType.CHANGE2)

    summary = summarize_project([first, second])

    assert summary.representative is first
    assert summary.amendments == (first, second)


def test_summarize_project_rejects_empty_group() -> None:
    """Empty groups are never summarized."""
    with pytest.raises(ValueError):
        summarize_project([])


def test_summaries_identical_across_interleavings() -> None:
    """Interleaving projects differently does not change the summaries."""
    a1 = _contract("A1", "Alpha", "100", 40)
    a2 = _contract("A2", "Alpha", "20", 60, OrderType.CHANGE1)
    b1 = _contract("B1", "Beta", "70", 10)
    b2 = _contract("B2", "Beta", "30", 20, OrderType.CHANGE1)

    first = summarize_projects([a1, a2, b1, b2])
    second = summarize_projects([b1, a1, b2, a2])

    by_key_first = {summary.project_key: summary for summary in first}
    by_key_second = {summary.project_key: summary for summary in second}
    assert by_key_first == by_key_second
    assert by_key_first["Beta"].contract_amount == Decimal("100")
    assert by_key_first["Alpha"].progress_percentage == 50


def test_orphans_never_reach_member_lists(caplog) -> None:
    """Orphaned records are absent from every summary."""
    orphan = _contract("X1", None, "999")
    logger = logging.getLogger("tests.projects")

    with caplog.at_level(logging.WARNING, logger="tests.projects"):
        summaries = summarize_projects(
            [_contract("A1", "Alpha", "10"), orphan],
            logger=logger,
        )

    assert len(summaries) == 1
    assert orphan not in summaries[0].members
    assert summaries[0].contract_amount == Decimal("10")
    assert "X1" in caplog.text


def test_orphans_logged_without_explicit_logger(caplog) -> None:
    """Orphans are reported through the module logger by default."""
    kept = _contract("A1", "Alpha")

    with caplog.at_level(logging.WARNING):
        groups = group_by_project([_contract("X1", None), kept])

    assert list(groups) == ["Alpha"]
    assert "X1" in caplog.text
    assert caplog.records[0].name == "src.domain.services.projects"
