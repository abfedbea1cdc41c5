"""Domain services grouping contract amendments into project summaries."""

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import replace
from decimal import Decimal
from logging import Logger

from src.domain.models import ContractRecord, ProjectSummary
from src.utils.decimal_utils import coerce_decimal, round_half_up

ProjectKeyFunc = Callable[[ContractRecord], str | None]


def _default_key(record: ContractRecord) -> str | None:
    return record.project_key


def group_by_project(
    contracts: Iterable[ContractRecord],
    key: ProjectKeyFunc | None = None,
    logger: Logger | None = None,
) -> dict[str, list[ContractRecord]]:
    """Partition contracts by project, keeping input order inside a group.

    Records without a project key are left out of every group and reported
    through the logger as orphaned.

    Args:
        contracts: Contract records in display order.
        key: Function returning the project key of a record. Defaults to the
            record project name.
        logger: Logger used for orphan warnings. Defaults to the module
            logger.

    Returns:
        dict[str, list[ContractRecord]]: Groups in first-seen order.
    """
    resolve_key = key or _default_key
    logger = logger or logging.getLogger(__name__)
    groups: dict[str, list[ContractRecord]] = {}
    orphans: list[ContractRecord] = []
    for record in contracts:
        project_key = resolve_key(record)
        if not project_key:
            orphans.append(record)
            continue
        groups.setdefault(project_key, []).append(record)

    if orphans:
        numbers = ", ".join(record.order_number for record in orphans)
        logger.warning(
            f"Skipped {len(orphans)} orders without a project key: {numbers}"
        )
    return groups


def select_representative(group: Sequence[ContractRecord]) -> ContractRecord:
    """Return the first original contract, else the first record."""
    for record in group:
        if record.is_original:
            return record
    return group[0]


def summarize_project(
    group: Sequence[ContractRecord],
    project_key: str | None = None,
) -> ProjectSummary:
    """Collapse the records of one project into a summary row.

    The representative keeps every field except the contract amount, which
    becomes the group sum, and the progress, which becomes the group mean
    rounded half up. Divergent values across amendments are not reconciled.

    Args:
        group: Non-empty records of one project in input order.
        project_key: Key of the group. Defaults to the representative key.

    Returns:
        ProjectSummary: Summary with amendments and members attached.

    Raises:
        ValueError: If the group is empty.
    """
    if not group:
        raise ValueError("Cannot summarize an empty project group")
    representative = select_representative(group)
    contract_amount = sum(
        (coerce_decimal(record.contract_amount) for record in group),
        Decimal("0"),
    )
    progress_total = sum(
        (coerce_decimal(record.progress_percentage) for record in group),
        Decimal("0"),
    )
    progress = round_half_up(progress_total / len(group))
    return ProjectSummary(
        project_key=project_key or representative.project_key or "",
        record=replace(
            representative,
            contract_amount=contract_amount,
            progress_percentage=progress,
        ),
        representative=representative,
        amendments=tuple(record for record in group if not record.is_original),
        members=tuple(group),
    )


def summarize_projects(
    contracts: Iterable[ContractRecord],
    key: ProjectKeyFunc | None = None,
    logger: Logger | None = None,
) -> list[ProjectSummary]:
    """Group contracts by project and summarize every group."""
    groups = group_by_project(contracts, key=key, logger=logger)
    return [
        summarize_project(group, project_key=project_key)
        for project_key, group in groups.items()
    ]


__all__ = [
    "group_by_project",
    "select_representative",
    "summarize_project",
    "summarize_projects",
]
