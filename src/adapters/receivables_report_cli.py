"""CLI adapter printing receivable aging figures.

The reference date comes from the first argument, then ERP_REFERENCE_DATE,
then today.
"""

from datetime import date
import sys

from src.domain.services.labels import label_for
from src.infrastructure.container import build_receivables_overview_use_case
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import ErpSettings


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def main(argv: list[str] | None = None) -> None:
    """Print collection figures and overdue alerts."""
    logger = get_app_logger()
    args = sys.argv[1:] if argv is None else argv
    settings = ErpSettings.from_env()
    reference_date = (
        _parse_date(args[0] if args else None, logger)
        or settings.reference_date
    )

    use_case = build_receivables_overview_use_case()
    try:
        overview = use_case.execute(reference_date=reference_date)
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    stats = overview.stats
    print(
        f"Receivables as of {overview.reference_date} "
        f"({settings.currency}, {stats.total_count} receivables)"
    )
    print(
        f"total={stats.total_amount}, paid={stats.paid_amount}, "
        f"remaining={stats.remaining_amount}, "
        f"overdue={stats.overdue_amount}, "
        f"collection_rate={stats.collection_rate_percent}%"
    )
    for entry in overview.level_breakdown:
        print(
            f"{label_for(entry.level)}: count={entry.count}, "
            f"amount={entry.amount}"
        )
    for alert in overview.alerts:
        print(
            f"[{label_for(alert.overdue_level)}] "
            f"{alert.receivable_number} {alert.company_name} "
            f"{alert.overdue_days}일 연체, remaining={alert.remaining_amount}"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
