"""Use case to classify receivables and compute collection figures."""

from dataclasses import dataclass
from datetime import date

from src.application.ports.receivables_repository import (
    ReceivablesRepositoryPort,
)
from src.application.use_cases.filters import ReceivablesFilter
from src.domain.models import (
    ClassifiedReceivable,
    OverdueAlert,
    OverdueLevelAmount,
    ReceivableStats,
)
from src.domain.services.aging import classify_receivable
from src.domain.services.receivable_stats import (
    build_overdue_alerts,
    compute_overdue_level_breakdown,
    compute_receivable_stats,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class ReceivablesOverview:
    """Receivables screen payload.

    Attributes:
        receivables: Classified receivables passing the filter.
        stats: Figures over every receivable, regardless of the filter.
        level_breakdown: Overdue count and amount per level.
        alerts: Overdue receivables, most overdue first.
        reference_date: Date the aging was computed against.
    """

    receivables: list[ClassifiedReceivable]
    stats: ReceivableStats
    level_breakdown: list[OverdueLevelAmount]
    alerts: list[OverdueAlert]
    reference_date: date


class GetReceivablesOverviewUseCase:
    """Classify receivables against a reference date and aggregate them."""

    def __init__(
        self,
        receivables_repository: ReceivablesRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            receivables_repository: Port providing receivable rows.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._receivables_repository = receivables_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        reference_date: date | None = None,
        filters: ReceivablesFilter | None = None,
    ) -> ReceivablesOverview:
        """Return the classified receivables and their statistics.

        Args:
            reference_date: Date to age receivables against. Defaults to
                today.
            filters: Optional filter for the returned list.

        Returns:
            ReceivablesOverview: Filtered list plus unfiltered figures.
        """
        resolved_date = reference_date or date.today()
        records = self._receivables_repository.fetch_receivables()
        self._logger.info(
            f"Fetched {len(records)} receivables, aging as of {resolved_date}"
        )
        classified = [
            classify_receivable(record, resolved_date) for record in records
        ]
        stats = compute_receivable_stats(classified)
        active_filter = filters or ReceivablesFilter()
        visible = [item for item in classified if active_filter.matches(item)]
        self._logger.info(
            f"Receivables computed: total={stats.total_amount}, "
            f"paid={stats.paid_amount}, overdue={stats.overdue_amount}, "
            f"shown={len(visible)}"
        )
        return ReceivablesOverview(
            receivables=visible,
            stats=stats,
            level_breakdown=compute_overdue_level_breakdown(classified),
            alerts=build_overdue_alerts(classified),
            reference_date=resolved_date,
        )


__all__ = ["GetReceivablesOverviewUseCase", "ReceivablesOverview"]
