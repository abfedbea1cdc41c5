"""Use case to list orders, grouped by project or one row per order."""

from typing import Literal

from src.application.ports.orders_repository import OrdersRepositoryPort
from src.application.use_cases.filters import OrdersFilter
from src.application.use_cases.table_sort import SortState, sort_rows
from src.domain.models import ContractRecord, ProjectSummary
from src.domain.services.projects import ProjectKeyFunc, summarize_projects
from src.infrastructure.logging.logger import get_app_logger

ViewMode = Literal["summary", "full"]

DEFAULT_SORT = SortState(column="contract_date", direction="desc")

PROJECT_KEY_FIELDS: dict[str, ProjectKeyFunc] = {
    "project_name": lambda record: record.project_key,
    "project_id": lambda record: record.project_id or None,
}


class GetProjectSummariesUseCase:
    """Filter, group and sort orders for the orders screen."""

    def __init__(
        self,
        orders_repository: OrdersRepositoryPort,
        logger=None,
        project_key_field: str = "project_name",
    ) -> None:
        """Initialize the use case.

        Args:
            orders_repository: Port providing order rows.
            logger: Optional logger compatible with logging.Logger-like API.
            project_key_field: Record field identifying a project, either
                project_name or project_id.

        Raises:
            ValueError: If the key field is not supported.
        """
        if project_key_field not in PROJECT_KEY_FIELDS:
            raise ValueError(
                f"Unsupported project key field: {project_key_field}"
            )
        self._orders_repository = orders_repository
        self._logger = logger or get_app_logger()
        self._project_key = PROJECT_KEY_FIELDS[project_key_field]

    def execute(
        self,
        filters: OrdersFilter | None = None,
        sort: SortState | None = None,
        view_mode: ViewMode = "summary",
    ) -> list[ProjectSummary] | list[ContractRecord]:
        """Return the rows of the orders table.

        Args:
            filters: Optional filter applied to order rows before grouping.
            sort: Sort state. Defaults to newest contract first.
            view_mode: "summary" for one row per project, "full" for one
                row per order.

        Returns:
            list[ProjectSummary] | list[ContractRecord]: Sorted rows.
        """
        contracts = self._orders_repository.fetch_contracts()
        active_filter = filters or OrdersFilter()
        filtered = [
            record for record in contracts if active_filter.matches(record)
        ]
        self._logger.info(
            f"Fetched {len(contracts)} orders, {len(filtered)} after filters"
        )
        state = sort or DEFAULT_SORT
        if view_mode == "full":
            return sort_rows(filtered, state)
        summaries = summarize_projects(
            filtered,
            key=self._project_key,
            logger=self._logger,
        )
        self._logger.info(f"Grouped orders into {len(summaries)} projects")
        return sort_rows(summaries, state)


__all__ = [
    "DEFAULT_SORT",
    "GetProjectSummariesUseCase",
    "PROJECT_KEY_FIELDS",
    "ViewMode",
]
