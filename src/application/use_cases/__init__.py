"""Application use cases package."""

from .filters import AchievementsFilter, OrdersFilter, ReceivablesFilter
from .get_achievements import AchievementsOverview, GetAchievementsUseCase
from .get_project_summaries import GetProjectSummariesUseCase
from .get_receivables_overview import (
    GetReceivablesOverviewUseCase,
    ReceivablesOverview,
)
from .table_sort import SortState, sort_rows, toggle_sort

__all__ = [
    "AchievementsFilter",
    "AchievementsOverview",
    "GetAchievementsUseCase",
    "OrdersFilter",
    "ReceivablesFilter",
    "GetProjectSummariesUseCase",
    "GetReceivablesOverviewUseCase",
    "ReceivablesOverview",
    "SortState",
    "sort_rows",
    "toggle_sort",
]
