"""Use case to list recorded work achievements."""

from dataclasses import dataclass
from decimal import Decimal

from src.application.ports.achievements_repository import (
    AchievementsRepositoryPort,
)
from src.application.use_cases.filters import AchievementsFilter
from src.application.use_cases.table_sort import SortState, sort_rows
from src.domain.models import Achievement
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class AchievementsOverview:
    """Achievements screen payload.

    Attributes:
        achievements: Filtered and sorted achievements.
        project_names: Every project with an achievement, for the project
            selector, regardless of the filter.
        total_amount: Sum of the amounts of the listed achievements.
    """

    achievements: list[Achievement]
    project_names: list[str]
    total_amount: Decimal


class GetAchievementsUseCase:
    """Filter and sort achievements for the achievements screen."""

    def __init__(
        self,
        achievements_repository: AchievementsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            achievements_repository: Port providing achievement rows.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._achievements_repository = achievements_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        filters: AchievementsFilter | None = None,
        sort: SortState | None = None,
    ) -> AchievementsOverview:
        """Return the rows of the achievements table.

        Args:
            filters: Optional filter applied to achievement rows.
            sort: Sort state. Defaults to the repository order, most recent
                achievement first.

        Returns:
            AchievementsOverview: Sorted rows with the project list.
        """
        achievements = self._achievements_repository.fetch_achievements()
        active_filter = filters or AchievementsFilter()
        visible = [
            achievement
            for achievement in achievements
            if active_filter.matches(achievement)
        ]
        self._logger.info(
            f"Fetched {len(achievements)} achievements, "
            f"{len(visible)} after filters"
        )
        project_names = sorted(
            {
                achievement.project_name
                for achievement in achievements
                if achievement.project_name
            }
        )
        return AchievementsOverview(
            achievements=sort_rows(visible, sort or SortState()),
            project_names=project_names,
            total_amount=sum(
                (achievement.amount for achievement in visible),
                Decimal("0"),
            ),
        )


__all__ = ["AchievementsOverview", "GetAchievementsUseCase"]
