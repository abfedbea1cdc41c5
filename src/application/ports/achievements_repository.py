"""Port for reading work achievements."""

from typing import Protocol

from src.domain.models import Achievement


class AchievementsRepositoryPort(Protocol):
    """Port exposing read access to achievements."""

    def fetch_achievements(self) -> list[Achievement]:
        """Return every achievement, most recent first."""


__all__ = ["AchievementsRepositoryPort"]
