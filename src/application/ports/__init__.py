"""Application ports package."""

from .achievements_repository import AchievementsRepositoryPort
from .database import DatabaseEnginePort
from .orders_repository import OrdersRepositoryPort
from .receivables_repository import ReceivablesRepositoryPort

__all__ = [
    "AchievementsRepositoryPort",
    "DatabaseEnginePort",
    "OrdersRepositoryPort",
    "ReceivablesRepositoryPort",
]
