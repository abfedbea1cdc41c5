"""Composition root for wiring infrastructure adapters."""

from src.application.ports.achievements_repository import (
    AchievementsRepositoryPort,
)
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.orders_repository import OrdersRepositoryPort
from src.application.ports.receivables_repository import (
    ReceivablesRepositoryPort,
)
from src.application.use_cases.get_achievements import GetAchievementsUseCase
from src.application.use_cases.get_project_summaries import (
    GetProjectSummariesUseCase,
)
from src.application.use_cases.get_receivables_overview import (
    GetReceivablesOverviewUseCase,
)
from src.infrastructure.achievements_repository import (
    SqlAlchemyAchievementsRepository,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.orders_repository import SqlAlchemyOrdersRepository
from src.infrastructure.receivables_repository import (
    SqlAlchemyReceivablesRepository,
)
from src.infrastructure.settings import ErpSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_orders_repository(
    db_port: DatabaseEnginePort | None = None,
) -> OrdersRepositoryPort:
    """Return the orders repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyOrdersRepository(resolved_db, logger=get_app_logger())


def build_receivables_repository(
    db_port: DatabaseEnginePort | None = None,
) -> ReceivablesRepositoryPort:
    """Return the receivables repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyReceivablesRepository(
        resolved_db,
        logger=get_app_logger(),
    )


def build_achievements_repository(
    db_port: DatabaseEnginePort | None = None,
) -> AchievementsRepositoryPort:
    """Return the achievements repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyAchievementsRepository(
        resolved_db,
        logger=get_app_logger(),
    )


def build_project_summaries_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: ErpSettings | None = None,
) -> GetProjectSummariesUseCase:
    """Return the orders use case keyed by the configured project field."""
    resolved_settings = settings or ErpSettings.from_env()
    return GetProjectSummariesUseCase(
        orders_repository=build_orders_repository(db_port),
        logger=get_app_logger(),
        project_key_field=resolved_settings.project_key_field,
    )


def build_receivables_overview_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetReceivablesOverviewUseCase:
    """Return the receivables use case."""
    return GetReceivablesOverviewUseCase(
        receivables_repository=build_receivables_repository(db_port),
        logger=get_app_logger(),
    )


def build_achievements_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetAchievementsUseCase:
    """Return the achievements use case."""
    return GetAchievementsUseCase(
        achievements_repository=build_achievements_repository(db_port),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_orders_repository",
    "build_receivables_repository",
    "build_achievements_repository",
    "build_project_summaries_use_case",
    "build_receivables_overview_use_case",
    "build_achievements_use_case",
]
