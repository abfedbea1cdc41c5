"""SQLAlchemy-backed repository for work achievements."""

from sqlalchemy import text

from src.application.ports.achievements_repository import (
    AchievementsRepositoryPort,
)
from src.application.ports.database import DatabaseEnginePort
from src.domain.models import (
    Achievement,
    AchievementUnit,
    ClientType,
    OrderStatus,
    TransportType,
)
from src.domain.services.normalization import (
    normalize_date,
    normalize_enum,
    normalize_text,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


class SqlAlchemyAchievementsRepository(AchievementsRepositoryPort):
    """Repository reading the achievements table."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ERP engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def fetch_achievements(self) -> list[Achievement]:
        """Return achievements, most recent first."""
        query = text(
            """
            SELECT a.id, a.project_id, a.order_id, a.project_name,
                   a.client_type, a.status, a.manager, a.achievement_date,
                   a.transport_type, a.unit, a.quantity, a.unit_price,
                   a.amount, a.remarks
            FROM achievements a
            ORDER BY a.achievement_date DESC, a.created_at DESC
            """
        )
        engine = self._db_port.get_erp_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [self._to_achievement(row) for row in rows]

    def _to_achievement(self, row) -> Achievement:
        return Achievement(
            id=str(row.id),
            project_id=str(row.project_id) if row.project_id else None,
            order_id=str(row.order_id),
            project_name=row.project_name or "",
            client_type=normalize_enum(
                ClientType,
                row.client_type,
                self._logger,
            ),
            status=normalize_enum(OrderStatus, row.status, self._logger),
            manager=normalize_text(row.manager),
            achievement_date=normalize_date(row.achievement_date),
            transport_type=normalize_enum(
                TransportType,
                row.transport_type,
                self._logger,
            ),
            unit=normalize_enum(AchievementUnit, row.unit, self._logger),
            quantity=coerce_decimal(row.quantity),
            unit_price=coerce_decimal(row.unit_price),
            amount=coerce_decimal(row.amount),
            remarks=normalize_text(row.remarks),
        )


__all__ = ["SqlAlchemyAchievementsRepository"]
