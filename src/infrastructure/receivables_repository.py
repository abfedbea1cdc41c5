"""SQLAlchemy-backed repository for receivables."""

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.receivables_repository import (
    ReceivablesRepositoryPort,
)
from src.domain.models import ClientType, ReceivableRecord
from src.domain.services.normalization import normalize_date, normalize_enum
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


class SqlAlchemyReceivablesRepository(ReceivablesRepositoryPort):
    """Repository reading receivables joined with their order."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ERP engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def fetch_receivables(self) -> list[ReceivableRecord]:
        """Return receivables ordered by due date.

        Rows without a due date cannot be aged and are skipped with a
        warning.
        """
        query = text(
            """
            SELECT r.id, r.receivable_number, o.order_number,
                   o.project_name, o.company_name, o.client_type,
                   r.total_amount, r.paid_amount, r.due_date,
                   o.primary_manager
            FROM receivables r
            JOIN orders o ON o.id = r.order_id
            ORDER BY r.due_date, r.receivable_number
            """
        )
        engine = self._db_port.get_erp_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()

        records = []
        for row in rows:
            due_date = normalize_date(row.due_date)
            if due_date is None:
                self._logger.warning(
                    f"Receivable {row.receivable_number} has no due date"
                )
                continue
            records.append(
                ReceivableRecord(
                    id=str(row.id),
                    receivable_number=row.receivable_number,
                    order_number=row.order_number,
                    project_name=row.project_name or "",
                    company_name=row.company_name or "",
                    client_type=normalize_enum(
                        ClientType,
                        row.client_type,
                        self._logger,
                    ),
                    total_amount=coerce_decimal(row.total_amount),
                    paid_amount=coerce_decimal(row.paid_amount),
                    due_date=due_date,
                    primary_manager=row.primary_manager,
                )
            )
        return records


__all__ = ["SqlAlchemyReceivablesRepository"]
