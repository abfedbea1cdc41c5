"""SQLAlchemy-backed repository for order rows."""

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.orders_repository import OrdersRepositoryPort
from src.domain.models import (
    ClientType,
    ContractRecord,
    OrderStatus,
    OrderType,
    TransportType,
)
from src.domain.services.contamination import to_contamination_items
from src.domain.services.normalization import (
    normalize_date,
    normalize_enum,
    normalize_text,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal, round_half_up


class SqlAlchemyOrdersRepository(OrdersRepositoryPort):
    """Repository reading the orders table with its attachment counts."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ERP engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def fetch_contracts(self) -> list[ContractRecord]:
        """Return orders, newest contract first."""
        query = text(
            """
            SELECT o.id, o.order_number, o.project_id, o.project_name,
                   o.company_name, o.client_type, o.contract_date,
                   o.contract_amount, o.order_type, o.status,
                   o.transport_type, o.progress_percentage,
                   o.contamination_info, o.primary_manager,
                   o.secondary_manager,
                   COUNT(f.id) AS file_count
            FROM orders o
            LEFT JOIN order_files f ON f.order_id = o.id
            GROUP BY o.id
            ORDER BY o.contract_date DESC, o.order_number
            """
        )
        engine = self._db_port.get_erp_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [self._to_record(row) for row in rows]

    def _to_record(self, row) -> ContractRecord:
        raw_contamination = row.contamination_info
        contamination_items = to_contamination_items(raw_contamination)
        contamination_text = None
        if not contamination_items and isinstance(raw_contamination, str):
            contamination_text = normalize_text(raw_contamination)
        return ContractRecord(
            id=str(row.id),
            order_number=row.order_number,
            project_id=str(row.project_id) if row.project_id else None,
            project_name=normalize_text(row.project_name),
            company_name=row.company_name or "",
            client_type=normalize_enum(
                ClientType,
                row.client_type,
                self._logger,
            ),
            contract_date=normalize_date(row.contract_date),
            contract_amount=coerce_decimal(row.contract_amount),
            order_type=normalize_enum(
                OrderType,
                row.order_type,
                self._logger,
            ),
            status=normalize_enum(OrderStatus, row.status, self._logger),
            transport_type=normalize_enum(
                TransportType,
                row.transport_type,
                self._logger,
            ),
            progress_percentage=round_half_up(row.progress_percentage),
            contamination_info=contamination_items,
            contamination_text=contamination_text,
            primary_manager=row.primary_manager,
            secondary_manager=row.secondary_manager,
            file_count=int(row.file_count or 0),
        )


__all__ = ["SqlAlchemyOrdersRepository"]
