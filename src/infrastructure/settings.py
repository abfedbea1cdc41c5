"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from datetime import date
import os
from typing import Optional

import dotenv

from src.application.use_cases.get_project_summaries import PROJECT_KEY_FIELDS
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class ErpSettings:
    """Settings for the ERP dashboard.

    Attributes:
        reference_date: Optional fixed "as of" date for receivable aging.
        project_key_field: Order field grouping amendments into projects.
        currency: Currency code used for display.
    """

    reference_date: Optional[date] = None
    project_key_field: str = "project_name"
    currency: str = "KRW"

    @classmethod
    def from_env(cls) -> "ErpSettings":
        """Build settings from environment variables.

        Returns:
            ErpSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        reference_date = cls._parse_date(
            os.getenv("ERP_REFERENCE_DATE"),
            logger=logger,
        )
        project_key_field = cls._normalize_key_field(
            os.getenv("ERP_PROJECT_KEY"),
            logger=logger,
        )
        currency = os.getenv("ERP_CURRENCY", "KRW").strip().upper() or "KRW"
        return cls(
            reference_date=reference_date,
            project_key_field=project_key_field,
            currency=currency,
        )

    @staticmethod
    def _parse_date(raw_value: str | None, logger) -> date | None:
        """Parse an ISO date, warning on invalid input.

        Args:
            raw_value: Date string in YYYY-MM-DD format.
            logger: Logger used for warnings.

        Returns:
            date | None: Parsed date or None when absent or invalid.
        """
        if not raw_value or not raw_value.strip():
            return None
        try:
            return date.fromisoformat(raw_value.strip())
        except ValueError:
            logger.warning(
                f"Invalid ERP_REFERENCE_DATE '{raw_value}'. "
                "Expected format YYYY-MM-DD."
            )
            return None

    @staticmethod
    def _normalize_key_field(raw_value: str | None, logger) -> str:
        """Validate the project key field.

        Args:
            raw_value: Raw ERP_PROJECT_KEY value.
            logger: Logger used for warnings.

        Returns:
            str: Supported key field, project_name by default.
        """
        if not raw_value:
            return "project_name"
        cleaned = raw_value.strip().lower()
        if cleaned not in PROJECT_KEY_FIELDS:
            logger.warning(
                f"Unsupported ERP_PROJECT_KEY '{raw_value}'; "
                "falling back to project_name"
            )
            return "project_name"
        return cleaned


__all__ = ["ErpSettings"]
