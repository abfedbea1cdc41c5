"""Domain normalization helpers for raw repository values."""

from datetime import date, datetime
from enum import Enum
from logging import Logger
from typing import TypeVar

E = TypeVar("E", bound=Enum)


def normalize_enum(
    enum_cls: type[E],
    raw_value,
    logger: Logger | None = None,
) -> E | None:
    """Normalize a stored code into an enumeration member.

    Args:
        enum_cls: Target enumeration.
        raw_value: Raw code from a repository.
        logger: Logger used for warnings on unknown codes.

    Returns:
        E | None: Matching member, or None when empty or unknown.
    """
    if raw_value is None:
        return None
    if isinstance(raw_value, enum_cls):
        return raw_value
    cleaned = str(raw_value).strip().lower()
    if not cleaned:
        return None
    try:
        return enum_cls(cleaned)
    except ValueError:
        if logger is not None:
            logger.warning(
                f"Unknown {enum_cls.__name__} value: {raw_value!r}"
            )
        return None


def normalize_date(raw_value) -> date | None:
    """Normalize a stored date, datetime or ISO string to a date.

    Args:
        raw_value: Raw value from a repository.

    Returns:
        date | None: Calendar date, or None when empty.

    Raises:
        ValueError: If a string is not an ISO date.
    """
    if raw_value is None:
        return None
    if isinstance(raw_value, datetime):
        return raw_value.date()
    if isinstance(raw_value, date):
        return raw_value
    cleaned = str(raw_value).strip()
    if not cleaned:
        return None
    return date.fromisoformat(cleaned[:10])


def normalize_text(raw_value: str | None) -> str | None:
    """Strip a text value, mapping blanks to None."""
    if not raw_value:
        return None
    cleaned = raw_value.strip()
    return cleaned or None


__all__ = ["normalize_enum", "normalize_date", "normalize_text"]
