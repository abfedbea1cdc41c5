"""Port for reading receivables."""

from typing import Protocol

from src.domain.models import ReceivableRecord


class ReceivablesRepositoryPort(Protocol):
    """Port exposing read access to receivables."""

    def fetch_receivables(self) -> list[ReceivableRecord]:
        """Return every receivable."""


__all__ = ["ReceivablesRepositoryPort"]
