"""Port for reading orders."""

from typing import Protocol

from src.domain.models import ContractRecord


class OrdersRepositoryPort(Protocol):
    """Port exposing read access to order rows."""

    def fetch_contracts(self) -> list[ContractRecord]:
        """Return every order row, originals and change orders."""


__all__ = ["OrdersRepositoryPort"]
