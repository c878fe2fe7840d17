"""Contracts for the collaborators the order services depend on."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Mapping, Sequence

from ..models.domain import Address, Order

# Stored column name -> Order attribute.
ORDER_COLUMNS = {
    "id": "id",
    "login": "login",
    "from": "from_address",
    "to": "to_address",
    "type": "type",
    "distance": "distance",
    "price": "price",
    "status": "status",
    "created_at": "created_at",
}


def validate_filters(filters: Mapping[str, str] | None) -> dict[str, str]:
    filters = dict(filters or {})
    unknown = set(filters) - set(ORDER_COLUMNS)
    if unknown:
        raise ValueError(f"Unknown order filter field(s): {', '.join(sorted(unknown))}")
    return filters


class AddressDirectory(ABC):
    """Resolves an address name to its location."""

    @abstractmethod
    def resolve(self, name: str) -> Address | None:
        raise NotImplementedError


class OrderStore(ABC):
    """Persistence contract for order records.

    ``find`` filters by exact field equality (``login``, ``status``, ...).
    Results are ordered by creation time, newest first when requested.
    """

    @abstractmethod
    def insert(self, order: Order) -> Order:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, order_id: str) -> Order | None:
        raise NotImplementedError

    @abstractmethod
    def find(
        self,
        filters: Mapping[str, str] | None = None,
        *,
        newest_first: bool = False,
        limit: int | None = None,
    ) -> Sequence[Order]:
        raise NotImplementedError

    @abstractmethod
    def update_status(self, order_id: str, status: str) -> bool:
        """Persist a new status; return False when the order does not exist."""
        raise NotImplementedError
