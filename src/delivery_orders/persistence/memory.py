"""In-process address directory and order store."""

from __future__ import annotations

import threading
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Iterable, Mapping, Sequence

from ..models.domain import Address, Order
from .base import ORDER_COLUMNS, AddressDirectory, OrderStore, validate_filters


class InMemoryAddressDirectory(AddressDirectory):
    def __init__(self, addresses: Iterable[Address] = ()) -> None:
        self._addresses = {address.name: address for address in addresses}

    def resolve(self, name: str) -> Address | None:
        return self._addresses.get(name)

    def add(self, address: Address) -> None:
        self._addresses[address.name] = address

    def __len__(self) -> int:
        return len(self._addresses)


class InMemoryOrderStore(OrderStore):
    """Dictionary-backed store; a lock serializes writes to the same record."""

    def __init__(self) -> None:
        self._orders: dict[str, Order] = {}
        self._sequence: dict[str, int] = {}
        self._lock = threading.Lock()

    def insert(self, order: Order) -> Order:
        with self._lock:
            stored = replace(
                order,
                id=uuid.uuid4().hex,
                created_at=datetime.now(timezone.utc),
            )
            self._orders[stored.id] = stored
            self._sequence[stored.id] = len(self._sequence)
        return replace(stored)

    def find_by_id(self, order_id: str) -> Order | None:
        order = self._orders.get(order_id)
        return replace(order) if order else None

    def find(
        self,
        filters: Mapping[str, str] | None = None,
        *,
        newest_first: bool = False,
        limit: int | None = None,
    ) -> Sequence[Order]:
        criteria = [(ORDER_COLUMNS[key], value) for key, value in validate_filters(filters).items()]
        with self._lock:
            matches = [
                order
                for order in self._orders.values()
                if all(getattr(order, attr) == value for attr, value in criteria)
            ]
            matches.sort(key=lambda order: self._sequence[order.id], reverse=newest_first)
        if limit is not None:
            matches = matches[:limit]
        return [replace(order) for order in matches]

    def update_status(self, order_id: str, status: str) -> bool:
        with self._lock:
            order = self._orders.get(order_id)
            if order is None:
                return False
            order.status = status
        return True
