"""Order creation, listing and per-customer history queries."""

from __future__ import annotations

import logging
from typing import Literal, Mapping

from ..errors import AddressNotFound
from ..models.domain import Address, Order, OrderStatus, Role
from ..persistence.base import AddressDirectory, OrderStore
from .geospatial import DistanceStrategy, compute_distance, planar_distance
from .lifecycle import OrderLifecycle
from .pricing import RATES, calculate_price

logger = logging.getLogger(__name__)

AddressField = Literal["from", "to"]
PriceDirection = Literal["min", "max"]

_ADDRESS_ATTRIBUTES = {"from": "from_address", "to": "to_address"}


class OrderService:
    """Entry point for every order operation exposed to callers.

    Caller identity (``login`` and ``role``) is trusted as supplied by the
    transport layer.
    """

    def __init__(
        self,
        directory: AddressDirectory,
        store: OrderStore,
        *,
        distance_strategy: DistanceStrategy = planar_distance,
        rates: Mapping[str, float] = RATES,
        recent_from_limit: int = 5,
        recent_to_limit: int = 3,
    ) -> None:
        self.directory = directory
        self.store = store
        self.distance_strategy = distance_strategy
        self.rates = rates
        self.recent_from_limit = recent_from_limit
        self.recent_to_limit = recent_to_limit
        self.lifecycle = OrderLifecycle(store)

    def _resolve(self, name: str) -> Address:
        address = self.directory.resolve(name)
        if address is None:
            logger.warning("Address '%s' could not be resolved", name)
            raise AddressNotFound(name)
        return address

    def create_order(self, from_address: str, to_address: str, order_type: str, login: str) -> Order:
        origin = self._resolve(from_address)
        destination = self._resolve(to_address)

        distance = compute_distance(origin.location, destination.location, self.distance_strategy)
        price = calculate_price(order_type, distance, self.rates)

        order = self.store.insert(
            Order(
                login=login,
                from_address=from_address,
                to_address=to_address,
                type=order_type,
                distance=distance,
                price=price,
                status=OrderStatus.ACTIVE.value,
            )
        )
        logger.info(
            "Created %s order %s for %s: %s -> %s, distance=%.4f price=%.2f",
            order_type,
            order.id,
            login,
            from_address,
            to_address,
            distance,
            price,
        )
        return order

    def list_orders(self, login: str, role: str) -> list[Order]:
        """Admins see every order, drivers the open pool, everyone else their own."""
        if role == Role.ADMIN.value:
            filters = {}
        elif role == Role.DRIVER.value:
            filters = {"status": OrderStatus.ACTIVE.value}
        else:
            filters = {"login": login}
        return list(self.store.find(filters))

    def update_status(self, order_id: str, requested_status: str, role: str) -> Order:
        return self.lifecycle.transition(order_id, requested_status, role)

    def recent_addresses(self, login: str, field: AddressField, limit: int) -> list[str]:
        """Distinct ``field`` values of the caller's orders, most recent first."""
        attribute = _ADDRESS_ATTRIBUTES.get(field)
        if attribute is None:
            raise ValueError(f"Unknown address field '{field}'.")
        if limit < 1:
            return []

        seen: dict[str, None] = {}
        for order in self.store.find({"login": login}, newest_first=True):
            seen.setdefault(getattr(order, attribute), None)
            if len(seen) == limit:
                break
        return list(seen)

    def recent_from_addresses(self, login: str) -> list[str]:
        return self.recent_addresses(login, "from", self.recent_from_limit)

    def recent_to_addresses(self, login: str) -> list[str]:
        return self.recent_addresses(login, "to", self.recent_to_limit)

    def price_extreme(self, login: str, direction: PriceDirection) -> Order | None:
        """Cheapest or most expensive order of ``login``; ties go to the earliest created."""
        if direction not in ("min", "max"):
            raise ValueError(f"Unknown price direction '{direction}'.")

        best: Order | None = None
        for order in self.store.find({"login": login}):
            if best is None:
                best = order
            elif direction == "min" and order.price < best.price:
                best = order
            elif direction == "max" and order.price > best.price:
                best = order
        return best

    def lowest_price_order(self, login: str) -> Order | None:
        return self.price_extreme(login, "min")

    def highest_price_order(self, login: str) -> Order | None:
        return self.price_extreme(login, "max")
