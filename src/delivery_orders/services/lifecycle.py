"""Order status state machine gated by caller role."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from ..errors import IllegalTransition, OrderAlreadyDone, OrderNotFound
from ..models.domain import Order, OrderStatus, Role
from ..persistence.base import OrderStore

logger = logging.getLogger(__name__)

_ACTIVE = OrderStatus.ACTIVE.value
_REJECTED = OrderStatus.REJECTED.value
_IN_PROGRESS = OrderStatus.IN_PROGRESS.value
_DONE = OrderStatus.DONE.value

# current status -> role -> statuses that role may move the order to.
# Statuses and roles missing from the table have no outgoing edges.
TRANSITIONS: Mapping[str, Mapping[str, frozenset[str]]] = MappingProxyType(
    {
        _ACTIVE: MappingProxyType(
            {
                Role.CUSTOMER.value: frozenset({_REJECTED}),
                Role.DRIVER.value: frozenset({_IN_PROGRESS}),
                Role.ADMIN.value: frozenset({_REJECTED, _IN_PROGRESS}),
            }
        ),
        _IN_PROGRESS: MappingProxyType(
            {
                Role.DRIVER.value: frozenset({_DONE}),
                Role.ADMIN.value: frozenset({_DONE}),
            }
        ),
    }
)


def allowed_transitions(
    current_status: str,
    role: str,
    table: Mapping[str, Mapping[str, frozenset[str]]] = TRANSITIONS,
) -> frozenset[str]:
    return table.get(current_status, {}).get(role, frozenset())


class OrderLifecycle:
    """Validates and applies status changes against an order store.

    The fetch and the write are separate store calls; concurrent transitions
    on the same order are serialized only as far as the store does so.
    """

    def __init__(
        self,
        store: OrderStore,
        table: Mapping[str, Mapping[str, frozenset[str]]] = TRANSITIONS,
    ) -> None:
        self.store = store
        self.table = table

    def transition(self, order_id: str, requested_status: str, role: str) -> Order:
        order = self.store.find_by_id(order_id)
        if order is None:
            raise OrderNotFound(order_id)
        if order.status == _DONE:
            raise OrderAlreadyDone()

        if requested_status not in allowed_transitions(order.status, role, self.table):
            logger.warning(
                "Rejected status change for order %s: %s cannot move %r to %r",
                order_id,
                role,
                order.status,
                requested_status,
            )
            raise IllegalTransition(order.status, requested_status, role)

        if not self.store.update_status(order_id, requested_status):
            raise OrderNotFound(order_id)

        logger.info("Order %s moved from %r to %r by %s", order_id, order.status, requested_status, role)
        order.status = requested_status
        return order
