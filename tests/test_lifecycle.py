import itertools

import pytest

from delivery_orders.errors import IllegalTransition, OrderAlreadyDone, OrderNotFound
from delivery_orders.models.domain import Order
from delivery_orders.persistence.memory import InMemoryOrderStore
from delivery_orders.services.lifecycle import OrderLifecycle, allowed_transitions

STATUSES = ["Active", "Rejected", "In progress", "Done"]
ROLES = ["Customer", "Driver", "Admin"]

ALLOWED = {
    ("Active", "Customer"): {"Rejected"},
    ("Active", "Driver"): {"In progress"},
    ("Active", "Admin"): {"Rejected", "In progress"},
    ("In progress", "Driver"): {"Done"},
    ("In progress", "Admin"): {"Done"},
}


def _order_with_status(store: InMemoryOrderStore, status: str) -> Order:
    order = store.insert(
        Order(
            login="u1",
            from_address="A",
            to_address="B",
            type="standard",
            distance=5.0,
            price=12.5,
        )
    )
    store.update_status(order.id, status)
    return store.find_by_id(order.id)


def test_allowed_transitions_matches_table():
    for status, role in itertools.product(STATUSES, ROLES):
        assert allowed_transitions(status, role) == ALLOWED.get((status, role), set())


@pytest.mark.parametrize(
    "current, role, requested",
    list(itertools.product(["Active", "Rejected", "In progress"], ROLES, STATUSES)),
)
def test_transition_grid(current, role, requested):
    store = InMemoryOrderStore()
    lifecycle = OrderLifecycle(store)
    order = _order_with_status(store, current)

    if requested in ALLOWED.get((current, role), set()):
        updated = lifecycle.transition(order.id, requested, role)
        assert updated.status == requested
        assert store.find_by_id(order.id).status == requested
    else:
        with pytest.raises(IllegalTransition):
            lifecycle.transition(order.id, requested, role)
        assert store.find_by_id(order.id).status == current


@pytest.mark.parametrize("role, requested", list(itertools.product(ROLES + ["Guest"], STATUSES)))
def test_done_is_absorbing(role, requested):
    store = InMemoryOrderStore()
    lifecycle = OrderLifecycle(store)
    order = _order_with_status(store, "Done")

    with pytest.raises(OrderAlreadyDone):
        lifecycle.transition(order.id, requested, role)
    assert store.find_by_id(order.id).status == "Done"


def test_full_delivery_path():
    store = InMemoryOrderStore()
    lifecycle = OrderLifecycle(store)
    order = _order_with_status(store, "Active")

    lifecycle.transition(order.id, "In progress", "Driver")
    lifecycle.transition(order.id, "Done", "Driver")

    assert store.find_by_id(order.id).status == "Done"


def test_unknown_role_cannot_transition():
    store = InMemoryOrderStore()
    order = _order_with_status(store, "Active")

    with pytest.raises(IllegalTransition):
        OrderLifecycle(store).transition(order.id, "Rejected", "Guest")


def test_no_role_can_reactivate():
    store = InMemoryOrderStore()
    lifecycle = OrderLifecycle(store)
    order = _order_with_status(store, "In progress")

    for role in ROLES:
        with pytest.raises(IllegalTransition):
            lifecycle.transition(order.id, "Active", role)


def test_missing_order():
    with pytest.raises(OrderNotFound):
        OrderLifecycle(InMemoryOrderStore()).transition("missing", "Rejected", "Admin")


def test_order_vanishing_before_write_is_not_found(monkeypatch):
    store = InMemoryOrderStore()
    order = _order_with_status(store, "Active")
    monkeypatch.setattr(store, "update_status", lambda order_id, status: False)

    with pytest.raises(OrderNotFound):
        OrderLifecycle(store).transition(order.id, "Rejected", "Customer")
