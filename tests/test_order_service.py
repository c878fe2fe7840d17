import pytest

from delivery_orders.errors import AddressNotFound, IllegalTransition, InvalidCoordinates, InvalidOrderType
from delivery_orders.models.domain import Address, Coordinate, Order
from delivery_orders.persistence.memory import InMemoryAddressDirectory, InMemoryOrderStore
from delivery_orders.services.geospatial import haversine_km
from delivery_orders.services.orders import OrderService


def _address(name: str, lat: float, lon: float) -> Address:
    return Address(name=name, location=Coordinate(latitude=lat, longitude=lon))


def _order(login: str, price: float, status: str = "Active", from_address: str = "A", to_address: str = "B") -> Order:
    return Order(
        login=login,
        from_address=from_address,
        to_address=to_address,
        type="standard",
        distance=price / 2.5,
        price=price,
        status=status,
    )


@pytest.fixture
def directory() -> InMemoryAddressDirectory:
    return InMemoryAddressDirectory(
        [
            _address("A", 0, 0),
            _address("B", 3, 4),
            _address("C", 1, 1),
            _address("D", 2, 2),
            _address("E", 5, 5),
            _address("F", 6, 6),
            _address("G", 7, 7),
            _address("Broken", float("nan"), 0),
        ]
    )


@pytest.fixture
def store() -> InMemoryOrderStore:
    return InMemoryOrderStore()


@pytest.fixture
def service(directory, store) -> OrderService:
    return OrderService(directory, store)


def test_create_order_end_to_end(service: OrderService, store: InMemoryOrderStore):
    order = service.create_order("A", "B", "standard", "u1")

    assert order.id
    assert order.distance == pytest.approx(5.0)
    assert order.price == 12.5
    assert order.status == "Active"
    assert order.login == "u1"
    assert store.find_by_id(order.id).price == 12.5


def test_create_order_with_haversine_strategy(directory, store):
    service = OrderService(directory, store, distance_strategy=haversine_km)

    order = service.create_order("A", "C", "lite", "u1")

    assert order.distance == pytest.approx(157.25, rel=1e-3)
    assert order.price == round(order.distance * 1.5, 2)


@pytest.mark.parametrize("from_address, to_address", [("Nowhere", "B"), ("A", "Nowhere")])
def test_create_order_unknown_address(service: OrderService, store, from_address, to_address):
    with pytest.raises(AddressNotFound):
        service.create_order(from_address, to_address, "standard", "u1")
    assert store.find() == []


def test_create_order_invalid_type(service: OrderService, store):
    with pytest.raises(InvalidOrderType):
        service.create_order("A", "B", "express", "u1")
    assert store.find() == []


def test_create_order_non_finite_coordinates(service: OrderService):
    with pytest.raises(InvalidCoordinates):
        service.create_order("Broken", "B", "standard", "u1")


def test_list_orders_visibility(service: OrderService, store: InMemoryOrderStore):
    store.insert(_order("u1", 10))
    store.insert(_order("u1", 20, status="Done"))
    store.insert(_order("u2", 30))
    store.insert(_order("u2", 40, status="In progress"))

    assert len(service.list_orders("admin", "Admin")) == 4

    driver_view = service.list_orders("d1", "Driver")
    assert [order.price for order in driver_view] == [10, 30]
    assert all(order.status == "Active" for order in driver_view)

    customer_view = service.list_orders("u1", "Customer")
    assert {order.login for order in customer_view} == {"u1"}
    assert len(customer_view) == 2

    assert {order.login for order in service.list_orders("u2", "Guest")} == {"u2"}
    assert service.list_orders("nobody", "Customer") == []


def test_customer_cannot_reject_order_in_progress(service: OrderService):
    order = service.create_order("A", "B", "standard", "u1")
    service.update_status(order.id, "In progress", "Driver")

    with pytest.raises(IllegalTransition):
        service.update_status(order.id, "Rejected", "Customer")


def test_recent_from_addresses_deduplicates(service: OrderService, store: InMemoryOrderStore):
    for _ in range(10):
        store.insert(_order("u1", 10, from_address="A"))

    assert service.recent_from_addresses("u1") == ["A"]


def test_recent_addresses_most_recent_first(service: OrderService, store: InMemoryOrderStore):
    for name in ["A", "B", "A", "C", "D", "E", "F", "G"]:
        store.insert(_order("u1", 10, from_address=name, to_address=name))
    store.insert(_order("u2", 10, from_address="Z", to_address="Z"))

    assert service.recent_from_addresses("u1") == ["G", "F", "E", "D", "C"]
    assert service.recent_to_addresses("u1") == ["G", "F", "E"]
    assert service.recent_addresses("u1", "from", 10) == ["G", "F", "E", "D", "C", "A", "B"]


def test_recent_addresses_validates_arguments(service: OrderService):
    assert service.recent_addresses("u1", "from", 0) == []
    with pytest.raises(ValueError):
        service.recent_addresses("u1", "via", 3)  # type: ignore[arg-type]


def test_price_extreme_without_orders(service: OrderService):
    assert service.lowest_price_order("u1") is None
    assert service.highest_price_order("u1") is None


def test_price_extreme(service: OrderService, store: InMemoryOrderStore):
    for price in [10.00, 25.50, 7.25]:
        store.insert(_order("u1", price))
    store.insert(_order("u2", 1.00))
    store.insert(_order("u2", 99.00))

    assert service.lowest_price_order("u1").price == 7.25
    assert service.highest_price_order("u1").price == 25.50


def test_price_extreme_ties_go_to_earliest_created(service: OrderService, store: InMemoryOrderStore):
    first = store.insert(_order("u1", 5.0, from_address="first"))
    store.insert(_order("u1", 5.0, from_address="second"))

    assert service.lowest_price_order("u1").id == first.id
    assert service.highest_price_order("u1").id == first.id
    with pytest.raises(ValueError):
        service.price_extreme("u1", "median")  # type: ignore[arg-type]
