"""Domain models for addresses and delivery orders."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class OrderType(str, Enum):
    """Tariff tier determining the per-distance rate."""

    STANDARD = "standard"
    LITE = "lite"
    UNIVERSAL = "universal"


class OrderStatus(str, Enum):
    ACTIVE = "Active"
    REJECTED = "Rejected"
    IN_PROGRESS = "In progress"
    DONE = "Done"


class Role(str, Enum):
    """Caller authorization class supplied by the transport layer."""

    CUSTOMER = "Customer"
    DRIVER = "Driver"
    ADMIN = "Admin"


@dataclass(frozen=True, slots=True)
class Coordinate:
    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class Address:
    """Named location owned by the address directory."""

    name: str
    location: Coordinate


@dataclass(slots=True)
class Order:
    """A delivery order between two named addresses.

    ``distance`` and ``price`` are computed once at creation; only ``status``
    changes afterwards. ``id`` and ``created_at`` are assigned by the store.
    """

    login: str
    from_address: str
    to_address: str
    type: str
    distance: float
    price: float
    status: str = OrderStatus.ACTIVE.value
    id: Optional[str] = None
    created_at: Optional[datetime] = field(default=None)
