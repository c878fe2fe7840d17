"""Order API schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from ..models.domain import Address, Order


class CreateOrderRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_address: str = Field(..., alias="from", min_length=1, description="Pickup address name")
    to_address: str = Field(..., alias="to", min_length=1, description="Drop-off address name")
    type: str = Field(..., description="Tariff tier: standard, lite or universal")


class StatusUpdateRequest(BaseModel):
    status: str = Field(..., description="Requested next status")


class OrderModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    login: str
    from_address: str = Field(..., alias="from")
    to_address: str = Field(..., alias="to")
    type: str
    distance: float
    price: float
    status: str
    created_at: datetime | None = None

    @classmethod
    def from_domain(cls, order: Order) -> "OrderModel":
        return cls(
            id=order.id,
            login=order.login,
            from_address=order.from_address,
            to_address=order.to_address,
            type=order.type,
            distance=order.distance,
            price=order.price,
            status=order.status,
            created_at=order.created_at,
        )


class MessageResponse(BaseModel):
    message: str


class AddressModel(BaseModel):
    name: str
    latitude: float
    longitude: float

    @classmethod
    def from_domain(cls, address: Address) -> "AddressModel":
        return cls(
            name=address.name,
            latitude=address.location.latitude,
            longitude=address.location.longitude,
        )
