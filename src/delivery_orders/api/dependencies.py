"""Request-scoped dependencies: caller identity and the order service."""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import Header, HTTPException, status

from ..config import settings
from ..data.addresses_repository import get_address_directory, get_order_store
from ..persistence.base import AddressDirectory
from ..services.geospatial import get_distance_strategy
from ..services.orders import OrderService


@dataclass(frozen=True, slots=True)
class Caller:
    login: str
    role: str


def get_caller(
    x_user_login: str | None = Header(default=None),
    x_user_role: str | None = Header(default=None),
) -> Caller:
    """Identity forwarded by the authenticating gateway; trusted verbatim."""
    if not x_user_login:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing caller login")
    return Caller(login=x_user_login, role=(x_user_role or "").strip())


def get_directory() -> AddressDirectory:
    return get_address_directory()


def get_order_service() -> OrderService:
    return OrderService(
        get_address_directory(),
        get_order_store(),
        distance_strategy=get_distance_strategy(settings.distance_strategy),
        recent_from_limit=settings.recent_from_limit,
        recent_to_limit=settings.recent_to_limit,
    )
