"""Supabase-backed address directory and order store.

Table layout::

    addresses(name text primary key, latitude float8, longitude float8)
    orders(id uuid primary key default gen_random_uuid(), login text,
           "from" text, "to" text, type text, distance float8, price float8,
           status text, created_at timestamptz default now())
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Sequence

from supabase import Client

from ..config import settings
from ..models.domain import Address, Coordinate, Order
from .base import AddressDirectory, OrderStore, validate_filters


def _parse_timestamp(value: Any) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


def row_to_order(row: Mapping[str, Any]) -> Order:
    return Order(
        id=str(row["id"]),
        login=row["login"],
        from_address=row["from"],
        to_address=row["to"],
        type=row["type"],
        distance=float(row["distance"]),
        price=float(row["price"]),
        status=row["status"],
        created_at=_parse_timestamp(row.get("created_at")),
    )


def order_to_row(order: Order) -> dict[str, Any]:
    return {
        "login": order.login,
        "from": order.from_address,
        "to": order.to_address,
        "type": order.type,
        "distance": order.distance,
        "price": order.price,
        "status": order.status,
    }


class SupabaseAddressDirectory(AddressDirectory):
    def __init__(self, client: Client, table: str | None = None) -> None:
        self.client = client
        self.table = table or settings.addresses_table

    def resolve(self, name: str) -> Address | None:
        response = self.client.table(self.table).select("*").eq("name", name).limit(1).execute()
        if not response.data:
            return None
        row = response.data[0]
        return Address(
            name=row["name"],
            location=Coordinate(latitude=float(row["latitude"]), longitude=float(row["longitude"])),
        )


class SupabaseOrderStore(OrderStore):
    """Order store over a PostgREST table; database errors propagate to the caller."""

    def __init__(self, client: Client, table: str | None = None) -> None:
        self.client = client
        self.table = table or settings.orders_table

    def insert(self, order: Order) -> Order:
        response = self.client.table(self.table).insert(order_to_row(order)).execute()
        return row_to_order(response.data[0])

    def find_by_id(self, order_id: str) -> Order | None:
        response = self.client.table(self.table).select("*").eq("id", order_id).limit(1).execute()
        if not response.data:
            return None
        return row_to_order(response.data[0])

    def find(
        self,
        filters: Mapping[str, str] | None = None,
        *,
        newest_first: bool = False,
        limit: int | None = None,
    ) -> Sequence[Order]:
        query = self.client.table(self.table).select("*")
        for column, value in validate_filters(filters).items():
            query = query.eq(column, value)
        query = query.order("created_at", desc=newest_first).order("id", desc=newest_first)
        if limit is not None:
            query = query.limit(limit)
        response = query.execute()
        return [row_to_order(row) for row in response.data or []]

    def update_status(self, order_id: str, status: str) -> bool:
        response = self.client.table(self.table).update({"status": status}).eq("id", order_id).execute()
        return bool(response.data)
