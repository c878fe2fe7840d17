"""Domain models."""

from .domain import Address, Coordinate, Order, OrderStatus, OrderType, Role

__all__ = ["Address", "Coordinate", "Order", "OrderStatus", "OrderType", "Role"]
