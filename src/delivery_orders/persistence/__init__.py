"""Address directory and order store implementations."""

from .base import AddressDirectory, OrderStore
from .memory import InMemoryAddressDirectory, InMemoryOrderStore

__all__ = ["AddressDirectory", "OrderStore", "InMemoryAddressDirectory", "InMemoryOrderStore"]
