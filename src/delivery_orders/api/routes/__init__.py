"""Route group exports."""

from . import addresses, health, orders

__all__ = ["orders", "addresses", "health"]
