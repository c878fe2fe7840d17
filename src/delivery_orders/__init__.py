"""Delivery order pricing and lifecycle service."""
