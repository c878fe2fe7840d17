"""Tariff table and price computation."""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Mapping

from ..errors import InvalidOrderType, InvalidPriceCalculation
from ..models.domain import OrderType

RATES: Mapping[str, float] = MappingProxyType(
    {
        OrderType.STANDARD.value: 2.5,
        OrderType.LITE.value: 1.5,
        OrderType.UNIVERSAL.value: 3.0,
    }
)


def calculate_price(order_type: str, distance: float, rates: Mapping[str, float] = RATES) -> float:
    """Return ``rate[order_type] * distance`` rounded to cents."""

    rate = rates.get(order_type)
    if rate is None:
        raise InvalidOrderType(order_type)

    price = rate * distance
    if not math.isfinite(price) or price < 0:
        raise InvalidPriceCalculation()
    return round(price, 2)
