"""Order endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, status

from ...schemas.orders import CreateOrderRequest, MessageResponse, OrderModel, StatusUpdateRequest
from ...services.orders import OrderService
from ..dependencies import Caller, get_caller, get_order_service

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", response_model=OrderModel, status_code=status.HTTP_201_CREATED)
def create_order(
    body: CreateOrderRequest,
    caller: Caller = Depends(get_caller),
    service: OrderService = Depends(get_order_service),
) -> OrderModel:
    order = service.create_order(body.from_address, body.to_address, body.type, caller.login)
    return OrderModel.from_domain(order)


@router.get("", response_model=List[OrderModel], status_code=status.HTTP_200_OK)
def list_orders(
    caller: Caller = Depends(get_caller),
    service: OrderService = Depends(get_order_service),
) -> List[OrderModel]:
    return [OrderModel.from_domain(order) for order in service.list_orders(caller.login, caller.role)]


@router.patch("/{order_id}/status", response_model=MessageResponse, status_code=status.HTTP_200_OK)
def update_order_status(
    order_id: str,
    body: StatusUpdateRequest,
    caller: Caller = Depends(get_caller),
    service: OrderService = Depends(get_order_service),
) -> MessageResponse:
    service.update_status(order_id, body.status, caller.role)
    return MessageResponse(message="Order status updated successfully")


@router.get("/recent/from", response_model=List[str], status_code=status.HTTP_200_OK)
def recent_from_addresses(
    caller: Caller = Depends(get_caller),
    service: OrderService = Depends(get_order_service),
) -> List[str]:
    return service.recent_from_addresses(caller.login)


@router.get("/recent/to", response_model=List[str], status_code=status.HTTP_200_OK)
def recent_to_addresses(
    caller: Caller = Depends(get_caller),
    service: OrderService = Depends(get_order_service),
) -> List[str]:
    return service.recent_to_addresses(caller.login)


@router.get("/price/lowest", response_model=Optional[OrderModel], status_code=status.HTTP_200_OK)
def lowest_price_order(
    caller: Caller = Depends(get_caller),
    service: OrderService = Depends(get_order_service),
) -> Optional[OrderModel]:
    order = service.lowest_price_order(caller.login)
    return OrderModel.from_domain(order) if order else None


@router.get("/price/highest", response_model=Optional[OrderModel], status_code=status.HTTP_200_OK)
def highest_price_order(
    caller: Caller = Depends(get_caller),
    service: OrderService = Depends(get_order_service),
) -> Optional[OrderModel]:
    order = service.highest_price_order(caller.login)
    return OrderModel.from_domain(order) if order else None
