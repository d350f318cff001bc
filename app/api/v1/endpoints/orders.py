"""Admin order management: browse every order and move it between statuses."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.v1.deps import get_order_service, require_admin
from app.models.order import Order
from app.models.user import User
from app.schemas.order import OrderRead, OrderStatusUpdate
from app.services.order_service import OrderService

router = APIRouter(prefix="/admin/orders", tags=["orders"])


@router.get("", response_model=list[OrderRead])
async def list_orders(
    _admin: User = Depends(require_admin),
    orders: OrderService = Depends(get_order_service),
) -> list[Order]:
    return await orders.list()


@router.get("/{order_id}", response_model=OrderRead)
async def get_order(
    order_id: int,
    _admin: User = Depends(require_admin),
    orders: OrderService = Depends(get_order_service),
) -> Order:
    return await orders.get_by_id(order_id)


@router.patch("/{order_id}", response_model=OrderRead)
async def update_order_status(
    order_id: int,
    body: OrderStatusUpdate,
    _admin: User = Depends(require_admin),
    orders: OrderService = Depends(get_order_service),
) -> Order:
    return await orders.update_status(order_id, body.status)
