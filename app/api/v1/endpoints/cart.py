"""
Customer-facing endpoints: the caller's cart, checkout and order history.

Any authenticated user may use these; they always act on the caller's
own cart and orders.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.v1.deps import get_cart_service, get_current_user, get_order_service
from app.domain.cart import CartView
from app.models.order import Order
from app.models.user import User
from app.schemas.order import (
    AddCartItemRequest,
    CartAddedResponse,
    CartRead,
    CheckoutRequest,
    OrderRead,
)
from app.services.cart_service import CartService
from app.services.order_service import OrderService

router = APIRouter(prefix="/me", tags=["cart"])


@router.get("/cart", response_model=CartRead)
async def read_cart(
    current_user: User = Depends(get_current_user),
    carts: CartService = Depends(get_cart_service),
) -> CartView:
    return await carts.get_cart(current_user.id)


@router.post("/cart/items", response_model=CartAddedResponse, status_code=201)
async def add_cart_item(
    body: AddCartItemRequest,
    current_user: User = Depends(get_current_user),
    carts: CartService = Depends(get_cart_service),
) -> CartAddedResponse:
    """Add *quantity* of a product, merging with any quantity already in the cart."""
    await carts.add_to_cart(current_user.id, body.product_id, body.quantity)
    return CartAddedResponse()


@router.post("/checkout", response_model=OrderRead, status_code=201)
async def checkout(
    body: CheckoutRequest,
    current_user: User = Depends(get_current_user),
    carts: CartService = Depends(get_cart_service),
) -> Order:
    """Turn the whole cart into a PENDING order and empty the cart."""
    return await carts.checkout(current_user.id, body.payment_method)


@router.get("/orders", response_model=list[OrderRead])
async def list_my_orders(
    current_user: User = Depends(get_current_user),
    orders: OrderService = Depends(get_order_service),
) -> list[Order]:
    return await orders.list_for_user(current_user.id)
