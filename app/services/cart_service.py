"""
Cart & checkout.

Every guard here runs before the first write: bad quantities never reach
storage, an over-stock add leaves the cart as it was, and checkout rejects
an unknown payment method before it even reads the cart.  The checkout
transaction itself lives in ``OrderRepository.create_from_cart``.
"""

from __future__ import annotations

import logging

from app.domain.cart import CartLineDetail, CartView
from app.domain.enums import PaymentMethod
from app.domain.exceptions import (EmptyOrderItems, InvalidPayment,
                                   InvalidQuantity, OutOfStock,
                                   ProductNotFound)
from app.models.order import Order
from app.repositories.cart_repo import CartRepository
from app.repositories.order_repo import OrderRepository
from app.repositories.product_repo import ProductRepository

logger = logging.getLogger(__name__)


class CartService:
    def __init__(
        self,
        carts: CartRepository,
        products: ProductRepository,
        orders: OrderRepository,
    ) -> None:
        self._carts = carts
        self._products = products
        self._orders = orders

    async def add_to_cart(self, user_id: int, product_id: int, quantity: int) -> None:
        if quantity <= 0:
            raise InvalidQuantity()

        product = await self._products.get_by_id(product_id)
        # Deactivated products are reported exactly like missing ones.
        if product is None or not product.is_active:
            raise ProductNotFound()

        in_cart = await self._carts.get_quantity(user_id, product_id)
        if in_cart + quantity > product.stock:
            logger.warning(
                "Out of stock: user %d wanted %d (+%d in cart) of product %d, stock %d",
                user_id, quantity, in_cart, product_id, product.stock,
            )
            raise OutOfStock()

        await self._carts.add_or_update_item(user_id, product_id, quantity)
        logger.info("User %d added %d x product %d to cart", user_id, quantity, product_id)

    async def get_cart(self, user_id: int) -> CartView:
        lines = await self._carts.list_items(user_id)
        if not lines:
            return CartView(user_id=user_id, items=[])

        products = {
            p.id: p for p in await self._products.get_by_ids(line.product_id for line in lines)
        }
        items = [
            CartLineDetail(
                product_id=line.product_id,
                quantity=line.quantity,
                name=products[line.product_id].name,
                price=products[line.product_id].price,
            )
            for line in lines
            if line.product_id in products
        ]
        return CartView(user_id=user_id, items=items)

    async def checkout(self, user_id: int, payment_method: PaymentMethod | str) -> Order:
        if not PaymentMethod.is_valid(payment_method):
            raise InvalidPayment()
        method = PaymentMethod(payment_method)

        lines = await self._carts.list_items(user_id)
        if not lines:
            raise EmptyOrderItems()

        order = await self._orders.create_from_cart(user_id, lines, method)
        logger.info(
            "Order %d placed by user %d: %d item(s), total %.2f via %s",
            order.id, user_id, len(order.items), order.total_amount, method.value,
        )
        return order
