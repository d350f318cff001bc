"""Order reads and admin status changes."""

from __future__ import annotations

import logging

from app.domain.enums import OrderStatus
from app.domain.exceptions import InvalidStatus
from app.models.order import Order
from app.repositories.order_repo import OrderRepository

logger = logging.getLogger(__name__)


class OrderService:
    def __init__(self, orders: OrderRepository) -> None:
        self._orders = orders

    async def list(self) -> list[Order]:
        return await self._orders.list()

    async def list_for_user(self, user_id: int) -> list[Order]:
        return await self._orders.list_for_user(user_id)

    async def get_by_id(self, order_id: int) -> Order:
        return await self._orders.get_by_id(order_id)

    async def update_status(self, order_id: int, status: OrderStatus | str) -> Order:
        """Overwrite the status with any valid value; no transition order is enforced."""
        if not OrderStatus.is_valid(status):
            raise InvalidStatus()
        order = await self._orders.update_status(order_id, OrderStatus(status))
        logger.info("Order %d status set to %s", order_id, order.status)
        return order
