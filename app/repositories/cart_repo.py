"""Per-user cart lines. Re-adding a product adds to its quantity."""

from __future__ import annotations

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.cart import CartLine
from app.models.cart import CartItem


class CartRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_quantity(self, user_id: int, product_id: int) -> int:
        """Quantity already in the cart for this product (0 when absent)."""
        result = await self.db.execute(
            select(CartItem.quantity).where(
                CartItem.user_id == user_id, CartItem.product_id == product_id
            )
        )
        return result.scalar_one_or_none() or 0

    async def add_or_update_item(self, user_id: int, product_id: int, quantity: int) -> None:
        """Insert the line, or add *quantity* to the existing one."""
        if await self._increment(user_id, product_id, quantity):
            await self.db.commit()
            return

        self.db.add(CartItem(user_id=user_id, product_id=product_id, quantity=quantity))
        try:
            await self.db.commit()
        except IntegrityError:
            # A concurrent request inserted the same line first.
            await self.db.rollback()
            await self._increment(user_id, product_id, quantity)
            await self.db.commit()

    async def _increment(self, user_id: int, product_id: int, quantity: int) -> bool:
        result = await self.db.execute(
            update(CartItem)
            .where(CartItem.user_id == user_id, CartItem.product_id == product_id)
            .values(quantity=CartItem.quantity + quantity)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0

    async def list_items(self, user_id: int) -> list[CartLine]:
        result = await self.db.execute(
            select(CartItem.product_id, CartItem.quantity)
            .where(CartItem.user_id == user_id)
            .order_by(CartItem.id)
        )
        return [CartLine(product_id=pid, quantity=qty) for pid, qty in result.all()]

    async def clear(self, user_id: int, *, commit: bool = True) -> None:
        """Delete every line for the user.

        With ``commit=False`` the delete joins the caller's open transaction.
        """
        await self.db.execute(delete(CartItem).where(CartItem.user_id == user_id))
        if commit:
            await self.db.commit()
