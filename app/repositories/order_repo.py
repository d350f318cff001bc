"""
Order repository — order reads, status writes, and the checkout transaction.
"""

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.cart import CartLine
from app.domain.enums import OrderStatus, PaymentMethod
from app.domain.exceptions import CheckoutValidation, OrderNotFound
from app.models.catalog import Product
from app.models.order import Order, OrderItem
from app.repositories.cart_repo import CartRepository


class OrderRepository:
    def __init__(self, db: AsyncSession, carts: CartRepository | None = None) -> None:
        self.db = db
        self.carts = carts or CartRepository(db)

    async def create_from_cart(
        self,
        user_id: int,
        lines: list[CartLine],
        payment: PaymentMethod,
    ) -> Order:
        """Turn cart lines into a PENDING order in one transaction.

        Product rows are locked (``FOR UPDATE``, in id order) and re-read, so
        price and stock come from the database at this instant.  Order and
        item inserts, stock decrements and the cart clear commit together;
        any failure rolls all of them back.
        """
        try:
            ids = sorted({line.product_id for line in lines})
            result = await self.db.execute(
                select(Product)
                .where(Product.id.in_(ids))
                .order_by(Product.id)
                .with_for_update()
                .execution_options(populate_existing=True)
            )
            products = {p.id: p for p in result.scalars().all()}

            total = 0.0
            items: list[OrderItem] = []
            for line in lines:
                product = products.get(line.product_id)
                if product is None or not product.is_active:
                    raise CheckoutValidation(f"Product {line.product_id} is no longer available")
                if product.stock < line.quantity:
                    raise CheckoutValidation(f"Insufficient stock for product {line.product_id}")
                total += product.price * line.quantity
                items.append(
                    OrderItem(
                        product_id=product.id,
                        product_name=product.name,
                        unit_price=product.price,
                        quantity=line.quantity,
                    )
                )

            order = Order(
                user_id=user_id,
                status=OrderStatus.PENDING.value,
                payment_method=PaymentMethod(payment).value,
                total_amount=round(total, 2),
                items=items,
            )
            self.db.add(order)

            for line in lines:
                # Guarded decrement: never lets stock go negative even where
                # the backend ignores FOR UPDATE.
                res = await self.db.execute(
                    update(Product)
                    .where(Product.id == line.product_id, Product.stock >= line.quantity)
                    .values(stock=Product.stock - line.quantity)
                    .execution_options(synchronize_session=False)
                )
                if res.rowcount != 1:
                    raise CheckoutValidation(f"Insufficient stock for product {line.product_id}")

            await self.carts.clear(user_id, commit=False)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        return await self.get_by_id(order.id)

    async def list(self) -> list[Order]:
        result = await self.db.execute(select(Order).order_by(Order.id.desc()))
        return list(result.scalars().all())

    async def list_for_user(self, user_id: int) -> list[Order]:
        result = await self.db.execute(
            select(Order).where(Order.user_id == user_id).order_by(Order.id.desc())
        )
        return list(result.scalars().all())

    async def get_by_id(self, order_id: int) -> Order:
        result = await self.db.execute(
            select(Order)
            .where(Order.id == order_id)
            .execution_options(populate_existing=True)
        )
        order = result.scalar_one_or_none()
        if order is None:
            raise OrderNotFound()
        return order

    async def update_status(self, order_id: int, status: OrderStatus) -> Order:
        res = await self.db.execute(
            update(Order)
            .where(Order.id == order_id)
            .values(status=OrderStatus(status).value)
            .execution_options(synchronize_session=False)
        )
        if res.rowcount == 0:
            await self.db.rollback()
            raise OrderNotFound()
        await self.db.commit()
        return await self.get_by_id(order_id)
