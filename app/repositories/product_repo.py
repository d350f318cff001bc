"""Category and product persistence."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.exceptions import CategoryNotFound, CategorySlugExists, ProductNotFound
from app.models.catalog import Category, Product


def _like(term: str) -> str:
    # Escape SQL LIKE metacharacters to prevent wildcard injection
    safe = term.replace("%", r"\%").replace("_", r"\_")
    return f"%{safe}%"


class CategoryRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_by_id(self, category_id: int) -> Category:
        result = await self.db.execute(select(Category).where(Category.id == category_id))
        category = result.scalar_one_or_none()
        if category is None:
            raise CategoryNotFound()
        return category

    async def list(self, only_active: bool = False) -> list[Category]:
        stmt = select(Category).order_by(Category.name)
        if only_active:
            stmt = stmt.where(Category.is_active.is_(True))
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def save(self, category: Category) -> Category:
        self.db.add(category)
        try:
            await self.db.commit()
        except IntegrityError as exc:
            await self.db.rollback()
            raise CategorySlugExists() from exc
        await self.db.refresh(category)
        return category

    async def delete(self, category: Category) -> None:
        await self.db.delete(category)
        await self.db.commit()


class ProductRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_by_id(self, product_id: int) -> Product | None:
        """Return the product with its current stock, or ``None``."""
        result = await self.db.execute(
            select(Product)
            .where(Product.id == product_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get(self, product_id: int) -> Product:
        product = await self.get_by_id(product_id)
        if product is None:
            raise ProductNotFound()
        return product

    async def get_by_ids(self, product_ids: Iterable[int]) -> list[Product]:
        ids = list(set(product_ids))
        if not ids:
            return []
        result = await self.db.execute(
            select(Product)
            .where(Product.id.in_(ids))
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def list(
        self,
        category_id: int | None = None,
        search: str | None = None,
        only_active: bool = False,
    ) -> list[Product]:
        stmt = select(Product).order_by(Product.id)
        if category_id is not None:
            stmt = stmt.where(Product.category_id == category_id)
        if only_active:
            stmt = stmt.where(Product.is_active.is_(True))
        if search:
            pattern = _like(search.strip())
            stmt = stmt.where(
                or_(
                    Product.name.ilike(pattern, escape="\\"),
                    Product.description.ilike(pattern, escape="\\"),
                )
            )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def save(self, product: Product) -> Product:
        self.db.add(product)
        await self.db.commit()
        await self.db.refresh(product)
        return product

    async def delete(self, product: Product) -> None:
        await self.db.delete(product)
        await self.db.commit()
