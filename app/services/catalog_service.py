"""
Catalog service — plain category and product management.

Slugs are lower-case ``[a-z0-9-]`` runs derived from the category name
unless one is supplied explicitly.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from app.domain.exceptions import CategoryInvalidName, CategoryInvalidSlug, ProductNotFound
from app.models.catalog import Category, Product
from app.repositories.product_repo import CategoryRepository, ProductRepository

logger = logging.getLogger(__name__)

MAX_SLUG_LENGTH = 64
_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")


def slugify(value: str) -> str:
    return _NON_SLUG_RE.sub("-", value.strip().lower()).strip("-")


def _clean_name(name: str) -> str:
    name = (name or "").strip()
    if not name:
        raise CategoryInvalidName()
    return name


def _build_slug(name: str, slug: str | None = None) -> str:
    result = slugify(slug if slug is not None else name)
    if not result or len(result) > MAX_SLUG_LENGTH:
        raise CategoryInvalidSlug()
    return result


class CatalogService:
    def __init__(self, categories: CategoryRepository, products: ProductRepository) -> None:
        self._categories = categories
        self._products = products

    # ── Categories ──────────────────────────────────────────────────
    async def list_categories(self, only_active: bool = False) -> list[Category]:
        return await self._categories.list(only_active=only_active)

    async def get_category(self, category_id: int) -> Category:
        return await self._categories.get_by_id(category_id)

    async def create_category(
        self,
        name: str,
        slug: str | None = None,
        description: str = "",
        is_active: bool = True,
    ) -> Category:
        name = _clean_name(name)
        category = Category(
            name=name,
            slug=_build_slug(name, slug),
            description=(description or "").strip(),
            is_active=is_active,
        )
        category = await self._categories.save(category)
        logger.info("Created category %s", category.slug)
        return category

    async def update_category(self, category_id: int, **fields: Any) -> Category:
        category = await self._categories.get_by_id(category_id)

        name_changed = False
        if fields.get("name") is not None:
            name = _clean_name(fields["name"])
            name_changed = name != category.name
            category.name = name
        if fields.get("description") is not None:
            category.description = fields["description"].strip()
        if fields.get("is_active") is not None:
            category.is_active = fields["is_active"]

        if fields.get("slug") is not None:
            category.slug = _build_slug(category.name, fields["slug"])
        elif name_changed or not category.slug:
            category.slug = _build_slug(category.name)

        return await self._categories.save(category)

    async def delete_category(self, category_id: int) -> None:
        category = await self._categories.get_by_id(category_id)
        await self._categories.delete(category)
        logger.info("Deleted category %d", category_id)

    # ── Products ────────────────────────────────────────────────────
    async def list_products(
        self,
        category_id: int | None = None,
        search: str | None = None,
        only_active: bool = False,
    ) -> list[Product]:
        return await self._products.list(
            category_id=category_id, search=search, only_active=only_active
        )

    async def get_product(self, product_id: int, only_active: bool = False) -> Product:
        product = await self._products.get(product_id)
        if only_active and not product.is_active:
            raise ProductNotFound()
        return product

    async def create_product(self, **fields: Any) -> Product:
        if fields.get("category_id") is not None:
            await self._categories.get_by_id(fields["category_id"])
        product = await self._products.save(Product(**fields))
        logger.info("Created product %d (%s)", product.id, product.name)
        return product

    async def update_product(self, product_id: int, **fields: Any) -> Product:
        product = await self._products.get(product_id)
        if fields.get("category_id") is not None:
            await self._categories.get_by_id(fields["category_id"])
        for field, value in fields.items():
            # category_id is the only nullable column a caller may clear
            if value is None and field != "category_id":
                continue
            setattr(product, field, value)
        product = await self._products.save(product)
        logger.info("Updated product %d", product_id)
        return product

    async def delete_product(self, product_id: int) -> None:
        product = await self._products.get(product_id)
        await self._products.delete(product)
        logger.info("Deleted product %d", product_id)
