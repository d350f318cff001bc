"""
Catalog endpoints.

- GET /products, /products/{id} and /categories are public and only ever
  show active rows.
- /admin/categories and /admin/products are full CRUD for admins and see
  inactive rows too.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from app.api.v1.deps import get_catalog_service, require_admin
from app.models.catalog import Category, Product
from app.models.user import User
from app.schemas.catalog import (
    CategoryCreate,
    CategoryRead,
    CategoryUpdate,
    ProductCreate,
    ProductRead,
    ProductUpdate,
)
from app.services.catalog_service import CatalogService

router = APIRouter(tags=["catalog"])


# ── Public ──────────────────────────────────────────────────────────
@router.get("/products", response_model=list[ProductRead])
async def list_products(
    category_id: int | None = Query(default=None),
    q: str | None = Query(default=None, max_length=100),
    catalog: CatalogService = Depends(get_catalog_service),
) -> list[Product]:
    return await catalog.list_products(category_id=category_id, search=q, only_active=True)


@router.get("/products/{product_id}", response_model=ProductRead)
async def get_product(
    product_id: int,
    catalog: CatalogService = Depends(get_catalog_service),
) -> Product:
    return await catalog.get_product(product_id, only_active=True)


@router.get("/categories", response_model=list[CategoryRead])
async def list_categories(
    catalog: CatalogService = Depends(get_catalog_service),
) -> list[Category]:
    return await catalog.list_categories(only_active=True)


# ── Admin: categories ───────────────────────────────────────────────
@router.get("/admin/categories", response_model=list[CategoryRead])
async def admin_list_categories(
    _admin: User = Depends(require_admin),
    catalog: CatalogService = Depends(get_catalog_service),
) -> list[Category]:
    return await catalog.list_categories()


@router.post("/admin/categories", response_model=CategoryRead, status_code=201)
async def create_category(
    body: CategoryCreate,
    _admin: User = Depends(require_admin),
    catalog: CatalogService = Depends(get_catalog_service),
) -> Category:
    return await catalog.create_category(**body.model_dump())


@router.get("/admin/categories/{category_id}", response_model=CategoryRead)
async def get_category(
    category_id: int,
    _admin: User = Depends(require_admin),
    catalog: CatalogService = Depends(get_catalog_service),
) -> Category:
    return await catalog.get_category(category_id)


@router.patch("/admin/categories/{category_id}", response_model=CategoryRead)
async def update_category(
    category_id: int,
    body: CategoryUpdate,
    _admin: User = Depends(require_admin),
    catalog: CatalogService = Depends(get_catalog_service),
) -> Category:
    return await catalog.update_category(category_id, **body.model_dump(exclude_unset=True))


@router.delete("/admin/categories/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: int,
    _admin: User = Depends(require_admin),
    catalog: CatalogService = Depends(get_catalog_service),
) -> Response:
    await catalog.delete_category(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ── Admin: products ─────────────────────────────────────────────────
@router.get("/admin/products", response_model=list[ProductRead])
async def admin_list_products(
    category_id: int | None = Query(default=None),
    q: str | None = Query(default=None, max_length=100),
    _admin: User = Depends(require_admin),
    catalog: CatalogService = Depends(get_catalog_service),
) -> list[Product]:
    return await catalog.list_products(category_id=category_id, search=q)


@router.post("/admin/products", response_model=ProductRead, status_code=201)
async def create_product(
    body: ProductCreate,
    _admin: User = Depends(require_admin),
    catalog: CatalogService = Depends(get_catalog_service),
) -> Product:
    return await catalog.create_product(**body.model_dump())


@router.get("/admin/products/{product_id}", response_model=ProductRead)
async def admin_get_product(
    product_id: int,
    _admin: User = Depends(require_admin),
    catalog: CatalogService = Depends(get_catalog_service),
) -> Product:
    return await catalog.get_product(product_id)


@router.patch("/admin/products/{product_id}", response_model=ProductRead)
async def update_product(
    product_id: int,
    body: ProductUpdate,
    _admin: User = Depends(require_admin),
    catalog: CatalogService = Depends(get_catalog_service),
) -> Product:
    return await catalog.update_product(product_id, **body.model_dump(exclude_unset=True))


@router.delete("/admin/products/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: int,
    _admin: User = Depends(require_admin),
    catalog: CatalogService = Depends(get_catalog_service),
) -> Response:
    await catalog.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
