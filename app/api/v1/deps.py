"""
FastAPI dependencies — database session, service wiring and auth guards.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import Optional

from fastapi import Cookie, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.security import BcryptPasswordHasher, decode_access_token
from app.db.session import async_session_factory
from app.domain.exceptions import UserNotFound
from app.domain.roles import ADMIN, SUPER_ADMIN, RoleCode
from app.models.user import User
from app.repositories.cart_repo import CartRepository
from app.repositories.order_repo import OrderRepository
from app.repositories.product_repo import CategoryRepository, ProductRepository
from app.repositories.role_repo import UserRoleRepository
from app.repositories.user_repo import UserRepository
from app.services.auth_service import AuthService
from app.services.cart_service import CartService
from app.services.catalog_service import CatalogService
from app.services.order_service import OrderService
from app.services.role_service import RoleService
from app.services.user_service import UserService

# We use auto_error=False so we can manually check for the cookie if header is missing
oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl=f"{settings.API_V1_PREFIX}/auth/login", auto_error=False
)


# ── Database session ────────────────────────────────────────────────
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with async_session_factory() as session:
        try:
            yield session
        finally:
            await session.close()


# ── Services ────────────────────────────────────────────────────────
def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(
        UserRepository(db), RoleService(UserRoleRepository(db)), BcryptPasswordHasher()
    )


def get_role_service(db: AsyncSession = Depends(get_db)) -> RoleService:
    return RoleService(UserRoleRepository(db))


def get_auth_service(db: AsyncSession = Depends(get_db)) -> AuthService:
    return AuthService(UserRepository(db))


def get_catalog_service(db: AsyncSession = Depends(get_db)) -> CatalogService:
    return CatalogService(CategoryRepository(db), ProductRepository(db))


def get_cart_service(db: AsyncSession = Depends(get_db)) -> CartService:
    carts = CartRepository(db)
    return CartService(carts, ProductRepository(db), OrderRepository(db, carts))


def get_order_service(db: AsyncSession = Depends(get_db)) -> OrderService:
    return OrderService(OrderRepository(db))


# ── Auth dependencies ───────────────────────────────────────────────
async def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    access_token: Optional[str] = Cookie(default=None),  # Read from HttpOnly Cookie
    db: AsyncSession = Depends(get_db),
) -> User:
    """Decode JWT from Header OR Cookie, look the user up fresh.

    The role is read from the database, not from the token, so a role
    change takes effect on the next request.
    """
    # Priority: Header > Cookie
    final_token = token
    if not final_token and access_token:
        # auth.py sets the cookie as "Bearer <token>"
        final_token = access_token.removeprefix("Bearer ").strip()

    credentials_exc = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if not final_token:
        raise credentials_exc

    payload = decode_access_token(final_token)
    if payload is None:
        raise credentials_exc

    user_id = payload.get("sub")
    if user_id is None or not str(user_id).isdigit():
        raise credentials_exc

    try:
        return await UserRepository(db).get_by_id(int(user_id))
    except UserNotFound:
        raise credentials_exc


def require_roles(*roles: RoleCode):
    """Coarse gate: the caller's role must be one of *roles*."""
    allowed = set(roles)

    async def _guard(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role_code not in allowed:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient privileges",
            )
        return current_user

    return _guard


require_admin = require_roles(ADMIN, SUPER_ADMIN)
