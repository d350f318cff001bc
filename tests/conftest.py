"""
Shared test fixtures for the storefront test suite.

Every test gets its own in-memory SQLite database (aiosqlite + StaticPool)
with the system roles seeded; the app's ``get_db`` dependency is pointed
at it.
"""

import os
import sys
from typing import AsyncGenerator

import pytest

# Ensure project root is importable
ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

# Override environment BEFORE importing application modules
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
# CORS fix (JSON format)
os.environ["CORS_ORIGINS"] = '["*"]'
os.environ["RATE_LIMIT_ENABLED"] = "false"

from httpx import ASGITransport, AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.api.v1.deps import get_db
from app.core.security import create_access_token, get_password_hash
from app.db.base import Base
from app.db.seed import seed_system_roles
from app.domain.roles import ADMIN, CUSTOMER, SUPER_ADMIN
from app.main import app
from app.models.catalog import Product
from app.models.user import User, UserRole

PASSWORD = "secret123"
_PASSWORD_HASH = get_password_hash(PASSWORD)


@pytest.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Fresh database per test: tables created, system roles seeded."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        await seed_system_roles(session)

    yield factory

    await engine.dispose()


@pytest.fixture
async def async_client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """Return a httpx AsyncClient wired to the app."""

    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
async def file_session_factory(tmp_path) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """File-backed database so separate sessions hold separate connections."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'shop.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        await seed_system_roles(session)

    yield factory

    await engine.dispose()


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Return a raw database session for direct queries in tests."""
    async with session_factory() as session:
        yield session


# ── Data helpers ────────────────────────────────────────────────────
async def make_user(session: AsyncSession, email: str, role_code: str, name: str = "Test User") -> User:
    role_id = (await session.execute(select(UserRole.id).where(UserRole.code == role_code))).scalar_one()
    user = User(name=name, email=email, password_hash=_PASSWORD_HASH, user_role_id=role_id)
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user


async def make_product(
    session: AsyncSession,
    name: str = "Widget",
    price: float = 10.0,
    stock: int = 10,
    is_active: bool = True,
) -> Product:
    product = Product(name=name, price=price, stock=stock, is_active=is_active)
    session.add(product)
    await session.commit()
    await session.refresh(product)
    return product


def bearer(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(str(user.id))}"}


# ── Users ───────────────────────────────────────────────────────────
@pytest.fixture
async def super_admin(db_session: AsyncSession) -> User:
    return await make_user(db_session, "root@example.com", SUPER_ADMIN, "Root")


@pytest.fixture
async def admin(db_session: AsyncSession) -> User:
    return await make_user(db_session, "admin@example.com", ADMIN, "Admin")


@pytest.fixture
async def customer(db_session: AsyncSession) -> User:
    return await make_user(db_session, "alice@example.com", CUSTOMER, "Alice")


@pytest.fixture
def super_admin_headers(super_admin: User) -> dict[str, str]:
    return bearer(super_admin)


@pytest.fixture
def admin_headers(admin: User) -> dict[str, str]:
    return bearer(admin)


@pytest.fixture
def customer_headers(customer: User) -> dict[str, str]:
    return bearer(customer)


# ── Factories ───────────────────────────────────────────────────────
@pytest.fixture
def product_factory(db_session: AsyncSession):
    async def _make(**kwargs) -> Product:
        return await make_product(db_session, **kwargs)

    return _make


@pytest.fixture
def user_factory(db_session: AsyncSession):
    async def _make(email: str, role_code: str = CUSTOMER, name: str = "Test User") -> User:
        return await make_user(db_session, email, role_code, name)

    return _make


@pytest.fixture
def headers_for():
    """Build Bearer headers for an arbitrary user."""
    return bearer
