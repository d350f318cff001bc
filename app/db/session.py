"""
Async SQLAlchemy engine & session factory.

PostgreSQL (asyncpg) gets a sized, recycled connection pool; any other URL,
such as the aiosqlite database the tests use, keeps the driver defaults.
Sessions keep attribute values after commit so repositories can return
committed rows without another round trip.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.core.config import settings

engine_args = {
    "echo": False,
    "pool_pre_ping": True,
}

if "postgresql" in settings.DATABASE_URL:
    engine_args.update(
        {
            "pool_size": 20,
            "max_overflow": 10,
            "pool_recycle": 300,
        }
    )

engine = create_async_engine(
    settings.DATABASE_URL,
    **engine_args,
)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)
