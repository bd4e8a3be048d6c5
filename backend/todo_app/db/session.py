"""
Async SQLAlchemy session factory and the per-call query helper.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any, AsyncIterator

from sqlalchemy.sql.base import Executable
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from todo_app.core.config import settings

# Production databases are reached over SSL without certificate checks.
_connect_args: dict[str, Any] = {"ssl": "require"} if settings.APP_ENV == "production" else {}

engine = create_async_engine(
    settings.DATABASE_URL,
    echo=(settings.APP_ENV == "development" and settings.LOG_LEVEL.upper() == "DEBUG"),
    pool_size=settings.DB_POOL_SIZE,
    max_overflow=settings.DB_MAX_OVERFLOW,
    pool_pre_ping=True,
    connect_args=_connect_args,
)

async_session = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


@dataclass
class QueryResult:
    """Materialised outcome of one statement: affected/returned row count and plain rows."""

    row_count: int
    rows: list[dict[str, Any]] = field(default_factory=list)


@asynccontextmanager
async def session_scope(
    session_factory: async_sessionmaker[AsyncSession] | None = None,
) -> AsyncIterator[AsyncSession]:
    """Open a session for one call; commit on success, roll back and re-raise on error."""
    factory = session_factory or async_session
    async with factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def run_query(
    statement: Executable,
    session_factory: async_sessionmaker[AsyncSession] | None = None,
) -> QueryResult:
    """Execute one statement on its own connection and release it before returning."""
    async with session_scope(session_factory) as session:
        result = await session.execute(statement)
        if result.returns_rows:
            rows = [dict(row) for row in result.mappings().all()]
            return QueryResult(row_count=len(rows), rows=rows)
        return QueryResult(row_count=result.rowcount)
