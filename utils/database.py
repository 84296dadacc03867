# utils/database.py

import logging
from typing import Any, AsyncGenerator, Sequence

from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine

from config import settings

engine: AsyncEngine | None = None

logger = logging.getLogger(__name__)


def get_engine() -> AsyncEngine:
    if engine is None:
        raise RuntimeError("Database engine is not initialized")
    return engine


async def get_connection() -> AsyncGenerator[AsyncConnection, None]:
    """요청 단위 커넥션 (정상 종료 시 commit, 예외 시 rollback)"""
    async with get_engine().begin() as conn:
        yield conn


async def init_engine() -> None:
    global engine
    engine = create_async_engine(
        settings.database_url,
        echo=settings.db_echo,
        pool_size=5,
        max_overflow=15,
        pool_pre_ping=True,
    )


async def close_engine() -> None:
    global engine
    if engine:
        await engine.dispose()
        engine = None


async def fetch_all(conn: AsyncConnection, sql: str, values: Sequence[Any] = ()) -> list[dict]:
    """
    $n placeholder SQL 을 드라이버(asyncpg)에 그대로 전달해 실행.
    값은 항상 위치 기반으로 바인딩되며 SQL 문자열에 직접 넣지 않는다.
    """
    logger.debug("SQL: %s | params=%r", sql, values)
    result = await conn.exec_driver_sql(sql, tuple(values))
    if not result.returns_rows:
        return []
    return [dict(row) for row in result.mappings().all()]


async def fetch_one(conn: AsyncConnection, sql: str, values: Sequence[Any] = ()) -> dict | None:
    rows = await fetch_all(conn, sql, values)
    return rows[0] if rows else None
