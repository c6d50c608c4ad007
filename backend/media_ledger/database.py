"""Async SQLAlchemy engine and session factory.

Usage in routes:
    from media_ledger.database import get_db

    @router.get("/media/{record_id}")
    async def get_media(record_id: int, db: AsyncSession = Depends(get_db)):
        return await db.get(MediaRecord, record_id)
"""
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from media_ledger.config import settings


def engine_options(url: str) -> dict:
    """Engine kwargs for the given database URL.

    SQLite shares one connection so an in-memory database survives across sessions.
    """
    if url.startswith("sqlite"):
        return {
            "echo": settings.DB_ECHO,
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        }
    return {
        "echo": settings.DB_ECHO,
        "pool_size": 10,
        "max_overflow": 20,
        "pool_pre_ping": True,
    }


engine = create_async_engine(settings.DATABASE_URL, **engine_options(settings.DATABASE_URL))

async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db():
    """FastAPI dependency that yields an async DB session."""
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()
