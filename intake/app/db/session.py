from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from intake.app.core.config import settings
from intake.app.db.tables import metadata


engine = create_async_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
)

SessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def init_db() -> None:
    """Create the reservation table when configured to do so."""
    if not settings.CREATE_TABLES:
        return
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)


async def close_db() -> None:
    """Release pooled connections."""
    await engine.dispose()


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a scoped AsyncSession for request handling."""
    async with SessionLocal() as session:
        yield session
