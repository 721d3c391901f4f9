"""Async SQLAlchemy engine and session factory."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from powerball_watch.config import settings
from powerball_watch.db.base import Base

engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def init_models(bind: AsyncEngine = engine) -> None:
    """Create the preference table if it does not exist yet."""
    import powerball_watch.db.models  # noqa: F401  (register tables)

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
