"""CRUD operations for the key/value preference table."""

from sqlalchemy import delete, select
from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import func

from powerball_watch.db.models.preference import Preference


async def get_value(session: AsyncSession, key: str) -> str | None:
    result = await session.execute(
        select(Preference.value).where(Preference.key == key)
    )
    return result.scalar_one_or_none()


async def get_values(session: AsyncSession, keys: list[str]) -> dict[str, str]:
    result = await session.execute(
        select(Preference.key, Preference.value).where(Preference.key.in_(keys))
    )
    return {key: value for key, value in result.all()}


async def set_value(session: AsyncSession, key: str, value: str) -> None:
    stmt = insert(Preference).values(key=key, value=value)
    stmt = stmt.on_conflict_do_update(
        index_elements=["key"],
        set_={"value": stmt.excluded.value, "updated_at": func.now()},
    )
    await session.execute(stmt)


async def delete_value(session: AsyncSession, key: str) -> bool:
    result = await session.execute(delete(Preference).where(Preference.key == key))
    return result.rowcount > 0
