"""Draw state tracker — decides whether a fetched draw is new and owns the cursor."""

from datetime import date
from typing import Protocol

from loguru import logger

from powerball_watch.schemas.draw import Draw, DrawCursor, parse_draw_date


class CursorWriter(Protocol):
    async def write_cursor(self, draw_date: date) -> None: ...


def decode_cursor(raw: str | None) -> DrawCursor:
    """Decode a persisted MM/DD/YYYY cursor.

    A missing or unparseable value is treated like a first run: the cursor
    comes back empty instead of failing the cycle.
    """
    if raw is None:
        return DrawCursor()
    try:
        return DrawCursor(last_known_draw_date=parse_draw_date(raw))
    except ValueError:
        logger.warning("Discarding corrupt draw cursor {!r}", raw)
        return DrawCursor()


def is_new_draw(fetched: Draw, cursor: DrawCursor) -> bool:
    """True if the cursor is empty or the fetched draw is strictly later."""
    last = cursor.last_known_draw_date
    return last is None or fetched.draw_date > last


async def advance(store: CursorWriter, cursor: DrawCursor, draw_date: date) -> DrawCursor:
    """Persist `draw_date` as the new cursor. Never moves the cursor backwards."""
    last = cursor.last_known_draw_date
    if last is not None and draw_date <= last:
        logger.debug("Cursor {} already covers {}, not writing", last, draw_date)
        return cursor

    await store.write_cursor(draw_date)
    logger.info("Draw cursor advanced {} -> {}", last, draw_date)
    return DrawCursor(last_known_draw_date=draw_date)
