"""Preference store — ticket and draw cursor persisted as key/value rows."""

import json
from datetime import date

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from powerball_watch.db.crud import preferences as crud
from powerball_watch.errors import CorruptPersistedState
from powerball_watch.schemas.draw import (
    WHITE_PICK_COUNT,
    DrawCursor,
    Ticket,
    format_draw_date,
    is_special_number,
    is_white_number,
    parse_plain_int,
)
from powerball_watch.services.draw_tracker import decode_cursor

WHITE_NUMBERS_KEY = "white_numbers"
POWERBALL_KEY = "powerball_number"
LAST_DRAW_DATE_KEY = "last_known_draw_date"


def _decode_whites(raw: str) -> frozenset[int]:
    """Decode the JSON set-of-strings white number value."""
    try:
        items = json.loads(raw)
    except json.JSONDecodeError as e:
        raise CorruptPersistedState(f"{WHITE_NUMBERS_KEY}: {e}") from e
    if not isinstance(items, list):
        raise CorruptPersistedState(f"{WHITE_NUMBERS_KEY}: expected a list, got {raw!r}")

    numbers = []
    for item in items:
        n = parse_plain_int(str(item))
        if n is not None and is_white_number(n):
            numbers.append(n)
    return frozenset(sorted(set(numbers))[:WHITE_PICK_COUNT])


def _decode_special(raw: str) -> int | None:
    n = parse_plain_int(raw)
    if n is None:
        raise CorruptPersistedState(f"{POWERBALL_KEY}: {raw!r}")
    return n if is_special_number(n) else None


def decode_ticket(values: dict[str, str]) -> Ticket:
    """Build a ticket from raw preference values, dropping anything unreadable."""
    whites: frozenset[int] = frozenset()
    special = None

    if WHITE_NUMBERS_KEY in values:
        try:
            whites = _decode_whites(values[WHITE_NUMBERS_KEY])
        except CorruptPersistedState as e:
            logger.warning("Ignoring corrupt ticket value: {}", e)
    if POWERBALL_KEY in values:
        try:
            special = _decode_special(values[POWERBALL_KEY])
        except CorruptPersistedState as e:
            logger.warning("Ignoring corrupt ticket value: {}", e)

    return Ticket(white_numbers=whites, special_number=special)


class PreferenceStore:
    """Reads and writes the ticket and cursor through a session factory."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def read_cursor(self) -> DrawCursor:
        async with self._session_factory() as session:
            return decode_cursor(await crud.get_value(session, LAST_DRAW_DATE_KEY))

    async def write_cursor(self, draw_date: date) -> None:
        async with self._session_factory() as session, session.begin():
            await crud.set_value(session, LAST_DRAW_DATE_KEY, format_draw_date(draw_date))

    async def read_ticket(self) -> Ticket:
        async with self._session_factory() as session:
            values = await crud.get_values(session, [WHITE_NUMBERS_KEY, POWERBALL_KEY])
        return decode_ticket(values)

    async def write_ticket(self, ticket: Ticket) -> None:
        whites = json.dumps([str(n) for n in sorted(ticket.white_numbers)])
        async with self._session_factory() as session, session.begin():
            await crud.set_value(session, WHITE_NUMBERS_KEY, whites)
            if ticket.special_number is not None:
                await crud.set_value(session, POWERBALL_KEY, str(ticket.special_number))
            else:
                await crud.delete_value(session, POWERBALL_KEY)

    async def read_snapshot(self) -> tuple[DrawCursor, Ticket]:
        """Read cursor and ticket together, once, at the start of a cycle."""
        async with self._session_factory() as session:
            values = await crud.get_values(
                session, [WHITE_NUMBERS_KEY, POWERBALL_KEY, LAST_DRAW_DATE_KEY]
            )
        return decode_cursor(values.get(LAST_DRAW_DATE_KEY)), decode_ticket(values)


def get_preference_store() -> PreferenceStore:
    from powerball_watch.db.engine import async_session_factory

    return PreferenceStore(async_session_factory)
