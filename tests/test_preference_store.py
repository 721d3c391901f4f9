from datetime import date

from powerball_watch.db.crud import preferences as crud
from powerball_watch.schemas.draw import Ticket
from powerball_watch.services.preference_store import (
    LAST_DRAW_DATE_KEY,
    POWERBALL_KEY,
    WHITE_NUMBERS_KEY,
    decode_ticket,
)


async def _put(store, key, value):
    async with store._session_factory() as session, session.begin():
        await crud.set_value(session, key, value)


async def test_empty_store(store):
    cursor, ticket = await store.read_snapshot()
    assert cursor.last_known_draw_date is None
    assert ticket == Ticket()


async def test_cursor_round_trip(store):
    await store.write_cursor(date(2026, 3, 1))
    await store.write_cursor(date(2026, 3, 4))
    cursor = await store.read_cursor()
    assert cursor.last_known_draw_date == date(2026, 3, 4)


async def test_cursor_is_stored_as_mm_dd_yyyy(store):
    await store.write_cursor(date(2026, 3, 1))
    async with store._session_factory() as session:
        assert await crud.get_value(session, LAST_DRAW_DATE_KEY) == "03/01/2026"


async def test_corrupt_cursor_reads_as_absent(store):
    await _put(store, LAST_DRAW_DATE_KEY, "yesterday")
    cursor = await store.read_cursor()
    assert cursor.last_known_draw_date is None


async def test_ticket_round_trip(store):
    await store.write_ticket(Ticket(white_numbers=frozenset({8, 16}), special_number=7))
    ticket = await store.read_ticket()
    assert ticket.white_numbers == {8, 16}
    assert ticket.special_number == 7

    await store.write_ticket(Ticket(white_numbers=frozenset({8})))
    ticket = await store.read_ticket()
    assert ticket.white_numbers == {8}
    assert ticket.special_number is None


async def test_snapshot_reads_everything(store):
    await store.write_ticket(Ticket(white_numbers=frozenset({1, 2}), special_number=3))
    await store.write_cursor(date(2026, 3, 1))
    cursor, ticket = await store.read_snapshot()
    assert cursor.last_known_draw_date == date(2026, 3, 1)
    assert ticket.special_number == 3


async def test_corrupt_ticket_values_are_dropped(store):
    await _put(store, WHITE_NUMBERS_KEY, "{not json")
    await _put(store, POWERBALL_KEY, "PB")
    ticket = await store.read_ticket()
    assert ticket == Ticket()


def test_decode_ticket_filters_bad_entries():
    ticket = decode_ticket({
        WHITE_NUMBERS_KEY: '["5", "x", "70", "12", "5", "0"]',
        POWERBALL_KEY: "30",
    })
    assert ticket.white_numbers == {5, 12}
    assert ticket.special_number is None


def test_decode_ticket_keeps_at_most_five_whites():
    ticket = decode_ticket({WHITE_NUMBERS_KEY: '["1", "2", "3", "4", "5", "6"]'})
    assert len(ticket.white_numbers) == 5


def test_decode_ticket_rejects_non_ascii_and_separated_digits():
    ticket = decode_ticket({
        WHITE_NUMBERS_KEY: '["1_9", "３", "-4", "21"]',
        POWERBALL_KEY: "2_0",
    })
    assert ticket.white_numbers == {21}
    assert ticket.special_number is None
