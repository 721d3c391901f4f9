from datetime import date

import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from powerball_watch.db.engine import init_models
from powerball_watch.errors import NotificationError
from powerball_watch.schemas.draw import DrawCursor, Ticket
from powerball_watch.services.preference_store import PreferenceStore

HEADER = ["Draw Date", "White Balls", "", "", "", "", "Powerball", "Power Play"]


def page(*cells: str) -> list[list[str]]:
    """A draw table with a header row and one result row."""
    return [HEADER, list(cells)]


class FakeClient:
    def __init__(self, rows=None, error: Exception | None = None):
        self.rows = rows
        self.error = error
        self.calls: list[str] = []

    async def fetch(self, url: str):
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return self.rows


class FakeStore:
    def __init__(self, cursor: date | None = None, ticket: Ticket | None = None):
        self.cursor = cursor
        self.ticket = ticket or Ticket()
        self.cursor_writes: list[date] = []

    async def read_snapshot(self):
        return DrawCursor(last_known_draw_date=self.cursor), self.ticket

    async def read_cursor(self):
        return DrawCursor(last_known_draw_date=self.cursor)

    async def write_cursor(self, draw_date: date):
        self.cursor_writes.append(draw_date)
        self.cursor = draw_date

    async def read_ticket(self):
        return self.ticket

    async def write_ticket(self, ticket: Ticket):
        self.ticket = ticket


class RecordingNotifier:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent: list[tuple] = []

    async def notify(self, category, draw_date, white_match_count, special_match):
        if self.fail:
            raise NotificationError("push service down")
        self.sent.append((category.id, draw_date, white_match_count, special_match))


@pytest.fixture
async def store(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'prefs.db'}")
    await init_models(engine)
    yield PreferenceStore(async_sessionmaker(engine, expire_on_commit=False))
    await engine.dispose()
