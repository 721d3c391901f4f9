"""Check service — one fetch → parse → evaluate → notify → commit cycle.

The cursor write at the end is the only state change a cycle makes, so a
cycle cancelled or failing before that point leaves nothing behind. Callers
hold `cycle_lock` so two cycles never run at once.
"""

import asyncio
from datetime import date
from typing import Protocol

from loguru import logger

from powerball_watch.config import settings
from powerball_watch.errors import ConnectivityError, ParseFailure
from powerball_watch.schemas.check import CheckResult, CheckStatus
from powerball_watch.schemas.draw import DrawCursor, Ticket, format_draw_date
from powerball_watch.scraper.parsers.powerball_parser import RawDocument, parse_draw
from powerball_watch.services import draw_tracker
from powerball_watch.services.categories import resolve
from powerball_watch.services.match_evaluator import evaluate
from powerball_watch.services.notifier import Notifier, get_notifier


class DrawFetcher(Protocol):
    async def fetch(self, url: str) -> RawDocument: ...


class CycleStore(Protocol):
    async def read_snapshot(self) -> tuple[DrawCursor, Ticket]: ...

    async def write_cursor(self, draw_date: date) -> None: ...


# Held for the duration of a cycle so scheduled and manual runs never overlap
cycle_lock = asyncio.Lock()
_last_result: CheckResult | None = None


def get_last_result() -> CheckResult | None:
    return _last_result


def _finish(result: CheckResult) -> CheckResult:
    global _last_result
    _last_result = result
    logger.info(
        "Check cycle finished: {} (draw={}, category={})",
        result.status.value, result.draw_date, result.category_id,
    )
    return result


async def run_check_cycle(
    *,
    client: DrawFetcher,
    store: CycleStore,
    notifier: Notifier,
    url: str,
) -> CheckResult:
    """Run one check cycle and report what happened.

    RETRY means the fetch failed and the caller should try again later.
    FAILED means the page could not be used; it is not worth retrying before
    the next scheduled run. Everything else is a successful cycle.
    """
    cursor, ticket = await store.read_snapshot()

    # Fetching
    try:
        rows = await client.fetch(url)
    except ConnectivityError as e:
        logger.warning("Draw page unreachable, will retry: {}", e)
        return _finish(CheckResult(status=CheckStatus.RETRY, error_message=str(e)))

    # Parsed
    try:
        draw = parse_draw(rows)
    except ParseFailure as e:
        logger.error("Draw page could not be parsed ({}): {}", type(e).__name__, e)
        return _finish(CheckResult(status=CheckStatus.FAILED, error_message=str(e)))

    draw_date = format_draw_date(draw.draw_date)
    if not draw.is_complete:
        logger.error("Draw {} has no readable winning numbers", draw_date)
        return _finish(CheckResult(
            status=CheckStatus.FAILED,
            draw_date=draw_date,
            error_message="no readable winning numbers",
        ))

    if not draw_tracker.is_new_draw(draw, cursor):
        logger.debug("Draw {} already seen (cursor={})", draw_date, cursor.last_known_draw_date)
        return _finish(CheckResult(status=CheckStatus.ALREADY_SEEN, draw_date=draw_date))

    # Evaluating
    match = evaluate(ticket, draw)
    category = resolve(match)

    # Notifying
    sent = False
    if category is not None:
        try:
            await notifier.notify(
                category, draw_date, match.white_match_count, match.special_match
            )
            sent = True
        except Exception as e:
            # Best effort: the draw still counts as handled.
            logger.error("Notification for draw {} failed: {}", draw_date, e)

    # Committing
    await draw_tracker.advance(store, cursor, draw.draw_date)

    return _finish(CheckResult(
        status=CheckStatus.NOTIFIED if category is not None else CheckStatus.NO_MATCH,
        draw_date=draw_date,
        match=match,
        category_id=category.id if category else None,
        severity=category.severity.value if category else None,
        notification_sent=sent,
    ))


async def check_latest_draw() -> CheckResult:
    """Run a cycle with the configured client, store and notifier."""
    from powerball_watch.scraper.draw_client import draw_client
    from powerball_watch.services.preference_store import get_preference_store

    return await run_check_cycle(
        client=draw_client,
        store=get_preference_store(),
        notifier=get_notifier(),
        url=settings.DRAW_PAGE_URL,
    )
