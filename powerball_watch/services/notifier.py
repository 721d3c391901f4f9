"""Notification dispatch — best effort, fire and forget."""

import asyncio
from typing import Protocol

import aiohttp
from loguru import logger

from powerball_watch.config import settings
from powerball_watch.errors import NotificationError
from powerball_watch.services.categories import MATCH_CATEGORIES, MatchCategory

TITLE = "Powerball Match Alert"


class Notifier(Protocol):
    async def notify(
        self,
        category: MatchCategory,
        draw_date: str,
        white_match_count: int,
        special_match: bool,
    ) -> None: ...


def build_message(draw_date: str, white_match_count: int, special_match: bool) -> str:
    """e.g. "New Powerball draw on 03/01/2026! You have 2 white balls + Powerball matches!" """
    total = white_match_count + (1 if special_match else 0)
    parts = []
    if white_match_count > 0:
        plural = "s" if white_match_count > 1 else ""
        parts.append(f"{white_match_count} white ball{plural}")
    if special_match:
        parts.append("Powerball")
    suffix = "es" if total > 1 else ""
    return f"New Powerball draw on {draw_date}! You have {' + '.join(parts)} match{suffix}!"


def build_payload(
    category: MatchCategory,
    draw_date: str,
    white_match_count: int,
    special_match: bool,
) -> dict:
    severity = category.severity
    return {
        "title": TITLE,
        "message": build_message(draw_date, white_match_count, special_match),
        "category_id": category.id,
        "category_label": category.label,
        "severity": severity.value,
        "priority": severity.priority,
        "draw_date": draw_date,
        "white_match_count": white_match_count,
        "special_match": special_match,
    }


class LogNotifier:
    """Writes notifications to the application log."""

    async def notify(
        self,
        category: MatchCategory,
        draw_date: str,
        white_match_count: int,
        special_match: bool,
    ) -> None:
        message = build_message(draw_date, white_match_count, special_match)
        logger.info("[{}/{}] {}", category.id, category.severity.value, message)


class WebhookNotifier:
    """POSTs a JSON payload to a webhook (ntfy, Home Assistant, Discord relay...)."""

    def __init__(self, url: str, timeout: float = 10.0):
        self.url = url
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    async def notify(
        self,
        category: MatchCategory,
        draw_date: str,
        white_match_count: int,
        special_match: bool,
    ) -> None:
        payload = build_payload(category, draw_date, white_match_count, special_match)
        try:
            async with aiohttp.ClientSession() as client:
                async with client.post(self.url, json=payload, timeout=self._timeout) as resp:
                    if resp.status >= 400:
                        raise NotificationError(f"webhook returned HTTP {resp.status}")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise NotificationError(f"webhook unreachable: {e!r}") from e
        logger.debug("Webhook notification sent for {}", category.id)


def get_notifier() -> Notifier:
    if settings.NOTIFY_WEBHOOK_URL:
        return WebhookNotifier(settings.NOTIFY_WEBHOOK_URL)
    return LogNotifier()


async def send_test_notifications(notifier: Notifier, draw_date: str = "01/01/2000") -> dict:
    """Send one test notification per category so every tier can be checked end to end."""
    sent, errors = [], []
    for category in MATCH_CATEGORIES:
        try:
            await notifier.notify(
                category, draw_date, category.white_matches, category.special_match
            )
            sent.append(category.id)
        except NotificationError as e:
            logger.warning("Test notification for {} failed: {}", category.id, e)
            errors.append(f"{category.id}: {e}")
    return {"sent": sent, "errors": errors}
