"""Dependency injection for FastAPI."""

from powerball_watch.scraper.draw_client import DrawPageClient, draw_client
from powerball_watch.services.notifier import Notifier, get_notifier
from powerball_watch.services.preference_store import PreferenceStore, get_preference_store


def get_store() -> PreferenceStore:
    return get_preference_store()


def get_client() -> DrawPageClient:
    return draw_client


def get_dispatcher() -> Notifier:
    return get_notifier()
