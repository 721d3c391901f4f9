"""ORM models package."""

from powerball_watch.db.models.preference import Preference

__all__ = [
    "Preference",
]
