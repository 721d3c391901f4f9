"""Pydantic schemas for check cycles and categories."""

from enum import Enum

from pydantic import BaseModel

from powerball_watch.schemas.draw import MatchResult


class CheckStatus(str, Enum):
    NOTIFIED = "notified"          # new draw, category dispatched
    NO_MATCH = "no_match"          # new draw, nothing to notify
    ALREADY_SEEN = "already_seen"  # cursor already covers this draw
    RETRY = "retry"                # connectivity problem
    FAILED = "failed"              # permanent for this cycle

    @property
    def is_success(self) -> bool:
        return self not in (CheckStatus.RETRY, CheckStatus.FAILED)


class CheckResult(BaseModel):
    status: CheckStatus
    draw_date: str | None = None  # MM/DD/YYYY
    match: MatchResult | None = None
    category_id: str | None = None
    severity: str | None = None
    notification_sent: bool = False
    error_message: str | None = None


class CategorySchema(BaseModel):
    id: str
    label: str
    white_matches: int
    special_match: bool
    severity: str
    priority: int


class CheckStatusResponse(BaseModel):
    last_known_draw_date: str | None
    last_result: CheckResult | None
    scheduler_jobs: list[dict]
