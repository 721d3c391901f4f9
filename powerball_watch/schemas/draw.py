"""Pydantic schemas for draws, tickets and match results."""

import re
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Powerball rules (fixed, not configurable per game)
WHITE_MIN, WHITE_MAX = 1, 69
SPECIAL_MIN, SPECIAL_MAX = 1, 26
WHITE_PICK_COUNT = 5

DATE_FORMAT = "%m/%d/%Y"
_DATE_RE = re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}")
_INT_RE = re.compile(r"[0-9]+")


def parse_draw_date(text: str) -> date:
    """Parse a zero-padded MM/DD/YYYY date. Raises ValueError on anything else."""
    text = text.strip()
    if not _DATE_RE.fullmatch(text):
        raise ValueError(f"not a MM/DD/YYYY date: {text!r}")
    return datetime.strptime(text, DATE_FORMAT).date()


def parse_plain_int(text: str) -> int | None:
    """Parse ASCII digits only; signs, separators and other scripts give None."""
    text = text.strip()
    if not _INT_RE.fullmatch(text):
        return None
    return int(text)


def format_draw_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def is_white_number(n: int) -> bool:
    return WHITE_MIN <= n <= WHITE_MAX


def is_special_number(n: int) -> bool:
    return SPECIAL_MIN <= n <= SPECIAL_MAX


class Draw(BaseModel):
    """One published result, keyed by its draw date."""

    model_config = ConfigDict(frozen=True)

    draw_date: date
    white_numbers: frozenset[int] = frozenset()
    special_number: int | None = None

    @property
    def is_complete(self) -> bool:
        """True when at least one winning number could be read from the page."""
        return bool(self.white_numbers) or self.special_number is not None


class Ticket(BaseModel):
    """The user's saved selection. May be partially filled."""

    model_config = ConfigDict(frozen=True)

    white_numbers: frozenset[int] = frozenset()
    special_number: int | None = None

    @property
    def is_complete(self) -> bool:
        return len(self.white_numbers) == WHITE_PICK_COUNT and self.special_number is not None


class DrawCursor(BaseModel):
    """Date of the last draw this device already reacted to."""

    model_config = ConfigDict(frozen=True)

    last_known_draw_date: date | None = None


class MatchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    white_match_count: int = Field(ge=0, le=WHITE_PICK_COUNT)
    special_match: bool


# --- API payloads ---

class LatestDrawSchema(BaseModel):
    draw_date: str  # MM/DD/YYYY
    white_numbers: list[int]
    special_number: int | None
    power_play: str | None  # display only
    is_complete: bool


class TicketSchema(BaseModel):
    white_numbers: list[int]
    special_number: int | None
    is_complete: bool

    @classmethod
    def from_ticket(cls, ticket: Ticket) -> "TicketSchema":
        return cls(
            white_numbers=sorted(ticket.white_numbers),
            special_number=ticket.special_number,
            is_complete=ticket.is_complete,
        )


class TicketUpdate(BaseModel):
    white_numbers: list[int] = Field(default_factory=list, max_length=WHITE_PICK_COUNT)
    special_number: int | None = Field(default=None, ge=SPECIAL_MIN, le=SPECIAL_MAX)

    @field_validator("white_numbers")
    @classmethod
    def _check_whites(cls, value: list[int]) -> list[int]:
        if len(set(value)) != len(value):
            raise ValueError("white numbers must be distinct")
        bad = [n for n in value if not is_white_number(n)]
        if bad:
            raise ValueError(f"white numbers out of range {WHITE_MIN}-{WHITE_MAX}: {bad}")
        return value

    def to_ticket(self) -> Ticket:
        return Ticket(
            white_numbers=frozenset(self.white_numbers),
            special_number=self.special_number,
        )
