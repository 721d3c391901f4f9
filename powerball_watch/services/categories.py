"""Match categories — the fixed notification tiers and their severity."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from powerball_watch.schemas.check import CategorySchema
from powerball_watch.schemas.draw import MatchResult


class Severity(str, Enum):
    LOW = "low"
    DEFAULT = "default"
    HIGH = "high"

    @property
    def priority(self) -> int:
        """Numeric priority for dispatchers that want one (higher interrupts more)."""
        return {"low": -1, "default": 0, "high": 1}[self.value]


@dataclass(frozen=True)
class MatchCategory:
    id: str
    label: str
    white_matches: int
    special_match: bool

    @property
    def severity(self) -> Severity:
        return severity_for(self)

    def to_schema(self) -> CategorySchema:
        return CategorySchema(
            id=self.id,
            label=self.label,
            white_matches=self.white_matches,
            special_match=self.special_match,
            severity=self.severity.value,
            priority=self.severity.priority,
        )


MATCH_CATEGORIES: tuple[MatchCategory, ...] = (
    MatchCategory("pb_only", "Powerball Only", 0, True),
    MatchCategory("wb1", "1 White Ball", 1, False),
    MatchCategory("wb1_pb", "1 White Ball + Powerball", 1, True),
    MatchCategory("wb2", "2 White Balls", 2, False),
    MatchCategory("wb2_pb", "2 White Balls + Powerball", 2, True),
    MatchCategory("wb3", "3 White Balls", 3, False),
    MatchCategory("wb3_pb", "3 White Balls + Powerball", 3, True),
    MatchCategory("wb4", "4 White Balls", 4, False),
    MatchCategory("wb4_pb", "4 White Balls + Powerball", 4, True),
    MatchCategory("wb5", "5 White Balls (no PB)", 5, False),
    MatchCategory("wb5_pb", "5 White Balls + Powerball (Jackpot!)", 5, True),
)

_BY_OUTCOME = MappingProxyType(
    {(c.white_matches, c.special_match): c for c in MATCH_CATEGORIES}
)
_BY_ID = MappingProxyType({c.id: c for c in MATCH_CATEGORIES})


def severity_for(category: MatchCategory) -> Severity:
    # 4+ whites covers the jackpot and the $1M tier
    if category.white_matches >= 4:
        return Severity.HIGH
    if category.white_matches == 3:
        return Severity.DEFAULT
    return Severity.LOW


def resolve(result: MatchResult) -> MatchCategory | None:
    """Map a match result to its category. None means nothing worth notifying."""
    return _BY_OUTCOME.get((result.white_match_count, result.special_match))


def get_category(category_id: str) -> MatchCategory | None:
    return _BY_ID.get(category_id)
