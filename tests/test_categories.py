import pytest

from powerball_watch.schemas.draw import MatchResult
from powerball_watch.services.categories import (
    MATCH_CATEGORIES,
    Severity,
    get_category,
    resolve,
)


def test_table_has_eleven_unique_tiers():
    assert len(MATCH_CATEGORIES) == 11
    pairs = {(c.white_matches, c.special_match) for c in MATCH_CATEGORIES}
    assert len(pairs) == 11
    assert (0, False) not in pairs


def test_zero_matches_resolves_to_none():
    assert resolve(MatchResult(white_match_count=0, special_match=False)) is None


@pytest.mark.parametrize("whites", range(6))
@pytest.mark.parametrize("special", [False, True])
def test_resolve_is_total(whites, special):
    category = resolve(MatchResult(white_match_count=whites, special_match=special))
    if whites == 0 and not special:
        assert category is None
    else:
        assert category.white_matches == whites
        assert category.special_match == special


def test_jackpot():
    category = resolve(MatchResult(white_match_count=5, special_match=True))
    assert category.id == "wb5_pb"
    assert category.severity == Severity.HIGH


@pytest.mark.parametrize(
    "category_id, severity",
    [
        ("pb_only", Severity.LOW),
        ("wb1", Severity.LOW),
        ("wb2_pb", Severity.LOW),
        ("wb3", Severity.DEFAULT),
        ("wb3_pb", Severity.DEFAULT),
        ("wb4", Severity.HIGH),
        ("wb4_pb", Severity.HIGH),
        ("wb5", Severity.HIGH),
    ],
)
def test_severity(category_id, severity):
    assert get_category(category_id).severity == severity


def test_priority_order():
    assert Severity.LOW.priority < Severity.DEFAULT.priority < Severity.HIGH.priority


def test_unknown_category():
    assert get_category("wb6") is None
