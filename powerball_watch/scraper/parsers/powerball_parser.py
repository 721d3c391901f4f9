"""Parser for the Powerball winning numbers table.

Expected layout of the first data row (row 0 is the header):
    [date MM/DD/YYYY, white 1..5, powerball, power play]
e.g. ["02/18/2026", "7", "12", "19", "41", "3", "9", "2"]
"""

from loguru import logger

from powerball_watch.errors import InvalidDateError, StructuralParseError
from powerball_watch.schemas.draw import (
    Draw,
    LatestDrawSchema,
    format_draw_date,
    is_special_number,
    is_white_number,
    parse_draw_date,
    parse_plain_int,
)

RawDocument = list[list[str]]

MIN_ROWS = 2
MIN_CELLS = 8
DATE_CELL = 0
WHITE_CELLS = slice(1, 6)
SPECIAL_CELL = 6
POWER_PLAY_CELL = 7


def _latest_row(rows: RawDocument) -> list[str]:
    if len(rows) < MIN_ROWS:
        raise StructuralParseError(f"expected at least {MIN_ROWS} table rows, got {len(rows)}")
    cells = rows[1]
    if len(cells) < MIN_CELLS:
        raise StructuralParseError(f"expected at least {MIN_CELLS} cells, got {len(cells)}")
    return cells


def _parse_row(cells: list[str]) -> Draw:
    date_text = cells[DATE_CELL].strip()
    try:
        draw_date = parse_draw_date(date_text)
    except ValueError as e:
        raise InvalidDateError(f"bad draw date {date_text!r}") from e

    whites = set()
    for text in cells[WHITE_CELLS]:
        n = parse_plain_int(text)
        if n is not None and is_white_number(n):
            whites.add(n)
        else:
            logger.debug("Dropping white number cell {!r} for {}", text, date_text)

    special = parse_plain_int(cells[SPECIAL_CELL])
    if special is not None and not is_special_number(special):
        special = None

    return Draw(
        draw_date=draw_date,
        white_numbers=frozenset(whites),
        special_number=special,
    )


def parse_draw(rows: RawDocument) -> Draw:
    """Parse the latest draw from the table rows.

    Bad number cells are dropped; a bad date or table shape raises ParseFailure.
    """
    return _parse_row(_latest_row(rows))


def parse_latest_result(rows: RawDocument) -> LatestDrawSchema:
    """Latest draw plus the Power Play multiplier, for display."""
    cells = _latest_row(rows)
    draw = _parse_row(cells)
    power_play = cells[POWER_PLAY_CELL].strip() or None
    return LatestDrawSchema(
        draw_date=format_draw_date(draw.draw_date),
        white_numbers=sorted(draw.white_numbers),
        special_number=draw.special_number,
        power_play=power_play,
        is_complete=draw.is_complete,
    )
