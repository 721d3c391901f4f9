"""Match evaluator — compares a ticket with a draw."""

from powerball_watch.schemas.draw import Draw, MatchResult, Ticket


def evaluate(ticket: Ticket, draw: Draw) -> MatchResult:
    """Count shared white numbers and check the Powerball.

    A missing Powerball on either side never counts as a match.
    """
    white_matches = len(ticket.white_numbers & draw.white_numbers)
    special_match = (
        ticket.special_number is not None
        and draw.special_number is not None
        and ticket.special_number == draw.special_number
    )
    return MatchResult(white_match_count=white_matches, special_match=special_match)
