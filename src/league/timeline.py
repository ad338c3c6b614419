"""
Display helpers for a single match.
"""
from league.models import CANCELLED, COMPLETED, IN_PROGRESS


def match_timeline(match):
    """Events ordered by minute; events without a minute go last."""
    return sorted(
        match.events,
        key=lambda event: (event.minute is None, event.minute if event.minute is not None else 0),
    )


def score_line(match):
    """Short label for a fixture list: the score, LIVE, or when it is due."""
    if match.status == COMPLETED:
        return f"{match.score[0]} - {match.score[1]}"
    if match.status == IN_PROGRESS:
        return 'LIVE'
    if match.status == CANCELLED:
        return 'Cancelled'
    return match.match_date or 'TBD'
