from typing import Optional, Tuple

from plstreaks.models.enums import Venue


def format_display_score(score: Optional[str], venue: Venue) -> str:
    """Orients a stored score so the home side's goals come first.

    Scores are stored from the owning team's perspective ("own-opponent"). For a
    home match that already reads home-first; for an away match the two parts
    are swapped. No numeric validation is done: malformed text is passed through
    as its (swapped) parts.

    Args:
        score: The stored score string, e.g. "2-1". May be None or empty.
        venue: Where the owning team played.

    Returns:
        The display score, or an empty string when no score is stored.
    """
    if not score:
        return ""
    if venue == Venue.HOME:
        return score
    parts = score.split("-")
    goals_for = parts[0]
    goals_against = parts[1] if len(parts) > 1 else ""
    return f"{goals_against}-{goals_for}"


def parse_score(score: Optional[str]) -> Optional[Tuple[int, int]]:
    """Splits a stored score into (own goals, opponent goals).

    Returns None when the score is missing or does not contain two integers.
    """
    if not score:
        return None
    goals_for, sep, goals_against = score.partition("-")
    if not sep:
        return None
    try:
        return int(goals_for), int(goals_against)
    except ValueError:
        return None
