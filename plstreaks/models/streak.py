from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .enums import Venue


class StreakRange(BaseModel):
    """A maximal run of wins within one result sequence (0-based, inclusive)."""

    model_config = ConfigDict(frozen=True)

    start: int
    end: int
    length: int


class StreakCell(BaseModel):
    """Marks a matchweek that falls inside a streak, for table highlighting."""

    model_config = ConfigDict(frozen=True)

    is_streak_start: bool = False
    is_streak_end: bool = False


class StreakMatch(BaseModel):
    """A single won match inside a streak, with its display score."""

    model_config = ConfigDict(frozen=True)

    matchweek: int  # 1-based
    opponent: str
    venue: Venue
    score: str = ""
    display_score: str = ""


class Streak(BaseModel):
    """A five-or-more win run of one team in one season."""

    model_config = ConfigDict(frozen=True)

    season: str
    start_week: int  # 1-based, inclusive
    end_week: int  # 1-based, inclusive
    length: int = Field(..., ge=5)
    # Only matchweeks that have a match record; may be shorter than length
    matches: List[StreakMatch] = []
