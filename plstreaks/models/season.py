# plstreaks/models/season.py
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import ResultSymbol, Venue

# Fixed season catalog, most recent first. Index order drives all cross-season sorting.
SEASONS: tuple[str, ...] = (
    "2025-26", "2024-25", "2023-24", "2022-23", "2021-22", "2020-21",
    "2019-20", "2018-19", "2017-18", "2016-17", "2015-16",
    "2014-15", "2013-14", "2012-13", "2011-12", "2010-11",
    "2009-10", "2008-09", "2007-08", "2006-07", "2005-06",
)


class MatchRecord(BaseModel):
    """Detail for one matchweek, stored from the owning team's perspective."""

    model_config = ConfigDict(frozen=True)

    opponent: str
    venue: Venue
    score: Optional[str] = None  # "ownGoals-opponentGoals", may be absent


class SeasonData(BaseModel):
    """Raw content of one season file."""

    model_config = ConfigDict(frozen=True)

    teams: List[str]
    results: Dict[str, List[ResultSymbol]] = Field(default_factory=dict)
    # Index-aligned with results; may be shorter, hold gaps, or be missing for a team
    matches: Dict[str, List[Optional[MatchRecord]]] = Field(default_factory=dict)

    @field_validator("results", "matches", mode="before")
    @classmethod
    def drop_null_sections(cls, section: Any) -> Any:
        # A null section or per-team entry means "no data", not a broken season
        if section is None:
            return {}
        if isinstance(section, dict):
            return {team: value for team, value in section.items() if value is not None}
        return section

    @field_validator("teams")
    @classmethod
    def teams_must_be_unique(cls, teams: List[str]) -> List[str]:
        seen = set()
        for team in teams:
            if team in seen:
                raise ValueError(f"Duplicate team name in season: {team}")
            seen.add(team)
        return teams

    def results_for(self, team: str) -> List[ResultSymbol]:
        return self.results.get(team, [])

    def matches_for(self, team: str) -> List[Optional[MatchRecord]]:
        return self.matches.get(team, [])

    def match_at(self, team: str, index: int) -> Optional[MatchRecord]:
        """Returns the match record at a 0-based matchweek index, if any."""
        matches = self.matches_for(team)
        if 0 <= index < len(matches):
            return matches[index]
        return None
