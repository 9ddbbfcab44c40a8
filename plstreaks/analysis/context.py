from typing import Dict, List, Mapping, Sequence, Tuple

from loguru import logger
from pydantic import BaseModel, ConfigDict

from plstreaks.models.season import SEASONS, SeasonData
from plstreaks.models.standing import Standing
from plstreaks.models.streak import Streak, StreakCell
from .standings import calculate_standings
from .streak_detector import streak_cells
from .streak_index import (
    TeamStreakIndex,
    build_team_streak_index,
    rank_teams_by_streaks,
    season_frequency,
)


class AnalysisContext(BaseModel):
    """Everything derived from one set of loaded seasons.

    Built once by ``AnalysisContext.build`` and never mutated; reloading season
    data means building a new context. Query methods are pure lookups.
    """

    model_config = ConfigDict(frozen=True)

    catalog: Tuple[str, ...] = SEASONS
    seasons: Dict[str, SeasonData] = {}
    team_streaks: TeamStreakIndex = {}
    standings: Dict[str, List[Standing]] = {}
    season_streak_counts: Dict[str, int] = {}

    @classmethod
    def build(
        cls, seasons: Mapping[str, SeasonData], catalog: Sequence[str] = SEASONS
    ) -> "AnalysisContext":
        catalog = tuple(catalog)
        loaded = {s: seasons[s] for s in catalog if s in seasons}
        logger.info(f"Building analysis context from {len(loaded)} seasons...")

        team_streaks = build_team_streak_index(seasons, catalog)
        standings = {
            season_id: calculate_standings(season)
            for season_id, season in loaded.items()
        }
        season_streak_counts = {season_id: 0 for season_id in loaded}
        for streaks in team_streaks.values():
            for streak in streaks:
                season_streak_counts[streak.season] += 1

        context = cls(
            catalog=catalog,
            seasons=loaded,
            team_streaks=team_streaks,
            standings=standings,
            season_streak_counts=season_streak_counts,
        )
        logger.success(
            f"Analysis context ready: {len(team_streaks)} teams, "
            f"{sum(season_streak_counts.values())} streaks."
        )
        return context

    @property
    def loaded_seasons(self) -> List[str]:
        """Loaded season ids in catalog order (most recent first)."""
        return [s for s in self.catalog if s in self.seasons]

    def streaks_for(self, team: str) -> List[Streak]:
        return self.team_streaks.get(team, [])

    def standings_for(self, season: str) -> List[Standing]:
        return self.standings.get(season, [])

    def frequency_for(self, team: str) -> Dict[str, int]:
        return season_frequency(self.streaks_for(team), self.catalog)

    def season_streak_count(self, season: str) -> int:
        return self.season_streak_counts.get(season, 0)

    def ranked_teams(self) -> List[str]:
        return rank_teams_by_streaks(self.team_streaks)

    def streak_cells(self, season: str, team: str) -> Dict[int, StreakCell]:
        """Per-matchweek streak markers for one team's row in a season table."""
        data = self.seasons.get(season)
        if data is None:
            return {}
        return streak_cells(data.results_for(team))
