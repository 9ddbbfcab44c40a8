from typing import Dict, List, Mapping, Sequence

from loguru import logger

from plstreaks.models.season import SEASONS, SeasonData
from plstreaks.models.streak import Streak, StreakMatch, StreakRange
from .score_formatter import format_display_score
from .streak_detector import detect_streaks

# team -> streaks, most recent season first, longest first within a season
TeamStreakIndex = Dict[str, List[Streak]]


def _enrich_streak(
    season_id: str, season: SeasonData, team: str, streak_range: StreakRange
) -> Streak:
    """Attaches opponent and score detail to a detected streak range."""
    streak_matches: List[StreakMatch] = []
    for i in range(streak_range.start, streak_range.end + 1):
        match = season.match_at(team, i)
        if match is None:
            # The streak still stands on results alone
            continue
        streak_matches.append(
            StreakMatch(
                matchweek=i + 1,
                opponent=match.opponent,
                venue=match.venue,
                score=match.score or "",
                display_score=format_display_score(match.score, match.venue),
            )
        )

    return Streak(
        season=season_id,
        start_week=streak_range.start + 1,
        end_week=streak_range.end + 1,
        length=streak_range.length,
        matches=streak_matches,
    )


def build_team_streak_index(
    seasons: Mapping[str, SeasonData], catalog: Sequence[str] = SEASONS
) -> TeamStreakIndex:
    """Collects every team's five-plus win streaks across all loaded seasons.

    Seasons in the catalog but missing from ``seasons`` contribute nothing.
    Every team listed in a loaded season gets an entry, even with no streaks.

    Args:
        seasons: Loaded season data keyed by season id.
        catalog: Known seasons, most recent first.

    Returns:
        Mapping of team name to its streaks, sorted by season recency and then
        by length descending. Ties keep discovery order.
    """
    unknown = [season_id for season_id in seasons if season_id not in catalog]
    if unknown:
        logger.warning(f"Ignoring seasons not in the catalog: {unknown}")

    index: TeamStreakIndex = {}
    for season_id in catalog:
        season = seasons.get(season_id)
        if season is None:
            continue

        for team in season.teams:
            team_streaks = index.setdefault(team, [])
            for streak_range in detect_streaks(season.results_for(team)):
                team_streaks.append(
                    _enrich_streak(season_id, season, team, streak_range)
                )

    season_position = {season_id: i for i, season_id in enumerate(catalog)}
    for team_streaks in index.values():
        # list.sort is stable, equal keys keep discovery order
        team_streaks.sort(key=lambda s: (season_position[s.season], -s.length))

    logger.debug(
        f"Built streak index for {len(index)} teams, "
        f"{sum(len(s) for s in index.values())} streaks."
    )
    return index


def season_frequency(
    streaks: Sequence[Streak], catalog: Sequence[str] = SEASONS
) -> Dict[str, int]:
    """Counts streaks per season, with every catalog season present (zero-filled)."""
    freq = {season_id: 0 for season_id in catalog}
    for streak in streaks:
        if streak.season in freq:
            freq[streak.season] += 1
    return freq


def total_streak_wins(streaks: Sequence[Streak]) -> int:
    return sum(streak.length for streak in streaks)


def rank_teams_by_streaks(index: Mapping[str, Sequence[Streak]]) -> List[str]:
    """Orders teams by number of streaks (most first), then alphabetically."""
    return sorted(index, key=lambda team: (-len(index[team]), team.casefold()))
