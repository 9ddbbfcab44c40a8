from typing import List

from loguru import logger

from plstreaks.models.enums import ResultSymbol
from plstreaks.models.season import SeasonData
from plstreaks.models.standing import Standing
from .score_formatter import parse_score


def calculate_team_standing(season: SeasonData, team: str) -> Standing:
    """Folds one team's results and match detail into season totals.

    A matchweek without a match record (or with an unreadable score) still
    counts toward wins/draws/losses but adds no goals.
    """
    results = season.results_for(team)
    wins = draws = losses = 0
    goals_for = goals_against = 0

    for i, result in enumerate(results):
        if result == ResultSymbol.WIN:
            wins += 1
        elif result == ResultSymbol.DRAW:
            draws += 1
        elif result == ResultSymbol.LOSS:
            losses += 1

        match = season.match_at(team, i)
        if match is None:
            continue
        goals = parse_score(match.score)
        if goals is None:
            if match.score:
                logger.debug(
                    f"Unreadable score '{match.score}' for {team} in matchweek {i + 1}, no goals counted."
                )
            continue
        goals_for += goals[0]
        goals_against += goals[1]

    return Standing(
        team=team,
        played=len(results),
        wins=wins,
        draws=draws,
        losses=losses,
        goals_for=goals_for,
        goals_against=goals_against,
    )


def calculate_standings(season: SeasonData) -> List[Standing]:
    """Builds the league table for one season.

    Teams are ordered by points, then goal difference, then goals scored, all
    descending. Teams level on all three keep their order from ``season.teams``
    (``sorted`` is stable); there is no further tie-break.
    """
    standings = [calculate_team_standing(season, team) for team in season.teams]
    return sorted(
        standings,
        key=lambda s: (-s.points, -s.goal_difference, -s.goals_for),
    )
