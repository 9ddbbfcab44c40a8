import pytest

from plstreaks.models.season import SeasonData


def make_season(results, matches=None, teams=None):
    """Builds SeasonData from compact "WWDL" strings per team."""
    return SeasonData.model_validate(
        {
            "teams": teams or list(results),
            "results": {team: list(seq) for team, seq in results.items()},
            "matches": matches or {},
        }
    )


def home(opponent, score):
    return {"opponent": opponent, "venue": "H", "score": score}


def away(opponent, score):
    return {"opponent": opponent, "venue": "A", "score": score}


@pytest.fixture()
def arsenal_season():
    # Arsenal: 6-game streak from matchweek 2, then a 5-game streak ending the season
    results = {
        "Arsenal": "LWWWWWWDWWWWW",
        "Chelsea": "WWWWDLLWWWWLD",
    }
    matches = {
        "Arsenal": [
            away("Chelsea", "0-1"),
            home("Everton", "2-0"),
            away("Fulham", "3-1"),
            None,
            home("Leeds United", "1-0"),
            away("Manchester City", "2-1"),
            home("Spurs", "4-0"),
        ],
    }
    return make_season(results, matches)
