# plstreaks/utils/misc_utils.py
from typing import Dict

# Compact names for narrow table columns
SHORT_TEAM_NAMES: Dict[str, str] = {
    "Manchester United": "Man Utd",
    "Manchester City": "Man City",
    "Tottenham Hotspur": "Spurs",
    "Wolverhampton": "Wolves",
    "Brighton & Hove Albion": "Brighton",
    "West Ham United": "West Ham",
    "Newcastle United": "Newcastle",
    "Nottingham Forest": "Forest",
    "Sheffield United": "Sheff Utd",
    "Sheffield Wednesday": "Sheff Wed",
    "West Bromwich Albion": "West Brom",
    "AFC Bournemouth": "Bournemouth",
    "Queens Park Rangers": "QPR",
    "Huddersfield Town": "Huddersfield",
    "Leicester City": "Leicester",
    "Norwich City": "Norwich",
    "Swansea City": "Swansea",
    "Cardiff City": "Cardiff",
    "Stoke City": "Stoke",
    "Hull City": "Hull",
    "Ipswich Town": "Ipswich",
    "Luton Town": "Luton",
    "Birmingham City": "Birmingham",
    "Blackburn Rovers": "Blackburn",
    "Bolton Wanderers": "Bolton",
    "Wigan Athletic": "Wigan",
    "Charlton Athletic": "Charlton",
    "Leeds United": "Leeds",
}


def short_team_name(name: str) -> str:
    """Returns the compact display name for a team, or the name itself."""
    return SHORT_TEAM_NAMES.get(name, name)


def pluralize(count: int, word: str) -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"
