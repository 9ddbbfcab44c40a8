import sys
import asyncio
import argparse
from typing import List, Optional

# --- Settings/Logging ---
from plstreaks.logging.setup import setup_logging
from plstreaks.config.settings import settings

setup_logging()

from loguru import logger

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from plstreaks.analysis.context import AnalysisContext
from plstreaks.analysis.score_formatter import format_display_score
from plstreaks.analysis.streak_index import total_streak_wins
from plstreaks.loaders.base_loader import load_all_seasons
from plstreaks.loaders.factory import get_loader
from plstreaks.models.enums import ResultSymbol, Venue
from plstreaks.utils.misc_utils import pluralize, short_team_name

console = Console()

RESULT_STYLES = {
    ResultSymbol.WIN: "green",
    ResultSymbol.DRAW: "yellow",
    ResultSymbol.LOSS: "red",
}


async def build_context() -> AnalysisContext:
    """Loads every available season and derives streaks and standings."""
    loader = get_loader(settings)
    try:
        seasons = await load_all_seasons(loader)
    finally:
        await loader.close()
    return AnalysisContext.build(seasons)


def print_season_list(context: AnalysisContext) -> None:
    table = Table(title="Seasons")
    table.add_column("Season")
    table.add_column("Streaks", justify="right")
    for season in context.catalog:
        if season not in context.seasons:
            table.add_row(season, Text("-", style="dim"))
            continue
        table.add_row(season, str(context.season_streak_count(season)))
    console.print(table)


def print_team_list(context: AnalysisContext) -> None:
    table = Table(title="Teams by five-game win streaks")
    table.add_column("Team")
    table.add_column("Streaks", justify="right")
    for team in context.ranked_teams():
        table.add_row(team, str(len(context.streaks_for(team))))
    console.print(table)


def print_season(context: AnalysisContext, season: str) -> None:
    """Prints the league table with every matchweek's score, streaks highlighted."""
    data = context.seasons.get(season)
    if data is None:
        console.print(Panel(f"Could not load data for {season} season.", style="red"))
        return

    count = context.season_streak_count(season)
    max_matchweeks = max((len(r) for r in data.results.values()), default=0)

    table = Table(
        title=f"{season} Season - {pluralize(count, 'five-game win streak')}"
    )
    table.add_column("#", justify="right")
    table.add_column("Team")
    table.add_column("Pts", justify="right")
    for week in range(1, max_matchweeks + 1):
        table.add_column(str(week), justify="center")

    for position, standing in enumerate(context.standings_for(season), start=1):
        results = data.results_for(standing.team)
        cells = context.streak_cells(season, standing.team)
        row: List[Text] = []
        for i in range(max_matchweeks):
            if i >= len(results):
                row.append(Text("-", style="dim"))
                continue
            result = results[i]
            match = data.match_at(standing.team, i)
            label = (
                format_display_score(match.score, match.venue)
                if match and match.score
                else result.value
            )
            style = RESULT_STYLES[result]
            if i in cells:
                style = f"bold {style} reverse"
            row.append(Text(label, style=style))
        table.add_row(
            str(position),
            short_team_name(standing.team),
            str(standing.points),
            *row,
        )
    console.print(table)


def print_team(context: AnalysisContext, team: str) -> None:
    """Prints a team's streak history with a per-season frequency row."""
    streaks = context.streaks_for(team)
    console.print(
        Panel(
            f"{team} - {pluralize(len(streaks), 'streak')} "
            f"({total_streak_wins(streaks)} wins in streaks)",
            style="bold",
        )
    )
    if not streaks:
        console.print(f"No 5+ game win streaks found for {team}")
        return

    freq = context.frequency_for(team)
    chart = Table(show_header=True, box=None)
    # Chronological, oldest first
    seasons_chronological = list(reversed(context.catalog))
    for season in seasons_chronological:
        chart.add_column(season.split("-")[0][-2:], justify="center")
    chart.add_row(
        *(
            Text(str(freq[s]), style="bold green") if freq[s] else Text(".", style="dim")
            for s in seasons_chronological
        )
    )
    console.print(chart)

    for streak in streaks:
        console.print(
            Text(
                f"{streak.season} (MW {streak.start_week}-{streak.end_week}) - {streak.length} wins",
                style="bold",
            )
        )
        table = Table(show_header=False)
        table.add_column("Opponent")
        table.add_column("Score", justify="center")
        for match in streak.matches:
            prefix = "vs" if match.venue == Venue.HOME else "@"
            table.add_row(f"{prefix} {short_team_name(match.opponent)}", match.display_score)
        console.print(table)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Premier League five-in-a-row analyzer")
    parser.add_argument("--season", help="Show the table for a season, e.g. 2024-25")
    parser.add_argument("--team", help="Show a team's streak history")
    parser.add_argument(
        "--teams", action="store_true", help="List teams ranked by streak count"
    )
    return parser.parse_args(argv)


async def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the application."""
    args = parse_args(argv)
    context = await build_context()

    if not context.seasons:
        logger.error("No season data could be loaded. Exiting.")
        return

    if args.team:
        print_team(context, args.team)
    elif args.teams:
        print_team_list(context)
    elif args.season:
        print_season(context, args.season)
    else:
        print_season_list(context)
        print_season(context, context.loaded_seasons[0])


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(0)
    except Exception as e:
        logger.exception(f"Unhandled exception in main execution: {e}")
        sys.exit(1)
