import asyncio
import json

import pytest
from rich.console import Console

import main
from plstreaks.analysis.context import AnalysisContext
from plstreaks.loaders.file_loader import FileSeasonLoader


@pytest.fixture()
def console(monkeypatch):
    recording = Console(record=True, width=400)
    monkeypatch.setattr(main, "console", recording)
    return recording


@pytest.fixture()
def context(arsenal_season):
    return AnalysisContext.build({"2024-25": arsenal_season})


def test_print_season(console, context):
    main.print_season(context, "2024-25")
    output = console.export_text()
    assert "2024-25 Season - 2 five-game win streaks" in output
    assert "Arsenal" in output
    # Away win at Fulham shown home side first
    assert "1-3" in output


def test_print_missing_season(console, context):
    main.print_season(context, "2010-11")
    assert "Could not load data for 2010-11 season." in console.export_text()


def test_print_team(console, context):
    main.print_team(context, "Arsenal")
    output = console.export_text()
    assert "Arsenal - 2 streaks (11 wins in streaks)" in output
    assert "2024-25 (MW 2-7) - 6 wins" in output
    assert "@ Man City" in output


def test_print_team_without_streaks(console, context):
    main.print_team(context, "Chelsea")
    assert "No 5+ game win streaks found for Chelsea" in console.export_text()


def test_print_lists(console, context):
    main.print_season_list(context)
    main.print_team_list(context)
    output = console.export_text()
    assert "2024-25" in output
    assert "Chelsea" in output


def test_main_reads_data_dir(tmp_path, monkeypatch, console):
    season = {
        "teams": ["Arsenal"],
        "results": {"Arsenal": ["W"] * 5},
        "matches": {},
    }
    (tmp_path / "2019-20.json").write_text(json.dumps(season), encoding="utf-8")
    monkeypatch.setattr(main, "get_loader", lambda settings: FileSeasonLoader(tmp_path))

    asyncio.run(main.main(["--team", "Arsenal"]))
    assert "Arsenal - 1 streak (5 wins in streaks)" in console.export_text()
