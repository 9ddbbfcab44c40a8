import pytest

from plstreaks.analysis.streak_detector import (
    MIN_STREAK_LENGTH,
    detect_streaks,
    streak_cells,
)
from plstreaks.models.enums import ResultSymbol
from plstreaks.models.streak import StreakRange


def seq(text):
    return [ResultSymbol(c) for c in text]


def ranges(text):
    return [(s.start, s.end, s.length) for s in detect_streaks(seq(text))]


def test_empty_sequence():
    assert detect_streaks([]) == []


def test_four_wins_is_not_a_streak():
    assert detect_streaks(seq("WWWW")) == []


def test_streak_followed_by_loss():
    assert detect_streaks(seq("WWWWWL")) == [StreakRange(start=0, end=4, length=5)]


def test_streak_ending_on_final_matchweek():
    assert detect_streaks(seq("WLWWWWW")) == [StreakRange(start=2, end=6, length=5)]


def test_all_wins_is_one_streak():
    assert ranges("W" * 38) == [(0, 37, 38)]


def test_multiple_streaks_in_order():
    assert ranges("WWWWWDWWWWWWLWWWW") == [(0, 4, 5), (6, 11, 6)]


def test_draw_breaks_a_run():
    assert ranges("WWWDWWW") == []


@pytest.mark.parametrize(
    "text",
    ["", "W", "WWWWW", "LWWWWWWL", "WWWWWDWWWWW", "DLWWWWWWWWWLLWWWWWWD", "WDWDWDW"],
)
def test_streaks_are_maximal_win_runs(text):
    results = seq(text)
    for streak in detect_streaks(results):
        assert streak.length >= MIN_STREAK_LENGTH
        assert streak.end - streak.start + 1 == streak.length
        assert all(r == ResultSymbol.WIN for r in results[streak.start : streak.end + 1])
        if streak.start > 0:
            assert results[streak.start - 1] != ResultSymbol.WIN
        if streak.end + 1 < len(results):
            assert results[streak.end + 1] != ResultSymbol.WIN


def test_detection_is_deterministic():
    results = seq("WWWWWLWWWWWWW")
    assert detect_streaks(results) == detect_streaks(results)


def test_streak_cells_mark_start_and_end():
    cells = streak_cells(seq("LWWWWWD"))
    assert sorted(cells) == [1, 2, 3, 4, 5]
    assert cells[1].is_streak_start and not cells[1].is_streak_end
    assert cells[5].is_streak_end and not cells[5].is_streak_start
    assert not cells[3].is_streak_start and not cells[3].is_streak_end


def test_streak_cells_empty_without_streak():
    assert streak_cells(seq("WWWWLWWWW")) == {}

