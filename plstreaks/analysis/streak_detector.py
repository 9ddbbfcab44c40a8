from typing import Dict, List, Optional, Sequence

from plstreaks.models.enums import ResultSymbol
from plstreaks.models.streak import StreakCell, StreakRange

MIN_STREAK_LENGTH = 5


def detect_streaks(results: Sequence[ResultSymbol]) -> List[StreakRange]:
    """Finds every maximal run of at least five consecutive wins.

    The scan runs one step past the end of the sequence so a run that finishes
    on the final matchweek is still flushed.

    Args:
        results: One team's results for one season, in matchweek order.

    Returns:
        StreakRange objects (0-based, inclusive) in the order they occur.
    """
    streaks: List[StreakRange] = []
    streak_start: Optional[int] = None
    streak_length = 0

    for i in range(len(results) + 1):
        if i < len(results) and results[i] == ResultSymbol.WIN:
            if streak_start is None:
                streak_start = i
            streak_length += 1
            continue

        if streak_start is not None and streak_length >= MIN_STREAK_LENGTH:
            streaks.append(
                StreakRange(
                    start=streak_start,
                    end=streak_start + streak_length - 1,
                    length=streak_length,
                )
            )
        streak_start = None
        streak_length = 0

    return streaks


def streak_cells(results: Sequence[ResultSymbol]) -> Dict[int, StreakCell]:
    """Maps every matchweek index inside a streak to its start/end markers."""
    cells: Dict[int, StreakCell] = {}
    for streak in detect_streaks(results):
        for i in range(streak.start, streak.end + 1):
            cells[i] = StreakCell(
                is_streak_start=i == streak.start,
                is_streak_end=i == streak.end,
            )
    return cells
