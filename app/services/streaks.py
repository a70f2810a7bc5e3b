"""Current/longest consecutive-day streaks from per-day rollup rows."""
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, timedelta


@dataclass(frozen=True)
class StreakSummary:
    current_streak: int
    longest_streak: int


def compute_streaks(dates: Sequence[date], today: date) -> StreakSummary:
    """Compute streaks over `dates`, most recent first, one entry per day.

    The current streak counts entries matching today, today-1, ... and stops at
    the first gap, so it is 0 when there is no entry for today. The longest
    streak is the longest run of adjacent entries one calendar day apart,
    never less than the current streak.
    """
    if not dates:
        return StreakSummary(current_streak=0, longest_streak=0)

    current = 0
    for i, d in enumerate(dates):
        if d != today - timedelta(days=i):
            break
        current += 1

    longest = 1
    run = 1
    for prev, d in zip(dates, dates[1:]):
        if (prev - d).days == 1:
            run += 1
            longest = max(longest, run)
        else:
            run = 1

    return StreakSummary(current_streak=current, longest_streak=max(longest, current))
