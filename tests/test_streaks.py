from datetime import date, timedelta

from app.services.streaks import StreakSummary, compute_streaks

TODAY = date(2025, 3, 15)


def days_ago(*offsets: int) -> list[date]:
    return [TODAY - timedelta(days=n) for n in offsets]


def test_empty_history_has_no_streaks():
    assert compute_streaks([], TODAY) == StreakSummary(current_streak=0, longest_streak=0)


def test_three_consecutive_days_ending_today():
    summary = compute_streaks(days_ago(0, 1, 2, 4, 5), TODAY)
    assert summary.current_streak == 3
    assert summary.longest_streak == 3


def test_gap_yesterday_breaks_current_streak():
    summary = compute_streaks(days_ago(0, 2, 3), TODAY)
    assert summary.current_streak == 1
    assert summary.longest_streak == 2


def test_no_entry_today_means_no_current_streak():
    summary = compute_streaks(days_ago(1, 2, 3), TODAY)
    assert summary.current_streak == 0
    assert summary.longest_streak == 3


def test_single_record_today():
    assert compute_streaks(days_ago(0), TODAY) == StreakSummary(1, 1)


def test_single_old_record_still_counts_as_run_of_one():
    assert compute_streaks(days_ago(10), TODAY) == StreakSummary(0, 1)


def test_longest_run_found_in_older_history():
    summary = compute_streaks(days_ago(0, 1, 5, 6, 7, 8, 20), TODAY)
    assert summary.current_streak == 2
    assert summary.longest_streak == 4
