import random
from datetime import date, datetime, timedelta, timezone

import pytest

from fitstreak.services.streaks import (
    calculate_consistency,
    calculate_streak,
    milestone_progress,
    next_milestone,
)

NOW = datetime(2024, 6, 15, 9, 30, tzinfo=timezone.utc)
TODAY = date(2024, 6, 15)


def days_ago(n: int) -> str:
    return (TODAY - timedelta(days=n)).isoformat()


def test_empty_history():
    result = calculate_streak([], NOW)

    assert (result.current, result.longest) == (0, 0)


def test_only_today():
    result = calculate_streak([days_ago(0)], NOW)

    assert (result.current, result.longest) == (1, 1)


def test_three_days_ending_today():
    result = calculate_streak([days_ago(0), days_ago(1), days_ago(2)], NOW)

    assert (result.current, result.longest) == (3, 3)


def test_streak_ending_yesterday_is_still_live():
    result = calculate_streak([days_ago(1)], NOW)

    assert (result.current, result.longest) == (1, 1)


def test_streak_broken_when_last_day_is_older_than_yesterday():
    result = calculate_streak([days_ago(3)], NOW)

    assert (result.current, result.longest) == (0, 1)


def test_broken_streak_keeps_longest_history():
    history = [days_ago(n) for n in range(5, 12)]

    result = calculate_streak(history, NOW)

    assert (result.current, result.longest) == (0, 7)


def test_longest_is_the_longer_of_two_runs():
    # Run of 3 ending today, run of 2 ten days earlier
    history = [days_ago(0), days_ago(1), days_ago(2), days_ago(10), days_ago(11)]

    result = calculate_streak(history, NOW)

    assert (result.current, result.longest) == (3, 3)


def test_current_run_shorter_than_older_run():
    history = [days_ago(1), days_ago(2), days_ago(6), days_ago(7), days_ago(8), days_ago(9)]

    result = calculate_streak(history, NOW)

    assert (result.current, result.longest) == (2, 4)


def test_non_contiguous_history():
    history = [days_ago(0), days_ago(10), days_ago(20)]

    result = calculate_streak(history, NOW)

    assert (result.current, result.longest) == (1, 1)


def test_duplicates_and_timestamps_on_same_day_count_once():
    deduped = [days_ago(0), days_ago(1)]
    noisy = deduped + [f"{days_ago(0)}T07:00:00Z", f"{days_ago(0)}T21:15:00Z", days_ago(1)]

    assert calculate_streak(noisy, NOW) == calculate_streak(deduped, NOW)
    assert calculate_streak(noisy, NOW).current == 2


def test_order_does_not_matter():
    history = [days_ago(n) for n in (0, 1, 2, 4, 5, 9)]
    shuffled = history[:]
    random.Random(7).shuffle(shuffled)

    assert calculate_streak(shuffled, NOW) == calculate_streak(history, NOW)


def test_malformed_dates_are_skipped():
    result = calculate_streak([days_ago(0), "not-a-date", days_ago(1), ""], NOW)

    assert (result.current, result.longest) == (2, 2)


def test_only_malformed_dates_is_empty():
    assert calculate_streak(["nope", "2024-02-30"], NOW).longest == 0


@pytest.mark.parametrize(
    "history",
    [
        [days_ago(n) for n in (0, 3, 4, 5)],
        [days_ago(n) for n in (1, 2, 3)],
        [days_ago(n) for n in (8, 30, 31)],
        [days_ago(0)],
    ],
)
def test_longest_is_never_below_current(history):
    result = calculate_streak(history, NOW)

    assert result.longest >= result.current
    assert result.longest >= 1


def test_new_year_scenario():
    history = ["2024-01-01", "2024-01-02", "2024-01-03"]

    result = calculate_streak(history, datetime(2024, 1, 3, 20, 0, tzinfo=timezone.utc))
    assert (result.current, result.longest) == (3, 3)

    result = calculate_streak(history + ["2024-01-10"], datetime(2024, 1, 10, 8, 0, tzinfo=timezone.utc))
    assert (result.current, result.longest) == (1, 3)


def test_streak_across_month_and_leap_day():
    history = ["2024-02-28", "2024-02-29", "2024-03-01"]

    result = calculate_streak(history, date(2024, 3, 1))

    assert (result.current, result.longest) == (3, 3)


def test_today_follows_calendar_timezone():
    # 02:00 UTC on the 16th is still the 15th in New York
    as_of = datetime(2024, 6, 16, 2, 0, tzinfo=timezone.utc)
    history = [days_ago(2)]

    assert calculate_streak(history, as_of, "America/New_York").current == 0
    assert calculate_streak([days_ago(1)], as_of, "America/New_York").current == 1


def test_consistency_empty():
    assert calculate_consistency([], 30, NOW) == 0


def test_consistency_full_window():
    history = [days_ago(n) for n in range(30)]

    assert calculate_consistency(history, 30, NOW) == 100


def test_consistency_ignores_days_outside_window():
    history = [days_ago(n) for n in range(30, 60)] + [days_ago(-1)]

    assert calculate_consistency(history, 30, NOW) == 0


def test_consistency_partial_window():
    history = [days_ago(n) for n in range(0, 30, 2)]  # 15 of 30 days

    assert calculate_consistency(history, 30, NOW) == 50


def test_consistency_rounds_half_up():
    # 1 / 8 days = 12.5%
    assert calculate_consistency([days_ago(0)], 8, NOW) == 13
    # 1 / 30 days = 3.33%
    assert calculate_consistency([days_ago(29)], 30, NOW) == 3


def test_consistency_non_positive_window():
    assert calculate_consistency([days_ago(0)], 0, NOW) == 0


@pytest.mark.parametrize(
    "current,expected",
    [(0, 3), (2, 3), (3, 7), (6, 7), (7, 14), (29, 30), (99, 100), (100, 365), (364, 365), (365, 415), (400, 415), (415, 465)],
)
def test_next_milestone(current, expected):
    assert next_milestone(current) == expected


def test_milestone_progress():
    progress = milestone_progress(5)

    assert progress.next_milestone == 7
    assert progress.days_remaining == 2
    assert progress.progress_pct == pytest.approx(500 / 7)


def test_milestone_progress_is_below_100_percent():
    for current in (0, 1, 2, 364, 414, 10_014):
        progress = milestone_progress(current)
        assert 0 <= progress.progress_pct < 100
        assert progress.next_milestone > current


def test_out_of_range_timestamps_do_not_break_streaks():
    history = [days_ago(0), "9999-12-31T23:00:00-05:00", "0001-01-01T00:30:00+05:00"]

    result = calculate_streak(history, NOW)

    assert (result.current, result.longest) == (1, 1)


def test_consistency_window_longer_than_calendar():
    history = [days_ago(0), days_ago(1)]

    assert calculate_consistency(history, 10**9, NOW) == 0
    assert calculate_consistency([date.min.isoformat()], 800_000, date(2000, 1, 1)) == 0
