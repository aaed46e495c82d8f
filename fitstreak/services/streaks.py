"""Streak, consistency and milestone calculations.

All functions are pure: "now" is always passed in as ``as_of``.
"""

import math
from datetime import date, timedelta
from typing import Iterable, List

from fitstreak.models.streaks import MilestoneProgress, StreakResult
from fitstreak.services.dates import DAY, DateLike, TzLike, normalize_days, today

MILESTONES: List[int] = [3, 7, 14, 30, 60, 90, 100, 365]
MILESTONE_STEP = 50  # spacing of milestones past the last table entry


def calculate_streak(days: Iterable[DateLike], as_of: DateLike, tz: TzLike = None) -> StreakResult:
    """
    Calculate current and longest streaks of consecutive days.

    The current streak is live only when the most recent day is today or
    yesterday relative to ``as_of``; otherwise it is 0 even if history exists.
    """
    unique_days = normalize_days(days, tz)
    if not unique_days:
        return StreakResult(current=0, longest=0)

    # Current streak
    current = 0
    anchor = today(as_of, tz)
    most_recent = unique_days[0]
    if most_recent == anchor or most_recent == anchor - DAY:
        current = 1
        for newer, older in zip(unique_days, unique_days[1:]):
            if newer - older != DAY:
                break
            current += 1

    # Longest streak
    longest = 1
    run = 1
    for newer, older in zip(unique_days, unique_days[1:]):
        if newer - older == DAY:
            run += 1
        else:
            longest = max(longest, run)
            run = 1
    longest = max(longest, run)

    return StreakResult(current=current, longest=longest)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_consistency(
    days: Iterable[DateLike],
    window_days: int,
    as_of: DateLike,
    tz: TzLike = None,
) -> int:
    """
    Percentage of the ``window_days`` days ending at ``as_of`` (inclusive)
    that are qualifying days.
    """
    if window_days <= 0:
        return 0

    qualifying = set(normalize_days(days, tz))
    if not qualifying:
        return 0

    end = today(as_of, tz)
    # Windows reaching past date.min start at date.min
    if window_days - 1 > (end - date.min).days:
        start = date.min
    else:
        start = end - timedelta(days=window_days - 1)
    count = sum(1 for day in qualifying if start <= day <= end)

    return round_half_up(100 * count / window_days)


def next_milestone(current: int) -> int:
    """
    Next streak milestone strictly above ``current``.

    Past the last table entry milestones continue every 50 days
    (365, 415, 465, ...).
    """
    for milestone in MILESTONES:
        if milestone > current:
            return milestone

    last = MILESTONES[-1]
    steps = (current - last) // MILESTONE_STEP + 1
    return last + steps * MILESTONE_STEP


def milestone_progress(current: int) -> MilestoneProgress:
    """Progress of a streak towards its next milestone."""
    target = next_milestone(current)
    progress = min(current / target * 100, 100.0) if current > 0 else 0.0

    return MilestoneProgress(
        current=current,
        next_milestone=target,
        days_remaining=target - current,
        progress_pct=progress,
    )
