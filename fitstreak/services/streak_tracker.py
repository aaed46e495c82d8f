"""Streak tracking across workouts, nutrition and hydration."""

from datetime import date, datetime
from typing import Callable, Dict, List, Optional

from fitstreak.db.repository import TrackerRepository
from fitstreak.models.streaks import StreakDetail, StreakKind, StreaksOverview, StreakSummary
from fitstreak.services.dates import TzLike, resolve_timezone, today
from fitstreak.services.qualification import nutrition_days, water_days, workout_days
from fitstreak.services.streaks import calculate_consistency, calculate_streak, milestone_progress

Clock = Callable[[], datetime]

STREAK_TITLES = {
    StreakKind.workout: "Workout",
    StreakKind.nutrition: "Nutrition Goal",
    StreakKind.water: "Hydration",
}


class StreakTracker:
    """Compute streaks for a user from their stored records."""

    def __init__(
        self,
        repository: TrackerRepository,
        clock: Optional[Clock] = None,
        tz: TzLike = None,
        consistency_window_days: int = 30,
    ):
        self.repository = repository
        self.tz = resolve_timezone(tz)
        self.clock = clock or (lambda: datetime.now(self.tz))
        self.consistency_window_days = consistency_window_days

    def _as_of(self, as_of: Optional[datetime]) -> date:
        return today(as_of or self.clock(), self.tz)

    def qualifying_days(self, user_id: str) -> Dict[StreakKind, List[date]]:
        """Qualifying days per streak kind, most recent first."""
        workouts = self.repository.get_workouts(user_id)
        daily_logs = self.repository.get_daily_logs(user_id)
        goals = self.repository.get_goals(user_id)

        return {
            StreakKind.workout: workout_days(workouts, self.tz),
            StreakKind.nutrition: nutrition_days(daily_logs, goals, self.tz),
            StreakKind.water: water_days(daily_logs, goals, self.tz),
        }

    def _summary(self, kind: StreakKind, days: List[date], as_of: date) -> StreakSummary:
        streak = calculate_streak(days, as_of)
        return StreakSummary(
            kind=kind,
            current=streak.current,
            longest=streak.longest,
            milestone=milestone_progress(streak.current),
        )

    def get_overview(self, user_id: str, as_of: Optional[datetime] = None) -> StreaksOverview:
        """Current and longest streaks for every kind."""
        day = self._as_of(as_of)
        days = self.qualifying_days(user_id)

        return StreaksOverview(
            as_of=day,
            workout=self._summary(StreakKind.workout, days[StreakKind.workout], day),
            nutrition=self._summary(StreakKind.nutrition, days[StreakKind.nutrition], day),
            water=self._summary(StreakKind.water, days[StreakKind.water], day),
        )

    def get_detail(self, user_id: str, kind: StreakKind, as_of: Optional[datetime] = None) -> StreakDetail:
        """Streaks, consistency and milestone progress for one kind."""
        day = self._as_of(as_of)
        days = self.qualifying_days(user_id)[kind]
        streak = calculate_streak(days, day)

        return StreakDetail(
            kind=kind,
            as_of=day,
            current=streak.current,
            longest=streak.longest,
            consistency_pct=calculate_consistency(days, self.consistency_window_days, day),
            consistency_window_days=self.consistency_window_days,
            milestone=milestone_progress(streak.current),
            qualifying_days=sorted(days),
        )

    def format_overview(self, overview: StreaksOverview) -> str:
        """Format streaks as a readable message."""
        lines = [f"Your Streaks - {overview.as_of.strftime('%B %d')}", ""]
        for summary in (overview.workout, overview.nutrition, overview.water):
            milestone = summary.milestone
            lines.append(
                f"{STREAK_TITLES[summary.kind]}: {summary.current} day streak "
                f"(longest {summary.longest}, {milestone.days_remaining} days to {milestone.next_milestone})"
            )
        return "\n".join(lines)
