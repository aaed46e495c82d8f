"""Daily dashboard summary."""

from datetime import datetime
from typing import Optional

from fitstreak.models.nutrition import DailyLog
from fitstreak.models.streaks import DashboardSummary, WorkoutSummary
from fitstreak.services.dates import day_key, normalize_day
from fitstreak.services.nutrition import daily_totals
from fitstreak.services.streak_tracker import StreakTracker


class DashboardService:
    """Build today's progress summary for a user."""

    def __init__(self, tracker: StreakTracker):
        self.tracker = tracker
        self.repository = tracker.repository

    def _latest_workout(self, user_id: str) -> Optional[WorkoutSummary]:
        workouts = self.repository.get_workouts(user_id)
        dated = [(normalize_day(w.date, self.tracker.tz), w) for w in workouts]
        dated = [(day, w) for day, w in dated if day is not None]
        if not dated:
            return None

        # Most recent day wins; stored order breaks ties (new workouts are stored first)
        latest = max(dated, key=lambda pair: pair[0])[1]
        return WorkoutSummary(
            id=latest.id,
            date=latest.date,
            exercise_count=len(latest.exercises),
            exercise_names=[exercise.name for exercise in latest.exercises],
        )

    def get_summary(self, user_id: str, as_of: Optional[datetime] = None) -> DashboardSummary:
        """Today's intake against goals, the latest workout and streaks."""
        streaks = self.tracker.get_overview(user_id, as_of)
        goals = self.repository.get_goals(user_id)
        log = self.repository.get_daily_log(user_id, day_key(streaks.as_of)) or DailyLog(
            date=day_key(streaks.as_of)
        )
        totals = daily_totals(log)

        return DashboardSummary(
            as_of=streaks.as_of,
            calories_consumed=totals.calories,
            calories_target=goals.calories,
            protein_consumed=totals.protein,
            protein_target=goals.protein,
            carbs_consumed=totals.carbs,
            carbs_target=goals.carbs,
            fat_consumed=totals.fat,
            fat_target=goals.fat,
            water_ml=log.water_intake or 0,
            water_target=goals.water_goal,
            latest_workout=self._latest_workout(user_id),
            streaks=streaks,
        )
