"""Rules that turn logged records into qualifying days per streak kind."""

from datetime import date
from typing import Iterable, List

from fitstreak.models.nutrition import DailyLog, NutritionGoals
from fitstreak.models.workout import Workout
from fitstreak.services.dates import TzLike, normalize_days
from fitstreak.services.nutrition import daily_calories

# Calories within +/-10% of the goal count as hitting it
CALORIE_TOLERANCE = 0.10


def workout_days(workouts: Iterable[Workout], tz: TzLike = None) -> List[date]:
    """Every day with at least one workout."""
    return normalize_days((workout.date for workout in workouts), tz)


def meets_calorie_goal(calories: float, calorie_goal: float) -> bool:
    """True if calories lie within the goal band, bounds inclusive.

    A non-positive goal never qualifies.
    """
    if calorie_goal <= 0:
        return False
    low = calorie_goal * (1 - CALORIE_TOLERANCE)
    high = calorie_goal * (1 + CALORIE_TOLERANCE)
    return low <= calories <= high


def nutrition_days(daily_logs: Iterable[DailyLog], goals: NutritionGoals, tz: TzLike = None) -> List[date]:
    """Days whose logged calories are within the calorie goal band."""
    return normalize_days(
        (log.date for log in daily_logs if meets_calorie_goal(daily_calories(log), goals.calories)),
        tz,
    )


def water_days(daily_logs: Iterable[DailyLog], goals: NutritionGoals, tz: TzLike = None) -> List[date]:
    """Days whose water intake reached the water goal."""
    return normalize_days(
        (log.date for log in daily_logs if (log.water_intake or 0) >= goals.water_goal),
        tz,
    )
