"""Data models for FitStreak."""

from .workout import Workout, WorkoutCreate, Exercise, ExerciseSet
from .nutrition import (
    FoodItem,
    FoodItemCreate,
    Meal,
    DailyLog,
    WaterLogCreate,
    NutritionGoals,
    NutritionGoalsUpdate,
)
from .streaks import (
    StreakKind,
    StreakResult,
    MilestoneProgress,
    StreakSummary,
    StreaksOverview,
    StreakDetail,
    WorkoutSummary,
    DashboardSummary,
)

__all__ = [
    "Workout",
    "WorkoutCreate",
    "Exercise",
    "ExerciseSet",
    "FoodItem",
    "FoodItemCreate",
    "Meal",
    "DailyLog",
    "WaterLogCreate",
    "NutritionGoals",
    "NutritionGoalsUpdate",
    "StreakKind",
    "StreakResult",
    "MilestoneProgress",
    "StreakSummary",
    "StreaksOverview",
    "StreakDetail",
    "WorkoutSummary",
    "DashboardSummary",
]
