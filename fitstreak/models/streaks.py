"""Streak, consistency and dashboard result models."""

from enum import Enum
from pydantic import BaseModel
from typing import List, Optional
from datetime import date


class StreakKind(str, Enum):
    """Activity domains a streak is tracked for."""

    workout = "workout"
    nutrition = "nutrition"
    water = "water"


class StreakResult(BaseModel):
    """Current and longest run of consecutive qualifying days."""

    current: int = 0
    longest: int = 0


class MilestoneProgress(BaseModel):
    """Progress of the current streak towards the next milestone."""

    current: int
    next_milestone: int
    days_remaining: int
    progress_pct: float


class StreakSummary(BaseModel):
    """Streak card for one activity domain."""

    kind: StreakKind
    current: int
    longest: int
    milestone: MilestoneProgress


class StreaksOverview(BaseModel):
    """Streak cards for all activity domains."""

    as_of: date
    workout: StreakSummary
    nutrition: StreakSummary
    water: StreakSummary


class StreakDetail(BaseModel):
    """Detailed streak statistics for one activity domain."""

    kind: StreakKind
    as_of: date
    current: int
    longest: int
    consistency_pct: int
    consistency_window_days: int
    milestone: MilestoneProgress
    qualifying_days: List[date] = []


class WorkoutSummary(BaseModel):
    """Short description of a workout session."""

    id: str
    date: str
    exercise_count: int
    exercise_names: List[str] = []


class DashboardSummary(BaseModel):
    """Today's progress summary."""

    as_of: date
    calories_consumed: float
    calories_target: int
    protein_consumed: float
    protein_target: int
    carbs_consumed: float
    carbs_target: int
    fat_consumed: float
    fat_target: int
    water_ml: int
    water_target: int
    latest_workout: Optional[WorkoutSummary] = None
    streaks: StreaksOverview
