"""API routes for streaks, dashboard and activity logging."""

from datetime import date, datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from fitstreak.config import get_settings
from fitstreak.db.repository import TrackerRepository
from fitstreak.db.store import get_store
from fitstreak.models.nutrition import (
    DailyLog,
    FoodItemCreate,
    MealType,
    NutritionGoals,
    NutritionGoalsUpdate,
    WaterLogCreate,
)
from fitstreak.models.streaks import DashboardSummary, StreakDetail, StreakKind, StreaksOverview
from fitstreak.models.workout import Workout, WorkoutCreate
from fitstreak.services.dashboard import DashboardService
from fitstreak.services.streak_tracker import StreakTracker


router = APIRouter(prefix="/api/v1", tags=["Streaks"])


def get_repository(user_id: str) -> TrackerRepository:
    """Repository backed by the user's storage."""
    return TrackerRepository(get_store(user_id))


def get_tracker(repository: TrackerRepository = Depends(get_repository)) -> StreakTracker:
    """Streak tracker using the configured calendar."""
    settings = get_settings()
    return StreakTracker(
        repository,
        tz=settings.timezone,
        consistency_window_days=settings.consistency_window_days,
    )


@router.get("/users/{user_id}/streaks", response_model=StreaksOverview)
async def get_streaks(
    user_id: str,
    as_of: Optional[datetime] = None,
    tracker: StreakTracker = Depends(get_tracker),
):
    """Current and longest streaks with next milestones for every kind."""
    return tracker.get_overview(user_id, as_of)


@router.get("/users/{user_id}/streaks/{kind}", response_model=StreakDetail)
async def get_streak_detail(
    user_id: str,
    kind: StreakKind,
    as_of: Optional[datetime] = None,
    tracker: StreakTracker = Depends(get_tracker),
):
    """Streak statistics, consistency and marked days for one kind."""
    return tracker.get_detail(user_id, kind, as_of)


@router.get("/users/{user_id}/dashboard", response_model=DashboardSummary)
async def get_dashboard(
    user_id: str,
    as_of: Optional[datetime] = None,
    tracker: StreakTracker = Depends(get_tracker),
):
    """Today's intake against goals, latest workout and streaks."""
    return DashboardService(tracker).get_summary(user_id, as_of)


@router.post("/users/{user_id}/workouts", response_model=Workout, status_code=201)
async def create_workout(
    user_id: str,
    request: WorkoutCreate,
    repository: TrackerRepository = Depends(get_repository),
):
    """Log a workout session."""
    return repository.add_workout(user_id, request)


@router.delete("/users/{user_id}/workouts/{workout_id}", status_code=204)
async def delete_workout(
    user_id: str,
    workout_id: str,
    repository: TrackerRepository = Depends(get_repository),
):
    """Delete a workout session."""
    if not repository.delete_workout(user_id, workout_id):
        raise HTTPException(status_code=404, detail="Workout not found")


@router.post("/users/{user_id}/logs/{day}/meals/{meal}/items", response_model=DailyLog, status_code=201)
async def add_food_item(
    user_id: str,
    meal: MealType,
    request: FoodItemCreate,
    day: date,
    repository: TrackerRepository = Depends(get_repository),
):
    """Add a food item to a meal of a day."""
    return repository.add_food_item(user_id, day.isoformat(), meal, request)


@router.delete("/users/{user_id}/logs/{day}/items/{item_id}", response_model=DailyLog)
async def remove_food_item(
    user_id: str,
    item_id: str,
    day: date,
    repository: TrackerRepository = Depends(get_repository),
):
    """Remove a food item from a day's log."""
    log = repository.remove_food_item(user_id, day.isoformat(), item_id)
    if log is None:
        raise HTTPException(status_code=404, detail="Food item not found")
    return log


@router.post("/users/{user_id}/logs/{day}/water", response_model=DailyLog)
async def add_water(
    user_id: str,
    request: WaterLogCreate,
    day: date,
    repository: TrackerRepository = Depends(get_repository),
):
    """Add water intake to a day's log."""
    return repository.add_water(user_id, day.isoformat(), request.amount_ml)


@router.get("/users/{user_id}/goals", response_model=NutritionGoals)
async def get_goals(user_id: str, repository: TrackerRepository = Depends(get_repository)):
    """Get nutrition goals."""
    return repository.get_goals(user_id)


@router.put("/users/{user_id}/goals", response_model=NutritionGoals)
async def update_goals(
    user_id: str,
    request: NutritionGoalsUpdate,
    repository: TrackerRepository = Depends(get_repository),
):
    """Update nutrition goals."""
    return repository.update_goals(user_id, request)
