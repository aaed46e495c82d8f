"""Typed access to a user's workouts, daily logs and goals."""

import logging
from typing import Any, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from fitstreak.db.store import (
    DAILY_LOGS_KEY,
    NUTRITION_GOALS_KEY,
    WORKOUTS_KEY,
    DataStore,
)
from fitstreak.models.nutrition import (
    DailyLog,
    FoodItem,
    FoodItemCreate,
    Meal,
    NutritionGoals,
    NutritionGoalsUpdate,
)
from fitstreak.models.workout import Workout, WorkoutCreate

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _parse_records(raw: Any, model: Type[ModelT], key: str) -> List[ModelT]:
    """Parse a stored list, skipping records that fail validation."""
    if raw is None:
        return []
    if not isinstance(raw, list):
        logger.warning("Ignoring %s: expected a list, got %s", key, type(raw).__name__)
        return []

    records = []
    for index, entry in enumerate(raw):
        try:
            records.append(model.model_validate(entry))
        except ValidationError as e:
            logger.warning("Skipping invalid %s record %d: %s", key, index, e.errors()[:1])
    return records


def _dump(records: List[BaseModel]) -> List[dict]:
    return [record.model_dump(mode="json", by_alias=True) for record in records]


class TrackerRepository:
    """Workouts, daily logs and nutrition goals of users, on top of a DataStore."""

    def __init__(self, store: DataStore):
        self.store = store

    # Workout operations
    def get_workouts(self, user_id: str) -> List[Workout]:
        """Get all workouts, most recent first as stored."""
        return _parse_records(self.store.get(user_id, WORKOUTS_KEY), Workout, WORKOUTS_KEY)

    def save_workouts(self, user_id: str, workouts: List[Workout]) -> None:
        self.store.set(user_id, WORKOUTS_KEY, _dump(workouts))

    def add_workout(self, user_id: str, workout_data: WorkoutCreate) -> Workout:
        """Log a workout. New workouts are kept at the front of the list."""
        workout = Workout(**workout_data.model_dump())
        self.save_workouts(user_id, [workout] + self.get_workouts(user_id))
        return workout

    def delete_workout(self, user_id: str, workout_id: str) -> bool:
        """Delete a workout, returning False if it does not exist."""
        workouts = self.get_workouts(user_id)
        remaining = [w for w in workouts if w.id != workout_id]
        if len(remaining) == len(workouts):
            return False
        self.save_workouts(user_id, remaining)
        return True

    # Daily log operations
    def get_daily_logs(self, user_id: str) -> List[DailyLog]:
        return _parse_records(self.store.get(user_id, DAILY_LOGS_KEY), DailyLog, DAILY_LOGS_KEY)

    def save_daily_logs(self, user_id: str, logs: List[DailyLog]) -> None:
        self.store.set(user_id, DAILY_LOGS_KEY, _dump(logs))

    def get_daily_log(self, user_id: str, day: str) -> Optional[DailyLog]:
        """Get the log of one day (YYYY-MM-DD)."""
        for log in self.get_daily_logs(user_id):
            if log.date == day:
                return log
        return None

    def _update_daily_log(self, user_id: str, day: str, update) -> DailyLog:
        """Apply `update` to a copy of the day's log (created if missing) and save it."""
        logs = self.get_daily_logs(user_id)
        for index, log in enumerate(logs):
            if log.date == day:
                updated = log.model_copy(deep=True)
                update(updated)
                logs[index] = updated
                break
        else:
            updated = DailyLog(date=day, meals=[])
            update(updated)
            logs.append(updated)

        self.save_daily_logs(user_id, logs)
        return updated

    def add_food_item(self, user_id: str, day: str, meal_name: str, item_data: FoodItemCreate) -> DailyLog:
        """Add a food item to a meal of a day."""
        item = FoodItem(**item_data.model_dump())

        def update(log: DailyLog) -> None:
            for meal in log.meals:
                if meal.name == meal_name:
                    meal.items.append(item)
                    return
            log.meals.append(Meal(name=meal_name, items=[item]))

        return self._update_daily_log(user_id, day, update)

    def remove_food_item(self, user_id: str, day: str, item_id: str) -> Optional[DailyLog]:
        """Remove a food item from a day's log. Returns None if the item is unknown."""
        log = self.get_daily_log(user_id, day)
        if log is None or not any(item.id == item_id for meal in log.meals for item in meal.items):
            return None

        def update(log: DailyLog) -> None:
            for meal in log.meals:
                meal.items = [item for item in meal.items if item.id != item_id]

        return self._update_daily_log(user_id, day, update)

    def add_water(self, user_id: str, day: str, amount_ml: int) -> DailyLog:
        """Add water intake to a day's log."""

        def update(log: DailyLog) -> None:
            log.water_intake = (log.water_intake or 0) + amount_ml

        return self._update_daily_log(user_id, day, update)

    # Goal operations
    def get_goals(self, user_id: str) -> NutritionGoals:
        """Get nutrition goals, falling back to defaults."""
        raw = self.store.get(user_id, NUTRITION_GOALS_KEY)
        if raw is None:
            return NutritionGoals()
        try:
            return NutritionGoals.model_validate(raw)
        except ValidationError as e:
            logger.warning("Invalid nutrition goals for %s, using defaults: %s", user_id, e.errors()[:1])
            return NutritionGoals()

    def update_goals(self, user_id: str, goals_data: NutritionGoalsUpdate) -> NutritionGoals:
        """Update nutrition goals with the provided fields."""
        current = self.get_goals(user_id)
        goals = current.model_copy(update=goals_data.model_dump(exclude_none=True))
        self.store.set(user_id, NUTRITION_GOALS_KEY, goals.model_dump(mode="json", by_alias=True))
        return goals
