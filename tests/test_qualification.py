from datetime import date

import pytest

from fitstreak.models.nutrition import DailyLog, NutritionGoals
from fitstreak.models.workout import Workout
from fitstreak.services.nutrition import daily_calories, daily_totals
from fitstreak.services.qualification import (
    meets_calorie_goal,
    nutrition_days,
    water_days,
    workout_days,
)


def make_log(day: str, *calories, water=None) -> DailyLog:
    items = [{"name": f"food {i}", "calories": c, "protein": 10, "carbs": 20, "fat": 5} for i, c in enumerate(calories)]
    data = {"date": day, "meals": [{"name": "Lunch", "items": items}]}
    if water is not None:
        data["waterIntake"] = water
    return DailyLog.model_validate(data)


def test_any_workout_qualifies_its_day():
    workouts = [
        Workout(date="2024-01-03T18:00:00.000Z"),
        Workout(date="2024-01-03T07:00:00.000Z"),
        Workout(date="2024-01-01T10:00:00.000Z", exercises=[{"name": "Squat", "sets": [{"reps": 5, "weight": 100}]}]),
    ]

    assert workout_days(workouts) == [date(2024, 1, 3), date(2024, 1, 1)]


def test_workouts_with_malformed_dates_are_skipped():
    workouts = [Workout(date="2024-01-03T18:00:00Z"), Workout(date="last tuesday")]

    assert workout_days(workouts) == [date(2024, 1, 3)]


def test_daily_calories_sums_all_meals():
    log = DailyLog.model_validate(
        {
            "date": "2024-01-03",
            "meals": [
                {"name": "Breakfast", "items": [{"name": "Oats", "calories": 300}, {"name": "Milk", "calories": 150}]},
                {"name": "Dinner", "items": [{"name": "Pasta", "calories": 700}]},
                {"name": "Snacks", "items": []},
            ],
        }
    )

    assert daily_calories(log) == 1150


def test_daily_totals():
    totals = daily_totals(make_log("2024-01-03", 400, 600))

    assert totals.calories == 1000
    assert totals.protein == 20
    assert totals.carbs == 40
    assert totals.fat == 10
    assert totals.items_logged == 2


@pytest.mark.parametrize(
    "calories,expected",
    [
        (2000, True),
        (2000 * 0.9, True),
        (2000 * 1.1, True),
        (2000 * 0.89, False),
        (2000 * 1.11, False),
        (0, False),
    ],
)
def test_calorie_band_is_inclusive(calories, expected):
    assert meets_calorie_goal(calories, 2000) is expected


@pytest.mark.parametrize("goal", [0, -100])
def test_non_positive_calorie_goal_never_qualifies(goal):
    assert meets_calorie_goal(0, goal) is False
    assert meets_calorie_goal(-100, goal) is False


def test_nutrition_days():
    goals = NutritionGoals(calories=2000)
    logs = [
        make_log("2024-01-01", 1000, 1000),
        make_log("2024-01-02", 1780),
        make_log("2024-01-03", 2200),
        make_log("2024-01-04"),
    ]

    assert nutrition_days(logs, goals) == [date(2024, 1, 3), date(2024, 1, 1)]


def test_nutrition_days_with_degenerate_goal():
    logs = [make_log("2024-01-01"), make_log("2024-01-02", 10)]

    assert nutrition_days(logs, NutritionGoals(calories=0)) == []


def test_water_days():
    goals = NutritionGoals.model_validate({"waterGoal": 2500})
    logs = [
        make_log("2024-01-01", water=2500),
        make_log("2024-01-02", water=2499),
        make_log("2024-01-03"),
        make_log("2024-01-04", water=4000),
    ]

    assert water_days(logs, goals) == [date(2024, 1, 4), date(2024, 1, 1)]


def test_missing_water_intake_counts_as_zero():
    logs = [make_log("2024-01-01")]

    assert water_days(logs, NutritionGoals(water_goal=1)) == []
    assert water_days(logs, NutritionGoals(water_goal=0)) == [date(2024, 1, 1)]
