"""Nutrition totals for daily logs."""

from dataclasses import dataclass

from fitstreak.models.nutrition import DailyLog


@dataclass
class NutritionTotals:
    """Summed nutrition of a day."""

    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0
    items_logged: int = 0


def daily_calories(log: DailyLog) -> float:
    """Total calories across all items of all meals of a day."""
    return sum(item.calories for meal in log.meals for item in meal.items)


def daily_totals(log: DailyLog) -> NutritionTotals:
    """Calories and macros logged for a day."""
    totals = NutritionTotals()
    for meal in log.meals:
        for item in meal.items:
            totals.calories += item.calories
            totals.protein += item.protein
            totals.carbs += item.carbs
            totals.fat += item.fat
            totals.items_logged += 1
    return totals
