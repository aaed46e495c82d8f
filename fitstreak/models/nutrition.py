"""Meal, daily log and nutrition goal models."""

from pydantic import BaseModel, Field
from typing import List, Literal, Optional
from uuid import uuid4


MealType = Literal["Breakfast", "Lunch", "Dinner", "Snacks"]
MEAL_TYPES: List[str] = ["Breakfast", "Lunch", "Dinner", "Snacks"]


class FoodItem(BaseModel):
    """Individual food item with nutritional info."""

    id: str = Field(default_factory=lambda: uuid4().hex)
    name: str
    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0


class FoodItemCreate(BaseModel):
    """Data for logging a food item."""

    name: str
    calories: float = Field(0, ge=0)
    protein: float = Field(0, ge=0)
    carbs: float = Field(0, ge=0)
    fat: float = Field(0, ge=0)


class Meal(BaseModel):
    """A meal slot of a day and the items logged in it."""

    id: str = Field(default_factory=lambda: uuid4().hex)
    name: MealType
    items: List[FoodItem] = []


class DailyLog(BaseModel):
    """Everything logged for one calendar day (`date` is YYYY-MM-DD)."""

    date: str
    meals: List[Meal] = []
    water_intake: Optional[int] = Field(None, alias="waterIntake")  # ml

    class Config:
        populate_by_name = True


class WaterLogCreate(BaseModel):
    """Data for logging water intake."""

    amount_ml: int = Field(250, gt=0)  # Default glass of water


class NutritionGoals(BaseModel):
    """Daily nutrition targets."""

    calories: int = 2000
    protein: int = 150
    carbs: int = 250
    fat: int = 60
    water_goal: int = Field(3000, alias="waterGoal")  # ml

    class Config:
        populate_by_name = True


class NutritionGoalsUpdate(BaseModel):
    """Partial update of nutrition goals."""

    calories: Optional[int] = Field(None, ge=0, le=10000)
    protein: Optional[int] = Field(None, ge=0, le=500)
    carbs: Optional[int] = Field(None, ge=0, le=1000)
    fat: Optional[int] = Field(None, ge=0, le=500)
    water_goal: Optional[int] = Field(None, ge=0, le=20000, alias="waterGoal")

    class Config:
        populate_by_name = True
