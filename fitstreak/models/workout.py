"""Workout models."""

from pydantic import BaseModel, Field
from typing import List
from uuid import uuid4


def _new_id() -> str:
    return uuid4().hex


class ExerciseSet(BaseModel):
    """A single set of an exercise."""

    reps: int = Field(0, ge=0)
    weight: float = Field(0, ge=0)


class Exercise(BaseModel):
    """An exercise performed during a workout."""

    id: str = Field(default_factory=_new_id)
    name: str
    sets: List[ExerciseSet] = []


class Workout(BaseModel):
    """Workout session. `date` is an ISO timestamp string as persisted."""

    id: str = Field(default_factory=_new_id)
    date: str
    exercises: List[Exercise] = []


class WorkoutCreate(BaseModel):
    """Data for logging a workout."""

    date: str
    exercises: List[Exercise] = []
