"""Request payload schemas.

Payloads use snake_case keys; camelCase aliases are accepted as well.
Unknown keys are rejected.
"""

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from .models import Category, Difficulty, EquipmentCategory, EquipmentStatus


class Payload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class PaginationPayload(Payload):
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, gt=0)


class IdPayload(Payload):
    id: int


class IdsPayload(Payload):
    ids: list[int]


class RatePayload(Payload):
    # Range checks happen in the rule engine so they surface as rating errors
    target_id: int
    score: float = Field(allow_inf_nan=False)
    total_ratings: int


class AddRatingPayload(Payload):
    target_id: int
    rating: float = Field(allow_inf_nan=False)


class UpdatePayload(Payload):
    id: int
    patch: dict[str, Any]


# Muscle groups

class MuscleGroupCreate(Payload):
    name: str = Field(min_length=1)
    description: str | None = None
    media_url: str | None = None


class MuscleGroupUpdate(Payload):
    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    media_url: str | None = None


# Equipment

class EquipmentCreate(Payload):
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    media_url: str | None = None
    category: EquipmentCategory
    status: EquipmentStatus = EquipmentStatus.AVAILABLE


class EquipmentUpdate(Payload):
    name: str | None = Field(default=None, min_length=1)
    description: str | None = Field(default=None, min_length=1)
    media_url: str | None = None
    category: EquipmentCategory | None = None
    status: EquipmentStatus | None = None


# Exercises

class ExerciseCreate(Payload):
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    media_url: str | None = None
    level: Difficulty
    category: Category
    recommendation: str | None = None
    muscle_group_ids: list[int] = Field(min_length=1)
    equipment_ids: list[int] = Field(min_length=1)


class ExerciseUpdate(Payload):
    name: str | None = Field(default=None, min_length=1)
    description: str | None = Field(default=None, min_length=1)
    media_url: str | None = None
    level: Difficulty | None = None
    category: Category | None = None
    recommendation: str | None = None
    muscle_group_ids: list[int] | None = Field(default=None, min_length=1)
    equipment_ids: list[int] | None = Field(default=None, min_length=1)


# Workouts

class ExerciseInWorkoutPayload(Payload):
    exercise_id: int
    sets: int = Field(gt=0)
    reps: int = Field(gt=0)
    weight: float | None = Field(default=None, ge=0)
    rest_time: int = Field(ge=0)
    order: int = Field(ge=0)


class WorkoutCreate(Payload):
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    frequency: int = Field(gt=0)
    duration: int = Field(gt=0)
    level: Difficulty
    category: Category
    training_type: str = Field(min_length=1)
    exercises: list[ExerciseInWorkoutPayload] = Field(min_length=1)


class WorkoutUpdate(Payload):
    name: str | None = Field(default=None, min_length=1)
    description: str | None = Field(default=None, min_length=1)
    frequency: int | None = Field(default=None, gt=0)
    duration: int | None = Field(default=None, gt=0)
    level: Difficulty | None = None
    category: Category | None = None
    training_type: str | None = Field(default=None, min_length=1)
    exercises: list[ExerciseInWorkoutPayload] | None = Field(default=None, min_length=1)


# Training plans

class TrainingPlanCreate(Payload):
    name: str = Field(min_length=1)
    level: Difficulty
    description: str | None = None
    start_date: date
    end_date: date | None = None
    workout_ids: list[int] = Field(min_length=1)

    @model_validator(mode="after")
    def check_dates(self) -> "TrainingPlanCreate":
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class TrainingPlanUpdate(Payload):
    name: str | None = Field(default=None, min_length=1)
    level: Difficulty | None = None
    description: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    workout_ids: list[int] | None = Field(default=None, min_length=1)


ENTITY_SCHEMAS: dict[str, tuple[type[Payload], type[Payload]]] = {
    "muscle.group": (MuscleGroupCreate, MuscleGroupUpdate),
    "equipment": (EquipmentCreate, EquipmentUpdate),
    "exercise": (ExerciseCreate, ExerciseUpdate),
    "workout": (WorkoutCreate, WorkoutUpdate),
    "training.plan": (TrainingPlanCreate, TrainingPlanUpdate),
}
