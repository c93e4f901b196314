"""Data models for fitness-catalog."""

from .enums import Category, Difficulty, EquipmentCategory, EquipmentStatus
from .equipment import Equipment
from .exercise import Exercise
from .muscle_group import MuscleGroup
from .training_plan import TrainingPlan
from .workout import ExerciseInWorkout, Workout

__all__ = [
    "Category",
    "Difficulty",
    "Equipment",
    "EquipmentCategory",
    "EquipmentStatus",
    "Exercise",
    "ExerciseInWorkout",
    "MuscleGroup",
    "TrainingPlan",
    "Workout",
]
