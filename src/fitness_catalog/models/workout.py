"""Workout and exercise-in-workout models."""

from dataclasses import dataclass

from .enums import Category, Difficulty
from .exercise import Exercise


@dataclass
class ExerciseInWorkout:
    """One ordered exercise slot inside a workout."""

    exercise_id: int
    sets: int
    reps: int
    rest_time: int
    order: int
    weight: float | None = None
    workout_id: int | None = None
    id: int | None = None
    exercise: Exercise | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for responses."""
        data = {
            "id": self.id,
            "workout_id": self.workout_id,
            "exercise_id": self.exercise_id,
            "sets": self.sets,
            "reps": self.reps,
            "weight": self.weight,
            "rest_time": self.rest_time,
            "order": self.order,
        }
        if self.exercise is not None:
            data["exercise"] = self.exercise.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "ExerciseInWorkout":
        """Create from dictionary."""
        return cls(
            id=data.get("id"),
            workout_id=data.get("workout_id"),
            exercise_id=data["exercise_id"],
            sets=data["sets"],
            reps=data["reps"],
            weight=data.get("weight"),
            rest_time=data["rest_time"],
            order=data["order"],
        )


@dataclass
class Workout:
    """A workout: an ordered list of exercises with set/rep prescriptions."""

    name: str
    description: str
    frequency: int
    duration: int  # minutes
    level: Difficulty
    category: Category
    training_type: str
    score: float | None = None
    total_ratings: int | None = None
    id: int | None = None
    exercises: list[ExerciseInWorkout] | None = None

    @property
    def total_sets(self) -> int:
        return sum(e.sets for e in self.exercises or [])

    def to_dict(self) -> dict:
        """Convert to dictionary for responses."""
        data = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "frequency": self.frequency,
            "duration": self.duration,
            "level": self.level.value,
            "category": self.category.value,
            "training_type": self.training_type,
            "score": self.score,
            "total_ratings": self.total_ratings,
        }
        if self.exercises is not None:
            data["exercises"] = [e.to_dict() for e in self.exercises]
            data["total_sets"] = self.total_sets
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Workout":
        """Create from dictionary."""
        return cls(
            id=data.get("id"),
            name=data["name"],
            description=data["description"],
            frequency=data["frequency"],
            duration=data["duration"],
            level=Difficulty(data["level"]),
            category=Category(data["category"]),
            training_type=data["training_type"],
            score=data.get("score"),
            total_ratings=data.get("total_ratings"),
        )
