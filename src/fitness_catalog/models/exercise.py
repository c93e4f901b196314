"""Exercise model."""

from dataclasses import dataclass

from .enums import Category, Difficulty
from .equipment import Equipment
from .muscle_group import MuscleGroup


@dataclass
class Exercise:
    """An exercise in the catalog.

    Relations are None when they were not loaded, so that
    nested summaries stay flat in responses.
    """

    name: str
    description: str
    level: Difficulty
    category: Category
    media_url: str | None = None
    recommendation: str | None = None
    score: float | None = None
    total_ratings: int | None = None
    id: int | None = None
    muscle_groups: list[MuscleGroup] | None = None
    equipments: list[Equipment] | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for responses."""
        data = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "media_url": self.media_url,
            "level": self.level.value,
            "category": self.category.value,
            "recommendation": self.recommendation,
            "score": self.score,
            "total_ratings": self.total_ratings,
        }
        if self.muscle_groups is not None:
            data["muscle_groups"] = [mg.to_dict() for mg in self.muscle_groups]
        if self.equipments is not None:
            data["equipments"] = [eq.to_dict() for eq in self.equipments]
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Exercise":
        """Create from dictionary."""
        return cls(
            id=data.get("id"),
            name=data["name"],
            description=data["description"],
            media_url=data.get("media_url"),
            level=Difficulty(data["level"]),
            category=Category(data["category"]),
            recommendation=data.get("recommendation"),
            score=data.get("score"),
            total_ratings=data.get("total_ratings"),
        )
