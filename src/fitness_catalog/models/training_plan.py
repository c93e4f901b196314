"""Training plan model."""

from dataclasses import dataclass
from datetime import date

from .enums import Difficulty
from .workout import Workout


def _parse_date(value: date | str | None) -> date | None:
    if value is None or isinstance(value, date):
        return value
    # Stored as ISO text; tolerate full timestamps
    return date.fromisoformat(value[:10])


@dataclass
class TrainingPlan:
    """A dated plan grouping several workouts."""

    name: str
    level: Difficulty
    start_date: date
    description: str | None = None
    end_date: date | None = None
    score: float | None = None
    total_ratings: int | None = None
    id: int | None = None
    workouts: list[Workout] | None = None

    @property
    def duration_days(self) -> int | None:
        """Length of the plan in days, if it has an end date."""
        if self.end_date is None:
            return None
        return (self.end_date - self.start_date).days

    def to_dict(self) -> dict:
        """Convert to dictionary for responses."""
        data = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "level": self.level.value,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat() if self.end_date else None,
            "duration_days": self.duration_days,
            "score": self.score,
            "total_ratings": self.total_ratings,
        }
        if self.workouts is not None:
            data["workouts"] = [w.to_dict() for w in self.workouts]
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "TrainingPlan":
        """Create from dictionary."""
        return cls(
            id=data.get("id"),
            name=data["name"],
            description=data.get("description"),
            level=Difficulty(data["level"]),
            start_date=_parse_date(data["start_date"]),
            end_date=_parse_date(data.get("end_date")),
            score=data.get("score"),
            total_ratings=data.get("total_ratings"),
        )
