"""Muscle group model."""

from dataclasses import dataclass


@dataclass
class MuscleGroup:
    """A muscle group that exercises can target."""

    name: str
    description: str | None = None
    media_url: str | None = None
    id: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for responses."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "media_url": self.media_url,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "MuscleGroup":
        """Create from dictionary."""
        return cls(
            id=data.get("id"),
            name=data["name"],
            description=data.get("description"),
            media_url=data.get("media_url"),
        )
