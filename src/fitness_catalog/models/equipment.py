"""Equipment model."""

from dataclasses import dataclass

from .enums import EquipmentCategory, EquipmentStatus


@dataclass
class Equipment:
    """A piece of gym equipment.

    Carries the caller-maintained rating aggregate (score and
    total_ratings) alongside its descriptive fields.
    """

    name: str
    description: str
    category: EquipmentCategory
    status: EquipmentStatus = EquipmentStatus.AVAILABLE
    media_url: str | None = None
    score: float | None = None
    total_ratings: int | None = None
    id: int | None = None

    @property
    def is_usable(self) -> bool:
        return self.status == EquipmentStatus.AVAILABLE

    def to_dict(self) -> dict:
        """Convert to dictionary for responses."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "media_url": self.media_url,
            "category": self.category.value,
            "status": self.status.value,
            "is_usable": self.is_usable,
            "score": self.score,
            "total_ratings": self.total_ratings,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Equipment":
        """Create from dictionary."""
        return cls(
            id=data.get("id"),
            name=data["name"],
            description=data["description"],
            media_url=data.get("media_url"),
            category=EquipmentCategory(data["category"]),
            status=EquipmentStatus(data.get("status") or EquipmentStatus.AVAILABLE),
            score=data.get("score"),
            total_ratings=data.get("total_ratings"),
        )
