"""Starter catalog content."""

from ..errors import NameConflictError
from ..models import EquipmentCategory, EquipmentStatus
from ..rules import Catalog

STARTER_MUSCLE_GROUPS = [
    {"name": "Chest", "description": "Pectoralis major and minor"},
    {"name": "Back", "description": "Latissimus dorsi, rhomboids and erectors"},
    {"name": "Shoulders", "description": "Anterior, lateral and posterior deltoids"},
    {"name": "Biceps", "description": "Biceps brachii and brachialis"},
    {"name": "Triceps", "description": "Triceps brachii"},
    {"name": "Quadriceps", "description": "Front of the thigh"},
    {"name": "Hamstrings", "description": "Back of the thigh"},
    {"name": "Glutes", "description": "Gluteus maximus, medius and minimus"},
    {"name": "Calves", "description": "Gastrocnemius and soleus"},
    {"name": "Core", "description": "Abdominals and obliques"},
]

STARTER_EQUIPMENT = [
    {
        "name": "Barbell",
        "description": "Olympic barbell",
        "category": EquipmentCategory.FREE_WEIGHT,
    },
    {
        "name": "Dumbbells",
        "description": "Pair of adjustable or fixed dumbbells",
        "category": EquipmentCategory.FREE_WEIGHT,
    },
    {
        "name": "Cable Machine",
        "description": "Adjustable pulley station",
        "category": EquipmentCategory.MACHINE,
    },
    {
        "name": "Treadmill",
        "description": "Motorized running machine",
        "category": EquipmentCategory.CARDIO,
    },
    {
        "name": "Resistance Bands",
        "description": "Set of loop bands",
        "category": EquipmentCategory.ACCESSORY,
    },
    {
        "name": "Pull-up Bar",
        "description": "Fixed overhead bar",
        "category": EquipmentCategory.BODYWEIGHT,
    },
]


async def seed_catalog(catalog: Catalog) -> int:
    """Create the starter muscle groups and equipment.

    Names that already exist are skipped, so seeding is repeatable.

    Returns:
        Number of records created
    """
    created = 0
    for data in STARTER_MUSCLE_GROUPS:
        try:
            await catalog.muscle_groups.create(data)
            created += 1
        except NameConflictError:
            continue

    for data in STARTER_EQUIPMENT:
        try:
            await catalog.equipment.create({"status": EquipmentStatus.AVAILABLE, **data})
            created += 1
        except NameConflictError:
            continue

    return created
