"""Pytest configuration and fixtures."""

import pytest
import tempfile
from pathlib import Path

from fitness_catalog.db import EntityStore, init_db
from fitness_catalog.rules import Catalog


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
async def store(temp_db_path):
    """An entity store over a freshly initialized database."""
    await init_db(temp_db_path)
    return EntityStore(temp_db_path)


@pytest.fixture
def catalog(store):
    return Catalog(store)


@pytest.fixture
async def basics(catalog):
    """Two muscle groups, two pieces of equipment and one exercise."""
    chest = await catalog.muscle_groups.create({"name": "Chest"})
    triceps = await catalog.muscle_groups.create({"name": "Triceps"})
    barbell = await catalog.equipment.create(
        {"name": "Barbell", "description": "Olympic bar", "category": "FREE_WEIGHT"}
    )
    bench = await catalog.equipment.create(
        {"name": "Bench", "description": "Flat bench", "category": "ACCESSORY"}
    )
    press = await catalog.exercises.create(
        {
            "name": "Bench Press",
            "description": "Horizontal press",
            "level": "INTERMEDIATE",
            "category": "STRENGTH",
            "muscle_group_ids": [chest["id"], triceps["id"]],
            "equipment_ids": [barbell["id"], bench["id"]],
        }
    )
    return {
        "chest": chest["id"],
        "triceps": triceps["id"],
        "barbell": barbell["id"],
        "bench": bench["id"],
        "press": press["id"],
    }


@pytest.fixture
def workout_payload(basics):
    """Create payload for a two-exercise-slot workout."""
    return {
        "name": "Push Day",
        "description": "Chest and triceps",
        "frequency": 2,
        "duration": 60,
        "level": "INTERMEDIATE",
        "category": "STRENGTH",
        "training_type": "hypertrophy",
        "exercises": [
            {"exercise_id": basics["press"], "sets": 4, "reps": 8, "weight": 80.0, "rest_time": 120, "order": 1},
            {"exercise_id": basics["press"], "sets": 3, "reps": 12, "weight": 60.0, "rest_time": 90, "order": 2},
        ],
    }
