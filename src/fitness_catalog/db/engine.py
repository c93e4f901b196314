"""Database engine setup and initialization."""

from pathlib import Path

import aiosqlite

from ..config import get_settings

SCHEMA = [
    """
    CREATE TABLE IF NOT EXISTS muscle_groups (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        description TEXT,
        media_url TEXT,
        is_deleted INTEGER NOT NULL DEFAULT 0,
        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS equipment (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        description TEXT NOT NULL,
        media_url TEXT,
        category TEXT NOT NULL,
        status TEXT NOT NULL DEFAULT 'AVAILABLE',
        score REAL,
        total_ratings INTEGER,
        is_deleted INTEGER NOT NULL DEFAULT 0,
        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS exercises (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        description TEXT NOT NULL,
        media_url TEXT,
        level TEXT NOT NULL,
        category TEXT NOT NULL,
        recommendation TEXT,
        score REAL,
        total_ratings INTEGER,
        is_deleted INTEGER NOT NULL DEFAULT 0,
        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS exercise_muscle_groups (
        exercise_id INTEGER NOT NULL,
        muscle_group_id INTEGER NOT NULL,
        PRIMARY KEY (exercise_id, muscle_group_id),
        FOREIGN KEY (exercise_id) REFERENCES exercises(id),
        FOREIGN KEY (muscle_group_id) REFERENCES muscle_groups(id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS exercise_equipment (
        exercise_id INTEGER NOT NULL,
        equipment_id INTEGER NOT NULL,
        PRIMARY KEY (exercise_id, equipment_id),
        FOREIGN KEY (exercise_id) REFERENCES exercises(id),
        FOREIGN KEY (equipment_id) REFERENCES equipment(id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS workouts (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        description TEXT NOT NULL,
        frequency INTEGER NOT NULL,
        duration INTEGER NOT NULL,
        level TEXT NOT NULL,
        category TEXT NOT NULL,
        training_type TEXT NOT NULL,
        score REAL,
        total_ratings INTEGER,
        is_deleted INTEGER NOT NULL DEFAULT 0,
        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS exercise_in_workout (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        workout_id INTEGER NOT NULL,
        exercise_id INTEGER NOT NULL,
        sets INTEGER NOT NULL,
        reps INTEGER NOT NULL,
        weight REAL,
        rest_time INTEGER NOT NULL,
        "order" INTEGER NOT NULL,
        is_deleted INTEGER NOT NULL DEFAULT 0,
        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
        FOREIGN KEY (workout_id) REFERENCES workouts(id),
        FOREIGN KEY (exercise_id) REFERENCES exercises(id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS training_plans (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        description TEXT,
        level TEXT NOT NULL,
        start_date TEXT NOT NULL,
        end_date TEXT,
        score REAL,
        total_ratings INTEGER,
        is_deleted INTEGER NOT NULL DEFAULT 0,
        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS training_plan_workouts (
        training_plan_id INTEGER NOT NULL,
        workout_id INTEGER NOT NULL,
        PRIMARY KEY (training_plan_id, workout_id),
        FOREIGN KEY (training_plan_id) REFERENCES training_plans(id),
        FOREIGN KEY (workout_id) REFERENCES workouts(id)
    )
    """,
]

INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_muscle_groups_name ON muscle_groups(name)",
    "CREATE INDEX IF NOT EXISTS idx_equipment_name ON equipment(name)",
    "CREATE INDEX IF NOT EXISTS idx_exercises_name ON exercises(name)",
    "CREATE INDEX IF NOT EXISTS idx_workouts_name ON workouts(name)",
    "CREATE INDEX IF NOT EXISTS idx_training_plans_name ON training_plans(name)",
    """
    CREATE INDEX IF NOT EXISTS idx_exercise_in_workout_workout
    ON exercise_in_workout(workout_id)
    """,
    """
    CREATE INDEX IF NOT EXISTS idx_exercise_in_workout_exercise
    ON exercise_in_workout(exercise_id)
    """,
]


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    settings = get_settings()
    if data_dir is None:
        data_dir = settings.data_dir
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / settings.db_filename


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        for statement in SCHEMA:
            await db.execute(statement)
        for statement in INDEXES:
            await db.execute(statement)
        await db.commit()
