"""The five catalog entity configurations."""

from ..models import (
    Equipment,
    Exercise,
    ExerciseInWorkout,
    MuscleGroup,
    TrainingPlan,
    Workout,
)
from .config import ChildSpec, DependencySpec, EntityConfig, LinkSpec

MUSCLE_GROUP = EntityConfig(
    key="muscle.group",
    label="Muscle group",
    plural="muscle groups",
    table="muscle_groups",
    model=MuscleGroup,
    columns=("name", "description", "media_url"),
    case_insensitive_names=True,
    rateable=False,
    dependencies=(
        DependencySpec(
            label="exercises",
            table="exercises",
            join_table="exercise_muscle_groups",
            owner_column="exercise_id",
            target_column="muscle_group_id",
        ),
    ),
)

EQUIPMENT = EntityConfig(
    key="equipment",
    label="Equipment",
    plural="equipment",
    table="equipment",
    model=Equipment,
    columns=("name", "description", "media_url", "category", "status"),
    case_insensitive_names=True,
    dependencies=(
        DependencySpec(
            label="exercises",
            table="exercises",
            join_table="exercise_equipment",
            owner_column="exercise_id",
            target_column="equipment_id",
        ),
    ),
)

EXERCISE = EntityConfig(
    key="exercise",
    label="Exercise",
    plural="exercises",
    table="exercises",
    model=Exercise,
    columns=("name", "description", "media_url", "level", "category", "recommendation"),
    links=(
        LinkSpec(
            field="muscle_group_ids",
            attribute="muscle_groups",
            join_table="exercise_muscle_groups",
            owner_column="exercise_id",
            target_column="muscle_group_id",
            target=MUSCLE_GROUP,
        ),
        LinkSpec(
            field="equipment_ids",
            attribute="equipments",
            join_table="exercise_equipment",
            owner_column="exercise_id",
            target_column="equipment_id",
            target=EQUIPMENT,
        ),
    ),
    dependencies=(
        DependencySpec(label="workout exercises", table="exercise_in_workout", column="exercise_id"),
    ),
)

WORKOUT = EntityConfig(
    key="workout",
    label="Workout",
    plural="workouts",
    table="workouts",
    model=Workout,
    columns=(
        "name",
        "description",
        "frequency",
        "duration",
        "level",
        "category",
        "training_type",
    ),
    child=ChildSpec(
        field="exercises",
        attribute="exercises",
        label="Exercise in workout",
        table="exercise_in_workout",
        model=ExerciseInWorkout,
        parent_column="workout_id",
        columns=("exercise_id", "sets", "reps", "weight", "rest_time", "order"),
        key="order",
        reference_column="exercise_id",
        reference_attribute="exercise",
        reference=EXERCISE,
    ),
    dependencies=(
        DependencySpec(
            label="training plans",
            table="training_plans",
            join_table="training_plan_workouts",
            owner_column="training_plan_id",
            target_column="workout_id",
        ),
    ),
)

TRAINING_PLAN = EntityConfig(
    key="training.plan",
    label="Training plan",
    plural="training plans",
    table="training_plans",
    model=TrainingPlan,
    columns=("name", "description", "level", "start_date", "end_date"),
    date_range=("start_date", "end_date"),
    links=(
        LinkSpec(
            field="workout_ids",
            attribute="workouts",
            join_table="training_plan_workouts",
            owner_column="training_plan_id",
            target_column="workout_id",
            target=WORKOUT,
        ),
    ),
)

ENTITIES = (MUSCLE_GROUP, EQUIPMENT, EXERCISE, WORKOUT, TRAINING_PLAN)


def get_entity_config(key: str) -> EntityConfig:
    """Look up an entity configuration by its pattern key."""
    for config in ENTITIES:
        if config.key == key:
            return config
    raise KeyError(key)
