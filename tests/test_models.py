"""Tests for data models."""

from datetime import date

from fitness_catalog.models import (
    Category,
    Difficulty,
    Equipment,
    EquipmentCategory,
    EquipmentStatus,
    Exercise,
    ExerciseInWorkout,
    MuscleGroup,
    TrainingPlan,
    Workout,
)


class TestEquipment:
    """Tests for Equipment model."""

    def test_equipment_from_dict_defaults_status(self):
        equipment = Equipment.from_dict(
            {"id": 3, "name": "Rower", "description": "Air rower", "category": "CARDIO"}
        )

        assert equipment.status == EquipmentStatus.AVAILABLE
        assert equipment.category == EquipmentCategory.CARDIO
        assert equipment.is_usable

    def test_equipment_out_of_order_not_usable(self):
        equipment = Equipment(
            name="Leg Press",
            description="Sled",
            category=EquipmentCategory.MACHINE,
            status=EquipmentStatus.OUT_OF_ORDER,
        )
        assert not equipment.is_usable
        assert equipment.to_dict()["status"] == "OUT_OF_ORDER"
        assert equipment.to_dict()["is_usable"] is False


class TestExercise:
    """Tests for Exercise model."""

    def test_exercise_to_dict_omits_unloaded_relations(self):
        exercise = Exercise(
            name="Squat",
            description="Back squat",
            level=Difficulty.ADVANCED,
            category=Category.STRENGTH,
        )
        data = exercise.to_dict()

        assert data["level"] == "ADVANCED"
        assert "muscle_groups" not in data
        assert "equipments" not in data

    def test_exercise_to_dict_includes_loaded_relations(self):
        exercise = Exercise(
            name="Squat",
            description="Back squat",
            level=Difficulty.ADVANCED,
            category=Category.STRENGTH,
            muscle_groups=[MuscleGroup(name="Quadriceps", id=1)],
            equipments=[],
        )
        data = exercise.to_dict()

        assert data["muscle_groups"] == [
            {"id": 1, "name": "Quadriceps", "description": None, "media_url": None}
        ]
        assert data["equipments"] == []

    def test_exercise_from_row_ignores_bookkeeping_columns(self):
        row = {
            "id": 7,
            "name": "Plank",
            "description": "Front plank",
            "level": "BEGINNER",
            "category": "BALANCE",
            "is_deleted": 0,
            "created_at": "2024-01-01T00:00:00",
        }
        exercise = Exercise.from_dict(row)

        assert exercise.id == 7
        assert exercise.category == Category.BALANCE
        assert exercise.muscle_groups is None


class TestWorkout:
    """Tests for Workout model."""

    def test_total_sets(self):
        workout = Workout(
            name="Legs",
            description="Lower body",
            frequency=1,
            duration=45,
            level=Difficulty.BEGINNER,
            category=Category.STRENGTH,
            training_type="strength",
            exercises=[
                ExerciseInWorkout(exercise_id=1, sets=5, reps=5, rest_time=180, order=1),
                ExerciseInWorkout(exercise_id=2, sets=3, reps=10, rest_time=90, order=2),
            ],
        )
        assert workout.total_sets == 8
        assert workout.to_dict()["total_sets"] == 8

    def test_total_sets_without_exercises(self):
        workout = Workout(
            name="Rest",
            description="Nothing",
            frequency=1,
            duration=1,
            level=Difficulty.BEGINNER,
            category=Category.MOBILITY,
            training_type="recovery",
        )
        assert workout.total_sets == 0


class TestTrainingPlan:
    """Tests for TrainingPlan model."""

    def test_plan_dates_round_trip_as_iso_text(self):
        plan = TrainingPlan.from_dict(
            {
                "name": "Base",
                "level": "BEGINNER",
                "start_date": "2024-03-01",
                "end_date": "2024-03-29T00:00:00",
            }
        )

        assert plan.start_date == date(2024, 3, 1)
        assert plan.duration_days == 28
        assert plan.to_dict()["end_date"] == "2024-03-29"
        assert plan.to_dict()["duration_days"] == 28

    def test_open_ended_plan_has_no_duration(self):
        plan = TrainingPlan(name="Open", level=Difficulty.BEGINNER, start_date=date(2024, 1, 1))
        assert plan.duration_days is None
        assert plan.to_dict()["end_date"] is None
