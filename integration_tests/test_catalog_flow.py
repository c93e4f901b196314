"""Integration tests for the full catalog lifecycle.

Drives every entity type through the message router, from building a
plan bottom-up to tearing it down again in dependency order.
"""

import pytest

from fitness_catalog.errors import DependencyConflictError, NotFoundError


class TestCatalogLifecycle:
    """End-to-end flow across every entity type."""

    async def test_build_rate_and_tear_down(self, router):
        quads = await router.dispatch("create.muscle.group", {"name": "Quadriceps"})
        glutes = await router.dispatch("create.muscle.group", {"name": "Glutes"})
        rack = await router.dispatch(
            "create.equipment",
            {"name": "Squat Rack", "description": "Power rack", "category": "FREE_WEIGHT"},
        )

        squat = await router.dispatch(
            "create.exercise",
            {
                "name": "Back Squat",
                "description": "High bar squat",
                "level": "INTERMEDIATE",
                "category": "STRENGTH",
                "muscleGroupIds": [quads["id"], glutes["id"]],
                "equipmentIds": [rack["id"]],
            },
        )
        lunge = await router.dispatch(
            "create.exercise",
            {
                "name": "Walking Lunge",
                "description": "Alternating lunges",
                "level": "BEGINNER",
                "category": "STRENGTH",
                "muscleGroupIds": [quads["id"]],
                "equipmentIds": [rack["id"]],
            },
        )

        workout = await router.dispatch(
            "create.workout",
            {
                "name": "Lower A",
                "description": "Squat focus",
                "frequency": 2,
                "duration": 70,
                "level": "INTERMEDIATE",
                "category": "STRENGTH",
                "trainingType": "strength",
                "exercises": [
                    {"exerciseId": squat["id"], "sets": 5, "reps": 5, "weight": 100, "restTime": 180, "order": 1},
                    {"exerciseId": lunge["id"], "sets": 3, "reps": 12, "restTime": 90, "order": 2},
                ],
            },
        )
        plan = await router.dispatch(
            "create.training.plan",
            {
                "name": "Strength Base",
                "level": "INTERMEDIATE",
                "startDate": "2024-09-02",
                "endDate": "2024-10-28",
                "workoutIds": [workout["id"]],
            },
        )

        detail = await router.dispatch("find.one.training.plan", {"id": plan["id"]})
        assert [w["name"] for w in detail["workouts"]] == ["Lower A"]
        assert len(detail["workouts"][0]["exercises"]) == 2

        await router.dispatch("rate.workout", {"targetId": workout["id"], "score": 4.0, "totalRatings": 4})
        rated = await router.dispatch("add.rating.workout", {"targetId": workout["id"], "rating": 5})
        assert rated["score"] == pytest.approx(4.2)
        assert rated["total_ratings"] == 5

        # Swap the lunge slot for a second squat slot
        await router.dispatch(
            "update.workout",
            {
                "id": workout["id"],
                "patch": {
                    "exercises": [
                        {"exerciseId": squat["id"], "sets": 5, "reps": 5, "restTime": 180, "order": 1},
                        {"exerciseId": squat["id"], "sets": 2, "reps": 8, "restTime": 120, "order": 2},
                    ]
                },
            },
        )
        await router.dispatch("remove.exercise", {"id": lunge["id"]})

        with pytest.raises(DependencyConflictError):
            await router.dispatch("remove.workout", {"id": workout["id"]})

        await router.dispatch("remove.training.plan", {"id": plan["id"]})
        await router.dispatch("remove.workout", {"id": workout["id"]})
        await router.dispatch("remove.exercise", {"id": squat["id"]})
        await router.dispatch("remove.equipment", {"id": rack["id"]})
        await router.dispatch("remove.muscle.group", {"id": quads["id"]})

        with pytest.raises(NotFoundError):
            await router.dispatch("find.one.workout", {"id": workout["id"]})

        remaining = await router.dispatch("find.all.muscle.group", {})
        assert [mg["name"] for mg in remaining["data"]] == ["Glutes"]

        # Soft-deleted names are free again
        recreated = await router.dispatch("create.muscle.group", {"name": "Quadriceps"})
        assert recreated["id"] != quads["id"]
