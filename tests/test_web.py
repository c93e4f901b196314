"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from fitness_catalog.config import Settings
from fitness_catalog.web import create_app


@pytest.fixture
def client(tmp_path):
    app = create_app(Settings(data_dir=tmp_path, db_filename="web.db"))
    with TestClient(app) as client:
        yield client


@pytest.fixture
def equipment_id(client):
    response = client.post(
        "/equipment",
        json={"name": "Kettlebell", "description": "16kg bell", "category": "FREE_WEIGHT"},
    )
    assert response.status_code == 201
    return response.json()["id"]


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_list_patterns(client):
    patterns = client.get("/messages").json()["patterns"]
    assert "find.one.exercise.in.workout" in patterns


def test_message_endpoint(client):
    created = client.post("/messages/create.muscle.group", json={"name": "Lats"})
    assert created.status_code == 200

    listed = client.post("/messages/find.all.muscle.group", json={"page": 1, "limit": 5})
    assert [mg["name"] for mg in listed.json()["data"]] == ["Lats"]


def test_unknown_pattern_is_404(client):
    response = client.post("/messages/explode.gym", json={})
    assert response.status_code == 404
    assert response.json()["code"] == "UNKNOWN_PATTERN"


def test_name_conflict_is_400(client, equipment_id):
    response = client.post(
        "/equipment",
        json={"name": "kettlebell", "description": "Another", "category": "FREE_WEIGHT"},
    )
    body = response.json()

    assert response.status_code == 400
    assert body["code"] == "NAME_CONFLICT"
    assert body["message"] == "Equipment name already exists"


def test_validation_error_is_400(client):
    response = client.post("/equipment", json={"name": "Rope"})
    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_get_patch_delete(client, equipment_id):
    assert client.get(f"/equipment/{equipment_id}").json()["name"] == "Kettlebell"

    patched = client.patch(f"/equipment/{equipment_id}", json={"status": "OUT_OF_ORDER"})
    assert patched.json()["status"] == "OUT_OF_ORDER"

    deleted = client.delete(f"/equipment/{equipment_id}")
    assert deleted.json()["message"] == "Equipment deleted successfully"

    missing = client.get(f"/equipment/{equipment_id}")
    assert missing.status_code == 404
    assert missing.json()["code"] == "NOT_FOUND"


def test_list_with_query(client, equipment_id):
    body = client.get("/equipment", params={"page": 1, "limit": 1}).json()
    assert body["meta"] == {"total": 1, "page": 1, "last_page": 1}


def test_lookup(client, equipment_id):
    response = client.post("/equipment/lookup", json={"ids": [equipment_id, 404]})
    assert response.status_code == 404
    assert response.json()["details"]["missing_ids"] == [404]


def test_rating_routes(client, equipment_id):
    rated = client.put(f"/equipment/{equipment_id}/rating", json={"score": 4.0, "totalRatings": 3})
    assert rated.json()["total_ratings"] == 3

    added = client.post(f"/equipment/{equipment_id}/ratings", json={"rating": 2.0})
    assert added.json() == {
        "id": equipment_id,
        "name": "Kettlebell",
        "score": 3.5,
        "total_ratings": 4,
    }

    # The path id wins over a target id sent in the body
    aimed = client.put(
        f"/equipment/{equipment_id}/rating",
        json={"targetId": equipment_id + 1, "score": 4.5, "totalRatings": 6},
    )
    assert aimed.status_code == 200
    assert aimed.json()["id"] == equipment_id
    assert aimed.json()["score"] == 4.5

    invalid = client.put(f"/equipment/{equipment_id}/rating", json={"score": 9, "totalRatings": 1})
    assert invalid.status_code == 400
    assert invalid.json()["code"] == "INVALID_RATING"


def test_muscle_groups_have_no_rating_route(client):
    group = client.post("/muscle-groups", json={"name": "Abs"}).json()
    response = client.put(f"/muscle-groups/{group['id']}/rating", json={"score": 3, "totalRatings": 1})
    assert response.status_code in (404, 405)


def test_dependency_conflict_is_409(client, equipment_id):
    group = client.post("/muscle-groups", json={"name": "Shoulders"}).json()
    client.post(
        "/exercises",
        json={
            "name": "Kettlebell Press",
            "description": "Single arm press",
            "level": "BEGINNER",
            "category": "STRENGTH",
            "muscleGroupIds": [group["id"]],
            "equipmentIds": [equipment_id],
        },
    )

    response = client.delete(f"/muscle-groups/{group['id']}")
    assert response.status_code == 409
    assert response.json()["code"] == "DEPENDENCY_CONFLICT"


def test_exercise_in_workout_route(client, equipment_id):
    group = client.post("/muscle-groups", json={"name": "Legs"}).json()
    exercise = client.post(
        "/exercises",
        json={
            "name": "Goblet Squat",
            "description": "Front loaded squat",
            "level": "BEGINNER",
            "category": "STRENGTH",
            "muscle_group_ids": [group["id"]],
            "equipment_ids": [equipment_id],
        },
    ).json()
    workout = client.post(
        "/workouts",
        json={
            "name": "Leg Day",
            "description": "Squats",
            "frequency": 1,
            "duration": 30,
            "level": "BEGINNER",
            "category": "STRENGTH",
            "training_type": "strength",
            "exercises": [
                {"exercise_id": exercise["id"], "sets": 3, "reps": 10, "rest_time": 60, "order": 1}
            ],
        },
    ).json()

    slot_id = workout["exercises"][0]["id"]
    response = client.get(f"/workouts/exercises/{slot_id}")
    assert response.status_code == 200
    assert response.json()["exercise_id"] == exercise["id"]
