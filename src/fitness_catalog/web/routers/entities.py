"""REST routes per entity, each delegating to a message pattern."""

from typing import Any

from fastapi import APIRouter, Body, Query, Request

from ...rules import ENTITIES
from .messages import get_message_router

# Pattern key -> URL prefix
ENTITY_PREFIXES = {
    "exercise": "/exercises",
    "workout": "/workouts",
    "training.plan": "/training-plans",
    "muscle.group": "/muscle-groups",
    "equipment": "/equipment",
}

workout_children = APIRouter(prefix="/workouts/exercises", tags=["workout"])


def _target(body: dict[str, Any], entity_id: int) -> dict[str, Any]:
    """Rating payload aimed at the path id; a target id in the body is ignored."""
    fields = {k: v for k, v in body.items() if k not in ("target_id", "targetId")}
    return {**fields, "target_id": entity_id}


@workout_children.get("/{item_id}")
async def get_exercise_in_workout(request: Request, item_id: int):
    """Get one exercise slot of a workout."""
    return await get_message_router(request).dispatch(
        "find.one.exercise.in.workout", {"id": item_id}
    )


def build_entity_router(key: str, prefix: str, rateable: bool) -> APIRouter:
    """Build CRUD (and rating) routes for one entity type."""
    router = APIRouter(prefix=prefix, tags=[key])

    @router.get("")
    async def list_entities(
        request: Request,
        page: int = Query(1),
        limit: int = Query(10),
    ):
        return await get_message_router(request).dispatch(
            f"find.all.{key}", {"page": page, "limit": limit}
        )

    @router.post("", status_code=201)
    async def create_entity(request: Request, body: dict[str, Any] = Body(...)):
        return await get_message_router(request).dispatch(f"create.{key}", body)

    @router.post("/lookup")
    async def lookup_entities(request: Request, body: dict[str, Any] = Body(...)):
        return await get_message_router(request).dispatch(f"find.by.ids.{key}", body)

    @router.get("/{entity_id}")
    async def get_entity(request: Request, entity_id: int):
        return await get_message_router(request).dispatch(f"find.one.{key}", {"id": entity_id})

    @router.patch("/{entity_id}")
    async def update_entity(request: Request, entity_id: int, body: dict[str, Any] = Body(...)):
        return await get_message_router(request).dispatch(
            f"update.{key}", {"id": entity_id, "patch": body}
        )

    @router.delete("/{entity_id}")
    async def remove_entity(request: Request, entity_id: int):
        return await get_message_router(request).dispatch(f"remove.{key}", {"id": entity_id})

    if rateable:

        @router.put("/{entity_id}/rating")
        async def rate_entity(request: Request, entity_id: int, body: dict[str, Any] = Body(...)):
            return await get_message_router(request).dispatch(
                f"rate.{key}", _target(body, entity_id)
            )

        @router.post("/{entity_id}/ratings")
        async def add_rating(request: Request, entity_id: int, body: dict[str, Any] = Body(...)):
            return await get_message_router(request).dispatch(
                f"add.rating.{key}", _target(body, entity_id)
            )

    return router


def build_entity_routers() -> list[APIRouter]:
    return [
        build_entity_router(config.key, ENTITY_PREFIXES[config.key], config.rateable)
        for config in ENTITIES
    ]
