"""Request/response message patterns over the catalog engines.

Patterns follow `<verb>.<entity>`, e.g. `create.exercise`,
`find.all.equipment`, `rate.workout`, `remove.training.plan`.
"""

from collections.abc import Awaitable, Callable
from typing import Any

import pydantic

from .errors import UnknownPatternError, ValidationError
from .logging import get_logger
from .rules import Catalog, RuleEngine
from .schemas import (
    ENTITY_SCHEMAS,
    AddRatingPayload,
    IdPayload,
    IdsPayload,
    PaginationPayload,
    Payload,
    RatePayload,
    UpdatePayload,
)

logger = get_logger(__name__)

Handler = Callable[[dict[str, Any]], Awaitable[Any]]


def parse_payload(schema: type[Payload], payload: Any) -> Payload:
    """Validate a raw payload, raising ValidationError on bad input."""
    try:
        return schema.model_validate(payload)
    except pydantic.ValidationError as exc:
        errors = [
            {"loc": ".".join(str(part) for part in err["loc"]), "msg": err["msg"]}
            for err in exc.errors()
        ]
        raise ValidationError("Invalid payload", details={"errors": errors}) from None


class MessageRouter:
    """Maps pattern names to validated engine calls."""

    def __init__(self, catalog: Catalog):
        self.catalog = catalog
        self._handlers: dict[str, Handler] = {}
        for key, engine in catalog.engines.items():
            self._register_entity(key, engine)

        workouts = catalog.workouts

        async def find_exercise_in_workout(payload: dict) -> dict:
            return await workouts.find_child(parse_payload(IdPayload, payload).id)

        self._handlers["find.one.exercise.in.workout"] = find_exercise_in_workout

    @property
    def patterns(self) -> list[str]:
        return sorted(self._handlers)

    async def dispatch(self, pattern: str, payload: Any = None) -> Any:
        """Run the handler registered for pattern."""
        handler = self._handlers.get(pattern)
        if handler is None:
            raise UnknownPatternError(
                f"No handler for pattern '{pattern}'", details={"pattern": pattern}
            )
        logger.debug("message_received", pattern=pattern)
        return await handler(payload if payload is not None else {})

    def _register_entity(self, key: str, engine: RuleEngine) -> None:
        create_schema, update_schema = ENTITY_SCHEMAS[key]

        async def create(payload: dict) -> dict:
            body = parse_payload(create_schema, payload)
            return await engine.create(body.model_dump(mode="json"))

        async def find_all(payload: dict) -> dict:
            body = parse_payload(PaginationPayload, payload)
            return await engine.find_all(body.page, body.limit)

        async def find_one(payload: dict) -> dict:
            return await engine.find_one(parse_payload(IdPayload, payload).id)

        async def find_by_ids(payload: dict) -> list[dict]:
            return await engine.find_many(parse_payload(IdsPayload, payload).ids)

        async def update(payload: dict) -> dict:
            message = parse_payload(UpdatePayload, payload)
            patch = parse_payload(update_schema, message.patch)
            return await engine.update(message.id, patch.model_dump(mode="json", exclude_none=True))

        async def remove(payload: dict) -> dict:
            return await engine.remove(parse_payload(IdPayload, payload).id)

        self._handlers.update(
            {
                f"create.{key}": create,
                f"find.all.{key}": find_all,
                f"find.one.{key}": find_one,
                f"find.by.ids.{key}": find_by_ids,
                f"update.{key}": update,
                f"remove.{key}": remove,
            }
        )

        if not engine.config.rateable:
            return

        async def rate(payload: dict) -> dict:
            body = parse_payload(RatePayload, payload)
            return await engine.rate(body.target_id, body.score, body.total_ratings)

        async def add_rating(payload: dict) -> dict:
            body = parse_payload(AddRatingPayload, payload)
            return await engine.add_rating(body.target_id, body.rating)

        self._handlers[f"rate.{key}"] = rate
        self._handlers[f"add.rating.{key}"] = add_rating
