"""Generic lifecycle rules shared by every catalog entity."""

from functools import wraps

from ..db.store import EntityStore, StoreSession
from ..errors import CatalogError, InternalError, NotFoundError, ValidationError
from ..logging import get_logger
from .config import EntityConfig
from .guards import (
    ensure_date_order,
    ensure_no_dependents,
    ensure_references,
    ensure_unique_keys,
    ensure_unique_name,
)
from .pagination import paginate
from .rating import fold_rating, validate_rating
from .relations import hydrate, sync_children, sync_links

# Relation depth loaded for list/mutation responses and for detail lookups
SUMMARY_DEPTH = 1
DETAIL_DEPTH = 2


def deleted_name(name: str, entity_id: int) -> str:
    """Name given to a soft-deleted row so the original name can be reused."""
    return f"{name}_deleted_{entity_id}"


def surface_errors(func):
    """Re-raise typed failures unchanged; wrap anything else as InternalError."""

    @wraps(func)
    async def wrapper(self, *args, **kwargs):
        try:
            return await func(self, *args, **kwargs)
        except CatalogError as exc:
            self.log.info(
                "operation_rejected",
                operation=func.__name__,
                code=exc.code,
                reason=exc.message,
            )
            raise
        except Exception:
            self.log.exception("operation_failed", operation=func.__name__)
            raise InternalError() from None

    return wrapper


class RuleEngine:
    """Create, query, rate, update and soft-delete one entity type.

    Every mutating operation runs its checks and writes inside a single
    write session, so they commit or roll back together.
    """

    def __init__(self, config: EntityConfig, store: EntityStore):
        self.config = config
        self.store = store
        self.log = get_logger(__name__).bind(entity=config.key)

    @surface_errors
    async def create(self, data: dict) -> dict:
        """Create an entity with its relations."""
        config = self.config
        async with self.store.session(write=True) as session:
            await ensure_unique_name(session, config, data["name"])
            ensure_date_order(config, data)
            await self._validate_relations(session, data)

            entity_id = await session.insert(config.table, self._scalar_values(data))
            await self._write_relations(session, entity_id, data)

            row = await session.get_active(config.table, entity_id)
            entity = await hydrate(session, config, row, SUMMARY_DEPTH)

        self.log.info("entity_created", id=entity_id, name=data["name"])
        return entity.to_dict()

    @surface_errors
    async def find_all(self, page: int = 1, limit: int = 10) -> dict:
        """List one page of active entities."""
        config = self.config
        async with self.store.session() as session:
            total = await session.count_active(config.table)
            window = paginate(page, limit, total)
            rows = await session.list_active(config.table, window.offset, window.limit)
            data = [
                (await hydrate(session, config, row, SUMMARY_DEPTH)).to_dict() for row in rows
            ]
        return {"data": data, "meta": window.meta()}

    @surface_errors
    async def find_one(self, entity_id: int) -> dict:
        """Get one active entity with expanded relations."""
        async with self.store.session() as session:
            row = await self._require(session, entity_id)
            entity = await hydrate(session, self.config, row, DETAIL_DEPTH)
        return entity.to_dict()

    @surface_errors
    async def find_many(self, ids: list[int]) -> list[dict]:
        """Get several active entities, failing if any id is missing."""
        config = self.config
        requested = list(dict.fromkeys(ids))
        async with self.store.session() as session:
            rows = {row["id"]: row for row in await session.get_active_many(config.table, requested)}
            missing = [i for i in requested if i not in rows]
            if missing:
                raise NotFoundError(
                    f"{config.plural.capitalize()} not found for IDs: "
                    f"{', '.join(str(i) for i in missing)}",
                    details={"missing_ids": missing},
                )
            return [
                (await hydrate(session, config, rows[i], DETAIL_DEPTH)).to_dict()
                for i in requested
            ]

    @surface_errors
    async def rate(self, target_id: int, score: float, total_ratings: int) -> dict:
        """Overwrite the rating aggregate with caller-supplied values."""
        self._require_rateable()
        validate_rating(score, total_ratings)
        async with self.store.session(write=True) as session:
            row = await self._require(session, target_id)
            await session.update(
                self.config.table,
                target_id,
                {"score": score, "total_ratings": total_ratings},
            )

        self.log.info("entity_rated", id=target_id, score=score, total_ratings=total_ratings)
        return {"id": target_id, "name": row["name"], "score": score, "total_ratings": total_ratings}

    @surface_errors
    async def add_rating(self, target_id: int, rating: float) -> dict:
        """Fold a single new rating into the stored running mean."""
        self._require_rateable()
        async with self.store.session(write=True) as session:
            row = await self._require(session, target_id)
            score, total_ratings = fold_rating(row["score"], row["total_ratings"], rating)
            await session.update(
                self.config.table,
                target_id,
                {"score": score, "total_ratings": total_ratings},
            )

        self.log.info("rating_added", id=target_id, rating=rating, score=score)
        return {"id": target_id, "name": row["name"], "score": score, "total_ratings": total_ratings}

    @surface_errors
    async def update(self, entity_id: int, patch: dict) -> dict:
        """Apply a partial update; supplied relation lists replace the old ones."""
        config = self.config
        async with self.store.session(write=True) as session:
            row = await self._require(session, entity_id)

            name = patch.get("name")
            if name is not None and name != row["name"]:
                await ensure_unique_name(session, config, name, current_id=entity_id)
            ensure_date_order(config, {**dict(row), **patch})
            await self._validate_relations(session, patch)

            await session.update(config.table, entity_id, self._scalar_values(patch))
            await self._write_relations(session, entity_id, patch)

            row = await session.get_active(config.table, entity_id)
            entity = await hydrate(session, config, row, SUMMARY_DEPTH)

        self.log.info("entity_updated", id=entity_id, fields=sorted(patch))
        return entity.to_dict()

    @surface_errors
    async def remove(self, entity_id: int) -> dict:
        """Soft-delete an entity that nothing active depends on."""
        config = self.config
        async with self.store.session(write=True) as session:
            row = await self._require(session, entity_id)
            await ensure_no_dependents(session, config, entity_id)

            await session.update(
                config.table,
                entity_id,
                {"is_deleted": True, "name": deleted_name(row["name"], entity_id)},
            )
            if config.child is not None:
                await session.soft_delete_where(
                    config.child.table, config.child.parent_column, entity_id
                )

        self.log.info("entity_removed", id=entity_id)
        return {"id": entity_id, "message": f"{config.label} deleted successfully"}

    @surface_errors
    async def find_child(self, child_id: int) -> dict:
        """Get one active sub-entity row (e.g. an exercise in a workout)."""
        child = self.config.child
        if child is None:
            raise ValidationError(f"{self.config.label} has no sub-entities")

        async with self.store.session() as session:
            row = await session.get_active(child.table, child_id)
        if row is None:
            raise NotFoundError(f"{child.label} not found", details={"id": child_id})
        return child.model.from_dict(dict(row)).to_dict()

    async def _require(self, session: StoreSession, entity_id: int):
        row = await session.get_active(self.config.table, entity_id)
        if row is None:
            raise NotFoundError(
                f"{self.config.label} with ID {entity_id} not found",
                details={"id": entity_id},
            )
        return row

    def _require_rateable(self) -> None:
        if not self.config.rateable:
            raise ValidationError(f"{self.config.label} does not support ratings")

    def _scalar_values(self, data: dict) -> dict:
        return {column: data[column] for column in self.config.columns if column in data}

    async def _validate_relations(self, session: StoreSession, data: dict) -> None:
        """Check supplied relation lists before anything is written."""
        child = self.config.child
        if child is not None and data.get(child.field) is not None:
            items = data[child.field]
            ensure_unique_keys(child, items)
            await ensure_references(
                session, child.reference, [item[child.reference_column] for item in items]
            )

        for link in self.config.links:
            if data.get(link.field) is not None:
                await ensure_references(session, link.target, data[link.field])

    async def _write_relations(self, session: StoreSession, entity_id: int, data: dict) -> None:
        for link in self.config.links:
            if data.get(link.field) is not None:
                await sync_links(session, link, entity_id, data[link.field])

        child = self.config.child
        if child is not None and data.get(child.field) is not None:
            await sync_children(session, child, entity_id, data[child.field])
