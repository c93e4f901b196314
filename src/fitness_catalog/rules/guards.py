"""Validation guards run before any write."""

from collections.abc import Iterable
from datetime import date

from ..db.store import StoreSession
from ..errors import (
    DependencyConflictError,
    InvalidReferenceError,
    NameConflictError,
    ValidationError,
)
from .config import ChildSpec, EntityConfig


async def ensure_unique_name(
    session: StoreSession,
    config: EntityConfig,
    name: str,
    current_id: int | None = None,
) -> None:
    """Reject a name already used by a different active row of the same type."""
    existing = await session.find_by_name(
        config.table,
        name,
        case_insensitive=config.case_insensitive_names,
        exclude_id=current_id,
    )
    if existing is not None:
        raise NameConflictError(
            f"{config.label} name already exists",
            details={"name": name, "conflicting_id": existing["id"]},
        )


async def ensure_references(
    session: StoreSession, target: EntityConfig, ids: Iterable[int]
) -> None:
    """Reject ids that do not name active rows of the target type."""
    requested = list(dict.fromkeys(ids))
    rows = await session.get_active_many(target.table, requested)
    if len(rows) == len(requested):
        return

    found = {row["id"] for row in rows}
    missing = [i for i in requested if i not in found]
    raise InvalidReferenceError(
        f"One or more {target.plural} do not exist or are deleted",
        details={"entity": target.key, "missing_ids": missing},
    )


def ensure_unique_keys(child: ChildSpec, items: list[dict]) -> None:
    """Reject child rows that repeat their key column (e.g. order)."""
    seen: set = set()
    duplicates: set = set()
    for item in items:
        value = item[child.key]
        if value in seen:
            duplicates.add(value)
        seen.add(value)

    if duplicates:
        raise ValidationError(
            f"Duplicate exercise {child.key}s are not allowed",
            details={f"duplicate_{child.key}s": sorted(duplicates)},
        )


def _as_date(value: date | str) -> date:
    if isinstance(value, date):
        return value
    return date.fromisoformat(value[:10])


def ensure_date_order(config: EntityConfig, values: dict) -> None:
    """Reject an end date that falls before the start date."""
    if config.date_range is None:
        return

    start_key, end_key = config.date_range
    start, end = values.get(start_key), values.get(end_key)
    if start is None or end is None:
        return
    if _as_date(end) < _as_date(start):
        raise ValidationError(
            f"{end_key} must not be before {start_key}",
            details={start_key: str(start), end_key: str(end)},
        )


async def ensure_no_dependents(
    session: StoreSession, config: EntityConfig, entity_id: int
) -> None:
    """Reject deletion while any active row still depends on the entity."""
    blocking: dict[str, list[int]] = {}
    for dep in config.dependencies:
        if dep.join_table:
            ids = await session.active_ids_linked(
                dep.table, dep.join_table, dep.owner_column, dep.target_column, entity_id
            )
        else:
            ids = await session.active_ids_referencing(dep.table, dep.column, entity_id)
        if ids:
            blocking[dep.label] = ids

    if not blocking:
        return

    affected = "; ".join(
        f"{label}: {', '.join(str(i) for i in ids)}" for label, ids in blocking.items()
    )
    raise DependencyConflictError(
        f"Cannot delete {config.label.lower()} with associated "
        f"{', '.join(blocking)}. Affected {affected}",
        details={"dependents": blocking},
    )
