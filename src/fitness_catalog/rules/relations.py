"""Relation syncing and loading."""

from collections.abc import Iterable

import aiosqlite

from ..db.store import StoreSession
from .config import ChildSpec, EntityConfig, LinkSpec


async def sync_links(
    session: StoreSession, link: LinkSpec, owner_id: int, target_ids: Iterable[int]
) -> None:
    """Make the owner's link set exactly target_ids."""
    await session.replace_links(
        link.join_table,
        link.owner_column,
        link.target_column,
        owner_id,
        list(dict.fromkeys(target_ids)),
    )


async def sync_children(
    session: StoreSession, child: ChildSpec, parent_id: int, items: list[dict]
) -> None:
    """Make the parent's active child rows match items exactly.

    Rows are matched on the child key: a matching active row is updated
    in place and keeps its id, unmatched items are inserted, and active
    rows left without a match are soft-deleted.
    """
    existing = {
        row[child.key]: row
        for row in await session.child_rows(child.table, child.parent_column, parent_id, child.key)
    }

    for item in items:
        values = {column: item.get(column) for column in child.columns}
        row = existing.pop(item[child.key], None)
        if row is None:
            await session.insert(child.table, {**values, child.parent_column: parent_id})
        else:
            await session.update(child.table, row["id"], values)

    for row in existing.values():
        await session.update(child.table, row["id"], {"is_deleted": True})


async def hydrate(
    session: StoreSession, config: EntityConfig, row: aiosqlite.Row, depth: int = 1
):
    """Build a model from a row, loading relations depth levels deep."""
    entity = config.model.from_dict(dict(row))
    if depth <= 0:
        return entity

    for link in config.links:
        rows = await session.linked_rows(
            link.join_table, link.owner_column, link.target_column, link.target.table, row["id"]
        )
        setattr(
            entity,
            link.attribute,
            [await hydrate(session, link.target, r, depth - 1) for r in rows],
        )

    child = config.child
    if child is not None:
        items = []
        for child_row in await session.child_rows(
            child.table, child.parent_column, row["id"], child.key
        ):
            item = child.model.from_dict(dict(child_row))
            ref_row = await session.get_active(
                child.reference.table, child_row[child.reference_column]
            )
            if ref_row is not None:
                setattr(
                    item,
                    child.reference_attribute,
                    await hydrate(session, child.reference, ref_row, depth - 1),
                )
            items.append(item)
        setattr(entity, child.attribute, items)

    return entity
