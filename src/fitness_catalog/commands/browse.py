"""Browse catalog entities as tables."""

import click

from ..errors import CatalogError
from ..rules import ENTITIES
from .base import async_command, echo_error, ensure_initialized, format_table, get_message_router


@click.command("list")
@click.argument("entity", type=click.Choice([config.key for config in ENTITIES]))
@click.option("--page", default=1, type=int, help="Page number (default: 1)")
@click.option("--limit", default=20, type=int, help="Rows per page (default: 20)")
@click.pass_context
@async_command
async def list_entities(ctx: click.Context, entity: str, page: int, limit: int):
    """List active records of ENTITY."""
    ensure_initialized(ctx)

    try:
        result = await get_message_router().dispatch(
            f"find.all.{entity}", {"page": page, "limit": limit}
        )
    except CatalogError as e:
        echo_error(f"{e.code}: {e.message}")
        ctx.exit(1)

    rows = [
        [
            str(item["id"]),
            item["name"],
            "-" if item.get("score") is None else f"{item['score']:.2f}",
            str(item.get("total_ratings") or 0),
        ]
        for item in result["data"]
    ]
    meta = result["meta"]
    if rows:
        click.echo(format_table(["ID", "Name", "Score", "Ratings"], rows))
    else:
        click.echo("No records on this page.")
    click.echo(f"\nPage {meta['page']} of {meta['last_page']} ({meta['total']} total)")
