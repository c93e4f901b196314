"""Send message patterns from the command line."""

import json

import click

from ..errors import CatalogError
from .base import async_command, echo_error, ensure_initialized, get_message_router


@click.command()
@click.argument("pattern")
@click.argument("payload", required=False, default="{}")
@click.pass_context
@async_command
async def send(ctx: click.Context, pattern: str, payload: str):
    """Send PAYLOAD (JSON) to the handler for PATTERN and print the reply.

    Examples:

        fitness-catalog send find.one.exercise '{"id": 1}'

        fitness-catalog send rate.workout '{"target_id": 2, "score": 4.5, "total_ratings": 10}'
    """
    ensure_initialized(ctx)

    try:
        body = json.loads(payload)
    except json.JSONDecodeError as e:
        echo_error(f"Payload is not valid JSON: {e}")
        ctx.exit(1)

    try:
        result = await get_message_router().dispatch(pattern, body)
    except CatalogError as e:
        echo_error(f"{e.code}: {e.message}")
        if e.details:
            click.echo(json.dumps(e.details, indent=2), err=True)
        ctx.exit(1)

    click.echo(json.dumps(result, indent=2))


@click.command()
def patterns():
    """List the message patterns the catalog answers."""
    for pattern in get_message_router().patterns:
        click.echo(pattern)
