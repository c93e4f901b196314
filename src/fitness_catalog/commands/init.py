"""Initialize catalog command."""

import click

from ..config import get_settings
from ..data import seed_catalog
from ..db import EntityStore, init_db
from ..rules import Catalog
from .base import async_command, echo_info, echo_success


@click.command()
@click.option("--seed", is_flag=True, help="Load starter muscle groups and equipment")
@async_command
async def init(seed: bool):
    """Initialize the catalog database.

    Creates the data directory and the SQLite schema. Safe to run again
    on an existing database.
    """
    settings = get_settings()
    echo_info(f"Initializing fitness-catalog in {settings.data_dir}")

    settings.data_dir.mkdir(parents=True, exist_ok=True)
    await init_db(settings.db_path)
    echo_success("Database initialized")

    if seed:
        count = await seed_catalog(Catalog(EntityStore(settings.db_path)))
        echo_success(f"Starter catalog loaded ({count} new records)")

    click.echo()
    click.echo("Next steps:")
    click.echo("  fitness-catalog patterns")
    click.echo("  fitness-catalog send find.all.muscle.group '{\"page\": 1, \"limit\": 10}'")
    click.echo("  fitness-catalog serve")
