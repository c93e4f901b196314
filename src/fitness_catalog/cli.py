"""CLI entry point for fitness-catalog."""

import click

from . import __version__
from .commands import init, list_entities, patterns, send, serve
from .config import get_settings
from .logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="fitness-catalog")
def main():
    """fitness-catalog: exercise, workout and training plan catalog.

    Example usage:

        # Create the database with starter muscle groups and equipment
        fitness-catalog init --seed

        # Talk to the catalog through message patterns
        fitness-catalog send find.all.equipment '{"page": 1, "limit": 5}'

        # Browse and serve
        fitness-catalog list exercise
        fitness-catalog serve
    """
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_json)


# Register commands
main.add_command(init)
main.add_command(send)
main.add_command(patterns)
main.add_command(list_entities)
main.add_command(serve)


if __name__ == "__main__":
    main()
