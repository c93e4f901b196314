"""Shared CLI utilities."""

import asyncio
from functools import wraps

import click

from ..config import get_settings
from ..db import EntityStore
from ..messaging import MessageRouter
from ..rules import Catalog


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def ensure_initialized(ctx: click.Context) -> None:
    """Exit with status 1 when the catalog database has not been created."""
    db_path = get_settings().db_path
    if db_path.exists():
        return
    _tagged("ERROR", "red", f"Catalog not initialized at {db_path}. Run 'fitness-catalog init' first.")
    ctx.exit(1)


def get_message_router() -> MessageRouter:
    """Build a message router over the configured database."""
    return MessageRouter(Catalog(EntityStore(get_settings().db_path)))


def _tagged(tag: str, color: str, message: str, err: bool = False) -> None:
    click.echo(click.style(f"[{tag}] ", fg=color) + message, err=err)


def echo_success(message: str) -> None:
    _tagged("OK", "green", message)


def echo_error(message: str) -> None:
    _tagged("ERROR", "red", message, err=True)


def echo_info(message: str) -> None:
    _tagged("INFO", "blue", message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Left-aligned plain-text table; empty string when there are no rows."""
    if not rows:
        return ""

    columns = list(zip(headers, *rows))
    widths = [max(len(str(cell)) for cell in column) for column in columns]
    gap = " " * padding

    def render(cells) -> str:
        return gap.join(str(cell).ljust(width) for cell, width in zip(cells, widths)).rstrip()

    return "\n".join(
        [render(headers), render("-" * width for width in widths), *(render(row) for row in rows)]
    )
