"""CLI commands for fitness-catalog."""

from .browse import list_entities
from .init import init
from .send import patterns, send
from .serve import serve

__all__ = [
    "init",
    "list_entities",
    "patterns",
    "send",
    "serve",
]
