"""Web interface for fitness-catalog."""

from .app import create_app

__all__ = ["create_app"]
