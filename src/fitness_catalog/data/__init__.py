"""Starter data."""

from .seed import STARTER_EQUIPMENT, STARTER_MUSCLE_GROUPS, seed_catalog

__all__ = ["seed_catalog", "STARTER_EQUIPMENT", "STARTER_MUSCLE_GROUPS"]
