"""Pytest configuration for integration tests."""

import pytest

from fitness_catalog.db import EntityStore, init_db
from fitness_catalog.messaging import MessageRouter
from fitness_catalog.rules import Catalog


# Mark all tests in this directory as integration tests
def pytest_collection_modifyitems(items):
    """Add integration marker to all tests in this directory."""
    for item in items:
        if "integration_tests" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
async def router(tmp_path):
    """A message router over a fresh on-disk catalog."""
    db_path = tmp_path / "catalog.db"
    await init_db(db_path)
    return MessageRouter(Catalog(EntityStore(db_path)))
