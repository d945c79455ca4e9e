"""Shared pytest fixtures.

Every test gets its own ``FleetDatabase`` and application instance so
records created by one test never leak into another.
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# ensure project root is on the import path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from fleet_manager_api.app.core.db import FleetDatabase, init_db  # noqa: E402
from fleet_manager_api.app.main import create_app  # noqa: E402


@pytest.fixture
def db() -> FleetDatabase:
    """Database loaded with the demo fleet."""
    return init_db(seed=True)


@pytest.fixture
def empty_db() -> FleetDatabase:
    return FleetDatabase()


@pytest.fixture
def client(db):
    return TestClient(create_app(db))


@pytest.fixture
def empty_client(empty_db):
    return TestClient(create_app(empty_db))
