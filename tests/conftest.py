"""
Pytest configuration and fixtures for Atlas gateway tests.
"""

import os
import pytest
from unittest.mock import MagicMock

# Set test environment before importing atlas modules
os.environ["ATLAS_ENV"] = "development"
os.environ["ATLAS_BACKEND"] = "memory"

from fastapi.testclient import TestClient

from atlas.config import GatewaySettings
from atlas.db.memory import InMemoryBackend
from atlas.web.app import create_app


def make_settings(**overrides) -> GatewaySettings:
    """Settings isolated from any local .env file."""
    values = {"atlas_backend": "memory", "log_level": "WARNING"}
    values.update(overrides)
    return GatewaySettings(_env_file=None, **values)


@pytest.fixture
def settings() -> GatewaySettings:
    return make_settings()


@pytest.fixture
def sample_suppliers():
    """Sample supplier records for testing."""
    return [
        {"id": "s1", "name": "Acme Textiles", "country": "BD", "risk": 42, "audited": True},
        {"id": "s2", "name": "Blue Cocoa Co", "country": "GH", "risk": 71, "audited": False},
        {"id": "s3", "name": "Cobalt Minerals", "country": "CD", "risk": 88, "audited": False},
        {"id": "s4", "name": "Delta Garments", "country": "BD", "risk": 42, "audited": True},
        {"id": "s5", "name": "Evergreen Timber", "country": "BR", "risk": 15, "audited": True},
    ]


@pytest.fixture
def backend(sample_suppliers) -> InMemoryBackend:
    """In-memory backend seeded with suppliers."""
    return InMemoryBackend({"suppliers": sample_suppliers})


@pytest.fixture
def client(settings, backend) -> TestClient:
    """TestClient for a gateway backed by the seeded in-memory store."""
    return TestClient(create_app(settings, backend=backend))


@pytest.fixture
def mock_supabase():
    """Mock Supabase client for unit tests."""
    mock_client = MagicMock()

    # Mock table operations
    mock_table = MagicMock()
    mock_table.select.return_value = mock_table
    mock_table.insert.return_value = mock_table
    mock_table.update.return_value = mock_table
    mock_table.delete.return_value = mock_table
    mock_table.eq.return_value = mock_table
    mock_table.order.return_value = mock_table
    mock_table.offset.return_value = mock_table
    mock_table.limit.return_value = mock_table
    mock_table.single.return_value = mock_table
    mock_table.execute.return_value = MagicMock(data=[])

    mock_client.table.return_value = mock_table

    return mock_client
