"""
Integration test fixtures
"""

import pytest
from fastapi.testclient import TestClient

from supplier_directory.api.main import create_app


@pytest.fixture
def client():
    """Test client running the app lifespan against a freshly seeded store."""
    with TestClient(create_app()) as test_client:
        yield test_client
