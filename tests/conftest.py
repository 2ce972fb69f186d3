"""
Pytest configuration and shared fixtures
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from supplier_directory.api.config import reset_settings
from supplier_directory.api.services.inquiry_service import reset_inquiry_service
from supplier_directory.db import create_store, reset_store

ADMIN_USERNAME = "directory-admin"
ADMIN_PASSWORD = "s3cret-test-password"


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Fresh settings, store and inquiry log for every test."""
    monkeypatch.setenv("ADMIN_USERNAME", ADMIN_USERNAME)
    monkeypatch.setenv("ADMIN_PASSWORD", ADMIN_PASSWORD)
    monkeypatch.setenv("SEED_DEMO_DATA", "true")
    reset_settings()
    reset_store()
    reset_inquiry_service()
    yield
    reset_settings()
    reset_store()
    reset_inquiry_service()


@pytest.fixture
def seeded_store():
    """Store loaded with the six demo suppliers."""
    return create_store(seed_demo_data=True)


@pytest.fixture
def empty_store():
    return create_store(seed_demo_data=False)


@pytest.fixture
def sample_csv_data():
    """Sample supplier CSV using loose header names."""
    return """Company Name,Contact Email,Phone Number,Website,About,City,Industry
Northwind Traders,hello@northwind.test,555-0100,https://northwind.test,Importers of fine foods,Seattle,Food
Contoso Ltd,sales@contoso.test,555-0101,https://contoso.test,Industrial fasteners,Chicago,Manufacturing
,nobody@missing.test,555-0102,,No name on this row,Austin,Retail
Fabrikam,info@fabrikam.test,555-0103,https://fabrikam.test,Textiles,Boston,Textiles
"""


@pytest.fixture
def admin_auth():
    """HTTP Basic credential accepted by the admin endpoints."""
    return (ADMIN_USERNAME, ADMIN_PASSWORD)
