"""
Shared test fixtures.

Shopify is never contacted: integration tests patch `requests` inside
integrations.shopify.
"""

import sys
from pathlib import Path

# Add project root to Python path
project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))

import pytest
from unittest.mock import patch
from typing import Generator

from models.shopify import CatalogProduct, ShopifyCredentials


# ===================
# MOCK HTTP
# ===================

@pytest.fixture
def mock_get() -> Generator:
    """Patch requests.get as used by the Shopify integration."""
    with patch("integrations.shopify.requests.get") as mocked:
        yield mocked


@pytest.fixture
def mock_post() -> Generator:
    """Patch requests.post as used by the Shopify integration."""
    with patch("integrations.shopify.requests.post") as mocked:
        yield mocked


# ===================
# SAMPLE DATA
# ===================

@pytest.fixture
def credentials() -> ShopifyCredentials:
    """Sample store credentials."""
    return ShopifyCredentials(
        store_domain="test-store.myshopify.com",
        admin_token="shpat_test_token"
    )


@pytest.fixture
def sample_catalog_data() -> list:
    """Sample /products.json products."""
    return [
        {
            "id": 1,
            "title": "Hoodie",
            "variants": [
                {"id": 11, "title": "Small", "price": "40.00"},
                {"id": 12, "title": "Large", "price": "42.00"},
            ],
        },
        {
            "id": 2,
            "title": "Classic Baseball Cap",
            "variants": [
                {"id": 21, "title": "Default Title", "price": "18.50"},
            ],
        },
        {
            "id": 3,
            "title": "Café Tote Bag",
            "variants": [
                {"id": 31, "title": "Natural", "price": "12.00"},
            ],
        },
    ]


@pytest.fixture
def sample_catalog(sample_catalog_data) -> list[CatalogProduct]:
    """Sample catalog as models."""
    return [CatalogProduct.model_validate(p) for p in sample_catalog_data]


# ===================
# API TEST CLIENT
# ===================

@pytest.fixture
def test_client():
    """
    Create FastAPI test client.
    
    Usage:
        def test_endpoint(test_client):
            response = test_client.get("/health")
            assert response.status_code == 200
    """
    from fastapi.testclient import TestClient
    from main import app
    
    return TestClient(app)
