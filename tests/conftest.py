"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides catalog, application and client fixtures.

==============================================================================
"""

import pytest
from typing import Generator, List
from fastapi.testclient import TestClient

from shop.catalog import Catalog, Product
from shop.config import Settings
from shop.main import Application


# ============================================================================
# CATALOG FIXTURES
# ============================================================================

@pytest.fixture
def catalog() -> Catalog:
    """Create an empty catalog."""
    return Catalog()


@pytest.fixture
def some_products() -> List[Product]:
    """Four products where two share the name 'Some Product1'."""
    return [
        Product(id="3", name="Some Product3", producer="Some Producer2"),
        Product(id="4", name="Some Product1", producer="Some Producer3"),
        Product(id="2", name="Some Product2", producer="Some Producer2"),
        Product(id="1", name="Some Product1", producer="Some Producer1"),
    ]


@pytest.fixture
def other_products() -> List[Product]:
    """Seven products from a single producer with ids 5-11."""
    return [
        Product(id=str(i), name=f"Other Product{i}", producer="Other Producer4")
        for i in range(5, 12)
    ]


@pytest.fixture
def filled_catalog(catalog: Catalog, some_products, other_products) -> Catalog:
    """Catalog holding eleven products."""
    for product in some_products + other_products:
        assert catalog.add_new_product(product)
    return catalog


# ============================================================================
# APPLICATION FIXTURES
# ============================================================================

@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and .env file."""
    return Settings(_env_file=None, app_env="development", debug=False)


@pytest.fixture(scope="function")
def client(settings: Settings) -> Generator[TestClient, None, None]:
    """Create test client around a fresh application and catalog."""
    app = Application(settings).app
    with TestClient(app) as test_client:
        yield test_client
