"""
Pytest configuration and fixtures.
"""
import pytest

from apps.cart.domain.entities import CartStore
from apps.cart.domain.value_objects import CartOptions
from apps.cart.infrastructure.adapters import InMemoryPersistenceAdapter

STORE_KEY = 'test_cart'


@pytest.fixture
def adapter():
    """In-memory persistence shared by every cart built in a test."""
    return InMemoryPersistenceAdapter()


@pytest.fixture
def make_cart(adapter):
    """Build a cart over the shared adapter with the given options."""
    def _make(**options):
        return CartStore(
            adapter=adapter,
            store_key=STORE_KEY,
            options=CartOptions.from_mapping(options),
        )
    return _make


@pytest.fixture
def cart(make_cart):
    """Cart with default options."""
    return make_cart()


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient(HTTP_HOST='shop.example.com')
