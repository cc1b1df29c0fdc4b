import pytest

from app import create_app
from auth.quota import EntitlementGate, InMemoryUsageStore
from tests.fakes import FakeProvider

PRO_KEY = "GOOD_SELLER_2025"


@pytest.fixture
def store():
    return InMemoryUsageStore()


@pytest.fixture
def gate(store):
    return EntitlementGate(store, PRO_KEY, free_limit=5, pro_limit=999)


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def app(provider, store):
    app = create_app(
        {
            "TESTING": True,
            "RATELIMIT_ENABLED": False,
            "OPENAI_API_KEY": "",
            "PRO_LICENSE_KEY": PRO_KEY,
            "FREE_DAILY_LIMIT": 5,
            "PRO_DAILY_LIMIT": 999,
        },
        provider=provider,
        usage_store=store,
    )
    yield app


@pytest.fixture
def client(app):
    return app.test_client()
