"""Shared fixtures for Platewise tests."""

import os

import pytest

os.environ.setdefault("SUPABASE_URL", "https://demo.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")

from platewise.config import Config  # noqa: E402
from platewise.services.navigation import Navigator  # noqa: E402
from platewise.services.storage import StorageUrlResolver  # noqa: E402
from platewise.services.toaster import Toaster  # noqa: E402
from tests.helpers import FakeDataService, make_restaurant, make_review  # noqa: E402


@pytest.fixture
def config():
    """Configuration independent of the process environment."""
    return Config(
        supabase_url="https://demo.supabase.co/",
        supabase_anon_key="test-anon-key",
    )


@pytest.fixture
def storage(config):
    return StorageUrlResolver(config)


@pytest.fixture
def toaster():
    return Toaster(limit=1)


@pytest.fixture
def navigator():
    return Navigator()


@pytest.fixture
def data_service():
    """Fake data service seeded with 8 restaurants and 5 reviews."""
    return FakeDataService(
        {
            "restaurants": [make_restaurant(i) for i in range(8)],
            "reviews": [make_review(i) for i in range(5)],
        }
    )
