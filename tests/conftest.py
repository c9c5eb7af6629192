"""Shared test fixtures and configuration."""
import os

# Configuration is read at import time; pin it before importing the app.
os.environ["STORE_BACKEND"] = "memory"
os.environ["RATE_LIMIT_ENABLED"] = "0"
os.environ["LOGIN_RATE_LIMIT"] = "10/minute"
os.environ["AUTH_MODE"] = "local"
os.environ["SEED_DEMO_DATA"] = "0"
os.environ.setdefault("EXTERNAL_API_URL", "http://identity.test")

import anyio  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.core.store.memory import MemoryEntityStore  # noqa: E402
from app.core.store.dependencies import get_store  # noqa: E402
from app.features.auth.dependencies import get_token_registry  # noqa: E402
from app.features.auth.tokens import TokenRegistry  # noqa: E402
from tests.helpers import FakeClock, build_access  # noqa: E402


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> MemoryEntityStore:
    return MemoryEntityStore()


@pytest.fixture
def token_registry() -> TokenRegistry:
    return TokenRegistry()


@pytest.fixture
def access(store, clock):
    """Known roles/modules/options/user in ``store`` (sync tests only)."""
    return anyio.run(build_access, store, clock)


@pytest.fixture
def client(store, token_registry):
    from app.main import app

    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_token_registry] = lambda: token_registry
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
