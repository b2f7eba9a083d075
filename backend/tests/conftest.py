"""Integration/E2E test fixtures.

This conftest loads the full app and is used for integration/e2e tests.
Unit tests in tests/unit/ have their own isolated conftest that doesn't load the app.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, AsyncIterator, cast

import pytest
import pytest_asyncio
from dotenv import load_dotenv
from httpx import ASGITransport, AsyncClient

# Load .env first (default environment variables)
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

# Load .env.test (overrides .env values)
env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=True)

# Tests never start the nightly job and default to the in-memory store
os.environ.setdefault("REPOSITORY_BACKEND", "inmemory")
os.environ["CONSISTENCY_JOB_ENABLED"] = "false"

MONGODB_ENABLED = os.getenv("REPOSITORY_BACKEND", "inmemory").lower() == "mongodb"


@pytest_asyncio.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client bound to the FastAPI app (no network)."""
    from app import app

    transport = ASGITransport(app=cast(Any, app))
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def requires_mongodb() -> None:
    if not MONGODB_ENABLED:
        pytest.skip("REPOSITORY_BACKEND is not mongodb")
