"""
Shared pytest fixtures for all tests.
This file is automatically loaded by pytest.
"""
import os
import uuid

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient
from motor.motor_asyncio import AsyncIOMotorClient

# Configure test settings BEFORE importing the app
# This must happen before any Settings objects are created
os.environ["DB_NAME"] = "blog_app_test"
os.environ.setdefault("TEST_DB_NAME", "blog_app_test")
os.environ["ENVIRONMENT"] = "test"

from main import app
from tests.fixtures.data_fixtures import seed_blogpost_data, tear_down_db
from tests.test_config import TestSettings
from tests.test_safety import get_safe_test_db_name

# One database name per test run, so runs against a shared server never overlap
RUN_ID = uuid.uuid4().hex[:8]


@pytest.fixture(scope="session")
def test_settings():
    return TestSettings()


@pytest_asyncio.fixture(scope="function")
async def mongodb(test_settings):
    """
    Ephemeral store for one test.

    In-memory by default; a real server when TEST_DB_URL is configured.
    """
    db_name = get_safe_test_db_name(RUN_ID)

    if test_settings.TEST_DB_URL:
        client = AsyncIOMotorClient(test_settings.TEST_DB_URL)
    else:
        client = AsyncMongoMockClient()
    db = client[db_name]

    # CRITICAL: Verify we're using a test database
    assert "test" in db.name, f"❌ SAFETY CHECK FAILED: Expected a test database but got '{db.name}'"

    yield db

    await tear_down_db(db)
    if isinstance(client, AsyncIOMotorClient):
        await client.drop_database(db_name)
        client.close()


@pytest_asyncio.fixture
async def seeded_posts(mongodb):
    """Seed generated blog posts before the test; teardown happens in the mongodb fixture"""
    return await seed_blogpost_data(mongodb)


@pytest_asyncio.fixture
async def client(mongodb):
    """HTTP client for API testing, bound to the test's ephemeral store"""
    app.state.mongodb = mongodb

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.state.mongodb = None
