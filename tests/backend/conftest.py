import datetime as dt
import os
import uuid

TEST_DB_URL = "sqlite://:memory:"
os.environ["DATABASE_URL"] = TEST_DB_URL

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

from fakeso.core import db as db_module
from fakeso.core.security import hash_password
from fakeso.main import app
from fakeso.models.user import User

db_module.DB_URL = TEST_DB_URL
db_module.TORTOISE_ORM["connections"]["default"] = TEST_DB_URL


async def _init_test_db() -> None:
    """
    Initialize a clean in-memory SQLite database for every test.
    Ensures tables are recreated from scratch.
    """
    await Tortoise.init(config=db_module.TORTOISE_ORM)
    await Tortoise.generate_schemas()


@pytest_asyncio.fixture
async def db():
    """
    Fresh database without an HTTP client, for service and model tests.
    """
    await _init_test_db()
    yield
    await Tortoise.close_connections()


@pytest_asyncio.fixture
async def client(db):
    """
    Provide an HTTPX AsyncClient bound to the FastAPI app with a fresh DB.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


@pytest_asyncio.fixture
async def create_user(db):
    """
    Factory fixture to create users directly via ORM.
    """

    async def _create_user(
        username: str | None = None,
        password: str = "UserPass!23",
        date_joined: dt.datetime | None = None,
    ) -> tuple[User, str]:
        user = await User.create(
            username=username or f"user_{uuid.uuid4().hex[:6]}",
            password_hash=hash_password(password),
            date_joined=date_joined or dt.datetime(2023, 12, 11, tzinfo=dt.timezone.utc),
        )
        return user, password

    return _create_user
