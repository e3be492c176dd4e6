import os
import uuid

TEST_DB_URL = "sqlite://:memory:?cache=shared"
os.environ["DATABASE_URL"] = TEST_DB_URL
os.environ["GENERATE_SCHEMAS"] = "false"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise, connections

from app.core import db as db_module
from app.core.security import hash_password
from app.main import app
from app.models.user import User
from app.services.potion_service import PotionService

db_module.DB_URL = TEST_DB_URL
db_module.TORTOISE_ORM["connections"]["default"] = TEST_DB_URL


async def _init_test_db():
    """
    Initialize a clean in-memory SQLite database for every test.
    Ensures tables are recreated from scratch.
    """
    if Tortoise._inited:
        await Tortoise.close_connections()
    await Tortoise.init(config=db_module.TORTOISE_ORM)
    await Tortoise.generate_schemas()
    return connections.get("default")


@pytest_asyncio.fixture
async def db():
    """
    Fresh database connection, closed after the test.
    """
    conn = await _init_test_db()
    yield conn
    await Tortoise.close_connections()


@pytest_asyncio.fixture
async def client(db):
    """
    Provide an HTTPX AsyncClient bound to the FastAPI app with a fresh DB.
    The startup hook is not run, so the test connection is wired in directly.
    """
    app.state.db = db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


@pytest.fixture
def potion_service(db):
    return PotionService(db)


@pytest.fixture
def potion_payload():
    """
    Factory for valid potion request bodies.
    """

    def _payload(**overrides):
        body = {
            "name": "Healing draught",
            "ingredients": ["magic herb", 2, {"water": "pure"}, None, True],
            "effects": {"strength": 10, "flavor": 5},
            "categories": ["healing", "magic"],
            "price": 50,
            "score": 4.5,
            "vendorId": "vendor-a",
        }
        body.update(overrides)
        return body

    return _payload


@pytest_asyncio.fixture
async def create_user(db):
    """
    Factory fixture to create users directly via ORM.
    """

    async def _create_user(password: str = "UserPass!23") -> tuple[User, str]:
        user = await User.create(
            name=f"user_{uuid.uuid4().hex[:6]}",
            password_hash=hash_password(password),
        )
        return user, password

    return _create_user
