import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from renovator.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from renovator.api.app import create_app
from renovator.app.services.identity_provider import UserInfo
from renovator.depends import get_identity_provider, get_unit_of_work
from tests.fixtures.helpers import REDIRECT_URI
from tests.fixtures.identity_provider import FakeIdentityProvider



@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def idp():
    return FakeIdentityProvider()


@pytest.fixture
def app(session_factory, idp):
    app = create_app(ApplicationConfig)

    # One database session per request, like the production dependency
    async def override_get_unit_of_work():
        async with session_factory() as session:
            yield SqlAlchemyUnitOfWork(session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_identity_provider] = lambda: idp
    return app


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def login(client, idp):
    """Run the code exchange for a fresh identity and return the callback body"""
    counter = {"n": 0}

    async def _login(email: str = "owner@example.com", sub: str = None, **claims):
        counter["n"] += 1
        code = f"code-{counter['n']}"
        idp.register_code(
            code,
            UserInfo(
                sub=sub or f"sub-{email}",
                email=email,
                given_name=claims.get("given_name", "Ada"),
                family_name=claims.get("family_name", "Builder"),
                phone=claims.get("phone"),
                company=claims.get("company"),
            ),
        )
        response = await client.get(
            "/api/auth/callback", params={"code": code, "redirect_uri": REDIRECT_URI}
        )
        assert response.status_code == 200, response.text
        return response.json()

    return _login
