from typing import List, Optional
from uuid import UUID

import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.fixtures.json_loader import TestDataLoader
from src.depends import get_email_service, get_team_billing_enabled, get_unit_of_work
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.email_service import IEmailService


class RecordingEmailService(IEmailService):
    """Keeps every signup email in memory instead of sending it"""

    def __init__(self):
        self.sent: List[dict] = []

    async def send_signup_to_organization_email(
        self,
        to: str,
        username_or_email: str,
        org_name: str,
        org_id: UUID,
        locale: Optional[str] = None,
    ) -> bool:
        self.sent.append(
            {
                "to": to,
                "username_or_email": username_or_email,
                "org_name": org_name,
                "org_id": str(org_id),
                "locale": locale,
            }
        )
        return True


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
def admin_headers():
    from config import ApplicationConfig

    return {"X-Admin-API-Key": ApplicationConfig.ADMIN_API_KEY}


@pytest_asyncio.fixture
def email_service():
    return RecordingEmailService()


@pytest_asyncio.fixture
def team_billing_enabled():
    return False


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session, email_service, team_billing_enabled):
    from httpx import ASGITransport
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_email_service] = lambda: email_service
    app.dependency_overrides[get_team_billing_enabled] = lambda: team_billing_enabled

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
