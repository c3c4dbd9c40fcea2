import os

# Settings are read at import time
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("SEED_SERVICES_ON_STARTUP", "false")

from datetime import datetime, timedelta, timezone

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession

from autoservice.database import Base, get_db
from autoservice.dependencies import get_ai_config, get_generator_factory
from autoservice.main import app
from autoservice.models import User, VehicleType
from autoservice.services.ai_provider import AIProviderConfig, TextGenerator
from autoservice.services.appointment_service import AppointmentService
from autoservice.services.catalog_service import CatalogService
from autoservice.services.auth_service import AuthService


class FakeGenerator(TextGenerator):
    """Stands in for the text provider; records every prompt it receives"""

    def __init__(self, text="Vehicle inspected. All systems in good working order.", error=None):
        self.text = text
        self.error = error
        self.prompts = []

    async def generate_content(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.text


AI_CONFIG = AIProviderConfig(api_key="test-key", model="test-model", timeout_seconds=5)

# Hashed once; bcrypt is slow
PASSWORD_HASH = AuthService.hash_password("password123")


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'autoservice.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
async def catalog(session_maker):
    """Seeded services keyed by name"""
    async with session_maker() as session:
        service = CatalogService(session)
        await service.seed_services()
        return {s.name: s for s in await service.list_services()}


async def _make_user(session_maker, email):
    async with session_maker() as session:
        user = User(email=email, password_hash=PASSWORD_HASH, full_name="Test User")
        session.add(user)
        await session.commit()
        return user.id


@pytest.fixture
async def user_id(session_maker):
    return await _make_user(session_maker, "owner@example.com")


@pytest.fixture
async def other_user_id(session_maker):
    return await _make_user(session_maker, "someone-else@example.com")


@pytest.fixture
def fake_generator():
    return FakeGenerator()


@pytest.fixture
def book(session_maker, catalog):
    """Book an appointment in its own session and return its id"""

    async def _book(owner_id, service_name="Regular Oil Change", days_ahead=2, **overrides):
        fields = dict(
            vehicle_type=VehicleType.CAR,
            vehicle_model="Toyota Corolla",
            vehicle_plate="ABC-1234",
            scheduled_date=datetime.now(timezone.utc) + timedelta(days=days_ahead),
        )
        fields.update(overrides)
        async with session_maker() as session:
            return await AppointmentService(session).create_appointment(
                owner_id, catalog[service_name].id, **fields
            )

    return _book


@pytest.fixture
async def client(session_maker, fake_generator):
    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_ai_config] = lambda: AI_CONFIG
    app.dependency_overrides[get_generator_factory] = lambda: (lambda config: fake_generator)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


def auth_headers(user_id):
    token = AuthService.create_access_token({"sub": str(user_id)})
    return {"Authorization": f"Bearer {token}"}
