"""
Pytest configuration and fixtures for testing.
"""
import os

# Settings are read at import time, so the environment must be prepared first.
os.environ.setdefault("JWT_SECRET", "test-secret-key")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
import pytest_asyncio
from typing import AsyncGenerator
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import NullPool

from app.main import app
from app.db.session import Base, get_session
from app.core.security import hash_password, create_access_token
from app.db.models import User, RoleEnum, Event, Question
from datetime import datetime, timedelta, timezone


# Test database URL - use environment variable to point at a real server
TEST_DATABASE_URL = os.getenv(
    "TEST_DATABASE_URL",
    "sqlite+aiosqlite:///./test_entalk.db"
)

test_engine = create_async_engine(
    TEST_DATABASE_URL,
    poolclass=NullPool,  # Disable connection pooling for tests
    echo=False,
)

TestSessionLocal = async_sessionmaker(
    test_engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Create a fresh database for each test.
    Tables are dropped and recreated around every test.
    """
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async with TestSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Create an async HTTP client for testing API endpoints.
    Overrides the database session dependency.
    """
    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession) -> User:
    """Create a test user with 'user' role."""
    user = User(
        name="Test User",
        email="testuser@example.com",
        hashed_password=hash_password("secret123"),
        role=RoleEnum.user
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest_asyncio.fixture
async def test_organizer(db_session: AsyncSession) -> User:
    """Create a test user with 'organizer' role."""
    user = User(
        name="Test Organizer",
        email="organizer@example.com",
        hashed_password=hash_password("secret123"),
        role=RoleEnum.organizer
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest.fixture
def user_token(test_user: User) -> str:
    """Generate a valid session token for test_user."""
    return create_access_token(test_user.id, test_user.role.value)


@pytest.fixture
def organizer_token(test_organizer: User) -> str:
    """Generate a valid session token for test_organizer."""
    return create_access_token(test_organizer.id, test_organizer.role.value)


@pytest_asyncio.fixture
async def test_event(db_session: AsyncSession, test_organizer: User) -> Event:
    """Create a test event."""
    event = Event(
        title="Conversation Club",
        description="Weekly English conversation practice",
        date=datetime.now(timezone.utc) + timedelta(days=7),
        venue_name="Cafe Moda",
        address="Kadikoy, Istanbul",
        capacity_maximum=20,
        price_amount=50.0,
        host_user_id=test_organizer.id,
        host_name=test_organizer.name,
        participants=[],
    )
    db_session.add(event)
    await db_session.commit()
    await db_session.refresh(event)
    return event


@pytest_asyncio.fixture
async def test_question(db_session: AsyncSession, test_user: User, test_event: Event) -> Question:
    """Create a question attached to test_event."""
    question = Question(
        question="What brought you here today?",
        category="Icebreaker",
        difficulty=1,
        event_id=test_event.id,
        created_by=test_user.id,
    )
    db_session.add(question)
    await db_session.commit()
    await db_session.refresh(question)
    return question


@pytest.fixture(autouse=True)
def mock_password_hashing(monkeypatch):
    """
    Replace bcrypt with a cheap reversible scheme so tests stay fast.
    This fixture is autouse, so it applies to all tests automatically.
    """
    class MockPasswordContext:
        def hash(self, password: str) -> str:
            return f"$2b$10$mockedhash{password}"

        def verify(self, plain: str, hashed: str) -> bool:
            return hashed == f"$2b$10$mockedhash{plain}"

    from app.core import security
    monkeypatch.setattr(security, "pwd_context", MockPasswordContext())
