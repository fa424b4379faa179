"""
Fixtures for integration tests.

Provides:
- In-memory SQLite database with the schema created
- Seeded partners (active with a limit, active with a cancelled limit, inactive)
- Test client for the FastAPI app bound to the test session
"""

from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from promocode_factory.main import app
from promocode_factory.domain.entities import Partner, PartnerPromoCodeLimit
from promocode_factory.infrastructure.database import Base, get_db_session
from promocode_factory.infrastructure.repositories import PostgresPartnerRepository


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(test_engine) -> async_sessionmaker:
    return async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def test_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async with session_factory() as session:
        yield session


# =============================================================================
# Seed Data Fixtures
# =============================================================================

def make_partner(
    name: str,
    is_active: bool = True,
    issued: int = 10,
    limit: int | None = 50,
    cancelled: bool = False,
) -> Partner:
    now = datetime.now(timezone.utc)
    partner = Partner(
        name=name,
        is_active=is_active,
        number_issued_promo_codes=issued,
    )
    if limit is not None:
        partner.limits.append(
            PartnerPromoCodeLimit(
                partner_id=partner.id,
                limit=limit,
                create_date=now - timedelta(days=10),
                end_date=now + timedelta(days=10),
                cancel_date=now - timedelta(days=5) if cancelled else None,
            )
        )
    return partner


@pytest_asyncio.fixture
async def active_partner(test_session: AsyncSession) -> Partner:
    """Active partner with one active limit of 50 and 10 issued codes."""
    partner = make_partner("Active Partner")
    await PostgresPartnerRepository(test_session).add(partner)
    await test_session.commit()
    return partner


@pytest_asyncio.fixture
async def cancelled_limit_partner(test_session: AsyncSession) -> Partner:
    """Active partner whose only limit was cancelled five days ago."""
    partner = make_partner("Cancelled Limit Partner", cancelled=True)
    await PostgresPartnerRepository(test_session).add(partner)
    await test_session.commit()
    return partner


@pytest_asyncio.fixture
async def inactive_partner(test_session: AsyncSession) -> Partner:
    partner = make_partner("Inactive Partner", is_active=False)
    await PostgresPartnerRepository(test_session).add(partner)
    await test_session.commit()
    return partner


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(test_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client bound to the in-memory database.

    Each request commits like the production session scope does.
    """
    async def override_get_db_session():
        try:
            yield test_session
            await test_session.commit()
        except Exception:
            await test_session.rollback()
            raise

    app.dependency_overrides[get_db_session] = override_get_db_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client_with_failing_commit(
    test_session: AsyncSession,
    active_partner: Partner,
    monkeypatch: pytest.MonkeyPatch,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client whose database commits always fail.

    Seeded partners are committed before commits start failing.
    Server errors are returned as responses instead of being re-raised.
    """
    async def failing_commit():
        raise ConnectionError("database unavailable")

    monkeypatch.setattr(test_session, "commit", failing_commit)

    async def override_get_db_session():
        try:
            yield test_session
        except Exception:
            await test_session.rollback()
            raise

    app.dependency_overrides[get_db_session] = override_get_db_session

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
