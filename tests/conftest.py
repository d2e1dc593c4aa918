"""
Pytest configuration and shared fixtures.

Database tests run against an in-memory SQLite database (aiosqlite) so the
suite needs no running Postgres.
"""

import os

# app.db.session builds its engine at import time
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.permissions import GlobalRoles
from app.db.base import Base
from app.models import Company, CompanyUser, Investor, InvestorAccount, InvestorUser, Profile


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests, no external deps")
    config.addinivalue_line("markers", "db: uses the in-memory SQLite database")
    config.addinivalue_line("markers", "api: drives the FastAPI app over ASGI")


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # let SQLAlchemy drive BEGIN so SAVEPOINTs work with pysqlite
    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_maker):
    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture
async def seeded(session_maker):
    """
    Two source companies, one catalog target and three callers.

    - co1 / co2: companies that import investors
    - c1 "MarshYellow Group", c2 "Foo Bar Srl", c3 "Foo Bar SpA": catalog
    - admin: global role; member: seat on co1 and c1 only;
      disabled: inactive admin; portal: investor account on co2
    """
    async with session_maker() as session:
        session.add_all([
            Company(id="co1", name="Source One"),
            Company(id="co2", name="Source Two"),
            Company(id="c1", name="MarshYellow Group"),
            Company(id="c2", name="Foo Bar Srl"),
            Company(id="c3", name="Foo Bar SpA"),
        ])
        session.add_all([
            Profile(id="admin", email="admin@test.com", role_global=GlobalRoles.ADMIN, is_active=True),
            Profile(id="member", email="member@test.com", is_active=True),
            Profile(id="disabled", email="disabled@test.com", role_global=GlobalRoles.ADMIN, is_active=False),
            Profile(id="portal", email="portal@test.com", is_active=True),
        ])
        await session.flush()

        session.add_all([
            Investor(id="i1", company_id="co1", full_name="Anna Rossi", client_name="MarshYellow"),
            Investor(id="i2", company_id="co1", full_name="Luca Bianchi", client_name="Foo Bar"),
            Investor(
                id="i3",
                company_id="co1",
                full_name=None,
                client_name="Something Else",
                client_company_id="c2",
                client_company_match_type="manual",
            ),
            Investor(id="i4", company_id="co1", full_name="No Client", client_name=""),
            Investor(id="i5", company_id="co1", full_name="Unknown Co", client_name="Zzyzx Holdings"),
            Investor(id="i9", company_id="co2", full_name="Portal Investor", client_name="Foo Bar Srl"),
        ])
        await session.flush()

        session.add_all([
            CompanyUser(user_id="member", company_id="co1", is_active=True),
            CompanyUser(user_id="member", company_id="c1", is_active=True),
            CompanyUser(user_id="member", company_id="c2", is_active=False),
            InvestorUser(user_id="portal", investor_id="i9"),
            InvestorAccount(investor_id="i9", company_id="co2", is_active=True),
        ])
        await session.commit()

    return session_maker
