"""
Pytest configuration and fixtures for portfolio ledger tests.

This module provides:
- In-memory SQLite database fixtures
- Factory helpers for raw and valued entries
- Service and repository fixtures
- FastAPI test client bound to the test database
"""

from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional, Union

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from dup_portfolio.main import app
from dup_portfolio.config.settings import Settings, set_settings, reset_settings
from dup_portfolio.repositories.sqlalchemy.database import Base, get_db, reset_database
# Import ORM models to register them with Base before creating tables
from dup_portfolio.repositories.sqlalchemy import orm_models  # noqa: F401
from dup_portfolio.repositories.sqlalchemy import (
    SqlAlchemyEntryRepository,
    SqlAlchemySettingsRepository,
)
from dup_portfolio.services import (
    EntryService,
    EntryCreate,
    SettingsService,
    PortfolioService,
)
from dup_portfolio.csv import CsvImporter, CsvExporter, CsvTemplateGenerator
from dup_portfolio.domain.models import RawEntry, ValuedEntry
from dup_portfolio.domain.valuation import valuate
from dup_portfolio.core.timezone import EASTERN_TZ

Number = Union[Decimal, int, str]


# =============================================================================
# TIME HELPERS
# =============================================================================


def eastern_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create a localized datetime in US/Eastern timezone."""
    return EASTERN_TZ.localize(datetime(year, month, day, hour, minute, second))


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def entry_repo(test_session) -> SqlAlchemyEntryRepository:
    """Provide test EntryRepository."""
    return SqlAlchemyEntryRepository(test_session)


@pytest.fixture
def settings_repo(test_session) -> SqlAlchemySettingsRepository:
    """Provide test SettingsRepository."""
    return SqlAlchemySettingsRepository(test_session)


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def entry_service(entry_repo) -> EntryService:
    """Provide test EntryService."""
    return EntryService(entry_repo=entry_repo)


@pytest.fixture
def settings_service(settings_repo) -> SettingsService:
    """Provide test SettingsService."""
    return SettingsService(settings_repo=settings_repo)


@pytest.fixture
def portfolio_service(entry_repo, settings_repo) -> PortfolioService:
    """Provide test PortfolioService with view caching enabled."""
    return PortfolioService(
        entry_repo=entry_repo,
        settings_repo=settings_repo,
        cache_enabled=True,
    )


@pytest.fixture
def csv_importer(entry_service) -> CsvImporter:
    """Provide test CsvImporter."""
    return CsvImporter(entry_service=entry_service)


@pytest.fixture
def csv_exporter() -> CsvExporter:
    """Provide test CsvExporter."""
    return CsvExporter()


@pytest.fixture
def csv_template_generator() -> CsvTemplateGenerator:
    """Provide test CsvTemplateGenerator."""
    return CsvTemplateGenerator()


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def entry_factory(entry_service) -> Callable[..., int]:
    """Factory for adding entries through the service; returns the new ID."""

    def _add_entry(
        date: str = "2024-01-01",
        stock: str = "AAA",
        quantity: Number = "10",
        buying_price: Number = "100",
        current_price: Number = "110",
    ) -> int:
        return entry_service.add_entry(
            EntryCreate(
                date=date,
                stock=stock,
                quantity=quantity,
                buying_price=buying_price,
                current_price=current_price,
            )
        )

    return _add_entry


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(test_engine) -> TestClient:
    """Provide FastAPI test client with test database."""
    # Keep the app's own startup away from the real data directory
    set_settings(Settings(database_url="sqlite://"))
    reset_database()

    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    reset_database()
    reset_settings()


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def make_entry(
    date: str,
    pnl: Optional[Number] = None,
    stock: str = "AAA",
    quantity: Number = "1",
    buying_price: Number = "100",
    current_price: Optional[Number] = None,
    entry_id: Optional[int] = None,
) -> ValuedEntry:
    """
    Build a valued entry directly through the valuator.

    Passing ``pnl`` picks a current price that yields exactly that P&L on
    one unit bought at ``buying_price``.
    """
    buying = Decimal(str(buying_price))
    if current_price is None:
        current_price = buying + Decimal(str(pnl if pnl is not None else 0))
    valued = valuate(
        RawEntry(
            date=date,
            stock=stock,
            quantity=Decimal(str(quantity)),
            buying_price=buying,
            current_price=Decimal(str(current_price)),
        )
    )
    if entry_id is not None:
        return valued.with_identity(entry_id)
    return valued

