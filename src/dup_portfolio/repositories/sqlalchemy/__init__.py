"""SQLAlchemy repository implementations."""

from dup_portfolio.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    get_db,
    get_session,
    init_db,
    init_db_with_path,
    reset_database,
    Base,
)
from dup_portfolio.repositories.sqlalchemy.entry_repo import SqlAlchemyEntryRepository
from dup_portfolio.repositories.sqlalchemy.settings_repo import SqlAlchemySettingsRepository

__all__ = [
    "get_engine",
    "get_session_factory",
    "get_db",
    "get_session",
    "init_db",
    "init_db_with_path",
    "reset_database",
    "Base",
    "SqlAlchemyEntryRepository",
    "SqlAlchemySettingsRepository",
]
