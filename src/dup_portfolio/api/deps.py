"""Dependency injection for FastAPI."""

from fastapi import Depends
from sqlalchemy.orm import Session

from dup_portfolio.config.settings import get_settings
from dup_portfolio.repositories.sqlalchemy.database import get_db
from dup_portfolio.repositories.sqlalchemy import (
    SqlAlchemyEntryRepository,
    SqlAlchemySettingsRepository,
)
from dup_portfolio.services import (
    EntryService,
    SettingsService,
    PortfolioService,
)
from dup_portfolio.csv import CsvImporter, CsvExporter, CsvTemplateGenerator


def get_entry_repo(db: Session = Depends(get_db)) -> SqlAlchemyEntryRepository:
    """Provide EntryRepository instance."""
    return SqlAlchemyEntryRepository(db)


def get_settings_repo(db: Session = Depends(get_db)) -> SqlAlchemySettingsRepository:
    """Provide SettingsRepository instance."""
    return SqlAlchemySettingsRepository(db)


def get_entry_service(
    entry_repo: SqlAlchemyEntryRepository = Depends(get_entry_repo),
) -> EntryService:
    """Provide EntryService instance."""
    return EntryService(entry_repo=entry_repo)


def get_settings_service(
    settings_repo: SqlAlchemySettingsRepository = Depends(get_settings_repo),
) -> SettingsService:
    """Provide SettingsService instance."""
    return SettingsService(settings_repo=settings_repo)


def get_portfolio_service(
    entry_repo: SqlAlchemyEntryRepository = Depends(get_entry_repo),
    settings_repo: SqlAlchemySettingsRepository = Depends(get_settings_repo),
) -> PortfolioService:
    """Provide PortfolioService instance."""
    return PortfolioService(
        entry_repo=entry_repo,
        settings_repo=settings_repo,
        cache_enabled=get_settings().view_cache_enabled,
    )


def get_csv_importer(
    entry_service: EntryService = Depends(get_entry_service),
) -> CsvImporter:
    """Provide CsvImporter instance."""
    return CsvImporter(entry_service=entry_service)


def get_csv_exporter() -> CsvExporter:
    """Provide CsvExporter instance."""
    return CsvExporter()


def get_csv_template_generator() -> CsvTemplateGenerator:
    """Provide CsvTemplateGenerator instance."""
    return CsvTemplateGenerator()
