"""Application context for in-process service management.

Provides a centralized way to access all services without HTTP.
"""

from pathlib import Path
from typing import Optional

from dup_portfolio.config.settings import Settings, set_settings, get_settings
from dup_portfolio.repositories.sqlalchemy.database import (
    init_db_with_path,
    reset_database,
    get_session,
)
from dup_portfolio.repositories.sqlalchemy import (
    SqlAlchemyEntryRepository,
    SqlAlchemySettingsRepository,
)
from dup_portfolio.services import EntryService, SettingsService, PortfolioService
from dup_portfolio.csv import CsvImporter, CsvExporter, CsvTemplateGenerator


class AppContext:
    """
    Application context providing in-process access to all services.

    Services share one session; the portfolio service keeps its view cache
    across calls for the lifetime of the context.
    """

    def __init__(self, data_dir: Optional[Path] = None):
        self._data_dir = data_dir
        self._session = None
        self._initialized = False

        # Service instances (lazy initialized)
        self._entry_service: Optional[EntryService] = None
        self._settings_service: Optional[SettingsService] = None
        self._portfolio_service: Optional[PortfolioService] = None
        self._csv_importer: Optional[CsvImporter] = None

    def initialize(self, data_dir: Optional[Path] = None) -> None:
        """
        Initialize or reinitialize the application with a data directory.

        Args:
            data_dir: Data directory path. Uses default if not provided.
        """
        if data_dir:
            self._data_dir = data_dir

        settings = Settings(data_dir=self._data_dir)
        set_settings(settings)

        reset_database()
        init_db_with_path(settings.get_data_dir() / "portfolio.db")

        self._reset_services()
        self._session = None
        self._initialized = True

    @property
    def is_initialized(self) -> bool:
        """Check if context is initialized."""
        return self._initialized

    @property
    def data_dir(self) -> Path:
        """Get the current data directory."""
        return get_settings().get_data_dir()

    def _get_session(self):
        """Get or create database session."""
        if self._session is None:
            self._session = get_session()
        return self._session

    def _reset_services(self) -> None:
        self._entry_service = None
        self._settings_service = None
        self._portfolio_service = None
        self._csv_importer = None

    def refresh_session(self) -> None:
        """Refresh the database session (call after external changes)."""
        if self._session:
            self._session.close()
        self._session = get_session()
        self._reset_services()

    @property
    def entries(self) -> EntryService:
        """Get the EntryService instance."""
        if self._entry_service is None:
            self._entry_service = EntryService(
                entry_repo=SqlAlchemyEntryRepository(self._get_session()),
            )
        return self._entry_service

    @property
    def settings(self) -> SettingsService:
        """Get the SettingsService instance."""
        if self._settings_service is None:
            self._settings_service = SettingsService(
                settings_repo=SqlAlchemySettingsRepository(self._get_session()),
            )
        return self._settings_service

    @property
    def portfolio(self) -> PortfolioService:
        """Get the PortfolioService instance."""
        if self._portfolio_service is None:
            self._portfolio_service = PortfolioService(
                entry_repo=SqlAlchemyEntryRepository(self._get_session()),
                settings_repo=SqlAlchemySettingsRepository(self._get_session()),
                cache_enabled=get_settings().view_cache_enabled,
            )
        return self._portfolio_service

    @property
    def csv_importer(self) -> CsvImporter:
        """Get the CsvImporter instance."""
        if self._csv_importer is None:
            self._csv_importer = CsvImporter(entry_service=self.entries)
        return self._csv_importer

    @property
    def csv_exporter(self) -> CsvExporter:
        return CsvExporter()

    @property
    def csv_template(self) -> CsvTemplateGenerator:
        return CsvTemplateGenerator()

    def export_ledger(self, filename: str = "ledger.csv") -> Path:
        """Write the current ledger CSV into the export directory and return its path."""
        path = get_settings().get_export_dir() / filename
        self.csv_exporter.export_ledger(self.portfolio.get_view(), str(path))
        return path

    def close(self) -> None:
        """Clean up resources."""
        if self._session:
            self._session.close()
            self._session = None


# Global application context (singleton for in-process use)
_app_context: Optional[AppContext] = None


def get_app_context() -> AppContext:
    """Get or create the global application context."""
    global _app_context
    if _app_context is None:
        _app_context = AppContext()
    return _app_context


def set_app_context(context: AppContext) -> None:
    """Set the global application context."""
    global _app_context
    _app_context = context
