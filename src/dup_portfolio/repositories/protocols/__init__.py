"""Repository protocol definitions (interfaces)."""

from dup_portfolio.repositories.protocols.entry_repo import EntryRepository
from dup_portfolio.repositories.protocols.settings_repo import SettingsRepository

__all__ = [
    "EntryRepository",
    "SettingsRepository",
]
