"""Repository layer - data access abstractions and implementations."""

from dup_portfolio.repositories.protocols import (
    EntryRepository,
    SettingsRepository,
)

__all__ = [
    "EntryRepository",
    "SettingsRepository",
]
