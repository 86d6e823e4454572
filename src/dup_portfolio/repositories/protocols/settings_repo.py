"""Portfolio settings repository protocol."""

from typing import Protocol, Optional

from dup_portfolio.domain.models import PortfolioSettings


class SettingsRepository(Protocol):
    """Interface for the single-row portfolio settings record."""

    def get(self) -> Optional[PortfolioSettings]:
        """Return the stored settings, or None if never saved."""
        ...

    def replace(self, settings: PortfolioSettings) -> PortfolioSettings:
        """Create the settings row if absent, otherwise replace it."""
        ...
