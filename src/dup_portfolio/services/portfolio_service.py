"""Portfolio service: single consistent read + aggregation."""

from decimal import Decimal
from typing import Optional

from dup_portfolio.domain.models import PortfolioSettings, ValuedEntry
from dup_portfolio.domain.views import PortfolioView
from dup_portfolio.repositories.protocols import EntryRepository, SettingsRepository
from dup_portfolio.services.ledger_aggregator import aggregate


class PortfolioService:
    """
    Service producing the portfolio view.

    Reads all entries and the settings record once per refresh, then hands
    them by value to the aggregator. Optionally memoizes the last view for
    an identical (entries, starting amount) snapshot.
    """

    def __init__(
        self,
        entry_repo: EntryRepository,
        settings_repo: SettingsRepository,
        cache_enabled: bool = True,
    ):
        self._entry_repo = entry_repo
        self._settings_repo = settings_repo
        self._cache_enabled = cache_enabled
        self._cache_key: Optional[tuple[tuple[ValuedEntry, ...], Decimal]] = None
        self._cached_view: Optional[PortfolioView] = None

    def fetch_all(self) -> tuple[list[ValuedEntry], PortfolioSettings]:
        """Return all entries (insertion order) and settings, defaulting if unset."""
        entries = self._entry_repo.list_all()
        settings = self._settings_repo.get() or PortfolioSettings()
        return entries, settings

    def get_view(self) -> PortfolioView:
        """Read current state and aggregate it into a fresh view."""
        entries, settings = self.fetch_all()
        if not self._cache_enabled:
            return aggregate(entries, settings.starting_amount)

        key = (tuple(entries), settings.starting_amount)
        if self._cached_view is None or key != self._cache_key:
            self._cached_view = aggregate(entries, settings.starting_amount)
            self._cache_key = key
        return self._cached_view
