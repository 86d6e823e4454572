"""Settings service for the portfolio starting amount."""

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from dup_portfolio.core.exceptions import ValidationError
from dup_portfolio.core.util import MAX_DECIMAL_PLACES, MAX_INTEGER_DIGITS, within_ledger_bounds
from dup_portfolio.domain.models import PortfolioSettings
from dup_portfolio.repositories.protocols import SettingsRepository

logger = logging.getLogger(__name__)


class SettingsService:
    """Reads and replaces the single portfolio settings record."""

    def __init__(self, settings_repo: SettingsRepository):
        self._settings_repo = settings_repo

    def get_settings(self) -> PortfolioSettings:
        """Return stored settings, or defaults (starting amount 0) if none exist."""
        return self._settings_repo.get() or PortfolioSettings()

    def stored_settings(self) -> Optional[PortfolioSettings]:
        """Return the stored record as-is; None if it was never saved."""
        return self._settings_repo.get()

    def replace_settings(self, starting_amount: Any) -> PortfolioSettings:
        """
        Replace the starting amount (upsert).

        Any sign is accepted; the value must be a finite number.
        """
        amount = self._to_amount(starting_amount)
        saved = self._settings_repo.replace(PortfolioSettings(starting_amount=amount))
        logger.info("Starting amount replaced: %s", saved.starting_amount)
        return saved

    @staticmethod
    def _to_amount(value: Any) -> Decimal:
        if value is None or isinstance(value, bool):
            raise ValidationError("starting_amount must be a number")
        try:
            amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
        except InvalidOperation:
            raise ValidationError(f"starting_amount must be a number: {value!r}")
        if not amount.is_finite():
            raise ValidationError("starting_amount must be finite")
        if not within_ledger_bounds(amount):
            raise ValidationError(
                f"starting_amount must be below 1e{MAX_INTEGER_DIGITS} "
                f"with at most {MAX_DECIMAL_PLACES} decimal places"
            )
        return amount
