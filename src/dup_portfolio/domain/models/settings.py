"""Portfolio settings domain model."""

from dataclasses import dataclass, field
from decimal import Decimal

SETTINGS_ROW_ID = 1


@dataclass(frozen=True)
class PortfolioSettings:
    """
    Single-row portfolio configuration.

    Updates replace the whole record; there is exactly one per store.
    """

    starting_amount: Decimal = field(default_factory=lambda: Decimal("0"))
