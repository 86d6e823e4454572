"""SQLAlchemy implementation of SettingsRepository."""

from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from dup_portfolio.core.timezone import now_eastern
from dup_portfolio.domain.models import PortfolioSettings, SETTINGS_ROW_ID
from dup_portfolio.repositories.sqlalchemy.orm_models import PortfolioSettingsORM


class SqlAlchemySettingsRepository:
    """SQLAlchemy-backed singleton settings repository."""

    def __init__(self, db: Session):
        self._db = db

    def get(self) -> Optional[PortfolioSettings]:
        """Return the stored settings, or None if never saved."""
        orm_settings = self._get_row()
        return self._to_domain(orm_settings) if orm_settings else None

    def replace(self, settings: PortfolioSettings) -> PortfolioSettings:
        """Upsert the settings row (last write wins)."""
        orm_settings = self._get_row()

        if orm_settings:
            orm_settings.starting_amount = settings.starting_amount
            orm_settings.updated_at_est = now_eastern()
        else:
            orm_settings = PortfolioSettingsORM(
                settings_id=SETTINGS_ROW_ID,
                starting_amount=settings.starting_amount,
                updated_at_est=now_eastern(),
            )
            self._db.add(orm_settings)

        self._db.commit()
        self._db.refresh(orm_settings)
        return self._to_domain(orm_settings)

    def _get_row(self) -> Optional[PortfolioSettingsORM]:
        return (
            self._db.query(PortfolioSettingsORM)
            .filter(PortfolioSettingsORM.settings_id == SETTINGS_ROW_ID)
            .first()
        )

    @staticmethod
    def _to_domain(orm: PortfolioSettingsORM) -> PortfolioSettings:
        """Convert ORM settings to domain model."""
        return PortfolioSettings(
            starting_amount=orm.starting_amount
            if orm.starting_amount is not None
            else Decimal("0"),
        )
