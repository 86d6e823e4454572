"""SQLAlchemy ORM model definitions."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
)
from sqlalchemy.types import TypeDecorator

from dup_portfolio.repositories.sqlalchemy.database import Base


class DecimalText(TypeDecorator):
    """
    Decimal stored as its exact text.

    SQLite keeps NUMERIC columns as binary floats, so quantities and prices
    are written with ``str(Decimal)`` and parsed back verbatim.
    """

    impl = String(96)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return str(Decimal(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(value)


class EntryORM(Base):
    """SQLAlchemy model for a valued ledger entry."""

    __tablename__ = "entries"

    # Autoincrement identity doubles as insertion order
    entry_id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(String(64), nullable=False)
    stock = Column(String(64), nullable=False)
    quantity = Column(DecimalText, nullable=False)
    buying_price = Column(DecimalText, nullable=False)
    current_price = Column(DecimalText, nullable=False)
    total_invested = Column(DecimalText, nullable=False)
    total_current = Column(DecimalText, nullable=False)
    pnl = Column(DecimalText, nullable=False)
    created_at_est = Column(DateTime, nullable=False, default=datetime.utcnow)


class PortfolioSettingsORM(Base):
    """SQLAlchemy model for the singleton portfolio settings row."""

    __tablename__ = "portfolio_settings"

    settings_id = Column(Integer, primary_key=True, autoincrement=False)
    starting_amount = Column(DecimalText, default=Decimal("0"), nullable=False)
    updated_at_est = Column(DateTime, nullable=True)
