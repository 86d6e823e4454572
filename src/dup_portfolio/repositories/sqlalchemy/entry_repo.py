"""SQLAlchemy implementation of EntryRepository."""

from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from dup_portfolio.core.timezone import now_eastern
from dup_portfolio.domain.models import RawEntry, ValuedEntry
from dup_portfolio.domain.valuation import valuate
from dup_portfolio.repositories.sqlalchemy.orm_models import EntryORM


class SqlAlchemyEntryRepository:
    """SQLAlchemy-backed entry repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, entry: ValuedEntry) -> ValuedEntry:
        """Persist a new entry; the database assigns ``entry_id``."""
        orm_entry = EntryORM(
            date=entry.date,
            stock=entry.stock,
            quantity=entry.quantity,
            buying_price=entry.buying_price,
            current_price=entry.current_price,
            total_invested=entry.total_invested,
            total_current=entry.total_current,
            pnl=entry.pnl,
            created_at_est=entry.created_at_est or now_eastern(),
        )
        self._db.add(orm_entry)
        self._db.commit()
        self._db.refresh(orm_entry)
        return self._to_domain(orm_entry)

    def get_by_id(self, entry_id: int) -> Optional[ValuedEntry]:
        """Retrieve entry by ID."""
        orm_entry = self._db.query(EntryORM).filter(
            EntryORM.entry_id == entry_id
        ).first()
        return self._to_domain(orm_entry) if orm_entry else None

    def list_all(self) -> list[ValuedEntry]:
        """List all entries in insertion order."""
        orm_entries = self._db.query(EntryORM).order_by(EntryORM.entry_id).all()
        return [self._to_domain(e) for e in orm_entries]

    def count(self) -> int:
        """Return the number of stored entries."""
        return self._db.query(func.count(EntryORM.entry_id)).scalar() or 0

    @staticmethod
    def _to_domain(orm: EntryORM) -> ValuedEntry:
        """
        Convert ORM model to domain model.

        Derived figures are recomputed from the stored inputs rather than
        read back, so pnl == total_current - total_invested always holds.
        """
        raw = RawEntry(
            date=orm.date,
            stock=orm.stock,
            quantity=orm.quantity,
            buying_price=orm.buying_price,
            current_price=orm.current_price,
        )
        return valuate(raw).with_identity(orm.entry_id, orm.created_at_est)
