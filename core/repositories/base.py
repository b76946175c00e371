"""Base repository class with common CRUD operations."""

from typing import Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.db import Base

T = TypeVar("T", bound=Base)

# Signed 64-bit range of the primary key columns
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


class BaseRepository(Generic[T]):
    """
    Base repository providing the generic persistence operations.

    Repositories flush but never commit; the owning session scope decides
    whether the unit of work is committed or rolled back.

    Usage:
        class ProfileRepository(BaseRepository[Profile]):
            model = Profile

        repo = ProfileRepository(session)
        profile = repo.get_by_id(1)
    """

    model: type[T]

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, id: int) -> T | None:
        """Get a single record by ID. Ids outside the key range match nothing."""
        if not MIN_ID <= id <= MAX_ID:
            return None
        return self.session.get(self.model, id)

    def get_all(self) -> list[T]:
        """Get all records, ordered by primary key."""
        stmt = select(self.model).order_by(self.model.id)  # type: ignore[attr-defined]
        return list(self.session.scalars(stmt).all())

    def exists(self, id: int) -> bool:
        """Check if a record exists."""
        if not MIN_ID <= id <= MAX_ID:
            return False
        result = self.session.query(
            self.session.query(self.model).filter(self.model.id == id).exists()  # type: ignore[attr-defined]
        ).scalar()
        return bool(result) if result is not None else False

    def save(self, instance: T) -> T:
        """
        Persist an instance.

        A transient instance is inserted and gets its generated id on flush;
        a persistent one has its pending changes written as an update.
        """
        self.session.add(instance)
        self.session.flush()
        return instance

    def delete_by_id(self, id: int) -> bool:
        """Delete a record by ID. Returns False when nothing was deleted."""
        instance = self.get_by_id(id)
        if instance is None:
            return False
        self.session.delete(instance)
        self.session.flush()
        return True

    def count(self) -> int:
        """Get the number of records."""
        return self.session.query(self.model).count()
