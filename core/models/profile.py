"""
Profile SQLAlchemy model.
"""

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from core.db import Base


class Profile(Base):
    """
    Named, iconed user profile.

    Attributes:
        id: Auto-increment primary key, assigned on insert
        name: Display name; required on creation, nullable in the column
        icon: Free-form icon identifier
    """

    __tablename__ = "profiles"
    # Never reuse ids of deleted rows on SQLite
    __table_args__ = {"sqlite_autoincrement": True}

    # BIGINT on PostgreSQL; SQLite needs INTEGER PRIMARY KEY for AUTOINCREMENT
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True
    )
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    icon: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<Profile id={self.id} name={self.name!r}>"
