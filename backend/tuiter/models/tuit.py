"""
Tuiter Backend — Tuit SQLAlchemy Model
========================================

What:  ORM model for the `tuits` table (posts).

Query Patterns:
    - All tuits:        ORDER BY created_at
    - Tuits of a user:  WHERE owner_id = :uid ORDER BY created_at
      → idx_tuits_owner_id

owner_id is a plain string, not a foreign key: tuits may be created for an
owner id that has no users row.
"""

from sqlalchemy import Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from tuiter.database import Base
from tuiter.models.mixins import DocumentMixin


class Tuit(DocumentMixin, Base):
    """A short post authored by a user."""

    __tablename__ = "tuits"

    owner_id: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        comment="Id of the authoring user",
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)

    __table_args__ = (
        Index("idx_tuits_owner_id", "owner_id"),
    )

    def __repr__(self) -> str:
        return f"<Tuit(id={self.id}, owner_id='{self.owner_id}')>"
