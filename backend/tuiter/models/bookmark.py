"""
Tuiter Backend — Bookmark SQLAlchemy Model
============================================

What:  ORM model for the `bookmarks` table: user `bookmarked_by` saved tuit
       `bookmarked_tuit`. One row per (tuit, user) pair.
"""

from sqlalchemy import Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from tuiter.database import Base
from tuiter.models.mixins import DocumentMixin


class Bookmark(DocumentMixin, Base):
    __tablename__ = "bookmarks"

    bookmarked_tuit: Mapped[str] = mapped_column(String(64), nullable=False)
    bookmarked_by: Mapped[str] = mapped_column(String(64), nullable=False)

    __table_args__ = (
        UniqueConstraint("bookmarked_tuit", "bookmarked_by", name="uq_bookmarks_pair"),
        Index("idx_bookmarks_bookmarked_by", "bookmarked_by"),
    )

    def __repr__(self) -> str:
        return f"<Bookmark(tuit='{self.bookmarked_tuit}', by='{self.bookmarked_by}')>"
