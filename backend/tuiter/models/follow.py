"""
Tuiter Backend — Follow SQLAlchemy Model
==========================================

What:  ORM model for the `follows` table: `user_following` follows
       `user_followed`. One row per ordered pair.
"""

from sqlalchemy import Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from tuiter.database import Base
from tuiter.models.mixins import DocumentMixin


class Follow(DocumentMixin, Base):
    __tablename__ = "follows"

    user_following: Mapped[str] = mapped_column(String(64), nullable=False)
    user_followed: Mapped[str] = mapped_column(String(64), nullable=False)

    __table_args__ = (
        UniqueConstraint("user_following", "user_followed", name="uq_follows_pair"),
        Index("idx_follows_user_followed", "user_followed"),
    )

    def __repr__(self) -> str:
        return f"<Follow('{self.user_following}' -> '{self.user_followed}')>"
