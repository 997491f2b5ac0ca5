"""
Tuiter Backend — Like SQLAlchemy Model
========================================

What:  ORM model for the `likes` table: user `liked_by` likes tuit `tuit_id`.
       One row per (tuit, user) pair.
"""

from sqlalchemy import Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from tuiter.database import Base
from tuiter.models.mixins import DocumentMixin


class Like(DocumentMixin, Base):
    __tablename__ = "likes"

    tuit_id: Mapped[str] = mapped_column(String(64), nullable=False)
    liked_by: Mapped[str] = mapped_column(String(64), nullable=False)

    __table_args__ = (
        UniqueConstraint("tuit_id", "liked_by", name="uq_likes_tuit_user"),
        Index("idx_likes_liked_by", "liked_by"),
    )

    def __repr__(self) -> str:
        return f"<Like(tuit_id='{self.tuit_id}', liked_by='{self.liked_by}')>"
