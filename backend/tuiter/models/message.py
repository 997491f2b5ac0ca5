"""
Tuiter Backend — Message SQLAlchemy Model
===========================================

What:  ORM model for the `messages` table: a direct message from one user
       to another.

Query Patterns:
    - Sent by a user:      WHERE from_user = :uid ORDER BY sent_on
    - Received by a user:  WHERE to_user = :uid ORDER BY sent_on
"""

from datetime import datetime

from sqlalchemy import Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from tuiter.database import Base
from tuiter.models.mixins import DocumentMixin, UTCDateTime, utcnow


class Message(DocumentMixin, Base):
    __tablename__ = "messages"

    message: Mapped[str] = mapped_column(Text, nullable=False)
    from_user: Mapped[str] = mapped_column(String(64), nullable=False)
    to_user: Mapped[str] = mapped_column(String(64), nullable=False)
    sent_on: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=utcnow,
    )

    __table_args__ = (
        Index("idx_messages_from_user", "from_user"),
        Index("idx_messages_to_user", "to_user"),
    )

    def __repr__(self) -> str:
        return f"<Message(id={self.id}, from='{self.from_user}', to='{self.to_user}')>"
