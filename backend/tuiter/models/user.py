"""
Tuiter Backend — User SQLAlchemy Model
========================================

What:  ORM model for the `users` table.
Who:   UserDao for CRUD; every other resource references users by id.

Table Design:
    - username is unique (enforced by index and checked by UserDao)
    - password is stored as given and never serialized back to clients
    - account_type is a short enum-like string: PERSONAL, ACADEMIC, PROFESSIONAL
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from tuiter.database import Base
from tuiter.models.mixins import DocumentMixin, UTCDateTime, utcnow


class User(DocumentMixin, Base):
    """A registered Tuiter account."""

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(64), nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    first_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    last_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    biography: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    account_type: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="PERSONAL",
        comment="PERSONAL, ACADEMIC or PROFESSIONAL",
    )
    joined: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=utcnow,
    )

    __table_args__ = (
        Index("uq_users_username", "username", unique=True),
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"
