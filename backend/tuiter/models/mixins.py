"""
Tuiter Backend — Shared Model Columns
======================================

What:  Columns every Tuiter table carries.

    id          Opaque string identifier (UUID4 text), generated in Python so
                it is known as soon as the object is flushed.
    created_at  UTC insertion time; list queries order by it.

Timestamps use UTCDateTime: values are stored in UTC and always read back
timezone-aware, so a record serializes identically right after insert and
after a later SELECT (SQLite hands back naive datetimes).
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import TypeDecorator


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UTCDateTime(TypeDecorator):
    """DateTime(timezone=True) that never returns a naive value."""

    impl = DateTime(timezone=True)
    cache_ok = True

    @staticmethod
    def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def process_bind_param(self, value, dialect):
        return self._as_utc(value)

    def process_result_value(self, value, dialect):
        return self._as_utc(value)


class DocumentMixin:
    """Primary key and insertion timestamp shared by all resource tables."""

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=new_id,
        comment="Opaque record identifier",
    )

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=utcnow,
        comment="When this record was inserted (UTC)",
    )
