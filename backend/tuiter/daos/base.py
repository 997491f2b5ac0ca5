"""
Tuiter Backend — DAO Base Classes
===================================

What:  Shared plumbing for every data-access object, plus the abstract
       capability set the owned-resource controllers consume.
How:   A DAO holds the application's session factory and opens one
       transactional session per operation (see database.session_scope).
       Any unexpected error inside that session is logged and re-raised as
       DatabaseError, which the global handler answers with a structured 500.

Capability set (OwnedResourceDao):
    find_all()                      → list of records
    find_by_owner(owner_id)         → list of records, [] when none match
    find_by_id(record_id)           → record or None
    create(owner_id, payload)       → created record
    update_by_id(record_id, payload)→ UpdateStatus
    delete_by_id(record_id)         → DeleteStatus
"""

import logging
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from tuiter.database import Base, session_scope
from tuiter.exceptions import DatabaseError, TuiterError
from tuiter.schemas.common import DeleteStatus, UpdateStatus

logger = logging.getLogger(__name__)


class BaseDao:
    """
    Session handling and generic single-table queries.

    Subclasses set `model` (the ORM class) and `resource` (a name used in
    log lines and error context).
    """

    model: Type[Base]
    resource: str = "record"

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    @asynccontextmanager
    async def _session(self, operation: str) -> AsyncIterator[AsyncSession]:
        """
        Opens a transactional session for one DAO operation.

        Error translation:
            TuiterError subclasses → propagate unchanged
            anything else          → DatabaseError (details logged, not returned)
        """
        try:
            async with session_scope(self._session_factory) as session:
                yield session
        except TuiterError:
            raise
        except Exception as e:
            logger.error(
                "Database error in %s.%s: %s", self.resource, operation, str(e),
                exc_info=True,
            )
            raise DatabaseError(
                context={
                    "resource": self.resource,
                    "operation": operation,
                    "error_type": type(e).__name__,
                },
            ) from e

    # ── Generic queries ───────────────────────────────────────────────────
    # Each helper runs inside the caller's session and returns ORM rows.

    async def _select_all(self, session: AsyncSession, *criteria: Any) -> List[Any]:
        query = select(self.model)
        if criteria:
            query = query.where(*criteria)
        query = query.order_by(self.model.created_at, self.model.id)
        result = await session.execute(query)
        return list(result.scalars().all())

    async def _select_first(self, session: AsyncSession, *criteria: Any) -> Optional[Any]:
        result = await session.execute(select(self.model).where(*criteria).limit(1))
        return result.scalar_one_or_none()

    async def _get_or_create(self, session: AsyncSession, **values: Any) -> Tuple[Any, bool]:
        """
        Returns the row matching all `values`, inserting it when absent.

        Used by the pair resources (likes, follows, bookmarks), where
        repeating a POST must not create a second row.
        """
        criteria = [getattr(self.model, field) == value for field, value in values.items()]
        row = await self._select_first(session, *criteria)
        if row is not None:
            return row, False
        row = self.model(**values)
        session.add(row)
        await session.flush()
        return row, True

    async def _apply_update(
        self,
        session: AsyncSession,
        record_id: str,
        values: Dict[str, Any],
    ) -> UpdateStatus:
        """
        Applies `values` to one row.

        matchedCount is 1 when the row exists; modifiedCount is 1 only when
        at least one stored value differs from the new one.
        """
        row = await session.get(self.model, record_id)
        if row is None:
            return UpdateStatus(matched_count=0, modified_count=0)

        changed = False
        for field, value in values.items():
            if getattr(row, field) != value:
                setattr(row, field, value)
                changed = True
        if changed:
            await session.flush()
        return UpdateStatus(matched_count=1, modified_count=int(changed))

    async def _delete_where(self, session: AsyncSession, *criteria: Any) -> DeleteStatus:
        result = await session.execute(delete(self.model).where(*criteria))
        return DeleteStatus(deleted_count=result.rowcount or 0)

    @staticmethod
    def _changes(payload: BaseModel) -> Dict[str, Any]:
        """Fields the client actually sent, keyed by model attribute name."""
        return payload.model_dump(exclude_unset=True)


class OwnedResourceDao(ABC):
    """
    Abstract capability set for a resource owned by a user.

    Contract:
        - Every method performs exactly one persistence operation.
        - Unknown ids are not errors: reads return None / [], mutations
          report zero affected records.
        - Owner ids are not checked against the users table.
        - Persistence failures surface as DatabaseError.
    """

    @abstractmethod
    async def find_all(self) -> List[Any]:
        """All records, oldest first."""
        ...

    @abstractmethod
    async def find_by_owner(self, owner_id: str) -> List[Any]:
        """Records whose owner reference equals owner_id."""
        ...

    @abstractmethod
    async def find_by_id(self, record_id: str) -> Optional[Any]:
        """The matching record, or None."""
        ...

    @abstractmethod
    async def create(self, owner_id: str, payload: BaseModel) -> Any:
        """Inserts a record owned by owner_id and returns it with its new id."""
        ...

    @abstractmethod
    async def update_by_id(self, record_id: str, payload: BaseModel) -> UpdateStatus:
        """Applies the fields present in payload to the record."""
        ...

    @abstractmethod
    async def delete_by_id(self, record_id: str) -> DeleteStatus:
        """Removes the record."""
        ...
