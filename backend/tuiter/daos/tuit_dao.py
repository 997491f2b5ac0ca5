"""
Tuiter Backend — Tuit DAO
==========================

What:  Persistence for tuits, implementing the OwnedResourceDao capability set.
Who:   TuitController.

Query plan:
    find_all          SELECT * FROM tuits ORDER BY created_at
    find_by_owner     SELECT * FROM tuits WHERE owner_id = :uid ORDER BY created_at
    find_by_id        SELECT * FROM tuits WHERE id = :tid
    create            INSERT INTO tuits (id, owner_id, text, created_at)
    update_by_id      SELECT by primary key, then UPDATE changed columns
    delete_by_id      DELETE FROM tuits WHERE id = :tid
"""

import logging
from typing import List, Optional

from tuiter.daos.base import BaseDao, OwnedResourceDao
from tuiter.models.tuit import Tuit
from tuiter.schemas.common import DeleteStatus, UpdateStatus
from tuiter.schemas.tuit import TuitCreate, TuitResponse, TuitUpdate

logger = logging.getLogger(__name__)


class TuitDao(BaseDao, OwnedResourceDao):
    """CRUD operations on the `tuits` table."""

    model = Tuit
    resource = "tuit"

    async def find_all(self) -> List[TuitResponse]:
        async with self._session("find_all") as session:
            rows = await self._select_all(session)
            return [TuitResponse.model_validate(row) for row in rows]

    async def find_by_owner(self, owner_id: str) -> List[TuitResponse]:
        async with self._session("find_by_owner") as session:
            rows = await self._select_all(session, Tuit.owner_id == owner_id)
            return [TuitResponse.model_validate(row) for row in rows]

    async def find_by_id(self, record_id: str) -> Optional[TuitResponse]:
        async with self._session("find_by_id") as session:
            row = await session.get(Tuit, record_id)
            return TuitResponse.model_validate(row) if row is not None else None

    async def create(self, owner_id: str, payload: TuitCreate) -> TuitResponse:
        async with self._session("create") as session:
            tuit = Tuit(owner_id=owner_id, text=payload.text)
            session.add(tuit)
            # Flush assigns id and created_at before the response is built
            await session.flush()
            logger.info("Tuit %s created by %s", tuit.id, owner_id)
            return TuitResponse.model_validate(tuit)

    async def update_by_id(self, record_id: str, payload: TuitUpdate) -> UpdateStatus:
        async with self._session("update_by_id") as session:
            status = await self._apply_update(session, record_id, self._changes(payload))
        logger.info(
            "Tuit %s updated: matched=%d modified=%d",
            record_id, status.matched_count, status.modified_count,
        )
        return status

    async def delete_by_id(self, record_id: str) -> DeleteStatus:
        async with self._session("delete_by_id") as session:
            status = await self._delete_where(session, Tuit.id == record_id)
        logger.info("Tuit %s deleted: count=%d", record_id, status.deleted_count)
        return status
