"""
Tuiter Backend — Tuit Controller
==================================

What:  RESTful Web service API for the tuits resource.

Endpoints (registered in this order):
    GET    /tuits               all tuits
    GET    /tuits/{tid}         one tuit, or null
    GET    /users/{uid}/tuits   tuits authored by a user
    POST   /users/{uid}/tuits   create a tuit for a user
    PUT    /tuits/{tid}         modify a tuit
    DELETE /tuits/{tid}         remove a tuit

Not-found reads answer 200 with null unless STRICT_NOT_FOUND is set, in
which case they answer 404. Mutations on unknown ids report zero counts.
"""

from typing import List, Optional

from fastapi import APIRouter

from tuiter.controllers.base import ResourceController
from tuiter.daos.tuit_dao import TuitDao
from tuiter.exceptions import NotFoundError
from tuiter.schemas.common import DeleteStatus, UpdateStatus
from tuiter.schemas.tuit import TuitCreate, TuitResponse, TuitUpdate


class TuitController(ResourceController):
    """
    Delegates every tuit route to the TuitDao.

    Attributes:
        dao:    the TuitDao owned by the application context
        router: the APIRouter carrying the six tuit routes
    """

    dao_class = TuitDao
    tag = "Tuits"

    def _register_routes(self, router: APIRouter) -> None:
        router.add_api_route(
            "/tuits", self.find_all_tuits,
            methods=["GET"], response_model=List[TuitResponse],
            summary="Retrieve all tuits",
        )
        router.add_api_route(
            "/tuits/{tid}", self.find_tuit_by_id,
            methods=["GET"], response_model=Optional[TuitResponse],
            summary="Retrieve one tuit",
        )
        router.add_api_route(
            "/users/{uid}/tuits", self.find_tuits_by_user,
            methods=["GET"], response_model=List[TuitResponse],
            summary="Retrieve the tuits of a user",
        )
        router.add_api_route(
            "/users/{uid}/tuits", self.create_tuit_by_user,
            methods=["POST"], response_model=TuitResponse,
            summary="Create a tuit for a user",
        )
        router.add_api_route(
            "/tuits/{tid}", self.update_tuit,
            methods=["PUT"], response_model=UpdateStatus,
            summary="Modify a tuit",
        )
        router.add_api_route(
            "/tuits/{tid}", self.delete_tuit,
            methods=["DELETE"], response_model=DeleteStatus,
            summary="Remove a tuit",
        )

    async def find_all_tuits(self) -> List[TuitResponse]:
        """Returns every tuit as a JSON array."""
        return await self.dao.find_all()

    async def find_tuit_by_id(self, tid: str) -> Optional[TuitResponse]:
        """Returns the tuit whose primary key is `tid`."""
        tuit = await self.dao.find_by_id(tid)
        if tuit is None and self.strict_not_found:
            raise NotFoundError(resource="tuit", resource_id=tid)
        return tuit

    async def find_tuits_by_user(self, uid: str) -> List[TuitResponse]:
        """Returns the tuits owned by user `uid`; [] when there are none."""
        return await self.dao.find_by_owner(uid)

    async def create_tuit_by_user(self, uid: str, tuit: TuitCreate) -> TuitResponse:
        """Inserts the tuit in the body for user `uid` and returns it with its id."""
        return await self.dao.create(uid, tuit)

    async def update_tuit(self, tid: str, tuit: TuitUpdate) -> UpdateStatus:
        """Applies the fields in the body to tuit `tid`."""
        return await self.dao.update_by_id(tid, tuit)

    async def delete_tuit(self, tid: str) -> DeleteStatus:
        """Removes tuit `tid`."""
        return await self.dao.delete_by_id(tid)
