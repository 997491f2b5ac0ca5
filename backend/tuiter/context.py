"""
Tuiter Backend — Application Context
======================================

What:  The one object that owns the process-wide collaborators: settings,
       database engine, session factory, and exactly one DAO and one
       controller per resource type.
How:   Built once by create_app() and stored on `app.state.context`.
       DAOs and controllers are created lazily on first access; every later
       access returns the same instance.

Registration:
    register_controllers(app) mounts each controller's router once. Calling
    it again returns the existing controllers and adds no routes, so a
    request can never be matched by two copies of the same route.

    Construction finishes before uvicorn starts dispatching requests; the
    context is not meant to be shared across threads.
"""

import logging
from typing import Dict, Iterable, List, Optional, Set, Type, TypeVar

from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from tuiter.config import Settings
from tuiter.controllers import CONTROLLERS, ResourceController
from tuiter.daos.base import BaseDao
from tuiter.database import create_engine_from_settings, create_session_factory

logger = logging.getLogger(__name__)

D = TypeVar("D", bound=BaseDao)
C = TypeVar("C", bound=ResourceController)


class AppContext:
    """
    Process-wide container of collaborators.

    Attributes:
        settings:         validated configuration
        engine:           the async SQLAlchemy engine (connection pool)
        session_factory:  shared by every DAO
    """

    def __init__(self, settings: Settings, engine: Optional[AsyncEngine] = None):
        self.settings = settings
        self.engine = engine if engine is not None else create_engine_from_settings(settings)
        self.session_factory = create_session_factory(self.engine)
        self._daos: Dict[Type[BaseDao], BaseDao] = {}
        self._controllers: Dict[Type[ResourceController], ResourceController] = {}
        self._mounted: Set[Type[ResourceController]] = set()

    def dao(self, dao_class: Type[D]) -> D:
        """Returns the single DAO of this type, creating it on first use."""
        if dao_class not in self._daos:
            self._daos[dao_class] = dao_class(self.session_factory)
        return self._daos[dao_class]

    def controller(self, controller_class: Type[C]) -> C:
        """Returns the single controller of this type, creating it on first use."""
        if controller_class not in self._controllers:
            self._controllers[controller_class] = controller_class.from_context(self)
        return self._controllers[controller_class]

    def register_controllers(
        self,
        app: FastAPI,
        controllers: Iterable[Type[ResourceController]] = CONTROLLERS,
    ) -> List[ResourceController]:
        """
        Mounts each controller's routes on `app`, at most once per controller.

        Returns:
            The controller instances, in the order given.
        """
        instances = []
        for controller_class in controllers:
            controller = self.controller(controller_class)
            if controller_class not in self._mounted:
                app.include_router(controller.router)
                self._mounted.add(controller_class)
                logger.debug(
                    "Mounted %s: %d routes", controller_class.__name__,
                    len(controller.route_table),
                )
            instances.append(controller)
        return instances
