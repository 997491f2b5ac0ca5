"""
Tuiter Backend — Controller Base Class
========================================

What:  Common construction for every resource controller.
How:   A controller receives its DAO, builds its own APIRouter and registers
       its handler methods on it, in a fixed order, inside __init__. The
       route table is never changed after construction.
Who:   Instantiated by AppContext.controller(); mounted on the FastAPI app by
       AppContext.register_controllers().

Handlers are bound async methods. Each one performs exactly one DAO call and
returns its result for FastAPI to serialize.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, List, Tuple, Type

from fastapi import APIRouter

from tuiter.daos.base import BaseDao
from tuiter.schemas.common import ErrorResponse

if TYPE_CHECKING:
    from tuiter.context import AppContext


# Error bodies every resource route can produce
COMMON_RESPONSES = {
    422: {"description": "Malformed request", "model": ErrorResponse},
    500: {"description": "Server error", "model": ErrorResponse},
}


class ResourceController(ABC):
    """
    Binds one resource's HTTP routes to handler methods.

    Subclasses set `dao_class` and `tag` and implement `_register_routes`.
    """

    dao_class: Type[BaseDao]
    tag: str = "Resources"

    def __init__(self, dao: Any, strict_not_found: bool = False):
        self.dao = dao
        self.strict_not_found = strict_not_found
        self.router = APIRouter(tags=[self.tag], responses=COMMON_RESPONSES)
        self._register_routes(self.router)

    @classmethod
    def from_context(cls, context: "AppContext") -> "ResourceController":
        """Builds the controller around the context's DAO for this resource."""
        return cls(
            context.dao(cls.dao_class),
            strict_not_found=context.settings.strict_not_found,
        )

    @abstractmethod
    def _register_routes(self, router: APIRouter) -> None:
        """Adds this resource's routes to `router`, in registration order."""
        ...

    @property
    def route_table(self) -> List[Tuple[str, str]]:
        """(method, path) pairs in registration order."""
        table = []
        for route in self.router.routes:
            for method in sorted(route.methods):
                table.append((method, route.path))
        return table
