"""
Tuiter Backend — Application Context Tests
============================================

What we test:
    ✅ one DAO and one controller instance per type
    ✅ register_controllers mounts each route exactly once, even when repeated
    ✅ the tuit controller's route table and its registration order
"""

from collections import Counter

import pytest
from fastapi import FastAPI
from fastapi.routing import APIRoute

from tuiter.context import AppContext
from tuiter.controllers import CONTROLLERS, ResourceController, TuitController
from tuiter.daos import TuitDao


@pytest.fixture
def bare_context(settings):
    """Context with an unconnected engine; these tests never query."""
    return AppContext(settings)


def _app_routes(app: FastAPI):
    return [
        (method, route.path)
        for route in app.routes
        if isinstance(route, APIRoute)
        for method in route.methods
    ]


class TestAppContext:

    def test_dao_is_shared(self, bare_context):
        assert bare_context.dao(TuitDao) is bare_context.dao(TuitDao)

    def test_controller_is_shared_and_uses_shared_dao(self, bare_context):
        controller = bare_context.controller(TuitController)
        assert bare_context.controller(TuitController) is controller
        assert controller.dao is bare_context.dao(TuitDao)

    def test_register_twice_adds_no_routes(self, bare_context):
        app = FastAPI()

        first = bare_context.register_controllers(app)
        count = len(app.routes)
        second = bare_context.register_controllers(app)

        assert len(app.routes) == count
        assert [type(c) for c in first] == list(CONTROLLERS)
        assert all(a is b for a, b in zip(first, second))

    def test_no_duplicate_routes(self, bare_context):
        app = FastAPI()
        bare_context.register_controllers(app)
        bare_context.register_controllers(app)

        duplicates = [key for key, n in Counter(_app_routes(app)).items() if n > 1]
        assert duplicates == []

    def test_strict_flag_reaches_controllers(self, bare_context):
        assert bare_context.controller(TuitController).strict_not_found is False


class TestTuitRouteTable:

    def test_registration_order(self, bare_context):
        assert bare_context.controller(TuitController).route_table == [
            ("GET", "/tuits"),
            ("GET", "/tuits/{tid}"),
            ("GET", "/users/{uid}/tuits"),
            ("POST", "/users/{uid}/tuits"),
            ("PUT", "/tuits/{tid}"),
            ("DELETE", "/tuits/{tid}"),
        ]


class TestResourceControllerContract:

    def test_controller_without_routes_cannot_be_built(self):
        class Incomplete(ResourceController):
            dao_class = TuitDao

        with pytest.raises(TypeError):
            Incomplete(dao=None)
