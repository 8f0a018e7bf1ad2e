"""Tests for application wiring: routes, auth dependencies, and error handling."""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.routing import APIRoute
from sqlalchemy.exc import IntegrityError

from hulltrack.api.v1.router import health_check
from hulltrack.core.auth import require_admin, require_session
from hulltrack.main import app, integrity_error_handler


def _routes() -> dict[tuple[str, str], APIRoute]:
    routes = {}
    for route in app.routes:
        if isinstance(route, APIRoute):
            for method in route.methods:
                routes[(method, route.path)] = route
    return routes


def _dependency_calls(route: APIRoute) -> set:
    return {dependency.dependency for dependency in route.dependencies}


class TestHealth:
    @pytest.mark.asyncio
    async def test_database_reachable(self):
        with patch("hulltrack.api.v1.router.check_db_connection", AsyncMock(return_value=True)):
            assert await health_check() == {"status": "ok", "database": "ok"}

    @pytest.mark.asyncio
    async def test_database_down_still_answers(self):
        with patch("hulltrack.api.v1.router.check_db_connection", AsyncMock(return_value=False)):
            assert await health_check() == {"status": "ok", "database": "unavailable"}

    def test_health_is_public(self):
        route = _routes()[("GET", "/api/v1/health")]
        assert require_session not in _dependency_calls(route)


class TestRouteWiring:
    @pytest.mark.parametrize(
        "method,path",
        [
            ("POST", "/api/v1/boat-orders/upload"),
            ("GET", "/api/v1/boat-orders/{order_id}/pdf-url"),
            ("GET", "/api/v1/tasks/print"),
            ("PATCH", "/api/v1/tasks/{task_id}/status"),
            ("POST", "/api/v1/task-data/import/preview"),
            ("PUT", "/api/v1/stations/reorder"),
            ("POST", "/api/v1/schedule-groups/bulk-delete"),
            ("POST", "/api/v1/production-schedule/{row_id}/auto-schedule"),
            ("GET", "/api/v1/models/{model_id}/headers/template"),
        ],
    )
    def test_route_requires_session(self, method, path):
        route = _routes()[(method, path)]
        assert require_session in _dependency_calls(route)

    @pytest.mark.parametrize(
        "method,path",
        [
            ("POST", "/api/v1/models"),
            ("POST", "/api/v1/stations/import"),
            ("POST", "/api/v1/task-data/import"),
            ("DELETE", "/api/v1/holidays/{holiday_id}"),
            ("PATCH", "/api/v1/production-schedule/{row_id}/cell"),
        ],
    )
    def test_catalog_writes_require_admin(self, method, path):
        assert require_admin in _dependency_calls(_routes()[(method, path)])

    @pytest.mark.parametrize(
        "method,path",
        [
            ("POST", "/api/v1/boat-orders/upload"),
            ("PATCH", "/api/v1/tasks/{task_id}/status"),
            ("PATCH", "/api/v1/tasks/{task_id}/dates"),
        ],
    )
    def test_employee_routes_do_not_require_admin(self, method, path):
        assert require_admin not in _dependency_calls(_routes()[(method, path)])


class TestIntegrityErrorHandler:
    @pytest.mark.asyncio
    async def test_maps_to_conflict(self):
        request = MagicMock()
        request.method = "DELETE"
        request.url.path = "/api/v1/models/1"
        exc = IntegrityError("DELETE", {}, Exception("violates foreign key constraint"))

        response = await integrity_error_handler(request, exc)

        assert response.status_code == 409
        assert json.loads(response.body) == {"detail": "violates foreign key constraint"}
