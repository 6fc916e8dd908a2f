"""Test configuration and fixtures."""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from httpx import ASGITransport, AsyncClient

from app.core.http import create_http_client
from app.services.school_api import SchoolApiClient
from app.services.school_list import SchoolListController

SCHOOLS_PATH = "/api/schools"


class StubSchoolServer:
    """In-memory stand-in for the schools API.

    Every request is recorded as ``(method, path)``. ``fail()`` makes a method
    answer with an error status; ``respond()`` makes it answer with a raw body.
    """

    def __init__(self) -> None:
        self.schools: list[dict[str, Any]] = []
        self.requests: list[tuple[str, str]] = []
        self.bodies: list[dict[str, Any]] = []
        self.failures: dict[str, int] = {}
        self.raw: dict[str, bytes] = {}
        self.next_id = 1
        self.app = self._build_app()

    def seed(self, *schools: dict[str, Any]) -> None:
        self.schools.extend(schools)
        self.next_id = max(s["id"] for s in self.schools) + 1

    def fail(self, method: str, status_code: int) -> None:
        self.failures[method] = status_code

    def respond(self, method: str, content: bytes) -> None:
        self.raw[method] = content

    def _find(self, school_id: int) -> dict[str, Any] | None:
        for school in self.schools:
            if school["id"] == school_id:
                return school
        return None

    def _build_app(self) -> FastAPI:
        app = FastAPI()

        @app.middleware("http")
        async def record(request: Request, call_next):
            method = request.method
            self.requests.append((method, request.url.path))
            if method in self.failures:
                return Response(status_code=self.failures[method])
            if method in self.raw:
                return Response(content=self.raw[method], media_type="application/json")
            return await call_next(request)

        @app.get(SCHOOLS_PATH)
        async def list_schools():
            return self.schools

        @app.post(SCHOOLS_PATH, status_code=status.HTTP_201_CREATED)
        async def create_school(request: Request):
            body = await request.json()
            self.bodies.append(body)
            school = {"id": self.next_id, **body}
            self.next_id += 1
            self.schools.append(school)
            return school

        @app.put(SCHOOLS_PATH + "/{school_id}")
        async def update_school(school_id: int, request: Request):
            body = await request.json()
            self.bodies.append(body)
            school = self._find(school_id)
            if school is None:
                return JSONResponse({"detail": "Not found"}, status_code=404)
            school.clear()
            school.update({"id": school_id, **body})
            return school

        @app.delete(SCHOOLS_PATH + "/{school_id}")
        async def delete_school(school_id: int):
            school = self._find(school_id)
            if school is None:
                return JSONResponse({"detail": "Not found"}, status_code=404)
            self.schools.remove(school)
            return Response(status_code=status.HTTP_204_NO_CONTENT)

        return app


@pytest.fixture
def stub() -> StubSchoolServer:
    """Fresh stub server for each test."""
    return StubSchoolServer()


@pytest_asyncio.fixture
async def client(stub: StubSchoolServer) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client wired to the stub server."""
    async with create_http_client(
        base_url="http://test",
        transport=ASGITransport(app=stub.app),
    ) as ac:
        yield ac


@pytest.fixture
def api(client: AsyncClient) -> SchoolApiClient:
    return SchoolApiClient(client, SCHOOLS_PATH)


@pytest.fixture
def prompts() -> list[str]:
    """Messages passed to the confirmation callback."""
    return []


@pytest.fixture
def controller(api: SchoolApiClient, prompts: list[str]) -> SchoolListController:
    """Controller whose confirmation always answers yes."""

    def confirm(message: str) -> bool:
        prompts.append(message)
        return True

    return SchoolListController(api, confirm)
