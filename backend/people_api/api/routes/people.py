"""People Routes — CRUD endpoints for the Person resource under /api/people.

Invariants:
    - PEOPLE_ROUTES is the single route table: dispatch and OpenAPI docs both read it
    - Handlers hold no business logic: decode input, call PersonService, render outcome
    - The service comes from app.state (one store per app, injected at startup)

Design Decisions:
    - Route table + add_api_route over decorators: every (method, path) pair is
      visible in one place and registered once by build_router()
    - Request schemas documented via openapi_extra because bodies are read raw
      and validated by the service, not by FastAPI parameter parsing
"""

from dataclasses import dataclass, field
from typing import Any, Callable

from fastapi import APIRouter, Depends, Path, Request, Response, status

from people_api.api.responses import read_json_body, render
from people_api.core.results import Invalid
from people_api.schemas.person import (
    InternalErrorResponse,
    MessageResponse,
    PersonCreate,
    PersonResponse,
    PersonUpdate,
    ValidationErrorResponse,
)
from people_api.services.person_service import PersonService

PREFIX = "/api/people"
TAG = "People"

ID_DESCRIPTION = "Person id (positive integer)"


def get_person_service(request: Request) -> PersonService:
    svc = getattr(getattr(request.app, "state", None), "person_service", None)
    if svc is None:
        raise RuntimeError("PersonService not configured")
    return svc


async def list_people(
    service: PersonService = Depends(get_person_service),
) -> Response:
    """List every registered person in insertion order."""
    return render(service.list_people())


async def get_person(
    id: str = Path(description=ID_DESCRIPTION),
    service: PersonService = Depends(get_person_service),
) -> Response:
    """Fetch one person by id."""
    return render(service.get_person(id))


async def create_person(
    request: Request,
    service: PersonService = Depends(get_person_service),
) -> Response:
    """Register a new person; the id is assigned by the server."""
    body = await read_json_body(request)
    if isinstance(body, Invalid):
        return render(body)
    return render(service.create_person(body))


async def update_person(
    request: Request,
    id: str = Path(description=ID_DESCRIPTION),
    service: PersonService = Depends(get_person_service),
) -> Response:
    """Partially update a person; omitted fields keep their current value."""
    body = await read_json_body(request)
    if isinstance(body, Invalid):
        return render(body)
    return render(service.update_person(id, body))


async def delete_person(
    id: str = Path(description=ID_DESCRIPTION),
    service: PersonService = Depends(get_person_service),
) -> Response:
    """Remove a person permanently."""
    return render(service.delete_person(id))


# ─── Route table ─────────────────────────────────────────────────

def _json_body(schema) -> dict:
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": schema.model_json_schema()}},
        },
    }


_INVALID = {status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse}}
_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": MessageResponse}}
_INTERNAL = {status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": InternalErrorResponse}}


@dataclass(frozen=True)
class RouteSpec:
    """One row of the route table."""
    method: str
    path: str
    endpoint: Callable[..., Any]
    summary: str
    status_code: int = status.HTTP_200_OK
    responses: dict = field(default_factory=dict)
    openapi_extra: dict | None = None


PEOPLE_ROUTES: tuple[RouteSpec, ...] = (
    RouteSpec(
        "GET", "", list_people, "List people",
        responses={status.HTTP_200_OK: {"model": list[PersonResponse]}},
    ),
    RouteSpec(
        "GET", "/{id}", get_person, "Get a person",
        responses={
            status.HTTP_200_OK: {"model": PersonResponse}, **_INVALID, **_NOT_FOUND,
        },
    ),
    RouteSpec(
        "POST", "", create_person, "Create a person",
        status_code=status.HTTP_201_CREATED,
        responses={status.HTTP_201_CREATED: {"model": PersonResponse}, **_INVALID},
        openapi_extra=_json_body(PersonCreate),
    ),
    RouteSpec(
        "PUT", "/{id}", update_person, "Update a person",
        responses={
            status.HTTP_200_OK: {"model": PersonResponse}, **_INVALID, **_NOT_FOUND,
        },
        openapi_extra=_json_body(PersonUpdate),
    ),
    RouteSpec(
        "DELETE", "/{id}", delete_person, "Delete a person",
        status_code=status.HTTP_204_NO_CONTENT,
        responses={**_INVALID, **_NOT_FOUND},
    ),
)


def build_router() -> APIRouter:
    """Register every row of PEOPLE_ROUTES on a fresh router."""
    router = APIRouter(prefix=PREFIX, tags=[TAG])
    for route in PEOPLE_ROUTES:
        router.add_api_route(
            route.path,
            route.endpoint,
            methods=[route.method],
            status_code=route.status_code,
            summary=route.summary,
            responses={**route.responses, **_INTERNAL},
            openapi_extra=route.openapi_extra,
        )
    return router
