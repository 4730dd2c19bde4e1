"""Outcome Rendering — translate service outcomes and raw request bodies at the HTTP edge.

Invariants:
    - Ok(204) renders an empty body; every other Ok renders JSON
    - Invalid renders 400 {message, errors}; NotFound renders 404 {message}
    - A body that is not valid JSON becomes an Invalid outcome on field "body"
    - A body sent with a non-JSON Content-Type becomes an Invalid outcome on field "body"

Design Decisions:
    - Persons serialized through Person.to_dict(): unset age is omitted rather than null
    - Raw body decoding here (not a FastAPI Body param): the validation layer
      must see the client's value untouched, unknown keys included. A Body(Any)
      param would pass form or text payloads through as bytes and report JSON
      errors at a character offset instead of on "body"
"""

import json
import logging
from typing import Any

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse

from people_api.core.errors import FieldError
from people_api.core.person import Person
from people_api.core.results import Invalid, NotFound, Ok, Outcome

logger = logging.getLogger(__name__)

MALFORMED_BODY_MESSAGE = "Request body must be valid JSON"
UNSUPPORTED_MEDIA_TYPE_MESSAGE = "Request body must be sent as application/json"


def render(outcome: Outcome) -> Response:
    """Build the HTTP response for a finished service call."""
    if isinstance(outcome, Ok):
        if outcome.status == status.HTTP_204_NO_CONTENT:
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        return JSONResponse(status_code=outcome.status, content=_to_json(outcome.value))
    if isinstance(outcome, Invalid):
        logger.info(
            f"Validation failed: {len(outcome.errors)} error(s)",
            extra={"field_count": len(outcome.errors)},
        )
    if isinstance(outcome, (Invalid, NotFound)):
        error = outcome.to_error()
        return JSONResponse(status_code=error.http_status, content=error.to_response())
    raise TypeError(f"Unknown outcome: {outcome!r}")


async def read_json_body(request: Request) -> Any:
    """Decoded JSON body, None when empty, or Invalid when it cannot be parsed.

    A missing Content-Type is read as JSON; any other non-JSON media type is refused.
    """
    raw = await request.body()
    if not raw.strip():
        return None
    if not _is_json_media_type(request.headers.get("content-type")):
        return Invalid([FieldError("body", UNSUPPORTED_MEDIA_TYPE_MESSAGE)])
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return Invalid([FieldError("body", MALFORMED_BODY_MESSAGE)])


def _is_json_media_type(content_type: str | None) -> bool:
    if not content_type:
        return True
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


def _to_json(value: Any) -> Any:
    if isinstance(value, Person):
        return value.to_dict()
    if isinstance(value, list):
        return [_to_json(item) for item in value]
    return value
