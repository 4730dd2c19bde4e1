"""Error Hierarchy and Outcomes — tests for wire envelopes and outcome conversion.

Tests cover:
    - RequestValidationFailed renders {message, errors} with every field error
    - ResourceNotFoundError names operation and id, maps to 404
    - RouteNotFoundError uses the fixed route-miss message
    - Invalid/NotFound outcomes convert to the matching error
    - Internal error envelope carries only the exception description
"""

from people_api.core.errors import (
    ErrorCategory,
    FieldError,
    PeopleApiError,
    RequestValidationFailed,
    ResourceNotFoundError,
    RouteNotFoundError,
    build_internal_error_response,
)
from people_api.core.results import Invalid, NotFound, Ok


def test_validation_error_envelope_lists_all_errors():
    error = RequestValidationFailed([
        FieldError("name", "too short"), FieldError("email", "missing"),
    ])
    assert error.http_status == 400
    assert error.category == ErrorCategory.VALIDATION
    assert error.to_response() == {
        "message": "Validation failed",
        "errors": [
            {"field": "name", "message": "too short"},
            {"field": "email", "message": "missing"},
        ],
    }


def test_not_found_message_names_operation_and_id():
    error = ResourceNotFoundError("Person", 42, "delete")
    assert error.http_status == 404
    assert error.to_response() == {"message": "Cannot delete person 42: not found."}
    assert "42" in error.message


def test_route_not_found_message():
    error = RouteNotFoundError("GET", "/nowhere")
    assert error.http_status == 404
    assert error.to_response() == {"message": "Route not found."}


def test_all_errors_share_base_class():
    for error in (
        RequestValidationFailed([]),
        ResourceNotFoundError("Person", 1, "get"),
        RouteNotFoundError("GET", "/"),
    ):
        assert isinstance(error, PeopleApiError)


def test_invalid_outcome_converts_to_validation_error():
    outcome = Invalid([FieldError("age", "too big")])
    error = outcome.to_error()
    assert isinstance(error, RequestValidationFailed)
    assert error.errors == [FieldError("age", "too big")]


def test_not_found_outcome_converts_to_not_found_error():
    error = NotFound("Person", 3, "update").to_error()
    assert isinstance(error, ResourceNotFoundError)
    assert error.message == "Cannot update person 3: not found."


def test_ok_defaults_to_200():
    assert Ok("x").status == 200
    assert Ok(None, status=204).status == 204


def test_internal_error_envelope_has_description_only():
    body = build_internal_error_response(RuntimeError("disk on fire"))
    assert body == {
        "message": "Unexpected error. Please try again.",
        "detail": "disk on fire",
    }
