from __future__ import annotations

import httpx
import pytest

from backoffice_client.base.errors import (
    ApiError,
    ErrorCategory,
    categorize_by_status,
    categorize_error,
    get_error_details,
    is_retryable_error,
    transform_error,
)

_REQUEST = httpx.Request("POST", "https://api.example.com/bids")


def _status_error(status: int, body=None) -> httpx.HTTPStatusError:
    response = httpx.Response(status, request=_REQUEST, json=body if body is not None else {})
    return httpx.HTTPStatusError(f"HTTP {status}", request=_REQUEST, response=response)


@pytest.mark.parametrize(
    "status,category",
    [
        (400, ErrorCategory.VALIDATION),
        (422, ErrorCategory.VALIDATION),
        (401, ErrorCategory.AUTH),
        (403, ErrorCategory.PERMISSION),
        (404, ErrorCategory.NOT_FOUND),
        (409, ErrorCategory.CONFLICT),
        (429, ErrorCategory.RATE_LIMIT),
        (500, ErrorCategory.SERVER),
        (502, ErrorCategory.SERVER),
        (503, ErrorCategory.SERVER),
        (599, ErrorCategory.SERVER),
        (999, ErrorCategory.SERVER),
        (200, ErrorCategory.UNKNOWN),
        (302, ErrorCategory.UNKNOWN),
        (418, ErrorCategory.UNKNOWN),
    ],
)
def test_categorize_by_status(status, category):
    assert categorize_by_status(status) is category


def test_retryable_is_fixed_per_category():
    retryable = {c for c in ErrorCategory if get_error_details(c).retryable}
    assert retryable == {  # nosec B101 - asserts are appropriate in unit tests
        ErrorCategory.NETWORK,
        ErrorCategory.CONFLICT,
        ErrorCategory.RATE_LIMIT,
        ErrorCategory.SERVER,
        ErrorCategory.UNKNOWN,
    }
    for category in ErrorCategory:
        details = get_error_details(category)
        assert details.category is category
        assert details.status is None
        assert details.title and details.message and details.action


def test_failed_fetch_type_error_is_network():
    result = categorize_error(TypeError("Failed to fetch"))
    assert result.category is ErrorCategory.NETWORK
    assert result.retryable is True
    assert result.status is None
    assert result.title == "Connection Error"


def test_type_error_without_fetch_is_unknown():
    result = categorize_error(TypeError("unsupported operand"))
    assert result.category is ErrorCategory.UNKNOWN
    assert result.message == "unsupported operand"


def test_transport_errors_are_network():
    for exc in (
        httpx.ConnectError("refused", request=_REQUEST),
        httpx.ReadTimeout("timed out", request=_REQUEST),
        ConnectionResetError("reset by peer"),
    ):
        result = categorize_error(exc)
        assert result.category is ErrorCategory.NETWORK
        assert result.status is None


def test_status_401_is_auth_and_not_retryable():
    result = categorize_error(_status_error(401))
    assert result.category is ErrorCategory.AUTH
    assert result.status == 401
    assert result.retryable is False
    assert result.title == "Session Expired"
    assert result.message == "Your session has expired. Please sign in again."


def test_server_message_precedence():
    result = categorize_error(_status_error(400, {"message": "Custom validation message"}))
    assert result.message == "Custom validation message"
    assert result.category is ErrorCategory.VALIDATION

    assert categorize_error(_status_error(409, {"title": "Duplicate VIN"})).message == "Duplicate VIN"
    assert categorize_error(_status_error(500, {"error": "db down"})).message == "db down"
    assert categorize_error(_status_error(429, {"unrelated": 1})).message == (
        "You have made too many requests. Please wait before trying again."
    )


def test_plain_exception_keeps_its_message():
    result = categorize_error(Exception("Something broke"))
    assert result.category is ErrorCategory.UNKNOWN
    assert result.message == "Something broke"
    assert result.status is None


def test_unrecognised_values_are_unknown():
    for value in ("bare string", None, 42, {"message": "dict"}):
        result = categorize_error(value)
        assert result.category is ErrorCategory.UNKNOWN
        assert result.message == "Something went wrong. Please try again."
        assert result.status is None


def test_api_error_is_classified_through_its_cause():
    cause = _status_error(403, {"message": "Admins only"})
    try:
        raise transform_error(cause) from cause
    except ApiError as exc:
        result = categorize_error(exc)
    assert result.category is ErrorCategory.PERMISSION
    assert result.message == "Admins only"
    assert result.status == 403

    network_cause = httpx.ConnectError("refused", request=_REQUEST)
    try:
        raise transform_error(network_cause) from network_cause
    except ApiError as exc:
        assert categorize_error(exc).category is ErrorCategory.NETWORK


def test_standalone_api_error_uses_its_status():
    result = categorize_error(ApiError(message="Gone fishing", code="NOT_FOUND", status=404))
    assert result.category is ErrorCategory.NOT_FOUND
    assert result.message == "Gone fishing"
    assert result.status == 404


def test_is_retryable_error():
    assert is_retryable_error(httpx.ConnectError("refused", request=_REQUEST))
    assert is_retryable_error(_status_error(500))
    assert not is_retryable_error(_status_error(401))
    assert not is_retryable_error(_status_error(404))
