"""Tests for Result, ErrorBody, and ScryfallError."""

import pytest

from scryfall_sdk import ErrorBody, Result, ScryfallError
from scryfall_sdk.models import Catalog

CATALOG = Catalog(kind="catalog", total_values=1, data=["Goblin"])


def test_success():
    result = Result.success(CATALOG)
    assert result.ok
    assert result.unwrap() is CATALOG


def test_failure_unwrap_raises():
    error = ErrorBody(code="not_found", status=404, details="Nope")
    result = Result.failure(error)
    assert not result.ok
    with pytest.raises(ScryfallError, match="not_found: Nope") as info:
        result.unwrap()
    assert info.value.error is error


def test_needs_exactly_one():
    with pytest.raises(ValueError):
        Result()
    with pytest.raises(ValueError):
        Result(value=CATALOG, error=ErrorBody.client_error("x"))


def test_client_error_sentinel():
    error = ErrorBody.client_error("connection reset")
    assert error.code == "CLIENT_ERR"
    assert error.status == 599
    assert error.kind == "error"
    assert error.is_client_error
    assert str(error) == "CLIENT_ERR: connection reset"


def test_error_body_aliases():
    error = ErrorBody.model_validate(
        {"object": "error", "code": "bad_request", "status": 400, "details": "x", "type": "ambiguous"}
    )
    assert error.error_type == "ambiguous"
    assert error.model_dump(by_alias=True, exclude_none=True) == {
        "object": "error",
        "code": "bad_request",
        "status": 400,
        "details": "x",
        "type": "ambiguous",
    }


def test_remote_error_is_not_client_error():
    assert not ErrorBody(code="not_found", status=404, details="x").is_client_error
