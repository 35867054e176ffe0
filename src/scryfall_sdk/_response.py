"""Response decoding: raw status and body to a :class:`Result`."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from .models.errors import ErrorBody
from .result import Result

if TYPE_CHECKING:
    from .resources.base import HttpResource

logger = logging.getLogger("scryfall_sdk")


def client_error(details: str) -> Result[Any]:
    """A failed :class:`Result` carrying the ``CLIENT_ERR`` / 599 sentinel."""
    return Result.failure(ErrorBody.client_error(details))


def _describe(exc: ValidationError) -> str:
    first = exc.errors(include_url=False)[0]
    loc = ".".join(str(p) for p in first.get("loc", ())) or "<body>"
    return f"{exc.error_count()} validation error(s) for {exc.title}; {loc}: {first.get('msg', '')}"


def decode(resource: HttpResource[Any], status: int, body: bytes | str) -> Result[Any]:
    """Decode a raw HTTP response for *resource*.

    A 2xx body must match ``resource.response_model``; anything else is
    read as a Scryfall error object. Bodies that fit neither shape, JSON
    or not, become the ``CLIENT_ERR`` / 599 error. Never raises for bad
    input.

    Args:
        resource: The descriptor the request was built from.
        status: HTTP status code.
        body: Raw response body.
    """
    if 200 <= status < 300:
        try:
            model = resource.response_model.model_validate_json(body)
        except ValidationError as exc:
            logger.warning(
                "Unexpected %s body for %s: %s",
                resource.response_model.__name__,
                type(resource).__name__,
                exc.errors(include_url=False)[:1],
            )
            return client_error(_describe(exc))
        return Result.success(model)

    try:
        error = ErrorBody.model_validate_json(body)
    except ValidationError as exc:
        logger.warning("Undecodable error body with HTTP %d", status)
        return client_error(f"HTTP {status} with undecodable error body: {_describe(exc)}")
    logger.info("Scryfall returned %s (%d): %s", error.code, error.status, error.details)
    return Result.failure(error)
