"""Request construction: resource descriptor to concrete HTTP request."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from pydantic import BaseModel

if TYPE_CHECKING:
    from .resources.base import HttpResource


class RequestSpec(BaseModel):
    """A fully specified HTTP request.

    ``params`` keeps insertion order so the same resource always produces
    byte-identical query strings.
    """

    model_config = {"frozen": True}

    method: str
    url: str
    params: tuple[tuple[str, str], ...] = ()
    body: bytes | None = None

    @property
    def headers(self) -> dict[str, str]:
        """Per-request headers (only set when a body is sent)."""
        if self.body is None:
            return {}
        return {"Content-Type": "application/json"}


class RequestBuilder:
    """Builds a :class:`RequestSpec` from path segments and query options.

    Caller-supplied path segments are percent-encoded as a whole (``/``
    included). Query values are passed through verbatim; encoding them is
    left to the transport. Methods return ``self`` for chaining.

    Example::

        spec = (
            RequestBuilder("https://api.scryfall.com")
            .path("cards", "search")
            .param("q", "c:red pow=3")
            .param("page", 2)
            .build()
        )
    """

    def __init__(self, base_url: str, method: str = "GET") -> None:
        """Create a builder rooted at *base_url*.

        Args:
            base_url: API root, with or without a trailing slash.
            method: HTTP method for the request.
        """
        self._base_url = base_url.rstrip("/")
        self._method = method.upper()
        self._segments: list[str] = []
        self._params: list[tuple[str, str]] = []
        self._body: bytes | None = None

    def path(self, *segments: str) -> RequestBuilder:
        """Append fixed path segments (not encoded).

        Args:
            *segments: Literal path components such as ``"cards"``.
        """
        self._segments.extend(segments)
        return self

    def segment(self, value: str | int) -> RequestBuilder:
        """Append one caller-supplied path segment, percent-encoded.

        Args:
            value: Identifier to embed in the path.
        """
        encoded = quote(str(value), safe="")
        # Dot segments would be collapsed by URL normalisation.
        if encoded in (".", ".."):
            encoded = encoded.replace(".", "%2E")
        self._segments.append(encoded)
        return self

    def param(self, key: str, value: Any) -> RequestBuilder:
        """Add a query parameter, skipping it when *value* is None.

        Booleans are rendered as ``true``/``false``.

        Args:
            key: Query parameter name.
            value: Query parameter value, or None to omit.
        """
        if value is None:
            return self
        if isinstance(value, bool):
            value = "true" if value else "false"
        self._params.append((key, str(value)))
        return self

    def json(self, payload: Any) -> RequestBuilder:
        """Set a JSON request body.

        Args:
            payload: JSON-serialisable value, or None for no body.
        """
        if payload is None:
            self._body = None
        else:
            self._body = json.dumps(payload, separators=(",", ":")).encode("utf-8")
        return self

    def build(self) -> RequestSpec:
        """Produce the final request specification."""
        url = "/".join([self._base_url, *self._segments])
        return RequestSpec(
            method=self._method,
            url=url,
            params=tuple(self._params),
            body=self._body,
        )


def build_request(resource: HttpResource[Any], base_url: str) -> RequestSpec:
    """Map a resource descriptor to a :class:`RequestSpec`.

    Pure: the same resource and base URL always yield an equal result.

    Args:
        resource: Descriptor of the endpoint to call.
        base_url: API root (e.g. :data:`~scryfall_sdk.config.API_BASE`).
    """
    builder = RequestBuilder(base_url, resource.method)
    resource.apply(builder)
    return builder.build()
