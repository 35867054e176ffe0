"""Scryfall blocking client and the settings shared with the async client."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel

from ._request import RequestSpec, build_request
from ._response import client_error, decode
from .config import API_BASE, DEFAULT_HEADERS, DEFAULT_TIMEOUT
from .resources.base import HttpResource
from .result import Result

logger = logging.getLogger("scryfall_sdk")

M = TypeVar("M", bound=BaseModel)

#: Exceptions meaning no usable HTTP response was obtained.
TRANSPORT_ERRORS: tuple[type[Exception], ...] = (httpx.HTTPError, httpx.InvalidURL)


class _ClientSettings:
    """Base URL, headers, and timeout common to both client flavours."""

    def __init__(
        self,
        base_url: str = API_BASE,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.headers = {**DEFAULT_HEADERS, **(headers or {})}

    def _prepare(self, resource: HttpResource[Any]) -> RequestSpec:
        spec = build_request(resource, self.base_url)
        logger.debug("%s %s params=%s", spec.method, spec.url, spec.params)
        return spec

    def _request_kwargs(self, spec: RequestSpec) -> dict[str, Any]:
        # Applied per request so a caller-supplied http client gets them too.
        return {
            "params": list(spec.params),
            "content": spec.body,
            "headers": {**self.headers, **spec.headers},
            "timeout": self.timeout,
        }

    @staticmethod
    def _transport_failure(spec: RequestSpec, exc: Exception) -> Result[Any]:
        logger.warning("%s %s failed: %r", spec.method, spec.url, exc)
        return client_error(str(exc) or type(exc).__name__)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r})"


class Scryfall(_ClientSettings):
    """Blocking client for the Scryfall API.

    Every call makes exactly one HTTP request and returns a
    :class:`~scryfall_sdk.result.Result`; failures of any kind come back
    as an :class:`~scryfall_sdk.models.ErrorBody`, never as an exception.
    There is no caching, retrying, or rate limiting. Safe to share across
    threads: the underlying ``httpx.Client`` is created in the constructor.

    Usage::

        from scryfall_sdk import Scryfall
        from scryfall_sdk.resources import CardById, CardSearch

        with Scryfall() as client:
            card = client.request(CardById(id="f295b713-1d6a-43fd-910d-fb35414bf58a"))
            if card.ok:
                print(card.value.name)

            page = client.request(CardSearch(q="c:red pow=3"))
            while page.ok and page.value.has_more:
                ...
    """

    def __init__(
        self,
        base_url: str = API_BASE,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Mapping[str, str] | None = None,
        transport: httpx.BaseTransport | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API root. Defaults to the production Scryfall API.
            timeout: HTTP request timeout in seconds.
            headers: Extra default headers, merged over the built-in ones.
            transport: Optional httpx transport (e.g. ``httpx.MockTransport``).
            http_client: Optional pre-built ``httpx.Client`` to share its
                connection pool. It is not closed by :meth:`close`.
        """
        super().__init__(base_url, timeout=timeout, headers=headers)
        self._transport = transport
        self._owns_client = http_client is None
        self._client = http_client if http_client is not None else self._new_client()

    @classmethod
    def from_url(cls, url: str, **kwargs: Any) -> Scryfall:
        """Create a client against an alternate deployment or mock server."""
        return cls(url, **kwargs)

    def _new_client(self) -> httpx.Client:
        return httpx.Client(
            headers=self.headers,
            timeout=self.timeout,
            transport=self._transport,
            follow_redirects=True,
        )

    @property
    def client(self) -> httpx.Client:
        """The underlying HTTP client.

        Created in the constructor so concurrent first requests share one
        connection pool; rebuilt only if used again after :meth:`close`.
        """
        if self._client is None:
            self._client = self._new_client()
        return self._client

    def request(self, resource: HttpResource[M]) -> Result[M]:
        """Call the endpoint described by *resource*.

        Args:
            resource: Any descriptor from :mod:`scryfall_sdk.resources`.

        Returns:
            A Result holding the endpoint's model, or an ErrorBody.
        """
        spec = self._prepare(resource)
        try:
            resp = self.client.request(
                spec.method,
                spec.url,
                **self._request_kwargs(spec),
            )
        except TRANSPORT_ERRORS as exc:
            return self._transport_failure(spec, exc)
        return decode(resource, resp.status_code, resp.content)

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None

    def __enter__(self) -> Scryfall:
        """Enter context manager.

        Example::

            with Scryfall() as client:
                card = client.request(CardNamed(exact="Lightning Bolt")).unwrap()
        """
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context manager and close the HTTP client if owned."""
        self.close()
