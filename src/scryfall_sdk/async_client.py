"""Async Scryfall client.

Uses ``httpx.AsyncClient`` so a request suspends the calling task rather
than blocking the event loop. Request building and decoding are the
same as :class:`~scryfall_sdk.client.Scryfall`; only the transport call
differs. Cancelling the task drops the in-flight request.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel

from ._response import decode
from .client import TRANSPORT_ERRORS, _ClientSettings
from .config import API_BASE, DEFAULT_TIMEOUT
from .resources.base import HttpResource
from .result import Result

M = TypeVar("M", bound=BaseModel)


class AsyncScryfall(_ClientSettings):
    """Async client for the Scryfall API.

    Usage::

        async with AsyncScryfall() as client:
            result = await client.request(CardNamed(fuzzy="lightning bolt"))
            rulings = await client.request(RulingsByCardId(id=result.value.id))
    """

    def __init__(
        self,
        base_url: str = API_BASE,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Mapping[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the async client.

        Args:
            base_url: API root. Defaults to the production Scryfall API.
            timeout: HTTP request timeout in seconds.
            headers: Extra default headers, merged over the built-in ones.
            transport: Optional async httpx transport (e.g. ``httpx.MockTransport``).
            http_client: Optional pre-built ``httpx.AsyncClient``. It is not
                closed by :meth:`close`.
        """
        super().__init__(base_url, timeout=timeout, headers=headers)
        self._transport = transport
        self._owns_client = http_client is None
        self._client = http_client if http_client is not None else self._new_client()

    @classmethod
    def from_url(cls, url: str, **kwargs: Any) -> AsyncScryfall:
        """Create a client against an alternate deployment or mock server."""
        return cls(url, **kwargs)

    def _new_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            headers=self.headers,
            timeout=self.timeout,
            transport=self._transport,
            follow_redirects=True,
        )

    @property
    def client(self) -> httpx.AsyncClient:
        """The underlying async HTTP client, rebuilt if used after :meth:`close`."""
        if self._client is None:
            self._client = self._new_client()
        return self._client

    async def request(self, resource: HttpResource[M]) -> Result[M]:
        """Call the endpoint described by *resource* without blocking.

        Args:
            resource: Any descriptor from :mod:`scryfall_sdk.resources`.

        Returns:
            A Result holding the endpoint's model, or an ErrorBody.
        """
        spec = self._prepare(resource)
        try:
            resp = await self.client.request(
                spec.method,
                spec.url,
                **self._request_kwargs(spec),
            )
        except TRANSPORT_ERRORS as exc:
            return self._transport_failure(spec, exc)
        return decode(resource, resp.status_code, resp.content)

    async def close(self) -> None:
        """Close the async HTTP client if this instance created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> AsyncScryfall:
        """Enter async context manager.

        Example::

            async with AsyncScryfall() as client:
                result = await client.request(CardSearch(q="t:goblin"))
        """
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Exit async context manager and close the HTTP client if owned."""
        await self.close()
