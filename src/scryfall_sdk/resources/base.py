"""Base class for resource descriptors."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar

from pydantic import BaseModel

if TYPE_CHECKING:
    from .._request import RequestBuilder, RequestSpec

M = TypeVar("M", bound=BaseModel)


class HttpResource(BaseModel, Generic[M]):
    """An addressable API endpoint and the parameters it needs.

    Subclasses set :attr:`response_model` to the model a 2xx response
    decodes into, and implement :meth:`apply` to fill in a
    :class:`~scryfall_sdk._request.RequestBuilder`. Descriptors are
    immutable and validate nothing beyond their field types; the API
    reports bad identifiers itself.
    """

    model_config = {"frozen": True}

    method: ClassVar[str] = "GET"
    response_model: ClassVar[type[BaseModel]]

    def apply(self, builder: RequestBuilder) -> None:
        """Add this resource's path, query, and body to *builder*."""
        raise NotImplementedError

    def to_request(self, base_url: str) -> RequestSpec:
        """Shortcut for :func:`~scryfall_sdk._request.build_request`."""
        from .._request import build_request

        return build_request(self, base_url)
