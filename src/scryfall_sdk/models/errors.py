"""Scryfall error object."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from ..config import CLIENT_ERROR_CODE, CLIENT_ERROR_STATUS


class ErrorBody(BaseModel):
    """Error response body.

    Either decoded from the API's own error object (non-2xx responses) or
    built locally by :meth:`client_error` when the transport fails or a
    body can't be decoded. See https://scryfall.com/docs/api/errors.
    """

    model_config = {"populate_by_name": True, "frozen": True}

    kind: Literal["error"] = Field(default="error", alias="object")
    code: str
    status: int
    details: str
    error_type: str | None = Field(default=None, alias="type")
    warnings: list[str] | None = None

    @classmethod
    def client_error(cls, details: str) -> ErrorBody:
        """Build the synthetic ``CLIENT_ERR`` / 599 error.

        Args:
            details: Description of the underlying failure.
        """
        return cls(code=CLIENT_ERROR_CODE, status=CLIENT_ERROR_STATUS, details=details)

    @property
    def is_client_error(self) -> bool:
        """True if this error was produced locally rather than by the API."""
        return self.code == CLIENT_ERROR_CODE and self.status == CLIENT_ERROR_STATUS

    def __str__(self) -> str:
        return f"{self.code}: {self.details}"
