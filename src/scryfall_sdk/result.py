"""Result of a single API call: a model or an error, never both."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, model_validator

from .models.errors import ErrorBody

M = TypeVar("M")


class ScryfallError(Exception):
    """Raised by :meth:`Result.unwrap` when the call failed.

    The client never raises this itself; it only exists for callers who
    prefer exceptions over checking :attr:`Result.ok`.
    """

    def __init__(self, error: ErrorBody) -> None:
        self.error = error
        super().__init__(str(error))


class Result(BaseModel, Generic[M]):
    """Outcome of :meth:`Scryfall.request`.

    Exactly one of :attr:`value` and :attr:`error` is set.

    Example::

        result = client.request(CardById(id="..."))
        if result.ok:
            print(result.value.name)
        else:
            print(result.error.code, result.error.details)
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    value: M | None = None
    error: ErrorBody | None = None

    @model_validator(mode="after")
    def _exactly_one(self) -> Result[M]:
        if (self.value is None) == (self.error is None):
            raise ValueError("Result needs exactly one of value or error")
        return self

    @classmethod
    def success(cls, value: Any) -> Result[Any]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorBody) -> Result[Any]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        """True if the call produced a model."""
        return self.error is None

    def unwrap(self) -> M:
        """Return the model, or raise :class:`ScryfallError`."""
        if self.error is not None:
            raise ScryfallError(self.error)
        return self.value  # type: ignore[return-value]
