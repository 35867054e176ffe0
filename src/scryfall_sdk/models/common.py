"""Shared base classes and literals for Scryfall objects."""

from __future__ import annotations

from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")

#: A single-color symbol as used in ``colors`` and ``color_identity``.
Color = Literal["W", "U", "B", "R", "G"]


class ScryfallObject(BaseModel):
    """Base for every object returned by the API.

    Unknown fields are kept (Scryfall adds attributes over time) so that
    re-serialising a decoded object reproduces the original payload.
    """

    model_config = {"populate_by_name": True, "extra": "allow"}

    def to_json(self) -> dict[str, Any]:
        """Serialise back to the Scryfall wire format.

        Returns:
            A JSON-compatible dict keyed by the API's field names.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class ScryfallList(ScryfallObject, Generic[T]):
    """Paginated ``list`` object.

    Callers follow ``next_page`` themselves; no automatic traversal is done.
    """

    kind: Literal["list"] = Field(alias="object")
    data: list[T]
    has_more: bool = False
    next_page: str | None = None
    total_cards: int | None = None
    warnings: list[str] | None = None
