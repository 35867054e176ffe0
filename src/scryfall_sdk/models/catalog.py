"""Scryfall catalog model."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from .common import ScryfallObject


class Catalog(ScryfallObject):
    """A flat list of strings (card names, creature types, autocomplete hits...)."""

    kind: Literal["catalog"] = Field(alias="object")
    uri: str | None = None
    total_values: int
    data: list[str]
