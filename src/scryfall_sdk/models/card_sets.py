"""Scryfall set models."""

from __future__ import annotations

import datetime
from typing import Literal

from pydantic import Field

from .common import ScryfallList, ScryfallObject


class CardSet(ScryfallObject):
    """Set metadata (no cards; follow ``search_uri`` for those)."""

    kind: Literal["set"] = Field(alias="object")
    id: str
    code: str
    mtgo_code: str | None = None
    arena_code: str | None = None
    tcgplayer_id: int | None = None
    name: str
    uri: str
    scryfall_uri: str
    search_uri: str
    released_at: datetime.date | None = None
    set_type: str
    card_count: int
    printed_size: int | None = None
    digital: bool = False
    nonfoil_only: bool = False
    foil_only: bool = False
    icon_svg_uri: str | None = None
    parent_set_code: str | None = None
    block_code: str | None = None
    block: str | None = None


class CardSetList(ScryfallList[CardSet]):
    """All sets, newest first."""
