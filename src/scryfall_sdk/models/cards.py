"""Scryfall card models."""

from __future__ import annotations

import datetime
from typing import Any, Literal

from pydantic import Field

from .common import Color, ScryfallList, ScryfallObject
from .submodels import ImageUris, Legalities, Prices, PurchaseUris, RelatedUris


class CardFace(ScryfallObject):
    """One face of a multi-faced card (split, transform, MDFC, ...)."""

    kind: Literal["card_face"] = Field(default="card_face", alias="object")
    name: str
    mana_cost: str = ""
    type_line: str | None = None
    oracle_text: str | None = None
    colors: list[Color] | None = None
    power: str | None = None
    toughness: str | None = None
    loyalty: str | None = None
    flavor_text: str | None = None
    flavor_name: str | None = None
    artist: str | None = None
    artist_id: str | None = None
    illustration_id: str | None = None
    image_uris: ImageUris | None = None


class Card(ScryfallObject):
    """A single card printing.

    Core identity and print fields are required; everything Scryfall omits
    for some layouts (``mana_cost`` on double-faced cards, ``tcgplayer_id``
    on digital-only cards, ...) defaults to None.
    """

    kind: Literal["card"] = Field(alias="object")

    # Core fields
    id: str
    oracle_id: str | None = None
    multiverse_ids: list[int] = Field(default_factory=list)
    mtgo_id: int | None = None
    arena_id: int | None = None
    tcgplayer_id: int | None = None
    cardmarket_id: int | None = None
    name: str
    lang: str
    released_at: datetime.date
    uri: str
    scryfall_uri: str
    layout: str
    highres_image: bool = False
    image_status: str | None = None
    image_uris: ImageUris | None = None

    # Gameplay fields
    mana_cost: str | None = None
    cmc: float = 0.0
    type_line: str | None = None
    oracle_text: str | None = None
    power: str | None = None
    toughness: str | None = None
    loyalty: str | None = None
    colors: list[Color] | None = None
    color_identity: list[Color] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    card_faces: list[CardFace] | None = None
    all_parts: list[dict[str, Any]] | None = None
    legalities: Legalities
    reserved: bool = False
    edhrec_rank: int | None = None
    penny_rank: int | None = None

    # Print fields
    games: list[str] = Field(default_factory=list)
    foil: bool = False
    nonfoil: bool = False
    finishes: list[str] = Field(default_factory=list)
    oversized: bool = False
    promo: bool = False
    reprint: bool = False
    variation: bool = False
    set_id: str | None = None
    set: str
    set_name: str
    set_type: str | None = None
    set_uri: str | None = None
    set_search_uri: str | None = None
    scryfall_set_uri: str | None = None
    rulings_uri: str | None = None
    prints_search_uri: str | None = None
    collector_number: str
    digital: bool = False
    rarity: str
    flavor_text: str | None = None
    card_back_id: str | None = None
    artist: str | None = None
    artist_ids: list[str] = Field(default_factory=list)
    illustration_id: str | None = None
    border_color: str | None = None
    frame: str | None = None
    security_stamp: str | None = None
    full_art: bool = False
    textless: bool = False
    booster: bool = False
    story_spotlight: bool = False
    prices: Prices = Field(default_factory=dict)  # type: ignore[assignment]
    related_uris: RelatedUris = Field(default_factory=dict)  # type: ignore[assignment]
    purchase_uris: PurchaseUris | None = None


class CardList(ScryfallList[Card]):
    """A page of card search results."""


class CardCollection(ScryfallList[Card]):
    """Result of a ``/cards/collection`` lookup.

    ``not_found`` echoes back the identifiers that matched no card.
    """

    not_found: list[dict[str, Any]] = Field(default_factory=list)
