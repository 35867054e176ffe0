"""Scryfall TypedDict sub-models for nested card attributes."""

from __future__ import annotations

from typing import Literal

from typing_extensions import TypedDict

Legality = Literal["legal", "not_legal", "restricted", "banned"]

# === Card Sub-Models ===


class ImageUris(TypedDict, total=False):
    small: str
    normal: str
    large: str
    png: str
    art_crop: str
    border_crop: str


class Legalities(TypedDict, total=False):
    standard: Legality
    future: Legality
    historic: Legality
    timeless: Legality
    gladiator: Legality
    pioneer: Legality
    explorer: Legality
    modern: Legality
    legacy: Legality
    pauper: Legality
    vintage: Legality
    penny: Legality
    commander: Legality
    oathbreaker: Legality
    standardbrawl: Legality
    brawl: Legality
    historicbrawl: Legality
    alchemy: Legality
    paupercommander: Legality
    duel: Legality
    oldschool: Legality
    premodern: Legality
    predh: Legality


class Prices(TypedDict, total=False):
    usd: str | None
    usd_foil: str | None
    usd_etched: str | None
    eur: str | None
    eur_foil: str | None
    tix: str | None


class PurchaseUris(TypedDict, total=False):
    tcgplayer: str
    cardmarket: str
    cardhoarder: str


class RelatedUris(TypedDict, total=False):
    gatherer: str
    tcgplayer_infinite_articles: str
    tcgplayer_infinite_decks: str
    edhrec: str


# === Collection Lookup ===


class CardIdentifier(TypedDict, total=False):
    """One entry of a ``/cards/collection`` request.

    Scryfall accepts ``id``, ``mtgo_id``, ``multiverse_id``, ``oracle_id``,
    ``illustration_id``, ``name``, ``name`` + ``set``, or ``set`` +
    ``collector_number``.
    """

    id: str
    mtgo_id: int
    multiverse_id: int
    oracle_id: str
    illustration_id: str
    name: str
    set: str
    collector_number: str
