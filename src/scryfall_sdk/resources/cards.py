"""Endpoints under ``/cards``.

See https://scryfall.com/docs/api/cards.
"""

from __future__ import annotations

from typing import ClassVar, Literal

from .._request import RequestBuilder
from ..models.cards import Card, CardCollection, CardList
from ..models.catalog import Catalog
from ..models.submodels import CardIdentifier
from .base import HttpResource

UniqueMode = Literal["cards", "art", "prints"]
SortOrder = Literal[
    "name",
    "set",
    "released",
    "rarity",
    "color",
    "usd",
    "tix",
    "eur",
    "cmc",
    "power",
    "toughness",
    "edhrec",
    "penny",
    "artist",
    "review",
]
SortDirection = Literal["auto", "asc", "desc"]


class CardById(HttpResource[Card]):
    """``GET /cards/:id``: a card by its Scryfall id."""

    response_model = Card

    id: str

    def apply(self, builder: RequestBuilder) -> None:
        builder.path("cards").segment(self.id)


class CardByCode(HttpResource[Card]):
    """``GET /cards/:code/:number(/:lang)``: a card by set code and collector number."""

    response_model = Card

    code: str
    number: str
    lang: str | None = None

    def apply(self, builder: RequestBuilder) -> None:
        builder.path("cards").segment(self.code).segment(self.number)
        if self.lang is not None:
            builder.segment(self.lang)


class _CardByExternalId(HttpResource[Card]):
    response_model = Card
    prefix: ClassVar[str]

    id: str | int

    def apply(self, builder: RequestBuilder) -> None:
        builder.path("cards", self.prefix).segment(self.id)


class CardByArenaId(_CardByExternalId):
    """``GET /cards/arena/:id``"""

    prefix = "arena"


class CardByMtgoId(_CardByExternalId):
    """``GET /cards/mtgo/:id``"""

    prefix = "mtgo"


class CardByMultiverseId(_CardByExternalId):
    """``GET /cards/multiverse/:id``"""

    prefix = "multiverse"


class CardByTcgplayerId(_CardByExternalId):
    """``GET /cards/tcgplayer/:id``"""

    prefix = "tcgplayer"


class CardByCardmarketId(_CardByExternalId):
    """``GET /cards/cardmarket/:id``"""

    prefix = "cardmarket"


class CardNamed(HttpResource[Card]):
    """``GET /cards/named``: a card by exact or fuzzy name.

    Set either ``exact`` or ``fuzzy``. ``set`` restricts the lookup to
    one set code.
    """

    response_model = Card

    exact: str | None = None
    fuzzy: str | None = None
    set: str | None = None

    def apply(self, builder: RequestBuilder) -> None:
        builder.path("cards", "named")
        builder.param("exact", self.exact).param("fuzzy", self.fuzzy)
        builder.param("set", self.set)


class CardRandom(HttpResource[Card]):
    """``GET /cards/random``, optionally limited by a search query."""

    response_model = Card

    q: str | None = None

    def apply(self, builder: RequestBuilder) -> None:
        builder.path("cards", "random").param("q", self.q)


class CardSearch(HttpResource[CardList]):
    """``GET /cards/search``: one page of full-text search results.

    ``q`` is passed through untouched; Scryfall's query syntax is not
    parsed here. Pages are not followed automatically: check ``has_more``
    on the returned :class:`~scryfall_sdk.models.CardList` and request
    :meth:`next` yourself.
    """

    response_model = CardList

    q: str
    unique: UniqueMode | None = None
    order: SortOrder | None = None
    direction: SortDirection | None = None
    include_extras: bool | None = None
    include_multilingual: bool | None = None
    include_variations: bool | None = None
    page: int | None = None

    def apply(self, builder: RequestBuilder) -> None:
        builder.path("cards", "search").param("q", self.q)
        builder.param("unique", self.unique)
        builder.param("order", self.order)
        builder.param("dir", self.direction)
        builder.param("include_extras", self.include_extras)
        builder.param("include_multilingual", self.include_multilingual)
        builder.param("include_variations", self.include_variations)
        builder.param("page", self.page)

    def next(self) -> CardSearch:
        """The same search, one page further on."""
        return self.model_copy(update={"page": (self.page or 1) + 1})


class CardAutocomplete(HttpResource[Catalog]):
    """``GET /cards/autocomplete``: up to 20 card names starting with ``q``."""

    response_model = Catalog

    q: str
    include_extras: bool | None = None

    def apply(self, builder: RequestBuilder) -> None:
        builder.path("cards", "autocomplete").param("q", self.q)
        builder.param("include_extras", self.include_extras)


class CardCollectionLookup(HttpResource[CardCollection]):
    """``POST /cards/collection``: up to 75 cards by mixed identifiers.

    Example::

        CardCollectionLookup(identifiers=[
            {"id": "683a5707-cddb-494d-9b41-51b4584ded69"},
            {"name": "Ancient Tomb"},
            {"set": "mrd", "collector_number": "150"},
        ])
    """

    method = "POST"
    response_model = CardCollection

    identifiers: list[CardIdentifier]

    def apply(self, builder: RequestBuilder) -> None:
        builder.path("cards", "collection")
        builder.json({"identifiers": [dict(i) for i in self.identifiers]})
