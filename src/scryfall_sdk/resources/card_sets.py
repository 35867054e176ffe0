"""Endpoints under ``/sets``.

See https://scryfall.com/docs/api/sets.
"""

from __future__ import annotations

from .._request import RequestBuilder
from ..models.card_sets import CardSet, CardSetList
from .base import HttpResource


class AllSets(HttpResource[CardSetList]):
    """``GET /sets``"""

    response_model = CardSetList

    def apply(self, builder: RequestBuilder) -> None:
        builder.path("sets")


class SetByCode(HttpResource[CardSet]):
    """``GET /sets/:code`` or ``GET /sets/:id``.

    Both lookups share a path, so ``code`` may hold either a set code
    (``"mh3"``) or a Scryfall set id.
    """

    response_model = CardSet

    code: str

    def apply(self, builder: RequestBuilder) -> None:
        builder.path("sets").segment(self.code)


class SetByTcgplayerId(HttpResource[CardSet]):
    """``GET /sets/tcgplayer/:id``"""

    response_model = CardSet

    id: str | int

    def apply(self, builder: RequestBuilder) -> None:
        builder.path("sets", "tcgplayer").segment(self.id)
