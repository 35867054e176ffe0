"""Endpoints under ``/cards/**/rulings``.

See https://scryfall.com/docs/api/rulings.
"""

from __future__ import annotations

from typing import ClassVar

from .._request import RequestBuilder
from ..models.rulings import RulingList
from .base import HttpResource


class RulingsByCardId(HttpResource[RulingList]):
    """``GET /cards/:id/rulings``"""

    response_model = RulingList

    id: str

    def apply(self, builder: RequestBuilder) -> None:
        builder.path("cards").segment(self.id).path("rulings")


class RulingsByCode(HttpResource[RulingList]):
    """``GET /cards/:code/:number/rulings``"""

    response_model = RulingList

    code: str
    number: str | int

    def apply(self, builder: RequestBuilder) -> None:
        builder.path("cards").segment(self.code).segment(self.number)
        builder.path("rulings")


class _RulingsByExternalId(HttpResource[RulingList]):
    response_model = RulingList
    prefix: ClassVar[str]

    id: str | int

    def apply(self, builder: RequestBuilder) -> None:
        builder.path("cards", self.prefix).segment(self.id).path("rulings")


class RulingsByArenaId(_RulingsByExternalId):
    """``GET /cards/arena/:id/rulings``"""

    prefix = "arena"


class RulingsByMtgoId(_RulingsByExternalId):
    """``GET /cards/mtgo/:id/rulings``"""

    prefix = "mtgo"


class RulingsByMultiverseId(_RulingsByExternalId):
    """``GET /cards/multiverse/:id/rulings``"""

    prefix = "multiverse"
