"""Endpoints under ``/symbology``.

See https://scryfall.com/docs/api/card-symbols.
"""

from __future__ import annotations

from .._request import RequestBuilder
from ..models.card_symbols import CardSymbolList, ManaCost
from .base import HttpResource


class AllCardSymbols(HttpResource[CardSymbolList]):
    """``GET /symbology``"""

    response_model = CardSymbolList

    def apply(self, builder: RequestBuilder) -> None:
        builder.path("symbology")


class ParseManaCost(HttpResource[ManaCost]):
    """``GET /symbology/parse-mana?cost=``: normalise a mana cost string.

    ``cost`` is sent as-is, e.g. ``"RUx"`` or ``"{2}{W}{W}"``.
    """

    response_model = ManaCost

    cost: str

    def apply(self, builder: RequestBuilder) -> None:
        builder.path("symbology", "parse-mana").param("cost", self.cost)
