"""Endpoints under ``/catalog``.

See https://scryfall.com/docs/api/catalogs.
"""

from __future__ import annotations

from .._request import RequestBuilder
from ..models.catalog import Catalog
from .base import HttpResource

#: Catalog names documented by Scryfall. Not enforced; new catalogs work as-is.
CATALOG_NAMES: tuple[str, ...] = (
    "card-names",
    "artist-names",
    "word-bank",
    "supertypes",
    "card-types",
    "artifact-types",
    "battle-types",
    "creature-types",
    "enchantment-types",
    "land-types",
    "planeswalker-types",
    "spell-types",
    "powers",
    "toughnesses",
    "loyalties",
    "watermarks",
    "keyword-abilities",
    "keyword-actions",
    "ability-words",
    "flavor-words",
)


class CatalogByName(HttpResource[Catalog]):
    """``GET /catalog/:name`` (e.g. ``"creature-types"``)."""

    response_model = Catalog

    name: str

    def apply(self, builder: RequestBuilder) -> None:
        builder.path("catalog").segment(self.name)
